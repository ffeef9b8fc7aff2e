"""
Pytest configuration for the docgraph test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Fixtures for building declaration graphs by hand
- Paths to the JSON project descriptions under test_files/
"""

import os
from pathlib import Path
from typing import List, Optional

import pytest

from docgraph.logging_config import setup_logging
from docgraph.models import Declaration, Project, ReferenceType, ReflectionKind


TEST_FILES_DIR = Path(__file__).parent / "test_files"


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Run the CLI and the logger in machine mode."""
    os.environ.setdefault("DOCGRAPH_MACHINE_MODE", "1")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


# ============================================================================
# PROJECT FIXTURES
# ============================================================================

@pytest.fixture
def project():
    """An empty project."""
    return Project("test")


@pytest.fixture
def declare(project):
    """
    Factory for registering declarations in the ``project`` fixture.

    Usage:
        def test_something(declare):
            base = declare("Base", ReflectionKind.CLASS)
            child = declare("Child", ReflectionKind.CLASS, extends=["Base"])

    ``extends`` / ``implements`` entries are names (resolved by name) or
    declarations (wrapped in an already-resolved reference).
    """

    def _reference(target):
        if isinstance(target, Declaration):
            return ReferenceType.resolved(target)
        return ReferenceType(target)

    def _declare(
        name: str,
        kind: ReflectionKind = ReflectionKind.CLASS,
        parent: Optional[Declaration] = None,
        symbol_id: Optional[int] = None,
        extends: Optional[List] = None,
        implements: Optional[List] = None,
    ) -> Declaration:
        reflection = project.create_declaration(name, kind, parent=parent, symbol_id=symbol_id)
        if extends:
            reflection.extended_types = [_reference(t) for t in extends]
        if implements:
            reflection.implemented_types = [_reference(t) for t in implements]
        return reflection

    return _declare


@pytest.fixture
def inheritance_file():
    """Path to the I / A implements I / B extends A project description."""
    return TEST_FILES_DIR / "inheritance.json"


def level_names(reflection: Declaration):
    """Flatten a hierarchy chain into ``[([names], is_target), ...]``."""
    if reflection.type_hierarchy is None:
        return None
    return [
        ([t.name for t in level.types], level.is_target)
        for level in reflection.type_hierarchy.levels()
    ]


def targets(types):
    """Declarations the resolved references in ``types`` point at."""
    return [t.reflection for t in types or []]
