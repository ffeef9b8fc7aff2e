"""
CLI Command Modules

Each module contains a logical group of related commands.
"""

from docgraph.cli import resolve

__all__ = ['resolve']
