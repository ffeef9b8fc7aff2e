"""
Unit tests for reference resolution.

Tests name and symbol-id lookups, recursion into composite types and the
handling of references that cannot be resolved.
"""

import pytest

from docgraph.converter import Context, Converter
from docgraph.models import (
    Decorator,
    IntrinsicType,
    ReferenceType,
    ReflectionKind,
    StringLiteralType,
    TupleType,
    UnionType,
)
from docgraph.resolution import ReferenceResolver


@pytest.fixture
def context(project):
    return Context(Converter(disabled_plugins=["type"]), project)


@pytest.fixture
def resolver(context):
    return ReferenceResolver(context)


class TestReferenceResolution:
    """Resolving a single ReferenceType."""

    def test_resolve_by_name(self, declare, resolver):
        """Test by-name lookup links the reference."""
        target = declare("Target")
        subject = declare("Subject")
        reference = ReferenceType("Target")

        resolver.resolve_type(subject, reference)

        assert reference.reflection is target

    def test_resolve_by_symbol_id(self, declare, resolver):
        """Test symbol-id lookup links the reference."""
        target = declare("Target", symbol_id=4711)
        subject = declare("Subject")
        reference = ReferenceType("Whatever", 4711)

        resolver.resolve_type(subject, reference)

        assert reference.reflection is target

    def test_dangling_name_stays_unlinked(self, declare, resolver, context):
        """Test an unknown name leaves the reference unlinked."""
        subject = declare("Subject")
        reference = ReferenceType("DoesNotExist")

        resolver.resolve_type(subject, reference)

        assert reference.reflection is None
        assert reference.symbol_id == ReferenceType.SYMBOL_ID_RESOLVE_BY_NAME
        assert context.stats.references_dangling == 1

    def test_dangling_symbol_id_stays_unlinked(self, declare, resolver):
        """Test an unknown symbol id leaves the reference unlinked."""
        subject = declare("Subject")
        reference = ReferenceType("Missing", 999)

        resolver.resolve_type(subject, reference)

        assert reference.reflection is None

    def test_resolution_is_idempotent(self, declare, resolver, context):
        """Test resolving twice links once."""
        target = declare("Target")
        subject = declare("Subject")
        reference = ReferenceType("Target")

        resolver.resolve_type(subject, reference)
        resolver.resolve_type(subject, reference)

        assert reference.reflection is target
        assert context.stats.references_linked == 1

    def test_resolved_reference_is_never_relinked(self, project, declare, resolver):
        """Test an already linked reference is left untouched."""
        first = declare("Target")
        other = project.create_declaration("Target", ReflectionKind.CLASS, parent=declare("Scope"))
        reference = ReferenceType.resolved(first)

        resolver.resolve_type(other, reference)

        assert reference.reflection is first

    def test_type_arguments_are_resolved(self, declare, resolver):
        """Test type arguments are resolved independently of their owner."""
        item = declare("Item")
        subject = declare("Subject")
        reference = ReferenceType("Array", type_arguments=[ReferenceType("Item")])

        resolver.resolve_type(subject, reference)

        assert reference.reflection is None
        assert reference.type_arguments[0].reflection is item

    def test_symbol_lookup_returning_foreign_object_is_dangling(
        self, project, declare, resolver, context, monkeypatch
    ):
        """Test a symbol-id hit that is not a Declaration counts as dangling."""
        target = declare("Target")
        subject = declare("Subject")
        monkeypatch.setattr(project, "get_reflection_by_symbol", lambda symbol_id: object())
        foreign = ReferenceType("Foreign", 99)
        sibling = ReferenceType("Target")

        resolver.resolve_types(subject, [foreign, sibling])

        assert foreign.reflection is None
        assert sibling.reflection is target
        assert context.stats.references_dangling == 1
        assert context.stats.references_linked == 1

    def test_name_lookup_returning_foreign_object_is_dangling(self, declare, resolver, context, monkeypatch):
        """Test a by-name hit that is not a Declaration is left unlinked."""
        subject = declare("Subject")
        monkeypatch.setattr(subject, "find_reflection_by_name", lambda names: "Target")
        reference = ReferenceType("Target")

        resolver.resolve_type(subject, reference)

        assert reference.reflection is None
        assert context.stats.references_dangling == 1


class TestScopedLookup:
    """Name lookups walk outward from the declaration's own scope."""

    def test_inner_scope_wins(self, declare, resolver):
        """Test the innermost matching declaration is preferred."""
        declare("Options")
        outer = declare("Outer")
        inner_options = declare("Options", parent=outer)
        method = declare("run", ReflectionKind.METHOD, parent=outer)
        reference = ReferenceType("Options")

        resolver.resolve_type(method, reference)

        assert reference.reflection is inner_options

    def test_walks_out_to_project(self, declare, resolver):
        """Test lookup walks out to project scope."""
        top = declare("Top")
        outer = declare("Outer", ReflectionKind.MODULE)
        nested = declare("Nested", parent=outer)
        reference = ReferenceType("Top")

        resolver.resolve_type(nested, reference)

        assert reference.reflection is top

    def test_dotted_name(self, declare, resolver):
        """Test dotted names resolve through children."""
        module = declare("shapes", ReflectionKind.MODULE)
        circle = declare("Circle", parent=module)
        subject = declare("Subject")
        reference = ReferenceType("shapes.Circle")

        resolver.resolve_type(subject, reference)

        assert reference.reflection is circle

    def test_sibling_scope_is_not_visible(self, declare, resolver):
        """Test members of sibling scopes are not visible."""
        left = declare("left", ReflectionKind.MODULE)
        right = declare("right", ReflectionKind.MODULE)
        declare("Hidden", parent=left)
        subject = declare("Subject", parent=right)
        reference = ReferenceType("Hidden")

        resolver.resolve_type(subject, reference)

        assert reference.reflection is None


class TestCompositeTypes:
    """Recursion into tuples and unions."""

    def test_tuple_resolves_every_element(self, declare, resolver):
        """Test every tuple element is resolved."""
        a, b, c = declare("A"), declare("B"), declare("C")
        subject = declare("Subject")
        tuple_type = TupleType([ReferenceType("A"), ReferenceType("B"), ReferenceType("C")])

        resolver.resolve_type(subject, tuple_type)

        assert [e.reflection for e in tuple_type.elements] == [a, b, c]

    def test_union_resolves_every_member(self, declare, resolver):
        """Test every union member is resolved."""
        a = declare("A")
        subject = declare("Subject")
        union = UnionType([ReferenceType("A"), IntrinsicType("string"), ReferenceType("Gone")])

        resolver.resolve_type(subject, union)

        assert union.types[0].reflection is a
        assert union.types[2].reflection is None

    def test_nested_composites(self, declare, resolver):
        """Test nested tuples and unions are resolved."""
        a = declare("A")
        subject = declare("Subject")
        inner = ReferenceType("A")
        node = UnionType([TupleType([StringLiteralType("x"), inner])])

        resolver.resolve_type(subject, node)

        assert inner.reflection is a

    @pytest.mark.parametrize("node", [TupleType([]), UnionType([]), IntrinsicType("number"), None])
    def test_empty_and_opaque_types_are_noops(self, declare, resolver, context, node):
        """Test None and opaque types are ignored."""
        subject = declare("Subject")

        resolver.resolve_type(subject, node)

        assert context.stats.references_seen == 0


class TestResolveReflection:
    """Every link field of a declaration is visited."""

    def test_all_fields_are_resolved(self, declare, resolver):
        """Test resolve_reflection covers every type-bearing field."""
        target = declare("Target")
        subject = declare("Subject")
        subject.type = ReferenceType("Target")
        subject.inherited_from = ReferenceType("Target")
        subject.overwrites = ReferenceType("Target")
        subject.extended_types = [ReferenceType("Target")]
        subject.implemented_types = [ReferenceType("Target")]
        subject.decorators = [Decorator("sealed"), Decorator("tagged", ReferenceType("Target"))]

        resolver.resolve_reflection(subject)

        assert subject.type.reflection is target
        assert subject.inherited_from.reflection is target
        assert subject.overwrites.reflection is target
        assert subject.extended_types[0].reflection is target
        assert subject.implemented_types[0].reflection is target
        assert subject.decorators[1].type.reflection is target

    def test_declaration_without_types(self, declare, resolver, context):
        """Test a declaration with no types resolves nothing."""
        subject = declare("Bare", ReflectionKind.VARIABLE)

        resolver.resolve_reflection(subject)

        assert context.stats.references_seen == 0
