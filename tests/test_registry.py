import pytest

from mcp_json2swift.descriptors import FieldDescriptor, PrimitiveType
from mcp_json2swift.errors import NameCollisionError
from mcp_json2swift.registry import ModelRegistry


def _field(key, kind, identifier=None):
    return FieldDescriptor(
        original_key=key,
        identifier_name=identifier or key,
        type=PrimitiveType(kind=kind),
    )


def test_register_new_name(registry):
    assert registry.register("Meta", [_field("id", "Int")]) == "Meta"
    assert "Meta" in registry
    assert registry.get("Meta").name == "Meta"
    assert len(registry) == 1


def test_register_identical_shape_is_deduplicated(registry):
    registry.register("Meta", [_field("id", "Int"), _field("ok", "Bool")])

    # Same keys and types in a different order are the same shape
    name = registry.register("Meta", [_field("ok", "Bool"), _field("id", "Int")])

    assert name == "Meta"
    assert len(registry) == 1
    assert [f.original_key for f in registry.get("Meta").fields] == ["id", "ok"]


def test_register_conflicting_shape_is_renamed(registry):
    """Test that a differing shape never overwrites the first registration."""
    registry.register("Meta", [_field("id", "Int")])

    assert registry.register("Meta", [_field("id", "String")]) == "Meta2"
    assert registry.register("Meta", [_field("id", "Bool")]) == "Meta3"
    assert registry.register("Meta", [_field("id", "String")]) == "Meta2"

    assert registry.get("Meta").fields[0].type == PrimitiveType(kind="Int")
    assert registry.get("Meta2").name == "Meta2"
    assert [d.name for d in registry.definitions()] == ["Meta", "Meta2", "Meta3"]


def test_register_keeps_registration_order(registry):
    registry.register("Zeta", [_field("a", "Int")])
    registry.register("Alpha", [_field("b", "Int")])

    assert [d.name for d in registry.definitions()] == ["Zeta", "Alpha"]


def test_reserved_name_is_never_used(registry):
    registry.reserve("Profile")

    assert registry.register("Profile", [_field("a", "Int")]) == "Profile2"
    assert "Profile" not in registry


def test_swift_type_names_are_reserved(registry):
    """A struct must not shadow a Swift standard type."""
    assert registry.register("String", [_field("a", "Int")]) == "String2"
    assert registry.register("Type", [_field("a", "Int")]) == "Type2"


def test_collision_without_disambiguation_raises():
    registry = ModelRegistry(disambiguate=False)
    registry.register("Meta", [_field("id", "Int")])

    # Identical shapes are still shared
    assert registry.register("Meta", [_field("id", "Int")]) == "Meta"

    with pytest.raises(NameCollisionError, match="'Meta'"):
        registry.register("Meta", [_field("id", "String")])
    assert len(registry) == 1


@pytest.mark.parametrize(
    "name", ["Data", "Date", "URL", "Decimal", "Error", "Result", "Set", "Character"]
)
def test_foundation_type_names_are_reserved(registry, name):
    assert registry.register(name, [_field("a", "Int")]) == f"{name}2"
