"""Rendering of inferred records as Swift struct declarations."""

import logging
from typing import Any, List, Sequence

from mcp_json2swift.context import DEFAULT_MODEL_NAME, ModelType
from mcp_json2swift.descriptors import (
    ListType,
    NamedRecordType,
    OptionalType,
    PrimitiveType,
    RecordDefinition,
    TypeDescriptor,
)
from mcp_json2swift.errors import InputNotObjectError
from mcp_json2swift.naming import escape_identifier, swift_string_literal
from mcp_json2swift.registry import ModelRegistry
from mcp_json2swift.schema import SchemaInferenceAnalyzer

logger = logging.getLogger(__name__)

INDENT = " " * 4

_PRIMITIVE_NAMES = {
    "Int": "Int",
    "Float": "Double",
    "Bool": "Bool",
    "String": "String",
    "Any": "Any",
}

SUPPORTED_MODEL_TYPES = ("Decodable", "Codable")


def render_type(type_: TypeDescriptor) -> str:
    if isinstance(type_, PrimitiveType):
        return _PRIMITIVE_NAMES[type_.kind]
    if isinstance(type_, ListType):
        return f"[{render_type(type_.element)}]"
    if isinstance(type_, OptionalType):
        return f"{render_type(type_.inner)}?"
    if isinstance(type_, NamedRecordType):
        return type_.name
    raise TypeError(f"Unknown type descriptor: {type_!r}")


def render_record(definition: RecordDefinition, model_type: ModelType) -> str:
    """Render one record as a Swift struct.

    A ``CodingKeys`` enum is added when at least one field was renamed; it
    lists the renamed fields only.

    :param definition: The record to render
    :type definition: RecordDefinition
    :param model_type: The protocol the struct conforms to
    :type model_type: ModelType
    :return: The struct declaration, without a trailing newline
    :rtype: str
    :raises ValueError: If an unsupported model type is provided
    """
    if model_type not in SUPPORTED_MODEL_TYPES:
        raise ValueError(f"Unsupported model type: {model_type}")

    lines = [f"struct {definition.name}: {model_type} {{"]
    for field in definition.fields:
        lines.append(
            f"{INDENT}let {escape_identifier(field.identifier_name)}: "
            f"{render_type(field.type)}"
        )

    renamed = definition.renamed_fields()
    if renamed:
        lines.append("")
        lines.append(f"{INDENT}enum CodingKeys: String, CodingKey {{")
        for field in renamed:
            lines.append(
                f"{INDENT * 2}case {escape_identifier(field.identifier_name)} = "
                f"{swift_string_literal(field.original_key)}"
            )
        lines.append(f"{INDENT}}}")

    lines.append("}")
    return "\n".join(lines)


def render(
    root: RecordDefinition,
    registry: ModelRegistry,
    model_type: ModelType = "Decodable",
) -> List[str]:
    """Render the root record followed by every registered record.

    :param root: The root record, which is not stored in the registry
    :type root: RecordDefinition
    :param registry: The registry holding nested records
    :type registry: ModelRegistry
    :param model_type: The protocol every struct conforms to
    :type model_type: ModelType
    :return: One declaration per record, root first, then in registration order
    :rtype: List[str]
    """
    return [render_record(root, model_type)] + [
        render_record(definition, model_type)
        for definition in registry.definitions()
    ]


def join_declarations(blocks: Sequence[str]) -> str:
    return "\n\n".join(blocks) + "\n"


def generate_swift_models(
    document: Any,
    model_name: str = DEFAULT_MODEL_NAME,
    model_type: ModelType = "Decodable",
    disambiguate: bool = True,
) -> List[str]:
    """Generate Swift struct declarations for a parsed JSON document.

    :param document: The parsed JSON document; must be an object
    :type document: Any
    :param model_name: The name of the root struct
    :type model_name: str
    :param model_type: The protocol every struct conforms to
    :type model_type: ModelType
    :param disambiguate: Rename differing shapes that share a name instead of
        failing
    :type disambiguate: bool
    :return: The declarations, root first
    :rtype: List[str]
    :raises InputNotObjectError: If the document is not a JSON object
    :raises NameCollisionError: If two shapes collide and ``disambiguate``
        is false
    :raises ValueError: If an unsupported model type is provided
    """
    if not isinstance(document, dict):
        raise InputNotObjectError(type(document).__name__)
    if model_type not in SUPPORTED_MODEL_TYPES:
        raise ValueError(f"Unsupported model type: {model_type}")

    registry = ModelRegistry(disambiguate=disambiguate)
    registry.reserve(model_name)

    analyzer = SchemaInferenceAnalyzer(registry=registry)
    root = analyzer.build_record(document, model_name)

    logger.debug(
        "Inferred %s with %d nested records", model_name, len(registry)
    )
    return render(root, registry, model_type)


def generate_swift_code(
    document: Any,
    model_name: str = DEFAULT_MODEL_NAME,
    model_type: ModelType = "Decodable",
    disambiguate: bool = True,
) -> str:
    """Generate Swift source for a parsed JSON document.

    Same as :func:`generate_swift_models`, with the declarations joined by
    blank lines.
    """
    return join_declarations(
        generate_swift_models(
            document,
            model_name=model_name,
            model_type=model_type,
            disambiguate=disambiguate,
        )
    )
