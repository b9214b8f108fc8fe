import logging
from decimal import Decimal
from typing import Any, List, Set

from mcp_json2swift.descriptors import (
    ANY,
    FieldDescriptor,
    ListType,
    NamedRecordType,
    PrimitiveType,
    RecordDefinition,
    TypeDescriptor,
    optional_of,
)
from mcp_json2swift.naming import camel_case, capitalize_first_letter, unique_name
from mcp_json2swift.registry import ModelRegistry

logger = logging.getLogger(__name__)

# Values nested deeper than this are typed Any.
MAX_DEPTH = 100


class SchemaInferenceAnalyzer:
    """A class for inferring record types from a single JSON document.

    Nested objects are registered into the analyzer's registry as they are
    found, named after the field that holds them. Arrays are typed by their
    first element only.

    :ivar registry: The registry receiving nested record definitions
    :type registry: ModelRegistry
    """

    def __init__(
        self,
        registry: ModelRegistry,
    ):
        """Initialize the SchemaInferenceAnalyzer.

        :param registry: The registry that owns every nested record definition
            for this generation run
        :type registry: ModelRegistry
        """
        self.registry = registry

    def infer(
        self,
        value: Any,
        context_name: str,
        optional: bool = False,
        depth: int = 0,
    ) -> TypeDescriptor:
        """Infer the type of a JSON value.

        :param value: A JSON value as produced by ``json.loads``
        :type value: Any
        :param context_name: Identifier of the field holding the value, used
            to name nested records
        :type context_name: str
        :param optional: Wrap the inferred type as optional
        :type optional: bool
        :param depth: Nesting level of the value below the root object
        :type depth: int
        :return: The inferred type
        :rtype: TypeDescriptor
        """
        inferred = self._infer_value(value, context_name, depth)
        if optional:
            return optional_of(inferred)
        return inferred

    def _infer_value(
        self, value: Any, context_name: str, depth: int
    ) -> TypeDescriptor:
        if value is None:
            return optional_of(ANY)
        # bool is a subclass of int, so it must be checked first
        if isinstance(value, bool):
            return PrimitiveType(kind="Bool")
        if isinstance(value, int):
            return PrimitiveType(kind="Int")
        if isinstance(value, float):
            return PrimitiveType(kind="Float")
        if isinstance(value, Decimal):
            return _decimal_type(value)
        if isinstance(value, str):
            return PrimitiveType(kind="String")
        if isinstance(value, (dict, list)) and depth >= MAX_DEPTH:
            logger.warning(
                "Value for %r is nested deeper than %d levels, using Any",
                context_name,
                MAX_DEPTH,
            )
            return ANY
        if isinstance(value, dict):
            record_name = capitalize_first_letter(context_name)
            definition = self.build_record(value, record_name, depth + 1)
            final_name = self.registry.register(record_name, definition.fields)
            return NamedRecordType(name=final_name)
        if isinstance(value, list):
            if not value:
                return ListType(element=ANY)
            return ListType(
                element=self.infer(value[0], context_name, depth=depth + 1)
            )

        logger.warning(
            "Cannot classify value of type %s for %r, using Any",
            type(value).__name__,
            context_name,
        )
        return ANY

    def build_record(
        self, obj: dict, name: str, depth: int = 0
    ) -> RecordDefinition:
        """Infer the fields of an object without registering it.

        Nested objects found in the fields are registered.

        :param obj: The JSON object
        :type obj: dict
        :param name: The requested record name
        :type name: str
        :param depth: Nesting level of the fields below the root object
        :type depth: int
        :return: The record definition, fields in key order
        :rtype: RecordDefinition
        """
        fields: List[FieldDescriptor] = []
        identifiers: Set[str] = set()

        for key, value in obj.items():
            identifier = unique_name(camel_case(key), identifiers)
            identifiers.add(identifier)

            fields.append(
                FieldDescriptor(
                    original_key=key,
                    identifier_name=identifier,
                    type=self.infer(
                        value, identifier, optional=value is None, depth=depth
                    ),
                )
            )

        return RecordDefinition(name=name, fields=tuple(fields))


def _decimal_type(value: Decimal) -> PrimitiveType:
    """Classify a Decimal by its lexical form.

    ``Decimal("5.0")`` and ``Decimal("1E+2")`` carry an exponent and are
    Float; ``Decimal("5")`` is Int.
    """
    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent == 0:
        return PrimitiveType(kind="Int")
    return PrimitiveType(kind="Float")
