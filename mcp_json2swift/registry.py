import logging
from typing import Dict, Iterable, List, Optional, Set

from mcp_json2swift.descriptors import FieldDescriptor, RecordDefinition
from mcp_json2swift.errors import NameCollisionError
from mcp_json2swift.naming import unique_name

logger = logging.getLogger(__name__)

# Swift and Foundation type names a generated struct must not shadow.
SWIFT_RESERVED_TYPE_NAMES = frozenset(
    {
        "Any",
        "Array",
        "Bool",
        "Character",
        "Codable",
        "CodingKey",
        "CodingKeys",
        "Data",
        "Date",
        "Decimal",
        "Decodable",
        "Dictionary",
        "Double",
        "Encodable",
        "Error",
        "Float",
        "Int",
        "Optional",
        "Protocol",
        "Result",
        "Self",
        "Set",
        "String",
        "Type",
        "URL",
    }
)


class ModelRegistry:
    """Record definitions discovered during one generation run.

    Definitions are kept in registration order and are never replaced.
    A registration whose shape matches the definition already stored under
    the requested name reuses it; a differing shape is renamed with a counter
    suffix (``Meta``, ``Meta2``, ``Meta3``...).

    :ivar disambiguate: Rename conflicting shapes instead of raising
        :class:`NameCollisionError`.
    :type disambiguate: bool
    """

    def __init__(
        self,
        disambiguate: bool = True,
        reserved_names: Iterable[str] = SWIFT_RESERVED_TYPE_NAMES,
    ):
        self.disambiguate = disambiguate
        self._definitions: Dict[str, RecordDefinition] = {}
        self._reserved: Set[str] = set(reserved_names)

    def reserve(self, name: str) -> None:
        """Mark ``name`` as taken without defining a record for it.

        Used for the root record, which is rendered separately.
        """
        self._reserved.add(name)

    def register(self, name: str, fields: Iterable[FieldDescriptor]) -> str:
        """Register a record and return the name it was stored under.

        :param name: The requested record name
        :type name: str
        :param fields: The record fields in discovery order
        :type fields: Iterable[FieldDescriptor]
        :return: The final record name, which may differ from ``name``
        :rtype: str
        :raises NameCollisionError: If ``name`` holds a different shape and
            disambiguation is disabled
        """
        definition = RecordDefinition(name=name, fields=tuple(fields))
        shape = definition.shape()

        candidate = name
        taken: Set[str] = set()
        while True:
            existing = self._definitions.get(candidate)
            if existing is None and candidate not in self._reserved:
                break
            if existing is not None and existing.shape() == shape:
                logger.debug("Reusing record %s for identical shape", candidate)
                return candidate
            if not self.disambiguate:
                raise NameCollisionError(candidate)
            taken.add(candidate)
            candidate = unique_name(name, taken)

        if candidate != name:
            logger.debug("Record name %s is taken, using %s", name, candidate)
            definition = definition.model_copy(update={"name": candidate})

        self._definitions[candidate] = definition
        logger.debug(
            "Registered record %s with %d fields", candidate, len(definition.fields)
        )
        return candidate

    def get(self, name: str) -> Optional[RecordDefinition]:
        return self._definitions.get(name)

    def definitions(self) -> List[RecordDefinition]:
        return list(self._definitions.values())

    def __contains__(self, name: str) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
