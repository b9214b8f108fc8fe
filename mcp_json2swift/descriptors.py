"""Type, field and record descriptors produced by schema inference.

All descriptors are frozen pydantic models, so they compare by value and can
be used as dictionary keys.
"""

from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

PrimitiveKind = Literal["Int", "Float", "Bool", "String", "Any"]


class PrimitiveType(BaseModel):
    """A scalar type, or ``Any`` when nothing better is known.

    :ivar kind: The primitive kind.
    :type kind: PrimitiveKind
    """

    model_config = ConfigDict(frozen=True)

    tag: Literal["primitive"] = "primitive"
    kind: PrimitiveKind = Field(description="The primitive kind.")


class ListType(BaseModel):
    """A homogeneous list.

    :ivar element: The type of the list elements.
    :type element: TypeDescriptor
    """

    model_config = ConfigDict(frozen=True)

    tag: Literal["list"] = "list"
    element: "TypeDescriptor" = Field(description="The type of the list elements.")


class OptionalType(BaseModel):
    """A value that may be null.

    :ivar inner: The type of the value when present.
    :type inner: TypeDescriptor
    """

    model_config = ConfigDict(frozen=True)

    tag: Literal["optional"] = "optional"
    inner: "TypeDescriptor" = Field(description="The type of the value when present.")


class NamedRecordType(BaseModel):
    """A reference to a record registered under ``name``.

    :ivar name: The final (registered) record name.
    :type name: str
    """

    model_config = ConfigDict(frozen=True)

    tag: Literal["record"] = "record"
    name: str = Field(description="The final (registered) record name.")


TypeDescriptor = Annotated[
    Union[PrimitiveType, ListType, OptionalType, NamedRecordType],
    Field(discriminator="tag"),
]

ListType.model_rebuild()
OptionalType.model_rebuild()

ANY = PrimitiveType(kind="Any")


def optional_of(inner: TypeDescriptor) -> OptionalType:
    """Wrap ``inner`` as optional, without nesting optionals."""
    if isinstance(inner, OptionalType):
        return inner
    return OptionalType(inner=inner)


class FieldDescriptor(BaseModel):
    """A single record field.

    :ivar original_key: The key as it appears in the JSON document.
    :type original_key: str
    :ivar identifier_name: The Swift property name derived from the key.
    :type identifier_name: str
    :ivar type: The inferred type of the field.
    :type type: TypeDescriptor
    """

    model_config = ConfigDict(frozen=True)

    original_key: str = Field(description="The key as it appears in the JSON document.")
    identifier_name: str = Field(
        description="The Swift property name derived from the key."
    )
    type: TypeDescriptor = Field(description="The inferred type of the field.")

    @property
    def needs_mapping(self) -> bool:
        return self.identifier_name != self.original_key


class RecordDefinition(BaseModel):
    """A named record synthesized from one object shape.

    :ivar name: The unique record name.
    :type name: str
    :ivar fields: The fields in first-seen key order.
    :type fields: Tuple[FieldDescriptor, ...]
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="The unique record name.")
    fields: Tuple[FieldDescriptor, ...] = Field(
        description="The fields in first-seen key order."
    )

    def shape(self) -> frozenset:
        """Return the structural signature: each key with its inferred type."""
        return frozenset((f.original_key, f.type) for f in self.fields)

    def renamed_fields(self) -> Tuple[FieldDescriptor, ...]:
        return tuple(f for f in self.fields if f.needs_mapping)
