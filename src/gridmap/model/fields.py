"""Field-type descriptors for mapping documents.

A descriptor is the leaf of a mapping tree: it says how one schema field
gets its value. The YAML key that carries the discriminant names the
descriptor's kind::

    stVal:
      bool-field-type: mapped
      name: Plug.Relay

    mRID:
      string-field-type: constant
      value: 3ad4-...

The discriminant is kept as the raw string.  Values outside ``FieldKind``
are accepted and simply ignored when the tree is visited.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class FieldKind(str, Enum):
    """Recognized values of a descriptor's discriminant."""

    CONSTANT = "constant"
    CONSTANT_UUID = "constant_uuid"
    PRIMARY_UUID = "primary_uuid"
    GENERATED_UUID = "generated_uuid"
    MAPPED = "mapped"
    # Timestamp leaves only: stamp the current time while visiting
    MESSAGE = "message"


LITERAL_KINDS = frozenset({
    FieldKind.CONSTANT,
    FieldKind.CONSTANT_UUID,
    FieldKind.PRIMARY_UUID,
})


class ValueKind(str, Enum):
    """Primitive kind of the schema field a descriptor describes."""

    STRING = "string"
    BOOL = "bool"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    DOUBLE = "double"
    QUALITY = "quality"
    TIMESTAMP = "timestamp"
    ENUM = "enum"


INTEGER_KINDS = frozenset({ValueKind.INT32, ValueKind.INT64})
REAL_KINDS = frozenset({ValueKind.FLOAT, ValueKind.DOUBLE})
# Descriptors that carry a literal ``value``
SCALAR_KINDS = INTEGER_KINDS | REAL_KINDS | {ValueKind.STRING, ValueKind.BOOL}


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

class FieldType(BaseModel):
    """Common shape of every descriptor."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    value_kind: ClassVar[ValueKind]

    field_type: str
    name: str | None = None

    @property
    def kind(self) -> FieldKind | None:
        """The discriminant as a ``FieldKind``, or ``None`` if unrecognized."""
        try:
            return FieldKind(self.field_type)
        except ValueError:
            return None

    @property
    def literal(self) -> object:
        """Literal value for constant kinds (``None`` where unsupported)."""
        return getattr(self, "value", None)


class StringFieldType(FieldType):
    value_kind: ClassVar[ValueKind] = ValueKind.STRING

    field_type: str = Field(alias="string-field-type")
    value: str | None = None


class BoolFieldType(FieldType):
    value_kind: ClassVar[ValueKind] = ValueKind.BOOL

    field_type: str = Field(alias="bool-field-type")
    value: bool | None = None


class Int32FieldType(FieldType):
    value_kind: ClassVar[ValueKind] = ValueKind.INT32

    field_type: str = Field(alias="int32-field-type")
    value: int | None = None


class Int64FieldType(FieldType):
    value_kind: ClassVar[ValueKind] = ValueKind.INT64

    field_type: str = Field(alias="int64-field-type")
    value: int | None = None


class FloatFieldType(FieldType):
    value_kind: ClassVar[ValueKind] = ValueKind.FLOAT

    field_type: str = Field(alias="float-field-type")
    value: float | None = None


class DoubleFieldType(FieldType):
    value_kind: ClassVar[ValueKind] = ValueKind.DOUBLE

    field_type: str = Field(alias="double-field-type")
    value: float | None = None


class QualityFieldType(FieldType):
    """Quality leaf (``q``).  Only ``mapped`` has an effect."""

    value_kind: ClassVar[ValueKind] = ValueKind.QUALITY

    field_type: str = Field(alias="quality-field-type")


class TimestampFieldType(FieldType):
    """Timestamp leaf (``t``, ``messageTimeStamp``)."""

    value_kind: ClassVar[ValueKind] = ValueKind.TIMESTAMP

    field_type: str = Field(alias="timestamp-field-type")


class EnumMapping(BaseModel):
    """One row of an enum table: symbolic name and numeric code."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    value: float | None = None


class EnumFieldType(FieldType):
    """Enum leaf with a symbolic-name / numeric-code table.

    The table is kept in document order; lookups scan it front to back.
    """

    value_kind: ClassVar[ValueKind] = ValueKind.ENUM

    field_type: str = Field(alias="enum-field-type")
    mapping: list[EnumMapping] | None = None
