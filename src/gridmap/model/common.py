"""Mapping nodes for the common module of the grid message schema.

Each node mirrors one schema substructure.  Attribute names match the
message model attribute names in ``gridmap.schema.commonmodule``; the
YAML keys are the schema's own names, carried as aliases.  A node field
that is ``None`` means "not configured" and is skipped entirely when the
tree is visited.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidatorFunctionWrapHandler,
    model_validator,
)

from .fields import (
    BoolFieldType,
    DoubleFieldType,
    EnumFieldType,
    FloatFieldType,
    Int32FieldType,
    Int64FieldType,
    QualityFieldType,
    StringFieldType,
    TimestampFieldType,
)


class MappingNode(BaseModel):
    """Structural node of a mapping tree.  Unknown keys are rejected.

    The order in which the document wrote the node's keys is kept, so
    the tree can be walked the way it reads.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    _key_order: tuple[str, ...] = PrivateAttr(default=())

    @model_validator(mode="wrap")
    @classmethod
    def _record_key_order(cls, data: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        node = handler(data)
        if isinstance(data, dict) and isinstance(node, MappingNode):
            node._key_order = tuple(data)
        return node

    def configured_fields(self) -> list[str]:
        """Field names in document order; fields set otherwise come last."""
        fields = type(self).model_fields
        by_key: dict[str, str] = {}
        for name, info in fields.items():
            by_key[name] = name
            if info.alias:
                by_key[info.alias] = name
        ordered: list[str] = []
        for key in self._key_order:
            name = by_key.get(key)
            if name is not None and name not in ordered:
                ordered.append(name)
        ordered.extend(name for name in fields if name not in ordered)
        return ordered


class WrapperMapping(MappingNode):
    """Node whose single ``value`` leaf binds to the wrapping field itself.

    Used for the schema's scalar wrappers (optional strings, booleans,
    numbers) and optional enums: the message holds a plain optional
    value where the mapping document has a ``value:`` level.
    """


# ---------------------------------------------------------------------------
# Wrappers
# ---------------------------------------------------------------------------

class StringValueMapping(WrapperMapping):
    value: StringFieldType


class BoolValueMapping(WrapperMapping):
    value: BoolFieldType


class Int32ValueMapping(WrapperMapping):
    value: Int32FieldType


class Int64ValueMapping(WrapperMapping):
    value: Int64FieldType


class FloatValueMapping(WrapperMapping):
    value: FloatFieldType


class DoubleValueMapping(WrapperMapping):
    value: DoubleFieldType


class OptionalEnumMapping(WrapperMapping):
    value: EnumFieldType


# ---------------------------------------------------------------------------
# Identity and message info
# ---------------------------------------------------------------------------

class IdentifiedObjectMapping(MappingNode):
    description: StringValueMapping | None = None
    m_rid: StringValueMapping | None = Field(None, alias="mRID")
    name: StringValueMapping | None = None


class NamedObjectMapping(MappingNode):
    description: StringValueMapping | None = None
    name: StringValueMapping | None = None


class MessageInfoMapping(MappingNode):
    identified_object: IdentifiedObjectMapping | None = Field(None, alias="identifiedObject")
    message_time_stamp: TimestampFieldType | None = Field(None, alias="messageTimeStamp")


class StatusMessageInfoMapping(MappingNode):
    message_info: MessageInfoMapping | None = Field(None, alias="messageInfo")


class ControlMessageInfoMapping(MappingNode):
    message_info: MessageInfoMapping | None = Field(None, alias="messageInfo")


class ReadingMessageInfoMapping(MappingNode):
    message_info: MessageInfoMapping | None = Field(None, alias="messageInfo")


class ConductingEquipmentMapping(MappingNode):
    named_object: NamedObjectMapping | None = Field(None, alias="namedObject")
    m_rid: StringFieldType = Field(alias="mRID")


# ---------------------------------------------------------------------------
# Logical nodes
# ---------------------------------------------------------------------------

class LogicalNodeMapping(MappingNode):
    identified_object: IdentifiedObjectMapping | None = Field(None, alias="identifiedObject")


class ENS_BehaviourModeKindMapping(MappingNode):
    q: QualityFieldType | None = None
    st_val: EnumFieldType = Field(alias="stVal")
    t: TimestampFieldType | None = None


class ENS_HealthKindMapping(MappingNode):
    d: StringValueMapping | None = None
    st_val: EnumFieldType = Field(alias="stVal")


class ENS_DynamicTestKindMapping(MappingNode):
    q: QualityFieldType | None = None
    st_val: EnumFieldType = Field(alias="stVal")
    t: TimestampFieldType | None = None


class StatusSPSMapping(MappingNode):
    q: QualityFieldType | None = None
    st_val: BoolFieldType = Field(alias="stVal")
    t: TimestampFieldType | None = None


class StatusDPSMapping(MappingNode):
    q: QualityFieldType | None = None
    st_val: EnumFieldType = Field(alias="stVal")
    t: TimestampFieldType | None = None


class PhaseSPSMapping(MappingNode):
    phs3: StatusSPSMapping | None = None
    phs_a: StatusSPSMapping | None = Field(None, alias="phsA")
    phs_b: StatusSPSMapping | None = Field(None, alias="phsB")
    phs_c: StatusSPSMapping | None = Field(None, alias="phsC")


class PhaseDPSMapping(MappingNode):
    phs3: StatusDPSMapping | None = None
    phs_a: StatusDPSMapping | None = Field(None, alias="phsA")
    phs_b: StatusDPSMapping | None = Field(None, alias="phsB")
    phs_c: StatusDPSMapping | None = Field(None, alias="phsC")


class LogicalNodeForEventAndStatusMapping(MappingNode):
    logical_node: LogicalNodeMapping | None = Field(None, alias="logicalNode")
    beh: ENS_BehaviourModeKindMapping | None = Field(None, alias="Beh")
    ee_health: ENS_HealthKindMapping | None = Field(None, alias="EEHealth")
    hot_line_tag: StatusSPSMapping | None = Field(None, alias="HotLineTag")
    remote_blk: StatusSPSMapping | None = Field(None, alias="RemoteBlk")


class LogicalNodeForControlMapping(MappingNode):
    logical_node: LogicalNodeMapping | None = Field(None, alias="logicalNode")


# ---------------------------------------------------------------------------
# Status / control values
# ---------------------------------------------------------------------------

class StatusValueMapping(MappingNode):
    identified_object: IdentifiedObjectMapping | None = Field(None, alias="identifiedObject")
    mod_blk: BoolValueMapping | None = Field(None, alias="modBlk")


class ControlValueMapping(MappingNode):
    identified_object: IdentifiedObjectMapping | None = Field(None, alias="identifiedObject")
    mod_blk: BoolValueMapping | None = Field(None, alias="modBlk")
    reset: BoolValueMapping | None = None


class CheckConditionsMapping(MappingNode):
    interlock_check: BoolValueMapping | None = Field(None, alias="interlockCheck")
    synchro_check: BoolValueMapping | None = Field(None, alias="synchroCheck")


class ControlDPCMapping(MappingNode):
    ctl_val: BoolFieldType = Field(alias="ctlVal")


class PhaseDPCMapping(MappingNode):
    phs3: ControlDPCMapping | None = None
    phs_a: ControlDPCMapping | None = Field(None, alias="phsA")
    phs_b: ControlDPCMapping | None = Field(None, alias="phsB")
    phs_c: ControlDPCMapping | None = Field(None, alias="phsC")


class ControlSPCMapping(MappingNode):
    ctl_val: BoolFieldType = Field(alias="ctlVal")


# ---------------------------------------------------------------------------
# Measurements
# ---------------------------------------------------------------------------

class VectorMapping(MappingNode):
    ang: DoubleValueMapping | None = None
    mag: DoubleFieldType


class CMVMapping(MappingNode):
    c_val: VectorMapping | None = Field(None, alias="cVal")
    q: QualityFieldType | None = None
    t: TimestampFieldType | None = None


class WYEMapping(MappingNode):
    net: CMVMapping | None = None
    neut: CMVMapping | None = None
    phs_a: CMVMapping | None = Field(None, alias="phsA")
    phs_b: CMVMapping | None = Field(None, alias="phsB")
    phs_c: CMVMapping | None = Field(None, alias="phsC")


class DELMapping(MappingNode):
    phs_ab: CMVMapping | None = Field(None, alias="phsAB")
    phs_bc: CMVMapping | None = Field(None, alias="phsBC")
    phs_ca: CMVMapping | None = Field(None, alias="phsCA")


class UnitMapping(MappingNode):
    multiplier: OptionalEnumMapping | None = None
    si_unit: EnumFieldType = Field(alias="SIUnit")


class MVMapping(MappingNode):
    mag: DoubleFieldType
    q: QualityFieldType | None = None
    t: TimestampFieldType | None = None
    units: UnitMapping | None = None


class BCRMapping(MappingNode):
    act_val: Int64FieldType = Field(alias="actVal")
    q: QualityFieldType | None = None
    t: TimestampFieldType | None = None


class ENG_CalcMethodKindMapping(MappingNode):
    set_val: EnumFieldType = Field(alias="setVal")


class ENG_PFSignKindMapping(MappingNode):
    set_val: EnumFieldType = Field(alias="setVal")


class ReadingMMXUMapping(MappingNode):
    logical_node: LogicalNodeMapping | None = Field(None, alias="logicalNode")
    a: WYEMapping | None = Field(None, alias="A")
    clc_mth: ENG_CalcMethodKindMapping | None = Field(None, alias="ClcMth")
    hz: MVMapping | None = Field(None, alias="Hz")
    pf: WYEMapping | None = Field(None, alias="PF")
    pf_sign: ENG_PFSignKindMapping | None = Field(None, alias="PFSign")
    ph_v: WYEMapping | None = Field(None, alias="PhV")
    ppv: DELMapping | None = Field(None, alias="PPV")
    va: WYEMapping | None = Field(None, alias="VA")
    v_ar: WYEMapping | None = Field(None, alias="VAr")
    w: WYEMapping | None = Field(None, alias="W")


class ReadingMMTRMapping(MappingNode):
    logical_node: LogicalNodeMapping | None = Field(None, alias="logicalNode")
    dmd_v_ah: BCRMapping | None = Field(None, alias="DmdVAh")
    dmd_v_arh: BCRMapping | None = Field(None, alias="DmdVArh")
    dmd_wh: BCRMapping | None = Field(None, alias="DmdWh")
    sup_v_ah: BCRMapping | None = Field(None, alias="SupVAh")
    sup_v_arh: BCRMapping | None = Field(None, alias="SupVArh")
    sup_wh: BCRMapping | None = Field(None, alias="SupWh")
    tot_v_ah: BCRMapping | None = Field(None, alias="TotVAh")
    tot_v_arh: BCRMapping | None = Field(None, alias="TotVArh")
    tot_wh: BCRMapping | None = Field(None, alias="TotWh")


class ReadingMMTNMapping(ReadingMMTRMapping):
    """Per-phase meter reading; same shape as ``ReadingMMTRMapping``."""


class PhaseMMTNMapping(MappingNode):
    phs_a: ReadingMMTNMapping | None = Field(None, alias="phsA")
    phs_ab: ReadingMMTNMapping | None = Field(None, alias="phsAB")
    phs_b: ReadingMMTNMapping | None = Field(None, alias="phsB")
    phs_bc: ReadingMMTNMapping | None = Field(None, alias="phsBC")
    phs_c: ReadingMMTNMapping | None = Field(None, alias="phsC")
    phs_ca: ReadingMMTNMapping | None = Field(None, alias="phsCA")


# ---------------------------------------------------------------------------
# Terminals
# ---------------------------------------------------------------------------

class ACDCTerminalMapping(MappingNode):
    identified_object: IdentifiedObjectMapping | None = Field(None, alias="identifiedObject")
    connected: BoolValueMapping | None = None
    sequence_number: Int32ValueMapping | None = Field(None, alias="sequenceNumber")


class TerminalMapping(MappingNode):
    a_cdc_terminal: ACDCTerminalMapping | None = Field(None, alias="aCDCTerminal")
    phases: OptionalEnumMapping | None = None


class ConductingEquipmentTerminalReadingMapping(MappingNode):
    terminal: TerminalMapping | None = None
