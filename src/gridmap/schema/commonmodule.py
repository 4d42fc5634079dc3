"""Common module message types of the grid schema.

Plain pydantic mirrors of the schema's nested structures.  Optional
substructures and wrapped scalars default to ``None``; primitive leaves
carry the schema defaults (``False``, ``0``, ``0.0``, first enum member).
Assignments are validated so that setters cannot store a mistyped value.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .enums import (
    BehaviourModeKind,
    CalcMethodKind,
    DbPosKind,
    DynamicTestKind,
    HealthKind,
    PFSignKind,
    PhaseCodeKind,
    SourceKind,
    UnitMultiplierKind,
    UnitSymbolKind,
    ValidityKind,
)


class Message(BaseModel):
    """Base of every schema message type."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


# ---------------------------------------------------------------------------
# Time and quality
# ---------------------------------------------------------------------------

class TimeQuality(Message):
    clock_failure: bool = False
    clock_not_synchronized: bool = False
    leap_seconds_known: bool = False
    time_accuracy: int = 0


class Timestamp(Message):
    seconds: int = 0
    nanoseconds: int = 0
    tq: TimeQuality | None = None


class DetailQual(Message):
    bad_reference: bool = False
    failure: bool = False
    inaccurate: bool = False
    inconsistent: bool = False
    old_data: bool = False
    oscillatory: bool = False
    out_of_range: bool = False
    overflow: bool = False


class Quality(Message):
    detail_qual: DetailQual | None = None
    operator_blocked: bool = False
    source: SourceKind = SourceKind.SourceKind_process
    test: bool = False
    validity: ValidityKind = ValidityKind.ValidityKind_UNDEFINED


# ---------------------------------------------------------------------------
# Identity and message info
# ---------------------------------------------------------------------------

class IdentifiedObject(Message):
    description: str | None = None
    m_rid: str | None = None
    name: str | None = None


class NamedObject(Message):
    description: str | None = None
    name: str | None = None


class MessageInfo(Message):
    identified_object: IdentifiedObject | None = None
    message_time_stamp: Timestamp | None = None


class StatusMessageInfo(Message):
    message_info: MessageInfo | None = None


class ControlMessageInfo(Message):
    message_info: MessageInfo | None = None


class ReadingMessageInfo(Message):
    message_info: MessageInfo | None = None


class ConductingEquipment(Message):
    named_object: NamedObject | None = None
    m_rid: str = ""


# ---------------------------------------------------------------------------
# Logical nodes
# ---------------------------------------------------------------------------

class LogicalNode(Message):
    identified_object: IdentifiedObject | None = None


class ENS_BehaviourModeKind(Message):
    q: Quality | None = None
    st_val: BehaviourModeKind = BehaviourModeKind.BehaviourModeKind_UNDEFINED
    t: Timestamp | None = None


class ENS_HealthKind(Message):
    d: str | None = None
    st_val: HealthKind = HealthKind.HealthKind_UNDEFINED


class ENS_DynamicTestKind(Message):
    q: Quality | None = None
    st_val: DynamicTestKind = DynamicTestKind.DynamicTestKind_UNDEFINED
    t: Timestamp | None = None


class StatusSPS(Message):
    q: Quality | None = None
    st_val: bool = False
    t: Timestamp | None = None


class StatusDPS(Message):
    q: Quality | None = None
    st_val: DbPosKind = DbPosKind.DbPosKind_UNDEFINED
    t: Timestamp | None = None


class PhaseSPS(Message):
    phs3: StatusSPS | None = None
    phs_a: StatusSPS | None = None
    phs_b: StatusSPS | None = None
    phs_c: StatusSPS | None = None


class PhaseDPS(Message):
    phs3: StatusDPS | None = None
    phs_a: StatusDPS | None = None
    phs_b: StatusDPS | None = None
    phs_c: StatusDPS | None = None


class LogicalNodeForEventAndStatus(Message):
    logical_node: LogicalNode | None = None
    beh: ENS_BehaviourModeKind | None = None
    ee_health: ENS_HealthKind | None = None
    hot_line_tag: StatusSPS | None = None
    remote_blk: StatusSPS | None = None


class LogicalNodeForControl(Message):
    logical_node: LogicalNode | None = None


# ---------------------------------------------------------------------------
# Status / control values
# ---------------------------------------------------------------------------

class StatusValue(Message):
    identified_object: IdentifiedObject | None = None
    mod_blk: bool | None = None


class ControlValue(Message):
    identified_object: IdentifiedObject | None = None
    mod_blk: bool | None = None
    reset: bool | None = None


class CheckConditions(Message):
    interlock_check: bool | None = None
    synchro_check: bool | None = None


class ControlDPC(Message):
    ctl_val: bool = False


class PhaseDPC(Message):
    phs3: ControlDPC | None = None
    phs_a: ControlDPC | None = None
    phs_b: ControlDPC | None = None
    phs_c: ControlDPC | None = None


class ControlSPC(Message):
    ctl_val: bool = False


# ---------------------------------------------------------------------------
# Measurements
# ---------------------------------------------------------------------------

class Vector(Message):
    ang: float | None = None
    mag: float = 0.0


class CMV(Message):
    c_val: Vector | None = None
    q: Quality | None = None
    t: Timestamp | None = None


class WYE(Message):
    net: CMV | None = None
    neut: CMV | None = None
    phs_a: CMV | None = None
    phs_b: CMV | None = None
    phs_c: CMV | None = None


class DEL(Message):
    phs_ab: CMV | None = None
    phs_bc: CMV | None = None
    phs_ca: CMV | None = None


class Unit(Message):
    multiplier: UnitMultiplierKind | None = None
    si_unit: UnitSymbolKind = UnitSymbolKind.UnitSymbolKind_none


class MV(Message):
    mag: float = 0.0
    q: Quality | None = None
    t: Timestamp | None = None
    units: Unit | None = None


class BCR(Message):
    act_val: int = 0
    q: Quality | None = None
    t: Timestamp | None = None


class ENG_CalcMethodKind(Message):
    set_val: CalcMethodKind = CalcMethodKind.CalcMethodKind_UNDEFINED


class ENG_PFSignKind(Message):
    set_val: PFSignKind = PFSignKind.PFSignKind_UNDEFINED


class ReadingMMXU(Message):
    logical_node: LogicalNode | None = None
    a: WYE | None = None
    clc_mth: ENG_CalcMethodKind | None = None
    hz: MV | None = None
    pf: WYE | None = None
    pf_sign: ENG_PFSignKind | None = None
    ph_v: WYE | None = None
    ppv: DEL | None = None
    va: WYE | None = None
    v_ar: WYE | None = None
    w: WYE | None = None


class ReadingMMTR(Message):
    logical_node: LogicalNode | None = None
    dmd_v_ah: BCR | None = None
    dmd_v_arh: BCR | None = None
    dmd_wh: BCR | None = None
    sup_v_ah: BCR | None = None
    sup_v_arh: BCR | None = None
    sup_wh: BCR | None = None
    tot_v_ah: BCR | None = None
    tot_v_arh: BCR | None = None
    tot_wh: BCR | None = None


class ReadingMMTN(ReadingMMTR):
    pass


class PhaseMMTN(Message):
    phs_a: ReadingMMTN | None = None
    phs_ab: ReadingMMTN | None = None
    phs_b: ReadingMMTN | None = None
    phs_bc: ReadingMMTN | None = None
    phs_c: ReadingMMTN | None = None
    phs_ca: ReadingMMTN | None = None


# ---------------------------------------------------------------------------
# Terminals
# ---------------------------------------------------------------------------

class ACDCTerminal(Message):
    identified_object: IdentifiedObject | None = None
    connected: bool | None = None
    sequence_number: int | None = None


class Terminal(Message):
    a_cdc_terminal: ACDCTerminal | None = None
    phases: PhaseCodeKind | None = None


class ConductingEquipmentTerminalReading(Message):
    terminal: Terminal | None = None
