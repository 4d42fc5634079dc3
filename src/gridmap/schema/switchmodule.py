"""Switch module profiles of the grid schema."""

from __future__ import annotations

from .commonmodule import (
    CheckConditions,
    ConductingEquipment,
    ConductingEquipmentTerminalReading,
    ControlMessageInfo,
    ControlSPC,
    ControlValue,
    ENS_DynamicTestKind,
    LogicalNodeForControl,
    LogicalNodeForEventAndStatus,
    Message,
    PhaseDPC,
    PhaseDPS,
    PhaseMMTN,
    PhaseSPS,
    ReadingMessageInfo,
    ReadingMMTR,
    ReadingMMXU,
    StatusMessageInfo,
    StatusValue,
)


class ProtectedSwitch(Message):
    conducting_equipment: ConductingEquipment | None = None


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------

class SwitchStatusXSWI(Message):
    logical_node_for_event_and_status: LogicalNodeForEventAndStatus | None = None
    dynamic_test: ENS_DynamicTestKind | None = None
    pos: PhaseDPS | None = None
    protection_pickup: PhaseSPS | None = None


class SwitchStatus(Message):
    status_value: StatusValue | None = None
    switch_status_xswi: SwitchStatusXSWI | None = None


class SwitchStatusProfile(Message):
    status_message_info: StatusMessageInfo | None = None
    protected_switch: ProtectedSwitch | None = None
    switch_status: SwitchStatus | None = None


# ---------------------------------------------------------------------------
# Discrete control
# ---------------------------------------------------------------------------

class SwitchDiscreteControlXSWI(Message):
    logical_node_for_control: LogicalNodeForControl | None = None
    pos: PhaseDPC | None = None
    reset_protection_pickup: ControlSPC | None = None


class SwitchDiscreteControl(Message):
    control_value: ControlValue | None = None
    check: CheckConditions | None = None
    switch_discrete_control_xswi: SwitchDiscreteControlXSWI | None = None


class SwitchDiscreteControlProfile(Message):
    control_message_info: ControlMessageInfo | None = None
    protected_switch: ProtectedSwitch | None = None
    switch_discrete_control: SwitchDiscreteControl | None = None


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

class SwitchReading(Message):
    conducting_equipment_terminal_reading: ConductingEquipmentTerminalReading | None = None
    diff_reading_mmxu: ReadingMMXU | None = None
    phase_mmtn: PhaseMMTN | None = None
    reading_mmtr: ReadingMMTR | None = None
    reading_mmxu: ReadingMMXU | None = None


class SwitchReadingProfile(Message):
    reading_message_info: ReadingMessageInfo | None = None
    protected_switch: ProtectedSwitch | None = None
    switch_reading: list[SwitchReading] = []
