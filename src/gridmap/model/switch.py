"""Mapping documents for the switch module profiles.

Three profile roots are defined, one per message profile::

    SwitchStatusProfileMapping           -> SwitchStatusProfile
    SwitchDiscreteControlProfileMapping  -> SwitchDiscreteControlProfile
    SwitchReadingProfileMapping          -> SwitchReadingProfile

Only the discrete-control root accepts ``tolerance-ms`` and
``command-order``; the others reject them as unknown keys.
"""

from __future__ import annotations

from pydantic import Field

from .common import (
    CheckConditionsMapping,
    ConductingEquipmentMapping,
    ConductingEquipmentTerminalReadingMapping,
    ControlMessageInfoMapping,
    ControlSPCMapping,
    ControlValueMapping,
    ENS_DynamicTestKindMapping,
    LogicalNodeForControlMapping,
    LogicalNodeForEventAndStatusMapping,
    MappingNode,
    PhaseDPCMapping,
    PhaseDPSMapping,
    PhaseMMTNMapping,
    PhaseSPSMapping,
    ReadingMessageInfoMapping,
    ReadingMMTRMapping,
    ReadingMMXUMapping,
    StatusMessageInfoMapping,
    StatusValueMapping,
)


class ProtectedSwitchMapping(MappingNode):
    conducting_equipment: ConductingEquipmentMapping | None = Field(
        None, alias="conductingEquipment",
    )


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------

class SwitchStatusXSWIMapping(MappingNode):
    logical_node_for_event_and_status: LogicalNodeForEventAndStatusMapping | None = Field(
        None, alias="logicalNodeForEventAndStatus",
    )
    dynamic_test: ENS_DynamicTestKindMapping | None = Field(None, alias="DynamicTest")
    pos: PhaseDPSMapping | None = Field(None, alias="Pos")
    protection_pickup: PhaseSPSMapping | None = Field(None, alias="ProtectionPickup")


class SwitchStatusMapping(MappingNode):
    status_value: StatusValueMapping | None = Field(None, alias="statusValue")
    switch_status_xswi: SwitchStatusXSWIMapping | None = Field(None, alias="switchStatusXSWI")


class SwitchStatusProfileMappingRoot(MappingNode):
    status_message_info: StatusMessageInfoMapping | None = Field(None, alias="statusMessageInfo")
    protected_switch: ProtectedSwitchMapping | None = Field(None, alias="protectedSwitch")
    switch_status: SwitchStatusMapping | None = Field(None, alias="switchStatus")


# ---------------------------------------------------------------------------
# Discrete control
# ---------------------------------------------------------------------------

class SwitchDiscreteControlXSWIMapping(MappingNode):
    logical_node_for_control: LogicalNodeForControlMapping | None = Field(
        None, alias="logicalNodeForControl",
    )
    pos: PhaseDPCMapping | None = Field(None, alias="Pos")
    reset_protection_pickup: ControlSPCMapping | None = Field(
        None, alias="ResetProtectionPickup",
    )


class SwitchDiscreteControlMapping(MappingNode):
    control_value: ControlValueMapping | None = Field(None, alias="controlValue")
    check: CheckConditionsMapping | None = None
    switch_discrete_control_xswi: SwitchDiscreteControlXSWIMapping | None = Field(
        None, alias="switchDiscreteControlXSWI",
    )


class SwitchDiscreteControlProfileMappingRoot(MappingNode):
    control_message_info: ControlMessageInfoMapping | None = Field(None, alias="controlMessageInfo")
    protected_switch: ProtectedSwitchMapping | None = Field(None, alias="protectedSwitch")
    switch_discrete_control: SwitchDiscreteControlMapping | None = Field(
        None, alias="switchDiscreteControl",
    )


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

class SwitchReadingMapping(MappingNode):
    conducting_equipment_terminal_reading: ConductingEquipmentTerminalReadingMapping | None = Field(
        None, alias="conductingEquipmentTerminalReading",
    )
    diff_reading_mmxu: ReadingMMXUMapping | None = Field(None, alias="diffReadingMMXU")
    phase_mmtn: PhaseMMTNMapping | None = Field(None, alias="phaseMMTN")
    reading_mmtr: ReadingMMTRMapping | None = Field(None, alias="readingMMTR")
    reading_mmxu: ReadingMMXUMapping | None = Field(None, alias="readingMMXU")


class SwitchReadingProfileMappingRoot(MappingNode):
    reading_message_info: ReadingMessageInfoMapping | None = Field(None, alias="readingMessageInfo")
    protected_switch: ProtectedSwitchMapping | None = Field(None, alias="protectedSwitch")
    # Position i configures message reading i
    switch_reading: list[SwitchReadingMapping] | None = Field(None, alias="switchreading")


# ---------------------------------------------------------------------------
# Profile roots
# ---------------------------------------------------------------------------

class ProfileMapping(MappingNode):
    """Top level of a mapping document."""

    name: str
    cb_ref: str | None = Field(None, alias="control-block")
    mapping: MappingNode | None = None


class SwitchStatusProfileMapping(ProfileMapping):
    mapping: SwitchStatusProfileMappingRoot | None = None


class SwitchReadingProfileMapping(ProfileMapping):
    mapping: SwitchReadingProfileMappingRoot | None = None


class SwitchDiscreteControlProfileMapping(ProfileMapping):
    tolerance_ms: int | None = Field(None, alias="tolerance-ms", ge=0)
    command_order: list[str] | None = Field(None, alias="command-order")
    mapping: SwitchDiscreteControlProfileMappingRoot | None = None
