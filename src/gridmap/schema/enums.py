"""Enumerations of the grid message schema.

Member names are the schema's symbolic names (``DbPosKind_closed``);
values are the numeric codes carried on the wire.  ``EnumDescriptor``
is the single lookup table used to move between the two.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Generic, TypeVar


class BehaviourModeKind(IntEnum):
    BehaviourModeKind_UNDEFINED = 0
    BehaviourModeKind_on = 1
    BehaviourModeKind_blocked = 2
    BehaviourModeKind_test = 3
    BehaviourModeKind_test_blocked = 4
    BehaviourModeKind_off = 5


class HealthKind(IntEnum):
    HealthKind_UNDEFINED = 0
    HealthKind_none = 1
    HealthKind_OK = 2
    HealthKind_Warning = 3
    HealthKind_Alarm = 4


class DynamicTestKind(IntEnum):
    DynamicTestKind_UNDEFINED = 0
    DynamicTestKind_none = 1
    DynamicTestKind_testing = 2
    DynamicTestKind_operating = 3
    DynamicTestKind_failed = 4


class DbPosKind(IntEnum):
    DbPosKind_UNDEFINED = 0
    DbPosKind_transient = 1
    DbPosKind_closed = 2
    DbPosKind_open = 3
    DbPosKind_invalid = 4


class PhaseCodeKind(IntEnum):
    PhaseCodeKind_none = 0
    PhaseCodeKind_other = 1
    PhaseCodeKind_N = 16
    PhaseCodeKind_C = 32
    PhaseCodeKind_CN = 33
    PhaseCodeKind_AC = 40
    PhaseCodeKind_ACN = 41
    PhaseCodeKind_B = 64
    PhaseCodeKind_BN = 65
    PhaseCodeKind_BC = 66
    PhaseCodeKind_BCN = 97
    PhaseCodeKind_A = 128
    PhaseCodeKind_AN = 129
    PhaseCodeKind_AB = 132
    PhaseCodeKind_ABN = 193
    PhaseCodeKind_ABC = 224
    PhaseCodeKind_ABCN = 225
    PhaseCodeKind_s2 = 256
    PhaseCodeKind_s2N = 257
    PhaseCodeKind_s1 = 512
    PhaseCodeKind_s1N = 513
    PhaseCodeKind_s12 = 768
    PhaseCodeKind_s12N = 769


class CalcMethodKind(IntEnum):
    CalcMethodKind_UNDEFINED = 0
    CalcMethodKind_P_CLASS = 11
    CalcMethodKind_M_CLASS = 12
    CalcMethodKind_DIFF = 13


class PFSignKind(IntEnum):
    PFSignKind_UNDEFINED = 0
    PFSignKind_IEC = 1
    PFSignKind_EEI = 2


class UnitMultiplierKind(IntEnum):
    UnitMultiplierKind_UNDEFINED = 0
    UnitMultiplierKind_none = 1
    UnitMultiplierKind_other = 2
    UnitMultiplierKind_centi = 3
    UnitMultiplierKind_deci = 4
    UnitMultiplierKind_Giga = 5
    UnitMultiplierKind_kilo = 6
    UnitMultiplierKind_Mega = 7
    UnitMultiplierKind_micro = 8
    UnitMultiplierKind_milli = 9
    UnitMultiplierKind_nano = 10
    UnitMultiplierKind_pico = 11
    UnitMultiplierKind_Tera = 12


class UnitSymbolKind(IntEnum):
    UnitSymbolKind_none = 0
    UnitSymbolKind_meter = 2
    UnitSymbolKind_gram = 3
    UnitSymbolKind_Amp = 5
    UnitSymbolKind_deg = 9
    UnitSymbolKind_rad = 10
    UnitSymbolKind_degC = 23
    UnitSymbolKind_Farad = 25
    UnitSymbolKind_sec = 27
    UnitSymbolKind_Henry = 28
    UnitSymbolKind_V = 29
    UnitSymbolKind_ohm = 30
    UnitSymbolKind_Joule = 31
    UnitSymbolKind_Newton = 32
    UnitSymbolKind_Hz = 33
    UnitSymbolKind_W = 38
    UnitSymbolKind_Pa = 39
    UnitSymbolKind_m2 = 41
    UnitSymbolKind_Siemens = 53
    UnitSymbolKind_VA = 61
    UnitSymbolKind_VAr = 63
    UnitSymbolKind_wPerVA = 65
    UnitSymbolKind_VAh = 71
    UnitSymbolKind_Wh = 72
    UnitSymbolKind_VArh = 73
    UnitSymbolKind_hzPerS = 75
    UnitSymbolKind_wPerS = 81
    UnitSymbolKind_other = 100
    UnitSymbolKind_Ah = 106
    UnitSymbolKind_min = 159
    UnitSymbolKind_hour = 160
    UnitSymbolKind_m3 = 166
    UnitSymbolKind_wPerM2 = 179
    UnitSymbolKind_degF = 279
    UnitSymbolKind_mph = 500


class ValidityKind(IntEnum):
    ValidityKind_UNDEFINED = 0
    ValidityKind_good = 1
    ValidityKind_invalid = 2
    ValidityKind_reserved = 3
    ValidityKind_questionable = 4


class SourceKind(IntEnum):
    SourceKind_process = 0
    SourceKind_substituted = 1


# ---------------------------------------------------------------------------
# Descriptor
# ---------------------------------------------------------------------------

E = TypeVar("E", bound=IntEnum)

_DESCRIPTORS: dict[type[IntEnum], EnumDescriptor] = {}


class EnumDescriptor(Generic[E]):
    """Symbolic name / numeric code table for one schema enum.

    Obtain instances through ``EnumDescriptor.for_enum`` so each table is
    built once per enum class.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        prefix = f"{enum_cls.__name__}_"
        self._by_name: dict[str, E] = {}
        for member in enum_cls:
            self._by_name[member.name] = member
            if member.name.startswith(prefix):
                self._by_name.setdefault(member.name[len(prefix):], member)
        self._by_code: dict[int, E] = {int(m): m for m in enum_cls}

    @classmethod
    def for_enum(cls, enum_cls: type[E]) -> EnumDescriptor[E]:
        descriptor = _DESCRIPTORS.get(enum_cls)
        if descriptor is None:
            descriptor = cls(enum_cls)
            _DESCRIPTORS[enum_cls] = descriptor
        return descriptor

    def from_name(self, name: str) -> E | None:
        """Variant for a full (``DbPosKind_open``) or short (``open``) name."""
        return self._by_name.get(name)

    def from_code(self, code: int) -> E | None:
        """Variant for a numeric code, or ``None`` if the code is not defined."""
        return self._by_code.get(code)

    def is_valid(self, code: int) -> bool:
        return code in self._by_code

    def __repr__(self) -> str:
        return f"EnumDescriptor({self.enum_cls.__name__})"
