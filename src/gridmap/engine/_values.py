"""Value helpers for the binder.

Bit-string decoding of quality and time-quality flags, identifier
generation and timestamp construction.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from gridmap.schema.commonmodule import DetailQual, Quality, TimeQuality, Timestamp
from gridmap.schema.enums import SourceKind, ValidityKind

logger = logging.getLogger(__name__)

UTC_TIME_FORMAT = "%m/%d/%Y_%H:%M:%S.%f"


def parse_bit_string(text: str) -> int | None:
    """Integer value of a binary string such as ``"[0101]"``."""
    digits = text.replace("[", "").replace("]", "")
    if not digits or set(digits) - {"0", "1"}:
        return None
    return int(digits, 2)


# ---------------------------------------------------------------------------
# BitString
# ---------------------------------------------------------------------------

# Quality detail flags by bit position
_DETAIL_BITS = (
    (9, "inaccurate"),
    (8, "inconsistent"),
    (7, "old_data"),
    (6, "failure"),
    (5, "oscillatory"),
    (4, "bad_reference"),
    (3, "out_of_range"),
    (2, "overflow"),
)


class BitString:
    """Positional flags read from a string of ``0``/``1`` characters.

    Bit 0 is the first character.  Brackets are ignored, and bits past
    the end of the string read as off.
    """

    __slots__ = ("bits",)

    def __init__(self, bits: str) -> None:
        self.bits = bits

    @classmethod
    def from_str(cls, text: str) -> BitString:
        return cls(text.replace("[", "").replace("]", ""))

    def is_bit_on(self, n: int) -> bool:
        if n >= len(self.bits):
            return False
        return self.bits[n] == "1"

    def quality(self) -> Quality:
        qual = Quality()
        first, second = self.is_bit_on(0), self.is_bit_on(1)
        if not first and second:
            qual.validity = ValidityKind.ValidityKind_invalid
        elif first and second:
            qual.validity = ValidityKind.ValidityKind_questionable
        elif first and not second:
            qual.validity = ValidityKind.ValidityKind_reserved

        if self.is_bit_on(12):
            qual.operator_blocked = True
        if self.is_bit_on(11):
            qual.test = True
        if self.is_bit_on(10):
            qual.source = SourceKind.SourceKind_substituted

        flags = {name: True for bit, name in _DETAIL_BITS if self.is_bit_on(bit)}
        if flags:
            qual.detail_qual = DetailQual(**flags)
        return qual

    def time_quality(self) -> TimeQuality:
        tq = TimeQuality(
            leap_seconds_known=self.is_bit_on(0),
            clock_failure=self.is_bit_on(1),
            clock_not_synchronized=self.is_bit_on(2),
        )
        if len(self.bits) == 8:
            accuracy = parse_bit_string(self.bits[3:])
            if accuracy is None:
                logger.error("Invalid time accuracy bit-string: %s", self.bits[3:])
            else:
                tq.time_accuracy = accuracy
        return tq

    @classmethod
    def to_quality(cls, text: str) -> Quality:
        return cls.from_str(text).quality()

    @classmethod
    def to_time_quality(cls, text: str) -> TimeQuality:
        return cls.from_str(text).time_quality()

    def __repr__(self) -> str:
        return f"BitString({self.bits!r})"


# ---------------------------------------------------------------------------
# Identifiers and timestamps
# ---------------------------------------------------------------------------

def new_uuid() -> str:
    """Random version-4 UUID in hyphenated form."""
    return str(uuid.uuid4())


def timestamp_from_datetime(dt: datetime) -> Timestamp:
    """Schema timestamp for *dt*; naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    seconds = int(dt.timestamp())
    return Timestamp(seconds=seconds, nanoseconds=dt.microsecond * 1000)


def timestamp_from_float(seconds: float) -> Timestamp:
    whole = int(seconds)
    return Timestamp(
        seconds=whole,
        nanoseconds=int(round((seconds - whole) * 1_000_000_000)),
    )


def get_current_timestamp() -> Timestamp:
    return timestamp_from_datetime(datetime.now(timezone.utc))


def parse_utc_time(text: str) -> Timestamp | None:
    """Parse ``"MM/DD/YYYY_HH:MM:SS.fff, <time quality bits>"``.

    Returns ``None`` (with an error logged for a bad date) when the text
    does not have exactly those two comma-separated parts.
    """
    parts = text.split(",")
    if len(parts) != 2:
        return None
    stamp, bits = parts[0].strip(), parts[1].strip()
    try:
        dt = datetime.strptime(stamp, UTC_TIME_FORMAT)
    except ValueError:
        logger.error("Error parsing time: %s", stamp)
        return None
    timestamp = timestamp_from_datetime(dt)
    timestamp.tq = BitString.to_time_quality(bits)
    return timestamp
