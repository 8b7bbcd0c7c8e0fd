"""Atomic value grammars shared by the tag handlers and the QSO grammar.

Every function here is pure: it takes the raw (already trimmed) value and
returns a typed value, or raises GrammarError.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from ..errors import GrammarError
from ..models import Frequency, Mode, OffDutyPeriod, SignalReport

DATETIME_FORMAT = "%Y-%m-%d %H%M"

_CALLSIGN_RE = re.compile(r"@?[A-Za-z0-9]{3,8}(?:/[A-Za-z0-9]{1,8})?")
_DATETIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{4}")
_OFFTIME_RE = re.compile(
    r"(?P<begin>[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{4}) (?P<end>[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{4})"
)
_FREQUENCY_RE = re.compile(r"[0-9]+")
_EMAIL_RE = re.compile(r"[A-Za-z0-9_.\-]+@[A-Za-z0-9_.\-]+\.[A-Za-z0-9]{2,5}")
_GRID_RE = re.compile(r"[A-Ra-r]{2}[0-9]{2}(?:[A-Xa-x]{2}(?:[0-9]{2})?)?")
_DIGITS = frozenset("0123456789")

_MODES: dict[str, Mode] = {
    "CW": Mode.CW,
    "FM": Mode.FM,
    "PH": Mode.PHONE,
    "SSB": Mode.PHONE,
    "RY": Mode.RTTY,
    "RTTY": Mode.RTTY,
    "DG": Mode.DIGITAL,
    "DIGI": Mode.DIGITAL,
    "MIXED": Mode.MIXED,
}


def parse_callsign(value: str) -> str:
    """Validate a callsign such as ``K3AH``, ``VK2ABCD/M`` or ``@W1AW``.

    A leading ``@`` marks the host station in OPERATORS lists.
    """
    if not _CALLSIGN_RE.fullmatch(value):
        raise GrammarError(f"Invalid value '{value}' (not a valid callsign)")
    return value


def parse_datetime(value: str) -> datetime:
    """Parse ``YYYY-MM-DD HHMM`` into a UTC datetime."""
    if not _DATETIME_RE.fullmatch(value):
        raise GrammarError(f"Invalid value '{value}' (invalid timestamp)")
    try:
        return datetime.strptime(value, DATETIME_FORMAT).replace(tzinfo=UTC)
    except ValueError as e:
        raise GrammarError(f"Invalid value '{value}' (invalid timestamp)") from e


def parse_offtime(value: str) -> OffDutyPeriod:
    """Parse two timestamps separated by a single space."""
    m = _OFFTIME_RE.fullmatch(value)
    if not m:
        raise GrammarError(f"Invalid value '{value}' (invalid timestamp format)")
    return OffDutyPeriod(
        begin=parse_datetime(m.group("begin")),
        end=parse_datetime(m.group("end")),
    )


def parse_frequency(value: str) -> Frequency:
    """Parse an unsigned integer frequency in kHz."""
    if not _FREQUENCY_RE.fullmatch(value):
        raise GrammarError(f"Invalid value '{value}' (invalid frequency)")
    return Frequency(khz=int(value))


def parse_mode(value: str) -> Mode:
    try:
        return _MODES[value]
    except KeyError as e:
        raise GrammarError(f"Invalid value '{value}'") from e


def parse_email(value: str) -> str:
    if not _EMAIL_RE.fullmatch(value):
        raise GrammarError(f"Invalid value '{value}' (not a valid email address)")
    return value


def parse_grid_locator(value: str) -> str:
    """Validate a 4, 6 or 8 character Maidenhead locator (case-insensitive)."""
    if not _GRID_RE.fullmatch(value):
        raise GrammarError(f"Invalid value '{value}' (not a valid grid locator)")
    return value


def parse_signal_report(value: str) -> SignalReport:
    """Parse an ``RS`` or ``RST`` report.

    Readability must be 1-5, strength 1-9 and tone 0-9.
    """
    if len(value) < 2 or len(value) > 3:
        raise GrammarError(
            f"Value has incorrect length ({len(value)} characters); must be 2 or 3."
        )
    if not set(value) <= _DIGITS:
        raise GrammarError(f"Invalid digit in value '{value}'")

    readability = int(value[0])
    strength = int(value[1])
    tone = int(value[2]) if len(value) == 3 else 0

    if not (1 <= readability <= 5 and 1 <= strength <= 9):
        raise GrammarError(f"Invalid digit in value '{value}'")
    return SignalReport(readability=readability, strength=strength, tone=tone)


def try_parse_signal_report(value: str) -> SignalReport | None:
    """Best-effort variant used inside QSO exchanges; None when not a report."""
    try:
        return parse_signal_report(value)
    except GrammarError:
        return None
