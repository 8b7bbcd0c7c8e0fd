"""Core data models for Cabrillo contest logs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar


class Band(str, Enum):
    """Band designators accepted by CATEGORY-BAND."""

    ALL = "ALL"
    BAND_160M = "160M"
    BAND_80M = "80M"
    BAND_40M = "40M"
    BAND_20M = "20M"
    BAND_15M = "15M"
    BAND_10M = "10M"
    BAND_6M = "6M"
    BAND_4M = "4M"
    BAND_2M = "2M"
    BAND_222 = "222"
    BAND_432 = "432"
    BAND_902 = "902"
    BAND_1_2G = "1.2G"
    BAND_2_3G = "2.3G"
    BAND_3_4G = "3.4G"
    BAND_5_7G = "5.7G"
    BAND_10G = "10G"
    BAND_24G = "24G"
    BAND_47G = "47G"
    BAND_75G = "75G"
    BAND_123G = "123G"
    BAND_134G = "134G"
    BAND_241G = "241G"
    LIGHT = "LIGHT"
    VHF_3_BAND = "VHF-3-BAND"
    VHF_FM_ONLY = "VHF-FM-ONLY"


class Mode(str, Enum):
    """Operating mode; values are the canonical QSO-line tokens."""

    CW = "CW"
    PHONE = "PH"
    FM = "FM"
    RTTY = "RY"
    DIGITAL = "DG"
    MIXED = "MIXED"


class OperatorCategory(str, Enum):
    SINGLE_OP = "SINGLE-OP"
    MULTI_OP = "MULTI-OP"
    CHECKLOG = "CHECKLOG"


class PowerCategory(str, Enum):
    HIGH = "HIGH"
    LOW = "LOW"
    QRP = "QRP"


class StationCategory(str, Enum):
    FIXED = "FIXED"
    MOBILE = "MOBILE"
    PORTABLE = "PORTABLE"
    ROVER = "ROVER"
    ROVER_LIMITED = "ROVER-LIMITED"
    ROVER_UNLIMITED = "ROVER-UNLIMITED"
    EXPEDITION = "EXPEDITION"
    HQ = "HQ"
    SCHOOL = "SCHOOL"


class TimeCategory(str, Enum):
    HOURS_6 = "6-HOURS"
    HOURS_12 = "12-HOURS"
    HOURS_24 = "24-HOURS"


class TransmitterCategory(str, Enum):
    ONE = "ONE"
    TWO = "TWO"
    LIMITED = "LIMITED"
    UNLIMITED = "UNLIMITED"
    SWL = "SWL"


class OverlayCategory(str, Enum):
    CLASSIC = "CLASSIC"
    ROOKIE = "ROOKIE"
    TB_WIRES = "TB-WIRES"
    NOVICE_TECH = "NOVICE-TECH"
    OVER_50 = "OVER-50"


@dataclass(frozen=True, slots=True)
class Frequency:
    """A QSO frequency in kHz, or the LIGHT sentinel (``khz is None``)."""

    khz: int | None

    LIGHT: ClassVar[Frequency]

    @property
    def is_light(self) -> bool:
        return self.khz is None

    def as_mhz(self) -> float | None:
        """Frequency in MHz; None for light."""
        if self.khz is None:
            return None
        return self.khz / 1000.0

    def as_ghz(self) -> float | None:
        """Frequency in GHz; None for light."""
        if self.khz is None:
            return None
        return self.khz / 1_000_000.0

    def __str__(self) -> str:
        if self.khz is None:
            return "LIGHT"
        return f"{self.khz} KHz"


Frequency.LIGHT = Frequency(khz=None)


@dataclass(frozen=True, slots=True)
class SignalReport:
    """RST report; tone is 0 when only readability and strength were given."""

    readability: int
    strength: int
    tone: int = 0

    def __str__(self) -> str:
        if self.tone == 0:
            return f"{self.readability}{self.strength}"
        return f"{self.readability}{self.strength}{self.tone}"


@dataclass(frozen=True, slots=True)
class ContactRecord:
    """One logged QSO."""

    frequency: Frequency
    mode: Mode
    timestamp: datetime  # UTC, minute precision
    sent_call: str
    sent_exchange: str
    received_call: str
    received_exchange: str
    sent_report: SignalReport | None = None
    received_report: SignalReport | None = None
    # Reserved; no tag sets it yet.
    is_duplicate_transmitter: bool = False


@dataclass(frozen=True, slots=True)
class OffDutyPeriod:
    """An OFFTIME interval. The log does not say which operator was off."""

    begin: datetime
    end: datetime


@dataclass(slots=True)
class LogRecord:
    """Accumulator filled line by line by the tag handlers."""

    format_version: float = 3.0
    callsign: str | None = None
    contest: str | None = None
    category_assisted: bool | None = None
    category_band: Band | None = None
    category_mode: Mode | None = None
    category_operator: OperatorCategory | None = None
    category_power: PowerCategory | None = None
    category_station: StationCategory | None = None
    category_time: TimeCategory | None = None
    category_transmitter: TransmitterCategory | None = None
    category_overlay: OverlayCategory | None = None
    certificate: bool | None = None
    claimed_score: int | None = None
    club: str | None = None
    created_by: str | None = None
    email: str | None = None
    grid_locator: str | None = None
    location: str | None = None
    name: str | None = None
    address: str | None = None
    soapbox: str | None = None
    debug: bool = False
    operators: list[str] = field(default_factory=list)
    off_duty_periods: list[OffDutyPeriod] = field(default_factory=list)
    contacts: list[ContactRecord] = field(default_factory=list)
    ignored_contacts: list[ContactRecord] = field(default_factory=list)
    unknown_tags: dict[str, str] = field(default_factory=dict)

    def append_multiline(self, field_name: str, text: str) -> None:
        """Append ``text`` to a multi-line field, newline separated."""
        current = getattr(self, field_name)
        if current is None:
            setattr(self, field_name, text)
        else:
            setattr(self, field_name, f"{current}\n{text}")
