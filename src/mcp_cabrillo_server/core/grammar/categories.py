"""Exact-match token tables for the CATEGORY-* tags and yes/no style tags."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from ..errors import GrammarError
from ..models import (
    Band,
    OperatorCategory,
    OverlayCategory,
    PowerCategory,
    StationCategory,
    TimeCategory,
    TransmitterCategory,
)

E = TypeVar("E", bound=Enum)

_ASSISTED = {"ASSISTED": True, "NON-ASSISTED": False}
_YES_NO = {"YES": True, "NO": False}


def _parse_token(enum_cls: type[E], value: str) -> E:
    """Look up an enum member by its exact token value."""
    try:
        return enum_cls(value)
    except ValueError as e:
        raise GrammarError(f"Invalid value '{value}'") from e


def _parse_flag(table: dict[str, bool], value: str) -> bool:
    try:
        return table[value]
    except KeyError as e:
        raise GrammarError(f"Invalid value '{value}'") from e


def parse_band(value: str) -> Band:
    return _parse_token(Band, value)


def parse_operator_category(value: str) -> OperatorCategory:
    return _parse_token(OperatorCategory, value)


def parse_power_category(value: str) -> PowerCategory:
    return _parse_token(PowerCategory, value)


def parse_station_category(value: str) -> StationCategory:
    return _parse_token(StationCategory, value)


def parse_time_category(value: str) -> TimeCategory:
    return _parse_token(TimeCategory, value)


def parse_transmitter_category(value: str) -> TransmitterCategory:
    return _parse_token(TransmitterCategory, value)


def parse_overlay_category(value: str) -> OverlayCategory:
    return _parse_token(OverlayCategory, value)


def parse_assisted(value: str) -> bool:
    """ASSISTED -> True, NON-ASSISTED -> False."""
    return _parse_flag(_ASSISTED, value)


def parse_yes_no(value: str) -> bool:
    return _parse_flag(_YES_NO, value)
