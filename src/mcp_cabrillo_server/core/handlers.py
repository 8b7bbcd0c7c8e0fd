"""Tag handlers and the tag dispatch table.

A handler consumes the trimmed value of one tag line and mutates the
LogRecord being built. It raises GrammarError when the value is rejected.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Protocol

from .errors import GrammarError
from .grammar import (
    default_qso_parser,
    parse_assisted,
    parse_band,
    parse_email,
    parse_grid_locator,
    parse_mode,
    parse_offtime,
    parse_operator_category,
    parse_overlay_category,
    parse_power_category,
    parse_station_category,
    parse_time_category,
    parse_transmitter_category,
    parse_yes_no,
)
from .models import LogRecord

_UNSIGNED_RE = re.compile(r"[0-9]+")
MAX_CLAIMED_SCORE = 2**32 - 1
_OPERATOR_SEP_RE = re.compile(r"[, ]")

_QSO_PARSER = default_qso_parser()


class TagHandler(Protocol):
    def __call__(self, value: str, record: LogRecord) -> None: ...


def _store(field_name: str, parse: Callable[[str], Any] | None = None) -> TagHandler:
    """Handler that stores the (optionally parsed) value into a scalar field."""

    def handler(value: str, record: LogRecord) -> None:
        setattr(record, field_name, parse(value) if parse is not None else value)

    return handler


def _append_line(field_name: str) -> TagHandler:
    def handler(value: str, record: LogRecord) -> None:
        record.append_multiline(field_name, value)

    return handler


def handle_start_of_log(value: str, record: LogRecord) -> None:
    try:
        record.format_version = float(value)
    except ValueError as e:
        raise GrammarError(f"Invalid value '{value}' (not a version number)") from e


def handle_end_of_log(value: str, record: LogRecord) -> None:
    pass


def handle_claimed_score(value: str, record: LogRecord) -> None:
    # An unreadable or out-of-range score leaves the field unset.
    score = int(value) if _UNSIGNED_RE.fullmatch(value) else None
    record.claimed_score = score if score is not None and score <= MAX_CLAIMED_SCORE else None


def handle_operators(value: str, record: LogRecord) -> None:
    """Append every comma- or space-separated callsign."""
    for call in _OPERATOR_SEP_RE.split(value):
        call = call.strip()
        if call:
            record.operators.append(call)


def handle_offtime(value: str, record: LogRecord) -> None:
    record.off_duty_periods.append(parse_offtime(value))


def handle_qso(value: str, record: LogRecord) -> None:
    record.contacts.append(_QSO_PARSER.parse(value))


def handle_ignored_qso(value: str, record: LogRecord) -> None:
    record.ignored_contacts.append(_QSO_PARSER.parse(value))


def handle_debug(value: str, record: LogRecord) -> None:
    record.debug = True


_address = _append_line("address")

DEFAULT_HANDLERS: Mapping[str, TagHandler] = MappingProxyType(
    {
        "START-OF-LOG": handle_start_of_log,
        "END-OF-LOG": handle_end_of_log,
        "CALLSIGN": _store("callsign"),
        "CONTEST": _store("contest"),
        "CATEGORY-ASSISTED": _store("category_assisted", parse_assisted),
        "CATEGORY-BAND": _store("category_band", parse_band),
        "CATEGORY-MODE": _store("category_mode", parse_mode),
        "CATEGORY-OPERATOR": _store("category_operator", parse_operator_category),
        "CATEGORY-POWER": _store("category_power", parse_power_category),
        "CATEGORY-STATION": _store("category_station", parse_station_category),
        "CATEGORY-TIME": _store("category_time", parse_time_category),
        "CATEGORY-TRANSMITTER": _store("category_transmitter", parse_transmitter_category),
        "CATEGORY-OVERLAY": _store("category_overlay", parse_overlay_category),
        "CERTIFICATE": _store("certificate", parse_yes_no),
        "CLAIMED-SCORE": handle_claimed_score,
        "CLUB": _store("club"),
        "CREATED-BY": _store("created_by"),
        "EMAIL": _store("email", parse_email),
        "GRID-LOCATOR": _store("grid_locator", parse_grid_locator),
        "LOCATION": _store("location"),
        "NAME": _store("name"),
        "ADDRESS": _address,
        "ADDRESS-CITY": _address,
        "ADDRESS-STATE-PROVINCE": _address,
        "ADDRESS-POSTALCODE": _address,
        "ADDRESS-COUNTRY": _address,
        "OPERATORS": handle_operators,
        "OFFTIME": handle_offtime,
        "SOAPBOX": _append_line("soapbox"),
        "QSO": handle_qso,
        "X-QSO": handle_ignored_qso,
        "DEBUG": handle_debug,
    }
)

KNOWN_TAGS: tuple[str, ...] = tuple(DEFAULT_HANDLERS)
