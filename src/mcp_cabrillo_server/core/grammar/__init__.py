"""Cabrillo value grammars.

Contains the tag line splitter, the primitive value grammars, the category
token tables and the QSO line grammars.
"""

from __future__ import annotations

from .categories import (
    parse_assisted,
    parse_band,
    parse_operator_category,
    parse_overlay_category,
    parse_power_category,
    parse_station_category,
    parse_time_category,
    parse_transmitter_category,
    parse_yes_no,
)
from .primitives import (
    parse_callsign,
    parse_datetime,
    parse_email,
    parse_frequency,
    parse_grid_locator,
    parse_mode,
    parse_offtime,
    parse_signal_report,
    try_parse_signal_report,
)
from .qso import FallbackQsoParser, QsoFormatA, QsoFormatB, QsoGrammar, default_qso_parser
from .tag import END_OF_LOG, split_tag_line

__all__ = [
    "END_OF_LOG",
    "FallbackQsoParser",
    "QsoFormatA",
    "QsoFormatB",
    "QsoGrammar",
    "default_qso_parser",
    "parse_assisted",
    "parse_band",
    "parse_callsign",
    "parse_datetime",
    "parse_email",
    "parse_frequency",
    "parse_grid_locator",
    "parse_mode",
    "parse_offtime",
    "parse_operator_category",
    "parse_overlay_category",
    "parse_power_category",
    "parse_signal_report",
    "parse_station_category",
    "parse_time_category",
    "parse_transmitter_category",
    "parse_yes_no",
    "split_tag_line",
    "try_parse_signal_report",
]
