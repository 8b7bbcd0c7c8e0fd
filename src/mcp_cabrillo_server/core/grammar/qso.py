"""QSO line grammars.

Two layouts of the QSO value coexist in real logs and nothing in the log
declares which one is used:

- Format A: ``freq mode date time call s1 s2 call r1 r2`` where the first
  token of each exchange may be a signal report.
- Format B: ``freq mode date time call sent call rcvd``.

Tokens after the last field (the transmitter id of multi-transmitter logs)
are ignored. FallbackQsoParser tries the grammars in order and keeps the
first success.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from ..errors import GrammarError
from ..models import ContactRecord, Frequency, Mode
from .primitives import (
    parse_callsign,
    parse_datetime,
    parse_frequency,
    parse_mode,
    try_parse_signal_report,
)

logger = logging.getLogger(__name__)

_FIELD_SEP_RE = re.compile(r"[ \t]+")


class QsoGrammar(Protocol):
    """Grammar interface: return a ContactRecord or raise GrammarError."""

    name: str

    def parse(self, value: str) -> ContactRecord:
        """Parse the value of a QSO/X-QSO tag."""
        ...


def split_fields(value: str) -> list[str]:
    """Split on runs of spaces/tabs, ignoring leading and trailing blanks."""
    stripped = value.strip(" \t")
    if not stripped:
        return []
    return _FIELD_SEP_RE.split(stripped)


def _parse_head(tokens: Sequence[str]) -> tuple[Frequency, Mode, datetime]:
    """Parse frequency, mode and the two-token timestamp."""
    frequency = parse_frequency(tokens[0])
    mode = parse_mode(tokens[1])
    timestamp = parse_datetime(f"{tokens[2]} {tokens[3]}")
    return frequency, mode, timestamp


def _expect_tokens(name: str, tokens: Sequence[str], count: int) -> None:
    if len(tokens) < count:
        raise GrammarError(f"{name} expects at least {count} tokens, got {len(tokens)}")


@dataclass(frozen=True, slots=True)
class QsoFormatA:
    """Split report/exchange layout (nine fields, timestamp counted once)."""

    name: str = "format A"

    def parse(self, value: str) -> ContactRecord:
        tokens = split_fields(value)
        _expect_tokens(self.name, tokens, 10)

        frequency, mode, timestamp = _parse_head(tokens)
        sent_call = parse_callsign(tokens[4])
        received_call = parse_callsign(tokens[7])

        # The report is a heuristic: a non-report token only stays in the exchange.
        return ContactRecord(
            frequency=frequency,
            mode=mode,
            timestamp=timestamp,
            sent_call=sent_call,
            sent_exchange=f"{tokens[5]} {tokens[6]}",
            received_call=received_call,
            received_exchange=f"{tokens[8]} {tokens[9]}",
            sent_report=try_parse_signal_report(tokens[5]),
            received_report=try_parse_signal_report(tokens[8]),
        )


@dataclass(frozen=True, slots=True)
class QsoFormatB:
    """Single exchange token layout (seven fields)."""

    name: str = "format B"

    def parse(self, value: str) -> ContactRecord:
        tokens = split_fields(value)
        _expect_tokens(self.name, tokens, 8)

        frequency, mode, timestamp = _parse_head(tokens)
        return ContactRecord(
            frequency=frequency,
            mode=mode,
            timestamp=timestamp,
            sent_call=parse_callsign(tokens[4]),
            sent_exchange=tokens[5],
            received_call=parse_callsign(tokens[6]),
            received_exchange=tokens[7],
        )


@dataclass(frozen=True, slots=True)
class FallbackQsoParser:
    """Try grammars in order and return the first successful parse."""

    grammars: Sequence[QsoGrammar]

    def parse(self, value: str) -> ContactRecord:
        """Parse a QSO value; raise GrammarError listing every candidate's failure."""
        failures: list[str] = []
        for grammar in self.grammars:
            try:
                contact = grammar.parse(value)
            except GrammarError as e:
                failures.append(f"{grammar.name}: {e}")
                continue
            if failures:
                logger.debug("QSO parsed with %s after: %s", grammar.name, "; ".join(failures))
            return contact

        detail = "; ".join(reversed(failures)) or "no grammar configured"
        raise GrammarError(f"Invalid value '{value}' (not valid QSO format; {detail})")


def default_qso_parser() -> FallbackQsoParser:
    """Default grammar chain (Format A first, then Format B)."""
    return FallbackQsoParser(grammars=(QsoFormatA(), QsoFormatB()))
