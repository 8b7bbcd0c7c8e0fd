"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from typing import Any

from mcp_cabrillo_server.core.bandplan import band_for_frequency, lookup_band
from mcp_cabrillo_server.core.config import ServerConfig, resolve_server_config
from mcp_cabrillo_server.core.errors import CabrilloError, GrammarError
from mcp_cabrillo_server.core.grammar import parse_mode
from mcp_cabrillo_server.core.log_service import load_log
from mcp_cabrillo_server.core.models import Band, ContactRecord, Frequency, Mode
from mcp_cabrillo_server.core.schemas import (
    ContactModel,
    LogSummaryModel,
    ParseErrorModel,
    ParseResponse,
)
from mcp_cabrillo_server.core.time_window import contacts_in_window, resolve_time_window


def _parse_band_filter(band: str | None) -> Band | None:
    """Parse a user-supplied band name (case-insensitive)."""
    if band is None or not band.strip():
        return None
    try:
        return Band(band.strip().upper())
    except ValueError as e:
        valid = ", ".join(b.value for b in Band)
        raise ValueError(f"Unknown band '{band}'. Valid values: {valid}.") from e


def _parse_mode_filter(mode: str | None) -> Mode | None:
    """Parse a user-supplied mode; accepts QSO and CATEGORY-MODE spellings."""
    if mode is None or not mode.strip():
        return None
    try:
        return parse_mode(mode.strip().upper())
    except GrammarError as e:
        raise ValueError(
            f"Unknown mode '{mode}'. Valid values: CW, PH, SSB, FM, RY, RTTY, DG, DIGI, MIXED."
        ) from e


def _contacts_to_dicts(contacts: list[ContactRecord], *, limit: int) -> list[dict[str, Any]]:
    return [ContactModel.from_contact(c).model_dump() for c in contacts[:limit]]


async def parse_log_impl(
    *,
    log_path: str,
    include_contacts: bool = True,
    include_ignored: bool = False,
    limit: int | None = None,
    config: ServerConfig | None = None,
) -> dict[str, Any]:
    """Implementation for the `parse_cabrillo_log` MCP tool.

    Notes
    -----
    - A log that fails to parse is reported as ``{"ok": False, "error": ...}``
      rather than raised, so clients can show the offending line.
    - ``limit`` caps each contact list (default and hard cap from config).
    """
    cfg = config or resolve_server_config()
    limit = cfg.clamp_limit(limit)

    try:
        record = await load_log(log_path, encoding=cfg.encoding)
    except CabrilloError as e:
        return ParseResponse(ok=False, error=ParseErrorModel.from_error(e)).model_dump()

    response = ParseResponse(ok=True, log=LogSummaryModel.from_record(record))
    if include_contacts:
        response.contacts = [ContactModel.from_contact(c) for c in record.contacts[:limit]]
    if include_ignored:
        response.ignored_contacts = [
            ContactModel.from_contact(c) for c in record.ignored_contacts[:limit]
        ]
    return response.model_dump()


async def list_contacts_impl(
    *,
    log_path: str,
    since: str | None = None,
    until: str | None = None,
    date: str | None = None,
    hour: str | None = None,
    band: str | None = None,
    mode: str | None = None,
    callsign: str | None = None,
    ignored: bool = False,
    limit: int | None = None,
    config: ServerConfig | None = None,
) -> dict[str, Any]:
    """Implementation for the `list_contacts` MCP tool.

    Time window selection precedence: date > hour > since/until.
    ``callsign`` matches the received call, case-insensitively.
    Parse failures propagate as CabrilloError.
    """
    cfg = config or resolve_server_config()
    limit = cfg.clamp_limit(limit)
    band_eff = _parse_band_filter(band)
    mode_eff = _parse_mode_filter(mode)
    call_eff = callsign.strip().upper() if callsign and callsign.strip() else None

    window_since, window_until = resolve_time_window(
        since=since, until=until, date_=date, hour=hour
    )

    record = await load_log(log_path, encoding=cfg.encoding)
    source = record.ignored_contacts if ignored else record.contacts

    selected: list[ContactRecord] = []
    for contact in contacts_in_window(source, since=window_since, until=window_until):
        if band_eff is not None and lookup_band(contact.frequency) is not band_eff:
            continue
        if mode_eff is not None and contact.mode is not mode_eff:
            continue
        if call_eff is not None and contact.received_call.upper() != call_eff:
            continue
        selected.append(contact)

    contacts = _contacts_to_dicts(selected, limit=limit)
    return {
        "count": len(selected),
        "returned": len(contacts),
        "contacts": contacts,
    }


def lookup_band_impl(frequency_khz: int) -> dict[str, Any]:
    """Implementation for the `lookup_band` MCP tool."""
    if frequency_khz < 0:
        raise ValueError("frequency_khz must be >= 0")
    freq = Frequency(khz=frequency_khz)
    band = band_for_frequency(freq)
    return {
        "frequency_khz": frequency_khz,
        "frequency_mhz": freq.as_mhz(),
        "band": band.value,
    }
