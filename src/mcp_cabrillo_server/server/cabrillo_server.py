"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: parse a Cabrillo log, list its contacts, map a frequency to a band
- Resources: help, sample log, response schema, band plan, log files
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m mcp_cabrillo_server.server.cabrillo_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_cabrillo_server.core.config import LOG_LEVEL_ENV
from mcp_cabrillo_server.prompts.registry import register_prompts
from mcp_cabrillo_server.resources.registry import register_resources
from mcp_cabrillo_server.tools.cabrillo import (
    list_contacts_impl,
    lookup_band_impl,
    parse_log_impl,
)

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure logging on stderr; stdout belongs to the stdio transport."""
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("cabrillo", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
async def parse_cabrillo_log(
    log_path: str,
    include_contacts: bool = True,
    include_ignored: bool = False,
    limit: int | None = None,
) -> dict[str, Any]:
    """Parse a Cabrillo contest log and return its header and contacts.

    Parameters
    ----------
    log_path:
        Path to a local Cabrillo file. Supports plain text and .gz.
    include_contacts:
        Include QSO contacts in the result.
    include_ignored:
        Include X-QSO contacts (excluded from scoring by the entrant).
    limit:
        Maximum number of contacts per list (hard-capped in the implementation).

    Returns
    -------
    dict:
        {"ok": bool, "log": {...}, "contacts": [...], "ignored_contacts": [...],
        "error": {"kind", "tag", "line", "detail", "message"} | None}
    """
    return await parse_log_impl(
        log_path=log_path,
        include_contacts=include_contacts,
        include_ignored=include_ignored,
        limit=limit,
    )


@mcp.tool()
async def list_contacts(
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
) -> dict[str, Any]:
    """Return contacts filtered by time window, band, mode and worked callsign.

    Parameters
    ----------
    since/until:
        ISO-8601 datetimes. If timezone is omitted, UTC is assumed.
    date/hour:
        Convenience selectors (2021-06-12, 2021-06-12T13) overriding since/until.
    band:
        Band designator such as 20M, 2M or 1.2G.
    mode:
        CW, PH/SSB, FM, RY/RTTY, DG/DIGI.
    callsign:
        Received callsign to match (case-insensitive).
    ignored:
        Search X-QSO contacts instead of QSO contacts.
    """
    return await list_contacts_impl(
        log_path=log_path,
        since=since,
        until=until,
        date=date,
        hour=hour,
        band=band,
        mode=mode,
        callsign=callsign,
        ignored=ignored,
        limit=limit,
    )


@mcp.tool()
def lookup_band(frequency_khz: int) -> dict[str, Any]:
    """Map a frequency in kHz to its amateur band designator."""
    return lookup_band_impl(frequency_khz)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
