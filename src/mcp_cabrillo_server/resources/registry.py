"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import asyncio
import gzip
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_cabrillo_server.core.bandplan import BAND_RANGES, LIGHT_THRESHOLD_KHZ
from mcp_cabrillo_server.core.config import BASE_DIR_ENV, resolve_server_config
from mcp_cabrillo_server.core.handlers import KNOWN_TAGS
from mcp_cabrillo_server.core.schemas import ParseResponse

ALLOWED_FILE_SUFFIXES = {".log", ".txt", ".cbr"}
TEXT_ERRORS = "replace"

SAMPLE_LOG = (
    "START-OF-LOG: 3.0\n"
    "CALLSIGN: W1AW\n"
    "CONTEST: ARRL-SS-CW\n"
    "CATEGORY-OPERATOR: SINGLE-OP\n"
    "CATEGORY-MODE: CW\n"
    "OPERATORS: W1AW, K3AH\n"
    "QSO: 14025 CW 2021-06-12 1345 W1AW 599 CT K3AH 599 PA\n"
    "QSO: 7025 CW 2021-06-12 1402 W1AW 0001 K3AH 0017\n"
    "X-QSO: 3525 CW 2021-06-12 1410 W1AW 599 CT N2XX 579 NY\n"
    "END-OF-LOG:\n"
)


def _safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = resolve_server_config().base_dir
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _allowed_suffix(path: Path) -> str:
    """Return the effective suffix for allowlist checks."""
    suffix = path.suffix.lower()
    if suffix == ".gz":
        suffix = path.with_suffix("").suffix.lower()
    return suffix


def _resolve_resource_path(path: str) -> Path:
    """Resolve and validate a resource file path."""
    resolved = _safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    if _allowed_suffix(resolved) not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved


def _open_text(path: Path) -> str:
    """Read text from a file, supporting optional gzip compression."""
    encoding = resolve_server_config().encoding
    if path.suffix.lower() == ".gz":
        with gzip.open(path, mode="rt", encoding=encoding, errors=TEXT_ERRORS) as f:
            return f.read()
    return path.read_text(encoding=encoding, errors=TEXT_ERRORS)


def band_table() -> list[dict[str, Any]]:
    """Return the band plan as JSON-serializable rows."""
    rows: list[dict[str, Any]] = [
        {"band": band.value, "start_khz": start, "end_khz": end} for band, start, end in BAND_RANGES
    ]
    rows.append({"band": "LIGHT", "start_khz": LIGHT_THRESHOLD_KHZ, "end_khz": None})
    return rows


def help_text() -> str:
    """Describe the resources, the base directory and the recognized tags."""
    allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
    base = resolve_server_config().base_dir
    return (
        "Resources:\n"
        "- app://cabrillo/help\n"
        "- app://cabrillo/examples/sample-log\n"
        "- app://cabrillo/schemas/parse-response\n"
        "- app://cabrillo/bands\n"
        f"- file://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed}, .gz)\n"
        f"\nBase directory: {base}\n"
        f"\nRecognized tags: {', '.join(KNOWN_TAGS)}\n"
        "Other tags are kept verbatim as unknown tags.\n"
    )


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://cabrillo/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs and known tags."""
        return help_text()

    @mcp.resource("app://cabrillo/examples/sample-log")
    def sample_log() -> str:
        """Return a tiny Cabrillo log for demos and tests."""
        return SAMPLE_LOG

    @mcp.resource("app://cabrillo/schemas/parse-response")
    def parse_response_schema() -> dict[str, Any]:
        """Return the JSON schema of the parse_cabrillo_log result."""
        return ParseResponse.model_json_schema()

    @mcp.resource("app://cabrillo/bands")
    def bands() -> list[dict[str, Any]]:
        """Return the frequency ranges used to derive bands."""
        return band_table()

    @mcp.resource("file://{path}")
    async def read_file(path: str) -> str:
        """Read a log file from within CABRILLO_BASE_DIR."""
        p = _resolve_resource_path(path)
        return await asyncio.to_thread(_open_text, p)
