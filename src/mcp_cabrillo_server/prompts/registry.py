"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def summarize_contest_log(log_path: str) -> list[dict[str, Any]]:
        """Build a prompt that summarizes a Cabrillo contest log."""
        return [
            {
                "role": "system",
                "content": (
                    "You are an experienced contest log checker. Summarize Cabrillo logs "
                    "from tool output only. Do not invent contacts or scores."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Summarize the contest log using parse_cabrillo_log. Follow this workflow:\n"
                    f"- Call parse_cabrillo_log with log_path={log_path} and include_contacts=true.\n"
                    "- If ok is false, report the error kind, tag and line and stop.\n"
                    "- Otherwise report: station and contest, categories, operators, "
                    "number of contacts and ignored contacts, bands and modes used.\n"
                    "- Mention unknown tags if any are present.\n"
                ),
            },
        ]

    @mcp.prompt()
    def fix_log_error(log_path: str) -> list[dict[str, Any]]:
        """Build a prompt that explains a parse failure and proposes a fix."""
        return [
            {
                "role": "system",
                "content": (
                    "You help radio amateurs repair Cabrillo logs. Be concrete and quote the "
                    "offending line."
                ),
            },
            {
                "role": "user",
                "content": (
                    f"Call parse_cabrillo_log with log_path={log_path}.\n"
                    "If the result has an error, explain in 1-3 sentences what is wrong with "
                    "the value of the named tag on the given zero-based line, then show a "
                    "corrected line. If there is no error, say the log parsed cleanly.\n"
                ),
            },
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "You may read the raw log via:"},
                    {"type": "resource", "uri": f"file://{log_path}"},
                ],
            },
        ]
