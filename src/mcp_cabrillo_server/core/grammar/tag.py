"""Tag line grammar: ``TAG: value``."""

from __future__ import annotations

import re

from ..errors import GrammarError

END_OF_LOG = "END-OF-LOG"

# The format requires a space after the colon.
_TAG_LINE_RE = re.compile(r"(?P<tag>[A-Z0-9\-' ]+): (?P<value>[^\r\n]*)")
_END_OF_LOG_RE = re.compile(r"END-OF-LOG:?\s*")


def split_tag_line(line: str) -> tuple[str, str]:
    """Split a line into ``(tag, raw_value)``.

    A bare ``END-OF-LOG`` line carries no value and yields an empty one.
    """
    m = _TAG_LINE_RE.match(line)
    if m:
        return m.group("tag"), m.group("value")
    if _END_OF_LOG_RE.fullmatch(line):
        return END_OF_LOG, ""
    raise GrammarError(f"Malformed line '{line}' (expected 'TAG: value')")
