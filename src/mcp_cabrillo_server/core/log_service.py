"""Line driver and line sources.

This module is the main integration point: it feeds ``(line_no, text)`` pairs
through the tag grammar and the tag handlers and returns the finished
LogRecord, or raises a positioned CabrilloError on the first failure.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import Iterable, Iterator, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .errors import CabrilloError, GrammarError
from .grammar import split_tag_line
from .handlers import DEFAULT_HANDLERS, TagHandler
from .models import LogRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CabrilloParser:
    """Build a LogRecord from numbered lines using a tag dispatch table."""

    handlers: Mapping[str, TagHandler] = field(default_factory=lambda: DEFAULT_HANDLERS)

    def parse_line(self, line_no: int, line: str, record: LogRecord) -> None:
        """Consume one line into ``record``."""
        if not line:
            return

        try:
            tag, raw_value = split_tag_line(line)
        except GrammarError as e:
            raise CabrilloError.parse("", line_no, str(e)) from e

        value = raw_value.strip()
        handler = self.handlers.get(tag)
        if handler is None:
            logger.debug("Line %d: keeping unknown tag %s", line_no, tag)
            record.unknown_tags[tag] = value
            return

        try:
            handler(value, record)
        except GrammarError as e:
            raise CabrilloError.parse(tag, line_no, str(e)) from e

    def parse_lines(self, lines: Iterable[tuple[int, str]]) -> LogRecord:
        """Parse every line in order; the first failure aborts."""
        record = LogRecord()
        for line_no, line in lines:
            self.parse_line(line_no, line, record)
        return record


def parse_lines(
    lines: Iterable[tuple[int, str]],
    *,
    handlers: Mapping[str, TagHandler] | None = None,
) -> LogRecord:
    """Parse ``(line_no, text)`` pairs with the default (or given) handlers."""
    parser = CabrilloParser() if handlers is None else CabrilloParser(handlers=handlers)
    return parser.parse_lines(lines)


def iter_text_lines(text: str) -> Iterator[tuple[int, str]]:
    """Number the lines of an in-memory string from zero."""
    for line_no, line in enumerate(text.split("\n")):
        yield line_no, line.rstrip("\r")


def iter_buffer_lines(data: bytes, *, encoding: str = "utf-8") -> Iterator[tuple[int, str]]:
    """Split raw bytes on newlines and decode each line strictly."""
    for line_no, raw in enumerate(data.split(b"\n")):
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        try:
            line = raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise CabrilloError.io(line_no, str(e)) from e
        yield line_no, line


def parse_text(text: str) -> LogRecord:
    return parse_lines(iter_text_lines(text))


def parse_buffer(data: bytes, *, encoding: str = "utf-8") -> LogRecord:
    return parse_lines(iter_buffer_lines(data, encoding=encoding))


@asynccontextmanager
async def _open_binary(path: Path):
    """Open a log file for async binary reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rb")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, mode="rb") as f:
            yield f


async def read_log_bytes(log_path: str | Path) -> bytes:
    """Read the whole file; read failures become I/O CabrilloErrors."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")
    try:
        async with _open_binary(path) as f:
            return await f.read()
    except (OSError, EOFError) as e:
        raise CabrilloError.io(0, f"Unable to read {path}: {e}") from e


async def read_log_lines(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
) -> list[tuple[int, str]]:
    """Read a file into numbered, decoded lines."""
    data = await read_log_bytes(log_path)
    return list(iter_buffer_lines(data, encoding=encoding))


async def load_log(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    parser: CabrilloParser | None = None,
) -> LogRecord:
    """Read and parse a Cabrillo file."""
    parser = parser or CabrilloParser()
    data = await read_log_bytes(log_path)
    record = parser.parse_lines(iter_buffer_lines(data, encoding=encoding))
    logger.info(
        "Parsed %s: %d contacts, %d ignored contacts",
        log_path,
        len(record.contacts),
        len(record.ignored_contacts),
    )
    return record
