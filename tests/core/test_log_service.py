from __future__ import annotations

import gzip
from pathlib import Path

import pytest

from mcp_cabrillo_server.core.errors import CabrilloError, ErrorKind
from mcp_cabrillo_server.core.log_service import (
    CabrilloParser,
    iter_buffer_lines,
    iter_text_lines,
    load_log,
    parse_buffer,
    parse_lines,
    parse_text,
    read_log_lines,
)
from mcp_cabrillo_server.core.models import Band, LogRecord, Mode, SignalReport


def test_parse_sample_log(sample_text: str) -> None:
    record = parse_text(sample_text)

    assert record.format_version == 3.0
    assert record.callsign == "W1AW"
    assert record.contest == "ARRL-DX-CW"
    assert record.category_band is Band.ALL
    assert record.category_mode is Mode.CW
    assert record.claimed_score == 12345
    assert record.email == "w1aw@arrl.org"
    assert record.grid_locator == "FN31pr"
    assert record.operators == ["W1AW", "K3AH"]
    assert record.address == "225 Main Street\nNewington"
    assert record.soapbox == "Great conditions"
    assert record.unknown_tags == {"X-CUSTOM": "hello"}

    assert [c.frequency.khz for c in record.contacts] == [14025, 7025, 3525]
    assert record.contacts[0].sent_report == SignalReport(5, 9, 9)
    assert record.contacts[1].sent_exchange == "0001"
    assert record.contacts[2].received_report == SignalReport(5, 7, 0)
    assert [c.received_call for c in record.ignored_contacts] == ["N2XX"]


def test_empty_lines_are_skipped() -> None:
    record = parse_text("\n\nCALLSIGN: W1AW\r\n\n")
    assert record.callsign == "W1AW"


def test_whitespace_only_line_is_malformed() -> None:
    with pytest.raises(CabrilloError) as exc:
        parse_text("CALLSIGN: W1AW\n   \n")
    assert exc.value.kind is ErrorKind.PARSE
    assert exc.value.tag == ""
    assert exc.value.line == 1
    assert "Malformed line" in exc.value.detail


def test_qso_lines_with_transmitter_id() -> None:
    record = parse_text(
        "QSO:  3799 PH 1999-03-06 0711 HC8N 59 700 W1AW 59 CT 0\n"
        "QSO: 7025 CW 2021-06-12 1402 W1AW 0001 K3AH 0017 1\n"
    )
    assert [c.received_exchange for c in record.contacts] == ["59 CT", "0017"]


def test_values_are_trimmed() -> None:
    record = parse_text("CALLSIGN:   W1AW   \r\nCLAIMED-SCORE: 42 ")
    assert record.callsign == "W1AW"
    assert record.claimed_score == 42


def test_unknown_tag_last_value_wins() -> None:
    record = parse_text("X-NOTE: one\nX-NOTE: two")
    assert record.unknown_tags == {"X-NOTE": "two"}


def test_lines_after_end_of_log_are_still_read() -> None:
    record = parse_text("END-OF-LOG:\nCALLSIGN: W1AW")
    assert record.callsign == "W1AW"


def test_malformed_line_has_empty_tag_and_line_number() -> None:
    with pytest.raises(CabrilloError) as exc:
        parse_text("CALLSIGN: W1AW\n\nthis is not a tag line")
    err = exc.value
    assert err.kind is ErrorKind.PARSE
    assert err.tag == ""
    assert err.line == 2
    assert "Malformed line" in err.detail
    assert str(err).startswith("Parse Error: ")
    assert str(err).endswith("in tag '' on line 2")


def test_handler_failure_names_the_tag() -> None:
    with pytest.raises(CabrilloError) as exc:
        parse_text("START-OF-LOG: 3.0\nQSO: 7025 CW 2021-06-12 1402 W1AW 0001")
    err = exc.value
    assert err.tag == "QSO"
    assert err.line == 1
    assert "not valid QSO format" in err.detail


def test_first_failure_aborts() -> None:
    with pytest.raises(CabrilloError) as exc:
        parse_text("CATEGORY-POWER: MEDIUM\nCATEGORY-MODE: AM")
    assert exc.value.tag == "CATEGORY-POWER"
    assert exc.value.line == 0


def test_parse_lines_uses_given_numbers() -> None:
    with pytest.raises(CabrilloError) as exc:
        parse_lines([(41, "CALLSIGN: W1AW"), (42, "EMAIL: nope")])
    assert exc.value.line == 42
    assert exc.value.tag == "EMAIL"


def test_custom_handler_table() -> None:
    def shout(value: str, record: LogRecord) -> None:
        record.callsign = value.upper()

    record = parse_lines([(0, "CALLSIGN: w1aw"), (1, "CLUB: YCCC")], handlers={"CALLSIGN": shout})
    assert record.callsign == "W1AW"
    assert record.club is None
    assert record.unknown_tags == {"CLUB": "YCCC"}


def test_parser_is_reusable() -> None:
    parser = CabrilloParser()
    first = parser.parse_lines(iter_text_lines("CALLSIGN: W1AW"))
    second = parser.parse_lines(iter_text_lines("CALLSIGN: K3AH"))
    assert first.callsign == "W1AW"
    assert second.callsign == "K3AH"


def test_iter_text_lines_numbers_from_zero() -> None:
    assert list(iter_text_lines("A: 1\r\nB: 2")) == [(0, "A: 1"), (1, "B: 2")]


def test_iter_buffer_lines_strips_crlf() -> None:
    assert list(iter_buffer_lines(b"A: 1\r\nB: 2\n")) == [(0, "A: 1"), (1, "B: 2"), (2, "")]


def test_undecodable_line_is_io_error() -> None:
    with pytest.raises(CabrilloError) as exc:
        parse_buffer(b"CALLSIGN: W1AW\nNAME: \xff\xfe\n")
    err = exc.value
    assert err.kind is ErrorKind.IO
    assert err.tag == ""
    assert err.line == 1
    assert str(err).startswith("I/O Error: ")


def test_parse_buffer_with_other_encoding() -> None:
    record = parse_buffer("NAME: José\n".encode("latin-1"), encoding="latin-1")
    assert record.name == "José"


@pytest.mark.asyncio
async def test_load_log_plain(tmp_path: Path, write_cabrillo_log) -> None:
    p = tmp_path / "w1aw.log"
    write_cabrillo_log(p)

    record = await load_log(p)
    assert record.callsign == "W1AW"
    assert len(record.contacts) == 3
    assert len(record.ignored_contacts) == 1


@pytest.mark.asyncio
async def test_load_log_gz(tmp_path: Path, sample_text: str) -> None:
    p = tmp_path / "w1aw.log.gz"
    with gzip.open(p, "wt", encoding="utf-8") as f:
        f.write(sample_text)

    record = await load_log(str(p))
    assert record.contest == "ARRL-DX-CW"
    assert len(record.contacts) == 3


@pytest.mark.asyncio
async def test_load_log_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        await load_log(tmp_path / "missing.log")


@pytest.mark.asyncio
async def test_load_log_corrupt_gzip_is_io_error(tmp_path: Path) -> None:
    p = tmp_path / "broken.log.gz"
    p.write_bytes(b"not gzip at all")

    with pytest.raises(CabrilloError) as exc:
        await load_log(p)
    assert exc.value.kind is ErrorKind.IO
    assert exc.value.line == 0


@pytest.mark.asyncio
async def test_read_log_lines(tmp_path: Path, write_bytes) -> None:
    p = tmp_path / "small.log"
    write_bytes(p, [b"CALLSIGN: W1AW", b"END-OF-LOG:"])

    lines = await read_log_lines(p)
    assert lines == [(0, "CALLSIGN: W1AW"), (1, "END-OF-LOG:"), (2, "")]
