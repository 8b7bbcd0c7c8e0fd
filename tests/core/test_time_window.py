from __future__ import annotations

from datetime import UTC, datetime

import pytest

from mcp_cabrillo_server.core.grammar import default_qso_parser
from mcp_cabrillo_server.core.time_window import (
    contacts_in_window,
    parse_iso_dt,
    range_for_date,
    range_for_hour,
    resolve_time_window,
)


def test_parse_iso_dt_assumes_utc() -> None:
    dt = parse_iso_dt("2021-06-12T10:00:00")
    assert dt == datetime(2021, 6, 12, 10, 0, 0, tzinfo=UTC)


def test_parse_iso_dt_converts_offsets() -> None:
    dt = parse_iso_dt("2021-06-12T10:00:00+02:00")
    assert dt == datetime(2021, 6, 12, 8, 0, 0, tzinfo=UTC)


def test_range_for_date() -> None:
    start, end = range_for_date("2021-06-12")
    assert start == datetime(2021, 6, 12, tzinfo=UTC)
    assert end == datetime(2021, 6, 13, tzinfo=UTC)


def test_range_for_hour_rounds_to_hour() -> None:
    start, end = range_for_hour("2021-06-12T13")
    assert start == datetime(2021, 6, 12, 13, 0, 0, tzinfo=UTC)
    assert end == datetime(2021, 6, 12, 14, 0, 0, tzinfo=UTC)


def test_range_for_hour_invalid_format() -> None:
    with pytest.raises(ValueError):
        range_for_hour("2021-06-12 13")


def test_resolve_date_overrides_since_until() -> None:
    since, until = resolve_time_window(
        since="2021-06-12T10:00:00Z",
        until="2021-06-12T11:00:00Z",
        date_="2021-06-13",
    )
    assert since == datetime(2021, 6, 13, tzinfo=UTC)
    assert until == datetime(2021, 6, 14, tzinfo=UTC)


def test_resolve_open_bounds() -> None:
    assert resolve_time_window() == (None, None)
    since, until = resolve_time_window(since="2021-06-12T10:00:00Z")
    assert since == datetime(2021, 6, 12, 10, tzinfo=UTC)
    assert until is None


def test_resolve_rejects_inverted_window() -> None:
    with pytest.raises(ValueError, match="since must be < until"):
        resolve_time_window(since="2021-06-12T11:00:00Z", until="2021-06-12T10:00:00Z")


def test_contacts_in_window_is_half_open() -> None:
    parser = default_qso_parser()
    contacts = [
        parser.parse("7025 CW 2021-06-12 1259 W1AW 0001 K3AH 0017"),
        parser.parse("7025 CW 2021-06-12 1300 W1AW 0002 N2XX 0018"),
        parser.parse("7025 CW 2021-06-12 1359 W1AW 0003 K1ABC 0019"),
        parser.parse("7025 CW 2021-06-12 1400 W1AW 0004 W2XYZ 0020"),
    ]
    since, until = range_for_hour("2021-06-12T13")

    selected = list(contacts_in_window(contacts, since=since, until=until))
    assert [c.received_call for c in selected] == ["N2XX", "K1ABC"]
    assert list(contacts_in_window(contacts, since=None, until=None)) == contacts
