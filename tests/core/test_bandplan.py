from __future__ import annotations

import pytest

from mcp_cabrillo_server.core.bandplan import BAND_RANGES, band_for_frequency, lookup_band
from mcp_cabrillo_server.core.errors import GrammarError
from mcp_cabrillo_server.core.models import Band, Frequency


@pytest.mark.parametrize(("band", "start", "end"), BAND_RANGES)
def test_band_edges_are_inclusive(band: Band, start: int, end: int) -> None:
    assert band_for_frequency(Frequency(khz=start)) is band
    assert band_for_frequency(Frequency(khz=end)) is band
    assert band_for_frequency(Frequency(khz=(start + end) // 2)) is band


def test_light() -> None:
    assert band_for_frequency(Frequency(khz=300_000_000)) is Band.LIGHT
    assert band_for_frequency(Frequency(khz=500_000_000)) is Band.LIGHT
    assert band_for_frequency(Frequency.LIGHT) is Band.LIGHT


@pytest.mark.parametrize("khz", [0, 1_799, 2_001, 10_100, 250_000_001, 299_999_999])
def test_outside_every_band(khz: int) -> None:
    with pytest.raises(GrammarError, match="does not fall within a valid amateur band"):
        band_for_frequency(Frequency(khz=khz))
    assert lookup_band(Frequency(khz=khz)) is None


def test_lookup_band() -> None:
    assert lookup_band(Frequency(khz=14_025)) is Band.BAND_20M
