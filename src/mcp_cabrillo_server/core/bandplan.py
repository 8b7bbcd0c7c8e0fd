"""Frequency to band mapping.

Ranges are inclusive and expressed in kHz. Anything at or above 300 GHz is
treated as LIGHT.
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import GrammarError
from .models import Band, Frequency

LIGHT_THRESHOLD_KHZ = 300_000_000

BAND_RANGES: Sequence[tuple[Band, int, int]] = (
    (Band.BAND_160M, 1_800, 2_000),
    (Band.BAND_80M, 3_500, 4_000),
    (Band.BAND_40M, 7_000, 7_300),
    (Band.BAND_20M, 14_000, 14_350),
    (Band.BAND_15M, 21_000, 21_450),
    (Band.BAND_10M, 28_000, 29_700),
    (Band.BAND_6M, 50_000, 54_000),
    (Band.BAND_4M, 70_000, 70_500),
    (Band.BAND_2M, 144_000, 148_000),
    (Band.BAND_222, 219_000, 225_000),
    (Band.BAND_432, 420_000, 450_000),
    (Band.BAND_902, 902_000, 928_000),
    (Band.BAND_1_2G, 1_240_000, 1_300_000),
    (Band.BAND_2_3G, 2_390_000, 2_450_000),
    (Band.BAND_3_4G, 3_300_000, 3_500_000),
    (Band.BAND_5_7G, 5_650_000, 5_925_000),
    (Band.BAND_10G, 10_000_000, 10_500_000),
    (Band.BAND_24G, 24_000_000, 24_250_000),
    (Band.BAND_47G, 47_000_000, 47_200_000),
    (Band.BAND_75G, 76_000_000, 81_000_000),
    (Band.BAND_123G, 122_250_000, 123_000_000),
    (Band.BAND_134G, 134_000_000, 141_000_000),
    (Band.BAND_241G, 241_000_000, 250_000_000),
)


def band_for_frequency(freq: Frequency) -> Band:
    """Map a frequency to its amateur band or raise GrammarError."""
    if freq.khz is None:
        return Band.LIGHT
    for band, start, end in BAND_RANGES:
        if start <= freq.khz <= end:
            return band
    if freq.khz >= LIGHT_THRESHOLD_KHZ:
        return Band.LIGHT
    raise GrammarError(f"The value '{freq}' does not fall within a valid amateur band")


def lookup_band(freq: Frequency) -> Band | None:
    """Like band_for_frequency, but return None outside every band."""
    try:
        return band_for_frequency(freq)
    except GrammarError:
        return None
