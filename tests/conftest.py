from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_LINES = [
    "START-OF-LOG: 3.0",
    "CALLSIGN: W1AW",
    "CONTEST: ARRL-DX-CW",
    "CATEGORY-OPERATOR: SINGLE-OP",
    "CATEGORY-BAND: ALL",
    "CATEGORY-MODE: CW",
    "CATEGORY-POWER: HIGH",
    "CLAIMED-SCORE: 12345",
    "EMAIL: w1aw@arrl.org",
    "GRID-LOCATOR: FN31pr",
    "OPERATORS: W1AW, K3AH",
    "ADDRESS: 225 Main Street",
    "ADDRESS-CITY: Newington",
    "SOAPBOX: Great conditions",
    "X-CUSTOM: hello",
    "QSO: 14025 CW 2021-06-12 1345 W1AW 599 CT K3AH 599 PA",
    "QSO: 7025 CW 2021-06-12 1402 W1AW 0001 K3AH 0017",
    "QSO: 3525 PH 2021-06-13 0010 W1AW 59 CT N2XX 57 NY",
    "X-QSO: 3525 CW 2021-06-12 1410 W1AW 599 CT N2XX 579 NY",
    "END-OF-LOG:",
]


@pytest.fixture
def sample_text() -> str:
    return "\n".join(SAMPLE_LINES) + "\n"


@pytest.fixture
def write_cabrillo_log(sample_text: str) -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text(sample_text, encoding="utf-8")

    return _write


@pytest.fixture
def write_bytes() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\n" for line in lines))

    return _write
