from __future__ import annotations

import json
from pathlib import Path

import pytest

from mcp_cabrillo_server.cli import main


def test_cli_summary(tmp_path: Path, write_cabrillo_log, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "w1aw.log"
    write_cabrillo_log(p)

    main([str(p)])
    out = capsys.readouterr().out
    assert "Callsign: W1AW" in out
    assert "Unknown tags: X-CUSTOM" in out
    assert out.rstrip().endswith("Found 3 contacts (1 ignored).")


def test_cli_lists_contacts(tmp_path: Path, write_cabrillo_log, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "w1aw.log"
    write_cabrillo_log(p)

    main([str(p), "--contacts"])
    out = capsys.readouterr().out
    assert "2021-06-12 1345   20M CW    W1AW 599 CT -> K3AH 599 PA" in out


def test_cli_json(tmp_path: Path, write_cabrillo_log, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "w1aw.log"
    write_cabrillo_log(p)

    main([str(p), "--json", "--contacts"])
    data = json.loads(capsys.readouterr().out)
    assert data["callsign"] == "W1AW"
    assert data["contact_count"] == 3
    assert len(data["contacts"]) == 3


def test_cli_parse_error_exits_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "bad.log"
    p.write_text("CALLSIGN: W1AW\nnot a tag\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main([str(p)])
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: Parse Error: ")
    assert "on line 1" in err


def test_cli_missing_file_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.log")])
    assert exc.value.code == 2
    assert "not found" in capsys.readouterr().err
