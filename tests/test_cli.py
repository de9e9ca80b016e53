import json

import pytest

from karat_checker import cli


def test_calc_prints_result(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["calc", "--air", "10.50", "--water", "9.80"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "12K–18K" in out
    assert "17K" in out
    assert "WARN" in out


def test_calc_json(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["calc", "--air", "5", "--water", "4", "--temp", "35", "--json"])
    assert exc.value.code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["karat_from_density"] is None
    assert data["category_label"] == "Very Low"
    assert data["water_density"] == 0.9957


def test_calc_invalid_input(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["calc", "--air", "1", "--water", "1"])
    assert exc.value.code == 2
    assert "greater than weight in water" in capsys.readouterr().err


def test_calc_non_numeric(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["calc", "--air", "heavy", "--water", "1"])
    assert exc.value.code == 2


def test_app_launches_streamlit(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.subprocess, "call", lambda cmd: calls.append(cmd) or 0)
    with pytest.raises(SystemExit) as exc:
        cli.main(["app", "--port", "9000", "--headless"])
    assert exc.value.code == 0
    cmd = calls[0]
    assert cmd[1:4] == ["-m", "streamlit", "run"]
    assert cmd[4].endswith("app.py")
    assert "9000" in cmd and "--server.headless" in cmd
