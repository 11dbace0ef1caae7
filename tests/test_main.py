from pathlib import Path

import pytest
import yaml

import main as cli


def _write(tmp_path: Path, config) -> Path:
    path = tmp_path / "network.yaml"
    path.write_text(yaml.safe_dump(config), encoding="utf-8")
    return path


CONFIG = {
    "cities": ["A", "B", "C", "D"],
    "flights": [
        ["A", "B", 100, 500, 1],
        ["B", "C", 50, 300, 0.5],
        ["A", "C", 200, 1000, 2],
    ],
    "source": "A",
}


def test_cli_prints_report(tmp_path, capsys):
    status = cli.main(["--config", str(_write(tmp_path, CONFIG))])
    out = capsys.readouterr().out

    assert status == 0
    assert "Flight details from A:" in out
    assert "C              150            800.00              4000.00" in out
    assert "D              Unreachable" in out


def test_cli_source_and_fuel_rate_overrides(tmp_path, capsys):
    path = _write(tmp_path, CONFIG)
    status = cli.main(["--config", str(path), "--source", "C", "--fuel-rate", "2"])
    out = capsys.readouterr().out

    assert status == 0
    assert "Flight details from C:" in out
    assert "A              150            800.00              1600.00" in out


def test_cli_unknown_source_renders_nothing(tmp_path, capsys):
    status = cli.main(["--config", str(_write(tmp_path, CONFIG)), "--source", "Z"])
    out = capsys.readouterr().out

    assert status == 1
    assert "Error: Source city not found." in out
    assert "Flight details" not in out


def test_cli_reports_skipped_flights(tmp_path, capsys):
    config = dict(CONFIG, flights=CONFIG["flights"] + [["A", "Q", 1, 1, 1]])
    status = cli.main(["--config", str(_write(tmp_path, config))])
    out = capsys.readouterr().out

    assert status == 0
    assert "Error: One or both cities not found (A, Q)." in out


def test_cli_invalid_instance(tmp_path, capsys):
    config = dict(CONFIG, flights=[["A", "B", -1, 5, 1]])
    status = cli.main(["--config", str(_write(tmp_path, config))])

    assert status == 2
    assert "cost must be a positive integer" in capsys.readouterr().out


@pytest.mark.parametrize("rate", ["0", "-1", "nan", "inf"])
def test_cli_rejects_bad_fuel_rate(tmp_path, capsys, rate):
    status = cli.main(["--config", str(_write(tmp_path, CONFIG)), "--fuel-rate", rate])
    out = capsys.readouterr().out

    assert status == 2
    assert "Fuel rate must be a positive number" in out
    assert "Flight details" not in out


def test_cli_missing_config(tmp_path, capsys):
    status = cli.main(["--config", str(tmp_path / "absent.yaml")])
    assert status == 2
    assert "instance file not found" in capsys.readouterr().out


def test_cli_malformed_yaml(tmp_path, capsys):
    path = tmp_path / "broken.yaml"
    path.write_text("cities: [A, B\nflights: {", encoding="utf-8")
    status = cli.main(["--config", str(path)])
    assert status == 2
    assert "could not parse" in capsys.readouterr().out


def test_cli_interactive(monkeypatch, capsys):
    answers = iter(["2", "X", "Y", "1", "X Y 10 20 1", "Y"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    status = cli.main(["--interactive"])
    out = capsys.readouterr().out

    assert status == 0
    assert "Flight details from Y:" in out
    assert "X              10             20.00               100.00" in out
