"""Tests for the tick-hunger command line."""
from __future__ import annotations

import json

from tick_hunger.cli import build_parser, main


def test_parser_requires_command() -> None:
    parser = build_parser()
    args = parser.parse_args(["--store", "x.json", "simulate", "10", "--dt", "0.5"])
    assert args.command == "simulate"
    assert args.seconds == 10.0
    assert args.dt == 0.5


def test_status_on_new_store(tmp_path, capsys) -> None:
    store = tmp_path / "hunger.json"
    assert main(["--store", str(store), "status"]) == 0
    out = capsys.readouterr().out
    assert "record:     first_run" in out
    assert "severity:   Full" in out
    assert "level:      300.00 / 300" in out
    saved = json.loads(store.read_text(encoding="utf-8"))
    assert float(saved["HungerSecondsRemaining"]) == 300.0
    assert "HungerLastSavedUnix" in saved


def test_set_then_status(tmp_path, capsys) -> None:
    store = tmp_path / "hunger.json"
    assert main(["--store", str(store), "set", "100"]) == 0
    assert "severity:   Hungry" in capsys.readouterr().out

    assert main(["--store", str(store), "status"]) == 0
    out = capsys.readouterr().out
    assert "record:     offline_decay" in out
    assert "severity:   Hungry" in out


def test_reset(tmp_path, capsys) -> None:
    store = tmp_path / "hunger.json"
    main(["--store", str(store), "set", "10"])
    capsys.readouterr()
    assert main(["--store", str(store), "reset"]) == 0
    assert "severity:   Full" in capsys.readouterr().out


def test_add(tmp_path, capsys) -> None:
    store = tmp_path / "hunger.json"
    main(["--store", str(store), "set", "10"])
    capsys.readouterr()
    assert main(["--store", str(store), "add", "200"]) == 0
    assert "severity:   Full" in capsys.readouterr().out


def test_set_nan_is_rejected(tmp_path, capsys) -> None:
    assert main(["--store", str(tmp_path / "h.json"), "set", "nan"]) == 2
    assert "error:" in capsys.readouterr().err


def test_simulate_prints_edges_and_does_not_save(tmp_path, capsys) -> None:
    store = tmp_path / "hunger.json"
    assert main(["--store", str(store), "simulate", "250"]) == 0
    out = capsys.readouterr().out
    assert "severity -> Full" in out
    assert "severity -> Hungry" in out
    assert "severity -> Starving" in out
    assert "starvation tick" in out
    assert "after 250s:" in out
    assert not store.exists()


def test_simulate_rejects_bad_step(tmp_path, capsys) -> None:
    assert main(["--store", str(tmp_path / "h.json"), "simulate", "10", "--dt", "0"]) == 2
    assert "error:" in capsys.readouterr().err


def test_custom_config(tmp_path, capsys) -> None:
    config = tmp_path / "hunger.yaml"
    config.write_text(
        "max_level: 100\nhungry_threshold: 40\nstarving_threshold: 10\n",
        encoding="utf-8",
    )
    store = tmp_path / "hunger.json"
    assert main(["--config", str(config), "--store", str(store), "status"]) == 0
    assert "level:      100.00 / 100" in capsys.readouterr().out


def test_bad_config_exits_2(tmp_path, capsys) -> None:
    config = tmp_path / "hunger.yaml"
    config.write_text("hungry_threshold: 10\nstarving_threshold: 40\n", encoding="utf-8")
    assert main(["--config", str(config), "--store", str(tmp_path / "h.json"), "status"]) == 2
    assert "error:" in capsys.readouterr().err


def test_missing_config_exits_2(tmp_path, capsys) -> None:
    assert main(["--config", str(tmp_path / "nope.yaml"), "status"]) == 2
