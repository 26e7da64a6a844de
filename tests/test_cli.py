from __future__ import annotations

import pytest

from skyterm import cli

TIME = "2025-01-01T03:00:00Z"


def run(capsys, *argv):
    code = cli.main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


def test_snapshot(capsys):
    code, out, _ = run(capsys, "snapshot", "--time", TIME, "--width", "40", "--height", "10",
                       "--lat", "51.48", "--lon", "0.0", "--grid")
    assert code == 0
    lines = out.splitlines()
    assert len(lines) >= 11
    assert all(len(line) <= 40 for line in lines[:10])
    assert "UTC" in out
    assert "51.48" in out


def test_snapshot_braille(capsys):
    code, out, _ = run(capsys, "snapshot", "--time", TIME, "--width", "30", "--height", "8",
                       "--braille", "--alt", "30", "--az", "120", "--fov", "120", "--mag", "6")
    assert code == 0
    assert any(0x2800 <= ord(ch) <= 0x28FF for ch in out)


def test_riseset(capsys):
    code, out, _ = run(capsys, "riseset", "vega", "--time", TIME)
    assert code == 0
    assert "Vega" in out
    assert "Transit" in out


def test_riseset_circumpolar(capsys):
    code, out, _ = run(capsys, "riseset", "Polaris", "--time", TIME)
    assert code == 0
    assert "Circumpolar" in out


def test_riseset_planet_shows_events(capsys):
    code, out, _ = run(capsys, "riseset", "Jupiter", "--time", TIME)
    assert code == 0
    assert "Jupiter" in out
    assert "Transit" in out


def test_unknown_object_exits_2(capsys):
    code, _, err = run(capsys, "riseset", "Planet X", "--time", TIME)
    assert code == cli.EXIT_ERROR
    assert "Planet X" in err


def test_bad_config_exits_2(capsys, tmp_path):
    bad = tmp_path / "config.yaml"
    bad.write_text("display: [oops\n", encoding="utf-8")
    code, _, err = run(capsys, "snapshot", "--config", str(bad), "--width", "10", "--height", "4")
    assert code == cli.EXIT_ERROR
    assert "invalid YAML" in err


def test_bad_time_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["riseset", "Vega", "--time", "tomorrow-ish"])
    assert info.value.code == 2
    assert "ISO 8601" in capsys.readouterr().err


def test_lat_lon_override_keeps_config_name_when_partial(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("location:\n  name: Parma\n  latitude: 44.8\n  longitude: 10.33\n",
                        encoding="utf-8")
    args = cli.build_parser().parse_args(["riseset", "Vega", "--config", str(cfg_path),
                                          "--lat", "45.0"])
    _, obs, _ = cli._resolve(args)
    assert (obs.latitude, obs.longitude, obs.name) == (45.0, 10.33, "Parma")


def test_window_delegates_to_viewer(monkeypatch):
    viewer = pytest.importorskip("skyterm.viewer")
    calls = []

    def fake_run_viewer(cfg, obs, start=None, width=0, height=0):
        calls.append((obs, start, width, height))
        return 0

    monkeypatch.setattr(viewer, "run_viewer", fake_run_viewer)
    assert cli.main(["window", "--time", TIME, "--width", "100", "--height", "30"]) == 0
    (obs, start, width, height), = calls
    assert start.year == 2025
    assert (width, height) == (100, 30)
