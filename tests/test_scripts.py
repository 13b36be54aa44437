from pathlib import Path

from scripts import doctor, run

EXAMPLE = Path(__file__).parent / "fixtures" / "example_scan.txt"


def test_solve_forwards_to_cli(monkeypatch):
    calls = []
    monkeypatch.setattr(run, "_run", lambda cmd, **_: calls.append(cmd))
    assert run.main(["solve", "--input", str(EXAMPLE), "--verbose"]) == 0
    (cmd,) = calls
    assert cmd[1:4] == ["-m", "valve_pressure.cli", "solve"]
    assert str(EXAMPLE) in cmd
    assert "--verbose" in cmd


def test_scan_input_from_environment(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(run, "_run", lambda cmd, **_: calls.append(cmd))
    monkeypatch.setenv(run.INPUT_ENV, str(EXAMPLE))
    monkeypatch.setenv(run.ARTIFACTS_ENV, str(tmp_path))
    assert run.main(["sweep", "--max-budget", "5"]) == 0
    (cmd,) = calls
    assert str(EXAMPLE) in cmd
    assert str(tmp_path / "sweep") in cmd


def test_missing_scan_input_fails(monkeypatch, capsys):
    monkeypatch.delenv(run.INPUT_ENV, raising=False)
    monkeypatch.setattr(run, "_run", lambda cmd, **_: None)
    assert run.main(["solve"]) == 1
    assert run.INPUT_ENV in capsys.readouterr().out


def test_doctor_reports_dependencies(capsys):
    assert doctor.main() == 0
    out = capsys.readouterr().out
    for name in ("networkx", "numpy", "pandas", "valve_pressure"):
        assert f"[doctor] {name}:" in out
