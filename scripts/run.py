"""Cross-platform task runner for valve-pressure.

All commands use the currently active Python interpreter (sys.executable) so they work
on POSIX and Windows without Make.
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

INPUT_ENV = "VALVES_INPUT"
ARTIFACTS_ENV = "ARTIFACTS"
DEFAULT_ARTIFACTS = "artifacts"


class RunError(Exception):
    """Raised when an invoked command fails."""


def _log(msg: str) -> None:
    print(f"[run] {msg}")


def _run(cmd: list[str], *, env: dict[str, str] | None = None) -> None:
    _log("$ " + " ".join(cmd))
    result = subprocess.run(cmd, env=env)
    if result.returncode != 0:
        raise RunError(f"Command failed with exit code {result.returncode}: {' '.join(cmd)}")


def _artifacts_root() -> Path:
    return Path(os.environ.get(ARTIFACTS_ENV, DEFAULT_ARTIFACTS))


def _scan_input(explicit: Path | None) -> Path:
    if explicit is not None:
        return explicit
    val = os.environ.get(INPUT_ENV)
    if not val:
        raise RunError(f"No scan report given; pass --input or set {INPUT_ENV}")
    return Path(val)


def cmd_lint(_: argparse.Namespace) -> None:
    _run([sys.executable, "-m", "ruff", "check", "."])
    _run([sys.executable, "-m", "ruff", "format", "--check", "."])


def cmd_format(_: argparse.Namespace) -> None:
    _run([sys.executable, "-m", "ruff", "format", "."])
    _run([sys.executable, "-m", "ruff", "check", "--fix", "."])


def cmd_test(args: argparse.Namespace) -> None:
    pytest_cmd = [sys.executable, "-m", "pytest"]
    if args.quiet:
        pytest_cmd.append("-q")
    _run(pytest_cmd)


def cmd_solve(args: argparse.Namespace) -> None:
    scan = _scan_input(args.input)
    cmd = [
        sys.executable,
        "-m",
        "valve_pressure.cli",
        "solve",
        "--input",
        str(scan),
        "--budget",
        str(args.budget),
        "--helper-budget",
        str(args.helper_budget),
    ]
    if args.verbose:
        cmd.append("--verbose")
    _run(cmd)


def cmd_sweep(args: argparse.Namespace) -> None:
    scan = _scan_input(args.input)
    out_dir = args.out or (_artifacts_root() / "sweep")
    _run(
        [
            sys.executable,
            "-m",
            "valve_pressure.cli",
            "sweep",
            "--input",
            str(scan),
            "--max-budget",
            str(args.max_budget),
            "--out",
            str(out_dir),
        ]
    )
    _log(f"budget sweep written under {out_dir}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    lint_p = sub.add_parser("lint", help="Run ruff checks")
    lint_p.set_defaults(func=cmd_lint)

    fmt_p = sub.add_parser("format", help="Apply ruff format and fixes")
    fmt_p.set_defaults(func=cmd_format)

    test_p = sub.add_parser("test", help="Run pytest")
    test_p.add_argument("--quiet", action="store_true", help="Quiet pytest output")
    test_p.set_defaults(func=cmd_test)

    solve_p = sub.add_parser("solve", help="Solve a scan report")
    solve_p.add_argument("--input", type=Path, help=f"Scan report (defaults to {INPUT_ENV})")
    solve_p.add_argument("--budget", type=int, default=30)
    solve_p.add_argument("--helper-budget", type=int, default=26)
    solve_p.add_argument("--verbose", action="store_true")
    solve_p.set_defaults(func=cmd_solve)

    sweep_p = sub.add_parser("sweep", help="Tabulate optima over a range of budgets")
    sweep_p.add_argument("--input", type=Path, help=f"Scan report (defaults to {INPUT_ENV})")
    sweep_p.add_argument("--max-budget", type=int, default=30)
    sweep_p.add_argument("--out", type=Path, help="Output directory (defaults to ARTIFACTS/sweep)")
    sweep_p.set_defaults(func=cmd_sweep)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except RunError as exc:
        _log(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
