"""Command line front end: solve a scan report, sweep budgets, generate test networks."""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path

import pandas as pd

from valve_pressure.config import DEFAULT_HELPER_TIME_BUDGET, DEFAULT_TIME_BUDGET, SolverConfig
from valve_pressure.parsing import load_scan
from valve_pressure.solver import (
    max_pressure,
    max_pressure_with_helper,
    prepare_network,
    solve_single,
    solve_with_helper,
)
from valve_pressure.synthetic import SyntheticSpec, format_scan, generate_network


def _log(msg: str) -> None:
    print(f"[valves] {msg}")


def _config_from_args(args: argparse.Namespace) -> SolverConfig:
    helper_ratio = None if args.no_helper_pruning else args.helper_prune_ratio
    return SolverConfig(
        start=args.start,
        mask_width=args.mask_width,
        helper_prune_ratio=helper_ratio,
        exhaustive_max_valves=args.exhaustive_max_valves,
    )


def cmd_solve(args: argparse.Namespace) -> None:
    config = _config_from_args(args)
    network = prepare_network(load_scan(args.input), config)

    start = time.perf_counter()
    alone = solve_single(network, args.budget, config=config)
    alone_s = time.perf_counter() - start
    start = time.perf_counter()
    paired = solve_with_helper(network, args.helper_budget, config=config)
    paired_s = time.perf_counter() - start

    _log(f"pressure released alone: {alone.pressure}")
    _log(f"pressure released with helper: {paired.pressure}")
    if args.verbose:
        _log(f"interesting valves: {network.size} ({', '.join(network.names)})")
        _log(f"opening order alone: {', '.join(alone.opened) or '-'}")
        _log(f"own valves: {', '.join(paired.own) or '-'}")
        _log(f"helper valves: {', '.join(paired.helper) or '-'}")
        _log(
            f"alone: expanded={alone.expanded} pruned={alone.pruned} runtime_s={alone_s:.3f}; "
            f"with helper: expanded={paired.expanded} pruned={paired.pruned} "
            f"runtime_s={paired_s:.3f}"
        )
    if args.json:
        summary = {
            "budget": args.budget,
            "helper_budget": args.helper_budget,
            "alone": {
                "pressure": alone.pressure,
                "opened": list(alone.opened),
                "expanded": alone.expanded,
                "pruned": alone.pruned,
                "runtime_s": alone_s,
            },
            "with_helper": {
                "pressure": paired.pressure,
                "own": list(paired.own),
                "helper": list(paired.helper),
                "expanded": paired.expanded,
                "pruned": paired.pruned,
                "runtime_s": paired_s,
            },
        }
        args.json.parent.mkdir(parents=True, exist_ok=True)
        args.json.write_text(json.dumps(summary, indent=2))
        _log(f"wrote summary to {args.json}")


def budget_sweep(network, budgets, *, config: SolverConfig | None = None) -> pd.DataFrame:
    """Tabulate both optima for each budget in ``budgets``."""
    rows = []
    for budget in budgets:
        rows.append(
            {
                "budget": budget,
                "alone": max_pressure(network, budget, config=config),
                "with_helper": max_pressure_with_helper(network, budget, config=config),
            }
        )
    return pd.DataFrame(rows, columns=["budget", "alone", "with_helper"])


def cmd_sweep(args: argparse.Namespace) -> None:
    config = _config_from_args(args)
    network = prepare_network(load_scan(args.input), config)
    df = budget_sweep(network, range(args.min_budget, args.max_budget + 1), config=config)
    args.out.mkdir(parents=True, exist_ok=True)
    out_path = args.out / "budget_sweep.csv"
    df.to_csv(out_path, index=False)
    _log(f"wrote {len(df)} budgets to {out_path}")


def cmd_generate(args: argparse.Namespace) -> None:
    spec = SyntheticSpec(
        name=args.out.stem,
        n_valves=args.valves,
        n_flowing=args.flowing,
        seed=args.seed,
        extra_tunnels=args.extra_tunnels,
    )
    records = generate_network(spec)
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(format_scan(records))
    _log(f"wrote {len(records)} valves ({spec.n_flowing} flowing) to {args.out}")


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input", type=str, default="-", help="Scan report path ('-' reads stdin)."
    )
    parser.add_argument("--start", type=str, default="AA", help="Valve both walkers start at.")
    parser.add_argument("--mask-width", type=int, default=SolverConfig.mask_width)
    parser.add_argument(
        "--helper-prune-ratio",
        type=float,
        default=SolverConfig.helper_prune_ratio,
        help="Prune helper-pass children whose bound is at most ratio x best.",
    )
    parser.add_argument(
        "--no-helper-pruning", action="store_true", help="Explore the helper pass exhaustively."
    )
    parser.add_argument(
        "--exhaustive-max-valves",
        type=int,
        default=SolverConfig.exhaustive_max_valves,
        help="Skip helper-pass pruning for networks this small.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    solve_p = sub.add_parser("solve", help="Report best pressure alone and with a helper")
    _add_common(solve_p)
    solve_p.add_argument("--budget", type=int, default=DEFAULT_TIME_BUDGET)
    solve_p.add_argument("--helper-budget", type=int, default=DEFAULT_HELPER_TIME_BUDGET)
    solve_p.add_argument("--verbose", action="store_true", help="Print plans and search stats")
    solve_p.add_argument("--json", type=Path, help="Optional path for a JSON summary")
    solve_p.set_defaults(func=cmd_solve)

    sweep_p = sub.add_parser("sweep", help="Write both optima for a range of budgets to CSV")
    _add_common(sweep_p)
    sweep_p.add_argument("--min-budget", type=int, default=0)
    sweep_p.add_argument("--max-budget", type=int, default=DEFAULT_TIME_BUDGET)
    sweep_p.add_argument(
        "--out", type=Path, default=Path("artifacts/sweep"), help="Output directory."
    )
    sweep_p.set_defaults(func=cmd_sweep)

    gen_p = sub.add_parser("generate", help="Write a seeded synthetic scan report")
    gen_p.add_argument("--valves", type=int, default=30)
    gen_p.add_argument("--flowing", type=int, default=12)
    gen_p.add_argument("--extra-tunnels", type=int, default=10)
    gen_p.add_argument("--seed", type=int, default=0)
    gen_p.add_argument("--out", type=Path, required=True, help="Path of the report to write.")
    gen_p.set_defaults(func=cmd_generate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (ValueError, OSError) as exc:
        print(f"[valves] error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
