"""Command line interface to evaluate an M/M/1 or M/M/c queue."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import pandas as pd
from tqdm import trange

from queuecalc import (
    MetricsResult,
    ModelKind,
    QueueError,
    SimParams,
    SimulationResult,
    evaluate_multi_server,
    evaluate_single_server,
    format_result,
    get_scenario,
    list_scenarios,
    relative_error,
    run_mmc,
    write_result_csv,
)
from queuecalc.report import default_csv_name


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Steady-state metrics for M/M/1 and M/M/c queues.")
    parser.add_argument(
        "--model",
        type=str,
        choices=[m.value for m in ModelKind],
        default=ModelKind.MM1.value,
        help="Queueing model to evaluate.",
    )
    parser.add_argument("--lam", type=float, help="Arrival rate lambda (required unless --scenario).")
    parser.add_argument("--mu", type=float, help="Service rate mu (required unless --scenario).")
    parser.add_argument("--c", type=int, default=1, help="Number of servers for the M/M/c model.")
    parser.add_argument(
        "--scenario",
        type=str,
        choices=list(list_scenarios()),
        help="Named preset; overrides --model, --lam, --mu and --c.",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        help="Export the result to this CSV file (a directory gets a timestamped name).",
    )
    parser.add_argument(
        "--replications",
        type=int,
        default=0,
        help="Simulation replications to cross-check the formulas (0 disables).",
    )
    parser.add_argument("--seed", type=int, default=123, help="Base random seed.")
    parser.add_argument("--warmup", type=float, default=1_000.0, help="Warm-up time to discard.")
    parser.add_argument("--horizon", type=float, default=20_000.0, help="Total simulation time.")
    return parser.parse_args(argv)


def resolve_inputs(args: argparse.Namespace) -> Tuple[ModelKind, float, float, int]:
    """Return model, lambda, mu and c, rejecting values the core must not see."""
    if args.scenario:
        scenario = get_scenario(args.scenario)
        return scenario.model, scenario.lam, scenario.mu, scenario.c

    if args.lam is None or args.mu is None:
        raise SystemExit("Either --scenario or both --lam and --mu must be provided.")
    if args.lam < 0 or args.mu <= 0:
        raise SystemExit("Please enter valid λ (>=0) and μ (>0).")
    model = ModelKind(args.model)
    if model is ModelKind.MMC and args.c < 1:
        raise SystemExit("--c must be >= 1 for the M/M/c model.")
    return model, args.lam, args.mu, args.c


def evaluate(model: ModelKind, lam: float, mu: float, c: int) -> MetricsResult:
    if model is ModelKind.MMC:
        return evaluate_multi_server(lam, mu, c)
    return evaluate_single_server(lam, mu)


def run_replications(
    lam: float, mu: float, c: int, args: argparse.Namespace
) -> Iterable[SimulationResult]:
    for rep in trange(args.replications, desc="Simulating", unit="rep"):
        params = SimParams(
            lam=lam,
            mu=mu,
            c=c,
            seed=args.seed + rep,
            warmup=args.warmup,
            horizon=args.horizon,
        )
        yield run_mmc(params)


def compare_with_theory(
    results: Iterable[SimulationResult], theory: MetricsResult
) -> pd.DataFrame:
    """Return one row per metric with the simulated mean, the formula value and their gap."""
    df = pd.DataFrame([r.as_dict() for r in results])
    expected = theory.as_dict()
    expected.setdefault("Pw", expected["rho"])
    mapping = [("L", "L"), ("Lq", "Lq"), ("W", "W"), ("Wq", "Wq"), ("Pw", "Pw"), ("utilization", "rho")]
    rows: List[dict] = []
    for sim_key, th_key in mapping:
        mean = float(df[sim_key].mean())
        rows.append(
            {
                "metric": th_key,
                "simulated": mean,
                "theory": expected[th_key],
                "relative_error_pct": relative_error(mean, expected[th_key]) * 100,
            }
        )
    return pd.DataFrame(rows)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    model, lam, mu, c = resolve_inputs(args)
    result = evaluate(model, lam, mu, c)
    print(format_result(result))

    if args.csv is not None:
        target = args.csv / default_csv_name() if args.csv.is_dir() else args.csv
        path = write_result_csv(result, target)
        print(f"\nResult exported to {path.resolve()}")

    if args.replications <= 0:
        return
    if isinstance(result, QueueError):
        raise SystemExit("Simulation skipped: the analytic model has no steady state.")

    servers = c if model is ModelKind.MMC else 1
    comparison = compare_with_theory(run_replications(lam, mu, servers, args), result)
    print("\nSimulation vs. formulas:")
    for row in comparison.itertuples(index=False):
        print(
            f"  {row.metric:<4}: sim {row.simulated:>10.6f}  formula {row.theory:>10.6f}"
            f"  err {row.relative_error_pct:>7.3f}%"
        )


if __name__ == "__main__":
    main()
