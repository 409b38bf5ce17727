"""Plot a queue metric as the arrival rate sweeps from ~0 to a maximum."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import pandas as pd

from queuecalc import DEFAULT_POINTS, Metric, ModelKind, sample_metric, sweep_frame

METRIC_LABELS = {
    Metric.RHO: "ρ (utilization)",
    Metric.P0: "p0 (idle prob)",
    Metric.PW: "Pw (prob. must wait)",
    Metric.LQ: "Lq (avg # in queue)",
    Metric.L: "L (avg # in system)",
    Metric.WQ: "Wq (avg waiting time)",
    Metric.W: "W (avg time in system)",
}


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot a metric against the arrival rate.")
    parser.add_argument(
        "--metric",
        type=str,
        choices=[m.value for m in Metric],
        default=Metric.LQ.value,
        help="Metric to plot (field name of the result).",
    )
    parser.add_argument(
        "--model",
        type=str,
        choices=[m.value for m in ModelKind],
        default=ModelKind.MM1.value,
        help="Queueing model to sweep.",
    )
    parser.add_argument("--mu", type=float, required=True, help="Fixed service rate mu.")
    parser.add_argument("--c", type=int, default=1, help="Number of servers for the M/M/c model.")
    parser.add_argument("--lambda-max", type=float, required=True, help="Upper end of the lambda range.")
    parser.add_argument("--points", type=int, default=DEFAULT_POINTS, help="Number of samples (>= 2).")
    parser.add_argument(
        "--out",
        type=Path,
        default=Path("reports/sweep.png"),
        help="PNG file for the chart.",
    )
    parser.add_argument("--csv", type=Path, help="Optional CSV with the sampled curve.")
    return parser.parse_args(argv)


def check_args(args: argparse.Namespace) -> None:
    if args.lambda_max <= 0:
        raise SystemExit("Enter a valid λ range max (>0).")
    if args.mu <= 0:
        raise SystemExit("Enter a valid μ (>0) for the plot.")
    if args.model == ModelKind.MMC.value and args.c < 1:
        raise SystemExit("Enter a valid number of servers c (>=1).")
    if args.points < 2:
        raise SystemExit("--points must be >= 2.")


def plot_sweep(df: pd.DataFrame, metric: Metric, title: str, out: Path) -> None:
    """Draw the curve; NaN rows (unstable rates) break the line instead of dropping to 0."""
    label = METRIC_LABELS.get(metric, metric.value)
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot(df["lambda"], df[metric.value], color="#0366d6", linewidth=1.5, label=label)
    ax.set_xlabel("λ (arrival rate)")
    ax.set_ylabel(label)
    ax.set_ylim(bottom=0)
    ax.set_title(title)
    ax.legend()
    fig.tight_layout()
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out, dpi=150)
    plt.close(fig)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    check_args(args)

    metric = Metric(args.metric)
    model = ModelKind(args.model)
    try:
        points = sample_metric(metric, model, args.mu, args.c, args.lambda_max, args.points)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    df = sweep_frame(points, metric)
    unstable = int(df[metric.value].isna().sum())
    name = f"M/M/{args.c}" if model is ModelKind.MMC else "M/M/1"
    plot_sweep(df, metric, f"{metric.value} vs. λ for {name} (μ={args.mu})", args.out)
    print(f"Chart saved to {args.out.resolve()} ({len(df)} points, {unstable} unstable)")

    if args.csv is not None:
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(args.csv, index=False)
        print(f"Curve saved to {args.csv.resolve()}")


if __name__ == "__main__":
    main()
