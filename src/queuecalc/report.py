"""Text and CSV renderings of an evaluation result."""

from __future__ import annotations

import csv
import math
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union

import pandas as pd

from .results import MetricsResult, MMCMetrics, QueueError

Row = Tuple[str, Union[str, int, float]]


def format_value(value: Optional[float]) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.6f}" if math.isfinite(value) else str(value)
    return str(value)


def format_result(result: MetricsResult) -> str:
    """Return the multi-line summary printed by the command line tools."""
    if isinstance(result, QueueError):
        return f"Error: {result.message}"

    lines = [
        f"Model: {result.model}",
        f"λ (arrival rate): {result.lam}",
        f"μ (service rate): {result.mu}",
    ]
    if isinstance(result, MMCMetrics):
        lines.append(f"servers c: {result.c}")
        lines.append(f"r = λ/μ: {format_value(result.r)}")
    lines.append(f"ρ (utilization): {format_value(result.rho)}")
    if isinstance(result, MMCMetrics):
        lines.append(f"p0 (idle prob): {format_value(result.p0)}")
        lines.append(f"Pw (prob. must wait): {format_value(result.Pw)}")
    lines.extend(
        [
            f"Lq (avg # in queue): {format_value(result.Lq)}",
            f"L (avg # in system): {format_value(result.L)}",
            f"Wq (avg waiting time): {format_value(result.Wq)}",
            f"W (avg time in system): {format_value(result.W)}",
        ]
    )
    return "\n".join(lines)


def result_rows(result: MetricsResult) -> List[Row]:
    """Return (key, value) rows in export order."""
    if isinstance(result, QueueError):
        return [("error", result.message)]

    rows: List[Row] = [("model", result.model), ("lambda", result.lam), ("mu", result.mu)]
    if isinstance(result, MMCMetrics):
        rows += [("servers", result.c), ("r", result.r)]
    rows.append(("rho", result.rho))
    if isinstance(result, MMCMetrics):
        rows += [("p0", result.p0), ("Pw", result.Pw)]
    rows += [("Lq", result.Lq), ("L", result.L), ("Wq", result.Wq), ("W", result.W)]
    return rows


def default_csv_name(now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now()).isoformat()
    return "queue-results-" + stamp.replace(":", "-").replace(".", "-") + ".csv"


def write_result_csv(result: MetricsResult, path: Path) -> Path:
    """Write the export rows as a headerless, fully quoted two-column CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(result_rows(result), columns=["key", "value"])
    df.to_csv(path, index=False, header=False, quoting=csv.QUOTE_ALL)
    return path
