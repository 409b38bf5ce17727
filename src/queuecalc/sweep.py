"""Sample a metric over a range of arrival rates for plotting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from .metrics import evaluate_single_server
from .metrics_mmc import evaluate_multi_server, server_count
from .results import MetricsResult, MM1Metrics, MMCMetrics, QueueError

LAMBDA_FLOOR = 1e-6
DEFAULT_POINTS = 100


class Metric(str, Enum):
    """Numeric fields of a metrics record, by their external names."""

    LAMBDA = "lambda"
    MU = "mu"
    C = "c"
    R = "r"
    RHO = "rho"
    P0 = "p0"
    PW = "Pw"
    LQ = "Lq"
    L = "L"
    WQ = "Wq"
    W = "W"

    @classmethod
    def parse(cls, name: "str | Metric") -> "Metric":
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown metric '{name}'. Available: {valid}") from None


class ModelKind(str, Enum):
    MM1 = "mm1"
    MMC = "mmc"

    @classmethod
    def parse(cls, name: "str | ModelKind") -> "ModelKind":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            raise ValueError(f"Unknown model '{name}'. Use 'mm1' or 'mmc'.") from None


MM1_ACCESSORS: Dict[Metric, Callable[[MM1Metrics], float]] = {
    Metric.LAMBDA: lambda m: m.lam,
    Metric.MU: lambda m: m.mu,
    Metric.RHO: lambda m: m.rho,
    Metric.LQ: lambda m: m.Lq,
    Metric.L: lambda m: m.L,
    Metric.WQ: lambda m: m.Wq,
    Metric.W: lambda m: m.W,
}

MMC_ACCESSORS: Dict[Metric, Callable[[MMCMetrics], float]] = {
    Metric.LAMBDA: lambda m: m.lam,
    Metric.MU: lambda m: m.mu,
    Metric.C: lambda m: float(m.c),
    Metric.R: lambda m: m.r,
    Metric.RHO: lambda m: m.rho,
    Metric.P0: lambda m: m.p0,
    Metric.PW: lambda m: m.Pw,
    Metric.LQ: lambda m: m.Lq,
    Metric.L: lambda m: m.L,
    Metric.WQ: lambda m: m.Wq,
    Metric.W: lambda m: m.W,
}

ACCESSORS = {ModelKind.MM1: MM1_ACCESSORS, ModelKind.MMC: MMC_ACCESSORS}


def accessor_for(metric: "str | Metric", model: "str | ModelKind") -> Callable:
    """Return the getter of ``metric`` for ``model``; ValueError if it has no such field."""
    metric = Metric.parse(metric)
    model = ModelKind.parse(model)
    try:
        return ACCESSORS[model][metric]
    except KeyError:
        raise ValueError(f"Metric '{metric.value}' is not defined for model '{model.value}'.") from None


def metric_value(result: MetricsResult, metric: "str | Metric") -> Optional[float]:
    """Pull ``metric`` out of a result; None when the result is an error."""
    if isinstance(result, QueueError):
        return None
    model = ModelKind.MMC if isinstance(result, MMCMetrics) else ModelKind.MM1
    return accessor_for(metric, model)(result)


@dataclass(frozen=True)
class SweepPoint:
    """One sample of the curve; ``value`` is None where the system is unstable."""

    lam: float
    value: Optional[float]

    @property
    def stable(self) -> bool:
        return self.value is not None


def lambda_grid(lambda_max: float, point_count: int) -> List[float]:
    """Return ``point_count`` evenly spaced rates from LAMBDA_FLOOR to ``lambda_max``."""
    if not math.isfinite(lambda_max) or lambda_max <= 0:
        raise ValueError("lambda_max must be a finite value > 0.")
    if point_count < 2:
        raise ValueError("point_count must be >= 2.")
    return [float(x) for x in np.linspace(LAMBDA_FLOOR, lambda_max, int(point_count))]


def sample_metric(
    metric: "str | Metric",
    model: "str | ModelKind",
    mu: float,
    c: Optional[int],
    lambda_max: float,
    point_count: int = DEFAULT_POINTS,
) -> List[SweepPoint]:
    """
    Evaluate the selected model at each rate of the λ grid.

    Raises:
        ValueError: unknown metric/model, a metric the model does not have,
                    or sweep bounds outside their domain (mu <= 0,
                    lambda_max <= 0, point_count < 2, c < 1 for mmc).
    """
    model = ModelKind.parse(model)
    getter = accessor_for(metric, model)
    if not math.isfinite(mu) or mu <= 0:
        raise ValueError("Service rate mu must be strictly positive.")
    servers = server_count(c) if model is ModelKind.MMC else None
    if model is ModelKind.MMC and servers is None:
        raise ValueError("Number of servers c must be an integer >= 1.")

    points = []
    for lam in lambda_grid(lambda_max, point_count):
        if model is ModelKind.MMC:
            result = evaluate_multi_server(lam, mu, servers)
        else:
            result = evaluate_single_server(lam, mu)
        value = None if isinstance(result, QueueError) else float(getter(result))
        points.append(SweepPoint(lam=lam, value=value))
    return points


def sweep_frame(points: Sequence[SweepPoint], metric: "str | Metric") -> pd.DataFrame:
    """Tabulate a sweep; unstable samples become NaN so charts leave a gap."""
    name = Metric.parse(metric).value
    return pd.DataFrame(
        {
            "lambda": [p.lam for p in points],
            name: [p.value if p.stable else np.nan for p in points],
        }
    )
