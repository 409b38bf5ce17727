"""Closed-form performance metrics for an M/M/1 queue."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .results import ErrorKind, MetricsResult, MM1Metrics, QueueError, unstable


def factorial(n: int) -> float:
    """Return n! as a float; ``inf`` past the double range, ``nan`` for n < 0."""
    if n < 0:
        return float("nan")
    result = 1.0
    for k in range(2, n + 1):
        result *= k
    return result


def power(base: float, exponent: int) -> float:
    """Return base**exponent, overflowing to ``inf`` instead of raising."""
    with np.errstate(over="ignore"):
        return float(np.float64(base) ** exponent)


def check_rates(lam: float, mu: float) -> Optional[QueueError]:
    """Return the input error for (lam, mu), or None when both are usable."""
    if not (math.isfinite(lam) and math.isfinite(mu)):
        return QueueError(ErrorKind.INVALID_INPUT, "lambda and mu must be finite")
    if mu <= 0:
        return QueueError(ErrorKind.INVALID_INPUT, "mu must be > 0")
    if lam < 0:
        return QueueError(ErrorKind.INVALID_INPUT, "lambda must be >= 0")
    return None


def traffic_intensity(lam: float, mu: float) -> float:
    """Return the traffic intensity λ/μ validating the input domain."""
    error = check_rates(lam, mu)
    if error is not None:
        raise ValueError(error.message)
    return lam / mu


def evaluate_single_server(lam: float, mu: float) -> MetricsResult:
    """
    Compute steady-state M/M/1 metrics.

    Returns a ``QueueError`` instead of raising when ρ ≥ 1 (ρ = 1 included)
    or when the rates are out of domain. With λ = 0 the idle-system limit
    is returned (no queue, W = 1/μ).
    """
    error = check_rates(lam, mu)
    if error is not None:
        return error

    rho = lam / mu
    if rho >= 1.0:
        return unstable()

    if lam == 0:
        return MM1Metrics(lam=lam, mu=mu, rho=0.0, Lq=0.0, L=0.0, Wq=0.0, W=1.0 / mu)

    denom = 1.0 - rho
    Lq = (rho * rho) / denom
    L = rho / denom
    Wq = Lq / lam
    W = 1.0 / (mu - lam)
    return MM1Metrics(lam=lam, mu=mu, rho=rho, Lq=Lq, L=L, Wq=Wq, W=W)


def relative_error(sim_value: float, reference_value: float) -> float:
    """Return |sim-ref| / ref guarding division by zero."""
    if reference_value == 0:
        return 0.0 if sim_value == 0 else float("inf")
    return abs(sim_value - reference_value) / abs(reference_value)
