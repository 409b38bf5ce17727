"""Closed-form metrics for the M/M/c queue (Erlang-C)."""

from __future__ import annotations

from .metrics import check_rates, factorial, power
from .results import MetricsResult, MMCMetrics, invalid_server_count, unstable


def server_count(c) -> int | None:
    """Return c as an int when it is a whole number >= 1, else None."""
    if isinstance(c, bool):
        return None
    try:
        if int(c) != c:
            return None
    except (TypeError, ValueError, OverflowError):
        return None
    return int(c) if c >= 1 else None


def evaluate_multi_server(lam: float, mu: float, c: int) -> MetricsResult:
    """
    Compute M/M/c steady-state metrics with the direct Erlang-C formulas.

    The factorial and power terms are not rescaled: past c = 170 (or for a
    large offered load) they overflow to ``inf`` and p0 collapses to 0.
    Those values are returned as computed.
    """
    servers = server_count(c)
    if servers is None:
        return invalid_server_count()

    error = check_rates(lam, mu)
    if error is not None:
        return error

    r = lam / mu
    rho = r / servers
    if rho >= 1.0:
        return unstable()

    idle = 1.0 - rho
    sum_terms = sum(power(r, n) / factorial(n) for n in range(servers))
    r_c = power(r, servers)
    c_fact = factorial(servers)
    last = r_c / (c_fact * idle)
    p0 = 1.0 / (sum_terms + last)
    Pw = last * p0

    Lq = (r_c * rho) / (c_fact * idle * idle) * p0
    L = Lq + r
    Wq = Lq / lam if lam > 0 else 0.0
    W = Wq + 1.0 / mu

    return MMCMetrics(
        lam=lam, mu=mu, c=servers, r=r, rho=rho, p0=p0, Pw=Pw, Lq=Lq, L=L, Wq=Wq, W=W
    )
