"""Unit tests for analytical M/M/1 metrics."""

import math

import pytest

from queuecalc.metrics import (
    evaluate_single_server,
    factorial,
    power,
    relative_error,
    traffic_intensity,
)
from queuecalc.results import ErrorKind, MM1Metrics, QueueError, is_error


def test_traffic_intensity_basic_value():
    assert math.isclose(traffic_intensity(0.5, 1.0), 0.5)


def test_traffic_intensity_requires_positive_mu():
    with pytest.raises(ValueError):
        traffic_intensity(0.5, 0.0)


def test_single_server_matches_known_case():
    result = evaluate_single_server(2.0, 5.0)
    assert isinstance(result, MM1Metrics)
    assert result.model == "M/M/1"
    assert result.rho == pytest.approx(0.4, abs=1e-3)
    assert result.Lq == pytest.approx(0.2667, abs=1e-3)
    assert result.L == pytest.approx(0.6667, abs=1e-3)
    assert result.Wq == pytest.approx(0.1333, abs=1e-3)
    assert result.W == pytest.approx(0.3333, abs=1e-3)


@pytest.mark.parametrize("lam,mu", [(0.1, 1.0), (0.5, 1.0), (2.0, 5.0), (9.99, 10.0), (3.0, 7.5)])
def test_single_server_identities(lam, mu):
    result = evaluate_single_server(lam, mu)
    assert not is_error(result)
    assert 0 <= result.rho < 1
    assert math.isclose(result.Lq, result.rho**2 / (1 - result.rho), rel_tol=1e-9)
    assert math.isclose(result.L, result.Lq + result.rho, rel_tol=1e-9)
    assert math.isclose(result.L, lam * result.W, rel_tol=1e-9)  # Little's law
    assert math.isclose(result.Lq, lam * result.Wq, rel_tol=1e-9)


@pytest.mark.parametrize("lam,mu", [(1.0, 1.0), (5.0, 3.0), (10.0, 2.0), (3.0, 3.0)])
def test_single_server_unstable_including_boundary(lam, mu):
    result = evaluate_single_server(lam, mu)
    assert isinstance(result, QueueError)
    assert result.kind is ErrorKind.UNSTABLE
    assert result.message == "System unstable (ρ >= 1)"


def test_single_server_idle_limit_at_zero_arrivals():
    result = evaluate_single_server(0.0, 4.0)
    assert isinstance(result, MM1Metrics)
    assert result.rho == 0.0
    assert result.Lq == 0.0
    assert result.Wq == 0.0
    assert result.W == pytest.approx(0.25)


@pytest.mark.parametrize(
    "lam,mu", [(1.0, 0.0), (1.0, -2.0), (-0.5, 1.0), (float("nan"), 1.0), (1.0, float("inf"))]
)
def test_single_server_rejects_degenerate_input_as_value(lam, mu):
    result = evaluate_single_server(lam, mu)
    assert isinstance(result, QueueError)
    assert result.kind is ErrorKind.INVALID_INPUT


def test_factorial_edges():
    assert factorial(0) == 1.0
    assert factorial(5) == 120.0
    assert math.isnan(factorial(-1))
    assert math.isfinite(factorial(170))
    assert math.isinf(factorial(171))


def test_power_overflows_to_infinity():
    assert math.isinf(power(10.0, 400))
    assert power(0.0, 0) == 1.0


def test_relative_error_guard_zero_reference():
    assert relative_error(0.0, 0.0) == 0.0
    assert math.isinf(relative_error(1.0, 0.0))
    assert math.isclose(relative_error(1.1, 1.0), 0.1)
