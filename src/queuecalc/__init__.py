"""Steady-state M/M/1 and M/M/c (Erlang-C) queue calculator."""

from .metrics import evaluate_single_server, factorial, relative_error, traffic_intensity
from .metrics_mmc import evaluate_multi_server
from .mmc_core import SimParams, SimulationResult, run_mmc
from .report import format_result, result_rows, write_result_csv
from .results import (
    ErrorKind,
    MetricsResult,
    MM1Metrics,
    MMCMetrics,
    QueueError,
    is_error,
)
from .scenarios import Scenario, get_scenario, list_scenarios
from .sweep import (
    DEFAULT_POINTS,
    LAMBDA_FLOOR,
    Metric,
    ModelKind,
    SweepPoint,
    lambda_grid,
    metric_value,
    sample_metric,
    sweep_frame,
)

__all__ = [
    "DEFAULT_POINTS",
    "ErrorKind",
    "LAMBDA_FLOOR",
    "Metric",
    "MetricsResult",
    "MM1Metrics",
    "MMCMetrics",
    "ModelKind",
    "QueueError",
    "Scenario",
    "SimParams",
    "SimulationResult",
    "SweepPoint",
    "evaluate_multi_server",
    "evaluate_single_server",
    "factorial",
    "format_result",
    "get_scenario",
    "is_error",
    "lambda_grid",
    "list_scenarios",
    "metric_value",
    "relative_error",
    "result_rows",
    "run_mmc",
    "sample_metric",
    "sweep_frame",
    "traffic_intensity",
    "write_result_csv",
]
