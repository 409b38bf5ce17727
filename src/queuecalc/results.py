"""Result records returned by the analytic queue evaluators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class ErrorKind(str, Enum):
    UNSTABLE = "unstable"
    INVALID_SERVER_COUNT = "invalid_server_count"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class QueueError:
    """Failed evaluation: the system is unstable or the input is out of domain."""

    kind: ErrorKind
    message: str

    def as_dict(self) -> Dict[str, str]:
        return {"error": self.message}


@dataclass(frozen=True)
class MM1Metrics:
    """Steady-state metrics of a stable M/M/1 system."""

    lam: float
    mu: float
    rho: float
    Lq: float
    L: float
    Wq: float
    W: float

    @property
    def model(self) -> str:
        return "M/M/1"

    def as_dict(self) -> Dict[str, Union[str, float]]:
        """Return the record keyed by the external field names."""
        return {
            "model": self.model,
            "lambda": self.lam,
            "mu": self.mu,
            "rho": self.rho,
            "Lq": self.Lq,
            "L": self.L,
            "Wq": self.Wq,
            "W": self.W,
        }


@dataclass(frozen=True)
class MMCMetrics:
    """Steady-state metrics of a stable M/M/c (Erlang-C) system."""

    lam: float
    mu: float
    c: int
    r: float
    rho: float
    p0: float
    Pw: float
    Lq: float
    L: float
    Wq: float
    W: float

    @property
    def model(self) -> str:
        return f"M/M/{self.c}"

    def as_dict(self) -> Dict[str, Union[str, float]]:
        return {
            "model": self.model,
            "lambda": self.lam,
            "mu": self.mu,
            "c": self.c,
            "r": self.r,
            "rho": self.rho,
            "p0": self.p0,
            "Pw": self.Pw,
            "Lq": self.Lq,
            "L": self.L,
            "Wq": self.Wq,
            "W": self.W,
        }


Metrics = Union[MM1Metrics, MMCMetrics]
MetricsResult = Union[MM1Metrics, MMCMetrics, QueueError]

UNSTABLE_MESSAGE = "System unstable (ρ >= 1)"
SERVER_COUNT_MESSAGE = "c must be >= 1"


def is_error(result: MetricsResult) -> bool:
    return isinstance(result, QueueError)


def unstable() -> QueueError:
    return QueueError(ErrorKind.UNSTABLE, UNSTABLE_MESSAGE)


def invalid_server_count() -> QueueError:
    return QueueError(ErrorKind.INVALID_SERVER_COUNT, SERVER_COUNT_MESSAGE)
