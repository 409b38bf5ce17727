"""Discrete-event replication of an M/M/c queue used to cross-check the formulas."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

import numpy as np
import simpy


@dataclass(frozen=True)
class SimParams:
    """Parameters of one replication."""

    lam: float
    mu: float
    c: int
    seed: int
    warmup: float
    horizon: float

    def __post_init__(self) -> None:
        if self.lam < 0:
            raise ValueError("Arrival rate lam must be non-negative.")
        if self.mu <= 0:
            raise ValueError("Service rate mu must be strictly positive.")
        if self.c < 1:
            raise ValueError("Number of servers c must be >= 1.")
        if self.horizon <= 0:
            raise ValueError("Simulation horizon must be positive.")
        if not 0 <= self.warmup < self.horizon:
            raise ValueError("Warm-up period must be in [0, horizon).")


@dataclass
class SimulationResult:
    """Aggregated outputs of one replication."""

    lam: float
    mu: float
    c: int
    seed: int
    L: float
    Lq: float
    W: float
    Wq: float
    Pw: float
    utilization: float
    lambda_hat: float
    n_samples: int
    little_L_error: float
    little_Lq_error: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass
class _Tally:
    wait_samples: List[float] = field(default_factory=list)
    system_samples: List[float] = field(default_factory=list)
    waited: int = 0
    arrivals: int = 0
    in_system: int = 0
    busy: int = 0
    area_L: float = 0.0
    area_Lq: float = 0.0
    area_busy: float = 0.0
    last_time: float = 0.0


class MMCSystem:
    """SimPy processes plus time-weighted counters restricted to [warmup, horizon]."""

    def __init__(self, env: simpy.Environment, params: SimParams):
        self.env = env
        self.params = params
        self.rng = np.random.default_rng(seed=params.seed)
        self.servers = simpy.Resource(env, capacity=params.c)
        self.tally = _Tally()

    def _exp(self, rate: float) -> float:
        return self.rng.exponential(1.0 / rate)

    def arrivals(self):
        if self.params.lam == 0:
            return
        while True:
            yield self.env.timeout(self._exp(self.params.lam))
            if self.env.now > self.params.horizon:
                break
            self.env.process(self._job())

    def _job(self):
        arrived = self.env.now
        observed = arrived >= self.params.warmup
        self.advance()
        self.tally.in_system += 1
        if observed:
            self.tally.arrivals += 1

        with self.servers.request() as req:
            yield req
            self.advance()
            wait = self.env.now - arrived
            self.tally.busy += 1

            yield self.env.timeout(self._exp(self.params.mu))
            self.advance()
            self.tally.busy -= 1
            self.tally.in_system -= 1

        if observed:
            self.tally.wait_samples.append(wait)
            self.tally.system_samples.append(self.env.now - arrived)
            if wait > 0:
                self.tally.waited += 1

    def advance(self, until: Optional[float] = None) -> None:
        """Accumulate the state areas since the previous event."""
        now = self.env.now if until is None else until
        start = max(self.tally.last_time, self.params.warmup)
        end = min(now, self.params.horizon)
        self.tally.last_time = now
        dt = end - start
        if dt <= 0:
            return
        queued = max(self.tally.in_system - self.tally.busy, 0)
        self.tally.area_L += self.tally.in_system * dt
        self.tally.area_Lq += queued * dt
        self.tally.area_busy += self.tally.busy * dt


def _gap(measured: float, little: float) -> float:
    return 0.0 if measured == 0 else abs(measured - little) / measured


def run_mmc(params: SimParams) -> SimulationResult:
    """Run one replication and return its time and customer averages."""
    env = simpy.Environment()
    system = MMCSystem(env, params)
    env.process(system.arrivals())
    env.run(until=params.horizon)
    system.advance(until=params.horizon)

    tally = system.tally
    obs_time = params.horizon - params.warmup
    L = tally.area_L / obs_time
    Lq = tally.area_Lq / obs_time
    utilization = tally.area_busy / obs_time / params.c
    lambda_hat = tally.arrivals / obs_time

    n = len(tally.system_samples)
    W = float(np.mean(tally.system_samples)) if n else 0.0
    Wq = float(np.mean(tally.wait_samples)) if n else 0.0
    Pw = tally.waited / n if n else 0.0

    return SimulationResult(
        lam=params.lam,
        mu=params.mu,
        c=params.c,
        seed=params.seed,
        L=L,
        Lq=Lq,
        W=W,
        Wq=Wq,
        Pw=Pw,
        utilization=utilization,
        lambda_hat=lambda_hat,
        n_samples=n,
        little_L_error=_gap(L, lambda_hat * W),
        little_Lq_error=_gap(Lq, lambda_hat * Wq),
    )
