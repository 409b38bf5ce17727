"""Named input presets for the command line tools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from .sweep import ModelKind


@dataclass(frozen=True)
class Scenario:
    name: str
    model: ModelKind
    lam: float
    mu: float
    c: int = 1


SCENARIOS: Dict[str, Scenario] = {
    "example": Scenario(name="example", model=ModelKind.MMC, lam=5.0, mu=3.0, c=3),  # ρ ≈ 0.56
    "light": Scenario(name="light", model=ModelKind.MM1, lam=2.0, mu=5.0),  # ρ = 0.40
    "overload": Scenario(name="overload", model=ModelKind.MM1, lam=5.0, mu=3.0),  # ρ ≈ 1.67
}


def list_scenarios() -> Iterable[str]:
    """Return available scenario identifiers."""
    return sorted(SCENARIOS.keys())


def get_scenario(name: str) -> Scenario:
    key = name.lower()
    if key not in SCENARIOS:
        raise KeyError(f"Scenario '{name}' is not defined. Available: {list(list_scenarios())}")
    return SCENARIOS[key]
