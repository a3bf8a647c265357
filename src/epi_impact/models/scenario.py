"""
Scenario Models
===============

Result types for concentration-change scenarios.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True, slots=True)
class ScenarioResult:
    """
    Attributable outcomes for a region under concentration scenarios.

    Produced by ScenarioRunner.

    Attributes:
        region: Region name
        method: Underlying incidence strategy ("regional" or "local")
        underlying_incidence: Regional underlying rate, None for "local"
            (each location then has its own rate)
        baseline: Outcomes attributable to current concentrations
        deltas: Change in outcomes per scenario label, relative to
            baseline. Negative values are avoided outcomes.
    """

    region: str
    method: str
    underlying_incidence: Optional[float]
    baseline: float
    deltas: Dict[str, float] = field(default_factory=dict)

    def __repr__(self) -> str:
        deltas = ", ".join(f"{k}={v:+.1f}" for k, v in self.deltas.items())
        return (
            f"ScenarioResult({self.region}, {self.method}, "
            f"baseline={self.baseline:.1f}, {deltas})"
        )

    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "region": self.region,
            "method": self.method,
            "underlying_incidence": self.underlying_incidence,
            "baseline": round(self.baseline, 4),
            "deltas": {k: round(v, 4) for k, v in self.deltas.items()},
        }
