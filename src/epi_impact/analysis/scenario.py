"""
Scenario Runner
===============

Attributable outcomes for a region under concentration-change scenarios.

This runner:
    - Takes a Region and an exposure-response model
    - Recovers the underlying incidence (regional or per location)
    - Sums attributable outcomes at current concentrations (baseline)
    - For each scale factor, sums the change in outcomes when every
      concentration is multiplied by that factor

Methods:
    regional: One population-weighted underlying rate for the region
              (io_regional). Preferred when locations share one
              observed incidence rate.
    local:    Each location back-calculates its own rate from its own
              concentration (io).

Formula (per scenario s):
    delta_s = sum_i outcome(p_i, s * z_i, Io_i) - outcome(p_i, z_i, Io_i)
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional

from epi_impact.incidence.engine import io, outcome
from epi_impact.models.region import Region
from epi_impact.models.scenario import ScenarioResult
from epi_impact.response.base import ExposureResponseModel

if TYPE_CHECKING:
    from epi_impact.config import Settings


logger = logging.getLogger(__name__)

METHODS = ("regional", "local")
DEFAULT_SCALE_FACTORS: Dict[str, float] = {"double": 2.0, "half": 0.5}


class ScenarioRunner:
    """
    Evaluates concentration-change scenarios for regions.

    Stateless between runs; one runner can be shared across regions
    and threads.

    Attributes:
        model: Exposure-response model
        method: "regional" or "local"
        scale_factors: Scenario label -> concentration multiplier

    Example:
        runner = ScenarioRunner(NASARI_ACS, method="regional")
        result = runner.run(region)
        print(result.baseline, result.deltas["double"])
    """

    def __init__(
        self,
        model: ExposureResponseModel,
        method: str = "regional",
        scale_factors: Optional[Dict[str, float]] = None,
    ) -> None:
        """
        Initialize scenario runner.

        Args:
            model: Exposure-response model used for every evaluation
            method: Underlying incidence strategy, "regional" or "local"
            scale_factors: Scenario label -> concentration multiplier.
                Defaults to doubling and halving.

        Raises:
            ValueError: If method is unknown
        """
        if method not in METHODS:
            raise ValueError(f"method must be one of {METHODS}, got {method!r}")

        self.model = model
        self.method = method
        self.scale_factors = dict(
            DEFAULT_SCALE_FACTORS if scale_factors is None else scale_factors
        )

        logger.info(
            f"ScenarioRunner initialized: model={model!r}, method={method}, "
            f"scenarios={list(self.scale_factors)}"
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ScenarioRunner":
        """Build a runner from loaded configuration."""
        from epi_impact.config import build_model

        return cls(
            model=build_model(settings),
            method=settings.scenario.method,
            scale_factors=settings.scenario.scale_factors,
        )

    def underlying_rates(self, region: Region) -> List[float]:
        """
        Underlying incidence rate for each location of the region.

        With the regional method every location gets the same rate.
        """
        if self.method == "regional":
            rate = region.underlying_incidence(self.model)
            return [rate] * region.num_locations
        return [io(z, self.model, region.incidence) for z in region.concentrations]

    def run(self, region: Region) -> ScenarioResult:
        """
        Evaluate the baseline and every scenario for a region.

        Args:
            region: Populations, concentrations and observed incidence

        Returns:
            ScenarioResult with baseline outcomes and per-scenario deltas
        """
        if self.method == "regional":
            regional_rate = region.underlying_incidence(self.model)
            rates = [regional_rate] * region.num_locations
        else:
            regional_rate = None
            rates = self.underlying_rates(region)
        locations = list(zip(region.populations, region.concentrations, rates))

        current = [outcome(p, z, rate, self.model) for p, z, rate in locations]
        baseline = float(sum(current))

        deltas = {}
        for label, factor in self.scale_factors.items():
            deltas[label] = float(sum(
                outcome(p, z * factor, rate, self.model) - base
                for (p, z, rate), base in zip(locations, current)
            ))

        result = ScenarioResult(
            region=region.name,
            method=self.method,
            underlying_incidence=regional_rate,
            baseline=baseline,
            deltas=deltas,
        )

        logger.info(
            f"Scenario [{region.name}]: baseline={baseline:.1f}, "
            + ", ".join(f"{k}={v:+.1f}" for k, v in deltas.items())
        )
        return result
