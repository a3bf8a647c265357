"""
Region Models
=============

Input data contract for regional health impact calculations.

A region is a set of locations that share one observed incidence
rate. Each location has a population and a concentration.

Example:
    from epi_impact.models import Region

    region = Region(
        name="example",
        populations=[100000, 80000, 700000, 90000],
        concentrations=[12, 26, 11, 2],
        incidence=800 / 100000,
    )
"""

from typing import List

from pydantic import BaseModel, Field, model_validator

from epi_impact.incidence.engine import io_regional
from epi_impact.response.base import ExposureResponseModel


class Region(BaseModel):
    """
    Population and concentration samples for one region.

    Attributes:
        name: Region identifier
        populations: Population at each location
        concentrations: Pollutant concentration at each location
        incidence: Observed incidence rate for the region (per person)
    """

    name: str = Field(default="region", description="Region identifier")

    populations: List[float] = Field(
        default_factory=list,
        description="Population at each location (non-negative)",
    )

    concentrations: List[float] = Field(
        default_factory=list,
        description="Concentration at each location, index-aligned with populations",
    )

    incidence: float = Field(
        ...,
        description="Observed incidence rate for the region (per person per period)",
    )

    @model_validator(mode="after")
    def _check_alignment(self) -> "Region":
        if len(self.populations) != len(self.concentrations):
            raise ValueError(
                f"populations and concentrations must have equal length. "
                f"Got: {len(self.populations)} vs {len(self.concentrations)}"
            )
        if any(p < 0 for p in self.populations):
            raise ValueError("populations must be non-negative")
        return self

    @property
    def total_population(self) -> float:
        """Sum of location populations."""
        return float(sum(self.populations))

    @property
    def num_locations(self) -> int:
        """Number of locations in the region."""
        return len(self.populations)

    def underlying_incidence(self, model: ExposureResponseModel) -> float:
        """Population-weighted underlying incidence for this region."""
        return io_regional(self.populations, self.concentrations, model, self.incidence)
