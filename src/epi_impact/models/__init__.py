"""
Data Models
===========

Input and result models for the epi_impact package.

Models:
    Input:
        - Region: Index-aligned populations and concentrations with
          one observed incidence rate

    Output:
        - ScenarioResult: Baseline and scenario-delta outcome counts
"""

from epi_impact.models.region import Region
from epi_impact.models.scenario import ScenarioResult

__all__ = [
    # Input
    "Region",
    # Output
    "ScenarioResult",
]
