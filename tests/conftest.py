"""
Test Configuration
==================

Pytest fixtures and test configuration for epi_impact.
"""

import pytest


class ConstantModel:
    """Exposure-response model with the same hazard ratio everywhere."""

    def __init__(self, value: float) -> None:
        self.value = value

    def hr(self, z: float) -> float:
        return self.value


@pytest.fixture
def example_populations():
    """Population at each location of the worked example region."""
    return [100000.0, 80000.0, 700000.0, 90000.0]


@pytest.fixture
def example_concentrations():
    """PM2.5 concentration (µg/m³) at each location of the example region."""
    return [12.0, 26.0, 11.0, 2.0]


@pytest.fixture
def example_incidence():
    """Observed all-cause mortality rate (per person per year)."""
    return 800 / 100000


@pytest.fixture
def example_region(example_populations, example_concentrations, example_incidence):
    """Provide the worked example as a Region."""
    from epi_impact.models import Region

    return Region(
        name="example",
        populations=example_populations,
        concentrations=example_concentrations,
        incidence=example_incidence,
    )


@pytest.fixture
def zero_model():
    """Model whose hazard ratio is always zero."""
    return ConstantModel(0.0)


@pytest.fixture
def unit_model():
    """Model with no excess risk at any concentration."""
    return ConstantModel(1.0)
