"""
epi_impact
==========

Health impacts attributable to ambient air pollution exposure.

This package translates pollutant concentrations, population and
observed incidence into counts of attributable health outcomes using
published epidemiological exposure-response models.

Components:
    - response: Hazard ratio models (Nasari, log-linear, linear)
    - incidence: Underlying incidence back-calculation and outcomes
    - models: Region input and scenario result types
    - analysis: Concentration-change scenario runner
    - config: YAML/environment configuration and logging setup

Example:
    from epi_impact import NASARI_ACS, io_regional, outcome

    p = [100000, 80000, 700000, 90000]
    z = [12, 26, 11, 2]
    rate = io_regional(p, z, NASARI_ACS, 800 / 100000)
    deaths = sum(outcome(pi, zi, rate, NASARI_ACS) for pi, zi in zip(p, z))
"""

__version__ = "0.1.0"

from epi_impact.errors import EpiError, InvalidModelError, LengthMismatchError
from epi_impact.response import (
    NASARI_ACS,
    ExposureResponseModel,
    Linear,
    LogLinear,
    Nasari,
    attributable_fraction,
    deaths_from_rr,
    log_plus_one,
)
from epi_impact.incidence import io, io_regional, outcome
from epi_impact.models import Region, ScenarioResult
from epi_impact.analysis import ScenarioRunner
from epi_impact.config import Settings, build_model, load_config

__all__ = [
    "__version__",
    # Errors
    "EpiError",
    "InvalidModelError",
    "LengthMismatchError",
    # Exposure-response
    "ExposureResponseModel",
    "Nasari",
    "NASARI_ACS",
    "log_plus_one",
    "LogLinear",
    "Linear",
    "attributable_fraction",
    "deaths_from_rr",
    # Incidence
    "io",
    "io_regional",
    "outcome",
    # Models
    "Region",
    "ScenarioResult",
    # Analysis
    "ScenarioRunner",
    # Config
    "Settings",
    "load_config",
    "build_model",
]
