"""
Exposure-Response Module
========================

Hazard ratio models mapping pollutant concentration to relative risk.

This module provides:
    - ExposureResponseModel: Protocol every model satisfies
    - Nasari: Non-linear exponential-logistic model
    - NASARI_ACS: Reference model for ACS CPS-II all-cause mortality
    - LogLinear, Linear: Simple relative-risk forms

Design Philosophy:
    The incidence engine only ever calls ``model.hr(z)``. Model
    families are composed from coefficients plus a transform, never
    inherited from one another.
"""

from epi_impact.response.base import ExposureResponseModel
from epi_impact.response.nasari import (
    NASARI_ACS,
    NASARI_ACS_DELTA,
    NASARI_ACS_GAMMA,
    NASARI_ACS_LAMBDA,
    Nasari,
    identity,
    log_plus_one,
)
from epi_impact.response.relative_risk import (
    Linear,
    LogLinear,
    attributable_fraction,
    deaths_from_rr,
)

__all__ = [
    # Protocol
    "ExposureResponseModel",
    # Nasari
    "Nasari",
    "NASARI_ACS",
    "NASARI_ACS_GAMMA",
    "NASARI_ACS_DELTA",
    "NASARI_ACS_LAMBDA",
    "log_plus_one",
    "identity",
    # Simple relative risk
    "LogLinear",
    "Linear",
    "attributable_fraction",
    "deaths_from_rr",
]
