"""
Simple Relative-Risk Models
===========================

Linear and log-linear exposure-response forms, plus the attributable
fraction formulas that go with them.

These are interchangeable with the Nasari curve: each exposes
``hr(z)`` and therefore satisfies ExposureResponseModel.

Formulas:
    log-linear:  HR(z) = exp(beta * z)
    linear:      HR(z) = 1 + beta * z
    attributable_fraction(rr) = (rr - 1) / rr
    deaths_from_rr(rr, p, I) = attributable_fraction(rr) * p * I

Cohort studies usually report a relative risk per concentration
increment (e.g. RR = 1.06 per 10 µg/m³). ``from_relative_risk`` converts
that into the per-unit slope beta.
"""

import math
from dataclasses import dataclass

from epi_impact.errors import InvalidModelError
from epi_impact.numeric import ieee_divide, safe_exp


def _check_increment(rr: float, increment: float) -> None:
    if not math.isfinite(rr) or rr <= 0:
        raise InvalidModelError(f"rr must be finite and positive, got {rr}")
    if not math.isfinite(increment) or increment == 0:
        raise InvalidModelError(f"increment must be finite and non-zero, got {increment}")


@dataclass(frozen=True, slots=True)
class LogLinear:
    """
    Log-linear exposure-response model, HR(z) = exp(beta * z).

    Attributes:
        beta: Change in log hazard ratio per unit concentration
    """

    beta: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.beta):
            raise InvalidModelError(f"beta must be finite, got {self.beta}")

    @classmethod
    def from_relative_risk(cls, rr: float, increment: float) -> "LogLinear":
        """
        Build from a relative risk reported per concentration increment.

        Args:
            rr: Relative risk for one increment (e.g. 1.06)
            increment: Concentration increment rr refers to (e.g. 10.0)
        """
        _check_increment(rr, increment)
        return cls(beta=math.log(rr) / increment)

    def hr(self, z: float) -> float:
        return safe_exp(self.beta * z)


@dataclass(frozen=True, slots=True)
class Linear:
    """
    Linear exposure-response model, HR(z) = 1 + beta * z.

    Attributes:
        beta: Change in hazard ratio per unit concentration
    """

    beta: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.beta):
            raise InvalidModelError(f"beta must be finite, got {self.beta}")

    @classmethod
    def from_relative_risk(cls, rr: float, increment: float) -> "Linear":
        """Build from a relative risk reported per concentration increment."""
        _check_increment(rr, increment)
        return cls(beta=(rr - 1.0) / increment)

    def hr(self, z: float) -> float:
        return 1.0 + self.beta * z


def attributable_fraction(rr: float) -> float:
    """
    Fraction of incidence attributable to exposure, (rr - 1) / rr.

    rr == 0 yields -inf (IEEE-754), not an exception.
    """
    return ieee_divide(rr - 1.0, rr)


def deaths_from_rr(rr: float, population: float, incidence: float) -> float:
    """
    Attributable outcome count from a relative risk.

    Here incidence is the OBSERVED rate (at the exposed concentration),
    so the attributable fraction is applied to it directly.

    Args:
        rr: Relative risk at the exposure of interest
        population: Exposed population
        incidence: Observed incidence rate (per person)

    Returns:
        Number of attributable outcomes
    """
    return attributable_fraction(rr) * population * incidence
