"""
Nasari Exposure-Response Models
===============================

Non-linear exponential-logistic hazard ratio curves.

Implements the class of simple approximations to exposure-response
models described in:

    Nasari M, Szyszkowicz M, Chen H, Crouse D, Turner MC, Jerrett M,
    Pope CA III, Hubbell B, Fann N, Cohen A, Gapstur SM, Diver WR,
    Forouzanfar MH, Kim S-Y, Olives C, Krewski D, Burnett RT. (2015).
    A Class of Non-Linear Exposure-Response Models Suitable for Health
    Impact Assessment Applicable to Large Cohort Studies of Ambient Air
    Pollution. Air Quality, Atmosphere, and Health.
    DOI: 10.1007/s11869-016-0398-z.

Formula:
    HR(z) = exp( gamma * F(z) / (1 + exp(-(z - delta) / lambda)) )

The logistic factor saturates the response at high concentration, so
the curve flattens instead of growing without bound like a pure
log-linear model.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

from epi_impact.errors import InvalidModelError
from epi_impact.numeric import logistic, safe_exp


logger = logging.getLogger(__name__)


def log_plus_one(z: float) -> float:
    """
    Concentration transform F(z) = ln(z + 1).

    Returns -inf at z == -1 and nan below, rather than raising.
    """
    if z > -1:
        return math.log(z + 1)
    if z == -1:
        return -math.inf
    return math.nan


def identity(z: float) -> float:
    """Concentration transform F(z) = z."""
    return z


@dataclass(frozen=True, slots=True)
class Nasari:
    """
    Nasari non-linear exposure-response model.

    Gamma, delta and lambda are fit offline by regression and supplied
    as constants. The model is immutable once constructed.

    Attributes:
        gamma: Scale of the log hazard ratio
        delta: Concentration at the logistic midpoint
        lambda_: Logistic width (must be non-zero)
        transform: Concentration transform F(z), e.g. ln(z + 1)

    Example:
        model = Nasari(gamma=0.0478, delta=6.94, lambda_=3.37,
                       transform=log_plus_one)
        model.hr(15.0)  # 1.1291019999220953

    Raises:
        InvalidModelError: If lambda_ is zero, a coefficient is not
            finite, or the transform is unusable at zero exposure
    """

    gamma: float
    delta: float
    lambda_: float
    transform: Callable[[float], float] = log_plus_one

    def __post_init__(self) -> None:
        """Validate invariants."""
        for name in ("gamma", "delta", "lambda_"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidModelError(f"{name} must be finite, got {value}")
        if self.lambda_ == 0:
            raise InvalidModelError("lambda_ must be non-zero")
        if not callable(self.transform):
            raise InvalidModelError(
                f"transform must be callable, got {type(self.transform).__name__}"
            )

        try:
            f0 = self.transform(0.0)
        except (ArithmeticError, ValueError) as e:
            raise InvalidModelError(f"transform is undefined at z=0: {e}") from e
        if not math.isfinite(f0):
            raise InvalidModelError(f"transform must be finite at z=0, got {f0}")

    def hr(self, z: float) -> float:
        """
        Compute the hazard ratio caused by concentration z.

        Never raises for extreme z. Overflow saturates to inf and
        undefined transforms propagate nan.
        """
        weight = logistic((z - self.delta) / self.lambda_)
        return safe_exp(self.gamma * self.transform(z) * weight)

    def hr_array(self, z: np.ndarray) -> np.ndarray:
        """
        Evaluate hr elementwise over an array of concentrations.

        Args:
            z: Concentrations, any shape

        Returns:
            float64 array of hazard ratios with the same shape as z
        """
        z = np.asarray(z, dtype=np.float64)
        out = np.fromiter((self.hr(float(v)) for v in z.ravel()), dtype=np.float64, count=z.size)
        return out.reshape(z.shape)

    def __repr__(self) -> str:
        name = getattr(self.transform, "__name__", repr(self.transform))
        return (
            f"Nasari(gamma={self.gamma}, delta={self.delta}, "
            f"lambda_={self.lambda_}, transform={name})"
        )


# =============================================================================
# American Cancer Society CPS-II reference model
# =============================================================================

NASARI_ACS_GAMMA: float = 0.0478
NASARI_ACS_DELTA: float = 6.94
NASARI_ACS_LAMBDA: float = 3.37

# Fit to the American Cancer Society Cancer Prevention Study II cohort,
# all causes of death from fine particulate matter (µg/m³)
NASARI_ACS = Nasari(
    gamma=NASARI_ACS_GAMMA,
    delta=NASARI_ACS_DELTA,
    lambda_=NASARI_ACS_LAMBDA,
    transform=log_plus_one,
)
