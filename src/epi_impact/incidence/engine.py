"""
Incidence Engine
================

Back-calculation of underlying incidence and attributable outcomes.

The observed incidence rate I already contains the effect of current
pollution. To estimate the effect of a concentration change we first
recover the underlying (zero-exposure) rate Io, then apply the hazard
ratio at the target concentration.

Formulas:
    io            Io = I / HR(z)
    io_regional   Io = I / hr_bar,  hr_bar = sum(p_i * HR(z_i)) / sum(p_i)
    outcome       N  = p * Io * (HR(z) - 1)

Strategy Choice:
    io_regional is preferred whenever several concentration samples
    share one observed incidence rate (Apte et al. 2015). Population
    weighting keeps sparsely populated extreme locations from biasing
    the regional baseline. io is for a single representative
    concentration.

Numeric Policy:
    Division by a zero hazard ratio in io propagates inf/nan. The two
    degenerate regional cases (zero total population, zero mean hazard
    ratio) are defined to return 0.0. Unequal sequence lengths raise
    LengthMismatchError before any model evaluation.
"""

import logging
from typing import Sequence, Union

import numpy as np

from epi_impact.errors import LengthMismatchError
from epi_impact.numeric import ieee_divide
from epi_impact.response.base import ExposureResponseModel


logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray]


def io(z: float, model: ExposureResponseModel, incidence: float) -> float:
    """
    Compute the underlying incidence rate for a single location.

    Use only when one concentration adequately characterizes exposure
    for the population of interest; prefer io_regional otherwise.

    Args:
        z: Concentration at the location
        model: Exposure-response model
        incidence: Observed incidence rate (not validated)

    Returns:
        Underlying (zero-exposure) incidence rate. inf or nan when
        model.hr(z) == 0.

    Example:
        io(0.0, NASARI_ACS, 0.008)  # 0.008, HR(0) == 1
    """
    return ieee_divide(incidence, model.hr(z))


def io_regional(
    populations: ArrayLike,
    concentrations: ArrayLike,
    model: ExposureResponseModel,
    incidence: float,
) -> float:
    """
    Compute the population-weighted underlying incidence for a region.

    Element i of populations corresponds to element i of concentrations.

    Args:
        populations: Population at each location (non-negative weights)
        concentrations: Concentration at each location
        model: Exposure-response model
        incidence: Observed incidence rate for the whole region

    Returns:
        Underlying incidence rate, or 0.0 when total population or the
        weighted mean hazard ratio is zero

    Raises:
        LengthMismatchError: If the sequences differ in length
    """
    p = np.asarray(populations, dtype=np.float64).ravel()
    z = np.asarray(concentrations, dtype=np.float64).ravel()

    if p.size != z.size:
        raise LengthMismatchError(p.size, z.size)

    p_sum = float(np.sum(p))
    if p_sum == 0:
        logger.debug("io_regional: total population is zero, returning 0")
        return 0.0

    hr = np.array([model.hr(float(zi)) for zi in z], dtype=np.float64)
    hr_bar = float(np.sum(p * hr)) / p_sum
    if hr_bar == 0:
        logger.debug("io_regional: weighted hazard ratio is zero, returning 0")
        return 0.0

    return ieee_divide(incidence, hr_bar)


def outcome(
    population: float,
    z: float,
    underlying: float,
    model: ExposureResponseModel,
) -> float:
    """
    Compute the number of outcomes attributable to concentration z.

    The result is relative to the underlying (zero-exposure) incidence.
    It is zero when HR(z) == 1 and negative when HR(z) < 1. Take the
    difference of two evaluations to isolate the effect of a
    concentration change.

    Args:
        population: Number of people exposed
        z: Concentration they are exposed to
        underlying: Underlying incidence rate, from io or io_regional
        model: Exposure-response model

    Returns:
        Attributable outcome count
    """
    return population * underlying * (model.hr(z) - 1.0)
