"""
Numeric Helpers
===============

Small float primitives shared by the response models and the
incidence engine.

Python floats raise on division by zero and ``math.exp`` raises on
overflow. The epidemiological calculations instead follow IEEE-754:
results saturate to ``inf`` or become ``nan`` and the caller decides.
"""

import math

import numpy as np


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE-754 semantics instead of raising.

    Examples:
        ieee_divide(1.0, 4.0)   -> 0.25
        ieee_divide(1.0, 0.0)   -> inf
        ieee_divide(-1.0, 0.0)  -> -inf
        ieee_divide(0.0, 0.0)   -> nan
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def safe_exp(x: float) -> float:
    """exp(x) that saturates to inf instead of raising OverflowError."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def logistic(x: float) -> float:
    """
    Numerically stable logistic function 1 / (1 + exp(-x)).

    Evaluates exp only on non-positive arguments so it never overflows:
        x >= 0: 1 / (1 + exp(-x))
        x <  0: exp(x) / (1 + exp(x))
    """
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    if x < 0:
        e = math.exp(x)
        return e / (1.0 + e)
    # nan
    return x
