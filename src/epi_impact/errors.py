"""
Error Types
===========

Exceptions raised by the epi_impact package.

Numeric degeneracy (division by a zero hazard ratio, overflow) is NOT
an error: it propagates as IEEE-754 ``inf``/``nan``. Exceptions are
reserved for inputs that are malformed before any arithmetic happens.
"""


class EpiError(ValueError):
    """Base class for all epi_impact errors."""


class InvalidModelError(EpiError):
    """
    Raised when an exposure-response model is misconfigured.

    Examples: a Nasari model with ``lambda_ == 0``, non-finite
    coefficients, or a transform that is undefined at zero exposure.
    """


class LengthMismatchError(EpiError):
    """
    Raised when population and concentration sequences differ in length.

    Attributes:
        populations: Number of population weights supplied
        concentrations: Number of concentration samples supplied
    """

    def __init__(self, populations: int, concentrations: int) -> None:
        self.populations = populations
        self.concentrations = concentrations
        super().__init__(
            f"populations and concentrations must have equal length. "
            f"Got: {populations} vs {concentrations}"
        )
