"""
Exposure-Response Protocol
==========================

The single abstraction the incidence engine depends on.

Any object exposing ``hr(z) -> float`` is an exposure-response model.
This allows swapping the Nasari curve for log-linear, linear or
user-supplied curves without changing the incidence engine.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ExposureResponseModel(Protocol):
    """
    Protocol for exposure-response models.

    Implementations map a pollutant concentration to a hazard ratio:
    the relative risk of the health outcome at that concentration
    versus zero exposure.

    Implemented by:
        - Nasari (non-linear exponential-logistic form)
        - LogLinear, Linear (simple relative-risk forms)
    """

    def hr(self, z: float) -> float:
        """
        Compute the hazard ratio at concentration z.

        Args:
            z: Pollutant concentration, in the units the model was fit in

        Returns:
            Hazard ratio (1.0 = no excess risk)
        """
        ...
