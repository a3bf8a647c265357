"""
Incidence Module
================

Underlying incidence back-calculation and attributable outcomes.

All functions are pure and stateless given their model argument.
"""

from epi_impact.incidence.engine import io, io_regional, outcome

__all__ = ["io", "io_regional", "outcome"]
