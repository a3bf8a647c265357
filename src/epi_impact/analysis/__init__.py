"""
Analysis Module
===============

Region-level health impact analysis built on the incidence engine.
"""

from epi_impact.analysis.scenario import ScenarioRunner

__all__ = ["ScenarioRunner"]
