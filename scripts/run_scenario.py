#!/usr/bin/env python3
"""
Scenario Example Script
=======================

Standalone script that evaluates concentration-change scenarios for a
region and logs the attributable outcomes.

This script:
    1. Loads settings (config.yaml + EPI_* environment variables)
    2. Reads a region from YAML, or uses the built-in example region
    3. Runs baseline, doubling and halving scenarios
    4. Reports a summary

Region file format (YAML):
    name: example
    populations: [100000, 80000, 700000, 90000]
    concentrations: [12, 26, 11, 2]
    incidence: 0.008

Usage:
    python scripts/run_scenario.py
    python scripts/run_scenario.py --region data/region.yaml --method local
"""

import argparse
import logging
import os
import sys

import yaml

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from epi_impact.analysis import ScenarioRunner
from epi_impact.config import load_config, setup_logging
from epi_impact.models import Region


logger = logging.getLogger(__name__)


EXAMPLE_REGION = Region(
    name="example",
    populations=[100000, 80000, 700000, 90000],
    concentrations=[12, 26, 11, 2],
    incidence=800 / 100000,
)


def load_region(path: str) -> Region:
    """Load a Region from a YAML file."""
    with open(path, "r") as f:
        return Region.model_validate(yaml.safe_load(f) or {})


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Evaluate air pollution concentration-change scenarios"
    )
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--region", default=None, help="Path to region YAML file")
    parser.add_argument(
        "--method",
        choices=["regional", "local"],
        default=None,
        help="Override underlying incidence strategy",
    )
    args = parser.parse_args()

    settings = load_config(args.config)
    if args.method:
        settings.scenario.method = args.method
    setup_logging(settings)

    region = load_region(args.region) if args.region else EXAMPLE_REGION
    runner = ScenarioRunner.from_settings(settings)
    result = runner.run(region)

    logger.info("=" * 60)
    logger.info(f"Region:            {result.region} ({region.num_locations} locations)")
    logger.info(f"Method:            {result.method}")
    if result.underlying_incidence is not None:
        logger.info(f"Underlying rate:   {result.underlying_incidence:.6g}")
    logger.info(f"Attributable:      {result.baseline:.0f}")
    for label, delta in result.deltas.items():
        change = "additional" if delta >= 0 else "avoided"
        logger.info(f"  {label:<16} {abs(delta):.0f} {change}")
    logger.info("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
