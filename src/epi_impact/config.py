"""
epi_impact Configuration
========================

This module handles configuration loading for health impact runs.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    EPI_MODEL_FAMILY     -> model.family
    EPI_MODEL_GAMMA      -> model.gamma
    EPI_MODEL_DELTA      -> model.delta
    EPI_MODEL_LAMBDA     -> model.lambda
    EPI_MODEL_TRANSFORM  -> model.transform
    EPI_MODEL_BETA       -> model.beta
    EPI_SCENARIO_METHOD  -> scenario.method
    EPI_LOG_LEVEL        -> logging.level
    EPI_LOG_FORMAT       -> logging.format

Settings are loaded explicitly, not on import, because the package is
embedded in larger analysis pipelines that own their configuration.

Example:
    from epi_impact.config import load_config, build_model

    settings = load_config()
    model = build_model(settings)
    print(model.hr(15.0))
"""

import os
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from epi_impact.errors import InvalidModelError
from epi_impact.response.base import ExposureResponseModel
from epi_impact.response.nasari import (
    NASARI_ACS_DELTA,
    NASARI_ACS_GAMMA,
    NASARI_ACS_LAMBDA,
    Nasari,
    identity,
    log_plus_one,
)
from epi_impact.response.relative_risk import Linear, LogLinear


logger = logging.getLogger(__name__)


# Concentration transforms selectable by name from configuration
TRANSFORMS: Dict[str, Callable[[float], float]] = {
    "log1p": log_plus_one,
    "identity": identity,
}

MODEL_FAMILIES = ("nasari", "log_linear", "linear")
SCENARIO_METHODS = ("regional", "local")


# =============================================================================
# Configuration Models
# =============================================================================

class ModelConfig(BaseModel):
    """
    Exposure-response model configuration.

    Defaults reproduce the Nasari ACS CPS-II all-cause PM2.5 model.
    ``beta`` is used only by the log_linear and linear families.
    """

    family: str = Field(default="nasari", description="Model family: nasari, log_linear or linear")
    gamma: float = Field(default=NASARI_ACS_GAMMA, description="Nasari gamma")
    delta: float = Field(default=NASARI_ACS_DELTA, description="Nasari delta")
    lambda_: float = Field(
        default=NASARI_ACS_LAMBDA,
        alias="lambda",
        description="Nasari lambda (logistic width, non-zero)",
    )
    transform: str = Field(default="log1p", description="Concentration transform: log1p or identity")
    beta: float = Field(default=0.0, description="Slope for log_linear and linear families")

    class Config:
        """Accept both 'lambda' and 'lambda_'."""
        populate_by_name = True

    @field_validator("family")
    @classmethod
    def _check_family(cls, value: str) -> str:
        value = value.lower()
        if value not in MODEL_FAMILIES:
            raise ValueError(f"family must be one of {MODEL_FAMILIES}, got {value!r}")
        return value


class ScenarioConfig(BaseModel):
    """Concentration-change scenario configuration."""

    method: str = Field(
        default="regional",
        description="Underlying incidence strategy: regional or local",
    )
    scale_factors: Dict[str, float] = Field(
        default_factory=lambda: {"double": 2.0, "half": 0.5},
        description="Scenario label -> concentration multiplier",
    )

    @field_validator("method")
    @classmethod
    def _check_method(cls, value: str) -> str:
        value = value.lower()
        if value not in SCENARIO_METHODS:
            raise ValueError(f"method must be one of {SCENARIO_METHODS}, got {value!r}")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for epi_impact.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    model: ModelConfig = Field(default_factory=ModelConfig)
    scenario: ScenarioConfig = Field(default_factory=ScenarioConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration

    Raises:
        pydantic.ValidationError: If a value is invalid
    """
    # Find config file
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    # Apply environment variable overrides
    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Model settings
    if env_family := os.environ.get("EPI_MODEL_FAMILY"):
        config_data.setdefault("model", {})["family"] = env_family
    if env_gamma := os.environ.get("EPI_MODEL_GAMMA"):
        config_data.setdefault("model", {})["gamma"] = float(env_gamma)
    if env_delta := os.environ.get("EPI_MODEL_DELTA"):
        config_data.setdefault("model", {})["delta"] = float(env_delta)
    if env_lambda := os.environ.get("EPI_MODEL_LAMBDA"):
        model_data = config_data.setdefault("model", {})
        model_data.pop("lambda_", None)
        model_data["lambda"] = float(env_lambda)
    if env_transform := os.environ.get("EPI_MODEL_TRANSFORM"):
        config_data.setdefault("model", {})["transform"] = env_transform
    if env_beta := os.environ.get("EPI_MODEL_BETA"):
        config_data.setdefault("model", {})["beta"] = float(env_beta)

    # Scenario settings
    if env_method := os.environ.get("EPI_SCENARIO_METHOD"):
        config_data.setdefault("scenario", {})["method"] = env_method

    # Logging settings
    if env_log := os.environ.get("EPI_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_fmt := os.environ.get("EPI_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_fmt


def build_model(config: Union[Settings, ModelConfig]) -> ExposureResponseModel:
    """
    Construct the exposure-response model described by configuration.

    Args:
        config: Full settings or just the model section

    Returns:
        A model satisfying ExposureResponseModel

    Raises:
        InvalidModelError: If the transform is unknown or the
            coefficients are invalid (e.g. lambda == 0)
    """
    if isinstance(config, Settings):
        config = config.model

    if config.family == "log_linear":
        return LogLinear(beta=config.beta)
    if config.family == "linear":
        return Linear(beta=config.beta)

    transform = TRANSFORMS.get(config.transform)
    if transform is None:
        raise InvalidModelError(
            f"Unknown transform {config.transform!r}. "
            f"Available: {sorted(TRANSFORMS)}"
        )
    return Nasari(
        gamma=config.gamma,
        delta=config.delta,
        lambda_=config.lambda_,
        transform=transform,
    )


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
