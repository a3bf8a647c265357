"""
Configuration Tests
===================

Tests for settings loading, environment overrides and model building.
"""

import logging

import pytest
import yaml
from pydantic import ValidationError

from epi_impact.analysis import ScenarioRunner
from epi_impact.config import Settings, build_model, load_config, setup_logging
from epi_impact.errors import InvalidModelError
from epi_impact.response import NASARI_ACS, Linear, LogLinear, Nasari


ENV_VARS = [
    "EPI_MODEL_FAMILY",
    "EPI_MODEL_GAMMA",
    "EPI_MODEL_DELTA",
    "EPI_MODEL_LAMBDA",
    "EPI_MODEL_TRANSFORM",
    "EPI_MODEL_BETA",
    "EPI_SCENARIO_METHOD",
    "EPI_LOG_LEVEL",
    "EPI_LOG_FORMAT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from EPI_* variables in the caller's environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_config(tmp_path):
    """Write a dict as config.yaml and return its path."""
    def _write(data):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(data))
        return str(path)
    return _write


class TestDefaults:
    """Tests for default settings."""

    def test_defaults_without_file(self, tmp_path):
        settings = load_config(str(tmp_path / "missing.yaml"))

        assert settings.model.family == "nasari"
        assert settings.model.gamma == 0.0478
        assert settings.model.delta == 6.94
        assert settings.model.lambda_ == 3.37
        assert settings.model.transform == "log1p"
        assert settings.scenario.method == "regional"
        assert settings.scenario.scale_factors == {"double": 2.0, "half": 0.5}
        assert settings.logging.level == "INFO"

    def test_default_model_matches_reference(self):
        """Default configuration builds the ACS reference curve."""
        model = build_model(Settings())
        assert isinstance(model, Nasari)
        for z in (0.0, 5.0, 15.0, 25.0):
            assert model.hr(z) == NASARI_ACS.hr(z)


class TestYamlLoading:
    """Tests for YAML configuration files."""

    def test_model_section(self, write_config):
        path = write_config({"model": {"gamma": 0.05, "delta": 5.0, "lambda": 2.0}})
        settings = load_config(path)

        assert settings.model.gamma == 0.05
        assert settings.model.delta == 5.0
        assert settings.model.lambda_ == 2.0

    def test_lambda_field_name_accepted(self, write_config):
        path = write_config({"model": {"lambda_": 4.0}})
        assert load_config(path).model.lambda_ == 4.0

    def test_scenario_section(self, write_config):
        path = write_config({"scenario": {"method": "LOCAL", "scale_factors": {"triple": 3.0}}})
        settings = load_config(path)

        assert settings.scenario.method == "local"
        assert settings.scenario.scale_factors == {"triple": 3.0}

    def test_empty_file(self, write_config):
        path = write_config(None)
        assert load_config(path).model.family == "nasari"

    def test_invalid_method_rejected(self, write_config):
        path = write_config({"scenario": {"method": "national"}})
        with pytest.raises(ValidationError):
            load_config(path)

    def test_invalid_family_rejected(self, write_config):
        path = write_config({"model": {"family": "cubic"}})
        with pytest.raises(ValidationError):
            load_config(path)


class TestEnvOverrides:
    """Tests for EPI_* environment variables."""

    def test_env_overrides_file(self, write_config, monkeypatch):
        path = write_config({"model": {"gamma": 0.05, "lambda": 2.0}})
        monkeypatch.setenv("EPI_MODEL_GAMMA", "0.06")
        monkeypatch.setenv("EPI_MODEL_LAMBDA", "3.0")

        settings = load_config(path)
        assert settings.model.gamma == 0.06
        assert settings.model.lambda_ == 3.0

    def test_env_lambda_overrides_lambda_field_name(self, write_config, monkeypatch):
        path = write_config({"model": {"lambda_": 2.0}})
        monkeypatch.setenv("EPI_MODEL_LAMBDA", "5.0")
        assert load_config(path).model.lambda_ == 5.0

    def test_env_family_and_beta(self, tmp_path, monkeypatch):
        monkeypatch.setenv("EPI_MODEL_FAMILY", "log_linear")
        monkeypatch.setenv("EPI_MODEL_BETA", "0.0058")

        settings = load_config(str(tmp_path / "missing.yaml"))
        model = build_model(settings)
        assert isinstance(model, LogLinear)
        assert model.beta == 0.0058

    def test_env_scenario_and_logging(self, tmp_path, monkeypatch):
        monkeypatch.setenv("EPI_SCENARIO_METHOD", "local")
        monkeypatch.setenv("EPI_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("EPI_LOG_FORMAT", "json")

        settings = load_config(str(tmp_path / "missing.yaml"))
        assert settings.scenario.method == "local"
        assert settings.logging.level == "DEBUG"
        assert settings.logging.format == "json"


class TestBuildModel:
    """Tests for turning configuration into models."""

    def test_linear_family(self):
        settings = Settings.model_validate({"model": {"family": "linear", "beta": 0.006}})
        model = build_model(settings)
        assert isinstance(model, Linear)
        assert model.hr(10.0) == pytest.approx(1.06)

    def test_accepts_model_section(self):
        settings = Settings()
        assert isinstance(build_model(settings.model), Nasari)

    def test_identity_transform(self):
        settings = Settings.model_validate({"model": {"transform": "identity"}})
        model = build_model(settings)
        assert model.hr(0.0) == 1.0

    def test_unknown_transform(self):
        settings = Settings.model_validate({"model": {"transform": "sqrt"}})
        with pytest.raises(InvalidModelError, match="Unknown transform"):
            build_model(settings)

    def test_zero_lambda(self):
        settings = Settings.model_validate({"model": {"lambda": 0.0}})
        with pytest.raises(InvalidModelError):
            build_model(settings)


class TestRunnerFromSettings:
    """Tests for ScenarioRunner.from_settings."""

    def test_from_settings(self, example_region):
        settings = Settings.model_validate(
            {"scenario": {"method": "local", "scale_factors": {"double": 2.0}}}
        )
        runner = ScenarioRunner.from_settings(settings)

        assert runner.method == "local"
        assert runner.scale_factors == {"double": 2.0}
        result = runner.run(example_region)
        assert round(result.baseline) == 665
        assert round(result.deltas["double"]) == 401


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_setup_logging_configures_root(self, monkeypatch):
        """basicConfig receives the configured level and format."""
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

        settings = Settings.model_validate({"logging": {"level": "warning", "format": "json"}})
        setup_logging(settings)

        assert calls["level"] == logging.WARNING
        assert calls["format"].startswith('{"time"')

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

        setup_logging(Settings.model_validate({"logging": {"level": "chatty"}}))

        assert calls["level"] == logging.INFO
        assert "%(levelname)s" in calls["format"]
