"""Tests for formatter configuration."""

from __future__ import annotations

import pydantic
import pytest

from sfx_metrics.models.config import FormatterConfig


class TestFormatterConfig:
    """Tests for FormatterConfig defaults and behaviour."""

    def test_defaults(self):
        """Test the default metric names and flags."""
        config = FormatterConfig(token="secret")
        assert config.gauge_name == "Application.average"
        assert config.counter_name == "Application.counter"
        assert config.log_host is True
        assert config.log_application is True
        assert config.environment is None
        assert config.dimensions is None

    def test_dimensions_become_frozenset(self):
        """Test the allow-list is stored as a set of names."""
        config = FormatterConfig(token="secret", dimensions=["user", "zone", "user"])
        assert config.dimensions == frozenset({"user", "zone"})
        assert config.allows("user")
        assert not config.allows("tracking")

    def test_no_allow_list_allows_nothing(self):
        """Test tags are not allowed without an allow-list."""
        assert not FormatterConfig(token="secret").allows("user")

    def test_immutable(self):
        """Test config cannot be changed after construction."""
        config = FormatterConfig(token="secret")
        with pytest.raises(pydantic.ValidationError):
            config.environment = "production"


class TestFromEnv:
    """Tests for FormatterConfig.from_env."""

    def test_reads_all_settings(self):
        """Test every SIGNALFX_* variable is applied."""
        config = FormatterConfig.from_env(
            {
                "SIGNALFX_TOKEN": "abc",
                "SIGNALFX_DIMENSIONS": "user, zone,",
                "SIGNALFX_GAUGE_NAME": "App.avg",
                "SIGNALFX_COUNTER_NAME": "App.count",
                "SIGNALFX_LOG_HOST": "false",
                "SIGNALFX_LOG_APPLICATION": "1",
                "SIGNALFX_ENVIRONMENT": "staging",
            }
        )
        assert config.token == "abc"
        assert config.dimensions == frozenset({"user", "zone"})
        assert config.gauge_name == "App.avg"
        assert config.counter_name == "App.count"
        assert config.log_host is False
        assert config.log_application is True
        assert config.environment == "staging"

    def test_missing_environment_disables_dimension(self):
        """Test no environment variable means no environment dimension."""
        config = FormatterConfig.from_env({"SIGNALFX_TOKEN": "abc"})
        assert config.environment is None

    def test_reads_process_environment(self, monkeypatch):
        """Test os.environ is used by default."""
        monkeypatch.setenv("SIGNALFX_TOKEN", "from-env")
        monkeypatch.delenv("SIGNALFX_ENVIRONMENT", raising=False)
        assert FormatterConfig.from_env().token == "from-env"

    def test_missing_token(self):
        """Test a missing token is an error."""
        with pytest.raises(ValueError, match="SIGNALFX_TOKEN"):
            FormatterConfig.from_env({})
