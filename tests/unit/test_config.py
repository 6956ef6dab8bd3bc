"""
Unit Tests for docsegment.config

Tests configuration defaults, environment helpers and validation.
"""

import pytest
from pathlib import Path

from docsegment import config
from docsegment.config import ConfigurationError, get_env_variable, validate_configuration


class TestConfigLoading:
    """Tests for configuration loading"""

    def test_config_imports_successfully(self):
        """Config module imports without errors"""
        assert config is not None

    def test_fuzzy_threshold_is_fraction(self):
        """FUZZY_MATCH_THRESHOLD is a float in (0, 1]"""
        assert isinstance(config.FUZZY_MATCH_THRESHOLD, float)
        assert 0 < config.FUZZY_MATCH_THRESHOLD <= 1

    def test_words_per_page_positive(self):
        """WORDS_PER_PAGE is a positive int"""
        assert isinstance(config.WORDS_PER_PAGE, int)
        assert config.WORDS_PER_PAGE > 0

    def test_default_page(self):
        """Pages default to 1"""
        assert config.DEFAULT_PAGE == 1

    def test_logs_directory(self):
        """LOGS_DIR lives under the project root"""
        assert isinstance(config.LOGS_DIR, Path)
        assert config.LOGS_DIR.parent == config.PROJECT_ROOT


class TestGetEnvVariable:
    """Tests for get_env_variable()"""

    def test_value_is_stripped(self, monkeypatch):
        """Values are whitespace-trimmed"""
        monkeypatch.setenv("DOCSEGMENT_TEST_VAR", "  0.5  ")
        assert get_env_variable("DOCSEGMENT_TEST_VAR") == "0.5"

    def test_optional_default(self, monkeypatch):
        """Missing optional variable returns default"""
        monkeypatch.delenv("DOCSEGMENT_TEST_VAR", raising=False)
        assert get_env_variable("DOCSEGMENT_TEST_VAR", required=False, default="x") == "x"

    def test_blank_counts_as_missing(self, monkeypatch):
        """Blank value falls back to default"""
        monkeypatch.setenv("DOCSEGMENT_TEST_VAR", "   ")
        assert get_env_variable("DOCSEGMENT_TEST_VAR", required=False, default="x") == "x"

    def test_required_missing_raises(self, monkeypatch):
        """Missing required variable raises ConfigurationError"""
        monkeypatch.delenv("DOCSEGMENT_TEST_VAR", raising=False)
        with pytest.raises(ConfigurationError):
            get_env_variable("DOCSEGMENT_TEST_VAR")


class TestValidateConfiguration:
    """Tests for validate_configuration()"""

    def test_current_configuration_valid(self):
        """Loaded configuration passes validation"""
        validate_configuration()

    @pytest.mark.parametrize("threshold", [0, -0.1, 1.5])
    def test_threshold_out_of_range(self, monkeypatch, threshold):
        """Thresholds outside (0, 1] are rejected"""
        monkeypatch.setattr(config, "FUZZY_MATCH_THRESHOLD", threshold)
        with pytest.raises(ConfigurationError, match="FUZZY_MATCH_THRESHOLD"):
            validate_configuration()

    def test_words_per_page_not_positive(self, monkeypatch):
        """Zero words per page is rejected"""
        monkeypatch.setattr(config, "WORDS_PER_PAGE", 0)
        with pytest.raises(ConfigurationError, match="WORDS_PER_PAGE"):
            validate_configuration()

    def test_errors_are_collected(self, monkeypatch):
        """All problems are reported together"""
        monkeypatch.setattr(config, "WORDS_PER_PAGE", 0)
        monkeypatch.setattr(config, "TOKEN_ENCODING", "")
        with pytest.raises(ConfigurationError) as exc_info:
            validate_configuration()

        message = str(exc_info.value)
        assert "WORDS_PER_PAGE" in message
        assert "TOKEN_ENCODING" in message
