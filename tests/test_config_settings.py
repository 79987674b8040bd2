"""
Tests for numlib/config/settings.py

**Testing philosophy**: Never depend on the developer's real environment.
Every test sets or clears the NUMLIB_* variables it cares about through
monkeypatch, and the conftest fixture resets the cached singleton.
"""

import math

import pytest

from numlib.config.settings import (
    DEFAULT_EPSILON,
    NumericSettings,
    get_settings,
    reset_settings,
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("NUMLIB_EPSILON", "NUMLIB_RANDOM_SEED", "NUMLIB_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_numeric_settings_defaults():
    """Test default values."""
    settings = NumericSettings()

    assert settings.epsilon == 0.001
    assert settings.random_seed is None
    assert settings.log_level == "WARNING"


def test_numeric_settings_is_frozen():
    """Test that settings cannot be mutated after construction."""
    settings = NumericSettings()

    with pytest.raises(Exception):
        settings.epsilon = 0.5


def test_numeric_settings_rejects_negative_epsilon():
    """Test epsilon validation."""
    with pytest.raises(ValueError, match="finite, non-negative"):
        NumericSettings(epsilon=-0.1)


def test_numeric_settings_rejects_non_finite_epsilon():
    """Test that inf and NaN are not valid tolerances."""
    with pytest.raises(ValueError):
        NumericSettings(epsilon=math.inf)
    with pytest.raises(ValueError):
        NumericSettings(epsilon=math.nan)


def test_numeric_settings_rejects_non_numeric_epsilon():
    """Test that strings are not coerced."""
    with pytest.raises(ValueError, match="must be a number"):
        NumericSettings(epsilon="0.1")


def test_numeric_settings_zero_epsilon_allowed():
    """Test that exact comparison (epsilon 0) is a valid setting."""
    assert NumericSettings(epsilon=0).epsilon == 0


def test_numeric_settings_rejects_negative_seed():
    """Test seed validation."""
    with pytest.raises(ValueError, match="random_seed"):
        NumericSettings(random_seed=-1)


def test_from_env_defaults(clean_env):
    """Test loading with no variables set."""
    settings = NumericSettings.from_env()

    assert settings.epsilon == DEFAULT_EPSILON
    assert settings.random_seed is None
    assert settings.log_level == "WARNING"


def test_from_env_reads_all_variables(clean_env):
    """Test that every variable is honoured."""
    clean_env.setenv("NUMLIB_EPSILON", "1e-6")
    clean_env.setenv("NUMLIB_RANDOM_SEED", "42")
    clean_env.setenv("NUMLIB_LOG_LEVEL", "debug")

    settings = NumericSettings.from_env()

    assert settings.epsilon == 1e-6
    assert settings.random_seed == 42
    assert settings.log_level == "DEBUG"


def test_from_env_invalid_epsilon(clean_env):
    """Test a clear error for an unparsable epsilon."""
    clean_env.setenv("NUMLIB_EPSILON", "tiny")

    with pytest.raises(ValueError, match="NUMLIB_EPSILON must be a number"):
        NumericSettings.from_env()


def test_from_env_invalid_seed(clean_env):
    """Test a clear error for an unparsable seed."""
    clean_env.setenv("NUMLIB_RANDOM_SEED", "abc")

    with pytest.raises(ValueError, match="NUMLIB_RANDOM_SEED must be an integer"):
        NumericSettings.from_env()


def test_from_env_blank_seed_means_unseeded(clean_env):
    """Test that an empty seed variable is treated as unset."""
    clean_env.setenv("NUMLIB_RANDOM_SEED", "  ")

    assert NumericSettings.from_env().random_seed is None


def test_get_settings_is_cached(clean_env):
    """Test that get_settings returns the same object until reset."""
    first = get_settings()
    clean_env.setenv("NUMLIB_EPSILON", "0.25")

    assert get_settings() is first

    reset_settings()
    refreshed = get_settings()

    assert refreshed is not first
    assert refreshed.epsilon == 0.25


def test_numeric_settings_rejects_unknown_log_level():
    """Test that level names logging does not know are refused."""
    with pytest.raises(ValueError, match="log_level must be one of"):
        NumericSettings(log_level="VERBOSE")


def test_numeric_settings_rejects_non_level_logging_attribute():
    """Test that logging module attributes that are not levels are refused."""
    with pytest.raises(ValueError, match="log_level must be one of"):
        NumericSettings(log_level="BASIC_FORMAT")


def test_numeric_settings_log_level_is_case_insensitive():
    """Test that lowercase level names are accepted."""
    assert NumericSettings(log_level="debug").log_level == "debug"


def test_from_env_invalid_log_level(clean_env):
    """Test that a typo in NUMLIB_LOG_LEVEL fails instead of becoming WARNING."""
    clean_env.setenv("NUMLIB_LOG_LEVEL", "VERBOSE")

    with pytest.raises(ValueError, match="got: 'VERBOSE'"):
        NumericSettings.from_env()
