"""
Tests for global configuration.
"""

import logging

import pytest

from lazyiter import SeqConfig, get_single_shot_policy, set_single_shot_policy, wrap


class TestSingleShotPolicy:
    """Tests for the single-shot policy setting."""

    def test_default(self):
        """Test that the default policy raises."""
        assert get_single_shot_policy() == "raise"

    def test_set_and_get(self):
        """Test the module-level helpers."""
        set_single_shot_policy("empty")
        assert get_single_shot_policy() == "empty"
        assert SeqConfig.global_config().single_shot_policy == "empty"

    def test_invalid_value(self):
        """Test that unknown policies are rejected."""
        with pytest.raises(ValueError):
            set_single_shot_policy("ignore")
        assert get_single_shot_policy() == "raise"

    def test_environment(self, monkeypatch):
        """Test reading the policy from the environment."""
        monkeypatch.setenv("LAZYITER_SINGLE_SHOT_POLICY", "empty")
        assert get_single_shot_policy() == "empty"

    def test_invalid_environment(self, monkeypatch, caplog):
        """Test that a bad environment value is ignored with a warning."""
        monkeypatch.setenv("LAZYITER_SINGLE_SHOT_POLICY", "sometimes")
        with caplog.at_level(logging.WARNING, logger="lazyiter.config"):
            assert get_single_shot_policy() == "raise"
        assert "LAZYITER_SINGLE_SHOT_POLICY" in caplog.text

    def test_policy_read_at_open_time(self):
        """Test that the policy in force when re-opening is the one applied."""
        seq = wrap(iter([1]))
        assert seq.to_list() == [1]
        set_single_shot_policy("empty")
        assert seq.to_list() == []


class TestSeparator:
    """Tests for the default separator setting."""

    def test_default(self, fresh_config):
        """Test the built-in separator."""
        assert fresh_config.default_separator == ", "

    def test_environment(self, monkeypatch, fresh_config):
        """Test reading the separator from the environment."""
        monkeypatch.setenv("LAZYITER_SEPARATOR", ";")
        assert fresh_config.default_separator == ";"
        assert wrap([1, 2]).to_separated_string() == "1;2"

    def test_must_be_string(self, fresh_config):
        """Test that non-string separators are rejected."""
        with pytest.raises(TypeError):
            fresh_config.default_separator = 1


class TestGlobalConfig:
    """Tests for the configuration instance."""

    def test_singleton(self):
        """Test that the same instance is always returned."""
        assert SeqConfig.global_config() is SeqConfig.global_config()

    def test_reset(self, fresh_config):
        """Test that reset drops overrides."""
        fresh_config.single_shot_policy = "empty"
        fresh_config.default_separator = "-"
        fresh_config.reset()
        assert fresh_config.single_shot_policy == "raise"
        assert fresh_config.default_separator == ", "
