"""
Configuration for lazy sequence behavior.

This module manages the global configuration and provides settings for
how single-shot sources react to being re-opened and how sequences are
rendered as strings.
"""

from __future__ import annotations

import logging
import os
import threading

logger = logging.getLogger(__name__)

SINGLE_SHOT_POLICIES = ("raise", "empty")


class SeqConfig:
    """
    Global configuration for lazy sequences.

    Settings are read from the environment the first time they are needed
    and can be overridden programmatically afterwards.
    """

    _instance: SeqConfig | None = None
    _lock = threading.Lock()

    def __init__(self):
        self._single_shot_policy: str | None = None
        self._default_separator: str | None = None

    @classmethod
    def global_config(cls) -> SeqConfig:
        """Get the global configuration instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = SeqConfig()
        return cls._instance

    @property
    def single_shot_policy(self) -> str:
        """
        What happens when a single-shot source is opened again.

        ``"raise"`` fails with SourceConsumedError; ``"empty"`` hands out an
        exhausted cursor that yields nothing.
        """
        if self._single_shot_policy is None:
            env_policy = os.environ.get("LAZYITER_SINGLE_SHOT_POLICY")
            if env_policy:
                if env_policy in SINGLE_SHOT_POLICIES:
                    self._single_shot_policy = env_policy
                else:
                    logger.warning(
                        "Ignoring LAZYITER_SINGLE_SHOT_POLICY=%r, expected one of %s",
                        env_policy,
                        ", ".join(SINGLE_SHOT_POLICIES),
                    )

            if self._single_shot_policy is None:
                self._single_shot_policy = "raise"

        return self._single_shot_policy

    @single_shot_policy.setter
    def single_shot_policy(self, value: str) -> None:
        """Set the single-shot policy."""
        if value not in SINGLE_SHOT_POLICIES:
            raise ValueError(
                f"Single-shot policy must be one of {SINGLE_SHOT_POLICIES}, got {value!r}"
            )
        self._single_shot_policy = value

    @property
    def default_separator(self) -> str:
        """Separator used by to_separated_string when none is given."""
        if self._default_separator is None:
            self._default_separator = os.environ.get("LAZYITER_SEPARATOR", ", ")
        return self._default_separator

    @default_separator.setter
    def default_separator(self, value: str) -> None:
        """Set the default separator."""
        if not isinstance(value, str):
            raise TypeError("Separator must be a string")
        self._default_separator = value

    def reset(self) -> None:
        """Forget overrides so the next read consults the environment again."""
        self._single_shot_policy = None
        self._default_separator = None


def set_single_shot_policy(policy: str) -> None:
    """
    Set the global policy for re-opening single-shot sources.

    Args:
        policy: ``"raise"`` or ``"empty"``

    Example:
        >>> from lazyiter import set_single_shot_policy
        >>> set_single_shot_policy("empty")
    """
    SeqConfig.global_config().single_shot_policy = policy


def get_single_shot_policy() -> str:
    """
    Get the current policy for re-opening single-shot sources.

    Returns:
        ``"raise"`` or ``"empty"``
    """
    return SeqConfig.global_config().single_shot_policy
