"""
seqkit Runtime Configuration.

A single process-wide settings object controls whether the numpy-backed
search paths in ``seqkit.ordering`` are used. Settings can come from the
environment:

    SEQKIT_VECTORIZE            1/0, true/false, yes/no, on/off
    SEQKIT_VECTORIZE_THRESHOLD  minimum array length for the numpy path
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, replace

from seqkit.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_VECTORIZE = "SEQKIT_VECTORIZE"
ENV_VECTORIZE_THRESHOLD = "SEQKIT_VECTORIZE_THRESHOLD"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class SeqkitConfig:
    """
    Settings shared by all seqkit functions.

    Attributes:
        vectorize: Allow numpy fast paths for numeric ndarray inputs
        vectorize_threshold: Minimum input length before the fast path is used
    """

    vectorize: bool = True
    vectorize_threshold: int = 64

    def __post_init__(self) -> None:
        if not isinstance(self.vectorize, bool):
            raise ConfigurationError(
                "must be a bool", setting="vectorize", raw_value=repr(self.vectorize)
            )
        if (
            isinstance(self.vectorize_threshold, bool)
            or not isinstance(self.vectorize_threshold, int)
            or self.vectorize_threshold < 0
        ):
            raise ConfigurationError(
                "must be a non-negative integer",
                setting="vectorize_threshold",
                raw_value=repr(self.vectorize_threshold),
            )

    def allows_vectorized(self, size: int) -> bool:
        """Check if an input of the given length should take the numpy path."""
        return self.vectorize and size >= self.vectorize_threshold


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError("expected a boolean flag", setting=name, raw_value=raw)


def _parse_threshold(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigurationError("expected an integer", setting=name, raw_value=raw) from None
    if value < 0:
        raise ConfigurationError("must not be negative", setting=name, raw_value=raw)
    return value


def load_from_env(environ: Mapping[str, str] | None = None) -> SeqkitConfig:
    """
    Build a configuration from environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        A new SeqkitConfig; unset variables keep their defaults

    Raises:
        ConfigurationError: If a variable is set to an unparseable value
    """
    env = os.environ if environ is None else environ
    changes: dict[str, object] = {}

    raw = env.get(ENV_VECTORIZE)
    if raw is not None:
        changes["vectorize"] = _parse_bool(ENV_VECTORIZE, raw)

    raw = env.get(ENV_VECTORIZE_THRESHOLD)
    if raw is not None:
        changes["vectorize_threshold"] = _parse_threshold(ENV_VECTORIZE_THRESHOLD, raw)

    if changes:
        logger.debug("Loaded seqkit settings from environment: %s", changes)
    return SeqkitConfig(**changes)


_config = load_from_env()


def get_config() -> SeqkitConfig:
    """Return the active configuration."""
    return _config


def configure(**changes: object) -> SeqkitConfig:
    """
    Replace fields of the active configuration.

    Example:
        configure(vectorize=False) -> SeqkitConfig(vectorize=False, ...)
    """
    global _config
    unknown = set(changes) - set(SeqkitConfig.__dataclass_fields__)
    if unknown:
        raise ConfigurationError(f"unknown setting(s): {', '.join(sorted(unknown))}")
    _config = replace(_config, **changes)
    logger.debug("seqkit configuration updated: %s", _config)
    return _config


def reset_config() -> SeqkitConfig:
    """Discard runtime changes and reload settings from the environment."""
    global _config
    _config = load_from_env()
    return _config


@contextmanager
def override(**changes: object) -> Iterator[SeqkitConfig]:
    """Temporarily apply configuration changes inside a ``with`` block."""
    global _config
    previous = _config
    try:
        yield configure(**changes)
    finally:
        _config = previous
