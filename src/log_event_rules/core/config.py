"""Structured configuration access and matcher settings.

Rules arrive as already-parsed configuration trees. The matcher only talks to
them through the narrow ConfigNode interface below, so any loader can supply
its own node type.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Protocol, runtime_checkable

from pydantic import StrictStr, TypeAdapter, ValidationError

MATCH_TIMEOUT_ENV = "EVENT_RULES_MATCH_TIMEOUT"

_STRING_LIST = TypeAdapter(list[StrictStr])


class ConfigShapeError(ValueError):
    """A configuration value does not have the expected type."""


@runtime_checkable
class ConfigNode(Protocol):
    """Read-only view of one node in a configuration tree."""

    @property
    def path(self) -> str:
        """Dotted path of this node, used in diagnostics."""
        ...

    def keys(self) -> list[str]:
        """Names of the direct children of this node."""
        ...

    def get_child(self, key: str) -> ConfigNode:
        """Return the child node (an empty node when absent)."""
        ...

    def get_string(self, key: str) -> str | None:
        """Return a scalar child as a string, or None when absent."""
        ...

    def get_string_list(self, key: str) -> list[str] | None:
        """Return a list-of-strings child, or None when absent."""
        ...


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


@dataclass(frozen=True, slots=True)
class MappingConfigNode:
    """ConfigNode backed by plain mappings (e.g. parsed JSON/YAML)."""

    data: Mapping[str, Any] | None = None
    path: str = ""

    def _raw(self, key: str) -> Any:
        if not self.data:
            return None
        return self.data.get(key)

    def keys(self) -> list[str]:
        if not self.data:
            return []
        return [str(k) for k in self.data]

    def get_child(self, key: str) -> MappingConfigNode:
        value = self._raw(key)
        child_path = _join(self.path, key)
        if value is not None and not isinstance(value, Mapping):
            raise ConfigShapeError(f"Expected a section at {child_path}, got {type(value).__name__}")
        return MappingConfigNode(data=value, path=child_path)

    def get_string(self, key: str) -> str | None:
        value = self._raw(key)
        if value is None:
            return None
        if isinstance(value, (Mapping, list, tuple)):
            raise ConfigShapeError(
                f"Expected a scalar at {_join(self.path, key)}, got {type(value).__name__}"
            )
        return str(value)

    def get_string_list(self, key: str) -> list[str] | None:
        value = self._raw(key)
        if value is None:
            return None
        # A lone scalar string reads as a one-element list.
        if isinstance(value, str):
            return [value]
        if isinstance(value, tuple):
            value = list(value)
        try:
            return _STRING_LIST.validate_python(value)
        except ValidationError as exc:
            raise ConfigShapeError(
                f"Expected a list of strings at {_join(self.path, key)}"
            ) from exc


def as_node(value: ConfigNode | Mapping[str, Any] | None, *, path: str = "") -> ConfigNode:
    """Wrap plain mappings (or None) as a ConfigNode; pass nodes through."""
    if value is None or isinstance(value, Mapping):
        return MappingConfigNode(data=value, path=path)
    if isinstance(value, ConfigNode):
        return value
    raise ConfigShapeError(f"Expected a section at {path or '<root>'}, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class MatcherConfig:
    """Runtime settings for pattern evaluation."""

    # Seconds a single pattern search may run; None disables the bound.
    match_timeout: float | None = None


def resolve_matcher_config(cfg: MatcherConfig | None) -> MatcherConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = MatcherConfig()

    env = os.getenv(MATCH_TIMEOUT_ENV)
    if env is None or env == "":
        return cfg

    try:
        value = float(env)
    except ValueError as exc:
        raise ValueError(f"{MATCH_TIMEOUT_ENV} must be a number") from exc
    if value <= 0:
        raise ValueError(f"{MATCH_TIMEOUT_ENV} must be > 0")

    if value == cfg.match_timeout:
        return cfg
    return replace(cfg, match_timeout=value)
