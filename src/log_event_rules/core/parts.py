"""Reusable regex fragments ("parts") referenced from rule patterns as {name}."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .config import ConfigNode, as_node


class PartRegistry:
    """Placeholder -> named-group fragment table.

    Each part ``name: fragment`` becomes the substitution
    ``{name}`` -> ``(?<name>fragment)``. Fragments are not compiled here;
    they are only validated once embedded into a full rule pattern.
    """

    __slots__ = ("_replacements",)

    def __init__(self, parts: Mapping[str, str | None] | None = None) -> None:
        table: dict[str, str] = {}
        for name, fragment in (parts or {}).items():
            if not fragment:
                continue
            table["{" + name + "}"] = f"(?<{name}>{fragment})"
        self._replacements = MappingProxyType(table)

    @classmethod
    def from_config(cls, node: ConfigNode | Mapping[str, Any] | None) -> PartRegistry:
        """Build the registry from a flat ``name -> fragment`` config section."""
        section = as_node(node, path="parts")
        return cls({key: section.get_string(key) for key in section.keys()})

    @property
    def replacements(self) -> Mapping[str, str]:
        return self._replacements

    def __len__(self) -> int:
        return len(self._replacements)

    def __iter__(self) -> Iterator[str]:
        """Iterate over part names (without braces)."""
        return (key[1:-1] for key in self._replacements)

    def __contains__(self, name: object) -> bool:
        return f"{{{name}}}" in self._replacements

    def substitute(self, pattern: str) -> str:
        """Replace every placeholder occurrence with its fragment.

        Placeholders are plain literal keys; part names are never interpreted
        as regex syntax while scanning.
        """
        for placeholder, fragment in self._replacements.items():
            pattern = pattern.replace(placeholder, fragment)
        return pattern

    def __repr__(self) -> str:
        names = ", ".join(self)
        return f"PartRegistry({names})"


EMPTY_PARTS = PartRegistry()
