"""Grouping of compiled rules into filter and rule categories.

The configuration tree looks like::

    parts:
      id: "[0-9]+"
    events:
      filters:
        <name>: {matchMessage: [...]}
      rules:
        <name>: {matchLevel: [...], matchMessage: [...], ...}
    breadcrumbs:
      filters: {...}
      rules: {...}

Filters drop an event when any of them matches. Rules are evaluated in
configured order and report the groups they captured.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from .config import ConfigNode, MatcherConfig, as_node, resolve_matcher_config
from .matcher import RuleMatcher
from .models import LogEvent, MatchGroups
from .parts import PartRegistry
from .stats import MatchStats

logger = logging.getLogger(__name__)

EventKind = Literal["events", "breadcrumbs"]

RULE_CATEGORIES: tuple[str, ...] = (
    "events.filters",
    "events.rules",
    "breadcrumbs.filters",
    "breadcrumbs.rules",
)


@dataclass(frozen=True, slots=True)
class RuleHit:
    """A rule that matched an event, with its captured groups."""

    rule: str
    groups: MatchGroups


class RuleSet:
    """Compiled rules per category, sharing one part registry."""

    def __init__(
        self,
        categories: Mapping[str, Sequence[RuleMatcher]],
        *,
        stats: MatchStats | None = None,
    ) -> None:
        unknown = set(categories) - set(RULE_CATEGORIES)
        if unknown:
            raise ValueError(f"Unknown rule categories: {', '.join(sorted(unknown))}")
        self._categories = {c: tuple(categories.get(c, ())) for c in RULE_CATEGORIES}
        self._stats = stats

    @classmethod
    def from_config(
        cls,
        root: ConfigNode | Mapping[str, Any] | None,
        *,
        config: MatcherConfig | None = None,
        stats: MatchStats | None = None,
    ) -> RuleSet:
        """Compile every rule in the four categories of a config tree."""
        node = as_node(root)
        parts = PartRegistry.from_config(node.get_child("parts"))
        cfg = resolve_matcher_config(config)

        categories: dict[str, tuple[RuleMatcher, ...]] = {}
        for category in RULE_CATEGORIES:
            section = node
            for key in category.split("."):
                section = section.get_child(key)
            categories[category] = tuple(
                RuleMatcher(section.get_child(name), parts, config=cfg)
                for name in section.keys()
            )

        ruleset = cls(categories, stats=stats)
        logger.debug("Loaded rules: %s (parts: %d)", ruleset.rule_counts(), len(parts))
        return ruleset

    def matchers(self, category: str) -> tuple[RuleMatcher, ...]:
        try:
            return self._categories[category]
        except KeyError as exc:
            raise ValueError(f"Unknown rule category: {category}") from exc

    def rule_counts(self) -> dict[str, int]:
        """Number of rules defined per category."""
        return {category: len(matchers) for category, matchers in self._categories.items()}

    def is_filtered(self, event: LogEvent, *, kind: EventKind = "events") -> bool:
        """Return True when any filter of the given kind matches the event."""
        for matcher in self._categories[f"{kind}.filters"]:
            if matcher.match_event(event) is not None:
                logger.debug("Event filtered by %s", matcher.path)
                if self._stats is not None:
                    self._stats.record_filtered()
                return True
        return False

    def matching_rules(self, event: LogEvent, *, kind: EventKind = "events") -> list[RuleHit]:
        """Return every rule of the given kind that matches, in configured order."""
        hits: list[RuleHit] = []
        for matcher in self._categories[f"{kind}.rules"]:
            groups = matcher.match_event(event)
            if groups is not None:
                hits.append(RuleHit(rule=matcher.path, groups=groups))
        if hits and self._stats is not None:
            self._stats.record_match()
        return hits

    def first_match(self, event: LogEvent, *, kind: EventKind = "events") -> RuleHit | None:
        """Return the first matching rule of the given kind, if any."""
        for matcher in self._categories[f"{kind}.rules"]:
            groups = matcher.match_event(event)
            if groups is not None:
                if self._stats is not None:
                    self._stats.record_match()
                return RuleHit(rule=matcher.path, groups=groups)
        return None
