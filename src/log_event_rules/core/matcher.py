"""Compiled rule criteria and event matching.

A rule constrains up to five dimensions of an event: level, message,
exception trace, thread name and logger name. Each dimension is either
unconstrained (criterion absent, always passes) or holds compiled matchers.
Dimensions are ANDed; inside a text dimension the first matching pattern wins.

An explicitly empty criterion list filters nothing, same as an absent one.
A non-empty list whose entries all fail to compile never matches.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import regex

from .compile import compile_levels, compile_patterns
from .config import ConfigNode, MatcherConfig, as_node, resolve_matcher_config
from .levels import level_rank
from .models import LogEvent, LogLevel, MatchGroups, render_exception
from .parts import EMPTY_PARTS, PartRegistry

logger = logging.getLogger(__name__)

MATCH_LEVEL = "matchLevel"
MATCH_MESSAGE = "matchMessage"
MATCH_EXCEPTION = "matchException"
MATCH_THREAD_NAME = "matchThreadName"
MATCH_LOGGER_NAME = "matchLoggerName"

CRITERIA_KEYS = (MATCH_LEVEL, MATCH_MESSAGE, MATCH_EXCEPTION, MATCH_THREAD_NAME, MATCH_LOGGER_NAME)


def _collect_groups(pattern: regex.Pattern, match: regex.Match, groups: MatchGroups) -> None:
    """Copy named and positional captures of a match into groups.

    Groups that did not take part in the match are skipped.
    """
    for name in pattern.groupindex:
        value = match.group(name)
        if value is not None:
            groups[name] = value

    for index in range(1, pattern.groups + 1):
        value = match.group(index)
        if value is not None:
            groups[str(index)] = value


class RuleMatcher:
    """One rule's criteria, compiled once and matched many times.

    Instances are immutable after construction and can be shared between
    threads; every ``matches`` call builds its own result mapping.
    """

    __slots__ = (
        "path",
        "_levels",
        "_message",
        "_exception",
        "_thread_name",
        "_logger_name",
        "_timeout",
    )

    def __init__(
        self,
        criteria: ConfigNode | Mapping[str, Any] | None,
        parts: PartRegistry | None = None,
        *,
        path: str | None = None,
        config: MatcherConfig | None = None,
    ) -> None:
        node = as_node(criteria, path=path or "")
        self.path = path if path is not None else node.path
        parts = parts if parts is not None else EMPTY_PARTS
        self._timeout = resolve_matcher_config(config).match_timeout

        logger.debug("Preparing rule matcher %s", self.path)

        self._levels = self._prepare_levels(node)
        self._message = self._prepare_patterns(node, MATCH_MESSAGE, parts)
        self._exception = self._prepare_patterns(node, MATCH_EXCEPTION, parts)
        self._thread_name = self._prepare_patterns(node, MATCH_THREAD_NAME, parts)
        self._logger_name = self._prepare_patterns(node, MATCH_LOGGER_NAME, parts)

    def _prepare_levels(self, node: ConfigNode) -> frozenset[int] | None:
        names = node.get_string_list(MATCH_LEVEL)
        if not names:
            return None

        ranks, failures = compile_levels(names)
        for failure in failures:
            logger.warning("Incorrect level %r at %s.%s", failure.entry, self.path, MATCH_LEVEL)
        logger.debug("  levels: %s -> %s", names, sorted(ranks))
        return frozenset(ranks)

    def _prepare_patterns(
        self,
        node: ConfigNode,
        key: str,
        parts: PartRegistry,
    ) -> tuple[regex.Pattern, ...] | None:
        raw = node.get_string_list(key)
        if not raw:
            return None

        patterns, failures = compile_patterns(raw, parts)
        for failure in failures:
            logger.warning(
                "Incorrect regex %r at %s.%s: %s", failure.entry, self.path, key, failure.error
            )
        logger.debug("  %s: %s", key, [p.pattern for p in patterns])
        return tuple(patterns)

    @property
    def dimensions(self) -> dict[str, int | None]:
        """Number of compiled entries per criterion; None means unconstrained."""
        return {
            MATCH_LEVEL: None if self._levels is None else len(self._levels),
            MATCH_MESSAGE: None if self._message is None else len(self._message),
            MATCH_EXCEPTION: None if self._exception is None else len(self._exception),
            MATCH_THREAD_NAME: None if self._thread_name is None else len(self._thread_name),
            MATCH_LOGGER_NAME: None if self._logger_name is None else len(self._logger_name),
        }

    def _search(self, pattern: regex.Pattern, text: str) -> regex.Match | None:
        try:
            return pattern.search(text, timeout=self._timeout)
        except TimeoutError:
            logger.warning(
                "Regex %r timed out after %ss at %s", pattern.pattern, self._timeout, self.path
            )
            return None

    def _matches_any(
        self,
        text: str | None,
        patterns: tuple[regex.Pattern, ...],
        groups: MatchGroups,
    ) -> bool:
        """Return True on the first pattern that matches, collecting its groups."""
        if text is None:
            return False

        for pattern in patterns:
            m = self._search(pattern, text)
            if m is not None:
                _collect_groups(pattern, m, groups)
                return True
        return False

    def matches(
        self,
        message: str | None,
        level: LogLevel,
        exception: BaseException | str | None = None,
        thread_name: str | None = None,
        logger_name: str | None = None,
    ) -> MatchGroups | None:
        """Match an event against this rule.

        Returns the captured groups (possibly empty) when every constrained
        dimension passes, otherwise None. Later dimensions overwrite groups
        of earlier ones that share a key.
        """
        groups: MatchGroups = {}

        if self._levels is not None and level_rank(level) not in self._levels:
            return None

        if self._message is not None and not self._matches_any(message, self._message, groups):
            return None

        if self._exception is not None and (
            exception is None
            or not self._matches_any(render_exception(exception), self._exception, groups)
        ):
            return None

        if self._thread_name is not None and not self._matches_any(
            thread_name, self._thread_name, groups
        ):
            return None

        if self._logger_name is not None and not self._matches_any(
            logger_name, self._logger_name, groups
        ):
            return None

        return groups

    def match_event(self, event: LogEvent) -> MatchGroups | None:
        """Match a LogEvent; see ``matches``."""
        return self.matches(
            event.message,
            event.level,
            event.exception,
            event.thread_name,
            event.logger_name,
        )

    def __str__(self) -> str:
        return f"RuleMatcher(path: {self.path})"

    __repr__ = __str__
