"""Rule matching core: parts, compiled rule matchers and rule sets."""

from __future__ import annotations

from .config import (
    ConfigNode,
    ConfigShapeError,
    MappingConfigNode,
    MatcherConfig,
    as_node,
    resolve_matcher_config,
)
from .levels import LEVEL_RANKS, level_from_logging, level_rank, parse_level
from .matcher import CRITERIA_KEYS, RuleMatcher
from .models import LogEvent, LogLevel, MatchGroups, render_exception
from .parts import PartRegistry
from .ruleset import RULE_CATEGORIES, RuleHit, RuleSet
from .stats import MatchStats, default_stats
from .templates import render_template

__all__ = [
    "CRITERIA_KEYS",
    "ConfigNode",
    "ConfigShapeError",
    "LEVEL_RANKS",
    "LogEvent",
    "LogLevel",
    "MappingConfigNode",
    "MatchGroups",
    "MatchStats",
    "MatcherConfig",
    "PartRegistry",
    "RULE_CATEGORIES",
    "RuleHit",
    "RuleMatcher",
    "RuleSet",
    "as_node",
    "default_stats",
    "level_from_logging",
    "level_rank",
    "parse_level",
    "render_exception",
    "render_template",
    "resolve_matcher_config",
]
