from __future__ import annotations

import pytest

from log_event_rules.core.config import (
    MATCH_TIMEOUT_ENV,
    ConfigShapeError,
    MappingConfigNode,
    MatcherConfig,
    as_node,
    resolve_matcher_config,
)


def test_child_paths_are_dotted() -> None:
    root = MappingConfigNode({"events": {"rules": {"a": {}}}})

    node = root.get_child("events").get_child("rules")

    assert node.path == "events.rules"
    assert node.keys() == ["a"]
    assert node.get_child("a").path == "events.rules.a"


def test_missing_child_is_empty_node() -> None:
    node = MappingConfigNode({}).get_child("nope")

    assert node.keys() == []
    assert node.get_string_list("matchMessage") is None
    assert node.get_string("x") is None


def test_get_child_rejects_scalars() -> None:
    with pytest.raises(ConfigShapeError, match="events"):
        MappingConfigNode({"events": "oops"}).get_child("events")


def test_get_string_list_variants() -> None:
    node = MappingConfigNode({"a": ["x", "y"], "b": "z", "c": ("p", "q"), "d": []})

    assert node.get_string_list("a") == ["x", "y"]
    assert node.get_string_list("b") == ["z"]
    assert node.get_string_list("c") == ["p", "q"]
    assert node.get_string_list("d") == []


def test_get_string_list_wraps_validation_errors() -> None:
    node = MappingConfigNode({"bad": ["x", 3]}, path="rule")

    with pytest.raises(ConfigShapeError, match="rule.bad") as info:
        node.get_string_list("bad")

    assert info.value.__cause__ is not None


def test_as_node_accepts_mappings_and_nodes() -> None:
    node = MappingConfigNode({"x": "1"})

    assert as_node(node) is node
    assert as_node({"x": "1"}, path="p").path == "p"
    assert as_node(None).keys() == []
    with pytest.raises(ConfigShapeError):
        as_node(42)  # type: ignore[arg-type]


def test_resolve_matcher_config_defaults(monkeypatch) -> None:
    monkeypatch.delenv(MATCH_TIMEOUT_ENV, raising=False)

    assert resolve_matcher_config(None) == MatcherConfig()
    assert resolve_matcher_config(None).match_timeout is None


def test_resolve_matcher_config_env_override(monkeypatch) -> None:
    monkeypatch.setenv(MATCH_TIMEOUT_ENV, "2.5")

    assert resolve_matcher_config(MatcherConfig(match_timeout=1.0)).match_timeout == 2.5


@pytest.mark.parametrize("value", ["abc", "0", "-1"])
def test_resolve_matcher_config_rejects_bad_env(monkeypatch, value: str) -> None:
    monkeypatch.setenv(MATCH_TIMEOUT_ENV, value)

    with pytest.raises(ValueError, match=MATCH_TIMEOUT_ENV):
        resolve_matcher_config(None)
