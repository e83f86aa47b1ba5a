"""Warn-and-continue batch compilation of rule entries."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeVar

import regex

from .levels import level_rank, parse_level
from .parts import PartRegistry

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CompileFailure:
    """One entry that could not be compiled."""

    entry: str
    error: str


def compile_all(
    entries: Iterable[str],
    compile_one: Callable[[str], T],
    *,
    errors: tuple[type[Exception], ...] = (ValueError,),
) -> tuple[list[T], list[CompileFailure]]:
    """Compile each entry independently; collect failures instead of raising."""
    compiled: list[T] = []
    failures: list[CompileFailure] = []
    for entry in entries:
        try:
            compiled.append(compile_one(entry))
        except errors as exc:
            failures.append(CompileFailure(entry=entry, error=str(exc)))
    return compiled, failures


def compile_patterns(
    raw_patterns: Iterable[str],
    parts: PartRegistry,
) -> tuple[list[regex.Pattern], list[CompileFailure]]:
    """Substitute parts into each pattern and compile it.

    Failures report the post-substitution string.
    """
    return compile_all(
        (parts.substitute(p) for p in raw_patterns),
        regex.compile,
        errors=(regex.error,),
    )


def _resolve_level(name: str) -> int:
    level = parse_level(name)
    if level is None:
        raise ValueError(f"unknown level {name!r}")
    return level_rank(level)


def compile_levels(names: Iterable[str]) -> tuple[set[int], list[CompileFailure]]:
    """Resolve level names into a set of integer severities."""
    ranks, failures = compile_all(names, _resolve_level)
    return set(ranks), failures
