"""Suggestions over arbitrary containers.

Every container shape is reduced to one capability: "produce the candidate
strings, in iteration order". `candidates_of` is a `functools.singledispatch`
function implementing that capability per shape:

- Mappings (dict, OrderedDict, ...)   -> values
- Other iterables (list, tuple, deque, set, frozenset, dict views, heaps,
  generators, ...)                    -> items
- str / bytes                         -> rejected (one string is not a pool)

`keys_of` is the second mode for mappings (match against keys).

The `suggest*` helpers only pick the mode and threshold, then forward to the
single matching engine in `name_suggest.matching`.

Ordering matters: ties go to the first candidate seen, so unordered containers
(set, frozenset) may return different winners across interpreter runs when two
candidates are equally close.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from functools import singledispatch
from typing import Any

from .matching import DEFAULT_MATCHER, Matcher


@singledispatch
def candidates_of(container: Any) -> Iterator[str]:
    """Return the candidate strings of `container` ("values" mode).

    Register additional container types with `candidates_of.register`.
    """
    if isinstance(container, Iterable):
        return iter(container)
    raise TypeError(f"Cannot suggest from a {type(container).__name__}")


@candidates_of.register(Mapping)
def _mapping_values(container: Mapping) -> Iterator[str]:
    return iter(container.values())


@candidates_of.register(str)
@candidates_of.register(bytes)
@candidates_of.register(bytearray)
def _reject_text(container: Any) -> Iterator[str]:
    raise TypeError(
        f"Expected a collection of strings, got a single {type(container).__name__}"
    )


def keys_of(container: Mapping) -> Iterator[str]:
    """Return the keys of a mapping ("keys" mode)."""
    if not isinstance(container, Mapping):
        raise TypeError(
            f"Key suggestions need a mapping, got {type(container).__name__}"
        )
    return iter(container.keys())


def suggest(
    container: Any, query: str, *, matcher: Matcher | None = None
) -> str | None:
    """Find a value similar to `query`, using the implicit threshold."""
    return suggest_with_dist(container, query, None, matcher=matcher)


def suggest_by(
    container: Any, query: str, dist: int, *, matcher: Matcher | None = None
) -> str | None:
    """Find a value within `dist` edits of `query`."""
    return suggest_with_dist(container, query, dist, matcher=matcher)


def suggest_with_dist(
    container: Any,
    query: str,
    dist: int | None = None,
    *,
    matcher: Matcher | None = None,
) -> str | None:
    """Find a value similar to `query`.

    Args:
        container: Any supported container (see module docstring).
        query: The unrecognized input.
        dist: Explicit maximum distance, or None for the implicit threshold.
        matcher: Optional non-default Matcher (policy/kernel).

    Returns:
        The suggested value, or None.
    """
    matcher = matcher or DEFAULT_MATCHER
    return matcher.find_best_match(query, candidates_of(container), dist)


def suggest_key(
    container: Mapping, query: str, *, matcher: Matcher | None = None
) -> str | None:
    """Find a mapping key similar to `query`, using the implicit threshold."""
    return suggest_key_with_dist(container, query, None, matcher=matcher)


def suggest_key_by(
    container: Mapping, query: str, dist: int, *, matcher: Matcher | None = None
) -> str | None:
    """Find a mapping key within `dist` edits of `query`."""
    return suggest_key_with_dist(container, query, dist, matcher=matcher)


def suggest_key_with_dist(
    container: Mapping,
    query: str,
    dist: int | None = None,
    *,
    matcher: Matcher | None = None,
) -> str | None:
    matcher = matcher or DEFAULT_MATCHER
    return matcher.find_best_match(query, keys_of(container), dist)
