"""
Tests for container adapters.

Every container shape must give the same answers for the same pool.
"""

import heapq
from collections import OrderedDict, deque
from types import MappingProxyType

import pytest

from name_suggest import (
    Matcher,
    ThresholdPolicy,
    candidates_of,
    keys_of,
    suggest,
    suggest_by,
    suggest_key,
    suggest_key_by,
    suggest_key_with_dist,
    suggest_with_dist,
)


def _heap(items):
    heap = list(items)
    heapq.heapify(heap)
    return heap


SEQUENCE_FACTORIES = [
    pytest.param(list, id="list"),
    pytest.param(tuple, id="tuple"),
    pytest.param(deque, id="deque"),
    pytest.param(set, id="set"),
    pytest.param(frozenset, id="frozenset"),
    pytest.param(_heap, id="heap"),
    pytest.param(lambda items: (x for x in items), id="generator"),
    pytest.param(lambda items: dict.fromkeys(items).keys(), id="dict_keys"),
    pytest.param(lambda items: {i: x for i, x in enumerate(items)}, id="dict"),
]

MAP_FACTORIES = [
    pytest.param(dict, id="dict"),
    pytest.param(OrderedDict, id="ordered_dict"),
    pytest.param(lambda pairs: MappingProxyType(dict(pairs)), id="mapping_proxy"),
]


# ═══════════════════════════════════════════════════════════════════
#  VALUES MODE
# ═══════════════════════════════════════════════════════════════════

class TestSuggestValues:

    @pytest.mark.parametrize("make", SEQUENCE_FACTORIES)
    def test_suggest(self, make):
        assert suggest(make(["aaab", "aaabc"]), "aaaa") == "aaab"

    @pytest.mark.parametrize("make", SEQUENCE_FACTORIES)
    def test_suggest_by(self, make):
        assert suggest(make(["poac", "poacpp"]), "paoc") is None
        assert suggest_by(make(["poac", "poacpp"]), "paoc", 1) is None
        assert suggest_by(make(["poac", "poacpp"]), "paoc", 2) == "poac"

    @pytest.mark.parametrize("make", SEQUENCE_FACTORIES)
    def test_suggest_with_dist(self, make):
        assert suggest_with_dist(make(["poac", "poacpp"]), "paoc") is None
        assert suggest_with_dist(make(["poac", "poacpp"]), "paoc", 2) == "poac"

    @pytest.mark.parametrize("make", MAP_FACTORIES)
    def test_map_values(self, make):
        assert suggest(make([(2, "aaab"), (4, "aaabc")]), "aaaa") == "aaab"

        pool = make([(2, "poac"), (4, "poacpp")])
        assert suggest(pool, "paoc") is None
        assert suggest_by(pool, "paoc", 1) is None
        assert suggest_by(pool, "paoc", 2) == "poac"

    def test_iteration_order_decides_ties(self):
        assert suggest(["hat", "bat"], "cat") == "hat"
        assert suggest({"x": "bat", "y": "hat"}, "cat") == "bat"

    def test_empty_containers(self):
        for empty in ([], (), set(), {}, deque()):
            assert suggest(empty, "anything") is None
            assert suggest_by(empty, "anything", 0) is None


# ═══════════════════════════════════════════════════════════════════
#  KEYS MODE
# ═══════════════════════════════════════════════════════════════════

class TestSuggestKeys:

    @pytest.mark.parametrize("make", MAP_FACTORIES)
    def test_suggest_key(self, make):
        assert suggest_key(make([("aaab", 2), ("aaabc", 4)]), "aaaa") == "aaab"

    @pytest.mark.parametrize("make", MAP_FACTORIES)
    def test_suggest_key_by(self, make):
        pool = make([("poac", 2), ("poacpp", 4)])
        assert suggest_key(pool, "paoc") is None
        assert suggest_key_by(pool, "paoc", 1) is None
        assert suggest_key_by(pool, "paoc", 2) == "poac"
        assert suggest_key_with_dist(pool, "paoc", 2) == "poac"
        assert suggest_key_with_dist(pool, "paoc") is None

    def test_keys_and_values_are_separate_modes(self):
        pool = {"aaab": "zzzz"}
        assert suggest_key(pool, "aaaa") == "aaab"
        assert suggest(pool, "aaaa") is None

    def test_key_mode_requires_mapping(self):
        with pytest.raises(TypeError, match="mapping"):
            suggest_key(["aaab"], "aaaa")


# ═══════════════════════════════════════════════════════════════════
#  CAPABILITY
# ═══════════════════════════════════════════════════════════════════

class _CommandTable:
    def __init__(self, *names):
        self.names = names


@candidates_of.register(_CommandTable)
def _command_table_names(container):
    return iter(container.names)


class TestCandidatesOf:

    def test_mapping_yields_values(self):
        assert list(candidates_of({"a": "x", "b": "y"})) == ["x", "y"]

    def test_keys_of(self):
        assert list(keys_of({"a": "x", "b": "y"})) == ["a", "b"]

    @pytest.mark.parametrize("container", ["install", b"install", bytearray(b"x")])
    def test_single_string_rejected(self, container):
        with pytest.raises(TypeError, match="single"):
            suggest(container, "instal")

    def test_non_iterable_rejected(self):
        with pytest.raises(TypeError, match="int"):
            suggest(42, "instal")

    def test_non_str_values_rejected(self):
        with pytest.raises(TypeError):
            suggest({"aaab": 2}, "aaab")

    def test_registered_container(self):
        table = _CommandTable("update", "install")
        assert suggest(table, "instakk") == "install"


class TestMatcherOption:

    def test_custom_policy(self):
        matcher = Matcher(policy=ThresholdPolicy(divisor=1))
        assert suggest(["poac", "poacpp"], "paoc", matcher=matcher) == "poac"
        assert suggest_key({"poac": 1}, "paoc", matcher=matcher) == "poac"

    def test_rapidfuzz_kernel(self):
        matcher = Matcher(kernel="rapidfuzz")
        assert suggest_by(["poac", "poacpp"], "paoc", 2, matcher=matcher) == "poac"
