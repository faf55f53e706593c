"""Tests for wrapping types: collections, optionals and opaque values."""

from collections import OrderedDict, defaultdict, deque, namedtuple
from enum import Enum, IntEnum

import pytest

from garble import (
    NoGarble, SimpleGarbler, U8, UnsupportedTypeError,
    garble, is_garblable, leaf_count,
)

from conftest import TargetGarbler, ZeroGarbler

Point = namedtuple("Point", ["x", "y"])


class Color(Enum):
    RED = 1
    GREEN = 2


class Level(IntEnum):
    LOW = 1
    HIGH = 2


class TestPassthrough:
    """Values without leaves come back untouched and consume nothing."""

    @pytest.mark.parametrize("value", [None, Color.RED, Level.HIGH, (), [], {}, set()])
    def test_no_leaves(self, value):
        garbler = ZeroGarbler()
        assert garble(value, garbler) == value
        assert garbler.decisions == 0

    def test_enum_member_is_same_object(self, always):
        assert garble(Color.GREEN, always) is Color.GREEN

    def test_nogarble_unwraps(self, always):
        assert garble(NoGarble(U8(4)), always) == U8(4)
        assert garble([NoGarble(True)], always) == [True]
        assert leaf_count(NoGarble([1, 2, 3])) == 0


class TestSequences:

    def test_list(self, zero_garbler):
        assert garble([1, 2, 3], zero_garbler) == [0, 0, 0]

    def test_tuple(self, zero_garbler):
        result = garble((True, 5, "ab"), zero_garbler)
        assert result == (False, 0, "\0\0")
        assert type(result) is tuple

    def test_namedtuple_keeps_type(self, zero_garbler):
        result = garble(Point(3, 4), zero_garbler)
        assert result == Point(0, 0)
        assert type(result) is Point

    def test_deque_keeps_maxlen(self, zero_garbler):
        result = garble(deque([1, 2], maxlen=5), zero_garbler)
        assert list(result) == [0, 0]
        assert result.maxlen == 5

    def test_elements_in_order(self):
        garbler = TargetGarbler(1)
        assert garble([True, True, True], garbler) == [True, False, True]

    def test_nested_in_order(self):
        garbler = TargetGarbler(2)
        assert garble([[True, True], [True]], garbler) == [[True, True], [False]]

    def test_input_is_not_mutated(self, zero_garbler):
        value = [1, [2, 3]]
        garble(value, zero_garbler)
        assert value == [1, [2, 3]]

    def test_optional(self, zero_garbler):
        assert garble([None, 7], zero_garbler) == [None, 0]


class TestMappings:

    def test_key_then_value(self):
        # Decision 0 is the first key, decision 1 its value
        garbler = TargetGarbler(1)
        assert garble({True: True, False: False}, garbler) == {True: False, False: False}

    def test_leaf_count_includes_keys(self):
        assert leaf_count({1: "ab", 2: None}) == 4

    def test_keeps_mapping_type(self, zero_garbler):
        result = garble(OrderedDict([(1, 2)]), zero_garbler)
        assert type(result) is OrderedDict
        assert result == OrderedDict([(0, 0)])

    def test_keeps_defaultdict_factory(self, zero_garbler):
        value = defaultdict(list, {1: [2]})
        result = garble(value, zero_garbler)
        assert result.default_factory is list
        assert result == {0: [0]}
        assert value == {1: [2]}

    def test_colliding_keys_merge(self, zero_garbler):
        assert garble({1: 1, 2: 2}, zero_garbler) == {0: 0}


class TestSets:

    def test_set(self, never):
        assert garble({1, 2, 3}, never) == {1, 2, 3}

    def test_frozenset_keeps_type(self, zero_garbler):
        result = garble(frozenset({1, 2}), zero_garbler)
        assert type(result) is frozenset
        assert result == frozenset({0})

    def test_one_decision_per_element(self):
        assert leaf_count({1, 2, 3}) == 3


class TestSupport:

    def test_unsupported_value(self, always):
        with pytest.raises(UnsupportedTypeError):
            garble(object(), always)

    def test_unsupported_is_type_error(self, always):
        with pytest.raises(TypeError):
            garble([1, object()], always)

    @pytest.mark.parametrize("value", [1, "a", None, [object()], Color.RED, U8(1), NoGarble(object())])
    def test_is_garblable(self, value):
        assert is_garblable(value)

    @pytest.mark.parametrize("value", [object(), 1j, range(3)])
    def test_is_not_garblable(self, value):
        assert not is_garblable(value)


def test_reproducible_across_garblers():
    value = {"values": [U8(1), U8(2), U8(3)], "flags": (True, False)}
    first = garble(value, SimpleGarbler(0.5, seed=2023))
    second = garble(value, SimpleGarbler(0.5, seed=2023))
    assert first == second
