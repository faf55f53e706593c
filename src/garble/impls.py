"""Garble implementations for built-in types.

Traversal policy per type (this decides how many decisions a value consumes):

- ``None``: nothing, no decision
- ``bool``: one decision, replaced by its negation
- ``int``: one decision, replaced as a signed 64-bit integer
- ``float``: one decision, replaced as a 64-bit float
- ``str``: one decision per character, in order
- subclasses of ``int``, ``float`` and ``str`` are rebuilt with their own
  class from the garbled value
- ``bytes``/``bytearray``: one decision per byte, in order
- ``list``/``tuple``/``deque``: every element, in order
- named tuples: every field, in field order
- ``dict``: for each item in insertion order, the key then the value;
  replaced keys may collide
- ``set``/``frozenset``: every element, in iteration order; replaced elements
  may collide so the result can be smaller than the input
"""

import copy
from collections import deque
from functools import partial

from garble.capability import garble, garble_builtin, garble_primitive
from garble.config.constants import NUMERIC
from garble.garbler.base import Garbler


def _rebuild(value, result):
    if result is value or type(value) in (int, float, str):
        return result
    return type(value)(result)


@garble_builtin.register(type(None))
def _garble_none(value: None, garbler: Garbler) -> None:
    return value


@garble_builtin.register(bool)
def _garble_bool(value: bool, garbler: Garbler) -> bool:
    return garble_primitive(value, garbler, garbler.replace_bool)


@garble_builtin.register(int)
def _garble_int(value: int, garbler: Garbler) -> int:
    return _rebuild(value, garble_primitive(
        value, garbler,
        partial(garbler.replace_int, bits=NUMERIC.DEFAULT_INT_BITS, signed=True),
    ))


@garble_builtin.register(float)
def _garble_float(value: float, garbler: Garbler) -> float:
    return _rebuild(value, garble_primitive(
        value, garbler, partial(garbler.replace_float, bits=NUMERIC.DEFAULT_FLOAT_BITS)
    ))


@garble_builtin.register(str)
def _garble_str(value: str, garbler: Garbler) -> str:
    return _rebuild(
        value,
        "".join(garble_primitive(char, garbler, garbler.replace_char) for char in value),
    )


@garble_builtin.register(bytes)
@garble_builtin.register(bytearray)
def _garble_bytes(value, garbler: Garbler):
    return type(value)(garble_primitive(byte, garbler, garbler.replace_byte) for byte in value)


@garble_builtin.register(list)
@garble_builtin.register(set)
@garble_builtin.register(frozenset)
def _garble_sequence(value, garbler: Garbler):
    return type(value)(garble(item, garbler) for item in value)


@garble_builtin.register(tuple)
def _garble_tuple(value: tuple, garbler: Garbler) -> tuple:
    items = [garble(item, garbler) for item in value]
    if hasattr(type(value), "_fields"):
        return type(value)._make(items)
    return type(value)(items)


@garble_builtin.register(deque)
def _garble_deque(value: deque, garbler: Garbler) -> deque:
    return deque((garble(item, garbler) for item in value), maxlen=value.maxlen)


@garble_builtin.register(dict)
def _garble_dict(value: dict, garbler: Garbler) -> dict:
    pairs = []
    for key, item in value.items():
        new_key = garble(key, garbler)
        pairs.append((new_key, garble(item, garbler)))
    # Shallow copy keeps the mapping type and extras like a defaultdict factory
    result = copy.copy(value)
    result.clear()
    result.update(pairs)
    return result

