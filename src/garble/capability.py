"""The garble capability.

Every garblable type answers ``garble(value, garbler)`` with a new value of
the same type. Types fall into three groups:

- primitives make exactly one ``garbler.decide()`` call and, when it fires,
  ask the garbler for a replacement;
- wrapping types (collections, strings, optionals) garble each element
  according to their own documented policy;
- composites garble each field in declaration order (see
  :mod:`garble.derive`).

Classes opt in by subclassing :class:`Garble` (or being registered with it).
Built-in types are handled by :func:`garble_builtin`, a
``functools.singledispatch`` function that :mod:`garble.impls` populates.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from functools import singledispatch
from typing import Any, Callable, TypeVar

from garble.errors import UnsupportedTypeError
from garble.garbler.base import Garbler
from garble.garbler.passthrough import PassGarbler
from garble.utils.logger import Logger

T = TypeVar("T")


class Garble(ABC):
    """Abstract base class for values that can be garbled."""

    @abstractmethod
    def garble(self, garbler: Garbler) -> "Garble":
        """Garble this value.

        Args:
            garbler: Garbler supplying decisions and replacements

        Returns:
            New value of the same type
        """
        pass


@dataclass(frozen=True)
class NoGarble(Garble):
    """Wrapper for a value that must not be garbled.

    Garbling a ``NoGarble`` consumes no decisions and returns the wrapped
    value itself, unwrapped.
    """
    value: Any

    def garble(self, garbler: Garbler) -> Any:
        return self.value


def garble(value: T, garbler: Garbler) -> T:
    """Garble any supported value.

    Args:
        value: Value to garble
        garbler: Garbler supplying decisions and replacements

    Returns:
        New value of the same type, with some leaves possibly replaced

    Raises:
        UnsupportedTypeError: If the value's type has no garble implementation
    """
    if isinstance(value, Garble):
        return value.garble(garbler)
    if isinstance(value, Enum):
        # Enum members are opaque tags
        return value
    return garble_builtin(value, garbler)


@singledispatch
def garble_builtin(value: Any, garbler: Garbler) -> Any:
    raise UnsupportedTypeError(f"Cannot garble value {Logger.format_value(value)}")


def garble_primitive(value: T, garbler: Garbler, replace: Callable[[T], T]) -> T:
    """Apply the one-decision-per-leaf rule to a primitive value.

    Args:
        value: Current value
        garbler: Garbler supplying the decision
        replace: Called with the current value when the decision fires

    Returns:
        The replacement, or the original value
    """
    if garbler.decide():
        return replace(value)
    return value


def is_garblable(value: Any) -> bool:
    """Check whether a value has a garble implementation.

    Only the value's own type is checked, not the elements it contains.
    """
    if isinstance(value, (Garble, Enum)):
        return True
    return garble_builtin.dispatch(type(value)) is not garble_builtin.dispatch(object)


def leaf_count(value: Any) -> int:
    """Count the decisions a garble pass over ``value`` would consume.

    Args:
        value: Any garblable value

    Returns:
        Number of ``decide()`` calls made when garbling the value
    """
    counter = PassGarbler()
    garble(value, counter)
    return counter.decisions
