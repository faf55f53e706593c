"""Base class for garblers.

A garbler is the strategy half of garbling: it decides, one leaf at a time,
whether a value should be replaced, and produces the replacement when it is.
The traversal half lives with the values themselves (see
:mod:`garble.capability`), which only ever ask a garbler two things:

- ``decide()``: should this leaf be replaced?
- ``replace_<category>(value, ...)``: what should it be replaced with?

Primitive implementations call ``decide()`` exactly once per leaf, so the
number of decisions consumed by a pass equals the number of leaves visited.
"""

from abc import ABC, abstractmethod
from typing import Any


class Garbler(ABC):
    """Abstract base class for garbling strategies."""

    def garble(self, value: Any) -> Any:
        """Garble a value with this garbler.

        Equivalent to ``garble.garble(value, self)``.

        Args:
            value: Any garblable value

        Returns:
            New value of the same type
        """
        from garble.capability import garble
        return garble(value, self)

    @abstractmethod
    def decide(self) -> bool:
        """Decide whether the current leaf should be replaced.

        Returns:
            True if the leaf should be replaced
        """
        pass

    @abstractmethod
    def replace_bool(self, value: bool) -> bool:
        """Produce a replacement for a boolean."""
        pass

    @abstractmethod
    def replace_int(self, value: int, bits: int, signed: bool) -> int:
        """Produce a replacement for a fixed-width integer.

        Args:
            value: Current value
            bits: Integer width in bits
            signed: Whether the width is signed

        Returns:
            Replacement within the representable range of the width
        """
        pass

    @abstractmethod
    def replace_float(self, value: float, bits: int) -> float:
        """Produce a replacement for a float of the given width (32 or 64)."""
        pass

    @abstractmethod
    def replace_char(self, value: str) -> str:
        """Produce a replacement for a single character."""
        pass

    def replace_byte(self, value: int) -> int:
        """Produce a replacement for a single byte."""
        return self.replace_int(value, 8, False)
