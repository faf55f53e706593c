"""Garbling strategies.

A garbler supplies the probability and the randomness; values supply the
traversal. :class:`SimpleGarbler` is the stock random implementation and
:class:`PassGarbler` a no-op that only counts decisions.
"""

from .base import Garbler
from .passthrough import PassGarbler
from .simple import SimpleGarbler, validate_probability

__all__ = ['Garbler', 'PassGarbler', 'SimpleGarbler', 'validate_probability']
