"""Shared fixtures and test garblers."""

import os
import sys

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from garble import Garbler, SimpleGarbler


class ZeroGarbler(Garbler):
    """Always fires and replaces every leaf with a zero value."""

    def __init__(self):
        self.decisions = 0

    def decide(self) -> bool:
        self.decisions += 1
        return True

    def replace_bool(self, value: bool) -> bool:
        return False

    def replace_int(self, value: int, bits: int, signed: bool) -> int:
        return 0

    def replace_float(self, value: float, bits: int) -> float:
        return 0.0

    def replace_char(self, value: str) -> str:
        return "\0"


class TargetGarbler(ZeroGarbler):
    """Fires only for the given decision indexes (0-based)."""

    def __init__(self, *indexes: int):
        super().__init__()
        self.indexes = set(indexes)

    def decide(self) -> bool:
        index = self.decisions
        self.decisions += 1
        return index in self.indexes


@pytest.fixture
def zero_garbler():
    return ZeroGarbler()


@pytest.fixture
def never():
    return SimpleGarbler(0.0, seed=0)


@pytest.fixture
def always():
    return SimpleGarbler(1.0, seed=0)
