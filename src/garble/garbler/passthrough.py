"""Garbler that never replaces anything but counts its decisions."""

from garble.garbler.base import Garbler


class PassGarbler(Garbler):
    """Never fires; records how many decisions a garble pass asked for.

    Useful to find out how many leaves a value has, or to check that a
    traversal is wired correctly without touching the data.
    """

    def __init__(self):
        self.decisions = 0

    def decide(self) -> bool:
        self.decisions += 1
        return False

    def replace_bool(self, value: bool) -> bool:
        return value

    def replace_int(self, value: int, bits: int, signed: bool) -> int:
        return value

    def replace_float(self, value: float, bits: int) -> float:
        return value

    def replace_char(self, value: str) -> str:
        return value
