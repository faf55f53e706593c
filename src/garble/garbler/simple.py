"""Random garbler driven by a replacement probability."""

import hashlib
import numbers
import random
from typing import Optional

from garble.config.constants import NUMERIC, PROBABILITY, UNICODE
from garble.errors import ConfigurationError
from garble.garbler.base import Garbler
from garble.utils.bits import next_scalar, round_f32, scalar_from_index
from garble.utils.logger import get_logger

logger = get_logger(__name__)


def validate_probability(probability: float) -> float:
    """Check that a replacement probability lies in [0.0, 1.0].

    Args:
        probability: Candidate probability

    Returns:
        The probability as a float

    Raises:
        ConfigurationError: If the probability is not a real number in range
    """
    if isinstance(probability, bool) or not isinstance(probability, numbers.Real):
        raise ConfigurationError(
            f"Probability must be a real number, got {type(probability).__name__}"
        )
    probability = float(probability)
    # NaN fails both comparisons
    if not PROBABILITY.MIN <= probability <= PROBABILITY.MAX:
        raise ConfigurationError(
            f"Probability must be within [{PROBABILITY.MIN}, {PROBABILITY.MAX}], got {probability}"
        )
    return probability


class SimpleGarbler(Garbler):
    """Garbles each leaf independently with a fixed probability.

    Randomness comes from two private ``random.Random`` streams derived from
    the seed: one for decisions, one for replacement values. Every call to
    :meth:`decide` consumes exactly one uniform draw from the decision stream,
    whatever the outcome, and replacements never touch it. The n-th decision
    of a garbler therefore depends only on the seed and n: two garblers with
    the same seed make the same decisions for any inputs of the same shape.

    Replacement policy:
        - booleans are negated (no extra draw)
        - integers are drawn uniformly over the width's range; a draw equal to
          the current value steps to the next value, wrapping at the maximum
        - floats are drawn uniformly over ``[-MAX, MAX)`` for the width and are
          always finite; a draw equal to the current value is negated (or set
          to ``MAX`` when zero)
        - characters are drawn over all Unicode scalar values; a draw equal to
          the current character steps to the next scalar value

    Not thread-safe: the random streams are advanced by every decision and
    every replacement.
    """

    def __init__(self, probability: float, seed: Optional[int] = None):
        """Initialize the garbler.

        Args:
            probability: Replacement probability per leaf, within [0.0, 1.0]
            seed: Seed for the random source. If None, seeds from OS entropy.

        Raises:
            ConfigurationError: If probability is outside [0.0, 1.0]
        """
        self._probability = validate_probability(probability)
        self._seed = seed
        self._decision_rng = random.Random(derive_seed(seed, "decision"))
        self._value_rng = random.Random(derive_seed(seed, "value"))
        self._draws = 0

        logger.debug(f"SimpleGarbler created with probability={self._probability} seed={seed}")

    @classmethod
    def with_seed(cls, probability: float, seed: int) -> "SimpleGarbler":
        """Create a reproducible garbler.

        Args:
            probability: Replacement probability per leaf
            seed: Seed for the random source

        Returns:
            SimpleGarbler instance
        """
        return cls(probability, seed=seed)

    @property
    def probability(self) -> float:
        """Replacement probability per leaf."""
        return self._probability

    @property
    def seed(self) -> Optional[int]:
        """Seed the random source was created with."""
        return self._seed

    @property
    def draws(self) -> int:
        """Number of decisions made so far."""
        return self._draws

    def reconfigure(self, probability: float) -> None:
        """Change the replacement probability.

        The random stream position is kept.

        Args:
            probability: New replacement probability

        Raises:
            ConfigurationError: If probability is outside [0.0, 1.0]
        """
        self._probability = validate_probability(probability)
        logger.debug(f"SimpleGarbler probability updated to: {self._probability}")

    def decide(self) -> bool:
        self._draws += 1
        return self._decision_rng.random() < self._probability

    def replace_bool(self, value: bool) -> bool:
        return not value

    def replace_int(self, value: int, bits: int, signed: bool) -> int:
        low, high = NUMERIC.int_range(bits, signed)
        candidate = low + self._value_rng.getrandbits(bits)
        if candidate == value:
            candidate = low if candidate == high else candidate + 1
        return candidate

    def replace_float(self, value: float, bits: int) -> float:
        limit = NUMERIC.float_max(bits)
        candidate = (2.0 * self._value_rng.random() - 1.0) * limit
        if bits == 32:
            candidate = round_f32(candidate)
        if candidate == value:
            candidate = -candidate if candidate != 0.0 else limit
        return candidate

    def replace_char(self, value: str) -> str:
        code_point = scalar_from_index(self._value_rng.randrange(UNICODE.scalar_count))
        candidate = chr(code_point)
        if candidate == value:
            candidate = chr(next_scalar(code_point))
        return candidate

    def __repr__(self) -> str:
        return (
            f"SimpleGarbler(probability={self._probability!r}, seed={self._seed!r}, "
            f"draws={self._draws})"
        )


def derive_seed(seed: Optional[int], component: str) -> Optional[int]:
    """Derive a deterministic per-component seed from a master seed.

    Args:
        seed: Master seed, or None for OS entropy
        component: Component name (e.g. 'decision', 'value')

    Returns:
        Derived seed, or None when no master seed is given
    """
    if seed is None:
        return None
    seed_input = f"{seed}:{component}"
    seed_bytes = hashlib.md5(seed_input.encode()).digest()
    return int.from_bytes(seed_bytes[:8], byteorder='big')
