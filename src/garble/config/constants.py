"""Constants shared by the garbler and the primitive implementations."""

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class ProbabilityLimits:
    """Accepted range for the replacement probability."""
    MIN: float = 0.0
    MAX: float = 1.0


@dataclass(frozen=True)
class NumericLimits:
    """Widths and bounds of the supported numeric primitives."""
    INTEGER_WIDTHS: tuple = (8, 16, 32, 64, 128)
    FLOAT_WIDTHS: tuple = (32, 64)
    DEFAULT_INT_BITS: int = 64
    DEFAULT_FLOAT_BITS: int = 64
    F32_MAX: float = 3.4028234663852886e+38
    F64_MAX: float = sys.float_info.max

    def int_range(self, bits: int, signed: bool) -> tuple:
        """Get the inclusive (min, max) range of an integer width.

        Args:
            bits: Integer width in bits
            signed: Whether the integer is two's complement signed

        Returns:
            Tuple (min_value, max_value)
        """
        if signed:
            return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        return 0, (1 << bits) - 1

    def float_max(self, bits: int) -> float:
        """Get the largest finite value of a float width."""
        return self.F32_MAX if bits == 32 else self.F64_MAX


@dataclass(frozen=True)
class UnicodeLimits:
    """Unicode scalar value bounds used for character replacement."""
    MAX_CODE_POINT: int = 0x10FFFF
    SURROGATE_START: int = 0xD800
    SURROGATE_END: int = 0xDFFF

    @property
    def scalar_count(self) -> int:
        """Number of Unicode scalar values (code points minus surrogates)."""
        return self.MAX_CODE_POINT + 1 - (self.SURROGATE_END - self.SURROGATE_START + 1)


@dataclass(frozen=True)
class ApplicationDefaults:
    """Default configuration values."""
    CONFIG_PATH: str = "config/garble.yaml"
    PROBABILITY: float = 0.05
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    NOGARBLE_METADATA_KEY: str = "nogarble"


# Singleton instances for easy access
PROBABILITY = ProbabilityLimits()
NUMERIC = NumericLimits()
UNICODE = UnicodeLimits()
DEFAULTS = ApplicationDefaults()
