"""Data garbling for fault-injection testing.

Slightly and randomly corrupt in-memory values, one leaf field at a time,
with a caller-chosen probability.

Example::

    from dataclasses import dataclass
    from garble import SimpleGarbler, U32, garble, garblable

    @garblable
    @dataclass
    class Reading:
        sensor: U32
        valid: bool

    # 50% chance of garbling each leaf, reproducible through the seed
    garbler = SimpleGarbler(0.5, seed=42)
    garbled = garble(Reading(U32(7), True), garbler)
"""

__version__ = "1.0.0"

from garble.errors import GarbleError, ConfigurationError, UnsupportedTypeError

# Garblers
from garble.garbler import Garbler, PassGarbler, SimpleGarbler

# Capability
from garble.capability import Garble, NoGarble, garble, is_garblable, leaf_count

# Built-in implementations register themselves on import
from garble import impls  # noqa: F401

# Fixed-width primitives
from garble.numeric import (
    Integer, Float,
    U8, U16, U32, U64, U128,
    I8, I16, I32, I64, I128,
    NonZeroU8, NonZeroU16, NonZeroU32, NonZeroU64, NonZeroU128,
    NonZeroI8, NonZeroI16, NonZeroI32, NonZeroI64, NonZeroI128,
    F32, F64,
)

# Composite traversal
from garble.derive import NOGARBLE, FieldPlan, field_plan, garblable, nogarble_field

# Configuration
from garble.utils.config_loader import (
    ConfigLoader,
    GarblerConfig,
    get_config_loader,
    reload_config,
    create_garbler_from_config,
)

__all__ = [
    '__version__',

    # Errors
    'GarbleError',
    'ConfigurationError',
    'UnsupportedTypeError',

    # Garblers
    'Garbler',
    'PassGarbler',
    'SimpleGarbler',

    # Capability
    'Garble',
    'NoGarble',
    'garble',
    'is_garblable',
    'leaf_count',

    # Numeric primitives
    'Integer', 'Float',
    'U8', 'U16', 'U32', 'U64', 'U128',
    'I8', 'I16', 'I32', 'I64', 'I128',
    'NonZeroU8', 'NonZeroU16', 'NonZeroU32', 'NonZeroU64', 'NonZeroU128',
    'NonZeroI8', 'NonZeroI16', 'NonZeroI32', 'NonZeroI64', 'NonZeroI128',
    'F32', 'F64',

    # Composite traversal
    'NOGARBLE',
    'FieldPlan',
    'field_plan',
    'garblable',
    'nogarble_field',

    # Configuration
    'ConfigLoader',
    'GarblerConfig',
    'get_config_loader',
    'reload_config',
    'create_garbler_from_config',
]
