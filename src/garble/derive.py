"""Field-by-field garbling for structured types.

``@garblable`` turns a dataclass or ``typing.NamedTuple`` into a garblable
type. The installed ``garble`` method visits the fields in declaration order,
garbles each one with the same garbler and assembles a new instance. No
decision is made for the composite itself, so a value with k leaves consumes
exactly k decisions, in left-to-right, outer-to-inner order.

Example::

    @garblable
    @dataclass
    class Header:
        length: U32
        urgent: bool
        checksum: U16 = nogarble_field(default=U16(0))

Field handling:

- a field annotated with a fixed-width number (``U32``, ``F32``, ...) that
  holds a plain ``int``/``float`` is garbled as that width, and stored as it,
  when the number fits the width unchanged; any other value (a ``bool``, an
  out-of-range or lossy number, a non-number) is garbled as its own type;
  ``Optional[...]`` of such a class behaves the same when the value is set
- fields declared with :func:`nogarble_field`, with
  ``metadata={"nogarble": True}``, or annotated ``Annotated[T, NOGARBLE]``
  are copied unchanged and consume no decision
- dataclass fields with ``init=False`` are garbled too

The field plan of a class is computed on its first garble call (so forward
references resolve) and cached for the class lifetime.
"""

import copy
import dataclasses
import types
import typing
from typing import Any, List, NamedTuple, Optional, Type, TypeVar, Union

from garble.capability import Garble, garble
from garble.config.constants import DEFAULTS
from garble.errors import UnsupportedTypeError
from garble.garbler.base import Garbler
from garble.numeric import is_width_type
from garble.utils.logger import Logger, get_logger

logger = get_logger(__name__)

C = TypeVar("C", bound=type)

_PLAN_ATTR = "__garble_fields__"
_UNION_TYPES = (Union, getattr(types, "UnionType", Union))


class _NoGarbleMarker:
    """``Annotated`` marker excluding a field from garbling."""

    def __repr__(self) -> str:
        return "NOGARBLE"


NOGARBLE = _NoGarbleMarker()


class FieldPlan(NamedTuple):
    """How one field of a composite is garbled."""
    name: str
    width_type: Optional[type]
    nogarble: bool


def nogarble_field(**kwargs: Any) -> Any:
    """Declare a dataclass field that is never garbled.

    Accepts the same keyword arguments as ``dataclasses.field``.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[DEFAULTS.NOGARBLE_METADATA_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def garblable(cls: Optional[C] = None) -> Any:
    """Class decorator installing a field-by-field ``garble`` method.

    Usable as ``@garblable`` or ``@garblable()``. Apply it above
    ``@dataclass``.

    Args:
        cls: Dataclass or NamedTuple class

    Returns:
        The same class, now a virtual subclass of :class:`Garble`

    Raises:
        UnsupportedTypeError: If cls is not a dataclass or NamedTuple, or
            already defines ``garble``
    """
    if cls is None:
        return garblable

    if not isinstance(cls, type) or not (dataclasses.is_dataclass(cls) or _is_namedtuple(cls)):
        raise UnsupportedTypeError(
            f"@garblable requires a dataclass or NamedTuple, got {cls!r}"
        )
    if "garble" in cls.__dict__:
        raise UnsupportedTypeError(f"{cls.__name__} already defines garble()")

    cls.garble = _garble_composite
    Garble.register(cls)
    return cls


def field_plan(cls: Type) -> List[FieldPlan]:
    """Get the cached field plan of a composite class, building it if needed.

    Args:
        cls: Dataclass or NamedTuple class

    Returns:
        FieldPlan entries in declaration order
    """
    plan = cls.__dict__.get(_PLAN_ATTR)
    if plan is None:
        plan = _build_plan(cls)
        setattr(cls, _PLAN_ATTR, plan)
        logger.debug(f"Field plan: {Logger.format_field_plan(cls.__qualname__, plan)}")
    return plan


def _garble_composite(self, garbler: Garbler):
    """Garble every field in declaration order and build a new instance."""
    cls = type(self)
    plan = field_plan(cls)
    values = []
    for entry in plan:
        value = getattr(self, entry.name)
        if not entry.nogarble:
            value = _garble_field(value, entry.width_type, garbler)
        values.append(value)

    if _is_namedtuple(cls):
        return cls._make(values)

    result = copy.copy(self)
    for entry, value in zip(plan, values):
        # object.__setattr__ also works on frozen dataclasses
        object.__setattr__(result, entry.name, value)
    return result


def _garble_field(value: Any, width_type: Optional[type], garbler: Garbler) -> Any:
    if width_type is not None:
        value = width_type.coerce(value)
    return garble(value, garbler)


def _build_plan(cls: Type) -> List[FieldPlan]:
    try:
        hints = typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as exc:
        logger.warning(
            f"Could not resolve annotations of {cls.__qualname__} ({exc}); "
            f"fixed-width field conversion disabled"
        )
        hints = {}

    if _is_namedtuple(cls):
        return [_plan_entry(name, hints.get(name), False) for name in cls._fields]

    return [
        _plan_entry(
            f.name,
            hints.get(f.name),
            bool(f.metadata.get(DEFAULTS.NOGARBLE_METADATA_KEY, False)),
        )
        for f in dataclasses.fields(cls)
    ]


def _plan_entry(name: str, hint: Any, nogarble: bool) -> FieldPlan:
    if typing.get_origin(hint) is typing.Annotated:
        base, *extras = typing.get_args(hint)
        nogarble = nogarble or any(extra is NOGARBLE for extra in extras)
        hint = base
    return FieldPlan(name=name, width_type=_width_of(hint), nogarble=nogarble)


def _width_of(hint: Any) -> Optional[type]:
    if is_width_type(hint):
        return hint
    if typing.get_origin(hint) in _UNION_TYPES:
        members = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(members) == 1 and is_width_type(members[0]):
            return members[0]
    return None


def _is_namedtuple(cls: Type) -> bool:
    return isinstance(cls, type) and issubclass(cls, tuple) and hasattr(cls, "_fields")
