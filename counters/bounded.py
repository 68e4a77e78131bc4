"""Wrapping counter over an unsigned integer width.

Every arithmetic operation is total: stepping past max_value lands on
min_value and stepping below min_value lands on max_value. The only
errors are bad arguments: a non-int value or delta, a value outside the
width, or a width that fails check_width().
"""

from __future__ import annotations

import logging

from .check import check_width
from .widths import U32, UnsignedWidth, get_width

logger = logging.getLogger(__name__)


def _resolve_width(width: UnsignedWidth | str) -> UnsignedWidth:
    if isinstance(width, str):
        resolved = get_width(width)
        if resolved is None:
            raise KeyError(f"Unknown width: {width!r}")
        return resolved

    result = check_width(width)
    if not result.is_well_formed:
        failed = ", ".join(d.check for d in result.errors)
        raise ValueError(f"Width {result.width_name!r} is not usable: {failed}")
    return width


def _require_int(value: object, what: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} must be int, got {type(value).__name__}")
    return value


class BoundedCounter:
    """An unsigned counter that wraps instead of overflowing.

    Example:
        c = BoundedCounter(255, "u8")
        c.increment()        # 0
        c.decrement()        # 255
        c.wrapping_add(3)    # 2
        c + 300              # 46, c is still 2
    """

    __slots__ = ("_value", "_width")

    def __init__(self, value: int, width: UnsignedWidth | str = U32) -> None:
        self._width = _resolve_width(width)
        self._value = self._checked(value)

    def _checked(self, value: object) -> int:
        v = _require_int(value, "value")
        if not self._width.contains(v):
            raise ValueError(
                f"{v} is out of range for {self._width.name} "
                f"[{self._width.min_value}, {self._width.max_value}]"
            )
        return v

    def _step(self, result: int, expected: int) -> None:
        if result != expected:
            logger.debug(
                "%s counter wrapped from %d to %d", self._width.name, self._value, result
            )
        self._value = result

    @property
    def width(self) -> UnsignedWidth:
        return self._width

    @property
    def min_value(self) -> int:
        return self._width.min_value

    @property
    def max_value(self) -> int:
        return self._width.max_value

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        self._value = self._checked(value)

    def increment(self) -> None:
        self.wrapping_add(1)

    def decrement(self) -> None:
        self.wrapping_sub(1)

    def wrapping_add(self, delta: int) -> None:
        d = _require_int(delta, "delta")
        self._step(self._width.wrapping_add(self._value, d), self._value + d)

    def wrapping_sub(self, delta: int) -> None:
        d = _require_int(delta, "delta")
        self._step(self._width.wrapping_sub(self._value, d), self._value - d)

    def reset(self) -> None:
        self._value = self._width.min_value

    def copy(self) -> BoundedCounter:
        return BoundedCounter(self._value, self._width)

    # -- raw arithmetic: returns a wrapped int, never a counter

    def __add__(self, delta: int) -> int:
        return self._width.wrapping_add(self._value, _require_int(delta, "delta"))

    def __sub__(self, delta: int) -> int:
        return self._width.wrapping_sub(self._value, _require_int(delta, "delta"))

    def __iadd__(self, delta: int) -> BoundedCounter:
        self.wrapping_add(delta)
        return self

    def __isub__(self, delta: int) -> BoundedCounter:
        self.wrapping_sub(delta)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedCounter):
            return NotImplemented
        return self._width == other._width and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoundedCounter({self._value}, {self._width.name!r})"
