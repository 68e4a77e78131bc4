from __future__ import annotations

from typing import Generic

from .numeric import N, one_like


class Counter(Generic[N]):
    """A single value with increment and decrement.

    Arithmetic is the value type's own. A Counter over int never overflows;
    a Counter over numpy.uint8 wraps because numpy.uint8 does. No bound is
    imposed by the Counter itself.

    Example:
        c = Counter(0)
        c.set(10)
        c.increment()        # 11
        c + 5                # 16, c is still 11
    """

    __slots__ = ("_value", "_one")

    def __init__(self, value: N, one: N | None = None) -> None:
        self._value = value
        self._one = one if one is not None else one_like(value)

    def get(self) -> N:
        return self._value

    def set(self, value: N) -> None:
        self._value = value

    def increment(self) -> None:
        self._value = self._value + self._one

    def decrement(self) -> None:
        self._value = self._value - self._one

    def copy(self) -> Counter[N]:
        return Counter(self._value, one=self._one)

    # -- raw arithmetic: returns a value, never a Counter

    def __add__(self, rhs: N) -> N:
        return self._value + rhs

    def __sub__(self, rhs: N) -> N:
        return self._value - rhs

    def __iadd__(self, rhs: N) -> Counter[N]:
        self._value = self._value + rhs
        return self

    def __isub__(self, rhs: N) -> Counter[N]:
        self._value = self._value - rhs
        return self

    def __repr__(self) -> str:
        return f"Counter({self._value!r})"
