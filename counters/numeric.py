"""Numeric capabilities for counter values.

A counter value type must provide:
  - addition:    a + b → same type
  - subtraction: a - b → same type
  - a "one" constant of the same type

Python has no arithmetic trait, so the capability set is a structural
Protocol. "One" is built from the value's own type when possible:

    one_like(7)               → 1
    one_like(2.5)             → 1.0
    one_like(Fraction(1, 3))  → Fraction(1, 1)

Overflow is never redefined here. Whatever the value type's operators do
on overflow (nothing for int, wrap for numpy fixed-width scalars) is what
a Counter does.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class SupportsArithmetic(Protocol):
    """A value that supports + and - with values of its own type."""

    def __add__(self, other: Any, /) -> Any: ...

    def __sub__(self, other: Any, /) -> Any: ...


N = TypeVar("N", bound=SupportsArithmetic)


def one_like(value: N) -> N:
    """Return one in the type of ``value``.

    Raises TypeError if the type cannot be constructed from the int 1.
    """
    try:
        return type(value)(1)  # type: ignore[call-arg]
    except (TypeError, ValueError) as e:
        raise TypeError(
            f"Cannot derive one for {type(value).__name__}; pass one= explicitly"
        ) from e
