"""Unsigned integer widths for wrapping counters.

A width is the capability object a BoundedCounter is parameterized over:
explicit bounds [min_value, max_value] plus wrapping arithmetic modulo the
span of those bounds.

Bounds are declared per width, never derived. The registry holds the
supported machine widths:

    u8   [0, 255]
    u16  [0, 65535]
    u32  [0, 4294967295]

A further width is just another UnsignedWidth instance; check_width()
decides whether it is usable.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class UnsignedWidth:
    """Bounds and wrapping arithmetic for one unsigned integer width.

    Example:
        U8.wrapping_add(255, 1)  → 0
        U8.wrapping_sub(0, 1)    → 255
        U8.wrapping_add(10, 300) → 54
    """

    name: str
    min_value: int
    max_value: int

    @property
    def modulus(self) -> int:
        """Number of representable values, max - min + 1."""
        return self.max_value - self.min_value + 1

    @property
    def bits(self) -> int:
        return self.max_value.bit_length()

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def wrap(self, value: int) -> int:
        """Reduce any int into [min_value, max_value]."""
        return self.min_value + (value - self.min_value) % self.modulus

    def wrapping_add(self, value: int, delta: int) -> int:
        return self.wrap(value + delta)

    def wrapping_sub(self, value: int, delta: int) -> int:
        return self.wrap(value - delta)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

U8 = UnsignedWidth("u8", 0, 0xFF)
U16 = UnsignedWidth("u16", 0, 0xFFFF)
U32 = UnsignedWidth("u32", 0, 0xFFFF_FFFF)

WIDTHS: Mapping[str, UnsignedWidth] = MappingProxyType(
    {w.name: w for w in (U8, U16, U32)}
)


def get_width(name: str) -> UnsignedWidth | None:
    return WIDTHS.get(name)
