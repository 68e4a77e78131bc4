"""Well-formedness checks for unsigned widths.

A width is usable by BoundedCounter when every error-level check passes.
Checks run in two layers:

  Layer 1: structure   (name, bound types, bound ordering, registry)
  Layer 2: wrap laws   (max + 1 = min, min - 1 = max)

Layer 2 only runs when layer 1 reports no errors; the laws are meaningless
over malformed bounds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .widths import WIDTHS, UnsignedWidth

logger = logging.getLogger(__name__)


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    check: str
    severity: Severity
    message: str


@dataclass(frozen=True)
class CheckResult:
    width_name: str
    diagnostics: tuple[Diagnostic, ...]

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.WARNING)

    @property
    def is_well_formed(self) -> bool:
        return len(self.errors) == 0


@dataclass
class CheckContext:
    width: UnsignedWidth
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def error(self, check: str, message: str) -> None:
        logger.warning("width %r failed %s: %s", self.width.name, check, message)
        self.diagnostics.append(Diagnostic(check, Severity.ERROR, message))

    def warning(self, check: str, message: str) -> None:
        logger.debug("width %r: %s: %s", self.width.name, check, message)
        self.diagnostics.append(Diagnostic(check, Severity.WARNING, message))

    @property
    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Layer 1: structure
# ---------------------------------------------------------------------------


def check_structure(ctx: CheckContext) -> None:
    w = ctx.width

    if not isinstance(w.name, str) or not w.name:
        ctx.error("name_nonempty", "Width name must be a non-empty string")

    if not (_is_int(w.min_value) and _is_int(w.max_value)):
        ctx.error(
            "bounds_integral",
            f"Bounds must be int, got {type(w.min_value).__name__} "
            f"and {type(w.max_value).__name__}",
        )
        # The remaining checks compare bounds numerically.
        return

    if w.min_value < 0:
        ctx.error("bounds_unsigned", f"min_value {w.min_value} is negative")

    if w.min_value > w.max_value:
        ctx.error(
            "bounds_ordered",
            f"min_value {w.min_value} exceeds max_value {w.max_value}",
        )
        return

    registered = WIDTHS.get(w.name) if isinstance(w.name, str) else None
    if registered is not None and registered != w:
        ctx.error(
            "registry_consistent",
            f"Name '{w.name}' is registered as [{registered.min_value}, "
            f"{registered.max_value}], got [{w.min_value}, {w.max_value}]",
        )

    if w.min_value != 0:
        ctx.warning("zero_based", f"min_value is {w.min_value}, not 0")

    span = w.modulus
    if span & (span - 1) != 0:
        ctx.warning(
            "power_of_two_span",
            f"Span {span} is not a power of two; not a machine width",
        )


# ---------------------------------------------------------------------------
# Layer 2: wrap laws
# ---------------------------------------------------------------------------


def check_wrap_laws(ctx: CheckContext) -> None:
    w = ctx.width

    after_max = w.wrapping_add(w.max_value, 1)
    if after_max != w.min_value:
        ctx.error(
            "wraps_at_max",
            f"wrapping_add({w.max_value}, 1) gave {after_max}, expected {w.min_value}",
        )

    before_min = w.wrapping_sub(w.min_value, 1)
    if before_min != w.max_value:
        ctx.error(
            "wraps_at_min",
            f"wrapping_sub({w.min_value}, 1) gave {before_min}, expected {w.max_value}",
        )


def check_width(width: UnsignedWidth) -> CheckResult:
    ctx = CheckContext(width=width)

    check_structure(ctx)
    if not ctx.has_errors:
        check_wrap_laws(ctx)

    def sort_key(d: Diagnostic) -> tuple[int, str]:
        severity_order = 0 if d.severity == Severity.ERROR else 1
        return (severity_order, d.check)

    return CheckResult(str(width.name), tuple(sorted(ctx.diagnostics, key=sort_key)))
