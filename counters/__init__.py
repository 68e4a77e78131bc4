"""counters: single-value counters with host-default or wrapping arithmetic."""

from .numeric import SupportsArithmetic, one_like
from .counter import Counter
from .widths import U8, U16, U32, WIDTHS, UnsignedWidth, get_width
from .check import CheckResult, Diagnostic, Severity, check_width
from .bounded import BoundedCounter

__all__ = [
    # Numeric capabilities
    "SupportsArithmetic", "one_like",
    # Counters
    "Counter", "BoundedCounter",
    # Widths
    "UnsignedWidth", "U8", "U16", "U32", "WIDTHS", "get_width",
    # Checking
    "CheckResult", "Diagnostic", "Severity", "check_width",
]
