"""
Range algorithms для graal

Обобщённые алгоритмы одного прохода над диапазонами [first, last).
"""

# Cursor
from graal.core.ranges.cursor import (
    Position,
    Range,
    SequenceCursor,
    advance,
    begin,
    distance,
    end,
    iter_swap,
)

# Search
from graal.core.ranges.search import (
    MinMax,
    all_of,
    any_of,
    equal,
    find_if,
    minmax,
    none_of,
)

# Mutating
from graal.core.ranges.mutating import (
    copy,
    partition,
    reverse,
    unique,
)

# Checked (hardened, opt-in)
from graal.core.ranges.checked import (
    CapacityError,
    ForeignCursorError,
    InvertedRangeError,
    OutOfBoundsError,
    OverlapError,
    RangeError,
    RangeGuard,
    RangeGuardConfig,
    validate_capacity,
    validate_copy_destination,
    validate_dereferenceable,
    validate_position,
    validate_range,
)

__all__ = [
    # Cursor — Types
    "Position",
    "Range",
    "SequenceCursor",
    # Cursor — Functions
    "advance",
    "begin",
    "distance",
    "end",
    "iter_swap",
    # Search — Types
    "MinMax",
    # Search — Functions
    "all_of",
    "any_of",
    "equal",
    "find_if",
    "minmax",
    "none_of",
    # Mutating — Functions
    "copy",
    "partition",
    "reverse",
    "unique",
    # Checked — Exceptions
    "RangeError",
    "CapacityError",
    "ForeignCursorError",
    "InvertedRangeError",
    "OutOfBoundsError",
    "OverlapError",
    # Checked — Guard
    "RangeGuard",
    "RangeGuardConfig",
    # Checked — Validation
    "validate_capacity",
    "validate_copy_destination",
    "validate_dereferenceable",
    "validate_position",
    "validate_range",
]
