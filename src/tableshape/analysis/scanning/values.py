"""Cell value classification.

Every cell is one of: missing (absent key, None, non-finite number) or a
present value of kind number, string, boolean or object. Objects are never
introspected; they are only compared through a canonical serialization.
"""

from __future__ import annotations

import json
import math
import numbers
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

import numpy as np

from tableshape.core.models.base import ValueKind


def _is_number(value: Any) -> bool:
    if isinstance(value, bool | np.bool_):
        return False
    return isinstance(value, numbers.Real | Decimal)


def _has_finite_float(value: Any) -> bool:
    """Whether a number converts to a finite float.

    Integers beyond float range (e.g. 10**400) and decimals such as
    Decimal("1e400") have no finite float value.
    """
    if isinstance(value, Decimal) and not value.is_finite():
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def is_missing(value: Any) -> bool:
    """Check whether a cell value counts as missing.

    Non-finite numbers (NaN, +inf, -inf) are treated as absent, and so are
    numbers too large to represent as a finite float.
    """
    if value is None:
        return True
    if _is_number(value):
        return not _has_finite_float(value)
    return False


def value_kind(value: Any) -> ValueKind | None:
    """Classify a cell value.

    Returns:
        The value's kind, or None when the value is missing
    """
    if is_missing(value):
        return None
    if isinstance(value, bool | np.bool_):
        return ValueKind.BOOLEAN
    if _is_number(value):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    return ValueKind.OBJECT


def cell(record: Mapping[str, Any], column: str) -> Any:
    """Get a cell value, None when the key is absent or the value is missing."""
    value = record.get(column)
    return None if is_missing(value) else value


def stringify(value: Any) -> str:
    """Render a present value as the string used for grouping and frequencies.

    Booleans become "true"/"false"; integral floats drop their fractional part
    so 2 and 2.0 land in the same group.
    """
    if isinstance(value, bool | np.bool_):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if _is_number(value):
        if isinstance(value, numbers.Integral):
            return str(int(value))
        as_float = float(value)
        if as_float.is_integer() and abs(as_float) < 1e21:
            return str(int(as_float))
        return repr(as_float)
    return canonical_serialization(value)


def canonical_serialization(value: Any) -> str:
    """Serialize an object value deterministically.

    Mappings are serialized with sorted keys; anything JSON cannot encode
    natively (dates, compiled patterns, sets) falls back to ``str``.
    """
    try:
        return json.dumps(value, sort_keys=True, default=str)
    except (TypeError, ValueError):
        # Mixed-type mapping keys cannot be sorted
        return repr(value)


def identity_key(value: Any) -> tuple[str, str]:
    """Key used to test two present values for equality.

    Includes the kind so that the number 1 and the string "1" stay distinct.
    """
    kind = value_kind(value)
    return (kind.value if kind else "missing", stringify(value))
