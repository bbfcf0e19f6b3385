"""Small request-parsing helpers."""
import math
import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> Optional[int]:
    """Parse the leading integer of ``value`` the way JavaScript's parseInt does.

    ``"12abc"`` gives 12, ``"abc"`` and ``None`` give None. Floats are truncated.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def int_or_default(
    value: Any, default: int, minimum: int = 1, maximum: Optional[int] = None
) -> int:
    """Coerce ``value`` to an int, falling back to ``default``.

    Unparseable values and values below ``minimum`` use the default; values
    above ``maximum`` are clamped to it.
    """
    parsed = parse_int(value)
    if parsed is None or parsed < minimum:
        return default
    if maximum is not None and parsed > maximum:
        return maximum
    return parsed


def normalize_currency_code(code: Optional[str], default: str = "USD") -> str:
    code = (code or "").strip().upper()
    return code or default
