import math
import numbers
import re

# Largest delay the host timer accepts in one go (2**31 - 1 milliseconds).
MAX_TIMEOUT = 2_147_483_647

# Beyond this a millisecond count can no longer be represented exactly.
MAX_SAFE_INTEGER = 2**53 - 1

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX = {
    "0x": (16, re.compile(r"[0-9a-fA-F]+")),
    "0o": (8, re.compile(r"[0-7]+")),
    "0b": (2, re.compile(r"[01]+")),
}


def _from_string(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf
    radix = _RADIX.get(text[:2].lower())
    if radix is not None:
        base, digits = radix
        if not digits.fullmatch(text[2:]):
            return math.nan
        number = int(text[2:], base)
        return math.inf if number > MAX_SAFE_INTEGER else float(number)
    if _DECIMAL.fullmatch(text):
        return float(text)
    return math.nan


def _numeric(value) -> bool:
    return (
        isinstance(value, numbers.Number)
        or hasattr(value, "__float__")
        or hasattr(value, "__index__")
    )


def _overflow_sign(value) -> float:
    try:
        return math.inf if value > 0 else -math.inf
    except Exception:
        return math.inf


def coerce_number(value) -> float:
    """Convert *value* to a number the way a native timer coerces its delay.

    Booleans count as ``0``/``1``, numeric strings are parsed, and anything
    that cannot be read as a number becomes NaN. Never raises.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int):
        if value > MAX_SAFE_INTEGER:
            return math.inf
        if value < -MAX_SAFE_INTEGER:
            return -math.inf
        return float(value)
    if isinstance(value, str):
        return _from_string(value)
    try:
        if not _numeric(value):
            return math.nan
        return float(value)
    except OverflowError:
        return _overflow_sign(value)
    except Exception:
        return math.nan


def normalize_delay(value=None) -> float:
    """Return a usable delay in milliseconds.

    ``None`` means ``0``. Positive infinity and anything above
    ``MAX_SAFE_INTEGER`` return ``math.inf`` (wait forever). NaN and negative
    values, negative infinity included, are clamped to ``0``.
    """
    if value is None:
        return 0.0
    delay = coerce_number(value)
    if delay == math.inf or delay > MAX_SAFE_INTEGER:
        return math.inf
    if not math.isfinite(delay) or delay < 0:
        return 0.0
    return delay


def is_infinite(delay: float) -> bool:
    return delay == math.inf
