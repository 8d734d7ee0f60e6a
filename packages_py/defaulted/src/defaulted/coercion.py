"""
Coercion of raw environment strings into the type implied by a default.
"""
import re
from typing import Any, Union

from .errors import CoercionError
from .types import Scalar, TargetType, target_type_of

# Trimmed around numeric literals: ASCII and Unicode spaces, BOM, line terminators.
_NUMERIC_WHITESPACE = (
    " \t\n\v\f\r\u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
    + "".join(chr(c) for c in range(0x2000, 0x200b))
)

_DECIMAL_LITERAL = re.compile(
    r'[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)\Z'
)
_PREFIXED_LITERAL = re.compile(r'0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)\Z')

_TRUE_WORD = "true"
_FALSE_WORD = "false"


def parse_number(raw: str) -> Union[int, float, None]:
    """Parse a numeric literal with the breadth of a general-purpose parser.

    Accepts decimal integers and floats (sign, exponent, bare leading or
    trailing dot), unsigned ``0x``/``0o``/``0b`` integers and ``Infinity``,
    all with surrounding whitespace. Whitespace-only input is zero.
    Returns None for anything else (the not-a-number case); Python-only
    spellings such as ``inf``, ``nan`` or ``1_000`` are not numbers here.

    Integral decimal and prefixed literals come back as ``int``, except
    ``-0`` (``-0.0``) and decimal literals too long for ``int()``, which
    are parsed as floats and may overflow to infinity.
    """
    text = raw.strip(_NUMERIC_WHITESPACE)
    if text == "":
        return 0
    if _PREFIXED_LITERAL.match(text):
        return int(text, 0)
    if not _DECIMAL_LITERAL.match(text):
        return None
    if text.endswith("Infinity"):
        return float("-inf") if text.startswith("-") else float("inf")
    if any(c in text for c in ".eE"):
        return float(text)
    try:
        number = int(text)
    except ValueError:
        # Past sys.get_int_max_str_digits().
        return float(text)
    if number == 0 and text.startswith("-"):
        return -0.0
    return number


def parse_bool(raw: str) -> Union[bool, None]:
    lowered = raw.lower()
    if lowered == _TRUE_WORD:
        return True
    if lowered == _FALSE_WORD:
        return False
    if raw == "1":
        return True
    if raw == "0":
        return False
    return None


def coerce(key: str, raw: str, default: Any) -> Scalar:
    """Convert ``raw`` to the type of ``default``.

    Numbers and booleans are parsed; any other default (strings, or no
    default at all) passes the raw string through untouched.
    """
    target = target_type_of(default)

    if target is TargetType.NUMBER:
        if raw == "":
            raise CoercionError(key, raw, target.value)
        number = parse_number(raw)
        if number is None:
            raise CoercionError(key, raw, target.value)
        return number

    if target is TargetType.BOOLEAN:
        flag = parse_bool(raw)
        if flag is None:
            raise CoercionError(key, raw, target.value)
        return flag

    return raw
