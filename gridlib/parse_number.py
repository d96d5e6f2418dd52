"""Strict parsing of integer and floating-point numbers from text fields.

The rules follow the fixed-width numeric fields in DEM files. Integers may
contain single underscores between digits, and may carry a ``0b``, ``0o`` or
``0x`` prefix when base detection is on. Floating-point numbers accept
``e``/``E`` and the FORTRAN ``d``/``D`` as exponent markers.
"""

from __future__ import annotations

import math

__all__ = ["parse_int", "parse_float"]

_BASE_PREFIXES = {"b": 2, "o": 8, "x": 16}
_EXPONENT_MARKERS = frozenset("dDeE")


def _digit_value(char: str) -> int | None:
    """Return the value of an alphanumeric digit, or None for other characters."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return 10 + ord(char) - ord("A")
    if "a" <= char <= "z":
        return 10 + ord(char) - ord("a")
    return None


def _parse_magnitude(text: str, base: int, limit: int) -> int:
    """Parse the unsigned digits in *text*, which must not exceed *limit*."""
    if not text:
        raise ValueError("missing digits")
    first = _digit_value(text[0])
    if first is None or first >= base:
        raise ValueError(f"invalid digit {text[0]!r}")
    value = first
    last_index = len(text) - 1
    previous = text[0]
    for index, char in enumerate(text[1:], start=1):
        digit = _digit_value(char)
        if digit is not None and digit < base and value * base + digit <= limit:
            value = value * base + digit
        elif char != "_" or index == last_index or previous == "_":
            raise ValueError(f"invalid or out-of-range integer {text!r}")
        previous = char
    return value


def _parse_digits(text: str, base: int, negative: bool, bits: int, signed: bool) -> int:
    if signed:
        limit = 1 << (bits - 1)
        if negative:
            return -_parse_magnitude(text, base, limit)
        return _parse_magnitude(text, base, limit - 1)
    if negative:
        if not text:
            raise ValueError("missing digits")
        for char in text:
            digit = _digit_value(char)
            if digit is None or digit > 0:
                raise ValueError(f"negative value for unsigned integer: -{text}")
        return 0
    return _parse_magnitude(text, base, (1 << bits) - 1)


def parse_int(text: str, bits: int = 32, signed: bool = True, detect_base: bool = False) -> int:
    """Parse *text* as an integer that fits in *bits* bits.

    The words ``false`` and ``null`` parse as 0 and ``true`` as 1.
    Raises ValueError if the text is not a valid integer or is out of range.
    """
    if bits <= 0:
        raise ValueError("bits must be positive")
    if not text:
        raise ValueError("empty string")

    negative = False
    body = text
    if body[0] == "-":
        negative = True
        body = body[1:]
    elif body[0] == "+":
        body = body[1:]

    if not body:
        raise ValueError(f"invalid integer {text!r}")

    if detect_base and body[0] == "0" and len(body) >= 3:
        base = _BASE_PREFIXES.get(body[1].lower())
        if base is not None:
            return _parse_digits(body[2:], base, negative, bits, signed)

    if "0" <= body[0] <= "9":
        return _parse_digits(body, 10, negative, bits, signed)
    if body in ("false", "null"):
        return 0
    if body == "true":
        return 1
    raise ValueError(f"invalid integer {text!r}")


def _decimal_digit(char: str) -> int | None:
    return ord(char) - ord("0") if "0" <= char <= "9" else None


def parse_float(text: str, max_exponent10: int = 308) -> float:
    """Parse *text* as a floating-point number.

    ``Infinity``, ``+Infinity``, ``null``, ``-Infinity`` and ``NaN`` are
    recognised. Exponents whose magnitude exceeds *max_exponent10* are
    rejected. Raises ValueError if the text is not a valid number.
    """
    if not text:
        raise ValueError("empty string")

    length = len(text)
    i = 0
    negative = False
    if text[0] in "+-":
        negative = text[0] == "-"
        i = 1
        if i == length:
            raise ValueError(f"invalid number {text!r}")

    first = _decimal_digit(text[i])
    if first is None:
        if text in ("Infinity", "null", "+Infinity"):
            return math.inf
        if text == "-Infinity":
            return -math.inf
        if text == "NaN":
            return math.nan
        raise ValueError(f"invalid number {text!r}")

    value = float(first)
    underscore = False
    i += 1
    while i < length:
        digit = _decimal_digit(text[i])
        if digit is not None:
            value = value * 10 + digit
            underscore = False
        elif text[i] != "_" or underscore:
            break
        else:
            underscore = True
        i += 1

    if underscore:
        raise ValueError(f"invalid number {text!r}")

    if i == length:
        return -value if negative else value

    # An underscore directly after the decimal point is not allowed.
    underscore = True
    decimals = 0
    fraction = 0.0
    if text[i] == ".":
        i += 1
        while i < length:
            digit = _decimal_digit(text[i])
            if digit is not None:
                fraction = fraction * 10 + digit
                underscore = False
                decimals += 1
            elif text[i] != "_" or underscore:
                break
            else:
                underscore = True
            i += 1

    exponent = 0
    if i != length:
        if text[i] not in _EXPONENT_MARKERS:
            raise ValueError(f"invalid number {text!r}")
        i += 1
        if i == length:
            raise ValueError(f"missing exponent in {text!r}")

        negative_exponent = False
        if text[i] in "+-":
            negative_exponent = text[i] == "-"
            i += 1
            if i == length:
                raise ValueError(f"missing exponent in {text!r}")

        first_exp = _decimal_digit(text[i])
        if first_exp is None:
            raise ValueError(f"invalid exponent in {text!r}")
        exponent = first_exp

        i += 1
        while i < length:
            digit = _decimal_digit(text[i])
            if digit is not None:
                exponent = exponent * 10 + digit
                underscore = False
            elif text[i] != "_" or underscore:
                raise ValueError(f"invalid exponent in {text!r}")
            else:
                underscore = True
            if exponent > max_exponent10:
                raise ValueError(f"exponent out of range in {text!r}")
            i += 1

        if negative_exponent:
            exponent = -exponent

    if exponent:
        value *= 10.0 ** exponent
    if fraction != 0:
        value += fraction * 10.0 ** (exponent - decimals)

    return -value if negative else value