"""Conversions behind each format specifier."""

from __future__ import annotations

_UINT_MODULUS = 1 << 32
_INT_SIGN_BIT = 1 << 31
_ULONG_MODULUS = 1 << 64
_HEX_DIGITS = "0123456789abcdef"


def _as_uint32(num: int) -> int:
    return int(num) % _UINT_MODULUS


def _as_int32(num: int) -> int:
    value = _as_uint32(num)
    return value - _UINT_MODULUS if value >= _INT_SIGN_BIT else value


def format_char(c: str | int) -> str:
    """Render a single character, given as a one-character string or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) % 256)


def format_str(s: str | None) -> str:
    """Render a string; a missing string becomes ``(null)``."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return s


def format_signed(num: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    return str(_as_int32(num))


def utoa(num: int) -> str:
    """Return the decimal digits of a 32-bit unsigned integer."""
    value = _as_uint32(num)
    if value == 0:
        return "0"
    digits = []
    while value:
        value, digit = divmod(value, 10)
        digits.append(chr(ord("0") + digit))
    return "".join(reversed(digits))


def format_unsigned(num: int) -> str:
    """Render a 32-bit unsigned integer in decimal."""
    return utoa(num)


def _hex_digits(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, digit = divmod(value, 16)
        digits.append(_HEX_DIGITS[digit])
    return "".join(reversed(digits))


def format_hex(num: int, specifier: str) -> str:
    """Render a 32-bit unsigned integer in hexadecimal.

    ``specifier`` is ``"x"`` for lower-case digits or ``"X"`` for upper-case.
    """
    if specifier not in ("x", "X"):
        raise ValueError(f"hex specifier must be 'x' or 'X', got {specifier!r}")
    digits = _hex_digits(_as_uint32(num))
    return digits.upper() if specifier == "X" else digits


def format_pointer(address: int | None) -> str:
    """Render an address as ``0x``-prefixed hex; a null address is ``(nil)``."""
    value = 0 if address is None else int(address) % _ULONG_MODULUS
    if value == 0:
        return "(nil)"
    return "0x" + _hex_digits(value)