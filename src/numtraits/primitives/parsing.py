"""
Разбор чисел из строки в системе счисления 2..36

Формат строже, чем у int()/float(): без пробелов, подчёркиваний
и префиксов 0x/0o/0b.
"""

import math
import re
from fractions import Fraction
from typing import Final

from numtraits.capabilities.identities import ParseNumError, validate_radix

DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

_DECIMAL_FLOAT: Final[re.Pattern[str]] = re.compile(
    r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def _split_sign(text: str) -> tuple[bool, str]:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if text[:1] in ("+", "-"):
        return text[0] == "-", text[1:]
    return False, text


def _check_digits(text: str, body: str, radix: int) -> None:
    allowed = DIGITS[:radix]
    for ch in body:
        if not ch.isascii() or ch.lower() not in allowed:
            raise ParseNumError(f"invalid digit {ch!r} for radix {radix} in {text!r}")


def parse_int(text: str, radix: int) -> int:
    """
    Целое со знаком в системе счисления radix.

    Raises:
        ParseNumError: Пустая строка или недопустимая цифра
        ValueError: radix вне [2, 36]

    Examples:
        >>> parse_int("-ff", 16)
        -255
    """
    validate_radix(radix)
    negative, body = _split_sign(text)
    if not body:
        raise ParseNumError(f"cannot parse integer from {text!r}: no digits")
    _check_digits(text, body, radix)
    value = int(body, radix)
    return -value if negative else value


def parse_float(text: str, radix: int) -> float:
    """
    Float в системе счисления radix, округлённый к ближайшему binary64.

    Принимает inf/infinity/nan (регистр не важен, опциональный знак).
    Для radix 10 допускается экспонента (1.5e-3); для других — только
    целая и дробная часть ("ff.8" в radix 16 == 255.5).

    Raises:
        ParseNumError: Некорректная строка
        ValueError: radix вне [2, 36]
    """
    validate_radix(radix)
    negative, body = _split_sign(text)
    sign = -1.0 if negative else 1.0

    special = body.lower()
    if special in ("inf", "infinity"):
        return math.copysign(math.inf, sign)
    if special == "nan":
        return math.nan

    if radix == 10:
        if not _DECIMAL_FLOAT.fullmatch(body):
            raise ParseNumError(f"cannot parse float from {text!r}")
        return math.copysign(float(body), sign)

    whole, _, fraction = body.partition(".")
    if not whole and not fraction:
        raise ParseNumError(f"cannot parse float from {text!r}: no digits")
    _check_digits(text, whole + fraction, radix)

    value = Fraction(int(whole or "0", radix))
    if fraction:
        value += Fraction(int(fraction, radix), radix ** len(fraction))
    try:
        result = float(value)
    except OverflowError:
        result = math.inf
    return math.copysign(result, sign)
