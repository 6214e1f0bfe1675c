from __future__ import annotations

import re

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

_INTEGER_PATTERN = re.compile(r'[ \t\n\r\f\v]*([+-]?)([0-9]+)')
_LEADING_DIGITS_PATTERN = re.compile(r'[0-9]+')


def ensure_list(e) -> list:
    """
    Ensure that the given item is a list
    :param e: Object to check
    :return: e as a list if e is a list, tuple or set or a new list with e as single element
    """
    if e is None:
        return []
    elif isinstance(e, (list, tuple, set)):
        return list(e)
    else:
        return [e]


def _bounded_int(sign: str, digits: str) -> int | None:
    # Values with more significant digits than INT_MAX are out of range
    digits = digits.lstrip('0') or '0'
    if len(digits) > len(str(INT_MAX)):
        return None

    value = int(sign + digits)
    if value < INT_MIN or value > INT_MAX:
        return None

    return value


def parse_int(text: str) -> int | None:
    """
    Parse a complete decimal integer with optional leading whitespace and sign
    :param text: Text to parse, no trailing characters are allowed
    :return: The parsed value or None if the text is malformed or outside the 32 bit signed range
    """
    match = _INTEGER_PATTERN.fullmatch(text)
    if match is None:
        return None

    return _bounded_int(match.group(1), match.group(2))


def leading_number(text: str) -> int | None:
    """
    Read the run of decimal digits a name starts with (e.g. 7 for "07.a")
    :param text: Name to inspect
    :return: Parsed value, None if the name does not start with a digit or overflows
    """
    match = _LEADING_DIGITS_PATTERN.match(text)
    if match is None:
        return None

    return _bounded_int('', match.group(0))
