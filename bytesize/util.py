# -*- coding: utf-8 -*-
from typing import Optional

_INT64_MIN = -(1 << 63)
_INT64_MODULUS = 1 << 64

_EXA = 1 << 60

# indexed by precision level, then by magnitude level (bytes, K, M, ..., E)
_SUFFIXES = (
    ('', 'K', 'M', 'G', 'T', 'P', 'E'),
    ('B', 'K', 'M', 'G', 'T', 'P', 'E'),
    ('B', 'KB', 'MB', 'GB', 'TB', 'PB', 'EB'),
    ('B', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB', 'EiB'),
)


def to_int64(number: int) -> int:
    """
    Reduce an integer to the signed 64-bit range, wrapping around the way a
    two's complement cast does, e.g. 2**64 - 1 becomes -1.

    :param number: Any integer.
    :return: The integer in [-2**63, 2**63).
    """
    return (number - _INT64_MIN) % _INT64_MODULUS + _INT64_MIN


def clamp_precision(precision: Optional[int]) -> int:
    """
    Turn a requested precision into a suffix style between 0 and 3. A missing
    precision, or one above 3, selects the full "KiB" style.
    """
    if precision is None or precision > 3:
        return 3
    if precision < 0:
        return 0
    return precision


def append_decimal(buffer: bytearray, number: int) -> bytearray:
    """
    Append the decimal digits of a number to a buffer, without sign or
    separators and regardless of locale.

    :param buffer: The buffer to extend.
    :param number: The number to print. Must not be negative.
    :return: The same buffer.
    """
    digits = bytearray()
    while number >= 10:
        number, digit = divmod(number, 10)
        digits.append(ord('0') + digit)
    digits.append(ord('0') + number)
    digits.reverse()
    buffer += digits
    return buffer


def format_byte_size(value: int, precision: int = 3) -> str:
    """
    Format a number of bytes with 1 to 4 significant digits and a binary
    suffix, e.g. "1023B", "1KiB", "1.01KiB", "-23.4MiB", "340GiB".

    The last digit is rounded half up. Exact multiples of the unit never get a
    decimal point, and values that round up to 10 or 100 units lose a decimal
    place instead of growing a fifth character, e.g. 10235 is "10.0KiB" rather
    than "10.00KiB".

    :param value: The number of bytes, possibly negative.
    :param precision: The suffix style, see clamp_precision(): 0 for "", "K",
                      ...; 1 for "B", "K", ...; 2 for "B", "KB", ...; 3 for
                      "B", "KiB", ....
    :return: The formatted size.
    """
    suffixes = _SUFFIXES[clamp_precision(precision)]
    value = int(value)
    ret = bytearray()
    if value < 0:
        ret += b'-'
        value = -value

    if value < 1024:
        append_decimal(ret, value)
        return ret.decode('ascii') + suffixes[0]

    if value >= _EXA:
        level = 6
        if value & (_EXA - 1) == 0:
            append_decimal(ret, value >> 60)
        else:
            # shift before multiplying; 1024 * 2**60 does not fit in 64 bits
            append_decimal(ret, ((value >> 50) * 100 + 512) >> 10)
            ret[-2:-2] = b'.'
    else:
        level = 1
        bound = 1 << 20
        while value >= bound and bound < _EXA:
            level += 1
            bound <<= 10
        shift = 10 * level
        unit = 1 << shift
        # unit <= value <= 1023 * unit

        if value & (unit - 1) == 0:
            append_decimal(ret, value >> shift)
        else:
            digits_after_point, scaled = 0, value
            if value < 10 * unit - unit // 200:
                digits_after_point, scaled = 2, 100 * value
            elif value < 100 * unit - unit // 20:
                digits_after_point, scaled = 1, 10 * value
            append_decimal(ret, (scaled + unit // 2) >> shift)
            if digits_after_point:
                ret[-digits_after_point:-digits_after_point] = b'.'

    return ret.decode('ascii') + suffixes[level]
