"""
********************************************************************************
* Copyright (c) 2025 the bignumber authors
*
* This program and the accompanying materials are made available under the
* terms of the Eclipse Public License 2.0 which is available at
* http://www.eclipse.org/legal/epl-2.0.
*
* This Source Code may also be made available under the following Secondary
* Licenses when the conditions for such availability set forth in the Eclipse
* Public License, v. 2.0 are satisfied: GNU General Public License, version 2
* with the GNU Classpath Exception which is
* available at https://www.gnu.org/software/classpath/license.html.
*
* SPDX-License-Identifier: EPL-2.0 OR GPL-2.0 WITH Classpath-exception-2.0
********************************************************************************
"""

# Numerals have the form [+|-] [0x|0X|0] digit+ with case-insensitive letter
# digits. The 0x prefix is only recognised when the resolved base is 16; a
# leading 0 is an ordinary digit unless the base is auto-detected (base=0),
# in which case it selects base 8.

import logging

import numpy as np

from bignumber import config
from bignumber.big_integer import BigInteger
from bignumber.big_unsigned import BigUnsigned
from bignumber.errors import InvalidArgument, MalformedInput
from bignumber.limb_store import LIMB_BITS

logger = logging.getLogger(__name__)

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = 36


def parse_unsigned(text, base=None):
    """
    Parse a numeral into a ``BigUnsigned``.

    Parameters
    ----------
    text : str
        The numeral. A ``-`` sign is only accepted for zero.
    base : int, optional
        Base 2 to 36, or 0 to detect it from the prefix. Defaults to
        ``config.default_base``.

    Returns
    -------
    BigUnsigned

    Raises
    ------
    MalformedInput
        If ``text`` is empty or contains a digit that is not valid for the
        base.
    InvalidArgument
        If the base is out of range or the numeral is negative.

    Examples
    --------

    >>> parse_unsigned("FF", 16)
    BigUnsigned(255)
    >>> parse_unsigned("0x1f", 0)
    BigUnsigned(31)
    """
    negative, magnitude = _parse(text, base)
    if negative and not magnitude.is_zero():
        raise InvalidArgument("BigUnsigned: cannot set from a negative number")
    return magnitude


def parse_signed(text, base=None):
    """
    Parse a numeral into a ``BigInteger``.

    Same grammar and errors as :func:`parse_unsigned`, with negative numerals
    allowed. ``"-0"`` yields a non-negative zero.
    """
    negative, magnitude = _parse(text, base)
    return BigInteger.from_parts(magnitude, negative)


def render(value, base=None, show_pos=False, show_base=False, uppercase=False):
    """
    Render a value as a numeral.

    Parameters
    ----------
    value : BigUnsigned, BigInteger or int
        Value to render.
    base : int, optional
        Base 2 to 36. Defaults to ``config.default_base``.
    show_pos : bool, default=False
        Prefix non-negative values with ``+``.
    show_base : bool, default=False
        Prefix base 16 numerals with ``0x`` and base 8 numerals with ``0``.
        Other bases have no prefix.
    uppercase : bool, default=False
        Use upper case letter digits (and ``0X``).

    Returns
    -------
    str

    Examples
    --------

    >>> render(BigUnsigned(255), 16)
    'ff'
    >>> render(BigInteger(-255), 16, show_base=True, uppercase=True)
    '-0XFF'
    """
    base = _check_base(base, allow_auto=False)

    if isinstance(value, BigInteger):
        magnitude, negative = value.magnitude, value.negative
    elif isinstance(value, BigUnsigned):
        magnitude, negative = value, False
    elif isinstance(value, (bool, int, np.integer)):
        signed = BigInteger(value)
        magnitude, negative = signed.magnitude, signed.negative
    else:
        raise TypeError(f"cannot render {type(value).__name__}")

    numeral = render_magnitude(magnitude, base)

    if uppercase:
        numeral = numeral.upper()
    if show_base:
        if base == 16:
            numeral = ("0X" if uppercase else "0x") + numeral
        elif base == 8 and numeral != "0":
            numeral = "0" + numeral
    if negative:
        numeral = "-" + numeral
    elif show_pos:
        numeral = "+" + numeral
    return numeral


def render_magnitude(magnitude, base):
    """
    Produce the bare lower case digit string of ``magnitude`` in ``base``.

    Base 10 uses the decimal doubling algorithm unless
    ``config.decimal_render_method`` is ``"division"``. Power-of-two bases
    read bit groups straight from the limbs, every other base uses repeated
    division with remainder.
    """
    if magnitude.is_zero():
        return "0"
    if base == 10 and config.decimal_render_method == "doubling":
        return _render_decimal_by_doubling(magnitude)
    if base & (base - 1) == 0:
        return _render_power_of_two(magnitude, base)
    return _render_by_division(magnitude, base)


def _check_base(base, allow_auto):
    if base is None:
        base = config.default_base
    if isinstance(base, bool) or not isinstance(base, (int, np.integer)):
        raise InvalidArgument(f"base must be an integer, got {type(base).__name__}")
    base = int(base)
    if base == 0 and allow_auto:
        return base
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidArgument(f"base must lie in [{MIN_BASE}, {MAX_BASE}], got {base}")
    return base


def _digit_value(char):
    # only the ASCII alphabet counts, "K" (Kelvin sign) lowercases to "k"
    if not char.isascii():
        return None
    index = DIGITS.find(char.lower())
    return index if index >= 0 else None


def _parse(text, base):
    if not isinstance(text, str):
        raise TypeError(f"numeral must be a str, got {type(text).__name__}")
    base = _check_base(base, allow_auto=True)
    if not text:
        raise MalformedInput("cannot parse an empty numeral")

    body = text
    negative = False
    if body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]
    if not body:
        raise MalformedInput(f"numeral {text!r} has a sign but no digits")

    has_hex_prefix = len(body) > 1 and body[0] == "0" and body[1] in "xX"
    if base == 0:
        if has_hex_prefix:
            base = 16
        elif len(body) > 1 and body[0] == "0":
            base = 8
        else:
            base = 10
        logger.debug("detected base %d for numeral %r", base, text)
    if has_hex_prefix and base == 16:
        body = body[2:]
        if not body:
            raise MalformedInput(f"numeral {text!r} has a prefix but no digits")

    values = []
    for char in body:
        value = _digit_value(char)
        if value is None or value >= base:
            raise MalformedInput(f"invalid digit {char!r} in {text!r} for base {base}")
        values.append(value)

    return negative, _accumulate(values, base)


def _accumulate(values, base):
    # value = value * base + digit, most significant digit first
    radix = BigUnsigned(base)
    magnitude = BigUnsigned()
    for value in values:
        magnitude *= radix
        magnitude += value
    return magnitude


def _render_by_division(magnitude, base):
    radix = BigUnsigned(base)
    quotient = BigUnsigned(magnitude)
    chars = []
    while quotient >= radix:
        remainder = quotient.divide_with_remainder(radix)
        chars.append(DIGITS[int(remainder)])
    chars.append(DIGITS[int(quotient)])
    return "".join(reversed(chars))


def _render_power_of_two(magnitude, base):
    limbs = magnitude.limbs
    width = base.bit_length() - 1
    mask = base - 1
    n_digits = -(-magnitude.bit_length() // width)
    chars = []
    for k in range(n_digits - 1, -1, -1):
        pos, off = divmod(k * width, LIMB_BITS)
        chunk = limbs[pos] >> off
        # the group straddles two limbs
        if off + width > LIMB_BITS and pos + 1 < len(limbs):
            chunk |= limbs[pos + 1] << (LIMB_BITS - off)
        chars.append(DIGITS[chunk & mask])
    return "".join(chars)


def _render_decimal_by_doubling(magnitude):
    """
    Binary to decimal conversion without big integer division.

    ``power`` holds the decimal digits of ``2**i`` and is doubled once per
    bit; whenever bit ``i`` of the magnitude is set it is added to the
    decimal accumulator. Both are little-endian lists of decimal digits.
    """
    total = [0]
    power = [1]
    n_bits = magnitude.bit_length()
    for i in range(n_bits):
        if magnitude.get_bit(i):
            _decimal_add(total, power)
        if i + 1 < n_bits:
            _decimal_double(power)
    return "".join(DIGITS[d] for d in reversed(total))


def _decimal_add(acc, addend):
    carry = 0
    for i, digit in enumerate(addend):
        if i < len(acc):
            s = acc[i] + digit + carry
            acc[i] = s % 10
        else:
            s = digit + carry
            acc.append(s % 10)
        carry = s // 10
    i = len(addend)
    while carry:
        if i < len(acc):
            s = acc[i] + carry
            acc[i] = s % 10
        else:
            s = carry
            acc.append(s % 10)
        carry = s // 10
        i += 1


def _decimal_double(acc):
    carry = 0
    for i, digit in enumerate(acc):
        s = digit * 2 + carry
        acc[i] = s % 10
        carry = s // 10
    if carry:
        acc.append(carry)
