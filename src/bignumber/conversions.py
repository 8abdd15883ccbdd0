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


import numpy as np

from bignumber.big_integer import BigInteger
from bignumber.big_unsigned import BigUnsigned
from bignumber.errors import InvalidArgument, Overflow, Underflow

NARROWING_TYPES = (
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
)


def narrow(value, dtype):
    """
    Range-checked conversion to a fixed-width numpy integer.

    Parameters
    ----------
    value : BigUnsigned, BigInteger or int
        Value to convert.
    dtype : numpy integer type
        One of ``NARROWING_TYPES``.

    Returns
    -------
    numpy.integer
        ``dtype(value)``.

    Raises
    ------
    Overflow
        If ``value`` is larger than ``numpy.iinfo(dtype).max``.
    Underflow
        If ``value`` is smaller than ``numpy.iinfo(dtype).min``. This
        includes every negative value for unsigned targets.

    Examples
    --------

    >>> narrow(BigInteger(-128), np.int8)
    np.int8(-128)
    """
    dtype = np.dtype(dtype).type
    if dtype not in NARROWING_TYPES:
        raise InvalidArgument(f"cannot narrow to {dtype.__name__}")
    if not isinstance(value, (BigUnsigned, BigInteger)):
        value = BigInteger(value)

    info = np.iinfo(dtype)
    if value > int(info.max):
        raise Overflow(f"{type(value).__name__}: value is too big to fit in {dtype.__name__}")
    if value < int(info.min):
        raise Underflow(f"{type(value).__name__}: value is too small to fit in {dtype.__name__}")
    return dtype(int(value))


def to_int8(value):
    return narrow(value, np.int8)


def to_int16(value):
    return narrow(value, np.int16)


def to_int32(value):
    return narrow(value, np.int32)


def to_int64(value):
    return narrow(value, np.int64)


def to_uint8(value):
    return narrow(value, np.uint8)


def to_uint16(value):
    return narrow(value, np.uint16)


def to_uint32(value):
    return narrow(value, np.uint32)


def to_uint64(value):
    return narrow(value, np.uint64)


def to_signed(value):
    """
    Convert a ``BigUnsigned`` to a non-negative ``BigInteger`` sharing its limbs.
    """
    return BigInteger.from_parts(value, False)


def to_unsigned(value):
    """
    Convert a ``BigInteger`` to a ``BigUnsigned`` sharing its limbs.

    Raises
    ------
    InvalidArgument
        If ``value`` is negative.
    """
    if value.negative:
        raise InvalidArgument("to_unsigned: cannot convert a negative value to an unsigned type")
    return value.magnitude


def clear(value):
    """
    Set a ``BigUnsigned`` or ``BigInteger`` to zero in place.
    """
    return value.clear()


def absolute(value):
    if isinstance(value, BigUnsigned):
        return BigUnsigned(value)
    return abs(value)
