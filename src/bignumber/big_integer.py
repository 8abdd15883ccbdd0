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

from bignumber.big_unsigned import BigUnsigned, _as_python_int
from bignumber.errors import InvalidArgument


class BigInteger:
    """
    Signed integer of unbounded magnitude.

    A ``BigInteger`` is a :class:`~bignumber.big_unsigned.BigUnsigned`
    magnitude plus a sign flag. All arithmetic is delegated to the magnitude;
    this class only combines signs. The sign flag is never set for zero.

    Parameters
    ----------
    value : int, bool, numpy.integer, float, str, BigInteger or BigUnsigned, default=0
        Initial value. Strings are parsed as signed numerals in the default
        base, floats must be finite and integral.

    Examples
    --------

    >>> from bignumber import BigInteger
    >>> BigInteger(-7) % 3
    BigInteger(-1)
    >>> BigInteger(-7) // 2
    BigInteger(-3)
    >>> -BigInteger(0) == 0
    True

    Notes
    -----
    Division truncates towards zero and the remainder takes the sign of the
    dividend, so ``a == (a // b) * b + a % b`` holds but ``//`` and ``%``
    differ from Python's floor semantics for operands of different sign.

    The bitwise operators act on the magnitudes and combine the sign flags
    with the same logical operator (``&`` -> and, ``|`` -> or, ``^`` -> xor).
    This is a sign-magnitude model, not the infinite two's complement model
    Python's ``int`` uses: ``BigInteger(-1) | BigInteger(-2) == -3`` whereas
    ``-1 | -2 == -1``.
    """

    __slots__ = ("_magnitude", "_negative")

    def __init__(self, value=0):
        if isinstance(value, BigInteger):
            self._magnitude = BigUnsigned(value._magnitude)
            self._negative = value._negative
            return
        if isinstance(value, BigUnsigned):
            self._magnitude = BigUnsigned(value)
            self._negative = False
            return
        if isinstance(value, str):
            from bignumber.base_codec import parse_signed

            parsed = parse_signed(value)
            self._magnitude = parsed._magnitude
            self._negative = parsed._negative
            return

        n = _as_python_int(value, "BigInteger")
        self._magnitude = BigUnsigned(-n if n < 0 else n)
        self._negative = n < 0

    @classmethod
    def from_parts(cls, magnitude: BigUnsigned, negative: bool = False) -> "BigInteger":
        """
        Build a ``BigInteger`` from a magnitude and a sign flag.

        Parameters
        ----------
        magnitude : BigUnsigned or int
            Absolute value (shared, not copied).
        negative : bool, default=False
            Requested sign. Ignored when ``magnitude`` is zero.

        Returns
        -------
        BigInteger
        """
        result = cls.__new__(cls)
        result._magnitude = BigUnsigned(magnitude)
        result._negative = bool(negative)
        result._normalize()
        return result

    @classmethod
    def from_string(cls, text, base=None):
        """
        Parse a numeral, see :func:`bignumber.base_codec.parse_signed`.
        """
        from bignumber.base_codec import parse_signed

        return parse_signed(text, base)

    def _normalize(self):
        if self._magnitude.is_zero():
            self._negative = False
        return self

    @property
    def magnitude(self):
        """
        The absolute value as a ``BigUnsigned`` sharing this value's limbs.
        """
        return BigUnsigned(self._magnitude)

    @property
    def negative(self):
        return self._negative

    @property
    def sign(self):
        if self._magnitude.is_zero():
            return 0
        return -1 if self._negative else 1

    def is_zero(self) -> bool:
        return self._magnitude.is_zero()

    def clear(self) -> "BigInteger":
        self._magnitude.clear()
        self._negative = False
        return self

    def assign(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            raise TypeError("BigInteger: cannot assign a non-integer value")
        self._magnitude.assign(other._magnitude)
        self._negative = other._negative
        return self

    def shares_storage_with(self, other):
        if isinstance(other, BigInteger):
            other = other._magnitude
        return self._magnitude.shares_storage_with(other)

    def __copy__(self):
        return BigInteger(self)

    def __deepcopy__(self, memo):
        return BigInteger.from_parts(self._magnitude.__deepcopy__(memo), self._negative)

    def __reduce__(self):
        return (BigInteger, (int(self),))

    # ------------------------------------------------------------------
    # conversions

    def __bool__(self):
        return not self._magnitude.is_zero()

    def __int__(self):
        value = int(self._magnitude)
        return -value if self._negative else value

    __index__ = __int__

    def __hash__(self):
        return hash(int(self))

    def __str__(self):
        return self.to_string(10)

    def __repr__(self):
        return f"BigInteger({self})"

    def to_string(self, base=None, show_pos=False, show_base=False, uppercase=False):
        """
        Render as a numeral, see :func:`bignumber.base_codec.render`.
        """
        from bignumber.base_codec import render

        return render(self, base, show_pos=show_pos, show_base=show_base,
                      uppercase=uppercase)

    def bit_length(self) -> int:
        return self._magnitude.bit_length()

    # ------------------------------------------------------------------
    # comparisons

    def _compare(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        if self._negative != other._negative:
            return -1 if self._negative else 1
        order = self._magnitude._compare(other._magnitude)
        return -order if self._negative else order

    def __eq__(self, other: "BigInteger"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res == 0

    def __ne__(self, other: "BigInteger"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res != 0

    def __lt__(self, other: "BigInteger"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res < 0

    def __le__(self, other: "BigInteger"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res <= 0

    def __gt__(self, other: "BigInteger"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res > 0

    def __ge__(self, other: "BigInteger"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res >= 0

    # ------------------------------------------------------------------
    # in-place arithmetic

    def __iadd__(self, other: "BigInteger") -> "BigInteger":
        """
        Add ``other`` in place.

        Operands of equal sign add their magnitudes. Otherwise the smaller
        magnitude is subtracted from the larger one and the result takes the
        sign of the operand with the larger magnitude.
        """
        other = _coerce(other)
        if other is NotImplemented:
            return other
        if other.is_zero():
            self._magnitude.trim_leading_zeros()
            return self
        if self.is_zero():
            self.assign(other)
            self._magnitude.trim_leading_zeros()
            return self._normalize()

        if self._negative == other._negative:
            self._magnitude += other._magnitude
        elif self._magnitude >= other._magnitude:
            self._magnitude -= other._magnitude
            self._normalize()
        else:
            self._magnitude.assign(other._magnitude - self._magnitude)
            self._negative = other._negative
        return self

    def __isub__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        if other is self:
            return self.clear()
        self += -other
        return self

    def __imul__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        negative = self._negative != other._negative
        self._magnitude *= other._magnitude
        self._negative = negative
        return self._normalize()

    def divide_with_remainder(self, divisor: "BigInteger") -> "BigInteger":
        """
        Truncating division in place.

        Parameters
        ----------
        divisor : BigInteger or int
            Non-zero divisor.

        Returns
        -------
        BigInteger
            The remainder, carrying the sign of the dividend. ``self`` holds
            the quotient, which is negative iff exactly one operand was.

        Raises
        ------
        DivideByZero
            If ``divisor`` is zero.
        """
        divisor = _coerce(divisor)
        if divisor is NotImplemented:
            raise TypeError("BigInteger: divisor must be an integer")
        dividend_negative = self._negative
        negative = self._negative != divisor._negative
        remainder = self._magnitude.divide_with_remainder(divisor._magnitude)
        self._negative = negative
        self._normalize()
        return BigInteger.from_parts(remainder, dividend_negative)

    def __ifloordiv__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        negative = self._negative != other._negative
        self._magnitude //= other._magnitude
        self._negative = negative
        return self._normalize()

    __itruediv__ = __ifloordiv__

    def __imod__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        # the remainder keeps the sign of the dividend
        self._magnitude %= other._magnitude
        return self._normalize()

    def __iand__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        negative = self._negative and other._negative
        self._magnitude &= other._magnitude
        self._negative = negative
        return self._normalize()

    def __ior__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        negative = self._negative or other._negative
        self._magnitude |= other._magnitude
        self._negative = negative
        return self._normalize()

    def __ixor__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        negative = self._negative != other._negative
        self._magnitude ^= other._magnitude
        self._negative = negative
        return self._normalize()

    def __ilshift__(self, count) -> "BigInteger":
        """
        Shift the magnitude left in place; a negative ``count`` shifts right.
        """
        count = _coerce(count)
        if count is NotImplemented:
            return count
        if count._negative:
            return self.__irshift__(-count)
        self._magnitude <<= count._magnitude
        return self

    def __irshift__(self, count) -> "BigInteger":
        """
        Shift the magnitude right in place; a negative ``count`` shifts left.
        A result of zero clears the sign.
        """
        count = _coerce(count)
        if count is NotImplemented:
            return count
        if count._negative:
            return self.__ilshift__(-count)
        self._magnitude >>= count._magnitude
        return self._normalize()

    def increment(self) -> "BigInteger":
        self += 1
        return self

    def decrement(self) -> "BigInteger":
        self -= 1
        return self

    # ------------------------------------------------------------------
    # unary operators

    def __neg__(self) -> "BigInteger":
        result = BigInteger(self)
        if not result.is_zero():
            result._negative = not result._negative
        return result

    def __pos__(self):
        return BigInteger(self)

    def __abs__(self) -> "BigInteger":
        return BigInteger.from_parts(self._magnitude, False)

    def __invert__(self) -> "BigInteger":
        """
        Complement the stored limbs of the magnitude and flip the sign.

        See :meth:`BigUnsigned.__invert__` for the width dependence. A zero
        result is non-negative.
        """
        return BigInteger.from_parts(~self._magnitude, not self._negative)

    # ------------------------------------------------------------------
    # binary operators

    def __add__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigInteger(self)
        result += other
        return result

    def __radd__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other + self

    def __sub__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigInteger(self)
        result -= other
        return result

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other - self

    def __mul__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigInteger(self)
        result *= other
        return result

    def __rmul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other * self

    def __floordiv__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigInteger(self)
        result //= other
        return result

    def __rfloordiv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other // self

    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__

    def __mod__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigInteger(self)
        result %= other
        return result

    def __rmod__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other % self

    def __divmod__(self, other: "BigInteger") -> tuple["BigInteger", "BigInteger"]:
        other = _coerce(other)
        if other is NotImplemented:
            return other
        quotient = BigInteger(self)
        remainder = quotient.divide_with_remainder(other)
        return quotient, remainder

    def __rdivmod__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return divmod(other, self)

    def __pow__(self, exponent, modulo=None) -> "BigInteger":
        """
        Integer exponentiation by a non-negative exponent.

        Raises
        ------
        InvalidArgument
            If ``exponent`` is negative.
        """
        if modulo is not None:
            return NotImplemented
        exponent = _coerce(exponent)
        if exponent is NotImplemented:
            return exponent
        if exponent._negative:
            raise InvalidArgument("BigInteger: negative exponent")
        magnitude = self._magnitude ** exponent._magnitude
        return BigInteger.from_parts(magnitude, self._negative and exponent._magnitude.get_bit(0))

    def __and__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigInteger(self)
        result &= other
        return result

    def __or__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigInteger(self)
        result |= other
        return result

    def __xor__(self, other: "BigInteger") -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigInteger(self)
        result ^= other
        return result

    def __rand__(self, other):
        return self & other

    def __ror__(self, other):
        return self | other

    def __rxor__(self, other):
        return self ^ other

    def __lshift__(self, count) -> "BigInteger":
        result = BigInteger(self)
        return result.__ilshift__(count)

    def __rshift__(self, count) -> "BigInteger":
        result = BigInteger(self)
        return result.__irshift__(count)


def _coerce(other):
    if isinstance(other, BigInteger):
        return other
    if isinstance(other, (BigUnsigned, bool, int, np.integer)):
        return BigInteger(other)
    return NotImplemented
