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


import math

import numpy as np

from bignumber.errors import DivideByZero, InvalidArgument, Underflow
from bignumber.limb_store import (
    DTYPE,
    LIMB_BITS,
    LIMB_MASK,
    LimbStore,
    from_array,
    to_array,
    trim,
)


class BigUnsigned:
    """
    Unsigned integer of unbounded magnitude.

    The value is held as a canonical little-endian sequence of 32-bit limbs
    (``digits[0]`` is the least significant limb, no most-significant zero
    limb, zero is the empty sequence). The sequence lives in a
    :class:`~bignumber.limb_store.LimbStore` which may be shared between
    several handles: copying a ``BigUnsigned`` is O(1) and the limbs are only
    duplicated when one of the sharing handles is about to mutate them
    (copy-on-write).

    In-place operators (``+=``, ``-=``, ``*=``, ``//=``, ``%=``, ``&=``,
    ``|=``, ``^=``, ``<<=``, ``>>=``) mutate the handle and return it; the
    binary operators copy the left operand and apply the in-place form.
    Python integers are accepted wherever a ``BigUnsigned`` operand is
    expected.

    Parameters
    ----------
    value : int, bool, numpy.integer, float, str, BigUnsigned or BigInteger, default=0
        Initial value. Strings are parsed as numerals in the default base,
        floats must be finite and integral, signed values must be
        non-negative.

    Raises
    ------
    InvalidArgument
        If ``value`` is negative, fractional or non-finite.
    MalformedInput
        If ``value`` is a string that is not a valid numeral.

    Examples
    --------

    >>> from bignumber import BigUnsigned
    >>> a = BigUnsigned(2**64 + 5)
    >>> b = a
    >>> a *= a
    >>> int(a) == (2**64 + 5)**2
    True
    >>> (BigUnsigned(1000) // 7, BigUnsigned(1000) % 7)
    (BigUnsigned(142), BigUnsigned(6))

    Notes
    -----
    ``~x`` only complements the limbs that are currently stored, so the
    result depends on the width of ``x`` (see :meth:`__invert__`).
    """

    __slots__ = ("_store",)

    def __init__(self, value=0):
        if isinstance(value, BigUnsigned):
            self._store = value._store.acquire()
            return

        if isinstance(value, str):
            from bignumber.base_codec import parse_unsigned

            self._store = parse_unsigned(value)._store.acquire()
            return

        from bignumber.big_integer import BigInteger

        if isinstance(value, BigInteger):
            if value.negative:
                raise InvalidArgument("BigUnsigned: cannot set from a negative number")
            self._store = value.magnitude._store.acquire()
            return

        n = _as_python_int(value, "BigUnsigned")
        if n < 0:
            raise InvalidArgument("BigUnsigned: cannot set from a negative number")
        self._store = LimbStore(_limbs_from_int(n))

    def __del__(self):
        store = getattr(self, "_store", None)
        if store is not None:
            store.release()

    @classmethod
    def from_limbs(cls, limbs, canonical=True):
        """
        Build a ``BigUnsigned`` from little-endian 32-bit limbs.

        Parameters
        ----------
        limbs : iterable of int
            Limbs, least significant first. Each must lie in ``[0, 2**32)``.
        canonical : bool, default=True
            If True, most-significant zero limbs are dropped. If False the
            limbs are stored exactly as given; the next mutating operation
            restores the canonical form.

        Returns
        -------
        BigUnsigned
        """
        limbs = [int(limb) for limb in limbs]
        for limb in limbs:
            if not 0 <= limb <= LIMB_MASK:
                raise InvalidArgument(f"BigUnsigned: limb {limb} out of range")
        if canonical:
            trim(limbs)
        return cls._wrap(limbs)

    @classmethod
    def from_string(cls, text, base=None):
        """
        Parse a numeral, see :func:`bignumber.base_codec.parse_unsigned`.
        """
        from bignumber.base_codec import parse_unsigned

        return parse_unsigned(text, base)

    @classmethod
    def _wrap(cls, limbs):
        result = cls.__new__(cls)
        result._store = LimbStore(limbs)
        return result

    # ------------------------------------------------------------------
    # storage and sharing

    @property
    def limbs(self):
        """
        Read-only tuple of the stored limbs, least significant first.
        """
        return tuple(self._store.limbs)

    @property
    def digits(self):
        """
        The stored limbs as a fresh little-endian ``numpy.uint32`` array.
        """
        return np.array(self._store.limbs, dtype=DTYPE)

    @property
    def limb_count(self):
        return len(self._store.limbs)

    def is_zero(self) -> bool:
        return not self._store.limbs

    def shares_storage_with(self, other) -> bool:
        return isinstance(other, BigUnsigned) and other._store is self._store

    def clear(self) -> "BigUnsigned":
        """
        Set the value to zero.

        A sole owner truncates its limbs in place; a handle that shares its
        limbs detaches to a new empty store so that no other handle observes
        the change.

        Returns
        -------
        BigUnsigned
            ``self``.
        """
        if self._store.is_unique():
            self._store.limbs.clear()
        else:
            self._store.release()
            self._store = LimbStore()
        return self

    def ensure_exclusive(self):
        """
        Make sure this handle is the only owner of its limbs.

        Must be called before any limb is written. If the store is shared it
        is copied and the share on the old store released.

        Returns
        -------
        list of int
            The privately owned limb list.
        """
        if not self._store.is_unique():
            self._store = self._store.diverge()
        return self._store.limbs

    def trim_leading_zeros(self) -> "BigUnsigned":
        """
        Remove most-significant zero limbs so the stored sequence is canonical.

        Returns
        -------
        BigUnsigned
            ``self``.
        """
        limbs = self._store.limbs
        if limbs and limbs[-1] == 0:
            trim(self.ensure_exclusive())
        return self

    def assign(self, other: "BigUnsigned") -> "BigUnsigned":
        """
        Make this handle share ``other``'s limbs.

        Parameters
        ----------
        other : BigUnsigned or int
            New value.

        Returns
        -------
        BigUnsigned
            ``self``.
        """
        if not isinstance(other, BigUnsigned):
            other = BigUnsigned(other)
        if other._store is not self._store:
            store = other._store.acquire()
            self._store.release()
            self._store = store
        return self

    def _load(self, limbs):
        # install a freshly computed limb list without touching shared stores
        if self._store.is_unique():
            self._store.limbs = limbs
        else:
            self._store.release()
            self._store = LimbStore(limbs)
        return self

    def __copy__(self):
        return BigUnsigned(self)

    def __deepcopy__(self, memo):
        return BigUnsigned._wrap(list(self._store.limbs))

    def __reduce__(self):
        return (BigUnsigned, (int(self),))

    # ------------------------------------------------------------------
    # conversions

    def __bool__(self):
        return bool(self._store.limbs)

    def __int__(self):
        result = 0
        for limb in reversed(self._store.limbs):
            result = (result << LIMB_BITS) | limb
        return result

    __index__ = __int__

    def __hash__(self):
        return hash(int(self))

    def __str__(self):
        return self.to_string(10)

    def __repr__(self):
        return f"BigUnsigned({self})"

    def to_string(self, base=None, show_pos=False, show_base=False, uppercase=False):
        """
        Render as a numeral, see :func:`bignumber.base_codec.render`.
        """
        from bignumber.base_codec import render

        return render(self, base, show_pos=show_pos, show_base=show_base,
                      uppercase=uppercase)

    def bit_length(self) -> int:
        """
        Number of bits needed to represent the value (0 for zero).
        """
        limbs = self._store.limbs
        n = _significant_length(limbs)
        if not n:
            return 0
        return (n - 1) * LIMB_BITS + limbs[n - 1].bit_length()

    def get_bit(self, i: int):
        """
        Get the value of the i-th bit (0-based, LSB=bit 0).

        Parameters
        ----------
        i : int
            Bit index. Bits above the stored width read as 0.

        Returns
        -------
        int
            Either 0 or 1.
        """
        if i < 0:
            raise InvalidArgument("BigUnsigned: negative bit index")
        pos, pos_in = divmod(i, LIMB_BITS)
        limbs = self._store.limbs
        if pos >= len(limbs):
            return 0
        return (limbs[pos] >> pos_in) & 1

    # ------------------------------------------------------------------
    # comparisons

    def _compare(self, other):
        if isinstance(other, BigUnsigned):
            if other._store is self._store:
                return 0
            return _compare_limbs(self._store.limbs, other._store.limbs)
        if isinstance(other, (bool, int, np.integer)):
            if other < 0:
                return 1
            return _compare_limbs(self._store.limbs, _limbs_from_int(int(other)))
        return NotImplemented

    def __eq__(self, other: "BigUnsigned"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res == 0

    def __ne__(self, other: "BigUnsigned"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res != 0

    def __lt__(self, other: "BigUnsigned"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res < 0

    def __le__(self, other: "BigUnsigned"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res <= 0

    def __gt__(self, other: "BigUnsigned"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res > 0

    def __ge__(self, other: "BigUnsigned"):
        res = self._compare(other)
        if res is NotImplemented:
            return res
        return res >= 0

    # ------------------------------------------------------------------
    # in-place arithmetic

    def __iadd__(self, other: "BigUnsigned") -> "BigUnsigned":
        """
        Add ``other`` in place.

        Limb-wise addition with carry propagation; a final carry appends a new
        most-significant limb. Adding to zero shares ``other``'s limbs instead
        of copying them.
        """
        other = _coerce(other)
        if other is NotImplemented:
            return other
        if other.is_zero():
            return self.trim_leading_zeros()
        if self.is_zero():
            return self.assign(other).trim_leading_zeros()
        if other is self:
            other = BigUnsigned(other)
        trim(_add_limbs(self.ensure_exclusive(), other._store.limbs))
        return self

    def __isub__(self, other: "BigUnsigned") -> "BigUnsigned":
        """
        Subtract ``other`` in place.

        Raises
        ------
        Underflow
            If ``other`` is larger than ``self``. ``self`` is left unchanged.
        """
        other = _coerce(other)
        if other is NotImplemented:
            return other
        if other.is_zero():
            return self.trim_leading_zeros()
        order = self._compare(other)
        if order < 0:
            raise Underflow("BigUnsigned: negative result in unsigned calculation")
        if order == 0:
            return self.clear()
        _sub_limbs(self.ensure_exclusive(), other._store.limbs)
        return self

    def __imul__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        if self.is_zero():
            return self
        if other.is_zero():
            return self.clear()
        if other is self:
            other = BigUnsigned(other)
        return self._load(trim(_mul_limbs(self._store.limbs, other._store.limbs)))

    def divide_with_remainder(self, divisor: "BigUnsigned") -> "BigUnsigned":
        """
        Divide in place and return the remainder.

        Bit-serial shift-and-subtract long division: the dividend is scanned
        from its most significant set bit down, each bit is shifted into a
        running remainder and the divisor is subtracted whenever the remainder
        reaches it, setting the matching quotient bit.

        Parameters
        ----------
        divisor : BigUnsigned or int
            Non-zero divisor.

        Returns
        -------
        BigUnsigned
            The remainder ``r`` with ``0 <= r < divisor``. ``self`` holds the
            quotient afterwards.

        Raises
        ------
        DivideByZero
            If ``divisor`` is zero. ``self`` is left unchanged.
        """
        divisor = _coerce(divisor)
        if divisor is NotImplemented:
            raise TypeError("BigUnsigned: divisor must be an unsigned integer")
        if not any(divisor._store.limbs):
            raise DivideByZero("BigUnsigned: cannot divide by zero")

        order = self._compare(divisor)
        if order == 0:
            self._load([1])
            return BigUnsigned()
        if order < 0:
            remainder = BigUnsigned(self).trim_leading_zeros()
            self.clear()
            return remainder

        quotient, remainder = _divmod_limbs(self._store.limbs, divisor._store.limbs)
        self._load(quotient)
        return BigUnsigned._wrap(remainder)

    def __ifloordiv__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        self.divide_with_remainder(other)
        return self

    __itruediv__ = __ifloordiv__

    def __imod__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.assign(self.divide_with_remainder(other))

    def __iand__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        if self.is_zero():
            return self
        if other.is_zero():
            return self.clear()
        if other._store is self._store:
            return self.trim_leading_zeros()
        return self._load(_and_limbs(self._store.limbs, other._store.limbs))

    def __ior__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        if other.is_zero():
            return self.trim_leading_zeros()
        if self.is_zero():
            return self.assign(other).trim_leading_zeros()
        if other._store is self._store:
            return self.trim_leading_zeros()
        return self._load(_or_limbs(self._store.limbs, other._store.limbs))

    def __ixor__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        if other.is_zero():
            return self.trim_leading_zeros()
        if self.is_zero():
            return self.assign(other).trim_leading_zeros()
        if other._store is self._store:
            return self.clear()
        return self._load(_xor_limbs(self._store.limbs, other._store.limbs))

    def __ilshift__(self, count) -> "BigUnsigned":
        """
        Shift left in place by ``count`` bits.

        ``count`` is split into whole limbs and a sub-limb bit count by
        dividing it by the limb width. Whole limbs are inserted at the low
        end, the remaining bits are shifted across limb boundaries and a new
        most-significant limb is appended only if bits carry out of the top.
        """
        split = _split_shift(count)
        if split is NotImplemented:
            return split
        whole, bits = split
        if self.is_zero() or not (whole or bits):
            return self.trim_leading_zeros()
        _shl_limbs(trim(self.ensure_exclusive()), whole, bits)
        return self

    def __irshift__(self, count) -> "BigUnsigned":
        split = _split_shift(count)
        if split is NotImplemented:
            return split
        whole, bits = split
        if self.is_zero() or not (whole or bits):
            return self.trim_leading_zeros()
        if whole >= self.limb_count:
            return self.clear()
        _shr_limbs(self.ensure_exclusive(), whole, bits)
        return self

    def increment(self) -> "BigUnsigned":
        """
        Add one in place and return ``self``.
        """
        self += 1
        return self

    def decrement(self) -> "BigUnsigned":
        """
        Subtract one in place and return ``self``.

        Raises
        ------
        Underflow
            If the value is zero.
        """
        self -= 1
        return self

    # ------------------------------------------------------------------
    # binary operators

    def __add__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigUnsigned(self)
        result += other
        return result

    def __radd__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other + self

    def __sub__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigUnsigned(self)
        result -= other
        return result

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other - self

    def __mul__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigUnsigned(self)
        result *= other
        return result

    def __rmul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other * self

    def __floordiv__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigUnsigned(self)
        result.divide_with_remainder(other)
        return result

    def __rfloordiv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other // self

    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__

    def __mod__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return BigUnsigned(self).divide_with_remainder(other)

    def __rmod__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other % self

    def __divmod__(self, other: "BigUnsigned") -> tuple["BigUnsigned", "BigUnsigned"]:
        other = _coerce(other)
        if other is NotImplemented:
            return other
        quotient = BigUnsigned(self)
        remainder = quotient.divide_with_remainder(other)
        return quotient, remainder

    def __rdivmod__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return divmod(other, self)

    def __pow__(self, exponent, modulo=None) -> "BigUnsigned":
        """
        Integer exponentiation (square-and-multiply).

        Parameters
        ----------
        exponent : BigUnsigned or int
            Exponent (>= 0).

        Returns
        -------
        BigUnsigned
            ``self`` raised to ``exponent``; ``x ** 0 == 1``.
        """
        if modulo is not None:
            return NotImplemented
        exponent = _coerce(exponent)
        if exponent is NotImplemented:
            return exponent
        result = BigUnsigned(1)
        base = BigUnsigned(self)
        n_bits = exponent.bit_length()
        for i in range(n_bits):
            if exponent.get_bit(i):
                result *= base
            if i + 1 < n_bits:
                base *= base
        return result

    def __and__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigUnsigned(self)
        result &= other
        return result

    def __or__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigUnsigned(self)
        result |= other
        return result

    def __xor__(self, other: "BigUnsigned") -> "BigUnsigned":
        other = _coerce(other)
        if other is NotImplemented:
            return other
        result = BigUnsigned(self)
        result ^= other
        return result

    def __rand__(self, other):
        return self & other

    def __ror__(self, other):
        return self | other

    def __rxor__(self, other):
        return self ^ other

    def __lshift__(self, count) -> "BigUnsigned":
        result = BigUnsigned(self)
        shifted = result.__ilshift__(count)
        return shifted

    def __rshift__(self, count) -> "BigUnsigned":
        result = BigUnsigned(self)
        shifted = result.__irshift__(count)
        return shifted

    def __invert__(self) -> "BigUnsigned":
        """
        Complement every stored limb.

        Unbounded NOT would be an infinite run of ones, so only the limbs that
        are currently stored are complemented and the result is re-trimmed.
        The result therefore depends on the width of ``self``:
        ``~BigUnsigned(0) == 0`` and ``~BigUnsigned(1) == 2**32 - 2``.

        Returns
        -------
        BigUnsigned
        """
        if self.is_zero():
            return BigUnsigned()
        return BigUnsigned._wrap(_invert_limbs(self._store.limbs))

    def __pos__(self):
        return BigUnsigned(self)


def _as_python_int(value, owner):
    """
    Convert a Python/numpy scalar to ``int`` for limb decomposition.
    """
    if isinstance(value, (bool, np.bool_, int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        if not math.isfinite(value):
            raise InvalidArgument(f"{owner}: cannot set from a non-finite number")
        if not float(value).is_integer():
            raise InvalidArgument(f"{owner}: cannot set from a fractional number")
        return int(value)
    raise TypeError(f"{owner}: cannot set from {type(value).__name__}")


def _coerce(other):
    if isinstance(other, BigUnsigned):
        return other
    if isinstance(other, (bool, int, np.integer)):
        return BigUnsigned(other)
    return NotImplemented


def _split_shift(count):
    """
    Split a shift count into ``(whole_limbs, bits)`` using
    :meth:`BigUnsigned.divide_with_remainder` by the limb width.
    """
    from bignumber.big_integer import BigInteger

    if isinstance(count, BigInteger) and count.negative:
        raise InvalidArgument("BigUnsigned: negative shift count")
    if isinstance(count, (BigUnsigned, BigInteger)):
        amount = BigUnsigned(count)
    elif isinstance(count, (bool, int, np.integer)):
        if count < 0:
            raise InvalidArgument("BigUnsigned: negative shift count")
        amount = BigUnsigned(count)
    else:
        return NotImplemented
    bits = amount.divide_with_remainder(LIMB_BITS)
    return int(amount), int(bits)


def _limbs_from_int(n):
    limbs = []
    while n:
        limbs.append(n & LIMB_MASK)
        n >>= LIMB_BITS
    return limbs


def _compare_limbs(a, b):
    """
    Three-way comparison of limb lists: length first, then from the most
    significant limb down. Most-significant zero limbs are ignored. Returns
    -1, 0 or 1.
    """
    len_a = _significant_length(a)
    len_b = _significant_length(b)
    if len_a != len_b:
        return -1 if len_a < len_b else 1
    for i in range(len_a - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def _significant_length(limbs):
    n = len(limbs)
    while n and not limbs[n - 1]:
        n -= 1
    return n


def _add_limbs(acc, addend):
    """
    Add ``addend`` into ``acc`` in place.

    Parameters
    ----------
    acc : list of int
        Exclusively owned little-endian limbs, modified in place.
    addend : list of int
        Limbs to add. Must not be the same list object as ``acc``.
    """
    carry = 0
    common = min(len(acc), len(addend))
    for i in range(common):
        s = acc[i] + addend[i] + carry
        acc[i] = s & LIMB_MASK
        carry = s >> LIMB_BITS

    if len(addend) > common:
        # acc ended first, keep carrying through the rest of addend
        for i in range(common, len(addend)):
            if not carry:
                acc.extend(addend[i:])
                break
            s = addend[i] + carry
            acc.append(s & LIMB_MASK)
            carry = s >> LIMB_BITS
    else:
        i = common
        while carry and i < len(acc):
            s = acc[i] + carry
            acc[i] = s & LIMB_MASK
            carry = s >> LIMB_BITS
            i += 1

    if carry:
        acc.append(carry)
    return acc


def _sub_limbs(minuend, subtrahend):
    """
    Subtract ``subtrahend`` from ``minuend`` in place, ``minuend >= subtrahend``.

    Adds the limb-wise complement of ``subtrahend`` plus one over the width of
    ``minuend`` and discards the final carry, which equals the difference as
    long as the minuend is not the smaller operand.
    """
    carry = 1
    n = len(subtrahend)
    for i in range(len(minuend)):
        if i < n:
            s = minuend[i] + (subtrahend[i] ^ LIMB_MASK) + carry
        elif carry:
            # complement of an implicit zero limb plus carry wraps to the limb itself
            break
        else:
            s = minuend[i] + LIMB_MASK
        minuend[i] = s & LIMB_MASK
        carry = s >> LIMB_BITS
    return trim(minuend)


def _mul_limbs(multiplicand, multiplier):
    """
    Binary shift-and-add multiplication.

    For every set bit of ``multiplier`` the running copy of ``multiplicand``
    is shifted left by the distance to the previous set bit and added to the
    result.

    Returns
    -------
    list of int
        Freshly allocated canonical product limbs.
    """
    shifted = list(multiplicand)
    result = []
    pending = 0
    for limb in multiplier:
        if not limb:
            pending += LIMB_BITS
            continue
        for bit in range(LIMB_BITS):
            if (limb >> bit) & 1:
                _shl_limbs(shifted, *divmod(pending, LIMB_BITS))
                _add_limbs(result, shifted)
                pending = 0
            pending += 1
    return result


def _divmod_limbs(dividend, divisor):
    """
    Shift-and-subtract long division of canonical limb lists.

    Requires ``dividend > divisor > 0``.

    Returns
    -------
    tuple of list of int
        ``(quotient, remainder)``, both canonical.
    """
    quotient = [0] * len(dividend)
    remainder = []
    top = len(dividend) - 1
    for index in range(top, -1, -1):
        limb = dividend[index]
        start = limb.bit_length() - 1 if index == top else LIMB_BITS - 1
        for bit in range(start, -1, -1):
            _shl1_inject(remainder, (limb >> bit) & 1)
            if _compare_limbs(remainder, divisor) >= 0:
                _sub_limbs(remainder, divisor)
                quotient[index] |= 1 << bit
    return trim(quotient), remainder


def _shl1_inject(limbs, bit):
    # shift left by one and move ``bit`` into the vacated least significant bit
    carry = bit
    for i, limb in enumerate(limbs):
        limbs[i] = ((limb << 1) & LIMB_MASK) | carry
        carry = limb >> (LIMB_BITS - 1)
    if carry:
        limbs.append(carry)


def _shl_limbs(limbs, whole, bits):
    """
    Shift a canonical limb list left in place by ``whole`` limbs plus
    ``bits`` bits (0 <= bits < LIMB_BITS).
    """
    if not limbs:
        return limbs
    if bits:
        carry = 0
        back = LIMB_BITS - bits
        for i, limb in enumerate(limbs):
            limbs[i] = ((limb << bits) & LIMB_MASK) | carry
            carry = limb >> back
        if carry:
            limbs.append(carry)
    if whole:
        limbs[:0] = [0] * whole
    return limbs


def _shr_limbs(limbs, whole, bits):
    """
    Shift a limb list right in place by ``whole`` limbs plus ``bits`` bits
    (0 <= bits < LIMB_BITS) and re-trim it.
    """
    if whole:
        del limbs[:whole]
    if bits:
        carry = 0
        back = LIMB_BITS - bits
        for i in range(len(limbs) - 1, -1, -1):
            limb = limbs[i]
            limbs[i] = (limb >> bits) | carry
            carry = (limb << back) & LIMB_MASK
    return trim(limbs)


def _and_limbs(a, b):
    n = min(len(a), len(b))
    return from_array(to_array(a, n) & to_array(b, n))


def _or_limbs(a, b):
    n = max(len(a), len(b))
    return from_array(to_array(a, n) | to_array(b, n))


def _xor_limbs(a, b):
    n = max(len(a), len(b))
    return from_array(to_array(a, n) ^ to_array(b, n))


def _invert_limbs(a):
    return from_array(~to_array(a))
