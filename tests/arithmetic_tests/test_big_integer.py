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
import pytest

from bignumber import BigInteger, BigUnsigned, DivideByZero, InvalidArgument


def _trunc_divmod(a, b):
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def _signed_operands(seed, count=10):
    rng = np.random.default_rng(seed)
    values = [0, 1, -1, 2**32, -(2**32), 2**64 - 1, -(2**64) + 1]
    for _ in range(count):
        n_limbs = int(rng.integers(1, 5))
        magnitude = 0
        for limb in rng.integers(0, 2**32, size=n_limbs, dtype=np.uint64).tolist():
            magnitude = (magnitude << 32) | limb
        values.append(-magnitude if rng.integers(0, 2) else magnitude)
    return values


def _magnitude_sign(x):
    return int(x.magnitude), x.negative


def test_construction():
    assert int(BigInteger(-5)) == -5
    assert BigInteger(-5).negative
    assert int(BigInteger(BigUnsigned(7))) == 7
    assert int(BigInteger("-123456789012345678901234567890")) == -123456789012345678901234567890
    assert int(BigInteger(np.int8(-128))) == -128
    assert int(BigInteger(-(2.0**80))) == -(2**80)


def test_no_negative_zero():
    zero = BigInteger(0)
    negated = -BigInteger(0)
    assert zero == negated
    assert not negated.negative
    assert not BigInteger("-0").negative
    assert not BigInteger.from_parts(0, True).negative
    assert BigInteger(0).sign == 0


def test_add_and_sub():
    values = _signed_operands(11)
    for a in values:
        for b in values:
            assert int(BigInteger(a) + BigInteger(b)) == a + b
            assert int(BigInteger(a) - BigInteger(b)) == a - b


def test_add_takes_sign_of_larger_magnitude():
    x = BigInteger(3)
    x += -10
    assert _magnitude_sign(x) == (7, True)

    x = BigInteger(-3)
    x += 10
    assert _magnitude_sign(x) == (7, False)

    x = BigInteger(-10)
    x += 10
    assert _magnitude_sign(x) == (0, False)


def test_mul():
    values = _signed_operands(12)
    for a in values:
        for b in values:
            product = BigInteger(a) * BigInteger(b)
            assert int(product) == a * b
            assert not (product.is_zero() and product.negative)


def test_truncating_division():
    values = _signed_operands(13)
    for a in values:
        for b in values:
            if b == 0:
                continue
            q, r = _trunc_divmod(a, b)
            assert int(BigInteger(a) // BigInteger(b)) == q
            assert int(BigInteger(a) / b) == q
            assert int(BigInteger(a) % BigInteger(b)) == r
            quotient, remainder = divmod(BigInteger(a), BigInteger(b))
            assert (int(quotient), int(remainder)) == (q, r)
            assert quotient * b + remainder == a


def test_mod_follows_dividend():
    r = BigInteger(-7) % BigInteger(3)
    assert _magnitude_sign(r) == (1, True)
    assert int(r) == -1

    assert int(BigInteger(7) % BigInteger(-3)) == 1
    assert not (BigInteger(-9) % 3).negative


def test_divide_by_zero():
    x = BigInteger(-5)
    with pytest.raises(DivideByZero):
        x //= 0
    with pytest.raises(DivideByZero):
        x % BigInteger()
    assert int(x) == -5


def test_bitwise_sign_model():
    a, b = BigInteger(-12), BigInteger(10)

    assert _magnitude_sign(a & b) == (8, False)
    assert _magnitude_sign(a & -b) == (8, True)
    assert _magnitude_sign(a | b) == (14, True)
    assert _magnitude_sign(a ^ b) == (6, True)
    assert _magnitude_sign(a ^ -b) == (6, False)

    # sign-magnitude, not two's complement
    assert int(BigInteger(-1) | BigInteger(-2)) == -3

    # zero results are never negative
    assert not (BigInteger(-4) & BigInteger(-3)).negative
    assert not (BigInteger(-5) ^ BigInteger(5)).negative


def test_invert():
    assert _magnitude_sign(~BigInteger(1)) == (2**32 - 2, True)
    assert _magnitude_sign(~BigInteger(-1)) == (2**32 - 2, False)
    assert not (~BigInteger(-(2**32 - 1))).negative


@pytest.mark.parametrize("shift", [0, 1, 31, 32, 33, 100])
def test_shifts(shift):
    for a in _signed_operands(14, count=5):
        expected_left = -(abs(a) << shift) if a < 0 else a << shift
        expected_right = -(abs(a) >> shift) if a < 0 else a >> shift
        assert int(BigInteger(a) << shift) == expected_left
        assert int(BigInteger(a) >> shift) == expected_right


def test_negative_shift_reverses_direction():
    assert int(BigInteger(1) << -3) == 0
    assert int(BigInteger(16) << -3) == 2
    assert int(BigInteger(-1) >> -40) == -(2**40)


def test_shift_right_to_zero_clears_sign():
    x = BigInteger(-3)
    x >>= 2
    assert x == 0
    assert not x.negative


@pytest.mark.parametrize("value", [0, 1, -1, 2**32, -(2**32) - 7, 3**80, -(5**60)])
def test_self_aliasing(value):
    x = BigInteger(value)
    x += x
    assert int(x) == 2 * value

    x = BigInteger(value)
    x -= x
    assert x.is_zero() and not x.negative

    x = BigInteger(value)
    x *= x
    assert int(x) == value * value
    assert not x.negative

    if value:
        x = BigInteger(value)
        x //= x
        assert int(x) == 1


def test_total_order():
    values = sorted(set(_signed_operands(15, count=8)))
    big = [BigInteger(v) for v in values]
    for i, a in enumerate(big):
        for j, b in enumerate(big):
            assert (a < b) == (i < j)
            assert (a == b) == (i == j)
            assert (a >= b) == (i >= j)
            assert [a < b, a == b, a > b].count(True) == 1


def test_compare_with_ints_and_unsigned():
    assert BigInteger(-1) < 0 < BigInteger(1)
    assert BigInteger(-(2**70)) < BigInteger(-(2**69))
    assert BigInteger(5) == BigUnsigned(5)
    assert BigInteger(-5) < BigUnsigned(0)


def test_mixed_with_unsigned():
    result = BigUnsigned(5) + BigInteger(-7)
    assert isinstance(result, BigInteger)
    assert int(result) == -2


def test_increment_decrement_cross_zero():
    x = BigInteger(1)
    x.decrement()
    x.decrement()
    assert int(x) == -1
    x.increment()
    assert x == 0 and not x.negative


def test_pow():
    assert int(BigInteger(-3) ** 5) == -243
    assert int(BigInteger(-3) ** 4) == 81
    with pytest.raises(InvalidArgument):
        BigInteger(2) ** -1


def test_abs_and_sign():
    assert int(abs(BigInteger(-(2**65)))) == 2**65
    assert BigInteger(-4).sign == -1
    assert BigInteger(4).sign == 1


def test_str_and_hash():
    assert str(BigInteger(-(2**64))) == "-18446744073709551616"
    assert repr(BigInteger(-3)) == "BigInteger(-3)"
    assert hash(BigInteger(-(2**70))) == hash(-(2**70))
