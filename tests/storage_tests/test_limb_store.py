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

import copy

import pytest

from bignumber import BigInteger, BigUnsigned, LimbStore


def test_zero_is_empty_sequence():
    assert BigUnsigned().limbs == ()
    assert BigUnsigned(0).is_zero()
    assert BigUnsigned(2**32).limbs == (0, 1)
    assert BigUnsigned.from_limbs([7, 0, 0]).limbs == (7,)


@pytest.mark.parametrize("mutate", [
    lambda x: x.__isub__(1),
    lambda x: x.__isub__(0),
    lambda x: x.__iadd__(1),
    lambda x: x.__iadd__(0),
    lambda x: x.__ior__(0),
    lambda x: x.__ior__(1),
    lambda x: x.__ixor__(0),
    lambda x: BigUnsigned().__iadd__(x),
    lambda x: BigUnsigned().__ior__(x),
    lambda x: BigUnsigned().__ixor__(x),
    lambda x: x.__imul__(3),
    lambda x: x.__iand__(0xFFFF),
    lambda x: x.__ixor__(1),
    lambda x: x.__irshift__(1),
    lambda x: x.__ilshift__(33),
])
def test_first_mutation_restores_canonical_form(mutate):
    x = BigUnsigned.from_limbs([5, 0, 0], canonical=False)
    assert x.limb_count == 3

    x = mutate(x)

    assert x.limb_count == 0 or x.limbs[-1] != 0


def test_synthetic_zero_limbs_do_not_affect_order():
    from bignumber import Underflow

    x = BigUnsigned.from_limbs([5, 0], canonical=False)

    assert x < 7
    assert x.bit_length() == 3
    with pytest.raises(Underflow):
        x -= 7
    assert x.limbs == (5, 0)

    remainder = x.divide_with_remainder(7)
    assert x.is_zero()
    assert remainder.limbs == (5,)


def test_adopting_synthetic_zero_limbs_leaves_source_untouched():
    source = BigUnsigned.from_limbs([5, 0], canonical=False)
    target = BigUnsigned()

    target += source

    assert target.limbs == (5,)
    assert source.limbs == (5, 0)


@pytest.mark.parametrize("mutate", [
    lambda x: x.__iadd__(0),
    lambda x: BigInteger().__iadd__(x),
])
def test_signed_addition_restores_canonical_form(mutate):
    x = BigInteger.from_parts(BigUnsigned.from_limbs([5, 0], canonical=False))

    x = mutate(x)

    limbs = x.magnitude.limbs
    assert len(limbs) == 0 or limbs[-1] != 0


def test_trim_leading_zeros():
    x = BigUnsigned.from_limbs([0, 0], canonical=False)
    assert not x.is_zero()
    x.trim_leading_zeros()
    assert x.is_zero()
    assert x == 0


def test_copy_shares_storage():
    a = BigUnsigned(2**100 + 3)
    b = BigUnsigned(a)
    c = copy.copy(a)
    d = copy.deepcopy(a)

    assert b.shares_storage_with(a)
    assert c.shares_storage_with(a)
    assert not d.shares_storage_with(a)
    assert a == b == c == d


def test_copy_on_write_isolation():
    a = BigUnsigned(2**70 + 1)
    b = BigUnsigned(a)

    b += 1

    assert not b.shares_storage_with(a)
    assert int(a) == 2**70 + 1
    assert int(b) == 2**70 + 2


def test_signed_copy_on_write_isolation():
    a = BigInteger(-(2**90))
    b = BigInteger(a)
    assert b.shares_storage_with(a)

    a *= 3
    b -= 1

    assert int(a) == -3 * 2**90
    assert int(b) == -(2**90) - 1


def test_ensure_exclusive_copies_shared_limbs():
    a = BigUnsigned(12345)
    b = BigUnsigned(a)

    limbs = b.ensure_exclusive()
    limbs[0] = 1

    assert int(a) == 12345
    assert int(b) == 1


def test_ensure_exclusive_keeps_unique_limbs():
    a = BigUnsigned(12345)
    before = a.ensure_exclusive()
    assert a.ensure_exclusive() is before


def test_clear_detaches_shared_storage():
    a = BigUnsigned(99)
    b = BigUnsigned(a)

    b.clear()

    assert b.is_zero()
    assert int(a) == 99


def test_assign_shares_storage():
    a = BigUnsigned(2**40)
    b = BigUnsigned(7)

    b.assign(a)

    assert b.shares_storage_with(a)
    b += 1
    assert int(a) == 2**40


def test_adding_to_zero_shares_storage():
    a = BigUnsigned(2**64 + 9)
    b = BigUnsigned()
    b += a
    assert b.shares_storage_with(a)


def test_limb_store_owner_count():
    store = LimbStore([1, 2])
    assert store.is_unique()
    store.acquire()
    assert not store.is_unique()

    private = store.diverge()

    assert store.owners == 1
    assert private.owners == 1
    assert private.limbs == [1, 2]
    assert private.limbs is not store.limbs


def test_released_handle_returns_ownership():
    a = BigUnsigned(5)
    b = BigUnsigned(a)
    assert a._store.owners == 2
    del b
    assert a._store.owners == 1


def test_digits_export():
    import numpy as np

    digits = BigUnsigned(2**32 + 5).digits

    assert digits.dtype == np.uint32
    assert digits.tolist() == [5, 1]
