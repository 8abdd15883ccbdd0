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

from bignumber.errors import (
    BigNumberError,
    InvalidArgument,
    MalformedInput,
    DivideByZero,
    Underflow,
    Overflow,
)
from bignumber.limb_store import LIMB_BITS, LIMB_BASE, LimbStore
from bignumber.big_unsigned import BigUnsigned
from bignumber.big_integer import BigInteger
from bignumber.base_codec import parse_unsigned, parse_signed, render
from bignumber.conversions import (
    narrow,
    to_int8,
    to_int16,
    to_int32,
    to_int64,
    to_uint8,
    to_uint16,
    to_uint32,
    to_uint64,
    to_signed,
    to_unsigned,
    clear,
    absolute,
)
