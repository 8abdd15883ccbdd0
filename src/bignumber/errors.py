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


class BigNumberError(Exception):
    """
    Base class of every error raised by bignumber.
    """
    pass


class InvalidArgument(BigNumberError, ValueError):
    """
    Raised for arguments outside an operation's domain, e.g. a negative value
    assigned to a ``BigUnsigned`` or a base outside 2..36.
    """
    pass


class MalformedInput(InvalidArgument):
    """
    Raised when a numeral cannot be parsed: empty text, a digit that is not
    valid for the resolved base or a sign/prefix in the wrong position.
    """
    pass


class DivideByZero(BigNumberError, ZeroDivisionError):
    pass


class Underflow(BigNumberError, ArithmeticError):
    """
    Raised when an unsigned subtraction would go below zero or a value is
    below the minimum of a narrowing target.
    """
    pass


class Overflow(BigNumberError, OverflowError):
    """
    Raised when a value exceeds the maximum of a narrowing target.
    """
    pass
