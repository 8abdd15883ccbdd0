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

import os

from bignumber.errors import InvalidArgument

DECIMAL_RENDER_METHODS = ("doubling", "division")

try:
    decimal_render_method = os.environ["BIGNUMBER_DECIMAL_RENDER"]
except KeyError:
    decimal_render_method = "doubling"
decimal_render_method = decimal_render_method.strip().lower()

if decimal_render_method not in DECIMAL_RENDER_METHODS:
    raise InvalidArgument(
        f"BIGNUMBER_DECIMAL_RENDER must be one of {DECIMAL_RENDER_METHODS}, "
        f"got {decimal_render_method!r}"
    )

try:
    default_base = os.environ["BIGNUMBER_DEFAULT_BASE"]
except KeyError:
    default_base = 10
try:
    default_base = int(default_base)
except ValueError:
    raise InvalidArgument(
        f"BIGNUMBER_DEFAULT_BASE must be an integer, got {default_base!r}"
    ) from None

if not 2 <= default_base <= 36:
    raise InvalidArgument(
        f"BIGNUMBER_DEFAULT_BASE must lie in [2, 36], got {default_base}"
    )
