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


import logging

import numpy as np

logger = logging.getLogger(__name__)

LIMB_BITS = 32
LIMB_BASE = 2**LIMB_BITS
LIMB_MASK = LIMB_BASE - 1
DTYPE = np.uint32
# wide enough to hold a limb shifted by up to LIMB_BITS - 1 bits
WIDE_DTYPE = np.uint64


class LimbStore:
    """
    Reference counted backing list of limbs.

    A ``LimbStore`` is shared by every ``BigUnsigned`` handle that was copied
    from the same value. ``owners`` counts those handles; a handle may only
    write to ``limbs`` while it is the sole owner. Handles that want to write
    to a shared store call :meth:`diverge`, which hands back a private copy
    and gives up their share of this one.

    Attributes
    ----------
    limbs : list of int
        Little-endian limbs, each in ``[0, LIMB_MASK]``.
    owners : int
        Number of handles currently referencing this store.

    Notes
    -----
    The owner count is a plain integer. Handles sharing a store must not be
    mutated concurrently from several threads.
    """

    __slots__ = ("limbs", "owners")

    def __init__(self, limbs=None):
        self.limbs = [] if limbs is None else limbs
        self.owners = 1

    def acquire(self):
        self.owners += 1
        return self

    def release(self):
        self.owners -= 1

    def is_unique(self):
        return self.owners == 1

    def diverge(self):
        """
        Return a privately owned copy of this store and drop one share of it.

        Returns
        -------
        LimbStore
            A new store with ``owners == 1`` holding a copy of the limbs.
        """
        logger.debug("copy-on-write divergence of %d limbs (%d owners)",
                     len(self.limbs), self.owners)
        self.release()
        return LimbStore(list(self.limbs))

    def __repr__(self):
        return f"LimbStore(limbs={self.limbs}, owners={self.owners})"


def trim(limbs):
    """
    Drop most-significant zero limbs in place so that ``limbs`` is canonical.

    Parameters
    ----------
    limbs : list of int
        Little-endian limbs.

    Returns
    -------
    list of int
        The same list, for chaining.
    """
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def to_array(limbs, size=None):
    """
    Copy ``limbs`` into a zero-padded ``WIDE_DTYPE`` array of length ``size``.
    """
    if size is None:
        size = len(limbs)
    arr = np.zeros(size, dtype=WIDE_DTYPE)
    n = min(size, len(limbs))
    arr[:n] = limbs[:n]
    return arr


def from_array(arr):
    # tolist() yields Python ints, which keeps the scalar kernels off numpy
    return trim((arr & WIDE_DTYPE(LIMB_MASK)).tolist())
