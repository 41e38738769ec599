#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Euclidean and Extended Euclidean algorithms, both iterative,
and the modular operations derived from them.

All modular results are normalized into the representative
range [0, m-1], not the symmetric one:
ECDSA relies on sign and verify sharing the same convention.
"""

from typing import Tuple

from ecsig.exceptions import EcsigValueError
from ecsig.utils import int_repr


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of a and b.

    Iterative Euclidean algorithm, e.g.:

        gcd(37, 14)
        37 = 14*2 + 9
        14 =  9*1 + 5
         9 =  5*1 + 4
         5 =  4*1 + 1

    The result is not normalized: its sign follows
    the sign of the last nonzero remainder.
    """

    while b != 0:
        a, b = b, a % b
    return a


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    Blankinship's algorithm in substitution form:
    previous and current values of the remainder (r) and
    Bézout coefficient (s, t) sequences are tracked, without recursion.
    """

    r_prev, r = a, b
    s_prev, s = 1, 0
    t_prev, t = 0, 1
    while r != 0:
        quotient = r_prev // r
        r_prev, r = r, r_prev - quotient * r
        s_prev, s = s, s_prev - quotient * s
        t_prev, t = t, t_prev - quotient * t
    return r_prev, s_prev, t_prev


def _require_modulus(m: int) -> None:
    if m < 1:
        raise EcsigValueError(f"invalid modulus: {m}")


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    An Error is raised if a and m are not coprime (a == 0 included).
    """

    _require_modulus(m)
    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    err_msg = f"No inverse for {int_repr(a)} mod {int_repr(m)}"
    raise EcsigValueError(err_msg)


def mod_add(a: int, b: int, m: int) -> int:
    "Return (a + b) mod m, in [0, m-1]."
    _require_modulus(m)
    return (a + b) % m


def mod_mul(a: int, b: int, m: int) -> int:
    "Return (a * b) mod m, in [0, m-1]."
    _require_modulus(m)
    return (a * b) % m


def mod_div(a: int, b: int, m: int) -> int:
    """Return a / b (mod m), i.e. a * inverse(b) (mod m).

    b must be coprime to m: an Error is raised otherwise.
    If m is prime, every nonzero residue is invertible.
    """

    return a * mod_inv(b, m) % m
