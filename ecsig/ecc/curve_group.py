#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

Note that CurveGroup does not have to be a cyclic subgroup.
For the cyclic subgroup class of prime order Curve,
see the ecsig.ecc.curve module.
"""

from ecsig.alias import INF, Integer, Point
from ecsig.ecc.number_theory import mod_inv
from ecsig.exceptions import EcsigTypeError, EcsigValueError
from ecsig.utils import int_from_integer, int_repr


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise EcsigValueError(f"p is not prime: {int_repr(p)}")

        self.p_size = (p.bit_length() + 7) // 8
        self.p = p

        # 2. check that a and b are integers in the interval [0, p−1]
        if a < 0:
            raise EcsigValueError(f"negative a: {a}")
        if p <= a:
            raise EcsigValueError(f"p <= a: {int_repr(p)} <= {int_repr(a)}")
        if b < 0:
            raise EcsigValueError(f"negative b: {b}")
        if p <= b:
            raise EcsigValueError(f"p <= b: {int_repr(p)} <= {int_repr(b)}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise EcsigValueError("zero discriminant")
        self._a = a
        self._b = b

    def __str__(self) -> str:
        result = "Curve"
        result += f"\n p   = {int_repr(self.p)}"
        result += f"\n a   = {int_repr(self._a)}"
        result += f"\n b   = {int_repr(self._b)}"
        return result

    def __repr__(self) -> str:
        return f"Curve({int_repr(self.p)}, {int_repr(self._a)}, {int_repr(self._b)})"

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        # % self.p is required to account for INF (i.e. Q[1]==0)
        # so that negate(INF) = INF
        if len(Q) == 2:
            return Point(Q[0], (self.p - Q[1]) % self.p)
        raise EcsigTypeError("not a point")

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if R[1] == 0:  # Infinity point in affine coordinates
            return Point(*Q)
        if Q[1] == 0:  # Infinity point in affine coordinates
            return Point(*R)

        if R[0] == Q[0]:
            if R[1] == Q[1]:  # point doubling
                return self.double_aff(R)
            # opposite points
            return INF

        lam = (R[1] - Q[1]) * mod_inv(R[0] - Q[0], self.p)
        x = lam * lam - Q[0] - R[0]
        y = lam * (Q[0] - x) - Q[1]
        return Point(x % self.p, y % self.p)

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if Q[1] == 0:  # Infinity point in affine coordinates
            return INF

        lam = (3 * Q[0] * Q[0] + self._a) * mod_inv(2 * Q[1], self.p)
        x = lam * lam - Q[0] - Q[0]
        y = lam * (Q[0] - x) - Q[1]
        return Point(x % self.p, y % self.p)

    def _y2(self, x: int) -> int:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        # This is a good reason to keep this method private
        return ((x * x + self._a) * x + self._b) % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise EcsigValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if len(Q) != 2:
            raise EcsigValueError("point must be a tuple[int, int]")
        if Q[1] == 0:  # Infinity point in affine coordinates
            return True
        if not 0 <= Q[0] < self.p:
            raise EcsigValueError(f"x-coordinate not in 0..p-1: {int_repr(Q[0])}")
        if not 0 < Q[1] < self.p:  # y cannot be zero
            raise EcsigValueError(f"y-coordinate not in 1..p-1: {int_repr(Q[1])}")
        return self._y2(Q[0]) == (Q[1] * Q[1] % self.p)


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.
    It is not constant-time.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise EcsigValueError(f"negative m: {hex(m)}")

    R = INF  # initialize as infinity point
    while m > 0:  # use binary representation of m
        if m & 1:  # if least significant bit is 1
            R = ec.add_aff(R, Q)  # then add current Q
        m >>= 1  # remove the bit just accounted for
        Q = ec.double_aff(Q)  # double Q for next step
    return R
