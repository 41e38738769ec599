#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and functions.

Curve is the cyclic subgroup of prime order n generated by G:
it is the group consumed by the ECDSA protocol,
through the order, scalar_basemul, scalar_mul, and scalar_add methods.
"""

from math import sqrt

from ecsig.alias import INF, Integer, Point
from ecsig.ecc.curve_group import CurveGroup, mult_aff
from ecsig.exceptions import EcsigValueError
from ecsig.utils import int_from_integer, int_repr


class Curve(CurveGroup):
    "Prime order subgroup of the points of an elliptic curve over Fp."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Point,
        n: Integer,
        cofactor: int,
        weakness_check: bool = True,
        name: str = "",
    ) -> None:

        super().__init__(p, a, b)

        # 2. check that xG and yG are integers in the interval [0, p−1]
        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        if len(G) != 2:
            raise EcsigValueError("Generator must a be a sequence[int, int]")
        self.G = Point(int_from_integer(G[0]), int_from_integer(G[1]))
        if not self.is_on_curve(self.G):
            raise EcsigValueError("Generator is not on the curve")

        n = int_from_integer(n)
        self.n = n
        self.nlen = n.bit_length()
        self.n_size = (self.nlen + 7) // 8

        # 5. Check that n is prime.
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            raise EcsigValueError(f"n is not prime: {int_repr(n)}")
        delta = int(2 * sqrt(self.p))
        # also check n with Hasse Theorem
        if cofactor < 2 and not self.p + 1 - delta <= n <= self.p + 1 + delta:
            raise EcsigValueError(f"n not in p+1-delta..p+1+delta: {int_repr(n)}")

        # 7. Check that G ≠ INF, nG = INF
        if self.G[1] == 0:
            raise EcsigValueError("INF point cannot be a generator")
        if mult_aff(n, self.G, self)[1] != 0:
            raise EcsigValueError(f"n is not the group order: {int_repr(n)}")

        # 6. Check cofactor
        exp_cofactor = (1 + delta + self.p) // n
        if cofactor != exp_cofactor:
            err_msg = f"invalid cofactor: {cofactor}, expected {exp_cofactor}"
            raise EcsigValueError(err_msg)
        self.cofactor = cofactor

        # 8. Check that n ≠ p
        if n == self.p:
            raise EcsigValueError(f"n=p weak curve: {int_repr(n)}")

        if weakness_check:
            # 8. Check that p^i % n ≠ 1 for all 1≤i<100
            for i in range(1, 100):
                if pow(self.p, i, n) == 1:
                    raise UserWarning("weak curve")

        self.name = name

    def __str__(self) -> str:
        result = super().__str__()
        result += f"\n x_G = {int_repr(self.G[0])}"
        result += f"\n y_G = {int_repr(self.G[1])}"
        result += f"\n n   = {int_repr(self.n)}"
        result += f"\n cofactor = {self.cofactor}"
        return result

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        result += f", ({int_repr(self.G[0])}, {int_repr(self.G[1])})"
        result += f", {int_repr(self.n)}, {self.cofactor})"
        return result

    # cyclic group interface

    def order(self) -> int:
        "Return the group order n."
        return self.n

    def scalar_basemul(self, k: int) -> Point:
        "Return k*G, G being the generator."
        return mult(k, self.G, self)

    def scalar_mul(self, Q: Point, k: int) -> Point:
        "Return k*Q."
        return mult(k, Q, self)

    def scalar_add(self, Q1: Point, Q2: Point) -> Point:
        "Return Q1 + Q2."
        return self.add_aff(Q1, Q2)


def mult(m: Integer, Q: Point, ec: Curve) -> Point:
    """Elliptic curve scalar multiplication.

    The scalar m is reduced mod n before the multiplication;
    the point Q must be on the curve.
    """
    ec.require_on_curve(Q)
    m = int_from_integer(m) % ec.n
    return mult_aff(m, Q, ec)


def double_mult(u: Integer, H: Point, v: Integer, Q: Point, ec: Curve) -> Point:
    """Double scalar multiplication (u*H + v*Q).

    Both scalars are reduced mod n;
    the points H and Q must be on the curve.
    """

    ec.require_on_curve(H)
    ec.require_on_curve(Q)
    u = int_from_integer(u) % ec.n
    v = int_from_integer(v) % ec.n
    return ec.add_aff(mult_aff(u, H, ec), mult_aff(v, Q, ec))


__all__ = ["Curve", "INF", "double_mult", "mult"]
