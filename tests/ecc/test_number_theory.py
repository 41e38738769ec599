#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecsig.ecc.number_theory` module."

import pytest

from ecsig.ecc.number_theory import gcd, mod_add, mod_div, mod_inv, mod_mul, xgcd
from ecsig.exceptions import EcsigValueError

primes = [
    2,
    3,
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    37,
    41,
    43,
    47,
    53,
    59,
    61,
    67,
    71,
    73,
    79,
    83,
    89,
    97,
    101,
    103,
    107,
    109,
    113,
    2**160 - 2**31 - 1,
    2**192 - 2**32 - 2**12 - 2**8 - 2**7 - 2**6 - 2**3 - 1,
    2**192 - 2**64 - 1,
    2**224 - 2**32 - 2**12 - 2**11 - 2**9 - 2**7 - 2**4 - 2 - 1,
    2**224 - 2**96 + 1,
    2**256 - 2**32 - 977,
    2**256 - 2**224 + 2**192 + 2**96 - 1,
    2**384 - 2**128 - 2**96 + 2**32 - 1,
    2**521 - 1,
]


def test_gcd() -> None:
    assert gcd(37, 14) == 1
    assert gcd(14, 37) == 1
    assert gcd(12, 18) == 6
    assert gcd(18, 12) == 6
    assert gcd(2**64, 2**32 * 3) == 2**32

    for a in range(-50, 50):
        assert gcd(a, 0) == a
        assert gcd(0, a) == a

    # sign is not normalized: it follows the last nonzero remainder
    assert abs(gcd(-12, 18)) == 6
    assert abs(gcd(12, -18)) == 6
    assert gcd(-12, 0) == -12


def test_xgcd() -> None:
    assert xgcd(37, 14) == (1, -3, 8)
    assert 37 * -3 + 14 * 8 == 1

    assert xgcd(0, 0) == (0, 1, 0)
    assert xgcd(5, 0) == (5, 1, 0)
    assert xgcd(0, 5) == (5, 0, 1)

    for a in range(-30, 30):
        for b in range(-30, 30):
            g, x, y = xgcd(a, b)
            assert a * x + b * y == g
            assert abs(g) == abs(gcd(a, b))
            if g != 0:
                assert a % g == 0
                assert b % g == 0


def test_xgcd_large() -> None:
    # no recursion: large inputs do not hit the recursion limit
    a = 2**521 - 1
    b = 2**256 - 2**32 - 977
    g, x, y = xgcd(a, b)
    assert g == 1
    assert a * x + b * y == g

    # consecutive Fibonacci numbers are the worst case
    f_prev, f = 1, 1
    for _ in range(2000):
        f_prev, f = f, f_prev + f
    g, x, y = xgcd(f, f_prev)
    assert g == 1
    assert f * x + f_prev * y == 1


def test_mod_inv_prime() -> None:
    for p in primes:
        with pytest.raises(EcsigValueError, match="No inverse for 0 mod"):
            mod_inv(0, p)
        for a in range(1, min(p, 500)):  # exhausted only for small p
            inv = mod_inv(a, p)
            assert 0 < inv < p
            assert a * inv % p == 1
            inv = mod_inv(a + p, p)
            assert a * inv % p == 1
            inv = mod_inv(-a, p)
            assert -a * inv % p == 1


def test_mod_inv() -> None:
    max_m = 100
    for m in range(2, max_m):
        nums = list(range(m))
        for a in nums:
            mult = [a * i % m for i in nums]
            if 1 in mult:
                inv = mod_inv(a, m)
                assert a * inv % m == 1
                inv = mod_inv(a + m, m)
                assert a * inv % m == 1
            else:
                with pytest.raises(EcsigValueError, match="No inverse for "):
                    mod_inv(a, m)


def test_mod_add_mul() -> None:
    for m in (1, 2, 7, 31, 100, 2**256 - 2**32 - 977):
        for a, b in ((0, 0), (3, 5), (-3, 5), (3, -50), (m - 1, m - 1), (-m, 2 * m + 1)):
            add = mod_add(a, b, m)
            assert 0 <= add < m
            assert (add - a - b) % m == 0
            mul = mod_mul(a, b, m)
            assert 0 <= mul < m
            assert (mul - a * b) % m == 0

    # normalization is towards [0, m-1], not the symmetric range
    assert mod_add(-1, 0, 7) == 6
    assert mod_mul(-1, 1, 7) == 6


def test_mod_div() -> None:
    for m in primes[:30]:
        for b in range(1, m):
            # inverse round-trip
            assert mod_mul(b, mod_div(1, b, m), m) == 1
            for a in range(0, m, 7):
                assert mod_mul(mod_div(a, b, m), b, m) == a % m

    m = 100
    for b in range(1, m):
        if gcd(b, m) == 1:
            assert mod_mul(b, mod_div(1, b, m), m) == 1
        else:
            with pytest.raises(EcsigValueError, match="No inverse for "):
                mod_div(1, b, m)

    with pytest.raises(EcsigValueError, match="No inverse for 0 mod 31"):
        mod_div(1, 0, 31)
    with pytest.raises(EcsigValueError, match="No inverse for 0 mod 31"):
        mod_div(1, 31, 31)


def test_invalid_modulus() -> None:
    for m in (0, -1, -31):
        with pytest.raises(EcsigValueError, match="invalid modulus: "):
            mod_add(1, 2, m)
        with pytest.raises(EcsigValueError, match="invalid modulus: "):
            mod_mul(1, 2, m)
        with pytest.raises(EcsigValueError, match="invalid modulus: "):
            mod_div(1, 2, m)
        with pytest.raises(EcsigValueError, match="invalid modulus: "):
            mod_inv(1, m)
