#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecsig.ecc.nonce` module."

import hashlib
from itertools import islice

import pytest

from ecsig.ecc.curves import LOW_CARD_CURVES, secp256k1
from ecsig.ecc.nonce import (
    RFC6979,
    FixedNonce,
    int_from_scalar,
    random_nonces,
    rfc6979_nonce,
)
from ecsig.exceptions import EcsigValueError
from ecsig.hashes import challenge_, reduce_to_hlen


def test_rfc6979() -> None:
    # source: https://bitcointalk.org/index.php?topic=285142.40
    msg = "Satoshi Nakamoto"
    c = challenge_(reduce_to_hlen(msg), secp256k1.n)
    q = 0x1
    k = 0x8F8A276C19F4149656B280621E358CCE24F5F52542772691EE69063B74F15D15
    assert k == rfc6979_nonce(c, q, secp256k1.n)
    assert k == rfc6979_nonce(c, q, secp256k1.n, hashlib.sha256)
    assert k == next(RFC6979()(c, q, secp256k1.n))


def test_rfc6979_example() -> None:
    # source: https://tools.ietf.org/html/rfc6979 section A.1
    n = 0x4000000000000000000020108A2E0CC0D99F8A5EF
    q = 0x09A4D6792295A7F730FC3F2B49CBC0F62E862272F
    c = challenge_(hashlib.sha256(b"sample").digest(), n)
    k = 0x23AF4074C90A02B3FE61D286D5C87F425E6BDD81B
    assert k == rfc6979_nonce(c, q, n)


def test_rfc6979_stream() -> None:
    n = secp256k1.n
    c = challenge_(reduce_to_hlen("Satoshi Nakamoto"), n)
    candidates = list(islice(RFC6979()(c, 1, n), 5))
    assert candidates[0] == rfc6979_nonce(c, 1, n)
    # retries continue the HMAC stream: no candidate is repeated
    assert len(set(candidates)) == 5
    # the stream is deterministic
    assert candidates == list(islice(RFC6979()(c, 1, n), 5))

    # different challenge or private key, different nonce
    assert rfc6979_nonce(c + 1, 1, n) != candidates[0]
    assert rfc6979_nonce(c, 2, n) != candidates[0]

    # the challenge is reduced mod n
    assert rfc6979_nonce(c + n, 1, n) == candidates[0]

    # low cardinality: all candidates are in [1, n-1]
    for ec in LOW_CARD_CURVES.values():
        for q in range(1, ec.n):
            for k in islice(RFC6979()(0, q, ec.n), 20):
                assert 0 < k < ec.n


def test_rfc6979_hf() -> None:
    n = secp256k1.n
    c = challenge_(reduce_to_hlen("Satoshi Nakamoto"), n)
    k_sha256 = rfc6979_nonce(c, 1, n, hashlib.sha256)
    k_sha512 = next(RFC6979(hashlib.sha512)(c, 1, n))
    assert 0 < k_sha512 < n
    assert k_sha256 != k_sha512

    assert repr(RFC6979()) == "RFC6979(sha256)"
    assert repr(RFC6979(hashlib.sha1)) == "RFC6979(sha1)"


def test_rfc6979_exceptions() -> None:
    n = secp256k1.n
    for q in (0, n, -1):
        with pytest.raises(EcsigValueError, match="private key not in 1..n-1: "):
            rfc6979_nonce(0, q, n)


def test_random_nonces() -> None:
    for ec in LOW_CARD_CURVES.values():
        nonces = list(islice(random_nonces(0, 1, ec.n), 200))
        assert len(nonces) == 200
        assert all(0 < k < ec.n for k in nonces)

    # the source is random, not deterministic
    n = secp256k1.n
    assert next(random_nonces(0, 1, n)) != next(random_nonces(0, 1, n))


def test_fixed_nonce() -> None:
    n = 11
    assert list(FixedNonce(3)(0, 1, n)) == [3]
    assert list(FixedNonce("0x0a")(5, 2, n)) == [10]

    for k in (0, n, -1):
        with pytest.raises(EcsigValueError, match="ephemeral key not in 1..n-1: "):
            next(FixedNonce(k)(0, 1, n))


def test_int_from_scalar() -> None:
    n = secp256k1.n
    assert int_from_scalar(1, n) == 1
    assert int_from_scalar("0x01", n) == 1
    assert int_from_scalar(b"\x01", n) == 1
    assert int_from_scalar(n - 1, n) == n - 1

    with pytest.raises(EcsigValueError, match="private key not in 1..n-1: "):
        int_from_scalar(0, n)
    # large integers are hex-formatted in error messages
    with pytest.raises(EcsigValueError, match="'FFFFFFFF FFFFFFFF"):
        int_from_scalar(n, n)
    with pytest.raises(EcsigValueError, match="nonce not in 1..n-1: "):
        int_from_scalar(n, n, "nonce")
