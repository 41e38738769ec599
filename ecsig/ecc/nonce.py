#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ephemeral key (nonce) sources.

ECDSA needs to produce, for each signature generation,
a fresh random value (ephemeral key, hereafter designated as nonce).
For effective security, nonce must be chosen randomly and uniformly
from a set of modular integers, using a cryptographically secure
process. Even slight biases in that process may be turned into
attacks on the signature schemes.
Moreover, reusing the same nonce for a different message
signed with the same private key reveals the private key
(see ecsig.ecc.dsa.ECDSA.crack_prv_key).

A nonce source is a callable taking the challenge c,
the private key q, and the group order n,
and returning an iterator of candidate nonces in [1, n-1]:
the signer draws a new candidate whenever a candidate
yields a degenerate signature (r = 0 or s = 0).

RFC6979 turns ECDSA into a deterministic scheme by using a
deterministic process for generating the nonce.
The process fulfills the cryptographic characteristics in order to
maintain the properties of verifiability and unforgeability
expected from signature schemes; namely, for whoever does not know
the signature private key, the mapping from input messages to the
corresponding nonce values is computationally indistinguishable from
what a randomly and uniformly chosen function (from the set of
messages to the set of possible nonce values) would return.

https://tools.ietf.org/html/rfc6979
"""

import hashlib
import hmac
import secrets
from typing import Iterator

from ecsig.alias import HashF, Integer
from ecsig.exceptions import EcsigValueError
from ecsig.utils import int_from_bits, int_from_integer, int_repr


def int_from_scalar(k: Integer, n: int, label: str = "private key") -> int:
    "Return a scalar in [1, n-1], raising an Error if out of range."
    k = int_from_integer(k)
    if not 0 < k < n:
        raise EcsigValueError(f"{label} not in 1..n-1: {int_repr(k)}")
    return k


def rfc6979_nonces_(c: int, q: int, n: int, hf: HashF) -> Iterator[int]:
    # https://tools.ietf.org/html/rfc6979 section 3.2

    nlen = n.bit_length()
    n_size = (nlen + 7) // 8
    # convert the private key q to an octet sequence of size n_size
    q_bytes = q.to_bytes(n_size, byteorder="big", signed=False)
    # truncate and/or expand c: encoding size is driven by n_size
    c_bytes = c.to_bytes(n_size, byteorder="big", signed=False)
    bprvbm = q_bytes + c_bytes

    hf_size = hf().digest_size
    v = b"\x01" * hf_size  # 3.2.b
    k = b"\x00" * hf_size  # 3.2.c

    k = hmac.new(k, v + b"\x00" + bprvbm, hf).digest()  # 3.2.d
    v = hmac.new(k, v, hf).digest()  # 3.2.e
    k = hmac.new(k, v + b"\x01" + bprvbm, hf).digest()  # 3.2.f
    v = hmac.new(k, v, hf).digest()  # 3.2.g

    while True:  # 3.2.h
        t = b""  # 3.2.h.1
        while len(t) < n_size:  # 3.2.h.2
            v = hmac.new(k, v, hf).digest()
            t += v
        # Taking a uniformly random integer modulo n would produce
        # a biased result: out of range candidates are discarded
        nonce = int_from_bits(t, nlen)  # candidate nonce  # 3.2.h.3
        if 0 < nonce < n:  # acceptable values for nonce
            # the caller asks for a new candidate
            # only if this one produced an invalid signature
            yield nonce
        k = hmac.new(k, v + b"\x00", hf).digest()
        v = hmac.new(k, v, hf).digest()


class RFC6979:
    "Deterministic nonce source following RFC6979 section 3.2."

    def __init__(self, hf: HashF = hashlib.sha256) -> None:
        self.hf = hf

    def __call__(self, c: int, q: int, n: int) -> Iterator[int]:
        return rfc6979_nonces_(c, q, n, self.hf)

    def __repr__(self) -> str:
        return f"RFC6979({self.hf().name})"


def rfc6979_nonce(c: int, q: int, n: int, hf: HashF = hashlib.sha256) -> int:
    """Return the first RFC6979 deterministic nonce.

    c is the challenge (message digest reduced mod n),
    q is the private key.
    """
    q = int_from_scalar(q, n)
    return next(rfc6979_nonces_(c % n, q, n, hf))


def random_nonces(c: int, q: int, n: int) -> Iterator[int]:
    "Yield uniformly random nonces in [1, n-1] from a secure source."
    # pylint: disable=unused-argument
    while True:
        yield 1 + secrets.randbelow(n - 1)


class FixedNonce:
    """Single, caller-supplied nonce.

    No retry is possible: a degenerate signature
    makes the signing operation fail.
    """

    def __init__(self, k: Integer) -> None:
        self.k = int_from_integer(k)

    def __call__(self, c: int, q: int, n: int) -> Iterator[int]:
        # pylint: disable=unused-argument
        yield int_from_scalar(self.k, n, "ephemeral key")
