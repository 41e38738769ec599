#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Implementation according to SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

The protocol is parameterized by a cyclic group of prime order n
(see ecsig.alias.CyclicGroup), a message digest, and a nonce source.
The digest defaults to SHA-256 and the nonce source to RFC6979,
while the group has no default: it has to be passed explicitly.

All modular arithmetic is delegated to ecsig.ecc.number_theory.
"""

import logging
import secrets
from typing import Any, NamedTuple, Optional, Tuple

from ecsig.alias import CyclicGroup, DigestF, Integer, NonceF, Point
from ecsig.ecc.nonce import RFC6979, FixedNonce, int_from_scalar
from ecsig.ecc.number_theory import mod_add, mod_div, mod_mul
from ecsig.exceptions import EcsigRuntimeError, EcsigValueError
from ecsig.hashes import HashDigest
from ecsig.utils import int_from_integer, int_repr

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 8


class Sig(NamedTuple):
    """ECDSA signature (r, s).

    Both r and s are scalars in [1, n-1], n being the group order.
    """

    r: int
    s: int


class ECDSA:
    """ECDSA over an explicitly provided cyclic group.

    The instance only holds read-only configuration:
    the group, the message digest, the nonce source,
    and the maximum number of nonce candidates tried when signing.
    All methods are pure functions of their arguments,
    so an instance can be shared between threads.
    """

    def __init__(
        self,
        group: CyclicGroup,
        digest: Optional[DigestF] = None,
        nonce_source: Optional[NonceF] = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:

        n = group.order()
        if n < 2:
            raise EcsigValueError(f"invalid group order: {n}")
        if max_attempts < 1:
            raise EcsigValueError(f"invalid max_attempts: {max_attempts}")
        self.group = group
        self.digest = HashDigest() if digest is None else digest
        self.nonce_source = RFC6979() if nonce_source is None else nonce_source
        self.max_attempts = max_attempts

    def __repr__(self) -> str:
        return f"ECDSA({self.group!r}, {self.digest!r}, {self.nonce_source!r})"

    def pubkey(self, private: Integer) -> Point:
        "Return the public key, i.e. private*G."
        q = int_from_scalar(private, self.group.order())
        return self.group.scalar_basemul(q)

    def hash(self, message: Any) -> int:
        "Return the message digest as integer in [0, n-1]."
        n = self.group.order()
        # reduce anyway: the injected digest might not
        return self.digest(message, n) % n

    def _sign_(self, z: int, q: int, nonce: int, lower_s: bool = False) -> Sig:
        # Private function for testing purposes: it allows to explore all
        # possible value of the digest z (for low-cardinality groups).
        # It assumes that z is in [0, n-1], while q and nonce are in [1, n-1]
        # Steps numbering follows SEC 1 v.2 section 4.1.3
        n = self.group.order()

        # x-coordinate of the nonce point, reduced mod n to be a scalar
        r = self.group.scalar_basemul(nonce).x % n  # 1, 2, 3
        if r == 0:  # r≠0 required as it multiplies the public key
            raise EcsigRuntimeError("failed to sign: r = 0")

        # s = (z + r*q)/nonce
        k_inv = mod_div(1, nonce, n)
        s = mod_mul(mod_add(z, mod_mul(r, q, n), n), k_inv, n)  # 6
        if s == 0:  # s≠0 required as verify will need the inverse of s
            raise EcsigRuntimeError("failed to sign: s = 0")

        # canonical 'low-s' encoding
        # it removes the (r, n-s) signature malleability
        if lower_s and 2 * s > n:
            s = n - s

        return Sig(r, s)

    def sign(
        self,
        message: Any,
        private: Integer,
        nonce: Optional[Integer] = None,
        lower_s: bool = False,
    ) -> Sig:
        """Sign message with the private key.

        If the nonce is provided, it is the only candidate:
        a degenerate signature (r = 0 or s = 0) makes the signing fail,
        a new nonce has to be chosen by the caller.
        Otherwise nonce candidates are drawn from the nonce source,
        up to max_attempts, as long as they produce degenerate signatures.

        A nonce must never be reused with the same private key
        for different messages: it would reveal the private key.
        """
        n = self.group.order()
        q = int_from_scalar(private, n)
        z = self.hash(message)  # 4, 5

        nonce_source = self.nonce_source if nonce is None else FixedNonce(nonce)
        candidates = nonce_source(z, q, n)
        for attempt in range(1, self.max_attempts + 1):
            try:
                k = next(candidates)
            except StopIteration:
                break
            try:
                return self._sign_(z, q, k, lower_s)
            except EcsigRuntimeError as e:
                logger.debug("attempt %d, discarded nonce candidate: %s", attempt, e)
                if nonce is not None:
                    raise

        logger.warning("no valid signature after %d attempts", self.max_attempts)
        err_msg = f"failed to sign: no valid nonce in {self.max_attempts} attempts"
        raise EcsigRuntimeError(err_msg)

    def _assert_as_valid_(self, z: int, Q: Point, r: int, s: int) -> None:
        # Private function for test/dev purposes
        # Steps numbering follows SEC 1 v.2 section 4.1.4
        n = self.group.order()

        s_inv = mod_div(1, s, n)
        # (z/s)*G
        p1 = self.group.scalar_basemul(mod_mul(z, s_inv, n))  # 4, 5
        # (r/s)*Q
        p2 = self.group.scalar_mul(Q, mod_mul(r, s_inv, n))
        K = self.group.scalar_add(p1, p2)

        # Fail if infinite(K).
        if K.y == 0:  # 5
            raise EcsigRuntimeError("invalid (INF) key")

        # Fail if r ≠ x_K %n.
        if r != K.x % n:  # 6, 7, 8
            raise EcsigRuntimeError("signature verification failed")

    def _check_domain(self, pubkey: Point, r: int, s: int) -> Point:
        n = self.group.order()
        # r is a scalar, fail if r is not in [1, n-1]
        if not 0 < r < n:
            raise EcsigValueError(f"scalar r not in 1..n-1: {int_repr(r)}")
        # s is a scalar, fail if s is not in [1, n-1]
        if not 0 < s < n:
            raise EcsigValueError(f"scalar s not in 1..n-1: {int_repr(s)}")

        if len(pubkey) != 2:
            raise EcsigValueError("not a valid public key: not a point")
        Q = Point(*pubkey)
        if Q.y == 0:
            raise EcsigValueError("not a valid public key: INF")
        is_on_curve = getattr(self.group, "is_on_curve", None)
        if is_on_curve is not None and not is_on_curve(Q):
            raise EcsigValueError("not a valid public key: not on curve")
        return Q

    def assert_as_valid(self, message: Any, pubkey: Point, r: Integer, s: Integer) -> None:
        """Raise an Error if the signature is not valid.

        EcsigValueError is raised for out of domain inputs,
        EcsigRuntimeError for a failed verification.
        """
        r = int_from_integer(r)
        s = int_from_integer(s)
        Q = self._check_domain(pubkey, r, s)
        z = self.hash(message)  # 2, 3
        self._assert_as_valid_(z, Q, r, s)

    def verify(self, message: Any, pubkey: Point, r: Integer, s: Integer) -> bool:
        """ECDSA signature verification (SEC 1 v.2 section 4.1.4).

        Return False if the signature does not match;
        out of domain inputs (e.g. s = 0) are not a mismatch:
        they raise EcsigValueError.
        """
        try:
            self.assert_as_valid(message, pubkey, r, s)
        except EcsigRuntimeError:
            return False
        return True

    def crack_prv_key(
        self, msg1: Any, sig1: Tuple[int, int], msg2: Any, sig2: Tuple[int, int]
    ) -> Tuple[int, int]:
        """Return (private key, nonce) from two signatures sharing the nonce.

        Reusing the nonce for different messages
        leaks the private key:
        s1 - s2 = (z1 - z2)/k, hence k, hence q.
        """
        sig1 = Sig(*sig1)
        sig2 = Sig(*sig2)
        if sig1.r != sig2.r:
            raise EcsigValueError("not the same r in signatures")
        if sig1.s == sig2.s:
            raise EcsigValueError("identical signatures")

        n = self.group.order()
        z_1 = self.hash(msg1)
        z_2 = self.hash(msg2)

        nonce = mod_div(z_1 - z_2, sig1.s - sig2.s, n)
        q = mod_div(sig2.s * nonce - z_2, sig1.r, n)
        return q, nonce


def gen_keys(group: CyclicGroup, private: Optional[Integer] = None) -> Tuple[int, Point]:
    """Return a private/public (int, Point) key-pair.

    The private key is random in [1, n-1] if not provided.
    """
    n = group.order()
    if private is None:
        q = 1 + secrets.randbelow(n - 1)
    else:
        q = int_from_scalar(private, n)
    return q, group.scalar_basemul(q)

