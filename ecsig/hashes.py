#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

A message digest maps a message to an integer in [0, n-1],
n being the group order: it is the `hash` capability
injected into the signature scheme.
"""

import hashlib

from ecsig.alias import HashF, Octets, String
from ecsig.exceptions import EcsigTypeError
from ecsig.utils import bytes_from_octets, int_from_bits


def reduce_to_hlen(msg: String, hf: HashF = hashlib.sha256) -> bytes:
    "Return the hf digest of a text string or bytes message."
    if isinstance(msg, str):
        msg = msg.encode()
    # Step 4 of SEC 1 v.2 section 4.1.3
    h = hf()
    h.update(msg)
    return bytes(h.digest())


def challenge_(msg_hash: Octets, n: int, hf: HashF = hashlib.sha256) -> int:
    "Return the leftmost n.bit_length() bits of msg_hash, reduced mod n."
    # the message msg_hash: a hf_len array
    hf_len = hf().digest_size
    msg_hash = bytes_from_octets(msg_hash, hf_len)

    # leftmost nlen bits %= n
    return int_from_bits(msg_hash, n.bit_length()) % n


class HashDigest:
    """Message digest based on a cryptographic hash function.

    SEC 1 v.2 section 4.1.3, steps 4 and 5:
    the message is hashed with hf, the leftmost nlen bits of
    the hash digest are converted to an integer, then reduced mod n.
    """

    def __init__(self, hf: HashF = hashlib.sha256) -> None:
        self.hf = hf

    def __call__(self, msg: String, n: int) -> int:
        if not isinstance(msg, (bytes, str)):
            raise EcsigTypeError(f"message must be bytes or str, not {type(msg)}")
        return challenge_(reduce_to_hlen(msg, self.hf), n, self.hf)

    def __repr__(self) -> str:
        return f"HashDigest({self.hf().name})"


def identity_digest(msg: int, n: int) -> int:
    """Return the integer message itself, reduced mod n.

    This is a didactical placeholder only:
    it is neither preimage nor collision resistant,
    and must never be used to sign real messages.
    """
    if not isinstance(msg, int):
        raise EcsigTypeError(f"message must be an int, not {type(msg)}")
    return msg % n
