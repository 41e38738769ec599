#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Iterator, NamedTuple, Protocol, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
#
# use ecsig.utils.bytes_from_octets to convert Octets to bytes
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for string that can be
# converted to bytes using encode()
# e.g. a message to be signed
#    if isinstance(msg, str):
#        msg = msg.encode()
String = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Hash digest constructor: it may be any name suitable to hashlib.new()
HashF = Callable[[], Any]


class Point(NamedTuple):
    """Elliptic curve point in affine coordinates."""

    x: int
    y: int


# Note that the infinity point in affine coordinates is INF = (int, 0)
# (no affine point has y=0 coordinate in a group of prime order).
# It can be checked with 'INF[1] == 0'
# The x-coordinate is arbitrary: 5 is preferred
# because it is not a valid x-coordinate in secp256k1
INF = Point(5, 0)


class CyclicGroup(Protocol):
    """Cyclic group of prime order, as consumed by the ECDSA protocol."""

    def order(self) -> int:
        ...

    def scalar_basemul(self, k: int) -> Point:
        ...

    def scalar_mul(self, Q: Point, k: int) -> Point:
        ...

    def scalar_add(self, Q1: Point, Q2: Point) -> Point:
        ...


# Message digest: maps a message to an integer in [0, n-1],
# n being the group order
DigestF = Callable[[Any, int], int]

# Nonce source: given the challenge c, the private key q,
# and the group order n, it yields candidate nonces in [1, n-1]
NonceF = Callable[[int, int, int], Iterator[int]]
