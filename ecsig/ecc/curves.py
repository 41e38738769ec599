#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curves.

* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
* SEC 2 v.1 curves, removed from SEC 2 v.2 as insecure ones
  http://www.secg.org/SEC2-Ver-1.0.pdf

plus very low cardinality curves,
for didactical purposes and exhaustive testing only.

There is no default curve: each signature scheme instance
is built over the curve explicitly chosen by the caller.
"""

from typing import Dict

from ecsig.ecc.curve import Curve
from ecsig.exceptions import EcsigValueError

# (p, a, b, (Gx, Gy), n, cofactor)
_SEC_PARAMS = {
    # SEC 2 v.1, used by the GEC 2 test vectors
    "secp160r1": (
        2**160 - 2**31 - 1,
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF7FFFFFFC,
        0x1C97BEFC54BD7A8B65ACF89F81D4D4ADC565FA45,
        (
            0x4A96B5688EF573284664698968C38BB913CBFC82,
            0x23A628553168947D59DCC912042351377AC5FB32,
        ),
        0x0100000000000000000001F4C8F927AED3CA752257,
        1,
    ),
    "secp256k1": (
        2**256 - 2**32 - 977,
        0,
        7,
        (
            0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
            0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
        ),
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
        1,
    ),
    "secp256r1": (
        2**256 - 2**224 + 2**192 + 2**96 - 1,
        0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC,
        0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
        (
            0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
            0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
        ),
        0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
        1,
    ),
}

CURVES: Dict[str, Curve] = {
    ec_name: Curve(*params, name=ec_name)  # type: ignore
    for ec_name, params in _SEC_PARAMS.items()
}

secp256k1 = CURVES["secp256k1"]

# very low cardinality curves: the MOV weakness check is skipped
_LOW_CARD_PARAMS = {
    # 13 % 4 = 1; 13 % 8 = 5
    "ec13_11": (13, 7, 6, (1, 1), 11, 1),
    "ec13_19": (13, 0, 2, (1, 9), 19, 1),
    # 17 % 4 = 1; 17 % 8 = 1
    "ec17_13": (17, 6, 8, (0, 12), 13, 2),
    "ec17_23": (17, 3, 5, (1, 14), 23, 1),
    # 19 % 4 = 3; 19 % 8 = 3
    "ec19_13": (19, 0, 2, (4, 16), 13, 2),
    "ec19_23": (19, 2, 9, (0, 16), 23, 1),
    # 23 % 4 = 3; 23 % 8 = 7
    "ec23_19": (23, 9, 7, (5, 4), 19, 1),
    "ec23_31": (23, 5, 1, (0, 1), 31, 1),
}

LOW_CARD_CURVES: Dict[str, Curve] = {
    ec_name: Curve(*params, weakness_check=False, name=ec_name)  # type: ignore
    for ec_name, params in _LOW_CARD_PARAMS.items()
}


def curve_from_name(ec_name: str) -> Curve:
    "Return the named curve, looking into both registries."
    ec_name = ec_name.strip().lower()
    if ec_name in CURVES:
        return CURVES[ec_name]
    if ec_name in LOW_CARD_CURVES:
        return LOW_CARD_CURVES[ec_name]
    raise EcsigValueError(f"unknown curve: {ec_name}")
