#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module ecsig.ecc."""

from ecsig.ecc.curve import Curve, double_mult, mult
from ecsig.ecc.curve_group import CurveGroup, mult_aff
from ecsig.ecc.curve_group_f import find_all_points, find_subgroup_points
from ecsig.ecc.curves import CURVES, LOW_CARD_CURVES, secp256k1
from ecsig.ecc.dsa import ECDSA, Sig, gen_keys
from ecsig.ecc.number_theory import gcd, mod_add, mod_div, mod_inv, mod_mul, xgcd

__all__ = [
    "Curve",
    "double_mult",
    "mult",
    "CurveGroup",
    "mult_aff",
    "find_all_points",
    "find_subgroup_points",
    "CURVES",
    "LOW_CARD_CURVES",
    "secp256k1",
    "ECDSA",
    "Sig",
    "gen_keys",
    "gcd",
    "mod_add",
    "mod_div",
    "mod_inv",
    "mod_mul",
    "xgcd",
]
