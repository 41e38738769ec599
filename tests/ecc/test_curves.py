#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecsig.ecc.curves` module."

import pytest

from ecsig.ecc import secp256k1 as secp256k1_from_package
from ecsig.ecc.curves import CURVES, LOW_CARD_CURVES, curve_from_name, secp256k1
from ecsig.exceptions import EcsigValueError


def test_registry() -> None:
    assert sorted(CURVES) == ["secp160r1", "secp256k1", "secp256r1"]
    assert len(LOW_CARD_CURVES) == 8
    assert not set(CURVES) & set(LOW_CARD_CURVES)

    for ec_name, ec in {**CURVES, **LOW_CARD_CURVES}.items():
        assert ec.name == ec_name
        assert curve_from_name(ec_name) is ec

    assert secp256k1 is CURVES["secp256k1"]
    assert secp256k1_from_package is secp256k1


def test_sec_curves() -> None:
    for ec in CURVES.values():
        assert ec.cofactor == 1
        assert ec.n != ec.p
        assert ec.is_on_curve(ec.G)

    assert CURVES["secp160r1"].nlen == 161
    assert CURVES["secp160r1"].n_size == 21
    assert secp256k1.nlen == 256
    assert secp256k1.n_size == 32
    assert secp256k1.p == 2**256 - 2**32 - 977


def test_low_card_curves() -> None:
    for ec_name, ec in LOW_CARD_CURVES.items():
        # the name spells out p and n
        assert ec_name == f"ec{ec.p}_{ec.n}"
        assert ec.p < 100
        assert ec.cofactor in (1, 2)

    assert LOW_CARD_CURVES["ec17_13"].cofactor == 2
    assert LOW_CARD_CURVES["ec19_13"].cofactor == 2


def test_curve_from_name() -> None:
    assert curve_from_name(" SECP256K1 ") is secp256k1
    assert curve_from_name("EC23_31") is LOW_CARD_CURVES["ec23_31"]

    with pytest.raises(EcsigValueError, match="unknown curve: "):
        curve_from_name("secp256k2")
