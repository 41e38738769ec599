#!/usr/bin/env python3

# Copyright (C) The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurveGroup explorer functions.

These functions are meant to explore low-cardinality CurveGroup,
for didactical (and fun) reason only.
"""

from typing import Dict, List

from ecsig.alias import INF, Point
from ecsig.ecc.curve_group import CurveGroup
from ecsig.exceptions import EcsigValueError


def find_all_points(ec: CurveGroup) -> List[Point]:
    """Attempt to find all group points, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if ec.p > 10000:
        err_msg = f"p is too big to count all group points: {ec.p}"
        raise EcsigValueError(err_msg)

    roots: Dict[int, List[int]] = {}
    for y in range(1, ec.p):
        roots.setdefault(y * y % ec.p, []).append(y)

    points: List[Point] = [INF]
    for x in range(ec.p):
        # pylint: disable=protected-access
        points.extend(Point(x, y) for y in roots.get(ec._y2(x), []))

    return points


def find_subgroup_points(ec: CurveGroup, G: Point) -> List[Point]:
    """Attempt to count all G-generated subgroup points, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if ec.p > 10000:
        err_msg = f"p is too big to count all subgroup points: {ec.p}"
        raise EcsigValueError(err_msg)

    points: List[Point] = [Point(*G)]
    while points[-1] != INF:
        Q = ec.add(points[-1], G)
        points.append(Q)

    return points
