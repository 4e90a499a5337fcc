# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html


import math

import pytest

from finlib.finutil import InvalidInput
from finlib.lib.depreciation import (
    depreciation_fixed_declining,
    depreciation_straight_line,
    depreciation_syd,
)


@pytest.mark.parametrize(
    'period, expected',
    (
        (1, 186083.333333),
        (2, 259639.416667),
        (3, 176814.442750),
        (4, 120410.635513),
        (5, 81999.642784),
        (6, 55841.756736),
        (7, 15845.098474),
    )
)
def test_depreciation_fixed_declining(period, expected):
    assert math.isclose(
        depreciation_fixed_declining(1000000, 100000, 6, period, 7),
        expected, abs_tol=1e-6)


def test_depreciation_fixed_declining_full_first_year():
    # rate rounds to 0.319
    assert math.isclose(
        depreciation_fixed_declining(1000000, 100000, 6, 1), 319000)
    assert math.isclose(
        depreciation_fixed_declining(1000000, 100000, 6, 2), 217239)


@pytest.mark.parametrize(
    'cost, salvage, life, period, month',
    (
        (0, 100000, 6, 1, 7),
        (-1000000, 100000, 6, 1, 7),
        (1000000, -1, 6, 1, 7),
        (1000000, 100000, 0, 1, 7),
        (1000000, 100000, 6, 0, 7),
        (1000000, 100000, 6, 8, 7),
        (1000000, 100000, 6, 7, 12),
        (1000000, 100000, 6, 1, 0),
        (1000000, 100000, 6, 1, 13),
    )
)
def test_depreciation_fixed_declining_errors(cost, salvage, life, period, month):
    with pytest.raises(InvalidInput):
        depreciation_fixed_declining(cost, salvage, life, period, month)


def test_depreciation_straight_line():
    assert depreciation_straight_line(30000, 7500, 10) == 2250


@pytest.mark.parametrize(
    'cost, salvage, life',
    (
        (-30000, 7500, 10),
        (30000, 7500, 0),
        (30000, 7500, -10),
    )
)
def test_depreciation_straight_line_errors(cost, salvage, life):
    with pytest.raises(InvalidInput):
        depreciation_straight_line(cost, salvage, life)


@pytest.mark.parametrize(
    'period, expected',
    (
        (1, 4090.909091),
        (10, 409.090909),
    )
)
def test_depreciation_syd(period, expected):
    assert math.isclose(
        depreciation_syd(30000, 7500, 10, period), expected, abs_tol=1e-6)


def test_depreciation_syd_totals_depreciable_amount():
    assert math.isclose(
        sum(depreciation_syd(30000, 7500, 10, p) for p in range(1, 11)),
        22500)


@pytest.mark.parametrize(
    'life, period',
    (
        (0, 1),
        (10, 0),
        (10, 11),
    )
)
def test_depreciation_syd_errors(life, period):
    with pytest.raises(InvalidInput):
        depreciation_syd(30000, 7500, life, period)
