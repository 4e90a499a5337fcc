# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

"""
Asset depreciation schedules
"""
from decimal import Decimal, ROUND_HALF_UP

from finlib.finutil import InvalidInput


def _round_half_up(number, num_digits):
    return float(Decimal(repr(number)).quantize(
        Decimal(repr(pow(10, -num_digits))),
        rounding=ROUND_HALF_UP
    ))


def depreciation_fixed_declining(cost, salvage, life, period, month=12):
    """Depreciation for one period using the fixed-declining balance method

    The rate is rounded to three decimal places. The first year is
    prorated to ``month`` months, and when that leaves a partial year
    at the end it is depreciated as period ``life + 1``.
    """
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   db-function-354e7d28-5f93-4ff1-8a52-eb4ee549d9d7
    if cost <= 0 or life <= 0 or salvage < 0:
        raise InvalidInput(
            f'Cost and life must be positive and salvage non-negative, not '
            f'cost={cost}, salvage={salvage}, life={life}')
    if not 1 <= month <= 12:
        raise InvalidInput(f'Month must be between 1 and 12, not {month}')
    last_period = life if month == 12 else life + 1
    if not 1 <= period <= last_period:
        raise InvalidInput(
            f'Period must be between 1 and {last_period}, not {period}')

    rate = _round_half_up(1 - (salvage / cost) ** (1 / life), 3)

    accumulated = 0
    depreciation = 0
    for i in range(1, int(period) + 1):
        if i == 1:
            depreciation = cost * rate * month / 12
        elif i == life + 1:
            depreciation = (cost - accumulated) * rate * (12 - month) / 12
        else:
            depreciation = (cost - accumulated) * rate
        accumulated += depreciation
    return depreciation


def depreciation_straight_line(cost, salvage, life):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   sln-function-cdb666e5-c1c6-40a7-806a-e695edc2f1c8
    if cost < 0 or life <= 0:
        raise InvalidInput(
            f'Cost must not be negative and life must be positive, not '
            f'cost={cost}, life={life}')
    return (cost - salvage) / life


def depreciation_syd(cost, salvage, life, period):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   syd-function-069f8106-b60b-4ca2-98e0-2a0f206bdb27
    if life <= 0:
        raise InvalidInput(f'Life must be positive, not {life}')
    if not 1 <= period <= life:
        raise InvalidInput(f'Period must be between 1 and {life}, not {period}')
    return (cost - salvage) * (life - period + 1) * 2 / life / (life + 1)
