# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

"""
Day counts, treasury bills and discounted bonds

Settlement and maturity are ``datetime.date`` or ``datetime.datetime``
instances. Prices, redemptions and face values are per $100.
"""
import math

from finlib.finutil import (
    day_count_basis_from,
    DayCountBasis,
    InvalidDateOrder,
    InvalidInput,
    SECONDS_PER_DAY,
    TermTooLong,
)
from finlib.lib.date_time import (
    as_datetime,
    elapsed_days,
    elapsed_seconds,
    is_leap_year,
)


def days_difference(date1, date2, basis=DayCountBasis.NASD):
    """Days from date1 to date2 counted with a day count convention

    :param date1: start date
    :param date2: end date
    :param basis: DayCountBasis
    :return: whole number of days
    """
    basis = day_count_basis_from(basis)
    date1 = as_datetime(date1)
    date2 = as_datetime(date2)
    y1, m1, d1 = date1.year, date1.month, date1.day
    y2, m2, d2 = date2.year, date2.month, date2.day

    if basis == DayCountBasis.NASD:
        if d2 == 31 and d1 in (30, 31):
            d2 = 30
        if d1 == 31:
            d1 = 30
        return (y2 - y1) * 360 + (m2 - m1) * 30 + d2 - d1

    elif basis == DayCountBasis.EUROPEAN:
        d1 = min(d1, 30)
        d2 = min(d2, 30)
        return (y2 - y1) * 360 + (m2 - m1) * 30 + d2 - d1

    else:
        # int() truncates toward zero for spans in either direction
        return int(elapsed_seconds(date1, date2) / SECONDS_PER_DAY)


def days_per_year(year, basis=DayCountBasis.NASD):
    basis = day_count_basis_from(basis)
    if basis == DayCountBasis.ACTUAL_ACTUAL:
        return 366 if is_leap_year(year) else 365
    elif basis == DayCountBasis.ACTUAL_365:
        return 365
    else:
        return 360


def _check_dates(settlement, maturity):
    settlement = as_datetime(settlement)
    maturity = as_datetime(maturity)
    if settlement >= maturity:
        raise InvalidDateOrder(
            f'Settlement {settlement} must be before maturity {maturity}')
    return settlement, maturity


def _bill_days(settlement, maturity):
    settlement, maturity = _check_dates(settlement, maturity)
    days = elapsed_days(settlement, maturity)
    if days > 360:
        raise TermTooLong(
            "Maturity can't be more than one year after settlement")
    return days


def tbill_yield(settlement, maturity, price):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   tbillyield-function-6d381232-f4b0-4cd5-8e97-45b9c03468ba
    days = _bill_days(settlement, maturity)
    if price <= 0:
        raise InvalidInput(f'Price must be positive, not {price}')
    return (100 - price) * 360 / price / days


def tbill_price(settlement, maturity, discount):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   tbillprice-function-eacca992-c29d-425a-9eb8-0513fe6035a2
    days = _bill_days(settlement, maturity)
    if discount <= 0:
        raise InvalidInput(f'Discount must be positive, not {discount}')
    return 100 * (1 - discount * days / 360)


def tbill_equivalent_yield(settlement, maturity, discount):
    """Bond equivalent yield of a treasury bill

    Up to half a year this is the discount restated as an actual/365
    simple rate; beyond that the yield is the root of the quadratic for
    a bond paying one coupon before maturity.
    """
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   tbilleq-function-2ab72d90-9b4d-4efe-9fc2-0f81f2c19c8c
    settlement, maturity = _check_dates(settlement, maturity)
    if discount <= 0:
        raise InvalidInput(f'Discount must be positive, not {discount}')
    days = days_difference(settlement, maturity, DayCountBasis.ACTUAL_365)

    if days <= 182:
        return 365 * discount / (360 - discount * days)

    elif days == 366 and (
            settlement.month <= 2 and is_leap_year(settlement.year) or
            settlement.month > 2 and is_leap_year(maturity.year)):
        # a full year spanning a leap day
        return 2 * (math.sqrt(1 - discount * 366 / (discount * 366 - 360)) - 1)

    elif days > 365:
        raise TermTooLong(
            "Maturity can't be more than one year after settlement")

    return (-days + math.sqrt(
        days ** 2 - (2 * days - 365) * discount * days * 365
        / (discount * days - 360))) / (days - 365 // 2)


def discount_rate(settlement, maturity, price, redemption,
                  basis=DayCountBasis.NASD):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   disc-function-71fce9f3-3f05-4acf-a5a3-eac6ef4daa53
    settlement, maturity = _check_dates(settlement, maturity)
    if price <= 0 or redemption <= 0:
        raise InvalidInput(
            f'Price and redemption must be positive, not {price} '
            f'and {redemption}')
    year_days = days_per_year(settlement.year, basis)
    days = days_difference(settlement, maturity, basis)
    if days <= 0:
        raise InvalidDateOrder(
            f'Settlement {settlement} and maturity {maturity} are less than '
            f'a day apart under basis {DayCountBasis(basis).name}')
    return (redemption - price) * year_days / redemption / days


def price_discount(settlement, maturity, discount, redemption,
                   basis=DayCountBasis.NASD):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   pricedisc-function-d06ad7c1-380e-4be7-9fd9-75e3079acfd3
    settlement, maturity = _check_dates(settlement, maturity)
    if discount <= 0 or redemption <= 0:
        raise InvalidInput(
            f'Discount and redemption must be positive, not {discount} '
            f'and {redemption}')
    year_days = days_per_year(settlement.year, basis)
    days = days_difference(settlement, maturity, basis)
    return redemption - discount * redemption * days / year_days
