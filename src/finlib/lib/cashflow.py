# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

"""
Cash flow analysis: net present value and internal rates of return
"""
import numpy as np
import numpy_financial as npf

from finlib.finutil import (
    as_cash_flow,
    DegenerateCashFlow,
    has_sign_change,
    InsufficientPeriods,
    InvalidInput,
    LengthMismatch,
)
from finlib.lib.date_time import elapsed_days
from finlib.lib.solver import newton


DAYS_PER_YEAR = 365


def _check_sign_change(values):
    if not has_sign_change(values):
        raise DegenerateCashFlow(
            'The cash flow must contain at least one positive value '
            'and one negative value')


def _period_numbers(values):
    return np.arange(1, len(values) + 1, dtype=np.float64)


def net_present_value(rate, values):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   NPV-function-8672CB67-2576-4D07-B67B-AC28ACF2A568
    values = as_cash_flow(values)
    if rate == -1:
        raise ZeroDivisionError('Discount factor is zero when the rate is -1')
    return float(np.sum(values * (1 + rate) ** -_period_numbers(values)))


def _npv_equation(values):
    """NPV and its derivative as functions of the rate"""
    values = as_cash_flow(values)
    period_numbers = _period_numbers(values)

    def func(rate):
        with np.errstate(all='ignore'):
            return float(np.sum(values * (1 + rate) ** -period_numbers))

    def derivative(rate):
        with np.errstate(all='ignore'):
            return float(np.sum(
                -period_numbers * values * (1 + rate) ** -(period_numbers + 1)))

    return func, derivative


def internal_rate_of_return(values, guess=0.1):
    """Rate at which the net present value of the cash flow is zero

    :param values: cash flow, one value per period
    :param guess: starting point for Newton-Raphson
    :return: the internal rate of return
    :raises DegenerateCashFlow: the values do not change sign
    :raises DidNotConverge: no rate found from this guess
    """
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   irr-function-64925eaa-9988-495b-b290-3ad0c163c1bc
    values = as_cash_flow(values)
    _check_sign_change(values)
    func, derivative = _npv_equation(values)
    return newton(guess, func, derivative)


def modified_internal_rate_of_return(values, finance_rate, reinvest_rate):
    """Internal rate of return with separate financing and reinvestment rates

    Negative flows are discounted at the finance rate and positive flows
    are compounded at the reinvestment rate.
    """
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   mirr-function-b020f038-7492-4fb4-93c1-35c345b53524
    values = as_cash_flow(values)
    _check_sign_change(values)
    if len(values) < 2:
        raise InsufficientPeriods(
            'The cash flow must span at least two periods')
    if finance_rate <= -1 or reinvest_rate <= -1:
        raise InvalidInput(
            f'Finance and reinvestment rates must be greater than -1, '
            f'not {finance_rate} and {reinvest_rate}')

    return float(npf.mirr(values, finance_rate, reinvest_rate))


def _scheduled_flows(values, dates):
    values = as_cash_flow(values)
    if len(values) != len(dates):
        raise LengthMismatch(
            f'Values and dates must have the same length, '
            f'not {len(values)} and {len(dates)}')
    years = np.array([elapsed_days(dates[0], a_date) for a_date in dates],
                     dtype=np.float64) / DAYS_PER_YEAR
    return values, years


def scheduled_net_present_value(rate, values, dates):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   xnpv-function-1b42bbf6-370f-4532-a0eb-d67c16b664b7
    if rate <= -1:
        raise InvalidInput(f'Rate must be greater than -1, not {rate}')
    dates = tuple(dates)
    values, years = _scheduled_flows(values, dates)
    return float(np.dot(values, (1 + rate) ** -years))


def scheduled_internal_rate_of_return(values, dates, guess=0.1):
    """Internal rate of return for cash flows on arbitrary dates

    Each value is discounted by the actual days elapsed since the first
    date, in years of 365 days.

    :param values: cash flow amounts
    :param dates: date of each amount, the first is the valuation date
    :param guess: starting point for Newton-Raphson
    :return: the annual internal rate of return
    :raises LengthMismatch: values and dates differ in length
    :raises DegenerateCashFlow: the values do not change sign
    :raises DidNotConverge: no rate found from this guess
    """
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   xirr-function-de1242ec-6477-445b-b11b-a303ad9adc9d
    dates = tuple(dates)
    values, years = _scheduled_flows(values, dates)
    _check_sign_change(values)

    def func(rate):
        with np.errstate(all='ignore'):
            return float(np.dot(values, (1 + rate) ** -years))

    def derivative(rate):
        with np.errstate(all='ignore'):
            return float(np.dot(-years * values, (1 + rate) ** -(years + 1)))

    return newton(guess, func, derivative)
