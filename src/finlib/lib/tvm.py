# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

"""
Time value of money for annuities

Each function solves the annuity identity for one of its terms::

    pv * (1 + r)**n + pmt * (1 + r * type) * ((1 + r)**n - 1) / r + fv == 0

The rate can not be isolated algebraically, so ``rate`` solves for it
with Newton-Raphson.
"""
import numpy as np
import numpy_financial as npf

from finlib.finutil import (
    InvalidInput,
    payment_type_from,
    PaymentType,
)
from finlib.lib.solver import newton


def _check_periods(num_periods):
    if num_periods < 0:
        raise InvalidInput(
            f'Number of periods must be positive, not {num_periods}')


def _check_rate(rate):
    if rate <= -1:
        raise InvalidInput(f'Rate must be greater than -1, not {rate}')


def present_value(rate, num_periods, pmt, fv=0, payment_type=PaymentType.END):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   pv-function-23879d31-0e02-4321-be01-da16e8168cbd
    _check_periods(num_periods)
    payment_type = payment_type_from(payment_type)
    _check_rate(rate)

    # the unused branch of the zero rate case divides by zero
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(npf.pv(
            float(rate), num_periods, pmt, fv=fv, when=int(payment_type)))


def future_value(rate, num_periods, pmt, pv=0, payment_type=PaymentType.END):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   fv-function-2eef9f44-a084-4c61-bdd8-4fe4bb1b71b3
    _check_periods(num_periods)
    payment_type = payment_type_from(payment_type)
    _check_rate(rate)

    return float(npf.fv(
        float(rate), num_periods, pmt, pv, when=int(payment_type)))


def payment(rate, num_periods, pv, fv=0, payment_type=PaymentType.END):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   pmt-function-0214da64-9a63-4996-bc20-214433fa6441
    _check_periods(num_periods)
    payment_type = payment_type_from(payment_type)
    _check_rate(rate)
    if num_periods == 0:
        raise InvalidInput('Number of periods must be greater than zero')

    return float(npf.pmt(
        float(rate), num_periods, pv, fv=fv, when=int(payment_type)))


def periods(rate, pmt, pv, fv=0, payment_type=PaymentType.END):
    """Number of periods, solved with logarithms since n is an exponent"""
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   nper-function-240535b5-6653-4d2d-bfcf-b6a38151d815
    payment_type = payment_type_from(payment_type)
    _check_rate(rate)

    if rate != 0 and pmt == 0 and pv == 0:
        raise InvalidInput(
            "Payment and present value can't both be zero "
            "when the rate is not zero")
    if rate == 0 and pmt == 0:
        raise InvalidInput("Rate and payment can't both be zero")

    with np.errstate(all='ignore'):
        num_periods = float(npf.nper(
            float(rate), pmt, pv, fv=fv, when=int(payment_type)))
    if not np.isfinite(num_periods):
        # the logarithm of a non-positive ratio
        raise InvalidInput(
            f'No number of periods satisfies rate={rate}, pmt={pmt}, '
            f'pv={pv}, fv={fv}')
    return num_periods


def _annuity_equation(num_periods, pmt, pv, fv, payment_type):
    """The annuity identity and its derivative as functions of the rate"""

    def func(rate):
        compounded = (1 + rate) ** num_periods
        return (pv * compounded
                + pmt * (1 + rate * payment_type) * (compounded - 1) / rate
                + fv)

    def derivative(rate):
        compounded = (1 + rate) ** num_periods
        compounded_less_one = (1 + rate) ** (num_periods - 1)
        return (num_periods * pv * compounded_less_one
                + pmt * (payment_type * (compounded - 1) / rate
                         + (1 + rate * payment_type)
                         * (num_periods * rate * compounded_less_one
                            - compounded + 1) / rate ** 2))

    return func, derivative


def rate(num_periods, pmt, pv, fv=0, payment_type=PaymentType.END, guess=0.1):
    """Periodic interest rate of an annuity

    :param num_periods: number of payment periods
    :param pmt: payment made each period
    :param pv: present value
    :param fv: future value
    :param payment_type: PaymentType.END or PaymentType.BEGIN
    :param guess: starting point for Newton-Raphson
    :return: the rate per period
    :raises InvalidPaymentType: payment type is not END or BEGIN
    :raises DidNotConverge: no rate found from this guess
    """
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   rate-function-9f665657-4a7e-4bb7-a030-83fc59e748ce
    payment_type = payment_type_from(payment_type)
    func, derivative = _annuity_equation(
        num_periods, pmt, pv, fv, int(payment_type))
    return newton(guess, func, derivative)


def _interest_and_principal(rate, period, num_periods, pv, fv, payment_type):
    payment_type = payment_type_from(payment_type)
    if not 1 <= period <= num_periods:
        raise InvalidInput(
            f'Period must be between 1 and {num_periods}, not {period}')
    pmt = payment(rate, num_periods, pv, fv, payment_type)

    capital = pv
    interest = principal = 0
    for i in range(1, int(period) + 1):
        if payment_type == PaymentType.BEGIN and i == 1:
            # payments in advance owe no interest in the first period
            interest = 0
        else:
            interest = -capital * rate
        principal = pmt - interest
        capital += principal
    return interest, principal


def interest_payment(rate, period, num_periods, pv, fv=0,
                     payment_type=PaymentType.END):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   ipmt-function-5cce0ad6-8402-4a41-8d29-61a0b054cb6f
    return _interest_and_principal(
        rate, period, num_periods, pv, fv, payment_type)[0]


def principal_payment(rate, period, num_periods, pv, fv=0,
                      payment_type=PaymentType.END):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   ppmt-function-c370d9e3-7749-4ca4-beea-b06c6ac95e1b
    return _interest_and_principal(
        rate, period, num_periods, pv, fv, payment_type)[1]
