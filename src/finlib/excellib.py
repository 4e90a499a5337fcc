# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

"""
Python equivalents of excel financial functions

These take arguments the way a spreadsheet passes them (numeric strings,
booleans, serial number dates, ranges as tuples) and return excel error
values such as ``#NUM!`` instead of raising.
"""
from finlib.finutil import (
    coerce_to_number,
    DegenerateCashFlow,
    DIV0,
    ERROR_CODES,
    flatten,
    is_number,
    NUM_ERROR,
    PaymentType,
    VALUE_ERROR,
)
from finlib.lib import (
    bonds,
    cashflow,
    depreciation,
    rates,
    tvm,
)
from finlib.lib.date_time import coerce_to_datetime
from finlib.lib.function_helpers import (
    excel_helper,
    excel_math_func,
)


def _payment_type(type_):
    # any non zero type means payments at the beginning of the period
    return PaymentType.BEGIN if type_ else PaymentType.END


def _numerics(*args):
    # ignore non numeric cells
    args = tuple(flatten(args))
    error = next((x for x in args if isinstance(x, str) and x in ERROR_CODES), None)
    if error is not None:
        # return the first error in the list
        return error
    return tuple(x for x in args
                 if isinstance(x, (int, float)) and not isinstance(x, bool))


def _scheduled(values, dates):
    """Flatten and convert values and dates, or return an error value"""
    values = tuple(flatten(values, coerce=coerce_to_number))
    dates = tuple(coerce_to_datetime(d) for d in flatten(dates))
    error = next((x for x in values + dates if isinstance(x, str)), None)
    if error is not None:
        return error if error in ERROR_CODES else VALUE_ERROR
    if not all(is_number(v) and not isinstance(v, bool) for v in values):
        return VALUE_ERROR
    return values, dates


@excel_helper(cse_params=-1, number_params=-1, int_params=(3, 4))
def db(cost, salvage, life, period, month=12):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   db-function-354e7d28-5f93-4ff1-8a52-eb4ee549d9d7
    return depreciation.depreciation_fixed_declining(
        cost, salvage, life, period, month)


@excel_helper(cse_params=-1, number_params=(2, 3, 4), int_params=4,
              date_params=(0, 1))
def disc(settlement, maturity, pr, redemption, basis=0):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   disc-function-71fce9f3-3f05-4acf-a5a3-eac6ef4daa53
    return bonds.discount_rate(settlement, maturity, pr, redemption, basis)


@excel_helper(cse_params=-1, number_params=-1, int_params=1)
def effect(nominal_rate, npery):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   effect-function-910d4e4c-79e2-4009-95e6-507e04f11bc4
    if nominal_rate <= 0:
        return NUM_ERROR
    return rates.effective_rate(nominal_rate, npery)


@excel_math_func
def fv(rate, nper, pmt, pv=0, type_=0):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   fv-function-2eef9f44-a084-4c61-bdd8-4fe4bb1b71b3
    return tvm.future_value(rate, nper, pmt, pv, _payment_type(type_))


@excel_math_func
def ipmt(rate, per, nper, pv, fv=0, type_=0):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   ipmt-function-5cce0ad6-8402-4a41-8d29-61a0b054cb6f
    return tvm.interest_payment(rate, per, nper, pv, fv, _payment_type(type_))


@excel_helper(err_str_params=-1, number_params=1)
def irr(values, guess=0.1):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   irr-function-64925eaa-9988-495b-b290-3ad0c163c1bc
    values = _numerics(values)
    if isinstance(values, str):
        return values
    return cashflow.internal_rate_of_return(values, guess)


@excel_helper(err_str_params=-1, number_params=(1, 2))
def mirr(values, finance_rate, reinvest_rate):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   mirr-function-b020f038-7492-4fb4-93c1-35c345b53524
    values = _numerics(values)
    if isinstance(values, str):
        return values
    try:
        return cashflow.modified_internal_rate_of_return(
            values, finance_rate, reinvest_rate)
    except DegenerateCashFlow:
        return DIV0


@excel_helper(cse_params=-1, number_params=-1, int_params=1)
def nominal(effect_rate, npery):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   nominal-function-7f1ae29b-6b92-435e-b950-ad8b190ddd2b
    if effect_rate <= 0:
        return NUM_ERROR
    return rates.nominal_rate(effect_rate, npery)


@excel_math_func
def nper(rate, pmt, pv, fv=0, type_=0):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   nper-function-240535b5-6653-4d2d-bfcf-b6a38151d815
    return tvm.periods(rate, pmt, pv, fv, _payment_type(type_))


@excel_helper(err_str_params=0, number_params=0)
def npv(rate, *args):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   NPV-function-8672CB67-2576-4D07-B67B-AC28ACF2A568
    values = _numerics(*args)
    if isinstance(values, str):
        return values
    return cashflow.net_present_value(rate, values)


@excel_math_func
def pmt(rate, nper, pv, fv=0, type_=0):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   pmt-function-0214da64-9a63-4996-bc20-214433fa6441
    return tvm.payment(rate, nper, pv, fv, _payment_type(type_))


@excel_math_func
def ppmt(rate, per, nper, pv, fv=0, type_=0):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   ppmt-function-c370d9e3-7749-4ca4-beea-b06c6ac95e1b
    return tvm.principal_payment(rate, per, nper, pv, fv, _payment_type(type_))


@excel_helper(cse_params=-1, number_params=(2, 3, 4), int_params=4,
              date_params=(0, 1))
def pricedisc(settlement, maturity, discount, redemption, basis=0):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   pricedisc-function-d06ad7c1-380e-4be7-9fd9-75e3079acfd3
    return bonds.price_discount(settlement, maturity, discount, redemption, basis)


@excel_math_func
def pv(rate, nper, pmt, fv=0, type_=0):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   pv-function-23879d31-0e02-4321-be01-da16e8168cbd
    return tvm.present_value(rate, nper, pmt, fv, _payment_type(type_))


@excel_helper(cse_params=-1, number_params=-1, int_params=0)
def rate(nper, pmt, pv, fv=0, type_=0, guess=0.1):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   rate-function-9f665657-4a7e-4bb7-a030-83fc59e748ce
    return tvm.rate(nper, pmt, pv, fv, _payment_type(type_), guess)


@excel_math_func
def sln(cost, salvage, life):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   sln-function-cdb666e5-c1c6-40a7-806a-e695edc2f1c8
    return depreciation.depreciation_straight_line(cost, salvage, life)


@excel_math_func
def syd(cost, salvage, life, per):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   syd-function-069f8106-b60b-4ca2-98e0-2a0f206bdb27
    return depreciation.depreciation_syd(cost, salvage, life, per)


@excel_helper(cse_params=-1, number_params=2, date_params=(0, 1))
def tbilleq(settlement, maturity, discount):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   tbilleq-function-2ab72d90-9b4d-4efe-9fc2-0f81f2c19c8c
    return bonds.tbill_equivalent_yield(settlement, maturity, discount)


@excel_helper(cse_params=-1, number_params=2, date_params=(0, 1))
def tbillprice(settlement, maturity, discount):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   tbillprice-function-eacca992-c29d-425a-9eb8-0513fe6035a2
    return bonds.tbill_price(settlement, maturity, discount)


@excel_helper(cse_params=-1, number_params=2, date_params=(0, 1))
def tbillyield(settlement, maturity, pr):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   tbillyield-function-6d381232-f4b0-4cd5-8e97-45b9c03468ba
    return bonds.tbill_yield(settlement, maturity, pr)


@excel_helper(err_str_params=-1, number_params=2)
def xirr(values, dates, guess=0.1):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   xirr-function-de1242ec-6477-445b-b11b-a303ad9adc9d
    scheduled = _scheduled(values, dates)
    if isinstance(scheduled, str):
        return scheduled
    return cashflow.scheduled_internal_rate_of_return(*scheduled, guess)


@excel_helper(err_str_params=-1, number_params=0)
def xnpv(rate, values, dates):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   xnpv-function-1b42bbf6-370f-4532-a0eb-d67c16b664b7
    scheduled = _scheduled(values, dates)
    if isinstance(scheduled, str):
        return scheduled
    return cashflow.scheduled_net_present_value(rate, *scheduled)
