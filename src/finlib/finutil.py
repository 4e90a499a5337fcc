# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

import collections
import enum

import numpy as np
from openpyxl.formula.tokenizer import Tokenizer


ERROR_CODES = frozenset(Tokenizer.ERROR_CODES)
DIV0 = '#DIV/0!'
EMPTY = '#EMPTY!'
VALUE_ERROR = '#VALUE!'
NUM_ERROR = '#NUM!'
NA_ERROR = '#N/A'

# Newton-Raphson bounds
MAX_ITERATIONS = 30
PRECISION = 1E-6

SECONDS_PER_DAY = 86400


class PaymentType(enum.IntEnum):
    """When annuity payments fall due within each period"""
    END = 0
    BEGIN = 1


class DayCountBasis(enum.IntEnum):
    """Day count conventions used by the bond and bill functions"""
    NASD = 0  # US (NASD) 30/360
    ACTUAL_ACTUAL = 1
    ACTUAL_360 = 2
    ACTUAL_365 = 3
    EUROPEAN = 4  # European 30/360


class FinlibException(Exception):
    """Base class for Finlib errors"""

    # the spreadsheet error value reported in place of this exception
    excel_error = NUM_ERROR


class InvalidInput(FinlibException, ValueError):
    """An argument is malformed or outside of the function's domain"""


class InvalidPaymentType(InvalidInput):
    """Payment type is neither PaymentType.END nor PaymentType.BEGIN"""


class InvalidDayCountBasis(InvalidInput):
    """Basis is not one of the DayCountBasis conventions"""


class DegenerateCashFlow(InvalidInput):
    """Cash flow has no sign change, so it has no meaningful rate"""


class LengthMismatch(InvalidInput):
    """Paired sequences are not of equal length"""


class InsufficientPeriods(InvalidInput):
    """Too few periods for the formula to be defined"""

    excel_error = DIV0


class InvalidDateOrder(InvalidInput):
    """Settlement is not strictly before maturity"""


class TermTooLong(InvalidInput):
    """Maturity is more than one year after settlement"""


class SolverError(FinlibException, ArithmeticError):
    """Base class for root finding failures"""


class DidNotConverge(SolverError):
    """Root finder did not reach the precision within the iteration cap"""

    def __init__(self, message, value=None, iterations=None):
        super().__init__(message)
        self.value = value
        self.iterations = iterations


class SingularDerivative(SolverError):
    """Derivative vanished, so the Newton step is undefined"""

    def __init__(self, message, value=None, iterations=None):
        super().__init__(message)
        self.value = value
        self.iterations = iterations


def payment_type_from(payment_type):
    """Validate a payment type, accepting the enum or its int value"""
    if isinstance(payment_type, bool) or not is_number(payment_type):
        raise InvalidPaymentType(
            f'Payment type must be PaymentType.END or PaymentType.BEGIN, '
            f'not {payment_type!r}')
    try:
        return PaymentType(payment_type)
    except ValueError as exc:
        raise InvalidPaymentType(
            f'Payment type must be PaymentType.END or PaymentType.BEGIN, '
            f'not {payment_type!r}') from exc


def day_count_basis_from(basis):
    """Validate a day count basis, accepting the enum or its int value"""
    if isinstance(basis, bool) or not is_number(basis):
        raise InvalidDayCountBasis(f'Unknown day count basis: {basis!r}')
    try:
        return DayCountBasis(basis)
    except ValueError as exc:
        raise InvalidDayCountBasis(
            f'Unknown day count basis: {basis!r}') from exc


def flatten(data, coerce=lambda x: x):
    """ flatten items, converting top level items as needed

    :param data: data to flatten
    :param coerce: apply coercion to top level, but not to sub ranges
    :return: flattened (coerced) items
    """
    if isinstance(data, collections.abc.Iterable) and not isinstance(
            data, (str, bytes)):
        for item in data:
            yield from flatten(item, coerce=coerce)
    else:
        yield coerce(data)


def is_array_arg(arg):
    return isinstance(arg, tuple) and bool(arg) and isinstance(arg[0], tuple)


def as_cash_flow(values):
    """Flatten a cash flow series into a float array"""
    return np.fromiter(flatten(values, coerce=float), dtype=np.float64)


def has_sign_change(values):
    """Does the series hold at least one positive and one negative value?"""
    values = np.asarray(values, dtype=np.float64)
    return bool(values.size) and bool(values.min() < 0 < values.max())


def is_number(value):
    try:
        float(value)
        return True
    except (ValueError, TypeError):
        return False


def coerce_to_number(value, convert_all=False):
    if value is None and convert_all:
        return 0

    if not isinstance(value, str):
        if isinstance(value, int):
            return int(value) if convert_all else value
        if is_number(value) and int(value) == float(value):
            return int(value)
        return value

    # True and False strings become numbers
    if convert_all and value.upper() in ('TRUE', 'FALSE', EMPTY):
        return int(len(value) == 4)

    try:
        if '.' not in value:
            return int(value)
    except (ValueError, TypeError):
        pass

    try:
        return float(value)
    except (ValueError, TypeError):
        return value
