# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html


import numpy as np
import pytest

from finlib.finutil import (
    as_cash_flow,
    coerce_to_number,
    day_count_basis_from,
    DayCountBasis,
    DegenerateCashFlow,
    DidNotConverge,
    DIV0,
    EMPTY,
    ERROR_CODES,
    FinlibException,
    flatten,
    has_sign_change,
    InsufficientPeriods,
    InvalidDateOrder,
    InvalidDayCountBasis,
    InvalidInput,
    InvalidPaymentType,
    is_array_arg,
    is_number,
    LengthMismatch,
    MAX_ITERATIONS,
    NA_ERROR,
    NUM_ERROR,
    payment_type_from,
    PaymentType,
    PRECISION,
    SingularDerivative,
    SolverError,
    TermTooLong,
    VALUE_ERROR,
)


def test_constants():
    assert MAX_ITERATIONS == 30
    assert PRECISION == 1e-6
    for error in (DIV0, NA_ERROR, NUM_ERROR, VALUE_ERROR):
        assert error in ERROR_CODES


def test_enums():
    assert [p.value for p in PaymentType] == [0, 1]
    assert PaymentType.END == 0
    assert PaymentType.BEGIN == 1
    assert [b.value for b in DayCountBasis] == [0, 1, 2, 3, 4]
    assert DayCountBasis.NASD == 0
    assert DayCountBasis.EUROPEAN == 4


@pytest.mark.parametrize(
    'exc, bases, excel_error',
    (
        (InvalidInput, (FinlibException, ValueError), NUM_ERROR),
        (InvalidPaymentType, (InvalidInput, ), NUM_ERROR),
        (InvalidDayCountBasis, (InvalidInput, ), NUM_ERROR),
        (DegenerateCashFlow, (InvalidInput, ), NUM_ERROR),
        (LengthMismatch, (InvalidInput, ), NUM_ERROR),
        (InsufficientPeriods, (InvalidInput, ), DIV0),
        (InvalidDateOrder, (InvalidInput, ), NUM_ERROR),
        (TermTooLong, (InvalidInput, ), NUM_ERROR),
        (SolverError, (FinlibException, ArithmeticError), NUM_ERROR),
        (DidNotConverge, (SolverError, ), NUM_ERROR),
        (SingularDerivative, (SolverError, ), NUM_ERROR),
    )
)
def test_exception_tree(exc, bases, excel_error):
    for base in bases:
        assert issubclass(exc, base)
    assert exc.excel_error == excel_error


def test_solver_errors_carry_state():
    exc = DidNotConverge('no luck', value=1.5, iterations=30)
    assert str(exc) == 'no luck'
    assert exc.value == 1.5
    assert exc.iterations == 30

    exc = SingularDerivative('flat')
    assert exc.value is None
    assert exc.iterations is None


@pytest.mark.parametrize(
    'value, expected',
    (
        (0, PaymentType.END),
        (1, PaymentType.BEGIN),
        (1.0, PaymentType.BEGIN),
        (PaymentType.BEGIN, PaymentType.BEGIN),
        (2, InvalidPaymentType),
        (-1, InvalidPaymentType),
        (0.5, InvalidPaymentType),
        (True, InvalidPaymentType),
        ('END', InvalidPaymentType),
        (None, InvalidPaymentType),
    )
)
def test_payment_type_from(value, expected):
    if isinstance(expected, type) and issubclass(expected, Exception):
        with pytest.raises(expected):
            payment_type_from(value)
    else:
        assert payment_type_from(value) is expected


@pytest.mark.parametrize(
    'value, expected',
    (
        (0, DayCountBasis.NASD),
        (3, DayCountBasis.ACTUAL_365),
        (DayCountBasis.EUROPEAN, DayCountBasis.EUROPEAN),
        (5, InvalidDayCountBasis),
        (False, InvalidDayCountBasis),
        ('1', InvalidDayCountBasis),
    )
)
def test_day_count_basis_from(value, expected):
    if isinstance(expected, type) and issubclass(expected, Exception):
        with pytest.raises(expected):
            day_count_basis_from(value)
    else:
        assert day_count_basis_from(value) is expected


def test_flatten():
    assert [1, 2, 3] == list(flatten([1, (2, 3)]))
    assert [1, 2, 3] == list(flatten(((1, ), (2, ), (3, ))))
    assert ['ddd', 1] == list(flatten(['ddd', 1]))
    assert [1.0, 2.0] == list(flatten(np.array([1, 2]), coerce=float))
    assert [None] == list(flatten(None))


@pytest.mark.parametrize(
    'arg, expected',
    (
        (((1, 2), ), True),
        (((1, ), (2, )), True),
        ((1, 2), False),
        ((), False),
        ([[1, 2]], False),
        (1, False),
    )
)
def test_is_array_arg(arg, expected):
    assert is_array_arg(arg) is expected


def test_as_cash_flow():
    flows = as_cash_flow(((-100, ), (50, ), (60, )))
    assert flows.dtype == np.float64
    assert flows.tolist() == [-100.0, 50.0, 60.0]
    assert as_cash_flow(x for x in (1, 2)).tolist() == [1.0, 2.0]
    assert as_cash_flow(()).size == 0


@pytest.mark.parametrize(
    'values, expected',
    (
        ((-1, 1), True),
        ((1, 0, -1), True),
        ((0, 0, 0), False),
        ((1, 2, 3), False),
        ((-1, -2, 0), False),
        ((), False),
    )
)
def test_has_sign_change(values, expected):
    assert has_sign_change(values) is expected


@pytest.mark.parametrize(
    'data, result', (
        (1, True),
        (1.5, True),
        ('1', True),
        ('1.5', True),
        (True, True),
        ('xyzzy', False),
        (None, False),
        ((1, ), False),
        (VALUE_ERROR, False),
    )
)
def test_is_number(data, result):
    assert is_number(data) == result


@pytest.mark.parametrize(
    'value, expected, expected_type, convert_all', (
        (1, 1, int, False),
        (1.0, 1.0, int, False),
        (1.5, 1.5, float, False),
        (None, None, type(None), False),
        ('1', 1, int, False),
        ('1.', 1.0, float, False),
        ('xyzzy', 'xyzzy', str, False),
        (DIV0, DIV0, str, False),
        ('TRUE', 'TRUE', str, False),
        (EMPTY, EMPTY, str, False),
        (1, 1, int, True),
        (None, 0, int, True),
        ('1', 1, int, True),
        ('1.', 1.0, float, True),
        (DIV0, DIV0, str, True),
        ('TRUE', 1, int, True),
        ('FALSE', 0, int, True),
        (EMPTY, 0, int, True),
    )
)
def test_coerce_to_number(value, expected, expected_type, convert_all):
    result = coerce_to_number(value, convert_all=convert_all)
    assert result == expected
    assert isinstance(result, expected_type)
