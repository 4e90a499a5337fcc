# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

"""
Calendar helpers for the dated financial functions
"""

import datetime as dt

import dateutil.parser
from openpyxl.utils.datetime import from_excel

from finlib.finutil import (
    ERROR_CODES,
    InvalidInput,
    is_number,
    NUM_ERROR,
    SECONDS_PER_DAY,
    VALUE_ERROR,
)


DATE_ZERO = dt.datetime(1899, 12, 30)
DATE_MAX = dt.datetime(9999, 12, 31)  # last legal value
DATE_MAX_INT = (DATE_MAX - DATE_ZERO).days + 1  # first illegal value


def is_leap_year(year):
    return year % 4 == 0 and year % 100 != 0 or year % 400 == 0


def as_datetime(value):
    """Promote a date to a datetime at midnight, datetimes pass through"""
    if isinstance(value, dt.datetime):
        return value
    if isinstance(value, dt.date):
        return dt.datetime(value.year, value.month, value.day)
    raise InvalidInput(f'{value!r} is not a date')


def elapsed_seconds(start, end):
    return (as_datetime(end) - as_datetime(start)).total_seconds()


def elapsed_days(start, end):
    """Actual days from start to end, fractional for partial days"""
    return elapsed_seconds(start, end) / SECONDS_PER_DAY


def coerce_to_datetime(value):
    """Convert a spreadsheet style date to a datetime

    :param value: serial number (1900 date system), date, datetime or
        a date string
    :return: datetime, or an error value if not convertible
    """
    if isinstance(value, bool):
        return VALUE_ERROR

    if isinstance(value, dt.date):
        return as_datetime(value)

    if isinstance(value, str):
        if value in ERROR_CODES:
            return value
        if not is_number(value):
            try:
                return dateutil.parser.parse(value)
            except (ValueError, OverflowError):
                return VALUE_ERROR

    if not is_number(value):
        return VALUE_ERROR

    serial_number = int(float(value))
    if not (1 <= serial_number < DATE_MAX_INT):
        return NUM_ERROR
    return from_excel(serial_number)
