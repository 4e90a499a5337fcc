# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

import collections
import functools
import inspect

from finlib.finutil import (
    coerce_to_number,
    DIV0,
    ERROR_CODES,
    FinlibException,
    flatten,
    is_array_arg,
    is_number,
    NUM_ERROR,
    VALUE_ERROR,
)
from finlib.lib.date_time import coerce_to_datetime


FUNC_META = 'excel_func_meta'

ALL_ARG_INDICES = frozenset(range(512))


def excel_helper(cse_params=None,
                 err_str_params=-1,
                 number_params=None,
                 int_params=None,
                 date_params=None):
    """ Decorator to wrap a function with spreadsheet style param processing

    All parameters are encoded as:

        int >= 0: param number to check
        tuple of ints: params to check
        -1: check all params
        None: check no params

    :param cse_params: CSE Array Params.  If array are passed the function
        will be called multiple times, once for each value, and the result
        will be a CSE Array
    :param err_str_params: params to check for error strings
    :param number_params: params to coerce to numbers
    :param int_params: params to coerce to numbers and truncate to ints
    :param date_params: params to coerce to datetimes
    :return: decorator
    """
    def mark(f):
        meta = dict(
            cse_params=cse_params,
            err_str_params=err_str_params,
            number_params=number_params,
            int_params=int_params,
            date_params=date_params,
        )
        wrapped = apply_meta(f, meta)
        setattr(wrapped, FUNC_META, meta)
        return wrapped
    return mark


# Decorator for generic excel function
excel_func = excel_helper()

# Decorator for generic excel math function (all params are numbers)
excel_math_func = excel_helper(
    cse_params=-1, err_str_params=-1, number_params=-1)


def apply_meta(f, meta):
    """Take the metadata from excel_helper and wrap accordingly"""

    # find what all_params for this function should look like
    sig = inspect.signature(f)
    if any(param.kind == inspect.Parameter.VAR_KEYWORD
           for param in sig.parameters.values()):
        raise RuntimeError(
            f'Function {f.__name__}: **kwargs not allowed in signature.')
    if any(param.kind == inspect.Parameter.VAR_POSITIONAL
           for param in sig.parameters.values()):
        all_params = ALL_ARG_INDICES
    else:
        all_params = set(range(f.__code__.co_argcount)) or ALL_ARG_INDICES

    def indices(params):
        return all_params if params == -1 else params

    # innermost, finlib errors become error values
    f = finlib_error_wrapper(f)

    if meta['date_params'] is not None:
        f = dates_wrapper(f, indices(meta['date_params']))

    if meta['int_params'] is not None:
        f = ints_wrapper(f, indices(meta['int_params']))

    if meta['number_params'] is not None:
        f = nums_wrapper(f, indices(meta['number_params']))

    if meta['err_str_params'] is not None:
        f = error_string_wrapper(f, indices(meta['err_str_params']))

    if meta['cse_params'] is not None:
        f = cse_array_wrapper(f, indices(meta['cse_params']))

    return f


def convert_params_indices(f, param_indices):
    """Given parameter indices, return a set of parameter indices to process

    :param f: function to check for arg count
    :param param_indices: params to check if CSE array
        int: param number to check
        tuple: params to check
    :return: set of parameter indices
    """
    if not isinstance(param_indices, collections.abc.Iterable):
        assert param_indices >= 0
        return {int(param_indices)}

    else:
        assert all(i >= 0 for i in param_indices)
        return set(map(int, param_indices))


def cse_array_wrapper(f, param_indices=None):
    """wrapper to take cse array input and call function once per element

    :param f: function to wrap
    :param param_indices: params to check if CSE array
        int: param number to check
        tuple: params to check
    :return: wrapped function
    """
    param_indices = convert_params_indices(f, param_indices)

    def pick_args(args, cse_arg_nums, row, col):
        return (arg[row][col] if i in cse_arg_nums else arg
                for i, arg in enumerate(args))

    @functools.wraps(f)
    def wrapper(*args):
        looper = (i for i in param_indices if i < len(args))
        cse_arg_nums = {arg_num for arg_num in looper if is_array_arg(args[arg_num])}

        if cse_arg_nums:
            a_cse_arg = next(iter(cse_arg_nums))
            num_rows = len(args[a_cse_arg])
            num_cols = len(args[a_cse_arg][0])

            return tuple(tuple(
                f(*pick_args(args, cse_arg_nums, row, col))
                for col in range(num_cols)) for row in range(num_rows))

        return f(*args)

    return wrapper


def nums_wrapper(f, param_indices=None):
    """wrapper for functions that take numbers, does excel style conversions

    :param f: function to wrap
    :param param_indices: params to coerce to numbers.
        int: param number to convert
        tuple: params to convert
    :return: wrapped function
    """
    param_indices = convert_params_indices(f, param_indices)

    @functools.wraps(f)
    def wrapper(*args):
        new_args = tuple(coerce_to_number(a, convert_all=True)
                         if i in param_indices else a
                         for i, a in enumerate(args))
        error = next((a for i, a in enumerate(new_args)
                      if i in param_indices and a in ERROR_CODES), None)
        if error:
            return error

        if any(i in param_indices and not is_number(a)
               for i, a in enumerate(new_args)):
            return VALUE_ERROR

        return f(*new_args)

    return wrapper


def ints_wrapper(f, param_indices=None):
    """wrapper for params the spreadsheet truncates to integers

    :param f: function to wrap
    :param param_indices: params to truncate.
        int: param number to convert
        tuple: params to convert
    :return: wrapped function
    """
    param_indices = convert_params_indices(f, param_indices)

    @functools.wraps(f)
    def wrapper(*args):
        if any(i in param_indices and not is_number(a)
               for i, a in enumerate(args)):
            return VALUE_ERROR

        return f(*(int(float(a)) if i in param_indices else a
                   for i, a in enumerate(args)))

    return wrapper


def dates_wrapper(f, param_indices=None):
    """wrapper for params holding dates, serial numbers or date strings

    :param f: function to wrap
    :param param_indices: params to convert to datetimes.
        int: param number to convert
        tuple: params to convert
    :return: wrapped function
    """
    param_indices = convert_params_indices(f, param_indices)

    @functools.wraps(f)
    def wrapper(*args):
        new_args = tuple(coerce_to_datetime(a) if i in param_indices else a
                         for i, a in enumerate(args))
        error = next((a for i, a in enumerate(new_args)
                      if i in param_indices and isinstance(a, str)), None)
        if error:
            return error

        return f(*new_args)

    return wrapper


def error_string_wrapper(f, param_indices=None):
    """wrapper to process error strings in arguments

    :param f: function to wrap
    :param param_indices: params to check for error strings.
        int: param number to check
        tuple: params to check
    :return: wrapped function
    """
    param_indices = sorted(convert_params_indices(f, param_indices))

    @functools.wraps(f)
    def wrapper(*args):
        for arg_num in param_indices:
            try:
                arg = args[arg_num]
            except IndexError:
                break
            if isinstance(arg, str) and arg in ERROR_CODES:
                return arg
            elif isinstance(arg, (tuple, list)):
                error = next((a for a in flatten(arg)
                              if isinstance(a, str) and a in ERROR_CODES), None)
                if error is not None:
                    return error

        return f(*args)

    return wrapper


def finlib_error_wrapper(f):
    """wrapper to report finlib errors as spreadsheet error values

    :param f: function to wrap
    :return: wrapped function
    """
    @functools.wraps(f)
    def wrapper(*args):
        try:
            return f(*args)
        except FinlibException as exc:
            return exc.excel_error
        except ZeroDivisionError:
            return DIV0
        except OverflowError:
            return NUM_ERROR
        except ValueError as exc:
            if "math domain error" in str(exc):
                return NUM_ERROR
            raise  # pragma: no cover

    return wrapper
