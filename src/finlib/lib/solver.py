# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

"""
Newton-Raphson root finding, shared by the rate solving functions
"""
import logging
import math

from finlib.finutil import (
    DidNotConverge,
    MAX_ITERATIONS,
    PRECISION,
    SingularDerivative,
)


finlib_logger = logging.getLogger('finlib')

DERIVATIVE_STEP = 1E-7


def numerical_derivative(func, step=DERIVATIVE_STEP):
    """Central difference approximation of the derivative of func

    :param func: function of one real variable
    :param step: relative step size, scaled by the magnitude of x
    :return: function returning the approximate derivative at x
    """
    def derivative(x):
        h = step * max(1.0, abs(x))
        return (func(x + h) - func(x - h)) / (2 * h)
    return derivative


def newton(guess, func, derivative=None,
           max_iterations=MAX_ITERATIONS, precision=PRECISION):
    """Find x where func(x) == 0, starting from guess

    Iterates ``x = x - func(x) / derivative(x)`` until two successive
    values are closer than ``precision``.

    :param guess: starting point
    :param func: function to find the root of
    :param derivative: derivative of func, numerically approximated if None
    :param max_iterations: updates allowed beyond the first one
    :param precision: step size at which the iteration has converged
    :return: the root
    :raises SingularDerivative: the derivative is zero at an iterate
    :raises DidNotConverge: the cap was hit, or the iteration left the reals
    """
    if derivative is None:
        derivative = numerical_derivative(func)

    x = float(guess)
    for iteration in range(max_iterations + 1):
        try:
            value = func(x)
            slope = derivative(x)
            if slope == 0:
                raise SingularDerivative(
                    f'Derivative is zero at {x} after {iteration} iterations',
                    value=x, iterations=iteration)
            x_next = x - value / slope
        except (OverflowError, ZeroDivisionError) as exc:
            raise DidNotConverge(
                f'Solution diverged at {x} after {iteration} iterations: {exc}',
                value=x, iterations=iteration) from exc

        if not math.isfinite(x_next):
            raise DidNotConverge(
                f'Solution diverged to {x_next} after {iteration} iterations',
                value=x_next, iterations=iteration)

        finlib_logger.debug(
            'newton iteration %d: x=%r f(x)=%r next=%r',
            iteration, x, value, x_next)

        if abs(x_next - x) < precision:
            finlib_logger.debug(
                'newton converged to %r in %d iterations', x_next, iteration)
            return x_next
        x = x_next

    raise DidNotConverge(
        f"Solution didn't converge in {max_iterations} iterations, last: {x}",
        value=x, iterations=max_iterations)
