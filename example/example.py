# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html


"""
Simple example file showing a loan and an investment worked through
with the finlib functions
"""
import datetime as dt
import logging
import sys

import finlib
from finlib import excellib


def finlib_logging_to_console(enable=True):
    if enable:
        logger = logging.getLogger('finlib')
        logger.setLevel('DEBUG')

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(logging.DEBUG)
        logger.addHandler(console)


if __name__ == '__main__':
    finlib_logging_to_console()

    # a 3 year loan of 8000 at 10% a year, paid monthly
    monthly_rate = 0.1 / 12
    payment = finlib.payment(monthly_rate, 36, 8000)
    print("Monthly payment is %.2f" % payment)

    print("Interest in month 3 is %.2f, principal is %.2f" % (
        finlib.interest_payment(monthly_rate, 3, 36, 8000),
        finlib.principal_payment(monthly_rate, 3, 36, 8000)))

    # recover the rate from the payment with Newton-Raphson
    print("Solving for the rate...")
    rate = finlib.rate(36, payment, 8000, guess=0.01)
    print("Annual rate is %.4f (expected 0.1)" % (rate * 12))

    # an investment with irregular dates
    values = (-10000, 2750, 4250, 3250, 2750)
    dates = (dt.date(2008, 1, 1), dt.date(2008, 3, 1), dt.date(2008, 10, 30),
             dt.date(2009, 2, 15), dt.date(2009, 4, 1))
    print("XNPV at 9%% is %.2f" % finlib.scheduled_net_present_value(
        0.09, values, dates))
    print("XIRR is %.6f" % finlib.scheduled_internal_rate_of_return(
        values, dates))

    # cash flows that never change sign have no rate of return
    try:
        finlib.internal_rate_of_return((100, 200, 300))
    except finlib.DegenerateCashFlow as exc:
        print("IRR failed: %s" % exc)

    # the spreadsheet layer reports the same failure as an error value
    print("IRR(100, 200, 300) is %s" % excellib.irr((100, 200, 300)))
    print("TBILLYIELD is %.6f" % excellib.tbillyield(
        '2008-03-31', '2008-06-01', 98.45))

    print("Done")
