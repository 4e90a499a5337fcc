# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

"""
Conversions between nominal and effective annual interest rates
"""
from finlib.finutil import InvalidInput


def _check_compounding(num_periods):
    if num_periods < 1:
        raise InvalidInput(
            f'Number of compounding periods per year must be at least 1, '
            f'not {num_periods}')


def effective_rate(nominal, num_periods):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   effect-function-910d4e4c-79e2-4009-95e6-507e04f11bc4
    _check_compounding(num_periods)
    return (1 + nominal / num_periods) ** num_periods - 1


def nominal_rate(effective, num_periods):
    # Excel reference: https://support.microsoft.com/en-us/office/
    #   nominal-function-7f1ae29b-6b92-435e-b950-ad8b190ddd2b
    _check_compounding(num_periods)
    return num_periods * ((1 + effective) ** (1 / num_periods) - 1)
