# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

import datetime as dt

import pytest


@pytest.fixture(scope='session')
def dated_flows_2008():
    """Flows and dates of the standard XNPV / XIRR worked example"""
    values = (-10000, 2750, 4250, 3250, 2750)
    dates = (
        dt.date(2008, 1, 1),
        dt.date(2008, 3, 1),
        dt.date(2008, 10, 30),
        dt.date(2009, 2, 15),
        dt.date(2009, 4, 1),
    )
    return values, dates


@pytest.fixture(scope='session')
def dated_flows_2020():
    values = (-2000, 1000, 1000, 1000)
    dates = (
        dt.datetime(2020, 2, 12),
        dt.datetime(2020, 3, 20),
        dt.datetime(2020, 4, 20),
        dt.datetime(2020, 5, 20),
    )
    return values, dates
