# -*- coding: UTF-8 -*-
#
# Copyright 2026 by the Finlib Contributors
# All rights reserved.
# This file is part of the Finlib Library, Licensed under GPLv3 (the 'License')
# You may not use this work except in compliance with the License.
# You may obtain a copy of the Licence at:
#   https://www.gnu.org/licenses/gpl-3.0.en.html

from .finutil import (  # noqa: F401
    DayCountBasis,
    DegenerateCashFlow,
    DidNotConverge,
    FinlibException,
    InsufficientPeriods,
    InvalidDateOrder,
    InvalidDayCountBasis,
    InvalidInput,
    InvalidPaymentType,
    LengthMismatch,
    MAX_ITERATIONS,
    PaymentType,
    PRECISION,
    SingularDerivative,
    SolverError,
    TermTooLong,
)
from .lib.bonds import (  # noqa: F401
    days_difference,
    days_per_year,
    discount_rate,
    price_discount,
    tbill_equivalent_yield,
    tbill_price,
    tbill_yield,
)
from .lib.cashflow import (  # noqa: F401
    internal_rate_of_return,
    modified_internal_rate_of_return,
    net_present_value,
    scheduled_internal_rate_of_return,
    scheduled_net_present_value,
)
from .lib.depreciation import (  # noqa: F401
    depreciation_fixed_declining,
    depreciation_straight_line,
    depreciation_syd,
)
from .lib.rates import effective_rate, nominal_rate  # noqa: F401
from .lib.solver import newton  # noqa: F401
from .lib.tvm import (  # noqa: F401
    future_value,
    interest_payment,
    payment,
    periods,
    present_value,
    principal_payment,
    rate,
)
from .version import __version__  # noqa: F401
