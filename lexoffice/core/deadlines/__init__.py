"""
Deadline arithmetic.

Exports:
  - BusinessDayCalculator: CPC art. 219 business-day counting
  - DeadlineWindows: date windows used by the deadline dashboard
"""

from lexoffice.core.deadlines.business_days import (
    BusinessDayCalculator,
    years_between,
    years_spanned,
)
from lexoffice.core.deadlines.windows import DeadlineWindows

__all__ = ["BusinessDayCalculator", "DeadlineWindows", "years_between", "years_spanned"]
