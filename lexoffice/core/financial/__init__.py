"""
Office financial calculations.

Exports:
  - fee_installments: Split a fee into monthly installments
  - monthly_fee_breakdown: Paid / pending / overdue totals per due month
"""

from lexoffice.core.financial.fees import FeeInstallment, fee_installments, monthly_fee_breakdown

__all__ = ["FeeInstallment", "fee_installments", "monthly_fee_breakdown"]
