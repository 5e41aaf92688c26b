"""
Client patrimony aggregation.

Exports:
  - financial_indicators: Ratios derived from one financial snapshot
  - summarize_patrimony: Consolidated asset overview
"""

from lexoffice.core.patrimony.indicators import financial_indicators
from lexoffice.core.patrimony.summary import harvest_overview, summarize_patrimony

__all__ = ["financial_indicators", "harvest_overview", "summarize_patrimony"]
