"""
Team performance calculations.

Exports:
  - okr_progress / apply_checkin: Weighted key-result progress
  - kpi_dashboard: Per-member averages, rankings and monthly trends
"""

from lexoffice.core.team.kpi import kpi_dashboard
from lexoffice.core.team.okr import apply_checkin, okr_progress

__all__ = ["apply_checkin", "kpi_dashboard", "okr_progress"]
