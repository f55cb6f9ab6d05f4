"""Linear Metrics - working-hours cycle and lead time metrics from Linear exports.

This package computes business-hours durations for completed tickets,
summarises them, and keeps monthly rollups in a SQLite database.
"""

from .aggregation import aggregate
from .metrics import compute_metrics, format_as_days_hours
from .working_hours import business_hours_between

__all__ = [
    "aggregate",
    "business_hours_between",
    "compute_metrics",
    "format_as_days_hours",
]
