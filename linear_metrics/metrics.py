"""Per-ticket metrics for Linear Metrics.

Cycle time runs from when work started to when it was completed; lead time
runs from when the ticket was created. Both are measured in business hours
(see `working_hours`).
"""

import logging
import math
import numbers

import pandas as pd

from .models import TicketMetrics
from .working_hours import business_hours_between, comparable_instants, measurable_range

logger = logging.getLogger(__name__)

# Length of a "day" when displaying durations. This is independent of the
# 09:00-17:00 window used to measure them.
HOURS_PER_DAY = 8

METRICS_COLUMNS = [
    "id",
    "title",
    "assignee",
    "team",
    "state",
    "created",
    "started",
    "completed",
    "in_progress",
    "duration_hours",
    "cycle_time_hours",
    "lead_time_hours",
    "month",
]


def _present(value):
    return value is not None and not pd.isna(value)


def calculate_cycle_time(ticket):
    """Business hours from `started` to `completed`, or 0 if either is missing."""
    if not _present(ticket.started) or not _present(ticket.completed):
        return 0
    return business_hours_between(ticket.started, ticket.completed)


def calculate_lead_time(ticket):
    """Business hours from `created` to `completed`, or 0 if either is missing."""
    if not _present(ticket.created) or not _present(ticket.completed):
        return 0
    return business_hours_between(ticket.created, ticket.completed)


def _warn_if_unmeasurable(ticket, start_field, start):
    if not _present(start):
        return
    if not comparable_instants(start, ticket.completed):
        logger.warning(
            "Ticket %s: %s (%s) and completed (%s) mix timezone-aware and naive "
            "timestamps; counting 0 hours",
            ticket.id,
            start_field,
            start,
            ticket.completed,
        )
    elif not measurable_range(start, ticket.completed):
        logger.warning(
            "Ticket %s: %s (%s) is not before completed (%s); counting 0 hours",
            ticket.id,
            start_field,
            start,
            ticket.completed,
        )


def compute_metrics(ticket):
    """Derive a `TicketMetrics` from a `Ticket`."""
    _warn_if_unmeasurable(ticket, "started", ticket.started)
    _warn_if_unmeasurable(ticket, "created", ticket.created)

    cycle_time_hours = calculate_cycle_time(ticket)
    lead_time_hours = calculate_lead_time(ticket)

    return TicketMetrics(
        id=ticket.id,
        title=ticket.title,
        assignee=ticket.assignee,
        team=ticket.team,
        state=ticket.state,
        created=ticket.created,
        started=ticket.started,
        completed=ticket.completed,
        in_progress=ticket.in_progress,
        duration_hours=cycle_time_hours,
        cycle_time_hours=cycle_time_hours,
        lead_time_hours=lead_time_hours,
        month=ticket.completed.strftime("%Y-%m"),
    )


def format_as_days_hours(hours):
    """Format a number of working hours as e.g. `"2d 4.00h"`.

    A day is `HOURS_PER_DAY` hours. Negative or non-numeric input gives
    `"Invalid input"`.
    """
    if (
        isinstance(hours, bool)
        or not isinstance(hours, numbers.Real)
        or not math.isfinite(hours)
        or hours < 0
    ):
        return "Invalid input"

    days = math.floor(hours / HOURS_PER_DAY)
    leftover_hours = hours % HOURS_PER_DAY

    return f"{days}d {leftover_hours:.2f}h"


def metrics_to_frame(metrics):
    """Build a DataFrame with one row per `TicketMetrics`."""
    data = {column: [getattr(m, column) for m in metrics] for column in METRICS_COLUMNS}
    return pd.DataFrame(data, columns=METRICS_COLUMNS)
