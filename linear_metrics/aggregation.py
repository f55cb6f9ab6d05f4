"""Summary statistics over a collection of ticket metrics."""

import logging

from .models import AggregateSummary

logger = logging.getLogger(__name__)


def _positive_average(values):
    values = [v for v in values if v > 0]
    return sum(values) / len(values) if values else 0


def average_cycle_time(metrics):
    """Mean cycle time over tickets with a positive cycle time, or 0."""
    return _positive_average(m.cycle_time_hours for m in metrics)


def average_lead_time(metrics):
    """Mean lead time over tickets with a positive lead time, or 0.

    Tickets without a lead time (e.g. no creation date) are left out of the
    denominator rather than counted as zero.
    """
    return _positive_average(m.lead_time_hours for m in metrics)


def sort_by_duration(metrics):
    """Tickets sorted by ascending duration. Ties keep their input order."""
    return sorted(metrics, key=lambda m: m.duration_hours)


def rank_by_duration(metrics):
    """Tickets sorted by descending duration. Ties keep their input order."""
    return sorted(metrics, key=lambda m: m.duration_hours, reverse=True)


def median_duration(metrics):
    """The duration at index `count // 2` of the ascending sort.

    For an even number of tickets this is the upper of the two middle values,
    not their mean.
    """
    ordered = sort_by_duration(metrics)
    return ordered[len(ordered) // 2].duration_hours


def contribution_counts(metrics):
    """Number of tickets per assignee, highest count first.

    Assignees are grouped in the order they first appear in the ranking by
    duration; the sort by count is stable, so ties keep that order.
    """
    counts = {}
    for m in rank_by_duration(metrics):
        counts[m.assignee] = counts.get(m.assignee, 0) + 1

    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def aggregate(metrics):
    """Reduce a non-empty sequence of `TicketMetrics` to an `AggregateSummary`.

    Raises `ValueError` for an empty sequence: there is no average, median
    or extreme of nothing, and callers are expected to report "no data"
    themselves.
    """
    metrics = list(metrics)
    if not metrics:
        raise ValueError("Cannot aggregate an empty collection of ticket metrics")

    count = len(metrics)
    total = sum(m.duration_hours for m in metrics)
    ordered = sort_by_duration(metrics)

    logger.debug("Aggregating metrics for %d tickets", count)

    return AggregateSummary(
        count=count,
        total_hours=total,
        average_hours=total / count,
        median_hours=ordered[count // 2].duration_hours,
        min_hours=ordered[0].duration_hours,
        max_hours=ordered[-1].duration_hours,
        average_lead_time_hours=average_lead_time(metrics),
        average_cycle_time_hours=average_cycle_time(metrics),
        contribution_counts=contribution_counts(metrics),
        ranked=rank_by_duration(metrics),
    )
