"""Value objects shared by the loader, metrics, aggregation and store modules."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pandas as pd

UNASSIGNED = "Unassigned"
NO_TITLE = "(No title)"


@dataclass(frozen=True)
class Ticket:
    """A completed ticket as read from the export.

    `started` and `completed` are always valid timestamps; tickets without
    them never get this far. `created` may be missing.
    """

    id: str
    title: str
    assignee: str
    team: str
    state: str
    created: Optional[pd.Timestamp]
    started: pd.Timestamp
    completed: pd.Timestamp
    in_progress: bool = False


@dataclass(frozen=True)
class TicketMetrics:
    """A ticket together with its derived working-hours durations."""

    id: str
    title: str
    assignee: str
    team: str
    state: str
    created: Optional[pd.Timestamp]
    started: pd.Timestamp
    completed: pd.Timestamp
    in_progress: bool
    duration_hours: float
    cycle_time_hours: float
    lead_time_hours: float
    month: str


@dataclass(frozen=True)
class AggregateSummary:
    """Summary statistics over a non-empty collection of ticket metrics."""

    count: int
    total_hours: float
    average_hours: float
    median_hours: float
    min_hours: float
    max_hours: float
    average_lead_time_hours: float
    average_cycle_time_hours: float
    contribution_counts: List[Tuple[str, int]] = field(default_factory=list)
    ranked: List[TicketMetrics] = field(default_factory=list)
