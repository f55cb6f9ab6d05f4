"""Persistence and monthly rollup calculator for Linear Metrics.

This module saves per-ticket metrics into the metrics database and reads
back the monthly team and assignee rollups.
"""

import logging

import pandas as pd

from ..calculator import Calculator
from ..store import DEFAULT_DATABASE, MetricsStore
from ..utils import write_frame
from .ticket_metrics import TicketMetricsCalculator

logger = logging.getLogger(__name__)

MONTHLY_COLUMNS = ["month", "team", "issues_done", "avg_cycle_time", "avg_lead_time"]
ASSIGNEE_COLUMNS = [
    "month",
    "team",
    "assignee",
    "issues_done",
    "avg_cycle_time",
    "avg_lead_time",
]


class RollupsCalculator(Calculator):
    """Save ticket metrics and return the stored monthly rollups.

    Only runs when the `save` setting is true. The result is a dict with
    `monthly` (per month and team) and `assignees` (per month, team and
    assignee) lists of row dicts, or `None` when not saving.
    """

    def run(self):
        if not self.settings.get("save"):
            logger.debug("Not saving metrics to the database")
            return None

        metrics = self.get_result(TicketMetricsCalculator, [])
        database = self.settings.get("database") or DEFAULT_DATABASE

        with MetricsStore.open(database) as store:
            store.persist(metrics)
            return {
                "monthly": store.monthly_stats(),
                "assignees": store.monthly_performer_stats(),
            }

    def write(self):
        rollups = self.get_result()
        if rollups is None:
            return

        self._write_rollup(
            "monthly_stats_data", rollups["monthly"], MONTHLY_COLUMNS, "Monthly stats"
        )
        self._write_rollup(
            "assignee_stats_data",
            rollups["assignees"],
            ASSIGNEE_COLUMNS,
            "Assignee stats",
        )

    def _write_rollup(self, setting, rows, columns, sheet_name):
        output_files = self.settings.get(setting)
        if not output_files:
            logger.debug("No output file specified for %s", sheet_name.lower())
            return

        frame = pd.DataFrame(rows, columns=columns)
        for output_file in output_files:
            logger.info("Writing %s to %s", sheet_name.lower(), output_file)
            write_frame(frame, output_file, sheet_name)
