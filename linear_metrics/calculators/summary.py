"""Summary statistics calculator for Linear Metrics."""

import logging

import pandas as pd

from ..aggregation import aggregate
from ..calculator import Calculator
from ..utils import write_frame
from .ticket_metrics import TicketMetricsCalculator

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "count",
    "total_hours",
    "average_hours",
    "median_hours",
    "min_hours",
    "max_hours",
    "average_lead_time_hours",
    "average_cycle_time_hours",
]


class SummaryCalculator(Calculator):
    """Aggregate ticket metrics into an `AggregateSummary`.

    The result is `None` when there are no tickets, so that "no data" can be
    reported separately from a zero duration.
    """

    def run(self):
        metrics = self.get_result(TicketMetricsCalculator, [])
        if len(metrics) == 0:
            logger.warning("Cannot summarise metrics for zero tickets")
            return None

        return aggregate(metrics)

    def write(self):
        output_files = self.settings.get("summary_data")
        if not output_files:
            logger.debug("No output file specified for summary data")
            return

        summary = self.get_result()
        if summary is None:
            logger.warning("No summary data to write")
            return

        frame = pd.DataFrame(
            [{column: getattr(summary, column) for column in SUMMARY_COLUMNS}],
            columns=SUMMARY_COLUMNS,
        )

        for output_file in output_files:
            logger.info("Writing summary data to %s", output_file)
            write_frame(frame, output_file, "Summary")
