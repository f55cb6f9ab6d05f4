"""Per-ticket metrics calculator for Linear Metrics.

This module computes cycle time, lead time and month for every loaded ticket.
"""

import logging

from ..calculator import Calculator
from ..metrics import compute_metrics, metrics_to_frame
from ..utils import write_frame

logger = logging.getLogger(__name__)


class TicketMetricsCalculator(Calculator):
    """Build a list of `TicketMetrics`, one per loaded ticket, in input order."""

    def run(self):
        metrics = [compute_metrics(ticket) for ticket in self.tickets]
        logger.debug("Computed metrics for %d tickets", len(metrics))
        return metrics

    def write(self):
        output_files = self.settings.get("metrics_data")
        if not output_files:
            logger.debug("No output file specified for ticket metrics data")
            return

        frame = metrics_to_frame(self.get_result())

        for output_file in output_files:
            logger.info("Writing ticket metrics data to %s", output_file)
            write_frame(frame, output_file, "Ticket metrics")
