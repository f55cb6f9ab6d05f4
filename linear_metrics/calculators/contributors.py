"""Contributor ranking calculator for Linear Metrics."""

import logging

import pandas as pd

from ..calculator import Calculator
from ..utils import write_frame
from .summary import SummaryCalculator

logger = logging.getLogger(__name__)

CONTRIBUTORS_COLUMNS = ["assignee", "tickets"]


class ContributorsCalculator(Calculator):
    """Tickets done per assignee as a DataFrame, highest count first."""

    def run(self):
        summary = self.get_result(SummaryCalculator)
        counts = summary.contribution_counts if summary is not None else []
        return pd.DataFrame(counts, columns=CONTRIBUTORS_COLUMNS)

    def write(self):
        output_files = self.settings.get("contributors_data")
        if not output_files:
            logger.debug("No output file specified for contributors data")
            return

        frame = self.get_result()
        for output_file in output_files:
            logger.info("Writing contributors data to %s", output_file)
            write_frame(frame, output_file, "Contributors")
