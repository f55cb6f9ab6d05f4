"""Calculator base class and runner for Linear Metrics."""

import logging

logger = logging.getLogger(__name__)


class Calculator:
    """Base class for calculators.

    A calculator is constructed with the loaded tickets, the settings dict
    and a shared results dict. `run()` returns its result, which the runner
    stores under the calculator's class; later calculators read earlier
    results with `get_result()`. `write()` writes any output files.
    """

    def __init__(self, tickets, settings, results):
        self.tickets = tickets
        self.settings = settings
        self._results = results

    def get_result(self, calculator=None, default=None):
        """Get the result of `calculator` (defaults to this one)."""
        return self._results.get(calculator or self.__class__, default)

    def initialize(self):
        """Called before any calculator runs."""

    def run(self):
        """Calculate and return a result."""
        return None

    def write(self):
        """Write output files, if any are configured."""


def run_calculators(calculators, tickets, settings):
    """Run each calculator class in turn, then let each write its output.

    Returns a dict mapping calculator class to its result.
    """
    results = {}
    instances = [c(tickets, settings, results) for c in calculators]

    for c in instances:
        c.initialize()

    for c in instances:
        logger.info("%s running...", c.__class__.__name__)
        results[c.__class__] = c.run()
        logger.info("%s completed", c.__class__.__name__)

    for c in instances:
        logger.info("Writing output for %s...", c.__class__.__name__)
        try:
            c.write()
        except (OSError, ValueError) as e:
            logger.error("Writing output for %s failed: %s", c.__class__.__name__, e)

    return results
