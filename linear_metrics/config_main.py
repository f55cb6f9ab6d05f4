from .calculators.contributors import ContributorsCalculator
from .calculators.rollups import RollupsCalculator
from .calculators.summary import SummaryCalculator
from .calculators.ticket_metrics import TicketMetricsCalculator

CALCULATORS = (
    TicketMetricsCalculator,  # should come first
    # -- others depend on results from this one
    SummaryCalculator,  # needs to come before contributors
    ContributorsCalculator,
    RollupsCalculator,
)
