"""Test configuration and fixtures for Linear Metrics.

This module provides the settings, tickets and CSV exports shared by the
test modules.
"""

import pytest

from .config import default_options
from .test_utils import create_ticket

# 2024-01-01 is a Monday

EXPORT_HEADER = "ID,Title,Assignee,Team,State,Created,Started,Completed"

EXPORT_ROWS = [
    "A-1,Fix login,Alice,Core,Done,2024-01-01 09:00:00,2024-01-01 10:00:00,2024-01-01 14:00:00",
    "A-2,Add export,Bob,Core,Done,,2024-01-02 09:00:00,2024-01-03 17:00:00",
    '"A-3","Weekend, spanning",Alice,Core,Done,2024-01-04 09:00:00,2024-01-05 16:00:00,2024-01-08 10:00:00',
    "A-4,New page,Carol,Web,Done,2024-01-29 12:00:00,2024-01-30 09:00:00,2024-02-01 11:00:00",
    "A-5,Not started,Bob,Core,Todo,2024-01-02 09:00:00,,",
    "A-6,Still going,Bob,Core,In Progress,2024-01-02 09:00:00,2024-01-03 09:00:00,",
    "A-7,Bad date,Bob,Core,Done,2024-01-02 09:00:00,not a date,2024-01-03 09:00:00",
]


@pytest.fixture(name="base_settings")
def settings():
    """The default `settings`, with no output files and no database."""
    return default_options()["settings"]


@pytest.fixture(name="base_tickets")
def tickets():
    """Four completed tickets across two months and two teams.

    Cycle / lead time in business hours:
    A-1 4 / 5, A-2 16 / 0 (no created date), A-3 2 / 17, A-4 18 / 23.
    """
    return [
        create_ticket(
            "A-1",
            created="2024-01-01 09:00",
            started="2024-01-01 10:00",
            completed="2024-01-01 14:00",
            assignee="Alice",
        ),
        create_ticket(
            "A-2",
            started="2024-01-02 09:00",
            completed="2024-01-03 17:00",
            assignee="Bob",
        ),
        create_ticket(
            "A-3",
            created="2024-01-04 09:00",
            started="2024-01-05 16:00",
            completed="2024-01-08 10:00",
            assignee="Alice",
        ),
        create_ticket(
            "A-4",
            created="2024-01-29 12:00",
            started="2024-01-30 09:00",
            completed="2024-02-01 11:00",
            assignee="Carol",
            team="Web",
        ),
    ]


@pytest.fixture(name="export_csv")
def export_csv_file(tmp_path):
    """A Linear CSV export with four completed and three unusable rows."""
    path = tmp_path / "linear-export.csv"
    path.write_text("\n".join([EXPORT_HEADER] + EXPORT_ROWS) + "\n", encoding="utf-8")
    return path
