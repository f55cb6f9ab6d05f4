"""Loading of Linear CSV exports into `Ticket` values."""

import logging

import pandas as pd

from .models import NO_TITLE, UNASSIGNED, Ticket
from .working_hours import to_instant

logger = logging.getLogger(__name__)

# Ticket field -> CSV header in a Linear export
DEFAULT_COLUMNS = {
    "id": "ID",
    "title": "Title",
    "assignee": "Assignee",
    "team": "Team",
    "state": "State",
    "created": "Created",
    "started": "Started",
    "completed": "Completed",
}


def _skip_long_row(fields):
    logger.warning(
        "Skipping CSV row with %d fields, more than the header: %s",
        len(fields),
        ",".join(str(f) for f in fields),
    )
    return None


def read_export(csv_path):
    """Read a CSV export as a DataFrame of trimmed strings.

    Blank lines are skipped. Rows with more fields than the header are
    dropped with a warning; rows with fewer are padded with empty strings.
    Bytes that are not valid UTF-8 are replaced rather than failing the load.

    The header is read as an ordinary row so that an over-long first data
    row cannot be taken for an index column.
    """
    logger.debug("Reading CSV export from %s", csv_path)
    try:
        frame = pd.read_csv(
            csv_path,
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            skipinitialspace=True,
            engine="python",
            on_bad_lines=_skip_long_row,
            encoding="utf-8",
            encoding_errors="replace",
        )
    except pd.errors.EmptyDataError:
        logger.warning("CSV export %s is empty", csv_path)
        return pd.DataFrame()

    header = frame.iloc[0].fillna("")
    frame = frame.iloc[1:].reset_index(drop=True)
    frame.columns = [str(c).strip() for c in header]
    return frame.fillna("").apply(lambda column: column.str.strip())


def _value(row, columns, field):
    value = row.get(columns[field], "")
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()


def _ticket_from_row(row, columns):
    started = to_instant(_value(row, columns, "started"))
    if pd.isna(started):
        return None

    completed = to_instant(_value(row, columns, "completed"))
    if pd.isna(completed):
        return None

    created = to_instant(_value(row, columns, "created"))

    return Ticket(
        id=_value(row, columns, "id"),
        title=_value(row, columns, "title") or NO_TITLE,
        assignee=_value(row, columns, "assignee") or UNASSIGNED,
        team=_value(row, columns, "team"),
        state=_value(row, columns, "state"),
        created=None if pd.isna(created) else created,
        started=started,
        completed=completed,
        in_progress=False,
    )


def tickets_from_frame(frame, columns=None):
    """Turn rows of an export into `Ticket` values.

    Rows whose start or completion timestamp is missing or unparseable are
    dropped.
    """
    columns = dict(DEFAULT_COLUMNS, **(columns or {}))

    missing = [c for c in (columns["started"], columns["completed"]) if c not in frame.columns]
    if missing:
        logger.warning("CSV export has no %s column(s); no tickets loaded", ", ".join(missing))
        return []

    tickets = []
    for row in frame.to_dict("records"):
        ticket = _ticket_from_row(row, columns)
        if ticket is not None:
            tickets.append(ticket)

    dropped = len(frame.index) - len(tickets)
    if dropped:
        logger.info("Skipped %d rows without valid started/completed dates", dropped)
    logger.info("Loaded %d completed tickets", len(tickets))

    return tickets


def load(csv_path, columns=None):
    """Load completed tickets from the Linear CSV export at `csv_path`."""
    return tickets_from_frame(read_export(csv_path), columns)
