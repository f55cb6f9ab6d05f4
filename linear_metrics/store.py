"""SQLite store for per-ticket metrics and their monthly rollups.

The store is an explicit object: callers open it with `MetricsStore.open`,
and nothing touches the database until they do.
"""

import logging
from pathlib import Path

import pandas as pd
from sqlalchemy import Column, Float, MetaData, String, Table, create_engine, func, select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "db/metrics.db"
MEMORY = ":memory:"

metadata = MetaData()

issues = Table(
    "issues",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", String),
    Column("assignee", String),
    Column("team", String),
    Column("state", String),
    Column("created_at", String),
    Column("started_at", String),
    Column("completed_at", String),
    Column("duration_hours", Float),
    Column("cycle_time_hours", Float),
    Column("lead_time_hours", Float),
    Column("month", String),
)


class StoreError(Exception):
    """
    Exception raised when the metrics database cannot be opened or written.
    """


def _to_iso(value):
    if value is None or pd.isna(value):
        return None
    return value.isoformat()


def _to_row(m):
    return {
        "id": m.id,
        "title": m.title,
        "assignee": m.assignee,
        "team": m.team,
        "state": m.state,
        "created_at": _to_iso(m.created),
        "started_at": _to_iso(m.started),
        "completed_at": _to_iso(m.completed),
        "duration_hours": m.duration_hours,
        "cycle_time_hours": m.cycle_time_hours,
        "lead_time_hours": m.lead_time_hours,
        "month": m.month,
    }


class MetricsStore:
    """Persists `TicketMetrics` rows keyed by ticket id."""

    def __init__(self, engine, path):
        self.engine = engine
        self.path = path

    @classmethod
    def open(cls, path=DEFAULT_DATABASE):
        """Open (creating if needed) the database at `path`.

        `":memory:"` opens a private in-memory database.
        """
        try:
            if path == MEMORY:
                engine = create_engine(
                    "sqlite:///:memory:",
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                )
            else:
                Path(path).parent.mkdir(parents=True, exist_ok=True)
                engine = create_engine(f"sqlite:///{path}")

            metadata.create_all(engine)
        except (OSError, SQLAlchemyError) as e:
            raise StoreError(f"Unable to open metrics database `{path}`: {e}") from e

        logger.debug("Opened metrics database %s", path)
        return cls(engine, path)

    def close(self):
        """Release the database connection."""
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None

    def _open_engine(self):
        if self.engine is None:
            raise StoreError(f"Metrics database `{self.path}` is closed")
        return self.engine

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def persist(self, metrics):
        """Insert or replace a row per ticket, in a single transaction.

        Returns the number of rows written.
        """
        engine = self._open_engine()
        rows = [_to_row(m) for m in metrics]
        if not rows:
            return 0

        statement = insert(issues)
        statement = statement.on_conflict_do_update(
            index_elements=[issues.c.id],
            set_={c.name: statement.excluded[c.name] for c in issues.c if c.name != "id"},
        )

        try:
            with engine.begin() as connection:
                connection.execute(statement, rows)
        except SQLAlchemyError as e:
            raise StoreError(f"Unable to save metrics to `{self.path}`: {e}") from e

        logger.info("Saved metrics for %d issues to %s", len(rows), self.path)
        return len(rows)

    def count(self):
        """Number of issues stored."""
        with self._open_engine().connect() as connection:
            return connection.execute(select(func.count()).select_from(issues)).scalar()

    def _grouped_stats(self, *keys):
        group_columns = [issues.c[k] for k in keys]
        query = (
            select(
                *group_columns,
                func.count().label("issues_done"),
                func.round(func.avg(issues.c.cycle_time_hours), 2).label("avg_cycle_time"),
                func.round(func.avg(issues.c.lead_time_hours), 2).label("avg_lead_time"),
            )
            .where(issues.c.completed_at.is_not(None))
            .group_by(*group_columns)
            .order_by(issues.c.month.desc(), *group_columns[1:])
        )

        with self._open_engine().connect() as connection:
            return [dict(row) for row in connection.execute(query).mappings()]

    def monthly_stats(self):
        """Issues done and average cycle/lead time per month and team."""
        return self._grouped_stats("month", "team")

    def monthly_performer_stats(self):
        """Issues done and average cycle/lead time per month, team and assignee."""
        return self._grouped_stats("month", "team", "assignee")
