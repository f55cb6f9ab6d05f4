"""Markdown report of ticket metrics, as printed by the command line tool."""

from .metrics import format_as_days_hours

NO_DATA_MESSAGE = "No completed tickets found."
RULE = "------------------------"


def render_summary(summary):
    """Lines of the summary section for an `AggregateSummary`."""
    return [
        "## Linear Metrics Summary 📊",
        "",
        RULE,
        "",
        f"Tickets solved: {summary.count}",
        "",
        f"Average resolution time: {summary.average_hours:.2f}h",
        "",
        f"Median resolution time: {summary.median_hours:.2f}h",
        "",
        f"Shortest: {summary.min_hours:.2f}h | Longest: {summary.max_hours:.2f}h",
        "",
        f"Average Lead Time: {summary.average_lead_time_hours:.2f}h",
        "",
        f"Average Cycle Time: {summary.average_cycle_time_hours:.2f}h",
        "",
    ]


def render_ranking(summary):
    """Lines listing every ticket, longest first."""
    lines = ["", "## Tickets Done 📃", RULE]
    for i, m in enumerate(summary.ranked, start=1):
        lines.append(f"{i}. {m.title} - ({format_as_days_hours(m.duration_hours)}) ({m.assignee})")
    return lines


def render_contributors(summary):
    """Lines listing assignees by number of tickets done."""
    lines = ["", "## Highest Contributors ⭐️", RULE]
    for i, (assignee, count) in enumerate(summary.contribution_counts, start=1):
        lines.append(f"{i}. {assignee} {count}")
    return lines


def render_report(summary):
    """The full report, or the "no data" message when `summary` is None."""
    if summary is None:
        return NO_DATA_MESSAGE

    lines = render_summary(summary) + render_ranking(summary) + render_contributors(summary)
    return "\n".join(lines)
