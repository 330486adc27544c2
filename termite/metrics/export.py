"""Export of the metrics tables to JSON or CSV files."""

from __future__ import annotations

import csv
import json
import os
import sqlite3
from dataclasses import asdict, dataclass, field

from termite.metrics.tracker import MetricsError

DAILY_HEADER = (
    "date",
    "account_id",
    "emails_cleared",
    "emails_sent",
    "inbox_zeros",
    "time_in_app_s",
    "streak_days",
)
MILESTONE_HEADER = ("milestone_id", "unlocked_at", "shown")


@dataclass(frozen=True)
class DailyMetricRow:
    """One row of the daily_metrics table."""

    date: str
    account_id: str
    emails_cleared: int
    emails_sent: int
    inbox_zeros: int
    time_in_app_s: int
    streak_days: int


@dataclass(frozen=True)
class MilestoneRow:
    """One row of the milestones table."""

    id: str
    unlocked_at: int | None
    shown: int


@dataclass
class ExportData:
    """Everything that an export writes."""

    daily_metrics: list[DailyMetricRow] = field(default_factory=list)
    milestones: list[MilestoneRow] = field(default_factory=list)


def gather_export_data(conn: sqlite3.Connection) -> ExportData:
    """Read all daily metrics and milestones, in a stable order."""
    try:
        daily = [
            DailyMetricRow(*row)
            for row in conn.execute(
                """
                SELECT date, account_id, emails_cleared, emails_sent, inbox_zeros,
                       time_in_app_s, streak_days
                FROM daily_metrics
                ORDER BY date ASC, account_id ASC
                """
            )
        ]
    except sqlite3.Error as exc:
        raise MetricsError(f"query daily_metrics: {exc}") from exc

    try:
        milestones = [
            MilestoneRow(*row)
            for row in conn.execute(
                "SELECT id, unlocked_at, shown FROM milestones ORDER BY id ASC"
            )
        ]
    except sqlite3.Error as exc:
        raise MetricsError(f"query milestones: {exc}") from exc

    return ExportData(daily, milestones)


def _gather(conn: sqlite3.Connection, context: str) -> ExportData:
    try:
        return gather_export_data(conn)
    except MetricsError as exc:
        raise MetricsError(f"{context}: {exc}") from exc


def export_json(conn: sqlite3.Connection, path: str | os.PathLike[str]) -> None:
    """Write all metrics data to ``path`` as indented JSON."""
    data = _gather(conn, "export json")
    try:
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(asdict(data), handle, indent=2, ensure_ascii=False)
            handle.write("\n")
    except OSError as exc:
        raise MetricsError(f"export json: write {path}: {exc}") from exc


def export_csv(conn: sqlite3.Connection, path: str | os.PathLike[str]) -> None:
    """Write daily metrics, a blank line, then milestones to ``path`` as CSV."""
    data = _gather(conn, "export csv")
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(DAILY_HEADER)
            writer.writerows(
                (
                    row.date,
                    row.account_id,
                    row.emails_cleared,
                    row.emails_sent,
                    row.inbox_zeros,
                    row.time_in_app_s,
                    row.streak_days,
                )
                for row in data.daily_metrics
            )
            writer.writerow(())
            writer.writerow(MILESTONE_HEADER)
            writer.writerows(
                (m.id, "" if m.unlocked_at is None else m.unlocked_at, m.shown)
                for m in data.milestones
            )
    except OSError as exc:
        raise MetricsError(f"export csv: write {path}: {exc}") from exc