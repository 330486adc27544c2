"""Recording and querying of daily productivity metrics in SQLite."""

from __future__ import annotations

import dataclasses
import sqlite3
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from itertools import pairwise
from typing import Any

from termite.metrics.milestones import MILESTONE_DEFINITIONS, Milestone

_DATE_FORMAT = "%Y-%m-%d"
_ONE_DAY = timedelta(days=1)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS daily_metrics (
    date           TEXT NOT NULL,
    account_id     TEXT NOT NULL,
    emails_cleared INTEGER NOT NULL DEFAULT 0,
    emails_sent    INTEGER NOT NULL DEFAULT 0,
    inbox_zeros    INTEGER NOT NULL DEFAULT 0,
    time_in_app_s  INTEGER NOT NULL DEFAULT 0,
    streak_days    INTEGER NOT NULL DEFAULT 0,
    PRIMARY KEY (date, account_id)
);
CREATE TABLE IF NOT EXISTS milestones (
    id          TEXT PRIMARY KEY,
    unlocked_at INTEGER,
    shown       INTEGER NOT NULL DEFAULT 0
);
"""


class MetricsError(Exception):
    """Raised when a metrics query or update fails."""


@dataclass(frozen=True)
class DailySummary:
    """Metrics for one day, summed over all accounts."""

    date: str
    cleared: int = 0
    sent: int = 0
    inbox_zeros: int = 0
    time_in_app: int = 0  # seconds


@dataclass(frozen=True)
class Totals:
    """All-time aggregated metrics."""

    total_cleared: int = 0
    total_sent: int = 0
    total_zeros: int = 0
    longest_streak: int = 0
    current_streak: int = 0


_CATEGORY_TOTAL = {
    "cleared": "total_cleared",
    "sent": "total_sent",
    "zero": "total_zeros",
    "streak": "longest_streak",
}


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create the metrics tables if they do not exist yet."""
    try:
        conn.executescript(_SCHEMA)
    except sqlite3.Error as exc:
        raise MetricsError(f"metrics: create schema: {exc}") from exc


def compute_streaks(dates: Iterable[date], today: date) -> tuple[int, int]:
    """Return ``(current, longest)`` runs of consecutive inbox-zero days.

    A streak is current only if its latest day is today or yesterday.
    """
    ordered = sorted(set(dates), reverse=True)
    if not ordered:
        return 0, 0

    active = ordered[0] in (today, today - _ONE_DAY)

    current = longest = streak = 1
    for index, (prev, curr) in enumerate(pairwise(ordered), start=1):
        if prev - curr == _ONE_DAY:
            streak += 1
        else:
            longest = max(longest, streak)
            streak = 1
        if active and (index == 1 or streak > current):
            current = streak

    longest = max(longest, streak)
    if not active:
        return 0, longest
    if streak >= current:
        current = streak
    return current, longest


class MetricsTracker:
    """Records and queries productivity metrics."""

    def __init__(
        self,
        conn: sqlite3.Connection,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._conn = conn
        self._clock = clock or datetime.now
        ensure_schema(conn)
        self._session_start = self._clock()
        self._today = self._session_start.strftime(_DATE_FORMAT)

    def _refresh_today(self) -> str:
        self._today = self._clock().strftime(_DATE_FORMAT)
        return self._today

    def _execute(self, context: str, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        try:
            with self._conn:
                return self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise MetricsError(f"metrics: {context}: {exc}") from exc

    def _ensure_row(self, account_id: str) -> None:
        self._refresh_today()
        self._execute(
            "ensure row",
            "INSERT OR IGNORE INTO daily_metrics (date, account_id) VALUES (?, ?)",
            (self._today, account_id),
        )

    def record_cleared(self, account_id: str, count: int) -> None:
        """Add ``count`` archived or deleted emails to today's total."""
        self._ensure_row(account_id)
        self._execute(
            "record cleared",
            "UPDATE daily_metrics SET emails_cleared = emails_cleared + ? "
            "WHERE date = ? AND account_id = ?",
            (count, self._today, account_id),
        )

    def record_sent(self, account_id: str) -> None:
        """Count one sent email for today."""
        self._ensure_row(account_id)
        self._execute(
            "record sent",
            "UPDATE daily_metrics SET emails_sent = emails_sent + 1 "
            "WHERE date = ? AND account_id = ?",
            (self._today, account_id),
        )

    def record_inbox_zero(self, account_id: str) -> None:
        """Count one inbox-zero event for today."""
        self._ensure_row(account_id)
        self._execute(
            "record inbox zero",
            "UPDATE daily_metrics SET inbox_zeros = inbox_zeros + 1 "
            "WHERE date = ? AND account_id = ?",
            (self._today, account_id),
        )

    def flush_session(self) -> int:
        """Add the time since the last flush to today's session row.

        Returns the number of seconds recorded.
        """
        self._refresh_today()
        now = self._clock()
        elapsed = int((now - self._session_start).total_seconds())
        if elapsed <= 0:
            return 0

        self._execute(
            "ensure session row",
            "INSERT OR IGNORE INTO daily_metrics (date, account_id) VALUES (?, '')",
            (self._today,),
        )
        self._execute(
            "flush session",
            "UPDATE daily_metrics SET time_in_app_s = time_in_app_s + ? "
            "WHERE date = ? AND account_id = ''",
            (elapsed, self._today),
        )
        self._session_start = now
        return elapsed

    def today_summary(self) -> DailySummary:
        """Return today's metrics summed over all accounts."""
        today = self._refresh_today()
        cleared, sent, zeros, seconds = self._execute(
            "today summary",
            """
            SELECT COALESCE(SUM(emails_cleared), 0), COALESCE(SUM(emails_sent), 0),
                   COALESCE(SUM(inbox_zeros), 0), COALESCE(SUM(time_in_app_s), 0)
            FROM daily_metrics WHERE date = ?
            """,
            (today,),
        ).fetchone()
        return DailySummary(today, cleared, sent, zeros, seconds)

    def all_time_totals(self) -> Totals:
        """Return all-time totals and streaks."""
        cleared, sent, zeros = self._execute(
            "all-time totals",
            """
            SELECT COALESCE(SUM(emails_cleared), 0), COALESCE(SUM(emails_sent), 0),
                   COALESCE(SUM(inbox_zeros), 0)
            FROM daily_metrics
            """,
        ).fetchone()
        current, longest = self._streaks()
        return Totals(cleared, sent, zeros, longest, current)

    def current_streak(self) -> int:
        """Return the current run of consecutive inbox-zero days."""
        return self._streaks()[0]

    def _streaks(self) -> tuple[int, int]:
        rows = self._execute(
            "compute streaks",
            "SELECT date FROM daily_metrics WHERE inbox_zeros > 0 "
            "GROUP BY date ORDER BY date DESC",
        ).fetchall()
        dates = []
        for (text,) in rows:
            try:
                dates.append(datetime.strptime(text, _DATE_FORMAT).date())
            except (TypeError, ValueError):
                continue
        return compute_streaks(dates, self._clock().date())

    def check_milestones(self) -> list[Milestone]:
        """Unlock every milestone whose threshold is now met and return the new ones."""
        try:
            totals = self.all_time_totals()
        except MetricsError as exc:
            raise MetricsError(f"metrics: check milestones: {exc}") from exc

        now = self._clock()
        stamp = int(now.timestamp())
        unlocked: list[Milestone] = []

        for definition in MILESTONE_DEFINITIONS:
            attribute = _CATEGORY_TOTAL.get(definition.category)
            if attribute is None or getattr(totals, attribute) < definition.threshold:
                continue

            row = self._execute(
                "check milestone",
                "SELECT unlocked_at FROM milestones WHERE id = ?",
                (definition.id,),
            ).fetchone()
            if row is not None and row[0] is not None:
                continue

            self._execute(
                f"unlock milestone {definition.id}",
                """
                INSERT INTO milestones (id, unlocked_at, shown) VALUES (?, ?, 0)
                ON CONFLICT(id) DO UPDATE SET unlocked_at = ?, shown = 0
                """,
                (definition.id, stamp, stamp),
            )
            unlocked.append(Milestone(**dataclasses.asdict(definition), unlocked_at=now))

        return unlocked

    def mark_milestone_shown(self, milestone_id: str) -> None:
        """Record that a milestone's toast has been displayed."""
        self._execute(
            "mark milestone shown",
            "UPDATE milestones SET shown = 1 WHERE id = ?",
            (milestone_id,),
        )