"""Milestone definitions that users unlock as their productivity totals grow."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MilestoneDef:
    """A milestone that can be unlocked.

    ``category`` is one of ``"cleared"``, ``"sent"``, ``"streak"`` or ``"zero"``.
    """

    id: str
    category: str
    threshold: int
    icon: str
    label: str
    desc: str


@dataclass(frozen=True)
class Milestone(MilestoneDef):
    """An unlocked milestone together with the moment it was unlocked."""

    unlocked_at: datetime


MILESTONE_DEFINITIONS: tuple[MilestoneDef, ...] = (
    # Emails cleared
    MilestoneDef("cleared_1", "cleared", 1, "✦", "First Clear", "Archived or deleted your first email"),
    MilestoneDef("cleared_10", "cleared", 10, "◆", "Getting Started", "10 emails cleared"),
    MilestoneDef("cleared_50", "cleared", 50, "▲", "Momentum", "50 emails cleared"),
    MilestoneDef("cleared_100", "cleared", 100, "●", "Century", "100 emails cleared"),
    MilestoneDef("cleared_500", "cleared", 500, "★", "Five Hundred", "500 emails cleared"),
    MilestoneDef(
        "cleared_1000", "cleared", 1000, "✸", "The Archivist",
        "1,000 emails cleared. Your inbox fears you.",
    ),
    MilestoneDef(
        "cleared_5000", "cleared", 5000, "⬟", "Email Monk",
        "5,000 emails cleared. Total inner peace.",
    ),
    MilestoneDef(
        "cleared_10000", "cleared", 10000, "⬡", "Ascended",
        "10,000 emails cleared. You are the inbox.",
    ),
    # Emails sent
    MilestoneDef("sent_1", "sent", 1, "↗", "First Send", "Sent your first email from Termite"),
    MilestoneDef("sent_10", "sent", 10, "↗", "In Conversation", "10 emails sent"),
    MilestoneDef("sent_100", "sent", 100, "✉", "The Correspondent", "100 emails sent"),
    MilestoneDef("sent_500", "sent", 500, "✉", "Prolific", "500 emails sent"),
    MilestoneDef("sent_1000", "sent", 1000, "✦", "The Networker", "1,000 emails sent"),
    # Inbox zeros
    MilestoneDef("zero_1", "zero", 1, "○", "First Zero", "Reached inbox zero for the first time"),
    MilestoneDef("zero_7", "zero", 7, "◎", "Weekly Zero", "Inbox zero 7 times"),
    MilestoneDef("zero_30", "zero", 30, "◉", "Monthly Zero", "Inbox zero 30 times"),
    MilestoneDef("zero_100", "zero", 100, "✦", "The Minimalist", "Inbox zero 100 times. A way of life."),
    # Streaks
    MilestoneDef("streak_3", "streak", 3, "~", "3-Day Streak", "3 consecutive days reaching inbox zero"),
    MilestoneDef("streak_7", "streak", 7, "≈", "Week Streak", "7-day inbox zero streak"),
    MilestoneDef("streak_14", "streak", 14, "≋", "Fortnight", "14-day streak. This is a practice now."),
    MilestoneDef("streak_30", "streak", 30, "∿", "The Ritual", "30-day streak. You've made peace with email."),
    MilestoneDef(
        "streak_100", "streak", 100, "∞", "Infinite Zero",
        "100-day streak. You may never be bothered again.",
    ),
)


def milestones_by_category(category: str) -> list[MilestoneDef]:
    """Return the milestone definitions of one category, in definition order."""
    return [m for m in MILESTONE_DEFINITIONS if m.category == category]