"""Productivity metrics, streaks, milestones and their export."""