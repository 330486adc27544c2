"""Core of a terminal e-mail client: metrics, notifications, commands and themes."""

__version__ = "0.1.0"