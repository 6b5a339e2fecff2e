"""Centralized exit codes for the componentgraph CLI."""


class ExitCodes:
    """Standard exit codes for cgraph commands."""

    SUCCESS = 0

    NOT_FOUND = 1

    NO_UNITS = 3
