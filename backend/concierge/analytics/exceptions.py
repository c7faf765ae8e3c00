"""Errors raised by the analytics engine."""


class AnalyticsStoreError(Exception):
    """A read from the backing store failed; no partial result is produced."""
