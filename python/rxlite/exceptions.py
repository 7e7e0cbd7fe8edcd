"""Exceptions for reactive stream operations."""


class StreamError(Exception):
    """Base exception for stream errors."""


class EventSourceError(StreamError):
    """Event attribute is missing or does not support handler registration."""
