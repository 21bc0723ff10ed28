"""Exceptions raised by stream outputs."""


class OutputError(Exception):
    """Base class for output errors."""


class InvalidStreamError(OutputError, TypeError):
    """Raised when an output is built on something that is not a writable byte stream."""


class OutputWriteError(OutputError, OSError):
    """Raised when the underlying stream fails to accept a write."""
