"""
Errors raised by the capture steps.
"""


class CaptureError(Exception):
    """Base class for a failed capture step. Wraps the underlying exception."""

    def __init__(self, cause: BaseException):
        super().__init__(str(cause))
        self.cause = cause


class InputReadError(CaptureError):
    """Standard input could not be read or decoded."""


class OutputWriteError(CaptureError):
    """The target file could not be written or measured."""
