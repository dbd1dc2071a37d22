"""Error taxonomy for the reporting core.

Errors raised by wrapped step bodies and by the attachment store are not
represented here: they propagate to the caller unchanged.
"""


class ReportingError(Exception):
    """Base class for errors raised by the reporting core itself."""


class NoActiveExecutableError(ReportingError):
    """No step, test or fallback root executable is installed.

    This indicates a wiring defect: a root executable should be installed
    when the execution unit starts.
    """

    def __init__(self, message: str = "No executable is active") -> None:
        super().__init__(message)


class NoActiveTestError(ReportingError):
    """An operation that needs a running test was called outside of one."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Expected a test to be executing before calling {operation}()"
        )
