"""Structured exceptions for client construction."""


class DebuggerError(Exception):
    """Base exception for debugger client errors."""

    pass


class MissingProjectError(DebuggerError):
    """Raised when no project identifier can be resolved.

    Every source is consulted before this is raised: explicit arguments,
    the debugger and shared configuration, the environment, and finally
    the project id embedded in the loaded credentials.

    Attributes:
        checked: Names of the sources that were consulted, in order.
    """

    def __init__(self, message: str, checked: tuple[str, ...] = ()):
        super().__init__(message)
        self.checked = checked
