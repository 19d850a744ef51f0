"""Error types raised while constructing a debugger client."""

from debugger_client_core.errors.exceptions import DebuggerError, MissingProjectError

__all__ = [
    "DebuggerError",
    "MissingProjectError",
]
