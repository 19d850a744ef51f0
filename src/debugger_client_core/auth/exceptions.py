"""Custom exceptions for credential loading.

This module defines exceptions raised while turning a credentials input
(key file path, inline JSON, or ambient discovery) into an authenticated
credentials object.

Example:
    ```python
    from debugger_client_core.auth.exceptions import CredentialsFileError

    try:
        credentials = loader.load(KeyfilePath("path/to/keyfile.json"))
    except CredentialsFileError as e:
        print(f"Cannot read key file: {e.path}")
    ```
"""

from debugger_client_core.errors.exceptions import DebuggerError


class CredentialError(DebuggerError):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialsFileError(CredentialError):
    """Raised when a key file does not exist or cannot be read.

    Attributes:
        path: The key file path that was requested.
    """

    def __init__(self, message: str, path: str | None = None):
        """Initialize CredentialsFileError.

        Args:
            message: Error message describing the failure.
            path: Optional key file path for reference.
        """
        super().__init__(message)
        self.path = path


class CredentialsParseError(CredentialError):
    """Raised when key material is not a valid JSON object.

    Attributes:
        source: Where the malformed payload came from (a file path,
            an environment variable name, or "inline JSON").
    """

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class NoDefaultCredentialsError(CredentialError):
    """Raised when default discovery finds no credentials in the environment."""

    pass
