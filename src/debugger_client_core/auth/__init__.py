"""Authentication components for the debugger client.

This module provides:
- Credentials handles classifying a credentials input (object, key file
  path, inline JSON, or ambient discovery)
- A loader that turns a handle into google-auth credentials

Example:
    ```python
    from debugger_client_core.auth import CredentialsLoader, to_handle

    loader = CredentialsLoader()
    credentials = loader.load(to_handle("path/to/keyfile.json"))
    ```
"""

from debugger_client_core.auth.credentials import DEFAULT_SCOPES, Credentials, CredentialsLoader
from debugger_client_core.auth.exceptions import (
    CredentialError,
    CredentialsFileError,
    CredentialsParseError,
    NoDefaultCredentialsError,
)
from debugger_client_core.auth.handles import (
    AuthCredentials,
    BuiltCredentials,
    CredentialsHandle,
    DefaultDiscovery,
    KeyfileJSON,
    KeyfilePath,
    to_handle,
)

__all__ = [
    "DEFAULT_SCOPES",
    "AuthCredentials",
    "BuiltCredentials",
    "CredentialError",
    "Credentials",
    "CredentialsFileError",
    "CredentialsHandle",
    "CredentialsLoader",
    "CredentialsParseError",
    "DefaultDiscovery",
    "KeyfileJSON",
    "KeyfilePath",
    "NoDefaultCredentialsError",
    "to_handle",
]
