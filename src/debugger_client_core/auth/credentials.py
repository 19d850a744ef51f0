"""Credential loading for the debugger client.

This module turns a credentials handle into an authenticated
`google.auth` credentials object.

Loading rules per handle:
1. BuiltCredentials - returned unchanged
2. KeyfilePath - file read once, parsed as JSON, built with google-auth
3. KeyfileJSON - parsed as JSON, built with google-auth
4. DefaultDiscovery - debugger key file environment variables, then
   Application Default Credentials

Example:
    ```python
    from debugger_client_core.auth import CredentialsLoader, to_handle

    loader = CredentialsLoader()

    # From a service account key file
    credentials = loader.load(to_handle("path/to/keyfile.json"))

    # From ambient credentials (gcloud, metadata server, ...)
    credentials = loader.load(to_handle(None), scope=["https://www.googleapis.com/auth/cloud-platform"])
    ```

Security Considerations:
    - Key material is never logged (masked with ***)
    - Only source information is logged (env var name, file path, etc.)
"""

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import google.auth
import google.auth.exceptions

from debugger_client_core.auth.exceptions import (
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
)
from debugger_client_core.environment import EnvironmentProbe, default_environment

logger = logging.getLogger(__name__)

Scope = str | Sequence[str] | None

DEFAULT_SCOPES = (
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/cloud_debugger",
)

PATH_ENV_VARS = (
    "DEBUGGER_CREDENTIALS",
    "DEBUGGER_KEYFILE",
    "GOOGLE_CLOUD_CREDENTIALS",
    "GOOGLE_CLOUD_KEYFILE",
    "GCLOUD_KEYFILE",
)

JSON_ENV_VARS = (
    "DEBUGGER_CREDENTIALS_JSON",
    "DEBUGGER_KEYFILE_JSON",
    "GOOGLE_CLOUD_CREDENTIALS_JSON",
    "GOOGLE_CLOUD_KEYFILE_JSON",
    "GCLOUD_KEYFILE_JSON",
)


def _scopes(scope: Scope) -> list[str] | None:
    if scope is None:
        return None
    if isinstance(scope, str):
        return [scope]
    return list(scope)


class Credentials:
    """Thin adapter over google-auth used to build credentials objects.

    Both constructors apply `DEFAULT_SCOPES` only when the caller passes
    no scope of its own.
    """

    @staticmethod
    def from_info(info: Mapping[str, Any], scope: Scope = None) -> Any:
        """Build credentials from parsed key material.

        Args:
            info: Parsed JSON key (service account, authorized user, ...).
            scope: Optional OAuth scope or list of scopes.

        Returns:
            A `google.auth.credentials.Credentials` instance. When the key
            names a project it is exposed as ``project_id``.

        Raises:
            google.auth.exceptions.DefaultCredentialsError: If the key
                material is not a credential type google-auth understands.
        """
        credentials, project_id = google.auth.load_credentials_from_dict(
            dict(info), scopes=_scopes(scope), default_scopes=DEFAULT_SCOPES
        )
        if project_id and not getattr(credentials, "project_id", None):
            try:
                credentials.project_id = project_id
            except AttributeError:
                logger.debug("Credentials object does not accept a project_id attribute")
        return credentials

    @staticmethod
    def default(scope: Scope = None) -> Any:
        """Build Application Default Credentials.

        Raises:
            google.auth.exceptions.DefaultCredentialsError: If the
                environment offers no credentials.
        """
        credentials, _ = google.auth.default(scopes=_scopes(scope), default_scopes=DEFAULT_SCOPES)
        return credentials


class CredentialsLoader:
    """Load a credentials handle into an authenticated credentials object.

    The google-auth constructors are injected so tests can substitute
    them without patching module globals.

    Attributes:
        env: Environment probe consulted for the key file variables.
    """

    def __init__(
        self,
        *,
        env: EnvironmentProbe | None = None,
        from_info: Callable[..., Any] | None = None,
        default: Callable[..., Any] | None = None,
    ):
        """Initialize credentials loader.

        Args:
            env: Environment probe. Defaults to the process-wide probe.
            from_info: Callable ``(info, scope=...)`` building credentials
                from parsed key material. Defaults to `Credentials.from_info`.
            default: Callable ``(scope=...)`` returning ambient credentials.
                Defaults to `Credentials.default`.
        """
        self.env = env if env is not None else default_environment()
        self._from_info = from_info or Credentials.from_info
        self._default = default or Credentials.default

    def load(self, handle: CredentialsHandle, scope: Scope = None) -> Any:
        """Load credentials for a handle.

        Args:
            handle: One of the `CredentialsHandle` variants.
            scope: Optional OAuth scope list, forwarded unchanged.

        Returns:
            Authenticated credentials object.

        Raises:
            CredentialsFileError: Key file missing or unreadable.
            CredentialsParseError: Key material is not a JSON object.
            NoDefaultCredentialsError: Default discovery found nothing.
        """
        if isinstance(handle, BuiltCredentials):
            if not isinstance(handle.credentials, AuthCredentials):
                logger.debug(
                    f"Passing through credentials of type {type(handle.credentials).__name__} "
                    "without the expected auth capability"
                )
            return handle.credentials

        if isinstance(handle, KeyfilePath):
            info = self._read_keyfile(handle.path)
            logger.debug(f"Loaded credentials from key file: {handle.path} (***)")
            return self._from_info(info, scope=scope)

        if isinstance(handle, KeyfileJSON):
            info = self._parse_json(handle.payload, source="inline JSON")
            logger.debug("Loaded credentials from inline JSON (***)")
            return self._from_info(info, scope=scope)

        if isinstance(handle, DefaultDiscovery):
            return self._discover(scope)

        raise TypeError(f"Unsupported credentials handle: {handle!r}")

    def _read_keyfile(self, path: str) -> dict[str, Any]:
        path_obj = Path(path)
        if not path_obj.is_file():
            raise CredentialsFileError(f"Credentials file not found: {path_obj}", path=str(path))

        try:
            content = path_obj.read_text()
        except PermissionError:
            raise CredentialsFileError(
                f"Permission denied reading credentials file: {path_obj}", path=str(path)
            ) from None
        except OSError as e:
            raise CredentialsFileError(f"Error reading credentials file {path_obj}: {e}", path=str(path)) from e

        return self._parse_json(content, source=str(path))

    def _parse_json(self, payload: str | Mapping[str, Any], *, source: str) -> dict[str, Any]:
        if isinstance(payload, Mapping):
            return dict(payload)

        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise CredentialsParseError(f"Credentials from {source} are not valid JSON: {e.msg}", source=source) from e

        if not isinstance(data, dict):
            raise CredentialsParseError(f"Credentials from {source} must be a JSON object", source=source)
        return data

    def _discover(self, scope: Scope) -> Any:
        for var in PATH_ENV_VARS:
            path = self.env.get(var)
            if path:
                logger.debug(f"Resolved key file path from environment variable '{var}'")
                info = self._read_keyfile(path)
                return self._from_info(info, scope=scope)

        for var in JSON_ENV_VARS:
            payload = self.env.get(var)
            if payload:
                logger.debug(f"Resolved key material from environment variable '{var}': ***")
                info = self._parse_json(payload, source=f"environment variable '{var}'")
                return self._from_info(info, scope=scope)

        try:
            credentials = self._default(scope=scope)
        except google.auth.exceptions.DefaultCredentialsError as e:
            raise NoDefaultCredentialsError(f"No default credentials could be discovered: {e}") from e
        if credentials is None:
            raise NoDefaultCredentialsError("No default credentials could be discovered")

        logger.debug("Resolved credentials from Application Default Credentials")
        return credentials
