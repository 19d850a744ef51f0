"""Ambient environment probe.

Reads hints from the process environment, an optional ``.env`` file, and
the Google Cloud platform the process runs on.

Lookup order for `EnvironmentProbe.get` (first match wins):
1. Process environment (``os.environ`` or an injected mapping)
2. ``.env`` file (python-dotenv)

Platform discovery:
- ``project_id``: GCE metadata server (``project/project-id``)
- ``app_engine_service_id``: ``GAE_SERVICE``
- ``app_engine_service_version``: ``GAE_VERSION``

Example:
    ```python
    from debugger_client_core.environment import EnvironmentProbe

    env = EnvironmentProbe(load_dotenv=False)
    project_id = env.get("GOOGLE_CLOUD_PROJECT") or env.project_id
    ```
"""

import logging
import os
from collections.abc import Mapping
from threading import Lock

import httpx
from dotenv import dotenv_values, find_dotenv

logger = logging.getLogger(__name__)

METADATA_HOST = "169.254.169.254"
METADATA_FLAVOR = "Google"

_UNPROBED = object()


class EnvironmentProbe:
    """Read-only view of the ambient execution environment.

    Attributes:
        _dotenv_loaded: Whether the .env file has been read.
        _dotenv_lock: Thread lock for safe .env loading.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
        metadata_host: str | None = None,
        metadata_timeout: float = 0.5,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize environment probe.

        Args:
            environ: Mapping to read variables from. Defaults to os.environ.
            dotenv_path: Path to .env file. If None, searches upward from the
                working directory.
            load_dotenv: Whether to read a .env file at all.
            metadata_host: Metadata server host. Defaults to
                ``GCE_METADATA_HOST`` or the link-local address 169.254.169.254.
            metadata_timeout: Seconds to wait for the metadata server.
            transport: Optional httpx transport for the metadata request.
        """
        self._environ = environ if environ is not None else os.environ
        self._dotenv: dict[str, str | None] = {}
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv
        self._metadata_host = metadata_host
        self._metadata_timeout = metadata_timeout
        self._transport = transport
        self._project_id = _UNPROBED

    def _ensure_dotenv_loaded(self) -> None:
        """Ensure .env file is read (thread-safe, at most once)."""
        if self._dotenv_loaded or not self._load_dotenv_enabled:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                path = self._dotenv_path or find_dotenv(usecwd=True)
                if path:
                    self._dotenv = dotenv_values(path)
                    logger.debug(f"Loaded .env file for environment lookups: {path}")
            except Exception as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def get(self, key: str) -> str | None:
        """Look up an environment variable, falling back to the .env file."""
        value = self._environ.get(key)
        if value is not None:
            return value
        self._ensure_dotenv_loaded()
        return self._dotenv.get(key)

    @property
    def project_id(self) -> str | None:
        """Project id reported by the metadata server, cached after one probe."""
        if self._project_id is _UNPROBED:
            self._project_id = self._query_metadata("project/project-id")
        return self._project_id

    @property
    def app_engine_service_id(self) -> str | None:
        return self.get("GAE_SERVICE") or None

    @property
    def app_engine_service_version(self) -> str | None:
        return self.get("GAE_VERSION") or None

    def _query_metadata(self, path: str) -> str | None:
        if (self.get("NO_GCE_CHECK") or "").lower() in ("1", "true", "yes"):
            logger.debug("Metadata server check disabled by NO_GCE_CHECK")
            return None

        host = self._metadata_host or self.get("GCE_METADATA_HOST") or METADATA_HOST
        url = f"http://{host}/computeMetadata/v1/{path}"

        try:
            with httpx.Client(transport=self._transport, timeout=self._metadata_timeout) as client:
                response = client.get(url, headers={"Metadata-Flavor": METADATA_FLAVOR})
        except httpx.HTTPError as e:
            logger.debug(f"Metadata server unavailable at {host}: {e}")
            return None

        if response.status_code != 200 or response.headers.get("Metadata-Flavor") != METADATA_FLAVOR:
            logger.debug(f"Metadata server returned {response.status_code} for {path}")
            return None

        return response.text.strip() or None


_default_environment: EnvironmentProbe | None = None


def default_environment() -> EnvironmentProbe:
    """Return the process-wide environment probe."""
    global _default_environment
    if _default_environment is None:
        _default_environment = EnvironmentProbe()
    return _default_environment
