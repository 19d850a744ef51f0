"""Authenticated HTTP service handle for the Cloud Debugger API.

The service stores the resolved project, credentials, timeout and
client_config unchanged and builds its `httpx.Client` lazily, so no
network activity happens at construction time.

Example:
    ```python
    with Service("my-project", credentials, timeout=30) as service:
        response = service.http.get("debugger/debuggees", params={"project": service.project})
    ```
"""

import logging
from collections.abc import Generator, Mapping
from typing import Any

import google.auth.transport.requests
import httpx

logger = logging.getLogger(__name__)

API_HOST = "clouddebugger.googleapis.com"


class CredentialsAuth(httpx.Auth):
    """httpx auth flow applying google-auth credentials to each request."""

    def __init__(self, credentials: Any):
        self.credentials = credentials

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if not self.credentials.valid:
            logger.debug("Refreshing credentials before request")
            self.credentials.refresh(google.auth.transport.requests.Request())
        self.credentials.apply(request.headers)
        yield request


class Service:
    """Transport handle for one project.

    Args:
        project: Resolved project id.
        credentials: Loaded credentials object.
        timeout: Request timeout in seconds; None keeps the httpx default.
        client_config: Client options forwarded as given.
        host: API host, defaults to ``clouddebugger.googleapis.com``.
    """

    def __init__(
        self,
        project: str,
        credentials: Any,
        timeout: float | None = None,
        client_config: Mapping[str, Any] | None = None,
        host: str | None = None,
    ):
        self.project = project
        self.credentials = credentials
        self.timeout = timeout
        self.client_config = client_config
        self.host = host or API_HOST
        self._http: httpx.Client | None = None

    @property
    def http(self) -> httpx.Client:
        """The authenticated HTTP client, created on first access."""
        if self._http is None:
            kwargs: dict[str, Any] = {
                "base_url": f"https://{self.host}/v2/",
                "auth": CredentialsAuth(self.credentials),
            }
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            self._http = httpx.Client(**kwargs)
        return self._http

    def close(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self) -> "Service":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Service(project={self.project!r}, host={self.host!r})"
