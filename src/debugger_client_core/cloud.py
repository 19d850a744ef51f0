"""Shared project/credentials handle that hands out service clients."""

from collections.abc import Mapping, Sequence
from typing import Any

import debugger_client_core


class Cloud:
    """Holds a project id and credentials shared by the clients it creates.

    Example:
        ```python
        cloud = Cloud("my-project", "path/to/keyfile.json")
        debugger = cloud.debugger(service_name="my-service", service_version="v1")
        ```
    """

    def __init__(self, project_id: str | None = None, credentials: Any = None, *, timeout: float | None = None):
        self.project_id = project_id
        self.credentials = credentials
        self.timeout = timeout

    def debugger(
        self,
        service_name: str | None = None,
        service_version: str | None = None,
        scope: str | Sequence[str] | None = None,
        timeout: float | None = None,
        client_config: Mapping[str, Any] | None = None,
    ):
        """Create a debugger client for this project.

        Calls through the package-level ``debugger_client_core.new`` so it
        can be replaced in tests.
        """
        return debugger_client_core.new(
            self.project_id,
            self.credentials,
            service_name=service_name,
            service_version=service_version,
            scope=scope,
            timeout=timeout if timeout is not None else self.timeout,
            client_config=client_config,
        )
