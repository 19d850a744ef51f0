"""Testing utilities for debugger clients.

Test doubles for the collaborators client construction depends on, so tests
inject them instead of patching module globals.

Example:
    ```python
    from debugger_client_core import new
    from debugger_client_core.auth import CredentialsLoader
    from debugger_client_core.testing import FakeEnvironment, RecordingServiceFactory, StubCredentials


    def test_project_from_environment():
        env = FakeEnvironment(project_id="project-id")
        loader = CredentialsLoader(env=env, default=lambda scope=None: StubCredentials())
        services = RecordingServiceFactory()

        debugger = new(env=env, loader=loader, service_factory=services)

        assert debugger.project == "project-id"
    ```
"""

from collections.abc import Mapping
from typing import Any

from debugger_client_core.service import Service


class FakeEnvironment:
    """Environment probe backed by a plain mapping and fixed platform values."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        project_id: str | None = None,
        app_engine_service_id: str | None = None,
        app_engine_service_version: str | None = None,
    ):
        self.environ = dict(environ or {})
        self.project_id = project_id
        self.app_engine_service_id = app_engine_service_id
        self.app_engine_service_version = app_engine_service_version

    def get(self, key: str) -> str | None:
        return self.environ.get(key)


class StubCredentials:
    """Credentials satisfying the auth capability without any network access."""

    def __init__(self, info: Mapping[str, Any] | None = None, scope: Any = None, project_id: str | None = None):
        self.info = dict(info or {})
        self.scope = scope
        self.project_id = project_id
        self.token = "stub-token"
        self.valid = True

    def before_request(self, request, method, url, headers):
        self.apply(headers)

    def apply(self, headers, token=None):
        headers["authorization"] = f"Bearer {token or self.token}"

    def refresh(self, request):
        self.valid = True

    def __eq__(self, other):
        if not isinstance(other, StubCredentials):
            return NotImplemented
        return (self.info, self.scope, self.project_id) == (other.info, other.scope, other.project_id)

    __hash__ = None


class RecordingServiceFactory:
    """Service factory that records every call and returns real `Service` objects."""

    def __init__(self):
        self.calls: list[dict[str, Any]] = []

    def __call__(self, project, credentials, timeout=None, client_config=None):
        self.calls.append(
            {"project": project, "credentials": credentials, "timeout": timeout, "client_config": client_config}
        )
        return Service(project, credentials, timeout=timeout, client_config=client_config)

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]


__all__ = ["FakeEnvironment", "RecordingServiceFactory", "StubCredentials"]
