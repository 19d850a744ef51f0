"""Debugger client construction.

`new` resolves the project, credentials and service options, then `build`
wraps the transport handle and debuggee metadata into a `Project`.

Importing this module registers the ``debugger`` configuration scope on
the shared configuration.

Example:
    ```python
    import debugger_client_core

    debugger = debugger_client_core.new(
        project_id="my-project",
        credentials="path/to/keyfile.json",
        service_name="my-service",
        service_version="v1",
    )
    print(debugger.project)
    ```
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from debugger_client_core.auth.credentials import CredentialsLoader
from debugger_client_core.config import shared
from debugger_client_core.config.scope import Config
from debugger_client_core.environment import EnvironmentProbe, default_environment
from debugger_client_core.project import Agent, Debuggee, Project
from debugger_client_core.resolver import ExplicitArgs, ResolvedConfig, resolve
from debugger_client_core.service import Service

logger = logging.getLogger(__name__)

SERVICE_SCOPE = "debugger"

shared.register_service(SERVICE_SCOPE, shared.ServiceConfig)


def configure(**options: Any) -> Config:
    """Set debugger options and return the debugger configuration scope.

    The returned object is the same one reachable as
    ``config.init().debugger``.
    """
    config = shared.init().get(SERVICE_SCOPE)
    for name, value in options.items():
        config.set(name, value)
    return config


def build(resolved: ResolvedConfig, service_factory: Callable[..., Any] = Service) -> Project:
    """Construct the client for a resolved configuration.

    Transport construction errors propagate unchanged.
    """
    service = service_factory(
        resolved.project_id,
        resolved.credentials,
        timeout=resolved.timeout,
        client_config=resolved.client_config,
    )
    debuggee = Debuggee(service, resolved.service_name, resolved.service_version)
    logger.debug(f"Built debugger client for project {resolved.project_id}")
    return Project(service, Agent(debuggee))


def new(
    project_id: str | None = None,
    credentials: Any = None,
    *,
    project: str | None = None,
    keyfile: Any = None,
    service_name: str | None = None,
    service_version: str | None = None,
    scope: str | Sequence[str] | None = None,
    timeout: float | None = None,
    client_config: Mapping[str, Any] | None = None,
    config: Config | None = None,
    env: EnvironmentProbe | None = None,
    loader: CredentialsLoader | None = None,
    service_factory: Callable[..., Any] | None = None,
) -> Project:
    """Create a debugger client.

    Args:
        project_id: Project id. Alias: ``project``.
        credentials: Credentials object, key file path or inline JSON.
            Alias: ``keyfile``.
        service_name: Name of the debugged service.
        service_version: Version of the debugged service.
        scope: OAuth scope(s) for the credentials.
        timeout: Request timeout in seconds.
        client_config: Client options forwarded to the service.
        config: Configuration scope to resolve against. Defaults to the
            ``debugger`` scope of the shared configuration.
        env: Environment probe. Defaults to the process-wide probe.
        loader: Credentials loader. Defaults to one bound to ``env``.
        service_factory: Callable building the transport handle.

    Returns:
        The debugger client.

    Raises:
        MissingProjectError: If no project id can be resolved.
        CredentialError: If the credentials cannot be loaded.
    """
    if config is None:
        config = shared.init().get(SERVICE_SCOPE)
    if env is None:
        env = default_environment()
    if loader is None:
        loader = CredentialsLoader(env=env)

    explicit = ExplicitArgs(
        project_id=project_id,
        project=project,
        credentials=credentials,
        keyfile=keyfile,
        service_name=service_name,
        service_version=service_version,
        scope=scope,
        timeout=timeout,
        client_config=client_config,
    )
    resolved = resolve(explicit, config, env, loader)
    return build(resolved, service_factory=service_factory or Service)
