"""Resolution of client construction parameters.

Merges explicit arguments, the debugger configuration scope (which itself
falls back to the shared scope) and the ambient environment into one
`ResolvedConfig`.

Resolution order per field (first non-empty value wins):
1. Explicit argument (the primary name before its alias)
2. Service configuration
3. Shared configuration, through the service scope's parent
4. Environment (project id, service name and service version only)
5. Built-in default; the project id has none

When no project id is found, the project id embedded in the loaded
credentials (e.g. a service account key) is used as a last resort.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from debugger_client_core.auth.credentials import CredentialsLoader
from debugger_client_core.auth.handles import to_handle
from debugger_client_core.config.scope import Config
from debugger_client_core.environment import EnvironmentProbe
from debugger_client_core.errors.exceptions import MissingProjectError

logger = logging.getLogger(__name__)

PROJECT_ENV_VARS = ("DEBUGGER_PROJECT", "GOOGLE_CLOUD_PROJECT", "GCLOUD_PROJECT")


@dataclass(frozen=True)
class ExplicitArgs:
    """Arguments supplied at the call site; ``None`` means not supplied."""

    project_id: str | None = None
    project: str | None = None
    credentials: Any = None
    keyfile: Any = None
    service_name: str | None = None
    service_version: str | None = None
    scope: str | Sequence[str] | None = None
    timeout: float | None = None
    client_config: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class ResolvedConfig:
    """Final client construction parameters with credentials already loaded."""

    project_id: str
    credentials: Any
    service_name: str = ""
    service_version: str = ""
    scope: str | Sequence[str] | None = None
    timeout: float | None = None
    client_config: Mapping[str, Any] | None = None


def _first(*candidates: tuple[str, Any]) -> tuple[str | None, Any]:
    for source, value in candidates:
        if value is None or (isinstance(value, str) and not value):
            continue
        return source, value
    return None, None


def resolve(
    explicit: ExplicitArgs,
    service_config: Config,
    env: EnvironmentProbe,
    loader: CredentialsLoader,
) -> ResolvedConfig:
    """Resolve every client parameter.

    Args:
        explicit: Call-site arguments.
        service_config: Service scope; unset options defer to its parent.
        env: Environment probe for project id and service metadata.
        loader: Loader that turns the resolved credentials input into an
            authenticated object.

    Returns:
        The resolved configuration.

    Raises:
        MissingProjectError: No project id in any source.
        CredentialError: Propagated from the loader.
    """
    source, project_id = _first(
        ("explicit project_id", explicit.project_id),
        ("explicit project", explicit.project),
        ("configuration", service_config.project_id),
        *((f"environment variable '{var}'", env.get(var)) for var in PROJECT_ENV_VARS),
    )
    if project_id is None:
        source, project_id = _first(("platform metadata", env.project_id))
    if project_id is not None:
        logger.debug(f"Resolved project_id from {source}: {project_id}")

    credentials_source, credentials_input = _first(
        ("explicit credentials", explicit.credentials),
        ("explicit keyfile", explicit.keyfile),
        ("configuration", service_config.credentials),
    )
    logger.debug(f"Resolved credentials from {credentials_source or 'default discovery'}: ***")

    _, scope = _first(("explicit scope", explicit.scope), ("configuration", service_config.scope))
    _, service_name = _first(
        ("explicit service_name", explicit.service_name),
        ("configuration", service_config.service_name),
        ("platform", env.app_engine_service_id),
    )
    _, service_version = _first(
        ("explicit service_version", explicit.service_version),
        ("configuration", service_config.service_version),
        ("platform", env.app_engine_service_version),
    )
    timeout = explicit.timeout if explicit.timeout is not None else service_config.timeout
    client_config = explicit.client_config if explicit.client_config is not None else service_config.client_config

    credentials = loader.load(to_handle(credentials_input), scope=scope)

    if project_id is None:
        project_id = getattr(credentials, "project_id", None) or None
        if project_id is not None:
            logger.debug(f"Resolved project_id from credentials: {project_id}")

    if project_id is None:
        raise MissingProjectError(
            "project_id is missing; pass project_id, configure it, or set DEBUGGER_PROJECT",
            checked=("explicit", "configuration", "environment", "credentials"),
        )

    return ResolvedConfig(
        project_id=str(project_id),
        credentials=credentials,
        service_name=service_name or "",
        service_version=service_version or "",
        scope=scope,
        timeout=timeout,
        client_config=client_config,
    )
