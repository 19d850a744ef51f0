"""Process-wide shared configuration and service configuration scopes.

The shared scope holds defaults every service inherits (project id and
credentials). Service modules register their own sub-scope with
`register_service`; each sub-scope is chained to the shared scope as its
parent.

Lifecycle:
    - `init()` builds the shared scope once and installs registered services
    - `configure(**options)` sets shared options
    - `reset()` clears every option, sub-scopes included
    - `teardown()` drops the scope so the next `init()` starts fresh
"""

import logging
from collections.abc import Callable
from typing import Any

from debugger_client_core.config.scope import Config

logger = logging.getLogger(__name__)


class SharedConfig(Config):
    """Cross-service defaults: ``project_id``/``project`` and ``credentials``/``keyfile``."""

    def __init__(self):
        super().__init__()
        self.add_option("project_id")
        self.add_alias("project", "project_id")
        self.add_option("credentials")
        self.add_alias("keyfile", "credentials")


class ServiceConfig(Config):
    """Service-level defaults, falling back to a `SharedConfig` parent.

    Options: ``project_id``/``project``, ``credentials``/``keyfile``,
    ``scope``, ``timeout``, ``client_config``, ``service_name`` and
    ``service_version``.
    """

    def __init__(self, parent: Config | None = None):
        super().__init__(parent=parent)
        self.add_option("project_id")
        self.add_alias("project", "project_id")
        self.add_option("credentials")
        self.add_alias("keyfile", "credentials")
        self.add_option("scope")
        self.add_option("timeout")
        self.add_option("client_config")
        self.add_option("service_name")
        self.add_option("service_version")


ServiceFactory = Callable[[SharedConfig], Config]

_shared: SharedConfig | None = None
_services: dict[str, ServiceFactory] = {}


def init() -> SharedConfig:
    """Return the shared scope, building it on first use."""
    global _shared
    if _shared is None:
        _shared = SharedConfig()
        for name, factory in _services.items():
            _shared.add_config(name, factory(_shared))
    return _shared


def register_service(name: str, factory: ServiceFactory = ServiceConfig) -> None:
    """Register a service sub-scope under ``name``.

    If the shared scope already exists the sub-scope is installed right away.
    Registering the same name twice is a no-op.
    """
    if name in _services:
        return
    _services[name] = factory
    if _shared is not None:
        _shared.add_config(name, factory(_shared))
    logger.debug(f"Registered configuration scope '{name}'")


def configure(**options: Any) -> SharedConfig:
    """Set shared options and return the shared scope.

    Example:
        ```python
        configure(project="my-project", keyfile="path/to/keyfile.json")
        ```
    """
    config = init()
    for name, value in options.items():
        config.set(name, value)
    return config


def reset() -> None:
    """Restore every shared and service option to unset."""
    if _shared is not None:
        _shared.reset()


def teardown() -> None:
    """Drop the shared scope; registered services survive for the next `init()`."""
    global _shared
    _shared = None
