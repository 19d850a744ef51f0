"""Configuration scopes for the debugger client.

Example:
    ```python
    from debugger_client_core import config

    config.configure(project="my-project")
    assert config.init().debugger.project_id == "my-project"
    ```
"""

from debugger_client_core.config.scope import Config
from debugger_client_core.config.shared import (
    ServiceConfig,
    SharedConfig,
    configure,
    init,
    register_service,
    reset,
    teardown,
)

__all__ = [
    "Config",
    "ServiceConfig",
    "SharedConfig",
    "configure",
    "init",
    "register_service",
    "reset",
    "teardown",
]
