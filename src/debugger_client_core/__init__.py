"""Debugger Client Core - configuration and credential resolution for Cloud Debugger clients.

This library builds a debugger client from whatever configuration is at hand:
- Explicit arguments, with ``project``/``keyfile`` accepted as aliases
- A debugger configuration scope inheriting from process-wide shared defaults
- Environment variables, ``.env`` files and Google Cloud platform discovery
- Credentials given as an object, a key file path, or inline JSON

Example:
    ```python
    import debugger_client_core
    from debugger_client_core import config

    # Shared defaults for every service
    config.configure(project="my-project", keyfile="path/to/keyfile.json")

    # Debugger-only defaults
    debugger_client_core.configure(timeout=30)

    debugger = debugger_client_core.new(service_name="my-service", service_version="v1")
    ```
"""

from debugger_client_core.client import build, configure, new
from debugger_client_core.cloud import Cloud
from debugger_client_core.project import Agent, Debuggee, Project

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Agent",
    "Cloud",
    "Debuggee",
    "Project",
    "build",
    "configure",
    "new",
]
