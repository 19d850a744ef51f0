"""Client handle returned by client construction."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Debuggee:
    """The application being debugged, identified by service name and version."""

    service: Any
    service_name: str = ""
    service_version: str = ""

    @property
    def labels(self) -> dict[str, str]:
        """Debuggee labels; empty values are left out."""
        labels = {
            "projectid": getattr(self.service, "project", ""),
            "module": self.service_name,
            "version": self.service_version,
        }
        return {key: value for key, value in labels.items() if value}


@dataclass
class Agent:
    """Holds the debuggee description for the debugger agent."""

    debuggee: Debuggee


class Project:
    """A debugger client bound to one project.

    Attributes:
        service: Transport handle created for the resolved configuration.
        agent: Agent carrying the debuggee metadata.
    """

    def __init__(self, service: Any, agent: Agent):
        self.service = service
        self.agent = agent

    @property
    def project_id(self) -> str:
        return self.service.project

    project = project_id

    def __repr__(self) -> str:
        debuggee = self.agent.debuggee
        return (
            f"Project(project_id={self.project_id!r}, service_name={debuggee.service_name!r}, "
            f"service_version={debuggee.service_version!r})"
        )
