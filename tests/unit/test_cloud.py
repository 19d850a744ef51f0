"""Tests for the Cloud handle."""

import pytest

import debugger_client_core
from debugger_client_core import Cloud


@pytest.fixture
def recorded_new(monkeypatch):
    calls = []

    def fake_new(project_id=None, credentials=None, **kwargs):
        calls.append({"project_id": project_id, "credentials": credentials, **kwargs})
        return "debugger-project-object"

    monkeypatch.setattr(debugger_client_core, "new", fake_new)
    return calls


class TestCloudDebugger:
    """Test Cloud.debugger forwarding."""

    def test_forwards_nothing_when_empty(self, recorded_new):
        assert Cloud().debugger() == "debugger-project-object"

        assert recorded_new == [
            {
                "project_id": None,
                "credentials": None,
                "service_name": None,
                "service_version": None,
                "scope": None,
                "timeout": None,
                "client_config": None,
            }
        ]

    def test_forwards_project_and_keyfile(self, recorded_new):
        Cloud("project-id", "keyfile-path").debugger()

        assert recorded_new[0]["project_id"] == "project-id"
        assert recorded_new[0]["credentials"] == "keyfile-path"
        assert recorded_new[0]["service_name"] is None

    def test_forwards_options(self, recorded_new):
        Cloud("project-id", "keyfile-path").debugger(
            service_name="utest-service",
            service_version="vUTest",
            scope="http://example.com/scope",
            timeout=60,
            client_config={"gax": "options"},
        )

        assert recorded_new[0] == {
            "project_id": "project-id",
            "credentials": "keyfile-path",
            "service_name": "utest-service",
            "service_version": "vUTest",
            "scope": "http://example.com/scope",
            "timeout": 60,
            "client_config": {"gax": "options"},
        }

    def test_uses_own_timeout_when_none_given(self, recorded_new):
        Cloud("project-id", timeout=30).debugger()

        assert recorded_new[0]["timeout"] == 30
