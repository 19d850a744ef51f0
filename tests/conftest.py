"""Pytest configuration and shared fixtures for debugger-client-core tests."""

import pytest

from debugger_client_core import config
from debugger_client_core.auth import CredentialsLoader
from debugger_client_core.testing import FakeEnvironment, RecordingServiceFactory, StubCredentials


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear debugger and Google Cloud environment variables before each test.

    This prevents the developer's own gcloud setup from leaking into resolution tests.
    """
    import os

    test_prefixes = ("DEBUGGER_", "GOOGLE_", "GCLOUD_", "GAE_", "GCE_", "NO_GCE_CHECK")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture(autouse=True)
def reset_config():
    """Auto-cleanup: Reset the shared configuration after each test."""
    yield
    config.reset()


@pytest.fixture
def default_credentials():
    return StubCredentials(info={"type": "default"})


@pytest.fixture
def env():
    """Environment with nothing set and no platform discovery."""
    return FakeEnvironment()


@pytest.fixture
def loader_factory(default_credentials):
    """Build a loader whose google-auth constructors are stubbed."""

    def factory(env):
        return CredentialsLoader(
            env=env,
            from_info=lambda info, scope=None: StubCredentials(info, scope),
            default=lambda scope=None: default_credentials,
        )

    return factory


@pytest.fixture
def loader(loader_factory, env):
    return loader_factory(env)


@pytest.fixture
def services():
    return RecordingServiceFactory()


@pytest.fixture
def keyfile(tmp_path):
    """Path to a key file containing an empty JSON object."""
    path = tmp_path / "keyfile.json"
    path.write_text("{}")
    return str(path)
