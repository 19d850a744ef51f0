"""Test basic package functionality."""

import debugger_client_core


def test_version():
    """Test that package version is defined."""
    assert hasattr(debugger_client_core, "__version__")
    assert debugger_client_core.__version__ == "0.1.0"
