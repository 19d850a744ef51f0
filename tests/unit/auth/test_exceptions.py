"""Tests for credential loading exceptions."""

import pytest

from debugger_client_core.auth.exceptions import (
    CredentialError,
    CredentialsFileError,
    CredentialsParseError,
    NoDefaultCredentialsError,
)
from debugger_client_core.errors import DebuggerError


class TestCredentialError:
    """Test CredentialError base exception."""

    def test_can_be_raised(self):
        """Test that CredentialError can be raised."""
        with pytest.raises(CredentialError):
            raise CredentialError("Test error")

    def test_is_debugger_error(self):
        """Test that credential errors share the package base exception."""
        with pytest.raises(DebuggerError):
            raise CredentialError("Test error")


class TestCredentialsFileError:
    """Test CredentialsFileError exception."""

    def test_is_credential_error(self):
        """Test that CredentialsFileError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialsFileError("Test error")

    def test_path_attribute(self):
        """Test that path attribute is set."""
        try:
            raise CredentialsFileError("Credentials file not found", path="path/to/keyfile.json")
        except CredentialsFileError as e:
            assert e.path == "path/to/keyfile.json"
            assert str(e) == "Credentials file not found"

    def test_path_optional(self):
        """Test that path is optional."""
        try:
            raise CredentialsFileError("Test error")
        except CredentialsFileError as e:
            assert e.path is None


class TestCredentialsParseError:
    """Test CredentialsParseError exception."""

    def test_is_credential_error(self):
        """Test that CredentialsParseError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialsParseError("Test error")

    def test_source_attribute(self):
        """Test that source attribute is set."""
        try:
            raise CredentialsParseError("Not valid JSON", source="inline JSON")
        except CredentialsParseError as e:
            assert e.source == "inline JSON"


class TestNoDefaultCredentialsError:
    """Test NoDefaultCredentialsError exception."""

    def test_is_credential_error(self):
        """Test that NoDefaultCredentialsError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise NoDefaultCredentialsError("Test error")
