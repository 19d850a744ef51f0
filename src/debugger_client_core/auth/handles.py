"""Credentials handles: the unloaded form of a credentials input.

A handle records *where* credentials come from without touching the
filesystem or the network. `to_handle` classifies whatever value the
resolver settled on; `CredentialsLoader.load` turns the handle into an
authenticated object.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AuthCredentials(Protocol):
    """Capability expected from an authenticated credentials object.

    Satisfied by every `google.auth.credentials.Credentials` subclass.
    """

    def before_request(self, request: Any, method: str, url: str, headers: Any) -> None: ...

    def apply(self, headers: Any, token: str | None = None) -> None: ...

    def refresh(self, request: Any) -> None: ...


@dataclass(frozen=True)
class BuiltCredentials:
    """An already-constructed credentials object, passed through as-is."""

    credentials: Any


@dataclass(frozen=True)
class KeyfilePath:
    """Path to a JSON key file on the local filesystem."""

    path: str


@dataclass(frozen=True)
class KeyfileJSON:
    """Inline key material, either raw JSON text or an already-parsed mapping."""

    payload: str | Mapping[str, Any]


@dataclass(frozen=True)
class DefaultDiscovery:
    """Defer to the ambient credentials of the execution environment."""


CredentialsHandle = BuiltCredentials | KeyfilePath | KeyfileJSON | DefaultDiscovery


def to_handle(value: Any) -> CredentialsHandle:
    """Classify a credentials input.

    Args:
        value: None, a key file path, inline JSON text, a parsed key mapping,
            or a credentials object.

    Returns:
        The matching handle variant. A string naming an existing file is a
        key file path; otherwise text starting with `{` is inline JSON and any
        other string is a path, so a missing file surfaces as
        `CredentialsFileError` on load.
    """
    if isinstance(value, (BuiltCredentials, KeyfilePath, KeyfileJSON, DefaultDiscovery)):
        return value
    if value is None:
        return DefaultDiscovery()
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if isinstance(value, str):
        if not value.strip():
            return DefaultDiscovery()
        if os.path.isfile(value):
            return KeyfilePath(value)
        if value.lstrip().startswith("{"):
            return KeyfileJSON(value)
        return KeyfilePath(value)
    if isinstance(value, Mapping):
        return KeyfileJSON(value)
    return BuiltCredentials(value)
