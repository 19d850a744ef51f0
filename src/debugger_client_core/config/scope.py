"""Configuration scopes with aliases, sub-scopes and parent fallback.

A `Config` holds named options. Each option has exactly one backing value;
aliases are extra accessor names for the same value. A scope created with a
parent defers reads of unset options to the parent's option of the same
name, which is how service scopes inherit shared defaults.

Example:
    ```python
    shared = Config()
    shared.add_option("project_id")
    shared.add_alias("project", "project_id")

    service = Config(parent=shared)
    service.add_option("project_id")

    shared.project = "my-project"
    assert service.project_id == "my-project"
    ```
"""

from typing import Any

_UNSET = object()


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value)


class Config:
    """A named set of options, aliases and nested configuration scopes."""

    def __init__(self, parent: "Config | None" = None):
        object.__setattr__(self, "_parent", parent)
        object.__setattr__(self, "_defaults", {})
        object.__setattr__(self, "_values", {})
        object.__setattr__(self, "_aliases", {})
        object.__setattr__(self, "_configs", {})

    @property
    def parent(self) -> "Config | None":
        return self._parent

    def add_option(self, name: str, default: Any = None) -> None:
        """Register an option with a default returned while it is unset."""
        self._check_free(name)
        self._defaults[name] = default

    def add_alias(self, alias: str, name: str) -> None:
        """Register ``alias`` as a second accessor name for option ``name``."""
        if name not in self._defaults:
            raise ValueError(f"Cannot alias unknown option '{name}'")
        self._check_free(alias)
        self._aliases[alias] = name

    def add_config(self, name: str, config: "Config | None" = None) -> "Config":
        """Register a nested configuration scope and return it."""
        self._check_free(name)
        if config is None:
            config = Config(parent=self)
        self._configs[name] = config
        return config

    def is_option(self, name: str) -> bool:
        """Whether ``name`` is a recognized option, alias or nested scope."""
        return name in self._defaults or name in self._aliases or name in self._configs

    def is_set(self, name: str) -> bool:
        """Whether this scope holds its own value for ``name``."""
        return self._canonical(name) in self._values

    def get(self, name: str) -> Any:
        """Read an option, falling back to the parent scope, then the default.

        `None` and empty strings count as unset at every level.
        """
        if name in self._configs:
            return self._configs[name]
        canonical = self._canonical(name)
        if canonical not in self._defaults:
            raise AttributeError(f"'{name}' is not a configuration option")

        value = self._values.get(canonical, _UNSET)
        if value is not _UNSET and not _is_blank(value):
            return value
        if self._parent is not None and self._parent.is_option(canonical):
            inherited = self._parent.get(canonical)
            if not _is_blank(inherited):
                return inherited
        return self._defaults[canonical]

    def set(self, name: str, value: Any) -> None:
        if name in self._configs:
            raise AttributeError(f"'{name}' is a configuration scope and cannot be assigned")
        canonical = self._canonical(name)
        if canonical not in self._defaults:
            raise AttributeError(f"'{name}' is not a configuration option")
        self._values[canonical] = value

    def reset(self) -> None:
        """Clear every option in this scope and in all nested scopes."""
        self._values.clear()
        for config in self._configs.values():
            config.reset()

    def to_dict(self) -> dict[str, Any]:
        """Effective option values, nested scopes included."""
        data = {name: self.get(name) for name in self._defaults}
        for name, config in self._configs.items():
            data[name] = config.to_dict()
        return data

    def _canonical(self, name: str) -> str:
        return self._aliases.get(name, name)

    def _check_free(self, name: str) -> None:
        if self.is_option(name):
            raise ValueError(f"Configuration name '{name}' is already registered")

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        self.set(name, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
