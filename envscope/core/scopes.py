"""Scope handling.

A scope names a deployment context (``development``, ``production``, ...)
selected by the ``NODE_ENV`` source key. When scopes are enabled, every
schema key is looked up under the scope's prefix, e.g. ``DEV_PORT``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeVar

from envscope.utils.constant import DEFAULT_SCOPES, SCOPE_SEPARATOR

ConfigT = TypeVar("ConfigT")


@dataclass(frozen=True)
class ManagerConfig:
    """Options for building a manager.

    Attributes:
        enable_scopes: Look variables up under the current scope's prefix.
        scopes: Scope-to-prefix entries overlaid on the default table.
    """

    enable_scopes: bool = False
    scopes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate field types.

        Raises:
            TypeError: If ``enable_scopes`` is not a bool or ``scopes`` is not a mapping.
        """
        if not isinstance(self.enable_scopes, bool):
            raise TypeError(f"enable_scopes must be a bool, got {self.enable_scopes!r}")
        if not isinstance(self.scopes, Mapping):
            raise TypeError("scopes must be a mapping of scope name to prefix")

    @classmethod
    def from_value(cls, config: ManagerConfig | Mapping[str, Any] | None) -> ManagerConfig:
        """Build a config from an instance, a mapping literal, or None.

        Mapping literals may use ``enable_scopes`` or ``enableScopes``.

        Args:
            config: The user-supplied configuration.

        Returns:
            A ``ManagerConfig``; defaults when ``config`` is None.

        Raises:
            TypeError: If the value or one of its fields has the wrong type.
        """
        if config is None:
            return cls()
        if isinstance(config, ManagerConfig):
            return config
        if not isinstance(config, Mapping):
            raise TypeError(f"config must be a mapping, got {type(config).__name__}")

        unknown = set(config) - {"enable_scopes", "enableScopes", "scopes"}
        if unknown:
            raise TypeError(f"Unknown config fields: {sorted(unknown)}")

        enable_scopes = config.get("enable_scopes", config.get("enableScopes", False))
        scopes = config.get("scopes")
        return cls(enable_scopes=enable_scopes, scopes={} if scopes is None else scopes)


class ScopeTable(Mapping[str, str]):
    """Read-only scope-to-prefix table.

    Built once by overlaying user entries on the defaults; a user entry
    replaces the default with the same name and defaults are never removed.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        """Initialize the table.

        Args:
            overrides: Entries that extend or replace the defaults.

        Raises:
            TypeError: If a scope name or prefix is not a string.
        """
        table = dict(DEFAULT_SCOPES)
        for name, prefix in (overrides or {}).items():
            if not isinstance(name, str) or not isinstance(prefix, str):
                raise TypeError(f"Scope entries must map str to str, got {name!r}: {prefix!r}")
            table[name] = prefix
        self._table = MappingProxyType(table)

    def __getitem__(self, scope: str) -> str:
        return self._table[scope]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ScopeTable({dict(self._table)!r})"

    def prefixed(self, scope: str, name: str) -> str:
        """Return the lookup key for ``name`` under ``scope``.

        An empty prefix still yields a leading separator (``"_NAME"``).

        Args:
            scope: A scope present in the table.
            name: Schema key.

        Returns:
            The prefixed lookup key.
        """
        return f"{self._table[scope]}{SCOPE_SEPARATOR}{name}"


def define_config(config: ConfigT) -> ConfigT:
    """Return the config unchanged."""
    return config
