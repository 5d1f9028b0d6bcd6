"""Project-wide constants and configuration."""

from __future__ import annotations

from types import MappingProxyType

# Source key holding the active deployment scope (read unconditionally)
SCOPE_SELECTOR_KEY: str = "NODE_ENV"

# Built-in scope table; user scopes overlay it per manager, never in place
DEFAULT_SCOPES = MappingProxyType({
    "development": "DEV",
    "production": "PROD",
    "test": "TEST",
    "staging": "STAGE",
})

# Joins a scope prefix and a schema key, e.g. "DEV" + "_" + "PORT"
SCOPE_SEPARATOR: str = "_"

# Accepted boolean literals (case-sensitive)
TRUE_LITERALS = frozenset({"true", "1"})
FALSE_LITERALS = frozenset({"false", "0"})
BOOLEAN_LITERALS: tuple[str, ...] = ("true", "false", "1", "0")

ERROR_PREFIX: str = "[Env Manager] - "
