"""Environment manager.

Validates a raw key/value source against a schema and exposes the parsed,
typed values as a frozen record. All work happens once, eagerly, during
construction; the first problem found aborts construction.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from envscope.core.declarations import Declaration, EnvValue, normalize_schema
from envscope.core.errors import (
    InvalidSourceError,
    MissingVariableError,
    ScopeUndeterminedError,
    ValidationError,
)
from envscope.core.parsed_env import ParsedEnv
from envscope.core.parsers import get_parser
from envscope.core.scopes import ManagerConfig, ScopeTable
from envscope.utils.constant import SCOPE_SELECTOR_KEY

RawSource = Mapping[str, "str | None"]
Schema = Mapping[str, "Declaration | Mapping[str, Any]"]


class EnvManager:
    """Parse and validate environment variables against a schema.

    Single Responsibility: turning one raw source into one validated record.
    Reading the real process environment is left to the caller, which passes
    ``os.environ`` or any other ``str -> str | None`` mapping.
    """

    def __init__(
        self,
        schema: Schema,
        source: RawSource | None,
        config: ManagerConfig | Mapping[str, Any] | None = None,
    ) -> None:
        """Validate the source and build the parsed record.

        Args:
            schema: Variable names mapped to declarations or declaration literals.
            source: Raw values; missing keys and None both count as absent.
            config: Scope options as a ``ManagerConfig`` or mapping literal.

        Raises:
            InvalidSourceError: If ``source`` is None or not a mapping.
            ScopeUndeterminedError: If scopes are enabled and the current scope
                is missing or has no prefix.
            InvalidDeclarationError: If a schema entry is malformed.
            MissingVariableError: If a required variable is absent.
            InvalidNumberError: If a number variable is not numeric.
            InvalidBooleanError: If a boolean variable is not an accepted literal.
            ValidationError: If a custom validator rejects a value.
        """
        if source is None:
            raise InvalidSourceError()
        if not isinstance(source, Mapping):
            raise InvalidSourceError(f"Env source must be a mapping, got {type(source).__name__}.")

        self._source = source
        self._current_scope = self._read_current_scope()

        resolved = ManagerConfig.from_value(config)
        self._scopes = ScopeTable(resolved.scopes)
        self._enable_scopes = resolved.enable_scopes

        if self._enable_scopes and (
            self._current_scope is None or self._current_scope not in self._scopes
        ):
            raise ScopeUndeterminedError(self._current_scope, self._scopes)

        self._schema = normalize_schema(schema)
        self._env = self._parse()

    @classmethod
    def create(
        cls,
        schema: Schema,
        source: RawSource | None,
        config: ManagerConfig | Mapping[str, Any] | None = None,
    ) -> EnvManager:
        """Build a manager; same as calling the class directly."""
        return cls(schema, source, config)

    @property
    def current_scope(self) -> str | None:
        """Scope read from the source, whether or not scopes are enabled."""
        return self._current_scope

    @property
    def scopes_enabled(self) -> bool:
        """Whether lookups are prefixed with the current scope."""
        return self._enable_scopes

    @property
    def scope_table(self) -> ScopeTable:
        """Resolved scope-to-prefix table owned by this manager."""
        return self._scopes

    def data(self) -> ParsedEnv:
        """Return the parsed values computed at construction.

        Returns:
            The frozen record; the same object on every call.
        """
        return self._env

    def lookup_key(self, name: str) -> str:
        """Return the source key read for a schema key.

        Args:
            name: Schema key.

        Returns:
            ``"<PREFIX>_<name>"`` when scopes are enabled, otherwise ``name``.
        """
        if self._enable_scopes and self._current_scope is not None:
            return self._scopes.prefixed(self._current_scope, name)
        return name

    def _read_current_scope(self) -> str | None:
        scope = self._source.get(SCOPE_SELECTOR_KEY)
        return scope or None

    def _parse(self) -> ParsedEnv:
        parsed: dict[str, EnvValue] = {}

        for name, declaration in self._schema.items():
            parsed[name] = self._parse_one(name, declaration)

        logging.info(
            "Loaded %d environment variable(s) (scope: %s)",
            len(parsed),
            self._current_scope if self._enable_scopes else "disabled",
        )
        return ParsedEnv(parsed)

    def _parse_one(self, name: str, declaration: Declaration) -> EnvValue:
        """Resolve, convert and validate a single schema key.

        Args:
            name: Schema key.
            declaration: Its normalized declaration.

        Returns:
            The parsed value, or None for an absent optional variable.
        """
        key = self.lookup_key(name)
        raw = self._source.get(key)

        if raw is None:
            if declaration.required:
                raise MissingVariableError(key)
            logging.debug("Optional environment variable %s not set", key)
            return None

        value = get_parser(declaration.kind).parse(raw, key)

        if declaration.validator is not None:
            result = declaration.validator(value)
            if result is not True:
                raise ValidationError(key, result if isinstance(result, str) else None)

        logging.debug("Resolved environment variable %s from %s", name, key)
        return value


def create_manager(
    schema: Schema,
    source: RawSource | None,
    config: ManagerConfig | Mapping[str, Any] | None = None,
) -> EnvManager:
    """Build an ``EnvManager``.

    Args:
        schema: Variable names mapped to declarations or declaration literals.
        source: Raw values, e.g. ``os.environ`` or a plain dict.
        config: Optional scope options.

    Returns:
        A manager whose ``data()`` holds the parsed values.
    """
    return EnvManager(schema, source, config)
