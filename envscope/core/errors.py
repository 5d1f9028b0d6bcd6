"""Errors raised while building an environment manager.

Every failure is fatal to construction: the first problem found aborts the
parse pass and no manager is returned.
"""

from __future__ import annotations

from collections.abc import Iterable

from envscope.utils.constant import BOOLEAN_LITERALS, ERROR_PREFIX, SCOPE_SELECTOR_KEY


class EnvManagerError(ValueError):
    """Base class for all configuration-loading errors."""

    def __init__(self, message: str) -> None:
        """Initialize the error with a prefixed message.

        Args:
            message: Human-readable description of the failure.
        """
        super().__init__(f"{ERROR_PREFIX}{message}")


class InvalidSourceError(EnvManagerError):
    """Raised when the raw source is missing or not a mapping."""

    def __init__(self, message: str = "Env source is undefined.") -> None:
        super().__init__(message)


class ScopeUndeterminedError(EnvManagerError):
    """Raised when scopes are enabled but no usable scope is selected.

    Attributes:
        scope: The scope read from the source, or None when it was absent.
        known_scopes: Every scope name the manager knows about.
    """

    def __init__(self, scope: str | None, known_scopes: Iterable[str]) -> None:
        """Initialize the error.

        Args:
            scope: The scope read from the source, if any.
            known_scopes: Names of all configured scopes.
        """
        self.scope = scope
        self.known_scopes = tuple(known_scopes)
        options = " | ".join(self.known_scopes)
        if scope is None:
            message = (
                "Scopes enabled but current scope could not be determined from source. "
                f"Ensure {SCOPE_SELECTOR_KEY} is set ({options})."
            )
        else:
            message = (
                f"Scopes enabled but current scope '{scope}' has no configured prefix. "
                f"Set {SCOPE_SELECTOR_KEY} to one of ({options}) or add it to scopes."
            )
        super().__init__(message)


class InvalidDeclarationError(EnvManagerError):
    """Raised when a schema entry cannot be turned into a declaration.

    Attributes:
        key: The schema key of the malformed entry.
    """

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__(f"Invalid declaration for {key}: {reason}")


class VariableError(EnvManagerError):
    """Base class for errors tied to a single source variable.

    Attributes:
        key: The effective (possibly prefixed) lookup key.
    """

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(message)


class MissingVariableError(VariableError):
    """Raised when a required variable is absent from the source."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Missing required environment variable: {key}")


class InvalidNumberError(VariableError):
    """Raised when a number variable does not hold a finite numeric literal."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Environment variable {key} is not a valid number.")


class InvalidBooleanError(VariableError):
    """Raised when a boolean variable holds anything but an accepted literal.

    Attributes:
        accepted: The accepted literals, in display order.
    """

    def __init__(self, key: str) -> None:
        self.accepted = BOOLEAN_LITERALS
        options = ", ".join(f'"{literal}"' for literal in self.accepted[:-1])
        super().__init__(
            key,
            f"Environment variable {key} is not a valid boolean. "
            f'Use {options}, or "{self.accepted[-1]}".',
        )


class ValidationError(VariableError):
    """Raised when a custom validator rejects a parsed value.

    Attributes:
        detail: Message returned by the validator, or None for a plain rejection.
    """

    def __init__(self, key: str, detail: str | None = None) -> None:
        self.detail = detail
        message = f"Environment variable {key} failed custom validation."
        if detail:
            message = f"{message} {detail}"
        super().__init__(key, message)
