"""Schema declarations.

A schema maps each variable name to a declaration describing its kind,
whether it must be present, and an optional validator for the parsed value.
Declarations can be written as ``Declaration`` objects or as plain mapping
literals such as ``{"type": "number", "required": False}``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar, Union

from envscope.core.errors import InvalidDeclarationError

EnvValue = Union[str, int, float, bool, None]

Validator = Callable[[Any], Union[bool, str]]

SchemaT = TypeVar("SchemaT", bound=Mapping[str, Any])


class Kind(str, Enum):
    """Kinds of value a variable can be parsed into."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Declaration:
    """One schema entry.

    Attributes:
        kind: How the raw string is converted.
        required: Whether the variable must be present in the source.
        validator: Optional check run on the parsed value. It returns True to
            accept, False to reject, or a string explaining the rejection.
    """

    kind: Kind
    required: bool = True
    validator: Validator | None = None

    def __post_init__(self) -> None:
        # Accept Declaration(kind="number"); invalid values are reported later
        if not isinstance(self.kind, Kind) and self.kind in [k.value for k in Kind]:
            object.__setattr__(self, "kind", Kind(self.kind))


_LITERAL_KEYS = frozenset({"type", "kind", "required", "validator"})


def to_declaration(name: str, entry: Declaration | Mapping[str, Any]) -> Declaration:
    """Normalize a schema entry into a ``Declaration``.

    Args:
        name: Schema key the entry belongs to (used in error messages).
        entry: A ``Declaration`` or a mapping literal.

    Returns:
        The equivalent declaration.

    Raises:
        InvalidDeclarationError: If the entry is malformed.
    """
    if isinstance(entry, Declaration):
        _check_fields(name, entry.kind, entry.required, entry.validator)
        return entry

    if not isinstance(entry, Mapping):
        raise InvalidDeclarationError(name, f"expected a declaration, got {type(entry).__name__}")

    unknown = set(entry) - _LITERAL_KEYS
    if unknown:
        raise InvalidDeclarationError(name, f"unknown fields {sorted(unknown)}")
    if "type" in entry and "kind" in entry:
        raise InvalidDeclarationError(name, "use either 'type' or 'kind', not both")

    raw_kind = entry.get("type", entry.get("kind"))
    if raw_kind is None:
        raise InvalidDeclarationError(name, "missing 'type'")
    try:
        kind = Kind(raw_kind)
    except ValueError:
        options = ", ".join(k.value for k in Kind)
        raise InvalidDeclarationError(
            name, f"unsupported type {raw_kind!r} (expected one of: {options})"
        ) from None

    required = entry.get("required", True)
    validator = entry.get("validator")
    _check_fields(name, kind, required, validator)
    return Declaration(kind=kind, required=required, validator=validator)


def _check_fields(name: str, kind: Any, required: Any, validator: Any) -> None:  # noqa: ANN401
    if not isinstance(kind, Kind):
        raise InvalidDeclarationError(name, f"unsupported type {kind!r}")
    if not isinstance(required, bool):
        raise InvalidDeclarationError(name, "'required' must be a bool")
    if validator is not None and not callable(validator):
        raise InvalidDeclarationError(name, "'validator' must be callable")


def normalize_schema(
    schema: Mapping[str, Declaration | Mapping[str, Any]],
) -> dict[str, Declaration]:
    """Normalize every entry of a schema, preserving key order.

    Args:
        schema: Mapping of variable names to declarations or literals.

    Returns:
        A new dictionary of declarations.

    Raises:
        InvalidDeclarationError: If the schema or any entry is malformed.
    """
    if not isinstance(schema, Mapping):
        raise InvalidDeclarationError(
            "<schema>", f"expected a mapping, got {type(schema).__name__}"
        )
    return {name: to_declaration(name, entry) for name, entry in schema.items()}


def define_schema(schema: SchemaT) -> SchemaT:
    """Return the schema unchanged.

    Kept so schemas can be declared as named module-level constants.
    """
    return schema
