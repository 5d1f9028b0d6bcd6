"""Frozen record of parsed environment values."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, NoReturn

from envscope.core.declarations import EnvValue


class ParsedEnv(Mapping[str, EnvValue]):
    """Immutable mapping of schema keys to parsed values.

    Values can be read by item (``env["PORT"]``) or attribute (``env.PORT``).
    Optional variables missing from the source map to None. Nothing can be
    assigned or deleted after construction; ``to_dict`` returns a copy.

    Attribute access only reaches variables whose names do not clash with
    methods of this class (``keys``, ``get``, ``items``, ``values``,
    ``to_dict``, ...) or start with an underscore; read those by item.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, EnvValue]) -> None:
        """Initialize from parsed values.

        Args:
            values: Parsed values keyed by schema key. The mapping is copied.
        """
        object.__setattr__(self, "_values", MappingProxyType(dict(values)))

    def __getitem__(self, key: str) -> EnvValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> EnvValue:
        # Only called when normal attribute lookup fails; private names use item access
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no variable {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> NoReturn:  # noqa: ANN401
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"ParsedEnv({dict(self._values)!r})"

    def __reduce__(self) -> tuple[type[ParsedEnv], tuple[dict[str, EnvValue]]]:
        return (type(self), (dict(self._values),))

    def to_dict(self) -> dict[str, EnvValue]:
        """Convert to a plain dictionary.

        Returns:
            A new dictionary; changing it does not affect this record.
        """
        return dict(self._values)
