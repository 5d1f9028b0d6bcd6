"""Tests for the frozen parsed-environment record."""

from __future__ import annotations

import copy
import pickle

import pytest

from envscope.core.parsed_env import ParsedEnv


def test_parsed_env__item_and_attribute_access() -> None:
    """Read values by key and by attribute."""
    env = ParsedEnv({"PORT": 8080, "DEBUG": False, "NAME": None})

    assert env["PORT"] == 8080
    assert env.DEBUG is False
    assert env.NAME is None
    assert list(env) == ["PORT", "DEBUG", "NAME"]


def test_parsed_env__unknown_attribute() -> None:
    """Raise AttributeError for names outside the schema."""
    env = ParsedEnv({"PORT": 1})

    with pytest.raises(AttributeError):
        _ = env.HOST
    with pytest.raises(KeyError):
        _ = env["HOST"]


def test_parsed_env__rejects_mutation() -> None:
    """Reject assignment and deletion."""
    env = ParsedEnv({"PORT": 1})

    with pytest.raises(TypeError):
        env["PORT"] = 2  # type: ignore[index]
    with pytest.raises(TypeError):
        del env["PORT"]  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        env.PORT = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del env.PORT
    with pytest.raises(AttributeError):
        env._values = {}  # type: ignore[misc]

    assert env["PORT"] == 1


def test_parsed_env__copies_input() -> None:
    """Ignore later changes to the dictionary it was built from."""
    values = {"PORT": 1}
    env = ParsedEnv(values)
    values["PORT"] = 2

    assert env["PORT"] == 1


def test_parsed_env__to_dict_is_detached() -> None:
    """Return a new dictionary on every call."""
    env = ParsedEnv({"PORT": 1})
    data = env.to_dict()
    data["PORT"] = 2

    assert env.to_dict() == {"PORT": 1}


def test_parsed_env__equality_and_copy() -> None:
    """Compare like a mapping and survive copy and pickle."""
    env = ParsedEnv({"A": "x", "B": 2})

    assert env == {"A": "x", "B": 2}
    assert copy.deepcopy(env) == env
    assert pickle.loads(pickle.dumps(env)) == env


def test_parsed_env__method_names_need_item_access() -> None:
    """Return methods for clashing attribute names and values by item."""
    env = ParsedEnv({"keys": "k", "get": "g", "_private": "p"})

    assert callable(env.keys)
    assert env["keys"] == "k"
    assert env["get"] == "g"
    assert env["_private"] == "p"
    with pytest.raises(AttributeError):
        _ = env._private
