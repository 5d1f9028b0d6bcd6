"""Tests for scope tables and manager configuration."""

from __future__ import annotations

import pytest

from envscope.core.scopes import ManagerConfig, ScopeTable, define_config
from envscope.utils.constant import DEFAULT_SCOPES


def test_scope_table__defaults() -> None:
    """Start from the built-in scopes."""
    assert dict(ScopeTable()) == {
        "development": "DEV",
        "production": "PROD",
        "test": "TEST",
        "staging": "STAGE",
    }


def test_scope_table__overrides_and_extends() -> None:
    """Replace colliding entries and add new ones."""
    table = ScopeTable({"production": "LIVE", "qa": "QA"})

    assert table["production"] == "LIVE"
    assert table["qa"] == "QA"
    assert table["development"] == "DEV"
    assert len(table) == 5


def test_scope_table__does_not_touch_defaults() -> None:
    """Leave the shared default table unchanged."""
    ScopeTable({"production": "LIVE"})

    assert DEFAULT_SCOPES["production"] == "PROD"
    with pytest.raises(TypeError):
        DEFAULT_SCOPES["production"] = "LIVE"  # type: ignore[index]


def test_scope_table__is_read_only() -> None:
    """Reject item assignment on a built table."""
    table = ScopeTable()

    with pytest.raises(TypeError):
        table["qa"] = "QA"  # type: ignore[index]


def test_scope_table__prefixed() -> None:
    """Join prefix and name with an underscore, even for empty prefixes."""
    table = ScopeTable({"local": ""})

    assert table.prefixed("staging", "PORT") == "STAGE_PORT"
    assert table.prefixed("local", "PORT") == "_PORT"


def test_scope_table__rejects_non_string_entries() -> None:
    """Require string scope names and prefixes."""
    with pytest.raises(TypeError):
        ScopeTable({"production": 1})  # type: ignore[dict-item]


def test_manager_config__from_mapping() -> None:
    """Accept snake_case and camelCase literals."""
    assert ManagerConfig.from_value({"enable_scopes": True}).enable_scopes is True
    assert ManagerConfig.from_value({"enableScopes": True}).enable_scopes is True
    assert ManagerConfig.from_value({"scopes": {"qa": "QA"}}).scopes == {"qa": "QA"}


def test_manager_config__defaults() -> None:
    """Disable scopes when no config is given."""
    config = ManagerConfig.from_value(None)

    assert config.enable_scopes is False
    assert dict(config.scopes) == {}


@pytest.mark.parametrize(
    "config",
    [
        {"enable_scopes": "yes"},
        {"scopes": ["production"]},
        {"enable": True},
        "enable_scopes",
    ],
)
def test_manager_config__rejects_malformed(config: object) -> None:
    """Raise TypeError for malformed configs."""
    with pytest.raises(TypeError):
        ManagerConfig.from_value(config)  # type: ignore[arg-type]


def test_define_config__is_identity() -> None:
    """Return the very same object."""
    config = ManagerConfig(enable_scopes=True)

    assert define_config(config) is config


@pytest.mark.parametrize(
    "kwargs",
    [
        {"enable_scopes": "false"},
        {"enable_scopes": 1},
        {"scopes": ["production"]},
        {"scopes": None},
    ],
)
def test_manager_config__instance_validates_fields(kwargs: dict[str, object]) -> None:
    """Raise TypeError when building an instance with wrongly typed fields."""
    with pytest.raises(TypeError):
        ManagerConfig(**kwargs)  # type: ignore[arg-type]
