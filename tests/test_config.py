from __future__ import annotations

import pytest

from pystate.config import StateConfig
from pystate.exceptions import StateConfigError


def test_defaults() -> None:
    config = StateConfig()
    assert config.id_length == 8
    assert config.raise_on_destroyed is True
    assert config.log_listener_errors is True


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYSTATE_ID_LENGTH", "16")
    monkeypatch.setenv("PYSTATE_RAISE_ON_DESTROYED", "off")
    monkeypatch.setenv("PYSTATE_LOG_LISTENER_ERRORS", "no")

    config = StateConfig.from_env()
    assert config.id_length == 16
    assert config.raise_on_destroyed is False
    assert config.log_listener_errors is False


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYSTATE_ID_LENGTH", "16")
    monkeypatch.setenv("PYSTATE_RAISE_ON_DESTROYED", "0")

    config = StateConfig.from_env(id_length=4, raise_on_destroyed=True)
    assert config.id_length == 4
    assert config.raise_on_destroyed is True


def test_unrecognised_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYSTATE_RAISE_ON_DESTROYED", "maybe")
    assert StateConfig.from_env().raise_on_destroyed is True


def test_non_integer_env_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYSTATE_ID_LENGTH", "eight")
    with pytest.raises(StateConfigError):
        StateConfig.from_env()


@pytest.mark.parametrize("field", ["id_length", "max_id_attempts", "log_max_string"])
def test_non_positive_values_rejected(field: str) -> None:
    with pytest.raises(StateConfigError):
        StateConfig(**{field: 0})
