"""Tests for parameter state: clamping, reset and change notification."""

import logging

import pytest

from dpg_app import app_state
from dpg_app.app_state import AppState, clamp_param, param_widget_tag
from spirograph import DEFAULTS, PARAM_ORDER, Spiro


@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    """Start from defaults with no DearPyGui widgets around."""
    monkeypatch.setattr(app_state.dpg, "does_item_exist", lambda tag: False)
    AppState._initialized = False
    AppState.initialize()
    yield
    AppState._initialized = False


def test_initialize_uses_defaults():
    assert AppState.get_params() == {key: DEFAULTS[key] for key in PARAM_ORDER}


def test_get_params_returns_copy():
    params = AppState.get_params()
    params["large_radius"] = -1.0
    assert AppState.get_param("large_radius") == DEFAULTS["large_radius"]


@pytest.mark.parametrize("key, raw, expected", [
    ("large_frequency", 0, 10),
    ("large_frequency", -5, 10),
    ("small_frequency", 5000, 1000),
    ("small_frequency", 12.6, 13),
    ("large_radius", 0.0, 10.0),
    ("small_radius", 900.0, 500.0),
    ("interpolate_distance_max", 0.0, 1.0),
    ("interpolate_distance_max", 42.5, 42.5),
])
def test_clamp_param(key, raw, expected):
    value = clamp_param(key, raw)
    assert value == expected
    assert type(value) is type(expected)


def test_set_param_clamps_frequencies_so_sampler_is_valid():
    AppState.set_param("large_frequency", 0)
    AppState.set_param("small_frequency", -3)

    params = AppState.get_params()
    assert params["large_frequency"] == 10
    assert params["small_frequency"] == 10
    Spiro.from_frequency((0.0, 0.0), **params)


def test_set_param_ignores_unknown_key():
    AppState.set_param("nope", 1.0)
    assert "nope" not in AppState.get_params()


def test_set_param_notifies_only_on_change():
    calls = []
    AppState.add_change_callback(lambda key, value: calls.append((key, value)))

    AppState.set_param("small_radius", 120.0)
    AppState.set_param("small_radius", 120.0)

    assert calls == [("small_radius", 120.0)]


def test_set_param_updates_existing_widget(monkeypatch):
    values = {}
    monkeypatch.setattr(app_state.dpg, "does_item_exist", lambda tag: True)
    monkeypatch.setattr(app_state.dpg, "set_value", lambda tag, value: values.__setitem__(tag, value))

    AppState.set_param("large_frequency", 33)

    assert values == {param_widget_tag("large_frequency"): 33}


def test_reset_to_defaults_notifies_wildcard():
    calls = []
    AppState.set_param("large_radius", 321.0)
    AppState.add_change_callback(lambda key, value: calls.append(key))

    AppState.reset_to_defaults()

    assert AppState.get_param("large_radius") == DEFAULTS["large_radius"]
    assert calls == ["*"]


def test_failing_callback_does_not_stop_others(caplog):
    calls = []

    def broken(key, value):
        raise RuntimeError("boom")

    AppState.add_change_callback(broken)
    AppState.add_change_callback(lambda key, value: calls.append(key))

    with caplog.at_level(logging.ERROR, logger="dpg_app.app_state"):
        AppState.set_param("interpolate_distance_max", 12.0)

    assert calls == ["interpolate_distance_max"]
    assert any("Error in change callback" in r.getMessage() for r in caplog.records)
