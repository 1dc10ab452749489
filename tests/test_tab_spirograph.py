"""Tests for the drawing view: render sink, output formatting and redraw scheduling."""

import pytest

from dpg_app import app_state
from dpg_app.app_state import AppState
from dpg_app.tabs import tab_spirograph
from dpg_app.tabs.tab_spirograph import DrawlistSink
from dpg_app.widgets.output_panel import format_output
from spirograph import STROKE_COLOR, STROKE_WIDTH, Spiro


def test_drawlist_sink_forwards_to_draw_line(monkeypatch):
    calls = []

    def fake_draw_line(p1, p2, **kwargs):
        calls.append((p1, p2, kwargs))

    monkeypatch.setattr(tab_spirograph.dpg, "draw_line", fake_draw_line)

    DrawlistSink("canvas").draw_segment((1.0, 2.0), (3.0, 4.0), 3.0, (0, 255, 0, 255))

    assert calls == [
        ((1.0, 2.0), (3.0, 4.0), {"color": (0, 255, 0, 255), "thickness": 3.0, "parent": "canvas"})
    ]


def test_spiro_draws_through_drawlist_sink(monkeypatch):
    lines = []
    monkeypatch.setattr(
        tab_spirograph.dpg, "draw_line",
        lambda p1, p2, color, thickness, parent: lines.append((color, thickness, parent)),
    )

    spiro = Spiro.from_frequency((0.0, 0.0), 200.0, 100.0, 20, 50, 30.0)
    spiro.draw(DrawlistSink("canvas"), (375.0, 250.0))

    assert len(lines) == spiro.segment_count >= 100
    assert set(lines) == {(STROKE_COLOR, STROKE_WIDTH, "canvas")}


def test_format_output():
    assert format_output("segment_count", 12345) == "Segments: 12,345"
    assert format_output("large_angular_velocity", 18.0) == "Large step: 18.0000°"
    assert format_output("capped_pairs", None) == "Capped pairs: --"


@pytest.fixture
def redraw_calls(monkeypatch):
    """Record redraws instead of drawing; state starts clean with the view listening."""
    calls = []
    monkeypatch.setattr(app_state.dpg, "does_item_exist", lambda tag: False)
    monkeypatch.setattr(
        tab_spirograph, "redraw_spirograph",
        lambda: calls.append(AppState.get_params()),
    )
    monkeypatch.setattr(tab_spirograph, "_redraw_pending", False)
    AppState._initialized = False
    AppState.initialize()
    AppState.add_change_callback(tab_spirograph._on_param_change)
    yield calls
    AppState._initialized = False


def test_slider_burst_redraws_once_with_latest_values(redraw_calls):
    for frequency in range(21, 41):
        AppState.set_param("large_frequency", frequency)
    AppState.set_param("interpolate_distance_max", 7.5)

    assert redraw_calls == []

    assert tab_spirograph.redraw_if_pending() is True
    assert len(redraw_calls) == 1
    assert redraw_calls[0]["large_frequency"] == 40
    assert redraw_calls[0]["interpolate_distance_max"] == 7.5


def test_no_redraw_without_changes(redraw_calls):
    AppState.set_param("small_radius", 150.0)
    tab_spirograph.redraw_if_pending()

    assert tab_spirograph.redraw_if_pending() is False
    AppState.set_param("small_radius", 150.0)
    assert tab_spirograph.redraw_if_pending() is False
    assert len(redraw_calls) == 1


def test_request_redraw_covers_resize_and_reset(redraw_calls):
    tab_spirograph.request_redraw()
    AppState.reset_to_defaults()

    tab_spirograph.redraw_if_pending()

    assert len(redraw_calls) == 1


def test_redraw_draws_only_background_and_curve(monkeypatch):
    """The canvas holds one background rectangle and the curve's lines, no other shapes."""
    calls = []
    dpg = tab_spirograph.dpg
    monkeypatch.setattr(dpg, "get_item_rect_size", lambda tag: (766, 516))
    monkeypatch.setattr(dpg, "does_item_exist", lambda tag: False)
    monkeypatch.setattr(dpg, "configure_item", lambda *a, **k: None)
    monkeypatch.setattr(dpg, "delete_item", lambda *a, **k: None)
    for name in ("draw_rectangle", "draw_line", "draw_circle", "draw_polyline"):
        monkeypatch.setattr(dpg, name, lambda *a, _name=name, **k: calls.append(_name))
    AppState._initialized = False
    AppState.initialize()

    tab_spirograph.redraw_spirograph()
    AppState._initialized = False

    assert calls[0] == "draw_rectangle"
    assert set(calls[1:]) == {"draw_line"}
    assert len(calls) > 100
