"""
Reusable parameter input panel widget.

Provides collapsible groups of sliders with tooltips.
"""

import dearpygui.dearpygui as dpg
from typing import Callable

from dpg_app.app_state import (
    AppState, get_param_groups, get_param_label, get_param_tooltip,
    param_widget_tag, scaled
)
from spirograph import PARAM_RANGES, INT_PARAMS


def create_parameter_panel():
    """Create the slider panel with collapsible groups."""
    dpg.add_text("Values", color=(180, 180, 255))
    dpg.add_separator()
    dpg.add_spacer(height=5)

    for group_name, param_keys in get_param_groups().items():
        with dpg.collapsing_header(label=group_name, default_open=True):
            for key in param_keys:
                _create_param_slider(key)
            dpg.add_spacer(height=3)


def _create_param_slider(key: str):
    """Create a single parameter slider with label and tooltip."""
    label = get_param_label(key)
    tooltip = get_param_tooltip(key)
    lo, hi = PARAM_RANGES[key]
    input_tag = param_widget_tag(key)
    callback = _make_param_callback(key)

    dpg.add_text(label, indent=10)
    if key in INT_PARAMS:
        dpg.add_slider_int(
            tag=input_tag,
            default_value=int(AppState.get_param(key)),
            min_value=int(lo),
            max_value=int(hi),
            clamped=True,
            width=scaled(180),
            callback=callback
        )
    else:
        dpg.add_slider_float(
            tag=input_tag,
            default_value=float(AppState.get_param(key)),
            min_value=float(lo),
            max_value=float(hi),
            clamped=True,
            format="%.1f",
            width=scaled(180),
            callback=callback
        )

    if tooltip:
        with dpg.tooltip(parent=input_tag):
            dpg.add_text(tooltip, wrap=250)


def _make_param_callback(key: str):
    """Create a callback for slider changes; AppState notifies listeners."""
    def callback(sender, app_data, user_data=None):
        if app_data is None:
            return

        AppState.set_param(key, app_data)

    return callback


def create_button_row(on_redraw: Callable):
    """
    Create a row of action buttons.

    Args:
        on_redraw: Callback for Redraw button
    """
    dpg.add_spacer(height=10)

    with dpg.group(horizontal=True):
        redraw_btn = dpg.add_button(
            label="Redraw",
            tag="btn_redraw",
            callback=on_redraw,
            width=scaled(85)
        )
        dpg.bind_item_theme(redraw_btn, "theme_button_update")

        reset_btn = dpg.add_button(
            label="Reset",
            callback=lambda: AppState.reset_to_defaults(),
            width=scaled(85)
        )
        dpg.bind_item_theme(reset_btn, "theme_button_reset")
