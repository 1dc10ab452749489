"""
Spirograph drawing view.

Left panel holds the sliders, right panel is a drawlist that is rebuilt
from scratch, at most once per rendered frame, after a parameter change or
resize.
"""

import math

import dearpygui.dearpygui as dpg

from spirograph import Spiro, InvalidFrequencyError
from dpg_app.app_state import AppState, scaled
from dpg_app.widgets.parameter_panel import create_parameter_panel, create_button_row
from dpg_app.widgets.output_panel import (
    create_output_panel, update_output_values, create_info_text, update_info_text
)
from dpg_app.themes import COLORS

TAG_PREFIX = "spiro"
CANVAS_WINDOW = "spiro_canvas_window"
DRAWLIST = "spiro_drawlist"

# Set by edits and resizes, consumed once per frame by redraw_if_pending()
_redraw_pending = False


class DrawlistSink:
    """Render sink that turns each segment into a ``draw_line`` on a drawlist."""

    def __init__(self, parent: str):
        self.parent = parent

    def draw_segment(self, p1, p2, stroke_width, color):
        dpg.draw_line(p1, p2, color=color, thickness=stroke_width, parent=self.parent)


def create_tab_spirograph():
    """Create the spirograph view content."""
    with dpg.group(horizontal=True):
        # Left panel - Parameters
        with dpg.child_window(width=scaled(240), border=True):
            create_parameter_panel()

            create_button_row(on_redraw=request_redraw)

            create_output_panel(TAG_PREFIX)

            create_info_text(TAG_PREFIX)

        # Right panel - Drawing surface
        with dpg.child_window(tag=CANVAS_WINDOW, width=-1, border=True, no_scrollbar=True):
            dpg.add_drawlist(width=1, height=1, tag=DRAWLIST)

    AppState.add_change_callback(_on_param_change)


def _canvas_size():
    """Usable size of the drawing area, at least 1x1."""
    width, height = dpg.get_item_rect_size(CANVAS_WINDOW)
    # Leave room for the child window border and padding
    return max(int(width) - 16, 1), max(int(height) - 16, 1)


def redraw_spirograph():
    """Clear the drawlist and sample the curve again from AppState."""
    params = AppState.get_params()
    width, height = _canvas_size()
    offset = (width / 2.0, height / 2.0)

    try:
        spiro = Spiro.from_frequency(
            (0.0, 0.0),
            params["large_radius"],
            params["small_radius"],
            params["large_frequency"],
            params["small_frequency"],
            params["interpolate_distance_max"],
        )
    except InvalidFrequencyError as e:
        update_info_text(TAG_PREFIX, f"Error: {e}", color=COLORS["error"])
        return

    dpg.configure_item(DRAWLIST, width=width, height=height)
    dpg.delete_item(DRAWLIST, children_only=True)

    dpg.draw_rectangle((0, 0), (width, height), fill=COLORS["canvas_bg"],
                       color=COLORS["canvas_bg"], parent=DRAWLIST)

    spiro.draw(DrawlistSink(DRAWLIST), offset)

    update_output_values(TAG_PREFIX, {
        "nb_points": spiro.nb_points,
        "large_angular_velocity": math.degrees(spiro.large_angular_velocity),
        "small_angular_velocity": math.degrees(spiro.small_angular_velocity),
        "segment_count": spiro.segment_count,
        "capped_pairs": spiro.capped_pairs,
    })

    if spiro.capped_pairs:
        update_info_text(
            TAG_PREFIX,
            f"Drawn with {spiro.capped_pairs} truncated step(s); raise the resolution value.",
            color=COLORS["error"]
        )
    else:
        update_info_text(TAG_PREFIX, f"Curve drawn: {spiro.segment_count:,} segments",
                         color=COLORS["ok"])

    # Update main status bar
    from dpg_app.main import update_segment_count
    update_segment_count(spiro.segment_count)


def request_redraw():
    """Mark the curve as stale; the main loop redraws it on the next frame."""
    global _redraw_pending
    _redraw_pending = True


def redraw_if_pending() -> bool:
    """Redraw once from the latest parameters if anything changed since the last frame."""
    global _redraw_pending
    if not _redraw_pending:
        return False
    _redraw_pending = False
    redraw_spirograph()
    return True


def _on_param_change(key, value):
    """Called by AppState when a parameter changes."""
    request_redraw()
