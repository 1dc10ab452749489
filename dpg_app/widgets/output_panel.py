"""
Reusable output display panel widget.

Shows values derived from the current curve and a status line.
"""

import dearpygui.dearpygui as dpg
from typing import Dict, Any

from dpg_app.app_state import scaled


OUTPUT_ORDER = [
    "nb_points",
    "large_angular_velocity",
    "small_angular_velocity",
    "segment_count",
    "capped_pairs",
]

# Display labels for output values
OUTPUT_LABELS = {
    "nb_points": "Coarse steps",
    "large_angular_velocity": "Large step",
    "small_angular_velocity": "Small step",
    "segment_count": "Segments",
    "capped_pairs": "Capped pairs",
}

# Units for output values
OUTPUT_UNITS = {
    "large_angular_velocity": "°",
    "small_angular_velocity": "°",
}


def create_output_panel(tag_prefix: str):
    """Create the output display, one text line per value in OUTPUT_ORDER."""
    dpg.add_spacer(height=10)
    dpg.add_separator()
    dpg.add_spacer(height=5)

    dpg.add_text("Output", color=(180, 180, 255))
    dpg.add_spacer(height=5)

    for key in OUTPUT_ORDER:
        dpg.add_text(
            format_output(key, None),
            tag=f"{tag_prefix}_out_{key}",
            color=(200, 200, 200)
        )


def format_output(key: str, value: Any) -> str:
    """Format one output value with its label and unit."""
    label = OUTPUT_LABELS.get(key, key)
    unit = OUTPUT_UNITS.get(key, "")

    if value is None:
        return f"{label}: --"
    if isinstance(value, float):
        return f"{label}: {value:.4f}{unit}"
    if isinstance(value, int):
        return f"{label}: {value:,}"
    return f"{label}: {value}"


def update_output_values(tag_prefix: str, values: Dict[str, Any]):
    """
    Update output display with new values.

    Args:
        tag_prefix: Widget tag prefix
        values: Dictionary of key -> value pairs
    """
    for key, value in values.items():
        widget_tag = f"{tag_prefix}_out_{key}"
        if dpg.does_item_exist(widget_tag):
            dpg.set_value(widget_tag, format_output(key, value))


def create_info_text(tag_prefix: str, initial_text: str = "Move a slider to redraw."):
    """Create a simple info text display."""
    dpg.add_spacer(height=10)
    dpg.add_separator()
    dpg.add_spacer(height=5)

    dpg.add_text("Status", color=(180, 180, 255))
    dpg.add_text(
        initial_text,
        tag=f"{tag_prefix}_info",
        wrap=scaled(200),
        color=(150, 150, 150)
    )


def update_info_text(tag_prefix: str, text: str, color: tuple = None):
    """Update the info text display."""
    widget_tag = f"{tag_prefix}_info"
    if dpg.does_item_exist(widget_tag):
        dpg.set_value(widget_tag, text)
        if color:
            dpg.configure_item(widget_tag, color=color)
