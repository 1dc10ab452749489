"""
Centralized application state management.

Holds the five curve parameters as class-level state, clamps every edit
into the slider ranges and notifies registered callbacks.
"""

import logging

import dearpygui.dearpygui as dpg
from typing import Dict, Any, Callable, List

from spirograph import DEFAULTS, PARAM_ORDER, PARAM_LABELS, PARAM_RANGES, INT_PARAMS

logger = logging.getLogger(__name__)

# Global DPI scale factor (set by main.py on startup)
_dpi_scale = 1.0


def set_dpi_scale(scale: float):
    """Set the global DPI scale factor."""
    global _dpi_scale
    _dpi_scale = scale


def scaled(value: int) -> int:
    """Scale a pixel value by the DPI scale factor."""
    return int(value * _dpi_scale)


# Parameter tooltips for user guidance
PARAM_TOOLTIPS = {
    "large_radius": "Radius of the large circle carrying the small one (px)",
    "small_radius": "Distance from the small circle centre to the pen (px)",
    "large_frequency": "Coarse steps per turn of the large circle",
    "small_frequency": "Coarse steps per turn of the small circle",
    "interpolate_distance_max": "Longest allowed segment between drawn points (px)",
}

# Parameter groupings for collapsible UI sections
PARAM_GROUPS = {
    "Circles": ["large_radius", "small_radius"],
    "Frequencies": ["large_frequency", "small_frequency"],
    "Rendering": ["interpolate_distance_max"],
}

WIDGET_PREFIX = "spiro"


def param_widget_tag(key: str) -> str:
    return f"{WIDGET_PREFIX}_param_{key}"


def clamp_param(key: str, value) -> Any:
    """Clamp a value into the slider range of ``key``; frequencies become ints."""
    lo, hi = PARAM_RANGES[key]
    if key in INT_PARAMS:
        value = int(round(value))
    else:
        value = float(value)
    return min(max(value, lo), hi)


class AppState:
    """
    Centralized application state manager.

    Values are always within PARAM_RANGES, so the sampler built from them
    never sees a non-positive frequency.
    """

    # Class-level state (singleton pattern)
    _params: Dict[str, Any] = {}
    _change_callbacks: List[Callable] = []
    _initialized: bool = False

    @classmethod
    def initialize(cls):
        """Initialize state with default values."""
        if cls._initialized:
            return

        cls._params = {key: DEFAULTS[key] for key in PARAM_ORDER}
        cls._change_callbacks = []
        cls._initialized = True

    @classmethod
    def get_params(cls) -> Dict[str, Any]:
        """Get a copy of all parameter values."""
        return cls._params.copy()

    @classmethod
    def get_param(cls, key: str):
        """Get a single parameter value."""
        return cls._params.get(key, DEFAULTS.get(key))

    @classmethod
    def set_param(cls, key: str, value):
        """Set a single parameter value, clamped into its range."""
        if key not in cls._params:
            return

        value = clamp_param(key, value)
        if cls._params[key] == value:
            return
        cls._params[key] = value

        widget_tag = param_widget_tag(key)
        if dpg.does_item_exist(widget_tag):
            dpg.set_value(widget_tag, value)

        cls._notify_change(key, value)

    @classmethod
    def reset_to_defaults(cls):
        """Reset all parameters to default values."""
        cls._params = {key: DEFAULTS[key] for key in PARAM_ORDER}

        for key, value in cls._params.items():
            widget_tag = param_widget_tag(key)
            if dpg.does_item_exist(widget_tag):
                dpg.set_value(widget_tag, value)

        cls._notify_change("*", None)

    @classmethod
    def add_change_callback(cls, callback: Callable):
        """Register a callback for parameter changes."""
        cls._change_callbacks.append(callback)

    @classmethod
    def _notify_change(cls, key: str, value: Any):
        """Notify all registered callbacks of a change."""
        for callback in cls._change_callbacks:
            try:
                callback(key, value)
            except Exception:
                logger.exception("Error in change callback for %s", key)


def get_param_label(key: str) -> str:
    """Get the display label for a parameter."""
    return PARAM_LABELS.get(key, key)


def get_param_tooltip(key: str) -> str:
    """Get the tooltip text for a parameter."""
    return PARAM_TOOLTIPS.get(key, "")


def get_param_groups() -> Dict[str, List[str]]:
    """Get parameter groupings for UI organization."""
    return PARAM_GROUPS.copy()
