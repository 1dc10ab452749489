"""
DearPyGui Application - SpiroLab

Entry point: sliders on the left, the adaptive spirograph on the right.
"""

import logging
import os
import sys
import ctypes

import dearpygui.dearpygui as dpg

from dpg_app.themes import create_themes, setup_fonts
from dpg_app.app_state import AppState, set_dpi_scale
from dpg_app.tabs.tab_spirograph import create_tab_spirograph, request_redraw, redraw_if_pending

logger = logging.getLogger(__name__)


def set_windows_dark_titlebar():
    """Enable dark mode for the window title bar on Windows 10/11."""
    if sys.platform != "win32":
        return
    try:
        hwnd = ctypes.windll.user32.GetActiveWindow()
        DWMWA_USE_IMMERSIVE_DARK_MODE = 20
        value = ctypes.c_int(1)
        ctypes.windll.dwmapi.DwmSetWindowAttribute(
            hwnd, DWMWA_USE_IMMERSIVE_DARK_MODE,
            ctypes.byref(value), ctypes.sizeof(value)
        )
    except Exception:
        logger.debug("Dark title bar not available", exc_info=True)


def _detect_dpi_scale() -> float:
    """Enable DPI awareness on Windows and return the scale factor."""
    if sys.platform != "win32":
        return 1.0
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(2)  # Per-monitor DPI aware
        user32 = ctypes.windll.user32
        user32.SetProcessDPIAware()
        dc = user32.GetDC(0)
        dpi = ctypes.windll.gdi32.GetDeviceCaps(dc, 88)  # LOGPIXELSX
        user32.ReleaseDC(0, dc)
        return dpi / 96.0  # 96 is the default DPI
    except Exception:
        try:
            ctypes.windll.user32.SetProcessDPIAware()
        except Exception:
            logger.debug("DPI awareness not available", exc_info=True)
    return 1.0


def setup_logging():
    """Configure logging from the SPIROLAB_LOG environment variable."""
    level_name = os.environ.get("SPIROLAB_LOG", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def create_menu_bar():
    """Create the application menu bar."""
    with dpg.menu_bar():
        with dpg.menu(label="File"):
            dpg.add_menu_item(
                label="Exit",
                callback=lambda: dpg.stop_dearpygui()
            )

        with dpg.menu(label="View"):
            dpg.add_menu_item(
                label="Redraw",
                callback=lambda: request_redraw(),
                shortcut="F5"
            )
            dpg.add_menu_item(
                label="Reset Parameters",
                callback=lambda: AppState.reset_to_defaults(),
                shortcut="Ctrl+R"
            )


def create_status_bar():
    """Create the bottom status bar."""
    with dpg.group(horizontal=True, tag="status_bar"):
        dpg.add_text("Ready", tag="status_text")
        dpg.add_spacer(width=30)
        dpg.add_text("Segments: 0", tag="segment_count")


def _on_ctrl_r():
    if dpg.is_key_down(dpg.mvKey_LControl) or dpg.is_key_down(dpg.mvKey_RControl):
        AppState.reset_to_defaults()


def setup_keyboard_shortcuts():
    """Register global keyboard shortcuts."""
    with dpg.handler_registry(tag="global_handlers"):
        dpg.add_key_press_handler(dpg.mvKey_F5, callback=lambda: request_redraw())
        dpg.add_key_press_handler(dpg.mvKey_R, callback=_on_ctrl_r)


def update_status(text: str):
    """Update the status bar text."""
    if dpg.does_item_exist("status_text"):
        dpg.set_value("status_text", text)


def update_segment_count(count: int):
    """Update the segment count display."""
    if dpg.does_item_exist("segment_count"):
        dpg.set_value("segment_count", f"Segments: {count:,}")


def create_main_window():
    """Create the main application window."""
    with dpg.window(tag="primary_window"):
        create_menu_bar()

        dpg.add_text("SpiroLab", color=(180, 180, 255))
        with dpg.child_window(height=-30, border=False, tag="main_area"):
            create_tab_spirograph()

        dpg.add_separator()
        create_status_bar()


def main():
    """Main entry point for the application."""
    setup_logging()

    dpi_scale = _detect_dpi_scale()

    dpg.create_context()

    # Set DPI scale for other modules to use
    set_dpi_scale(dpi_scale)

    # Setup fonts first (must be before viewport creation)
    setup_fonts(dpi_scale)

    # Create themes
    create_themes()

    # Initialize application state
    AppState.initialize()

    # Create viewport (scale dimensions for high-DPI displays)
    dpg.create_viewport(
        title="SpiroLab",
        width=int(750 * dpi_scale),
        height=int(500 * dpi_scale),
        min_width=int(600 * dpi_scale),
        min_height=int(400 * dpi_scale)
    )

    # Create main window
    create_main_window()

    # Apply main theme
    dpg.bind_theme("theme_main")

    # Set primary window
    dpg.set_primary_window("primary_window", True)

    # Setup keyboard shortcuts
    setup_keyboard_shortcuts()

    # Redraw whenever the drawing area changes size
    dpg.set_viewport_resize_callback(lambda: request_redraw())

    # Setup and show viewport
    dpg.setup_dearpygui()
    dpg.show_viewport()

    # Enable dark title bar on Windows
    set_windows_dark_titlebar()

    update_status("Ready")
    request_redraw()

    # Main loop: a burst of slider edits between two frames costs one redraw
    while dpg.is_dearpygui_running():
        # Item sizes are only known once a frame has been laid out
        if dpg.get_frame_count() > 1:
            redraw_if_pending()
        dpg.render_dearpygui_frame()

    dpg.destroy_context()


if __name__ == "__main__":
    main()
