"""
Theme and styling definitions for the DearPyGui application.

Dark theme for the drawing window.
"""

import dearpygui.dearpygui as dpg
import os

# Color palette
COLORS = {
    # Background colors
    "background": (30, 30, 35, 255),
    "child_bg": (35, 35, 42, 255),
    "popup_bg": (45, 45, 55, 255),

    # Text colors
    "text": (220, 220, 220, 255),
    "text_disabled": (100, 100, 100, 255),

    # Accent colors
    "primary": (80, 140, 200, 255),
    "primary_hover": (100, 160, 220, 255),
    "primary_active": (60, 120, 180, 255),
    "ok": (100, 255, 100, 255),
    "error": (255, 100, 100, 255),

    # Border and separator
    "border": (60, 60, 70, 255),
    "separator": (80, 80, 90, 255),

    # Input fields
    "input_bg": (50, 50, 60, 255),

    # Drawing surface
    "canvas_bg": (20, 20, 24, 255),
}


def setup_fonts(dpi_scale: float = 1.0):
    """Configure fonts for the application."""
    font_size = int(14 * dpi_scale)

    with dpg.font_registry():
        # First font that exists wins
        font_paths = [
            "C:/Windows/Fonts/consola.ttf",
            "C:/Windows/Fonts/consolab.ttf",
            "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
        ]

        default_font = None
        for path in font_paths:
            if os.path.exists(path):
                try:
                    default_font = dpg.add_font(path, font_size)
                    break
                except Exception:
                    continue

        if default_font:
            dpg.bind_font(default_font)


def create_themes():
    """Create all application themes."""

    # Main window theme
    with dpg.theme(tag="theme_main"):
        with dpg.theme_component(dpg.mvAll):
            # Window colors
            dpg.add_theme_color(dpg.mvThemeCol_WindowBg, COLORS["background"])
            dpg.add_theme_color(dpg.mvThemeCol_ChildBg, COLORS["child_bg"])
            dpg.add_theme_color(dpg.mvThemeCol_PopupBg, COLORS["popup_bg"])

            # Text
            dpg.add_theme_color(dpg.mvThemeCol_Text, COLORS["text"])
            dpg.add_theme_color(dpg.mvThemeCol_TextDisabled, COLORS["text_disabled"])

            # Borders
            dpg.add_theme_color(dpg.mvThemeCol_Border, COLORS["border"])
            dpg.add_theme_color(dpg.mvThemeCol_Separator, COLORS["separator"])

            # Frame (slider tracks)
            dpg.add_theme_color(dpg.mvThemeCol_FrameBg, COLORS["input_bg"])
            dpg.add_theme_color(dpg.mvThemeCol_FrameBgHovered, (60, 60, 75, 255))
            dpg.add_theme_color(dpg.mvThemeCol_FrameBgActive, (70, 70, 85, 255))

            # Buttons
            dpg.add_theme_color(dpg.mvThemeCol_Button, COLORS["primary"])
            dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, COLORS["primary_hover"])
            dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, COLORS["primary_active"])

            # Headers (collapsing headers, tree nodes)
            dpg.add_theme_color(dpg.mvThemeCol_Header, (50, 50, 60, 255))
            dpg.add_theme_color(dpg.mvThemeCol_HeaderHovered, (60, 60, 75, 255))
            dpg.add_theme_color(dpg.mvThemeCol_HeaderActive, (70, 70, 85, 255))

            # Sliders
            dpg.add_theme_color(dpg.mvThemeCol_SliderGrab, COLORS["primary"])
            dpg.add_theme_color(dpg.mvThemeCol_SliderGrabActive, COLORS["primary_hover"])

            # Title bar
            dpg.add_theme_color(dpg.mvThemeCol_TitleBg, (35, 35, 42, 255))
            dpg.add_theme_color(dpg.mvThemeCol_TitleBgActive, (45, 45, 55, 255))

            # Menu
            dpg.add_theme_color(dpg.mvThemeCol_MenuBarBg, (35, 35, 42, 255))

            # Scrollbar
            dpg.add_theme_color(dpg.mvThemeCol_ScrollbarBg, (30, 30, 38, 255))
            dpg.add_theme_color(dpg.mvThemeCol_ScrollbarGrab, (60, 60, 75, 255))
            dpg.add_theme_color(dpg.mvThemeCol_ScrollbarGrabHovered, (80, 80, 95, 255))
            dpg.add_theme_color(dpg.mvThemeCol_ScrollbarGrabActive, (100, 100, 115, 255))

            # Styling
            dpg.add_theme_style(dpg.mvStyleVar_FrameRounding, 4)
            dpg.add_theme_style(dpg.mvStyleVar_WindowRounding, 6)
            dpg.add_theme_style(dpg.mvStyleVar_ChildRounding, 4)
            dpg.add_theme_style(dpg.mvStyleVar_PopupRounding, 4)
            dpg.add_theme_style(dpg.mvStyleVar_ScrollbarRounding, 4)
            dpg.add_theme_style(dpg.mvStyleVar_GrabRounding, 4)

            dpg.add_theme_style(dpg.mvStyleVar_WindowPadding, 8, 8)
            dpg.add_theme_style(dpg.mvStyleVar_FramePadding, 6, 4)
            dpg.add_theme_style(dpg.mvStyleVar_ItemSpacing, 8, 4)
            dpg.add_theme_style(dpg.mvStyleVar_ItemInnerSpacing, 4, 4)

    # Button themes
    _create_button_theme("theme_button_update", COLORS["primary"])
    _create_button_theme("theme_button_reset", (100, 100, 110, 255))


def _create_button_theme(tag: str, color: tuple):
    """Helper to create a button theme."""
    hover = tuple(min(c + 25, 255) for c in color[:3]) + (255,)
    active = tuple(max(c - 20, 0) for c in color[:3]) + (255,)

    with dpg.theme(tag=tag):
        with dpg.theme_component(dpg.mvButton):
            dpg.add_theme_color(dpg.mvThemeCol_Button, color)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, hover)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, active)

