"""
PromptVEO UI Theme

Theme configuration for the CustomTkinter-based UI.
"""

from dataclasses import dataclass
from typing import Dict

import customtkinter as ctk


@dataclass
class ColorScheme:
    """Color scheme for the UI."""
    # Primary colors
    primary: str = "#1877f2"
    primary_hover: str = "#1464cf"

    # Accent colors
    accent: str = "#00a76f"
    accent_hover: str = "#008a5c"
    export: str = "#ffab00"
    export_hover: str = "#e69a00"

    # Background colors
    bg_dark: str = "#0d1217"
    bg_medium: str = "#1a2129"
    bg_light: str = "#212b36"
    bg_card: str = "#161c24"
    bg_hover: str = "#5a6673"
    neutral: str = "#454f5b"

    # Text colors
    text_primary: str = "#ffffff"
    text_secondary: str = "#c7d5e0"
    text_muted: str = "#8a98a8"

    # Status colors
    success: str = "#4caf50"
    error: str = "#f44336"
    processing: str = "#2196f3"

    # Border colors
    border: str = "#2c3e50"


@dataclass
class FontConfig:
    """Font configuration."""
    family: str = "Segoe UI"
    mono: str = "Consolas"
    size_small: int = 11
    size_normal: int = 13
    size_large: int = 15
    size_title: int = 18


@dataclass
class SpacingConfig:
    """Spacing configuration."""
    xs: int = 4
    sm: int = 8
    md: int = 12
    lg: int = 16


class PromptVeoTheme:
    """Theme manager for the PromptVEO UI (dark mode by default)."""

    def __init__(self):
        self.colors = ColorScheme()
        self.fonts = FontConfig()
        self.spacing = SpacingConfig()

    def apply(self, appearance_mode: str = "dark") -> None:
        """Apply the theme to CustomTkinter."""
        ctk.set_appearance_mode(appearance_mode)
        ctk.set_default_color_theme("blue")

    def set_font(self, family: str, base_size: int) -> None:
        """Set the font family and scale all sizes from the base size."""
        scale = base_size / 13.0
        self.fonts.family = family
        self.fonts.size_small = max(8, int(11 * scale))
        self.fonts.size_normal = base_size
        self.fonts.size_large = max(12, int(15 * scale))
        self.fonts.size_title = max(14, int(18 * scale))

    def get_button_style(self, variant: str = "primary") -> Dict:
        """Get button style configuration."""
        styles = {
            "primary": {
                "fg_color": self.colors.primary,
                "hover_color": self.colors.primary_hover,
                "text_color": self.colors.text_primary,
            },
            "accent": {
                "fg_color": self.colors.accent,
                "hover_color": self.colors.accent_hover,
                "text_color": self.colors.text_primary,
            },
            "export": {
                "fg_color": self.colors.export,
                "hover_color": self.colors.export_hover,
                "text_color": "#000000",
            },
            "secondary": {
                "fg_color": self.colors.neutral,
                "hover_color": self.colors.bg_hover,
                "text_color": self.colors.text_primary,
            },
        }
        return styles.get(variant, styles["primary"])

    def get_textbox_style(self) -> Dict:
        """Get textbox/entry style configuration."""
        return {
            "fg_color": self.colors.bg_dark,
            "border_color": self.colors.border,
            "border_width": 1,
            "text_color": self.colors.text_secondary,
        }

    def get_frame_style(self, variant: str = "panel") -> Dict:
        """Get frame style configuration."""
        styles = {
            "panel": {
                "fg_color": self.colors.bg_medium,
                "border_color": self.colors.border,
                "border_width": 1,
                "corner_radius": 8,
            },
            "card": {
                "fg_color": self.colors.bg_card,
                "border_color": self.colors.border,
                "border_width": 1,
                "corner_radius": 8,
            },
            "bar": {
                "fg_color": self.colors.bg_medium,
                "corner_radius": 0,
            },
        }
        return styles.get(variant, styles["panel"])

    def get_label_style(self, variant: str = "default") -> Dict:
        """Get label style configuration."""
        styles = {
            "default": {
                "text_color": self.colors.text_secondary,
                "font": (self.fonts.family, self.fonts.size_normal),
            },
            "title": {
                "text_color": self.colors.text_secondary,
                "font": (self.fonts.family, self.fonts.size_large, "bold"),
            },
            "muted": {
                "text_color": self.colors.text_muted,
                "font": (self.fonts.family, self.fonts.size_small),
            },
        }
        return styles.get(variant, styles["default"])


# Global theme instance
theme = PromptVeoTheme()
