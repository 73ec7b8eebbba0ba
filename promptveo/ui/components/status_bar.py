"""
PromptVEO Status Bar

Bottom status bar showing the session status line.
"""

import customtkinter as ctk

from promptveo.ui.theme import theme


class StatusBar(ctk.CTkFrame):
    """Status line with a colored state indicator."""

    def __init__(self, master, **kwargs):
        super().__init__(master, **kwargs)
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the UI components."""
        self.configure(height=28, **theme.get_frame_style("bar"))
        self.pack_propagate(False)

        self.status_indicator = ctk.CTkLabel(
            self,
            text="●",
            text_color=theme.colors.success,
            font=(theme.fonts.family, 10)
        )
        self.status_indicator.pack(side="left", padx=(theme.spacing.md, 0))

        self.status_label = ctk.CTkLabel(
            self,
            text="Ready",
            **theme.get_label_style("muted")
        )
        self.status_label.pack(side="left", padx=theme.spacing.sm)

        self.backend_label = ctk.CTkLabel(
            self,
            text="",
            **theme.get_label_style("muted")
        )
        self.backend_label.pack(side="right", padx=theme.spacing.md)

    def set_status(self, status: str, color: str = None) -> None:
        """Set the status message."""
        self.status_label.configure(text=status)
        if color:
            self.status_indicator.configure(text_color=color)

    def set_backend(self, url: str) -> None:
        self.backend_label.configure(text=f"Backend: {url}")

    def show_processing(self, message: str = "Processing...") -> None:
        self.set_status(message, theme.colors.processing)

    def show_success(self, message: str = "Ready") -> None:
        self.set_status(message, theme.colors.success)

    def show_error(self, message: str = "Error") -> None:
        self.set_status(message, theme.colors.error)
