"""Scene card showing one scene as JSON with a copy button."""

from typing import Any

import customtkinter as ctk

from promptveo.core.export import scene_to_json
from promptveo.core.logging_config import get_logger
from promptveo.core.session import scene_id
from promptveo.ui.theme import theme

logger = get_logger("ui.components.scene_card")

COPY_RESET_MS = 2000


class SceneCard(ctk.CTkFrame):
    """Read-only JSON view of a single scene."""

    def __init__(self, master, scene: Any, index: int, **kwargs):
        super().__init__(master, **theme.get_frame_style("card"), **kwargs)

        self.scene = scene
        self.index = index
        self._json_text = scene_to_json(scene)
        self._reset_job = None

        self._setup_ui()

    def _setup_ui(self) -> None:
        header = ctk.CTkFrame(self, fg_color=theme.colors.bg_light, corner_radius=6, height=30)
        header.pack(fill="x", padx=2, pady=(2, 0))
        header.pack_propagate(False)

        ctk.CTkLabel(
            header,
            text=f"Scene {self.index + 1}",
            font=(theme.fonts.family, theme.fonts.size_normal, "bold"),
            text_color=theme.colors.text_secondary
        ).pack(side="left", padx=theme.spacing.sm)

        self.copy_btn = ctk.CTkButton(
            header,
            text="Copy",
            width=80,
            height=22,
            command=self._on_copy,
            **theme.get_button_style("secondary")
        )
        self.copy_btn.pack(side="right", padx=theme.spacing.xs)

        body = ctk.CTkTextbox(
            self,
            height=160,
            wrap="word",
            font=(theme.fonts.mono, theme.fonts.size_small),
            **theme.get_textbox_style()
        )
        body.pack(fill="x", padx=theme.spacing.sm, pady=theme.spacing.sm)
        body.insert("1.0", self._json_text)
        body.configure(state="disabled")

    def _on_copy(self) -> None:
        """Put the scene JSON on the clipboard."""
        self.clipboard_clear()
        self.clipboard_append(self._json_text)
        logger.debug(f"Copied scene {scene_id(self.scene)} to clipboard")

        self.copy_btn.configure(text="Copied!")
        if self._reset_job is not None:
            self.after_cancel(self._reset_job)
        self._reset_job = self.after(COPY_RESET_MS, self._reset_copy_label)

    def _reset_copy_label(self) -> None:
        self._reset_job = None
        if self.winfo_exists():
            self.copy_btn.configure(text="Copy")
