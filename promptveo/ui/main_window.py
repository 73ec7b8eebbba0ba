"""
PromptVEO Main Window

Two-panel layout: transcript input on the left, generated scenes on the
right, status bar along the bottom.
"""

import threading
from pathlib import Path
from tkinter import filedialog
from typing import Callable

import customtkinter as ctk

from promptveo.core.config import ClientConfig
from promptveo.core.exceptions import PromptVeoError
from promptveo.core.logging_config import get_logger
from promptveo.core.session import SceneSession, clamp_expand_count
from promptveo.ui.components import SceneCard, StatusBar
from promptveo.ui.theme import theme

logger = get_logger("ui.main_window")


class SceneStudioWindow(ctk.CTk):
    """
    Main application window.

    Features:
    - Transcript and character description input
    - Open transcript file / clear / analyze (F5) / export JSON (Ctrl+E)
    - Scene cards with per-scene copy
    - Expand script by N scenes
    """

    def __init__(self, session: SceneSession, config: ClientConfig):
        super().__init__()

        self.session = session
        self.client_config = config

        theme.set_font(config.ui.font_family, config.ui.font_size)
        theme.apply(config.ui.appearance_mode)

        self.title(config.app_name)
        self.geometry(f"{config.ui.window_width}x{config.ui.window_height}")
        self.configure(fg_color=theme.colors.bg_dark)

        self._setup_ui()
        self._bind_shortcuts()

        self.session.add_listener(lambda _session: self.after(0, self._refresh))
        self._refresh()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _setup_ui(self) -> None:
        header = ctk.CTkFrame(self, height=40, **theme.get_frame_style("bar"))
        header.pack(fill="x")
        header.pack_propagate(False)
        ctk.CTkLabel(
            header,
            text="🎬 PromptVEO Scene Studio",
            **theme.get_label_style("title")
        ).pack(side="left", padx=theme.spacing.md)

        self.status_bar = StatusBar(self)
        self.status_bar.pack(fill="x", side="bottom")
        self.status_bar.set_backend(self.client_config.backend_url)

        main = ctk.CTkFrame(self, fg_color="transparent")
        main.pack(fill="both", expand=True, padx=theme.spacing.lg, pady=theme.spacing.lg)
        main.grid_columnconfigure((0, 1), weight=1, uniform="panels")
        main.grid_rowconfigure(0, weight=1)

        self._build_input_panel(main)
        self._build_output_panel(main)

    def _build_input_panel(self, parent) -> None:
        panel = ctk.CTkFrame(parent, **theme.get_frame_style("panel"))
        panel.grid(row=0, column=0, sticky="nsew", padx=(0, theme.spacing.sm))

        ctk.CTkLabel(panel, text="Input", **theme.get_label_style("title")).pack(
            anchor="w", padx=theme.spacing.lg, pady=(theme.spacing.md, theme.spacing.sm)
        )

        ctk.CTkLabel(panel, text="Transcript", **theme.get_label_style("muted")).pack(
            anchor="w", padx=theme.spacing.lg
        )
        self.transcript_box = ctk.CTkTextbox(panel, wrap="word", **theme.get_textbox_style())
        self.transcript_box.pack(fill="both", expand=True, padx=theme.spacing.lg, pady=(0, theme.spacing.sm))

        ctk.CTkLabel(
            panel, text="Character description (optional)", **theme.get_label_style("muted")
        ).pack(anchor="w", padx=theme.spacing.lg)
        self.character_box = ctk.CTkTextbox(panel, height=140, wrap="word", **theme.get_textbox_style())
        self.character_box.pack(fill="x", padx=theme.spacing.lg, pady=(0, theme.spacing.md))

        buttons = ctk.CTkFrame(panel, fg_color="transparent")
        buttons.pack(fill="x", padx=theme.spacing.lg, pady=(0, theme.spacing.lg))
        buttons.grid_columnconfigure((0, 1), weight=1)

        ctk.CTkButton(
            buttons, text="📂 Open file", command=self._on_open_file,
            **theme.get_button_style("primary")
        ).grid(row=0, column=0, sticky="ew", padx=theme.spacing.xs, pady=theme.spacing.xs)
        ctk.CTkButton(
            buttons, text="🗑 Clear", command=self._on_clear,
            **theme.get_button_style("secondary")
        ).grid(row=0, column=1, sticky="ew", padx=theme.spacing.xs, pady=theme.spacing.xs)
        self.analyze_btn = ctk.CTkButton(
            buttons, text="Analyze (F5)", command=self._on_analyze,
            **theme.get_button_style("accent")
        )
        self.analyze_btn.grid(row=1, column=0, sticky="ew", padx=theme.spacing.xs, pady=theme.spacing.xs)
        ctk.CTkButton(
            buttons, text="Export JSON (Ctrl+E)", command=self._on_export,
            **theme.get_button_style("export")
        ).grid(row=1, column=1, sticky="ew", padx=theme.spacing.xs, pady=theme.spacing.xs)

    def _build_output_panel(self, parent) -> None:
        panel = ctk.CTkFrame(parent, **theme.get_frame_style("panel"))
        panel.grid(row=0, column=1, sticky="nsew", padx=(theme.spacing.sm, 0))

        top = ctk.CTkFrame(panel, fg_color="transparent")
        top.pack(fill="x", padx=theme.spacing.lg, pady=(theme.spacing.md, theme.spacing.sm))
        ctk.CTkLabel(top, text="Results", **theme.get_label_style("title")).pack(side="left")
        self.summary_label = ctk.CTkLabel(top, text="", **theme.get_label_style("default"))
        self.summary_label.pack(side="right")

        self.scene_list = ctk.CTkScrollableFrame(panel, fg_color="transparent")
        self.scene_list.pack(fill="both", expand=True, padx=theme.spacing.sm)

        self.empty_label = ctk.CTkLabel(
            self.scene_list, text="No analysis results yet...", **theme.get_label_style("muted")
        )

        bottom = ctk.CTkFrame(panel, fg_color="transparent")
        bottom.pack(fill="x", padx=theme.spacing.lg, pady=theme.spacing.md)
        ctk.CTkLabel(bottom, text="Scenes to add:", **theme.get_label_style("default")).pack(side="left")

        self.expand_var = ctk.StringVar(value=str(self.session.expand_count))
        self.expand_entry = ctk.CTkEntry(
            bottom, width=60, justify="center", textvariable=self.expand_var,
            fg_color=theme.colors.bg_dark, border_color=theme.colors.border
        )
        self.expand_entry.pack(side="left", padx=theme.spacing.sm)
        self.expand_entry.bind("<FocusOut>", lambda _e: self._normalize_expand_count())

        self.expand_btn = ctk.CTkButton(
            bottom, text="Expand script", command=self._on_expand,
            **theme.get_button_style("secondary")
        )
        self.expand_btn.pack(side="left", fill="x", expand=True)

    def _bind_shortcuts(self) -> None:
        self.bind("<F5>", lambda _e: self._on_analyze())
        self.bind("<Control-e>", lambda _e: self._on_export())
        self.bind("<Control-E>", lambda _e: self._on_export())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _refresh(self) -> None:
        """Sync widgets with session state."""
        session = self.session
        loading = session.is_loading

        state = "disabled" if loading else "normal"
        self.analyze_btn.configure(state=state)
        self.expand_btn.configure(state=state)

        if loading:
            self.status_bar.show_processing(session.status_text)
        elif session.status_text.startswith(("Error", "Expand error")):
            self.status_bar.show_error(session.status_text)
        else:
            self.status_bar.show_success(session.status_text)

        self.summary_label.configure(text=session.describe())
        self._render_scenes()

    def _render_scenes(self) -> None:
        scenes = self.session.scenes
        cards = [w for w in self.scene_list.winfo_children() if isinstance(w, SceneCard)]
        if len(cards) == len(scenes) and all(c.scene is s for c, s in zip(cards, scenes)):
            return

        for card in cards:
            card.destroy()

        if not scenes:
            self.empty_label.pack(pady=theme.spacing.lg)
            return

        self.empty_label.pack_forget()
        for index, scene in enumerate(scenes):
            SceneCard(self.scene_list, scene, index).pack(fill="x", pady=theme.spacing.xs)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _run_in_background(self, task: Callable[[], object]) -> None:
        """Run a session request off the UI thread."""
        def worker():
            try:
                task()
            except PromptVeoError:
                # Already reflected in the session status line.
                pass
            except Exception as e:
                logger.error(f"Background task failed: {e}", exc_info=True)
            finally:
                self.after(0, self._refresh)

        threading.Thread(target=worker, daemon=True).start()

    def _on_analyze(self) -> None:
        if self.session.is_loading:
            return
        transcript = self.transcript_box.get("1.0", "end-1c")
        character = self.character_box.get("1.0", "end-1c")

        if not transcript.strip():
            try:
                self.session.generate(transcript, character)
            except PromptVeoError:
                pass
            return

        self._run_in_background(lambda: self.session.generate(transcript, character))

    def _normalize_expand_count(self) -> int:
        count = clamp_expand_count(self.expand_var.get())
        self.expand_var.set(str(count))
        return count

    def _on_expand(self) -> None:
        if self.session.is_loading:
            return
        count = self._normalize_expand_count()

        if not self.session.scenes:
            try:
                self.session.expand(count)
            except PromptVeoError:
                pass
            return

        self._run_in_background(lambda: self.session.expand(count))

    def _on_clear(self) -> None:
        self.transcript_box.delete("1.0", "end")
        self.character_box.delete("1.0", "end")
        self.session.clear()

    def _on_open_file(self) -> None:
        path = filedialog.askopenfilename(
            title="Open transcript",
            filetypes=[("Text files", "*.txt *.md"), ("All files", "*.*")]
        )
        if not path:
            return
        try:
            text = self.session.open_transcript(path)
        except PromptVeoError:
            return
        self.transcript_box.delete("1.0", "end")
        self.transcript_box.insert("1.0", text)

    def _on_export(self) -> None:
        if not self.session.scenes:
            try:
                self.session.export_json(self.client_config.export_filename)
            except PromptVeoError:
                pass
            return

        path = filedialog.asksaveasfilename(
            title="Export scenes",
            initialfile=self.client_config.export_filename,
            defaultextension=".json",
            filetypes=[("JSON files", "*.json")]
        )
        if not path:
            return
        try:
            self.session.export_json(Path(path))
        except PromptVeoError as e:
            logger.error(f"Export failed: {e}")
