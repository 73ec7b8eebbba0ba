"""
Scene Session

Holds the current scene list and request state for the client, and
enforces the input guardrails before anything is sent to the backend.
The desktop UI and the CLI both drive this object.
"""

import threading
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol, Union

from .exceptions import (
    ExportError,
    PromptVeoError,
    SessionBusyError,
    ValidationError,
)
from .export import export_scenes, load_scenes, read_transcript
from .logging_config import get_logger

logger = get_logger("core.session")

WELCOME_STATUS = "Welcome to PromptVEO"


class SessionState(str, Enum):
    """Request lifecycle state."""
    IDLE = "idle"
    LOADING = "loading"


class SceneBackend(Protocol):
    def generate_scenes(self, transcript: str, character_description: str = "") -> List[Dict[str, Any]]:
        ...

    def expand_script(self, existing_scenes: List[Dict[str, Any]], scenes_to_add: int) -> List[Dict[str, Any]]:
        ...


def clamp_expand_count(value: Any) -> int:
    """Parse a user-entered expand count, never returning less than 1."""
    try:
        count = int(str(value).strip())
    except (TypeError, ValueError):
        return 1
    return max(1, count)


def _message(exc: Exception) -> str:
    if isinstance(exc, PromptVeoError):
        return exc.message
    return str(exc) or "Unknown error."


def scene_duration(scene: Dict[str, Any]) -> float:
    value = scene.get("scene_length_seconds") if isinstance(scene, dict) else None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def scene_id(scene: Any) -> Any:
    """The scene's scene_id, or None for entries that are not objects."""
    return scene.get("scene_id") if isinstance(scene, dict) else None


class SceneSession:
    """
    Client-side scene state.

    Features:
    - idle/loading lifecycle with a single in-flight request
    - generate replaces the list, expand appends to it
    - status line text for every outcome
    - change listeners for UI refresh
    """

    def __init__(self, backend: SceneBackend, default_expand_count: int = 1):
        self.backend = backend
        self.scenes: List[Dict[str, Any]] = []
        self.state = SessionState.IDLE
        self.status_text = WELCOME_STATUS
        self.expand_count = clamp_expand_count(default_expand_count)
        self._listeners: List[Callable[["SceneSession"], None]] = []
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def is_loading(self) -> bool:
        return self.state == SessionState.LOADING

    @property
    def scene_count(self) -> int:
        return len(self.scenes)

    @property
    def total_duration(self) -> float:
        """Sum of scene_length_seconds; missing values count as 0."""
        return sum(scene_duration(scene) for scene in self.scenes)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, callback: Callable[["SceneSession"], None]) -> None:
        self._listeners.append(callback)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            try:
                callback(self)
            except Exception as e:
                logger.error(f"Session listener failed: {e}", exc_info=True)

    def _set_status(self, text: str) -> None:
        self.status_text = text
        self._notify()

    # ------------------------------------------------------------------
    # Request lifecycle
    # ------------------------------------------------------------------

    def _begin(self, status: str) -> None:
        with self._lock:
            if self.state == SessionState.LOADING:
                raise SessionBusyError()
            self.state = SessionState.LOADING
        self._set_status(status)

    def _finish(self) -> None:
        with self._lock:
            self.state = SessionState.IDLE
        self._notify()

    def generate(self, transcript: str, character_description: str = "") -> List[Dict[str, Any]]:
        """
        Replace the scene list with scenes generated from ``transcript``.

        Raises:
            ValidationError: the transcript is blank (no request is made)
            SessionBusyError: another request is in flight
            TransportError: the backend call failed
        """
        if not transcript or not transcript.strip():
            self._set_status("Error: Please enter a transcript!")
            raise ValidationError("Transcript is required.")

        self._begin("Analyzing...")
        self.scenes = []
        try:
            result = self.backend.generate_scenes(transcript, character_description or "")
            self.scenes = list(result)
            self.status_text = f"Analysis complete - {len(self.scenes)} scenes created"
            logger.info(self.status_text)
            return self.scenes
        except Exception as e:
            self.status_text = f"Error: {_message(e)}"
            logger.error(f"Generate failed: {e}")
            raise
        finally:
            self._finish()

    def expand(self, count: Any = None) -> List[Dict[str, Any]]:
        """
        Append ``count`` generated scenes to the current list.

        Returns the new scenes only.
        """
        if not self.scenes:
            self._set_status("Error: Existing scenes are required to expand.")
            raise ValidationError("Existing scenes are required to expand.")

        if count is not None:
            self.expand_count = clamp_expand_count(count)
        scenes_to_add = self.expand_count

        self._begin(f"Expanding script by {scenes_to_add} scene(s)...")
        try:
            new_scenes = list(self.backend.expand_script(list(self.scenes), scenes_to_add))
            self.scenes = self.scenes + new_scenes
            self.status_text = f"Expanded successfully. Total scenes: {len(self.scenes)}"
            logger.info(self.status_text)
            return new_scenes
        except Exception as e:
            self.status_text = f"Expand error: {_message(e)}"
            logger.error(f"Expand failed: {e}")
            raise
        finally:
            self._finish()

    # ------------------------------------------------------------------
    # Local actions
    # ------------------------------------------------------------------

    def clear(self) -> None:
        self.scenes = []
        self._set_status("All data cleared.")

    def export_json(self, path: Union[str, Path]) -> Path:
        try:
            written = export_scenes(self.scenes, path)
        except ExportError as e:
            self._set_status(f"Error: {e.message}")
            raise
        self._set_status("JSON file exported successfully.")
        return written

    def import_json(self, path: Union[str, Path]) -> List[Dict[str, Any]]:
        """Replace the scene list with a previously exported file."""
        try:
            scenes = load_scenes(path)
        except ExportError as e:
            self._set_status(f"Error: {e.message}")
            raise
        self.scenes = scenes
        self._set_status(f"Loaded {len(scenes)} scenes from {Path(path).name}")
        return scenes

    def open_transcript(self, path: Union[str, Path]) -> str:
        try:
            text = read_transcript(path)
        except ExportError as e:
            self._set_status(f"Error: {e.message}")
            raise
        self._set_status(f"Loaded file: {Path(path).name}")
        return text

    def describe(self) -> str:
        """One-line summary for the output panel header."""
        return f"Scenes: {self.scene_count} | Total duration: {self.total_duration:.1f}s"
