"""
Scene export and file loading.

Scene lists are written as pretty-printed JSON; the format is exactly the
list of scene objects returned by the backend.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from .exceptions import ExportError
from .logging_config import get_logger

logger = get_logger("core.export")

TRANSCRIPT_SUFFIXES = (".txt", ".md")


def scene_to_json(scene: Dict[str, Any]) -> str:
    """Pretty JSON for a single scene (used for cards and clipboard copy)."""
    return json.dumps(scene, indent=2, ensure_ascii=False)


def scenes_to_json(scenes: List[Dict[str, Any]]) -> str:
    return json.dumps(scenes, indent=2, ensure_ascii=False)


def export_scenes(scenes: List[Dict[str, Any]], path: Union[str, Path]) -> Path:
    """
    Write the scene list to ``path``.

    Raises:
        ExportError: the list is empty or the file cannot be written
    """
    if not scenes:
        raise ExportError("No data to export.")

    path = Path(path)
    try:
        path.write_text(scenes_to_json(scenes), encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Could not write {path}: {e}")

    logger.info(f"Exported {len(scenes)} scene(s) to {path}")
    return path


def load_scenes(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read a previously exported scene list."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ExportError(f"Could not read {path}: {e}")
    except json.JSONDecodeError as e:
        raise ExportError(f"Invalid JSON in {path.name}: {e}")

    if not isinstance(data, list):
        raise ExportError(f"{path.name} does not contain a scene list")
    return data


def read_transcript(path: Union[str, Path]) -> str:
    """Read a transcript text file."""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Could not read {path}: {e}")
    except UnicodeDecodeError as e:
        raise ExportError(f"{path.name} is not a UTF-8 text file: {e}")
