"""
Tests for scene export and file loading

Tests for promptveo/core/export.py
"""

import json

import pytest

from promptveo.core.exceptions import ExportError
from promptveo.core.export import (
    export_scenes,
    load_scenes,
    read_transcript,
    scene_to_json,
)


class TestExportScenes:

    def test_writes_pretty_json_list(self, sample_scenes, temp_dir):
        path = export_scenes(sample_scenes, temp_dir / "scenes.json")

        text = path.read_text(encoding="utf-8")
        assert text.startswith("[\n  {")
        assert json.loads(text) == sample_scenes

    def test_empty_list_writes_nothing(self, temp_dir):
        target = temp_dir / "scenes.json"

        with pytest.raises(ExportError) as exc_info:
            export_scenes([], target)

        assert exc_info.value.message == "No data to export."
        assert not target.exists()

    def test_unicode_kept_verbatim(self, scene_factory, temp_dir):
        scene = scene_factory(1)
        scene["dialogue"] = "A: ¿Qué tal? B: 很好"

        path = export_scenes([scene], temp_dir / "scenes.json")

        assert "¿Qué tal?" in path.read_text(encoding="utf-8")

    def test_scene_to_json_keeps_key_order(self, hello_scene):
        text = scene_to_json(hello_scene)
        keys = list(json.loads(text).keys())
        assert keys[0] == "scene_id"
        assert keys[-1] == "scene_length_seconds"


class TestLoading:

    def test_load_scenes(self, sample_scenes, temp_dir):
        path = temp_dir / "scenes.json"
        path.write_text(json.dumps(sample_scenes), encoding="utf-8")

        assert load_scenes(path) == sample_scenes

    def test_load_rejects_non_list(self, temp_dir):
        path = temp_dir / "scenes.json"
        path.write_text('{"scene_id": 1}', encoding="utf-8")

        with pytest.raises(ExportError):
            load_scenes(path)

    def test_load_rejects_invalid_json(self, temp_dir):
        path = temp_dir / "scenes.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(ExportError):
            load_scenes(path)

    def test_missing_transcript(self, temp_dir):
        with pytest.raises(ExportError):
            read_transcript(temp_dir / "missing.txt")
