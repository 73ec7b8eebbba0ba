"""
Pytest Configuration and Fixtures

Shared fixtures for backend and client tests.
"""

import copy
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List

import pytest

from backend.core.config import Settings
from backend.core.exceptions import GenerationError


class FakeProvider:
    """Completion provider returning canned results and recording prompts."""

    def __init__(self, result: Any = None, error: Exception = None):
        self.result = result
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def complete(self, prompt: str, schema: Dict[str, Any]) -> Any:
        self.calls.append({"prompt": prompt, "schema": schema})
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.result)

    @property
    def last_prompt(self) -> str:
        return self.calls[-1]["prompt"]


class FakeBackend:
    """Stand-in for SceneApiClient used by session tests."""

    def __init__(self, generated=None, expanded=None, error: Exception = None):
        self.generated = generated or []
        self.expanded = expanded or []
        self.error = error
        self.generate_calls: List[tuple] = []
        self.expand_calls: List[tuple] = []

    def generate_scenes(self, transcript: str, character_description: str = ""):
        self.generate_calls.append((transcript, character_description))
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.generated)

    def expand_script(self, existing_scenes, scenes_to_add: int):
        self.expand_calls.append((copy.deepcopy(existing_scenes), scenes_to_add))
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.expanded)


def make_scene(scene_id: int, length: int = 10, characters=None) -> Dict[str, Any]:
    return {
        "scene_id": scene_id,
        "setting": f"Setting {scene_id}",
        "time": "Morning",
        "location": "Street corner",
        "characters": characters if characters is not None else [
            {"name": "A", "description": "A tall courier in a yellow raincoat"},
        ],
        "dialogue": f"A: Line {scene_id}.",
        "scene_length_seconds": length,
    }


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_scenes() -> List[Dict[str, Any]]:
    """Five well-formed scenes with ids 1..5."""
    return [make_scene(i, length=8 + i) for i in range(1, 6)]


@pytest.fixture
def hello_scene() -> Dict[str, Any]:
    """Provider answer for the transcript 'A: Hello. B: Hi there.'"""
    return {
        "scene_id": 1,
        "setting": "Two strangers meet",
        "time": "Afternoon",
        "location": "Bus stop",
        "characters": [
            {"name": "A", "description": "A friendly commuter"},
            {"name": "B", "description": "A cheerful student"},
        ],
        "dialogue": "A: Hello.\nB: Hi there.",
        "scene_length_seconds": 6,
    }


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a dummy key and no .env lookup."""
    return Settings(_env_file=None, gemini_api_key="test-key")


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider(result=[])


@pytest.fixture
def generation_error() -> GenerationError:
    return GenerationError("HTTP 503: The model is overloaded.")


@pytest.fixture
def provider_factory():
    """Build FakeProvider instances inside a test."""
    return FakeProvider


@pytest.fixture
def backend_factory():
    """Build FakeBackend instances inside a test."""
    return FakeBackend


@pytest.fixture
def scene_factory():
    """Build scene dicts inside a test."""
    return make_scene
