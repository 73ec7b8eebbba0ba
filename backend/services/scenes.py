"""
Scene Service

Turns generate/expand requests into provider prompts and checks what
comes back.
"""

from typing import Any, Dict, List, Optional

from backend.core.exceptions import GenerationError, ValidationError
from backend.core.logging import get_logger
from backend.core.prompts import build_expand_prompt, build_generate_prompt, last_scene_id
from backend.core.provider import TextCompletionProvider
from backend.core.schema import SCENE_LIST_SCHEMA

logger = get_logger("services.scenes")


class SceneService:
    """Stateless generate/expand operations over a completion provider."""

    def __init__(self, provider: TextCompletionProvider):
        self.provider = provider

    def generate(self, transcript: str, character_description: Optional[str] = None) -> List[Dict[str, Any]]:
        """Segment a transcript into scenes.

        The provider's list is returned as-is; scene order and ids are not
        rewritten.
        """
        if not transcript or not transcript.strip():
            raise ValidationError("Transcript is required.")

        prompt = build_generate_prompt(transcript, character_description)
        scenes = self._complete_list(prompt)
        logger.info(f"Generated {len(scenes)} scene(s) from {len(transcript)} transcript chars")
        return scenes

    def expand(self, existing_scenes: List[Dict[str, Any]], scenes_to_add: int) -> List[Dict[str, Any]]:
        """Continue the narrative, returning only the new scenes.

        The new scenes must number exactly ``scenes_to_add`` and carry ids
        that continue directly after the highest existing id.
        """
        if existing_scenes is None or scenes_to_add is None:
            raise ValidationError("existingScenes and scenesToAdd are required.")

        first_id = last_scene_id(existing_scenes) + 1
        prompt = build_expand_prompt(existing_scenes, scenes_to_add)
        new_scenes = self._complete_list(prompt)
        self._check_continuation(new_scenes, first_id, scenes_to_add)
        logger.info(
            f"Expanded {len(existing_scenes)} scene(s) by {len(new_scenes)} "
            f"(ids {first_id}..{first_id + len(new_scenes) - 1})"
        )
        return new_scenes

    def _complete_list(self, prompt: str) -> List[Dict[str, Any]]:
        result = self.provider.complete(prompt, SCENE_LIST_SCHEMA)
        if not isinstance(result, list):
            raise GenerationError(
                "Model response is not a JSON array of scenes",
                {"type": type(result).__name__},
            )
        return result

    @staticmethod
    def _check_continuation(new_scenes: List[Any], first_id: int, expected_count: int) -> None:
        expected_count = max(expected_count, 0)
        if len(new_scenes) != expected_count:
            raise GenerationError(
                f"Model returned {len(new_scenes)} scene(s), expected {expected_count}",
                {"returned": len(new_scenes), "expected": expected_count},
            )

        expected_ids = list(range(first_id, first_id + expected_count))
        actual_ids = [
            scene.get("scene_id") if isinstance(scene, dict) else None
            for scene in new_scenes
        ]
        if actual_ids != expected_ids:
            raise GenerationError(
                f"Model returned scene ids {actual_ids}, expected {expected_ids}",
                {"returned_ids": actual_ids, "expected_ids": expected_ids},
            )
