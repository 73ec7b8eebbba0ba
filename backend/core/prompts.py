"""
Prompt Templates

Natural-language instructions for the generate and expand requests.
"""

import json
from typing import Any, Dict, List, Optional

NO_DESCRIPTION = "None provided"

GENERATE_TEMPLATE = """You are an AI assistant that writes video scripts as JSON. Your task is to take a transcript and an optional character description and convert them into a JSON structure made of several scenes.

**Output JSON format:**
- The output must be a JSON array (a list of scenes).
- Each scene is a JSON object with the keys "scene_id", "setting", "time", "location", "characters", "dialogue" and "scene_length_seconds".
- "characters" must be an array holding the character objects that appear in the scene.
- Each character object must have "name" and "description".
- "scene_length_seconds" is an integer estimate of the scene duration.

**Processing rules:**
1. Read the transcript carefully and split it into logical scenes based on changes of setting, time or event.
2. If a character description is provided, use that exact description for the main character in every scene where that character appears, so the character stays consistent.
3. If no description is provided, infer a short description from the transcript content.
4. Split the dialogue and attribute every line to the right character in "dialogue".
5. Start scene_id at 1.

**Input data:**
**Transcript:**
{transcript}

**Main character description:**
{character_description}

Now produce the JSON array as requested."""

EXPAND_TEMPLATE = """You are an AI assistant that continues video scripts. Below are the existing scenes. Based on this context, write {scenes_to_add} more scene(s).

**Output JSON format:**
- The format must be identical to the existing scenes.
- "scene_id" must start at {first_scene_id} and increase by 1 for each new scene.

**Existing scenes:**
{existing_scenes}

Now produce the next {scenes_to_add} JSON scene(s). Return only the new scenes."""


def last_scene_id(existing_scenes: List[Dict[str, Any]]) -> int:
    """Highest integer scene_id in the list, or 0 when there is none.

    Entries without an integer scene_id are skipped.
    """
    ids = [
        scene.get("scene_id")
        for scene in existing_scenes
        if isinstance(scene, dict)
    ]
    ids = [i for i in ids if isinstance(i, int) and not isinstance(i, bool)]
    return max(ids, default=0)


def build_generate_prompt(transcript: str, character_description: Optional[str] = None) -> str:
    description = (character_description or "").strip() or NO_DESCRIPTION
    return GENERATE_TEMPLATE.format(
        transcript=transcript,
        character_description=description,
    )


def build_expand_prompt(existing_scenes: List[Dict[str, Any]], scenes_to_add: int) -> str:
    return EXPAND_TEMPLATE.format(
        scenes_to_add=scenes_to_add,
        first_scene_id=last_scene_id(existing_scenes) + 1,
        existing_scenes=json.dumps(existing_scenes, indent=2, ensure_ascii=False),
    )
