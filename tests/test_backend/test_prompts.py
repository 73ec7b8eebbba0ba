"""
Tests for prompt construction

Tests for backend/core/prompts.py
"""

import json

from backend.core.prompts import (
    NO_DESCRIPTION,
    build_expand_prompt,
    build_generate_prompt,
    last_scene_id,
)


class TestGeneratePrompt:

    def test_embeds_transcript_and_description(self):
        prompt = build_generate_prompt("A: Hello. B: Hi there.", "A tall courier")

        assert "A: Hello. B: Hi there." in prompt
        assert "A tall courier" in prompt
        assert "Start scene_id at 1" in prompt

    def test_missing_description_is_marked(self):
        assert NO_DESCRIPTION in build_generate_prompt("text", None)
        assert NO_DESCRIPTION in build_generate_prompt("text", "   ")

    def test_transcript_with_braces_is_kept_verbatim(self):
        prompt = build_generate_prompt('A: {"x": 1} and {name}', None)
        assert 'A: {"x": 1} and {name}' in prompt


class TestExpandPrompt:

    def test_last_scene_id(self, sample_scenes):
        assert last_scene_id(sample_scenes) == 5
        assert last_scene_id([]) == 0

    def test_last_scene_id_uses_highest_id(self, scene_factory):
        scenes = [scene_factory(3), scene_factory(7), scene_factory(4)]
        assert last_scene_id(scenes) == 7

    def test_continues_after_existing_ids(self, sample_scenes):
        prompt = build_expand_prompt(sample_scenes, 2)

        assert "start at 6" in prompt
        assert "write 2 more scene(s)" in prompt
        assert "Return only the new scenes" in prompt

    def test_empty_list_starts_at_one(self):
        assert "start at 1" in build_expand_prompt([], 3)

    def test_existing_scenes_are_embedded_as_json(self, sample_scenes):
        prompt = build_expand_prompt(sample_scenes, 1)
        assert json.dumps(sample_scenes, indent=2, ensure_ascii=False) in prompt

    def test_last_scene_id_skips_entries_without_integer_id(self, scene_factory):
        no_id = scene_factory(9)
        del no_id["scene_id"]
        scenes = [scene_factory(2), no_id, {"scene_id": "12"}, {"scene_id": True}]

        assert last_scene_id(scenes) == 2
        assert last_scene_id([no_id]) == 0

    def test_character_extras_kept_in_prompt(self, scene_factory):
        scene = scene_factory(1, characters=[{"name": "A", "description": "Courier", "age": 30}])

        prompt = build_expand_prompt([scene], 1)

        assert '"age": 30' in prompt
