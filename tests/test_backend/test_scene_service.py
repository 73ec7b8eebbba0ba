"""
Tests for the scene service

Tests for backend/services/scenes.py
"""

import pytest

from backend.core.exceptions import EmptyResponseError, GenerationError, ValidationError
from backend.core.schema import SCENE_LIST_SCHEMA
from backend.services.scenes import SceneService


class TestGenerate:

    def test_returns_provider_scenes(self, provider_factory, hello_scene):
        provider = provider_factory(result=[hello_scene])
        service = SceneService(provider)

        scenes = service.generate("A: Hello. B: Hi there.")

        assert scenes == [hello_scene]
        assert len(scenes[0]["characters"]) == 2
        assert provider.calls[0]["schema"] == SCENE_LIST_SCHEMA
        assert "A: Hello. B: Hi there." in provider.last_prompt

    def test_out_of_order_ids_pass_through_unchanged(self, provider_factory, scene_factory):
        returned = [scene_factory(2), scene_factory(1), scene_factory(3)]
        service = SceneService(provider_factory(result=returned))

        scenes = service.generate("some transcript")

        assert [s["scene_id"] for s in scenes] == [2, 1, 3]

    @pytest.mark.parametrize("transcript", ["", "   ", "\n\t", None])
    def test_blank_transcript_rejected_before_provider_call(self, provider_factory, transcript):
        provider = provider_factory(result=[])
        service = SceneService(provider)

        with pytest.raises(ValidationError) as exc_info:
            service.generate(transcript)

        assert exc_info.value.message == "Transcript is required."
        assert provider.calls == []

    def test_non_array_response_fails(self, provider_factory):
        service = SceneService(provider_factory(result={"scenes": []}))

        with pytest.raises(GenerationError):
            service.generate("text")

    def test_provider_errors_propagate(self, provider_factory):
        service = SceneService(provider_factory(error=EmptyResponseError()))

        with pytest.raises(EmptyResponseError):
            service.generate("text")


class TestExpand:

    def test_returns_only_new_scenes(self, provider_factory, sample_scenes, scene_factory):
        new = [scene_factory(6), scene_factory(7)]
        provider = provider_factory(result=new)
        service = SceneService(provider)

        result = service.expand(sample_scenes, 2)

        assert result == new
        assert "start at 6" in provider.last_prompt

    def test_empty_existing_list_starts_at_one(self, provider_factory, scene_factory):
        provider = provider_factory(result=[scene_factory(1)])
        service = SceneService(provider)

        assert service.expand([], 1)[0]["scene_id"] == 1
        assert "start at 1" in provider.last_prompt

    def test_wrong_count_is_rejected(self, provider_factory, sample_scenes, scene_factory):
        service = SceneService(provider_factory(result=[scene_factory(6)]))

        with pytest.raises(GenerationError) as exc_info:
            service.expand(sample_scenes, 2)

        assert "expected 2" in exc_info.value.message

    def test_non_contiguous_ids_are_rejected(self, provider_factory, sample_scenes, scene_factory):
        service = SceneService(provider_factory(result=[scene_factory(1), scene_factory(2)]))

        with pytest.raises(GenerationError) as exc_info:
            service.expand(sample_scenes, 2)

        assert exc_info.value.details["expected_ids"] == [6, 7]

    def test_missing_fields_rejected(self, provider_factory, sample_scenes):
        provider = provider_factory(result=[])
        service = SceneService(provider)

        with pytest.raises(ValidationError):
            service.expand(None, 1)
        with pytest.raises(ValidationError):
            service.expand(sample_scenes, None)
        assert provider.calls == []
