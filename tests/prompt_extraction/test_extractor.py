"""Tests for the end-to-end scene extractor."""

import json

import pytest

from prompt_extraction import PASTED_SOURCE_LABEL, collect_candidates, extract


@pytest.mark.unit
class TestExtractScenarios:
    """Reference inputs and their expected scenes."""

    def test_scene_headers(self, scene_header_text):
        """Headed prompts keep their numbers and lose their prefixes."""
        scenes = extract(scene_header_text, "notes.txt")

        assert [s.scene_number for s in scenes] == ["1", "2"]
        assert [s.description for s in scenes] == [
            "A cat sits.",
            "A dog runs far away into the misty forest.",
        ]
        assert all(s.source == "notes.txt" for s in scenes)

    def test_single_json_object(self):
        """A JSON object gives one scene with its exact description."""
        text = '{"scene_number":1,"description":"A red car speeds down a neon highway at night."}'

        scenes = extract(text, "car.json")

        assert len(scenes) == 1
        assert scenes[0].scene_number == "1"
        assert scenes[0].description == "A red car speeds down a neon highway at night."

    def test_filler_dropped_and_title_merged(self, chatty_text):
        """Chatter is dropped and a bare title folds into the next scene."""
        scenes = extract(chatty_text)

        assert len(scenes) == 1
        assert scenes[0].scene_number == "2"
        assert scenes[0].description.startswith("[Title]\n")
        assert scenes[0].description.endswith("birds singing loudly.")
        assert "Got it" not in scenes[0].description

    def test_malformed_json_falls_back_to_text(self):
        """Broken JSON is treated as plain text instead of raising."""
        scenes = extract("{description: unquoted}")

        assert len(scenes) == 1
        assert scenes[0].description == "{description: unquoted}"


@pytest.mark.unit
class TestExtractProperties:
    """General behaviour of extract."""

    def test_json_array_order_and_labels(self):
        """Array elements become scenes in order with fields applied."""
        items = [
            {"scene_number": 3, "description": "A lighthouse glows in a violent storm.", "visuals": {"subject": "Lighthouse"}},
            {"description": "A fox crosses a frozen river at dusk.", "title": "Fox Crossing"},
            {"scene_number": "7", "description": "Lanterns drift over a sleeping village."},
        ]

        scenes = extract(json.dumps(items))

        assert [s.scene_number for s in scenes] == ["3", "2", "7"]
        assert [s.short_label for s in scenes] == ["Lighthouse", "Fox Crossing", "Scene 3"]

    def test_json_wins_over_text_headers(self, json_scenes_text):
        """When JSON yields scenes, text headers elsewhere are ignored."""
        text = "Scene 9: A prose scene that should not appear.\n\n" + json_scenes_text

        scenes = extract(text)

        assert [s.scene_number for s in scenes] == ["1", "2"]

    def test_single_paragraph_is_one_scene(self):
        """Text with no markers and no blank lines is a single scene."""
        text = "A lone astronaut walks across red dunes while two moons rise behind her."

        scenes = extract(text)

        assert len(scenes) == 1
        assert scenes[0].description == text
        assert scenes[0].scene_number == "1"

    def test_short_text_gives_nothing(self):
        """Text below the minimum length gives no scenes."""
        assert extract("Hi") == []

    @pytest.mark.parametrize("text", [None, "", "   \n\n  "])
    def test_blank_input(self, text):
        """Blank input gives no scenes."""
        assert extract(text) == []

    def test_default_source_label(self):
        """Pasted text is labelled as such."""
        scenes = extract("A lighthouse glows in a violent storm at sea.")

        assert scenes[0].source == PASTED_SOURCE_LABEL == "Pasted Content"

    def test_paragraphs_are_numbered_sequentially(self):
        """Unheaded paragraphs get 1, 2, 3..."""
        text = (
            "A lone astronaut walks across red dunes.\n\n"
            "A lighthouse glows in a violent storm at sea.\n\n"
            "Lanterns drift over a sleeping village."
        )

        assert [s.scene_number for s in extract(text)] == ["1", "2", "3"]

    def test_header_numbers_are_kept_as_written(self):
        """Explicit numbers are not renumbered."""
        text = "Scene 5: A cat naps in the sun.\n\nScene 9: A dog chases its own tail."

        assert [s.scene_number for s in extract(text)] == ["5", "9"]

    def test_filler_only_dropped_before_first_scene(self):
        """Chatter-like text after a real scene is kept."""
        text = "Scene 1: A cat sits on the mat.\n\nSure, the dog barks loudly at the mailman."

        scenes = extract(text)

        assert len(scenes) == 2
        assert scenes[1].description.startswith("Sure, the dog")

    def test_title_header_number_overrides_next(self):
        """A headed title line lends its number to the prompt it merges into."""
        text = "### Scene 7: Neon Chase\nScene 8: A red car speeds down a neon highway at night."

        scenes = extract(text)

        assert len(scenes) == 1
        assert scenes[0].scene_number == "7"
        assert scenes[0].description == "[Neon Chase]\nA red car speeds down a neon highway at night."

    def test_title_scene_before_trailing_stub_is_kept(self):
        """A short last scene is not lost to a trailing header with no body."""
        text = (
            "Scene 1: A cat sits on a warm windowsill in the afternoon sun.\n\n"
            "Scene 2: Neon Chase Over Rooftops\n\n"
            "Scene 3: End"
        )

        scenes = extract(text)

        assert [(s.scene_number, s.description) for s in scenes] == [
            ("1", "A cat sits on a warm windowsill in the afternoon sun."),
            ("2", "Neon Chase Over Rooftops"),
        ]

    @pytest.mark.parametrize("separator", [",", ";"])
    def test_inline_markers_after_comma_or_semicolon(self, separator):
        """Inline headers after a comma or semicolon start new scenes."""
        text = f"Scene 1: A cat sits on the mat in the sun{separator} Scene 2: A dog runs across the yard quickly."

        scenes = extract(text)

        assert [s.scene_number for s in scenes] == ["1", "2"]
        assert scenes[1].description == "A dog runs across the yard quickly."

    def test_short_labels(self, scene_header_text):
        """Labels are the first forty characters plus an ellipsis."""
        scenes = extract(scene_header_text)

        assert scenes[0].short_label == "A cat sits...."
        assert scenes[1].short_label == "A dog runs far away into the misty fores..."

    def test_ids_are_unique(self, scene_header_text):
        """Every scene has its own identifier."""
        scenes = extract(scene_header_text) + extract(scene_header_text)

        assert len({s.id for s in scenes}) == len(scenes)


@pytest.mark.unit
class TestCollectCandidates:
    """Tests for chunk filtering before the merge pass."""

    def test_title_stub_marked(self, chatty_text):
        """A short title chunk is kept as a stub; filler is dropped."""
        candidates = collect_candidates(chatty_text)

        assert [c.description for c in candidates][0] == "Title"
        assert candidates[0].title_stub is True
        assert candidates[1].title_stub is False
        assert candidates[1].explicit_number is True

    def test_marker_with_nothing_after_is_dropped(self):
        """A header whose body is empty after cleanup is discarded."""
        text = "Scene 1: A cat naps in the sun.\n\nScene 2: ...\n\nScene 3: A dog chases its own tail."

        candidates = collect_candidates(text)

        assert [c.scene_number for c in candidates] == ["1", "3"]
