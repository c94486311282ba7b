"""
Tests for Video Executor

Tests for videobrain/brains/video_executor.py
"""

import pytest

from conftest import make_scene
from videobrain.brains.art_director import decode_art_director_output
from videobrain.brains.video_executor import (
    VideoExecutorInput,
    build_video_executor_user_message,
    decode_video_executor_output,
    validate_video_executor_output,
    video_executor_output_errors,
)
from videobrain.core.constants import Layout, SceneType
from videobrain.core.exceptions import ValidationError


def errors_for(spec, strategy=None, art_direction=None, provided_images=None):
    return video_executor_output_errors(spec, strategy, art_direction, provided_images)


class TestStructuralValidation:
    """Rules checked without any upstream context."""

    def test_valid_spec(self, video_spec_dict):
        """Test the fixture scene list is valid on its own."""
        assert errors_for(video_spec_dict) == []
        assert validate_video_executor_output(video_spec_dict) is True

    def test_fewer_than_two_scenes(self, video_spec_dict):
        """Test a single scene is rejected."""
        video_spec_dict["scenes"] = video_spec_dict["scenes"][:1]

        assert validate_video_executor_output(video_spec_dict) is False

    def test_consecutive_layout_repeat(self, video_spec_dict):
        """Test two adjacent scenes may not share a layout."""
        video_spec_dict["scenes"][2]["layout"] = "TEXT_LEFT"

        errors = errors_for(video_spec_dict)
        assert errors == ["scenes[2].layout: repeats previous scene layout 'TEXT_LEFT'"]

    def test_non_adjacent_layout_repeat_allowed(self, video_spec_dict):
        """Test a layout may come back after a different one."""
        video_spec_dict["scenes"][2]["layout"] = "FULLSCREEN_STATEMENT"

        assert validate_video_executor_output(video_spec_dict) is True

    def test_consecutive_entry_repeat(self, video_spec_dict):
        """Test two adjacent scenes may not share an entry animation."""
        video_spec_dict["scenes"][3]["motion"]["entry"] = "blur_in"

        errors = errors_for(video_spec_dict)
        assert errors == ["scenes[3].motion.entry: repeats previous scene entry 'blur_in'"]

    @pytest.mark.parametrize("colors", [["#000000"], ["#000", "#111", "#222"]])
    def test_gradient_needs_exactly_two_colors(self, video_spec_dict, colors):
        """Test gradientColors is a pair."""
        video_spec_dict["scenes"][0]["background"]["gradientColors"] = colors

        assert validate_video_executor_output(video_spec_dict) is False

    def test_duration_must_be_positive_integer(self, video_spec_dict):
        """Test durationFrames rejects zero and fractions."""
        video_spec_dict["scenes"][0]["durationFrames"] = 0
        video_spec_dict["scenes"][1]["durationFrames"] = 12.5

        errors = errors_for(video_spec_dict)
        assert "scenes[0].durationFrames: must be >= 1" in errors
        assert "scenes[1].durationFrames: expected an integer" in errors

    def test_unknown_layout(self, video_spec_dict):
        """Test layouts come from the closed set."""
        video_spec_dict["scenes"][0]["layout"] = "ZIGZAG"

        assert validate_video_executor_output(video_spec_dict) is False

    def test_unknown_image_role(self, video_spec_dict):
        """Test image roles come from the closed set."""
        video_spec_dict["scenes"][2]["images"][0]["role"] = "wallpaper"

        assert validate_video_executor_output(video_spec_dict) is False

    def test_subtext_may_be_null(self, video_spec_dict):
        """Test a null subtext is accepted."""
        video_spec_dict["scenes"][0]["subtext"] = None

        assert validate_video_executor_output(video_spec_dict) is True


class TestCrossStageValidation:
    """Rules that depend on the strategy, art direction and images."""

    def test_valid_with_context(self, video_spec_dict, strategy, art_direction, provided_images):
        """Test the fixture spec agrees with the fixture upstream outputs."""
        assert errors_for(video_spec_dict, strategy, art_direction, provided_images) == []

    def test_headline_must_be_verbatim(self, video_spec_dict, strategy):
        """Test a paraphrased headline is rejected."""
        video_spec_dict["scenes"][0]["headline"] = "Your team is drowning!"

        errors = errors_for(video_spec_dict, strategy=strategy)
        assert errors == ["scenes[0].headline: must equal the key message verbatim"]

    def test_scene_without_key_message(self, video_spec_dict, strategy):
        """Test a PROOF scene needs a proof message in the strategy."""
        video_spec_dict["scenes"][3]["sceneType"] = "PROOF"

        errors = errors_for(video_spec_dict, strategy=strategy)
        assert errors == ["scenes[3].sceneType: no 'proof' key message in strategy"]

    def test_image_budget(self, video_spec_dict, art_direction_dict):
        """Test the art direction's image limit is enforced."""
        art_direction_dict["imageUsageRules"]["maxImagesPerVideo"] = 0
        art = decode_art_director_output(art_direction_dict)

        errors = errors_for(video_spec_dict, art_direction=art)
        assert errors == ["scenes: 1 images used, at most 0 allowed"]

    def test_unknown_image_id(self, video_spec_dict, provided_images):
        """Test placements must reference a provided image."""
        video_spec_dict["scenes"][2]["images"][0]["imageId"] = "img_ghost"

        errors = errors_for(video_spec_dict, provided_images=provided_images)
        assert errors == ["scenes[2].images[0].imageId: unknown image 'img_ghost'"]

    def test_context_rules_skipped_without_context(self, video_spec_dict):
        """Test unknown ids and headlines pass when nothing is supplied to compare against."""
        video_spec_dict["scenes"][2]["images"][0]["imageId"] = "img_ghost"
        video_spec_dict["scenes"][0]["headline"] = "Anything"

        assert validate_video_executor_output(video_spec_dict) is True


class TestDecodeVideoExecutorOutput:
    """Tests for the strict decoder."""

    def test_decode_valid(self, video_spec_dict):
        """Test decoding into scene dataclasses."""
        spec = decode_video_executor_output(video_spec_dict)

        assert len(spec.scenes) == 4
        assert spec.scenes[0].scene_type == SceneType.HOOK
        assert spec.scenes[2].layout == Layout.SPLIT_HORIZONTAL
        assert spec.scenes[2].images[0].image_id == "img_dashboard"
        assert spec.scenes[0].background.gradient_colors == ("#0F172A", "#1E293B")
        assert spec.total_frames == 300

    def test_to_dict_matches_wire_form(self, video_spec_dict):
        """Test to_dict reproduces the input."""
        assert decode_video_executor_output(video_spec_dict).to_dict() == video_spec_dict

    def test_decode_with_stage_input(self, video_spec_dict, strategy, art_direction, provided_images):
        """Test the cross-stage rules apply when the stage input is passed."""
        stage_input = VideoExecutorInput(
            marketing_strategy=strategy,
            art_direction=art_direction,
            provided_images=provided_images,
            fps=30,
            width=1080,
            height=1920,
        )
        video_spec_dict["scenes"][1] = make_scene(
            "PROBLEM", "Tasks are everywhere", "TEXT_LEFT", "slide_left"
        )

        with pytest.raises(ValidationError) as exc_info:
            decode_video_executor_output(video_spec_dict, stage_input)

        assert exc_info.value.stage == "execution"
        assert exc_info.value.errors == ["scenes[1].headline: must equal the key message verbatim"]


class TestBuildVideoExecutorUserMessage:
    """Tests for the stage 3 user message."""

    def _stage_input(self, strategy, art_direction, provided_images=()):
        return VideoExecutorInput(
            marketing_strategy=strategy,
            art_direction=art_direction,
            provided_images=provided_images,
            fps=30,
            width=1080,
            height=1920,
        )

    def test_messages_and_constraints(self, strategy, art_direction, provided_images):
        """Test key messages, art direction and parameters are all rendered."""
        message = build_video_executor_user_message(
            self._stage_input(strategy, art_direction, provided_images)
        )

        assert '- HOOK:\n  Message: "Your team is drowning"\n  Target emotion: recognition' in message
        assert "DESIGN PACK: clean_saas" in message
        assert "- Flat slides allowed: NO" in message
        assert "- Texture required: YES" in message
        assert "- Hero allowed: NO" in message
        assert "CORNER RADIUS: 8-24px" in message
        assert "FORBIDDEN ELEMENTS:\n- stock photos\n- clip art" in message
        assert "Dimensions: 1080x1920" in message

    def test_image_references_included(self, strategy, art_direction, provided_images):
        """Test the executor receives the full image references."""
        message = build_video_executor_user_message(
            self._stage_input(strategy, art_direction, provided_images)
        )

        assert (
            "- ID: img_dashboard | Type: screenshot | Reference: https://cdn.example.com/dashboard.png"
            in message
        )
        assert "- ID: img_logo | Type: logo\n" in message

    def test_no_images(self, strategy, art_direction):
        """Test the placeholder line when there are no images."""
        message = build_video_executor_user_message(self._stage_input(strategy, art_direction))

        assert "No images provided." in message

    def test_empty_element_lists(self, strategy, art_direction_dict):
        """Test empty forbidden/required lists render as a none bullet."""
        art_direction_dict["forbiddenElements"] = []
        art = decode_art_director_output(art_direction_dict)

        message = build_video_executor_user_message(self._stage_input(strategy, art))

        assert "FORBIDDEN ELEMENTS:\n- none" in message
