"""
Tests for the stage prompt table

Tests for videobrain/brains/templates.py
"""

import pytest

from videobrain.brains.templates import (
    SYSTEM_PROMPTS,
    USER_TEMPLATES,
    render_user_message,
    system_prompt_for,
)
from videobrain.core.constants import Stage


class TestSystemPrompts:
    """Tests for the per-stage system prompts."""

    def test_one_prompt_per_stage(self):
        """Test every stage has a non-empty system prompt."""
        assert set(SYSTEM_PROMPTS) == set(Stage)
        for stage in Stage:
            assert system_prompt_for(stage).strip()

    def test_prompts_are_distinct(self):
        """Test the three stages do not share a prompt."""
        assert len(set(SYSTEM_PROMPTS.values())) == 3

    def test_table_is_read_only(self):
        """Test the prompt table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            SYSTEM_PROMPTS[Stage.MARKETING] = "be creative"

    def test_prompts_ask_for_json(self):
        """Test every stage prompt demands JSON output."""
        for prompt in SYSTEM_PROMPTS.values():
            assert "JSON" in prompt


class TestUserTemplates:
    """Tests for the per-stage user message templates."""

    def test_one_template_per_stage(self):
        """Test every stage has a user template."""
        assert set(USER_TEMPLATES) == set(Stage)

    def test_render_marketing_template(self):
        """Test rendering fills the marketing placeholders."""
        message = render_user_message(
            Stage.MARKETING,
            user_prompt="CRM",
            optional_sections="",
            language="english",
        )

        assert message == "PRODUCT/SERVICE: CRM\n\nOUTPUT LANGUAGE: english"
