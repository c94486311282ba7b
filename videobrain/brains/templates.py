"""
Stage prompt table.

Loaded once at import time from brains/prompts/*.md. Each stage has a fixed
system prompt and a user-message template that its builder renders.
"""

from types import MappingProxyType
from typing import Mapping

from videobrain.core.constants import Stage
from videobrain.core.prompt_loader import PromptLoader

PROMPTS_DIR = "brains/prompts"

STAGE_PROMPT_FILES = {
    Stage.MARKETING: "marketing_strategist",
    Stage.ART_DIRECTION: "art_director",
    Stage.EXECUTION: "video_executor",
}


def _load_table(suffix: str = "") -> Mapping[Stage, str]:
    return MappingProxyType({
        stage: PromptLoader.load(PROMPTS_DIR, name + suffix)
        for stage, name in STAGE_PROMPT_FILES.items()
    })


SYSTEM_PROMPTS: Mapping[Stage, str] = _load_table()
USER_TEMPLATES: Mapping[Stage, str] = _load_table("_user")


def system_prompt_for(stage: Stage) -> str:
    return SYSTEM_PROMPTS[stage]


def render_user_message(stage: Stage, **variables) -> str:
    return PromptLoader.render(USER_TEMPLATES[stage], **variables)
