"""
Videobrain Brains Module

The three generation stages, each a set of typed input/output dataclasses,
a strict decoder and a user-message builder:
- Marketing Strategist: what the video says (core promise, key messages)
- Art Director: how it looks (design pack, palette, typography, motion)
- Video Executor: the final scene list, copy taken verbatim from stage 1
"""

from .extraction import extract_json
from .media import ProvidedImage
from .templates import SYSTEM_PROMPTS, USER_TEMPLATES, system_prompt_for, render_user_message

from .marketing_strategist import (
    MarketingStrategyInput,
    MarketingStrategyOutput,
    KeyMessage,
    marketing_output_errors,
    validate_marketing_output,
    decode_marketing_output,
    build_marketing_user_message,
)

from .art_director import (
    ArtDirectorInput,
    ArtDirectorOutput,
    ColorPalette,
    TypographySystem,
    MotionSystem,
    ImageUsageRules,
    CompositionRules,
    art_director_output_errors,
    validate_art_director_output,
    decode_art_director_output,
    build_art_director_user_message,
)

from .video_executor import (
    VideoExecutorInput,
    VideoExecutorOutput,
    SceneSpec,
    SceneBackground,
    SceneTypography,
    SceneMotion,
    ImagePlacement,
    video_executor_output_errors,
    validate_video_executor_output,
    decode_video_executor_output,
    build_video_executor_user_message,
)

__all__ = [
    "extract_json",
    "ProvidedImage",
    "SYSTEM_PROMPTS",
    "USER_TEMPLATES",
    "system_prompt_for",
    "render_user_message",
    # Stage 1
    "MarketingStrategyInput",
    "MarketingStrategyOutput",
    "KeyMessage",
    "marketing_output_errors",
    "validate_marketing_output",
    "decode_marketing_output",
    "build_marketing_user_message",
    # Stage 2
    "ArtDirectorInput",
    "ArtDirectorOutput",
    "ColorPalette",
    "TypographySystem",
    "MotionSystem",
    "ImageUsageRules",
    "CompositionRules",
    "art_director_output_errors",
    "validate_art_director_output",
    "decode_art_director_output",
    "build_art_director_user_message",
    # Stage 3
    "VideoExecutorInput",
    "VideoExecutorOutput",
    "SceneSpec",
    "SceneBackground",
    "SceneTypography",
    "SceneMotion",
    "ImagePlacement",
    "video_executor_output_errors",
    "validate_video_executor_output",
    "decode_video_executor_output",
    "build_video_executor_user_message",
]
