"""
Videobrain Effects Module

Immutable effect catalog and the deterministic scorer that picks effects
for each narrative scene.
"""

from .registry import (
    EffectCategory,
    EffectIntensity,
    ContentType,
    EmotionalTone,
    EffectDuration,
    EffectMetadata,
    REVEAL_EFFECTS,
    TRANSITION_EFFECTS,
    EMPHASIS_EFFECTS,
    AMBIENT_EFFECTS,
    ALL_EFFECTS,
    EFFECTS_BY_CATEGORY,
    get_effect,
    get_effects_for,
    get_best_image_reveal,
    get_best_text_reveal,
    get_best_transition,
    generate_effect_choices_for_ai,
)
from .selector import (
    BrandStyle,
    EffectContext,
    ScenePriority,
    SCENE_PRIORITIES,
    SCENE_ORDER,
    EffectSelection,
    SceneEffects,
    EFFECT_PRESETS,
    score_effect,
    select_best_effect,
    select_image_reveal,
    select_text_reveal,
    select_stat_reveal,
    select_transition,
    select_emphasis,
    select_all_effects,
    get_preset_effects,
    generate_effect_options_for_ai,
)

__all__ = [
    # Registry
    "EffectCategory",
    "EffectIntensity",
    "ContentType",
    "EmotionalTone",
    "EffectDuration",
    "EffectMetadata",
    "REVEAL_EFFECTS",
    "TRANSITION_EFFECTS",
    "EMPHASIS_EFFECTS",
    "AMBIENT_EFFECTS",
    "ALL_EFFECTS",
    "EFFECTS_BY_CATEGORY",
    "get_effect",
    "get_effects_for",
    "get_best_image_reveal",
    "get_best_text_reveal",
    "get_best_transition",
    "generate_effect_choices_for_ai",
    # Selector
    "BrandStyle",
    "EffectContext",
    "ScenePriority",
    "SCENE_PRIORITIES",
    "SCENE_ORDER",
    "EffectSelection",
    "SceneEffects",
    "EFFECT_PRESETS",
    "score_effect",
    "select_best_effect",
    "select_image_reveal",
    "select_text_reveal",
    "select_stat_reveal",
    "select_transition",
    "select_emphasis",
    "select_all_effects",
    "get_preset_effects",
    "generate_effect_options_for_ai",
]
