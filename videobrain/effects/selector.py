"""
Videobrain Effect Selector

Picks an effect for each slot (image reveal, text reveal, stat reveal,
transition, emphasis) of each narrative scene by weighted scoring against
the registry. Every function here is pure: same context, same selection.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Union

from .registry import (
    EMPHASIS_EFFECTS,
    REVEAL_EFFECTS,
    TRANSITION_EFFECTS,
    ContentType,
    EffectIntensity,
    EffectMetadata,
    EmotionalTone,
)


class BrandStyle(Enum):
    MODERN = "modern"
    CLASSIC = "classic"
    BOLD = "bold"
    MINIMAL = "minimal"


# =============================================================================
# CONTEXT AND PRIORITIES
# =============================================================================

@dataclass(frozen=True)
class EffectContext:
    """What the selector knows about the video being planned."""
    tone: EmotionalTone
    has_images: bool = False
    has_screenshots: bool = False
    intensity: EffectIntensity = EffectIntensity.MEDIUM
    brand_style: Optional[BrandStyle] = None

    def __post_init__(self):
        # Accept plain strings for the enum fields
        object.__setattr__(self, "tone", EmotionalTone(self.tone))
        object.__setattr__(self, "intensity", EffectIntensity(self.intensity))
        if self.brand_style is not None:
            object.__setattr__(self, "brand_style", BrandStyle(self.brand_style))

    @classmethod
    def from_dict(cls, data: dict) -> 'EffectContext':
        return cls(
            tone=data['tone'],
            has_images=data.get('hasImages', False),
            has_screenshots=data.get('hasScreenshots', False),
            intensity=data.get('intensity', EffectIntensity.MEDIUM.value),
            brand_style=data.get('brandStyle'),
        )


@dataclass(frozen=True)
class ScenePriority:
    """Hand-tuned weights for what a narrative beat needs from its effects."""
    impact_weight: float
    professional_weight: float
    preferred_intensity: EffectIntensity
    purpose: str


# Hook: maximum impact. Problem: emotional connection. Solution: clarity.
# Demo: professional showcase. Proof: credibility. CTA: urgency.
SCENE_PRIORITIES: Mapping[str, ScenePriority] = MappingProxyType({
    "hook": ScenePriority(1.5, 0.8, EffectIntensity.DRAMATIC, "Grab attention immediately"),
    "problem": ScenePriority(1.0, 1.0, EffectIntensity.MEDIUM, "Create emotional connection"),
    "solution": ScenePriority(1.2, 1.2, EffectIntensity.MEDIUM, "Show the answer with clarity"),
    "demo": ScenePriority(0.8, 1.5, EffectIntensity.MEDIUM, "Professional product showcase"),
    "proof": ScenePriority(1.3, 1.0, EffectIntensity.DRAMATIC, "Build trust with impressive stats"),
    "cta": ScenePriority(1.4, 0.9, EffectIntensity.DRAMATIC, "Drive action with urgency"),
})

SCENE_ORDER = ("hook", "problem", "solution", "demo", "proof", "cta")

DEFAULT_TEXT_REVEAL = "REVEAL_TEXT_WORD_CASCADE"
DEFAULT_STAT_REVEAL = "REVEAL_COUNTER_ROLL"
DEFAULT_TRANSITION = "TRANSITION_WIPE_GEOMETRIC"


# =============================================================================
# EFFECT SCORING
# =============================================================================

def score_effect(effect: EffectMetadata, context: EffectContext, priority: ScenePriority) -> float:
    """Score one effect for one scene profile."""
    score = effect.impact_score * priority.impact_weight
    score += effect.professional_score * priority.professional_weight

    if context.brand_style in (BrandStyle.MODERN, BrandStyle.BOLD):
        score += effect.modern_score * 0.5

    if context.tone in effect.tones:
        score += 3

    if effect.intensity == priority.preferred_intensity:
        score += 2
    elif effect.intensity == context.intensity:
        score += 1

    if context.brand_style == BrandStyle.MINIMAL and effect.intensity == EffectIntensity.DRAMATIC:
        score -= 3

    return score


def select_best_effect(
    effects: Iterable[EffectMetadata],
    context: EffectContext,
    priority: ScenePriority,
    content_type: Optional[ContentType] = None
) -> Optional[EffectMetadata]:
    """Highest scoring candidate; the earliest one wins a tie."""
    best = None
    best_score = None
    for effect in effects:
        if content_type is not None and content_type not in effect.best_for:
            continue
        score = score_effect(effect, context, priority)
        if best_score is None or score > best_score:
            best, best_score = effect, score
    return best


# =============================================================================
# MAIN SELECTOR FUNCTIONS
# =============================================================================

def select_image_reveal(
    scene: str,
    context: EffectContext,
    content_type: Union[ContentType, str] = ContentType.IMAGE
) -> Optional[str]:
    if not context.has_images and not context.has_screenshots:
        return None
    candidates = (e for e in REVEAL_EFFECTS.values() if e.requires_image)
    best = select_best_effect(candidates, context, SCENE_PRIORITIES[scene], ContentType(content_type))
    return best.id if best else None


def select_text_reveal(scene: str, context: EffectContext) -> str:
    candidates = (e for e in REVEAL_EFFECTS.values() if e.requires_text)
    best = select_best_effect(candidates, context, SCENE_PRIORITIES[scene], ContentType.TEXT)
    return best.id if best else DEFAULT_TEXT_REVEAL


def select_stat_reveal(scene: str, context: EffectContext) -> str:
    candidates = (e for e in REVEAL_EFFECTS.values() if ContentType.STAT in e.best_for)
    best = select_best_effect(candidates, context, SCENE_PRIORITIES[scene], ContentType.STAT)
    return best.id if best else DEFAULT_STAT_REVEAL


def select_transition(from_scene: str, to_scene: str, context: EffectContext) -> str:
    """Transition out of `from_scene`, scored for the scene it leads into."""
    best = select_best_effect(TRANSITION_EFFECTS.values(), context, SCENE_PRIORITIES[to_scene])
    return best.id if best else DEFAULT_TRANSITION


def select_emphasis(context: EffectContext) -> Optional[str]:
    best = select_best_effect(
        EMPHASIS_EFFECTS.values(), context, SCENE_PRIORITIES["cta"], ContentType.BUTTON
    )
    return best.id if best else None


# =============================================================================
# COMPLETE SELECTION FOR ALL SCENES
# =============================================================================

@dataclass(frozen=True)
class EffectSelection:
    text_reveal: str
    stat_reveal: str
    transition: str
    image_reveal: Optional[str] = None
    emphasis: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "imageReveal": self.image_reveal,
            "textReveal": self.text_reveal,
            "statReveal": self.stat_reveal,
            "transition": self.transition,
            "emphasis": self.emphasis,
        }


@dataclass(frozen=True)
class SceneEffects:
    hook: EffectSelection
    problem: EffectSelection
    solution: EffectSelection
    demo: EffectSelection
    proof: EffectSelection
    cta: EffectSelection

    def to_dict(self) -> Dict[str, Dict[str, Optional[str]]]:
        return {scene: getattr(self, scene).to_dict() for scene in SCENE_ORDER}


def select_all_effects(context: EffectContext) -> SceneEffects:
    """One EffectSelection per narrative scene."""
    selections = {}
    for index, scene in enumerate(SCENE_ORDER):
        next_scene = SCENE_ORDER[index + 1] if index + 1 < len(SCENE_ORDER) else "cta"
        selections[scene] = EffectSelection(
            image_reveal=select_image_reveal(
                scene, context, ContentType.SCREENSHOT if scene == "demo" else ContentType.IMAGE
            ),
            text_reveal=select_text_reveal(scene, context),
            stat_reveal=select_stat_reveal(scene, context),
            transition=select_transition(scene, next_scene, context),
            emphasis=select_emphasis(context) if scene == "cta" else None,
        )
    return SceneEffects(**selections)


# =============================================================================
# PRESET COMBINATIONS
# =============================================================================

def _preset(image, text, stat, transition, emphasis) -> Mapping[str, str]:
    return MappingProxyType({
        "imageReveal": image,
        "textReveal": text,
        "statReveal": stat,
        "transition": transition,
        "emphasis": emphasis,
    })


EFFECT_PRESETS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    # Exciting, tech-forward brands
    "maxImpact": _preset(
        "REVEAL_PARTICLE_EXPLOSION", "REVEAL_TEXT_GLITCH", "REVEAL_STAT_PULSE",
        "TRANSITION_GLITCH", "EMPHASIS_GLOW_PULSE",
    ),
    # Serious B2B SaaS
    "professional": _preset(
        "REVEAL_DEVICE_MOCKUP", "REVEAL_TEXT_WORD_CASCADE", "REVEAL_COUNTER_ROLL",
        "TRANSITION_WIPE_GEOMETRIC", "EMPHASIS_UNDERLINE_DRAW",
    ),
    "modern": _preset(
        "REVEAL_3D_FLIP", "REVEAL_TEXT_GRADIENT_SWEEP", "REVEAL_COUNTER_ROLL",
        "TRANSITION_SLICE", "EMPHASIS_SCALE_BOUNCE",
    ),
    # Consumer apps, creative tools
    "playful": _preset(
        "REVEAL_LIQUID_MORPH", "REVEAL_TEXT_LETTER_BOUNCE", "REVEAL_STAT_PULSE",
        "TRANSITION_PARTICLE_DISSOLVE", "EMPHASIS_SHAKE",
    ),
    "luxurious": _preset(
        "REVEAL_PARALLAX_ZOOM", "REVEAL_TEXT_BLUR_IN", "REVEAL_COUNTER_ROLL",
        "TRANSITION_LIGHT_LEAK", "EMPHASIS_HIGHLIGHT_SWEEP",
    ),
    "minimal": _preset(
        "REVEAL_MASK_WIPE", "REVEAL_TEXT_BLUR_IN", "REVEAL_COUNTER_ROLL",
        "TRANSITION_BLUR_CROSS", "EMPHASIS_UNDERLINE_DRAW",
    ),
})


def get_preset_effects(preset: str) -> Mapping[str, str]:
    """
    Raises:
        KeyError: If the preset name is unknown
    """
    return EFFECT_PRESETS[preset]


# =============================================================================
# AI PROMPT HELPER
# =============================================================================

EFFECT_OPTIONS_FOR_AI = """
## Available Effect Presets

Choose ONE preset that matches the brand's personality:

1. **maxImpact** - For exciting, tech-forward brands. Particle explosions, glitch effects, high energy.
   Best for: Gaming, crypto, AI startups, developer tools

2. **professional** - For serious B2B SaaS. Device mockups, clean wipes, understated elegance.
   Best for: Enterprise software, fintech, legal tech, healthcare

3. **modern** - Balanced impact and professionalism. 3D flips, gradient sweeps, slice transitions.
   Best for: Most SaaS products, productivity tools, marketing tools

4. **playful** - For consumer apps and creative tools. Liquid morphs, bouncy text, particle dissolves.
   Best for: Social apps, creative tools, education, lifestyle

5. **luxurious** - For premium products. Parallax zoom, blur focus, light leaks.
   Best for: Premium SaaS, design tools, high-end B2B

6. **minimal** - For clean, simple brands. Mask wipes, subtle blur, clean transitions.
   Best for: Developer tools, productivity, minimalist brands

## Custom Effect Selection

Alternatively, specify custom effects per scene:

```json
{
  "effects": {
    "preset": "modern",
    "overrides": {
      "hook": {
        "imageReveal": "REVEAL_PARTICLE_EXPLOSION",
        "textReveal": "REVEAL_TEXT_GLITCH"
      },
      "cta": {
        "emphasis": "EMPHASIS_GLOW_PULSE"
      }
    }
  }
}
```

## Available Effects

### Image Reveals:
- REVEAL_3D_FLIP: Image flips in with 3D perspective
- REVEAL_PARTICLE_EXPLOSION: Particles converge and explode to reveal
- REVEAL_LIQUID_MORPH: Liquid blob morphs to reveal image
- REVEAL_MASK_WIPE: Geometric mask reveals image (circle, diagonal)
- REVEAL_GLITCH: Digital glitch distortion reveal
- REVEAL_DEVICE_MOCKUP: Screenshot in 3D rotating device frame
- REVEAL_PARALLAX_ZOOM: Zoom from blur to sharp with depth
- REVEAL_SPLIT_MERGE: Image pieces fly in and merge

### Text Reveals:
- REVEAL_TEXT_TYPEWRITER: Types out character by character
- REVEAL_TEXT_LETTER_BOUNCE: Letters bounce in with spring physics
- REVEAL_TEXT_GLITCH: Digital glitch with RGB split
- REVEAL_TEXT_GRADIENT_SWEEP: Gradient sweeps to reveal text
- REVEAL_TEXT_WORD_CASCADE: Words cascade in one by one
- REVEAL_TEXT_BLUR_IN: Fades from blur to sharp focus

### Transitions:
- TRANSITION_ZOOM_THROUGH: Camera zooms through to next scene
- TRANSITION_GLITCH: Glitchy digital cut
- TRANSITION_SLICE: Scene slices apart
- TRANSITION_LIGHT_LEAK: Bright light flare transition
- TRANSITION_PARTICLE_DISSOLVE: Dissolves into particles
- TRANSITION_WIPE_GEOMETRIC: Clean geometric wipe
- TRANSITION_BLUR_CROSS: Blur crossfade
- TRANSITION_MORPH: Shape morphing transition

### Emphasis (for CTA):
- EMPHASIS_GLOW_PULSE: Pulsing glow aura
- EMPHASIS_SHAKE: Attention-grabbing shake
- EMPHASIS_SCALE_BOUNCE: Bouncy scale animation
- EMPHASIS_UNDERLINE_DRAW: Animated underline
- EMPHASIS_HIGHLIGHT_SWEEP: Color highlight sweep
"""


def generate_effect_options_for_ai() -> str:
    return EFFECT_OPTIONS_FOR_AI
