"""
Videobrain Effect Registry

Catalog of every animation effect the renderer supports, with the metadata
used to pick one: content it suits, tones, intensity, duration and 1-10
scores for impact, professionalism and modernity.

The catalog is immutable. Entries are frozen dataclasses held in read-only
mappings whose iteration order is the catalog order below; selection ties
are broken by that order.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union


class EffectCategory(Enum):
    REVEAL = "reveal"
    TRANSITION = "transition"
    EMPHASIS = "emphasis"
    AMBIENT = "ambient"


class EffectIntensity(Enum):
    SUBTLE = "subtle"
    MEDIUM = "medium"
    DRAMATIC = "dramatic"


class ContentType(Enum):
    IMAGE = "image"
    TEXT = "text"
    STAT = "stat"
    LOGO = "logo"
    BUTTON = "button"
    DEVICE = "device"
    SCREENSHOT = "screenshot"


class EmotionalTone(Enum):
    EXCITING = "exciting"
    PROFESSIONAL = "professional"
    PLAYFUL = "playful"
    SERIOUS = "serious"
    LUXURIOUS = "luxurious"
    TECH = "tech"


@dataclass(frozen=True)
class EffectDuration:
    """Duration bounds in frames at 30fps."""
    min: int
    max: int
    default: int

    def to_dict(self) -> Dict[str, int]:
        return {"min": self.min, "max": self.max, "default": self.default}


@dataclass(frozen=True)
class EffectMetadata:
    id: str
    name: str
    category: EffectCategory
    description: str
    best_for: Tuple[ContentType, ...]
    tones: Tuple[EmotionalTone, ...]
    intensity: EffectIntensity
    duration: EffectDuration
    impact_score: int
    professional_score: int
    modern_score: int
    tags: Tuple[str, ...]
    requires_image: bool = False
    requires_text: bool = False
    supports_color: bool = False

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
            "bestFor": [c.value for c in self.best_for],
            "tones": [t.value for t in self.tones],
            "intensity": self.intensity.value,
            "duration": self.duration.to_dict(),
            "requiresImage": self.requires_image,
            "requiresText": self.requires_text,
            "supportsColor": self.supports_color,
            "impactScore": self.impact_score,
            "professionalScore": self.professional_score,
            "modernScore": self.modern_score,
            "tags": list(self.tags),
        }


def _effect(
    effect_id: str,
    name: str,
    category: EffectCategory,
    description: str,
    best_for: str,
    tones: str,
    intensity: str,
    duration: Tuple[int, int, int],
    scores: Tuple[int, int, int],
    tags: str,
    **flags
) -> EffectMetadata:
    """Build an entry from compact space-separated vocabularies."""
    impact, professional, modern = scores
    return EffectMetadata(
        id=effect_id,
        name=name,
        category=category,
        description=description,
        best_for=tuple(ContentType(c) for c in best_for.split()),
        tones=tuple(EmotionalTone(t) for t in tones.split()),
        intensity=EffectIntensity(intensity),
        duration=EffectDuration(*duration),
        impact_score=impact,
        professional_score=professional,
        modern_score=modern,
        tags=tuple(tags.split()),
        **flags
    )


def _catalog(*effects: EffectMetadata) -> Mapping[str, EffectMetadata]:
    return MappingProxyType({effect.id: effect for effect in effects})


_REVEAL = EffectCategory.REVEAL
_TRANSITION = EffectCategory.TRANSITION
_EMPHASIS = EffectCategory.EMPHASIS
_AMBIENT = EffectCategory.AMBIENT


# =============================================================================
# REVEAL EFFECTS - How elements appear
# =============================================================================

REVEAL_EFFECTS: Mapping[str, EffectMetadata] = _catalog(
    # === IMAGE REVEALS ===
    _effect(
        "REVEAL_3D_FLIP", "3D Flip Reveal", _REVEAL,
        "Image flips in from behind with 3D perspective rotation",
        "image screenshot device", "tech professional exciting", "dramatic",
        (20, 45, 30), (9, 8, 9), "3d flip rotation perspective product",
        requires_image=True,
    ),
    _effect(
        "REVEAL_PARTICLE_EXPLOSION", "Particle Explosion", _REVEAL,
        "Particles converge and explode to reveal the image",
        "image logo", "exciting playful tech", "dramatic",
        (30, 60, 45), (10, 6, 10), "particles explosion dynamic wow",
        requires_image=True, supports_color=True,
    ),
    _effect(
        "REVEAL_LIQUID_MORPH", "Liquid Morph", _REVEAL,
        "Image appears through liquid/blob morphing effect",
        "image screenshot", "playful exciting luxurious", "dramatic",
        (25, 50, 35), (9, 7, 10), "liquid morph blob organic",
        requires_image=True, supports_color=True,
    ),
    _effect(
        "REVEAL_MASK_WIPE", "Geometric Mask Wipe", _REVEAL,
        "Image revealed through animated geometric mask (circle, diagonal, etc.)",
        "image screenshot device", "professional tech serious", "medium",
        (15, 30, 20), (7, 9, 8), "mask wipe geometric clean",
        requires_image=True,
    ),
    _effect(
        "REVEAL_GLITCH", "Glitch Reveal", _REVEAL,
        "Image appears through digital glitch distortion",
        "image screenshot logo", "tech exciting playful", "dramatic",
        (15, 35, 25), (9, 5, 10), "glitch digital distortion tech",
        requires_image=True,
    ),
    _effect(
        "REVEAL_DEVICE_MOCKUP", "Device Mockup Entrance", _REVEAL,
        "Screenshot appears inside a 3D rotating device (phone/laptop)",
        "screenshot image", "professional tech serious", "medium",
        (30, 50, 40), (8, 10, 9), "device mockup phone laptop professional",
        requires_image=True,
    ),
    _effect(
        "REVEAL_PARALLAX_ZOOM", "Parallax Zoom", _REVEAL,
        "Image zooms in with blur-to-sharp focus and parallax layers",
        "image screenshot", "luxurious professional serious", "medium",
        (20, 40, 30), (7, 9, 8), "zoom parallax focus depth",
        requires_image=True,
    ),
    _effect(
        "REVEAL_SPLIT_MERGE", "Split & Merge", _REVEAL,
        "Image splits into pieces that fly in and merge together",
        "image logo", "exciting tech playful", "dramatic",
        (25, 45, 35), (9, 7, 9), "split merge pieces assembly",
        requires_image=True,
    ),

    # === TEXT REVEALS ===
    _effect(
        "REVEAL_TEXT_TYPEWRITER", "Typewriter", _REVEAL,
        "Text types out character by character with cursor",
        "text", "tech professional serious", "subtle",
        (30, 90, 60), (5, 8, 7), "typewriter typing cursor text",
        requires_text=True,
    ),
    _effect(
        "REVEAL_TEXT_LETTER_BOUNCE", "Letter Bounce", _REVEAL,
        "Letters bounce in one by one with spring physics",
        "text", "playful exciting", "medium",
        (20, 50, 35), (7, 5, 8), "bounce letters spring playful",
        requires_text=True,
    ),
    _effect(
        "REVEAL_TEXT_GLITCH", "Glitch Text", _REVEAL,
        "Text appears through digital glitch effect with color splitting",
        "text", "tech exciting", "dramatic",
        (15, 30, 20), (9, 5, 10), "glitch digital rgb tech",
        requires_text=True, supports_color=True,
    ),
    _effect(
        "REVEAL_TEXT_GRADIENT_SWEEP", "Gradient Sweep", _REVEAL,
        "Gradient sweeps across text to reveal it",
        "text", "luxurious professional exciting", "medium",
        (15, 30, 20), (7, 8, 9), "gradient sweep color elegant",
        requires_text=True, supports_color=True,
    ),
    _effect(
        "REVEAL_TEXT_WORD_CASCADE", "Word Cascade", _REVEAL,
        "Words fall in one after another with stagger",
        "text", "professional serious luxurious", "subtle",
        (20, 45, 30), (6, 9, 8), "words cascade stagger elegant",
        requires_text=True,
    ),
    _effect(
        "REVEAL_TEXT_BLUR_IN", "Blur Focus", _REVEAL,
        "Text fades in from blur to sharp focus",
        "text", "professional luxurious serious", "subtle",
        (15, 25, 20), (5, 9, 7), "blur focus fade elegant",
        requires_text=True,
    ),

    # === STAT REVEALS ===
    _effect(
        "REVEAL_COUNTER_ROLL", "Counter Roll", _REVEAL,
        "Numbers roll up like a slot machine to final value",
        "stat", "exciting professional tech", "medium",
        (30, 60, 45), (8, 8, 8), "counter numbers roll stats",
    ),
    _effect(
        "REVEAL_STAT_PULSE", "Stat Pulse", _REVEAL,
        "Number appears with expanding pulse ring",
        "stat", "exciting tech", "dramatic",
        (20, 35, 25), (8, 7, 9), "pulse ring stats impact",
        supports_color=True,
    ),
)


# =============================================================================
# TRANSITION EFFECTS - How scenes change
# =============================================================================

TRANSITION_EFFECTS: Mapping[str, EffectMetadata] = _catalog(
    _effect(
        "TRANSITION_ZOOM_THROUGH", "Zoom Through", _TRANSITION,
        "Camera zooms through current scene into next",
        "image text", "exciting tech playful", "dramatic",
        (15, 30, 20), (9, 7, 9), "zoom camera dynamic",
    ),
    _effect(
        "TRANSITION_MORPH", "Shape Morph", _TRANSITION,
        "Elements morph/transform into next scene",
        "image logo", "playful exciting luxurious", "dramatic",
        (20, 40, 30), (10, 7, 10), "morph transform shape",
    ),
    _effect(
        "TRANSITION_GLITCH", "Glitch Cut", _TRANSITION,
        "Glitchy digital transition between scenes",
        "image text", "tech exciting", "dramatic",
        (10, 20, 15), (8, 5, 10), "glitch digital cut",
    ),
    _effect(
        "TRANSITION_SLICE", "Slice Transition", _TRANSITION,
        "Scene slices apart to reveal next scene",
        "image text", "tech professional exciting", "medium",
        (15, 25, 20), (8, 8, 9), "slice cut geometric",
    ),
    _effect(
        "TRANSITION_LIGHT_LEAK", "Light Leak", _TRANSITION,
        "Bright light flare transitions between scenes",
        "image text", "luxurious exciting professional", "medium",
        (15, 25, 20), (7, 8, 8), "light flare bright cinematic",
        supports_color=True,
    ),
    _effect(
        "TRANSITION_PARTICLE_DISSOLVE", "Particle Dissolve", _TRANSITION,
        "Scene dissolves into particles that reform as next scene",
        "image text", "exciting playful tech", "dramatic",
        (25, 45, 35), (10, 6, 10), "particles dissolve transform",
    ),
    _effect(
        "TRANSITION_WIPE_GEOMETRIC", "Geometric Wipe", _TRANSITION,
        "Clean geometric wipe (diagonal, circular, etc.)",
        "image text", "professional serious tech", "subtle",
        (10, 20, 15), (5, 10, 7), "wipe geometric clean professional",
    ),
    _effect(
        "TRANSITION_BLUR_CROSS", "Blur Crossfade", _TRANSITION,
        "Scenes blur out and in during crossfade",
        "image text", "professional luxurious serious", "subtle",
        (15, 30, 20), (4, 9, 7), "blur crossfade elegant",
    ),
)


# =============================================================================
# EMPHASIS EFFECTS - How to highlight elements
# =============================================================================

EMPHASIS_EFFECTS: Mapping[str, EffectMetadata] = _catalog(
    _effect(
        "EMPHASIS_GLOW_PULSE", "Glow Pulse", _EMPHASIS,
        "Element pulses with glowing aura",
        "button text logo", "exciting tech playful", "medium",
        (30, 90, 60), (7, 6, 8), "glow pulse attention",
        supports_color=True,
    ),
    _effect(
        "EMPHASIS_SHAKE", "Attention Shake", _EMPHASIS,
        "Element shakes to grab attention",
        "button text", "playful exciting", "dramatic",
        (15, 30, 20), (8, 4, 7), "shake attention urgent",
    ),
    _effect(
        "EMPHASIS_SCALE_BOUNCE", "Scale Bounce", _EMPHASIS,
        "Element bounces in scale for emphasis",
        "button stat logo", "playful exciting", "medium",
        (20, 40, 30), (7, 6, 8), "scale bounce spring",
    ),
    _effect(
        "EMPHASIS_UNDERLINE_DRAW", "Underline Draw", _EMPHASIS,
        "Animated underline draws under text",
        "text", "professional serious luxurious", "subtle",
        (15, 30, 20), (5, 9, 8), "underline draw elegant",
        supports_color=True,
    ),
    _effect(
        "EMPHASIS_HIGHLIGHT_SWEEP", "Highlight Sweep", _EMPHASIS,
        "Highlight color sweeps across text",
        "text", "professional exciting", "medium",
        (15, 25, 20), (6, 8, 8), "highlight sweep color",
        supports_color=True,
    ),
)


# =============================================================================
# AMBIENT EFFECTS - Background atmosphere
# =============================================================================

AMBIENT_EFFECTS: Mapping[str, EffectMetadata] = _catalog(
    _effect(
        "AMBIENT_PARTICLES_FLOAT", "Floating Particles", _AMBIENT,
        "Gentle floating particles in background",
        "image text", "tech luxurious playful", "subtle",
        (90, 300, 150), (4, 7, 9), "particles float ambient background",
        supports_color=True,
    ),
    _effect(
        "AMBIENT_GRADIENT_SHIFT", "Gradient Shift", _AMBIENT,
        "Background gradient slowly shifts colors",
        "image text", "luxurious playful exciting", "subtle",
        (90, 300, 180), (3, 8, 9), "gradient color ambient background",
        supports_color=True,
    ),
    _effect(
        "AMBIENT_LIGHT_RAYS", "Light Rays", _AMBIENT,
        "Subtle light rays in background",
        "image text", "luxurious professional exciting", "subtle",
        (60, 180, 120), (5, 8, 8), "light rays glow cinematic",
    ),
    _effect(
        "AMBIENT_GEOMETRIC_PATTERNS", "Geometric Patterns", _AMBIENT,
        "Animated geometric patterns in background",
        "text", "tech professional serious", "subtle",
        (90, 300, 150), (4, 8, 9), "geometric patterns tech background",
    ),
    _effect(
        "AMBIENT_NOISE_GRAIN", "Film Grain", _AMBIENT,
        "Subtle film grain overlay for cinematic feel",
        "image text", "luxurious professional serious", "subtle",
        (30, 600, 300), (2, 9, 7), "grain film cinematic texture",
    ),
)


# =============================================================================
# COMBINED REGISTRY
# =============================================================================

ALL_EFFECTS: Mapping[str, EffectMetadata] = MappingProxyType({
    **REVEAL_EFFECTS,
    **TRANSITION_EFFECTS,
    **EMPHASIS_EFFECTS,
    **AMBIENT_EFFECTS,
})

EFFECTS_BY_CATEGORY: Mapping[EffectCategory, Mapping[str, EffectMetadata]] = MappingProxyType({
    EffectCategory.REVEAL: REVEAL_EFFECTS,
    EffectCategory.TRANSITION: TRANSITION_EFFECTS,
    EffectCategory.EMPHASIS: EMPHASIS_EFFECTS,
    EffectCategory.AMBIENT: AMBIENT_EFFECTS,
})


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _coerce(enum_cls, value):
    return value if isinstance(value, enum_cls) else enum_cls(value)


def get_effect(effect_id: str) -> Optional[EffectMetadata]:
    return ALL_EFFECTS.get(effect_id)


def get_effects_for(
    content_type: Union[ContentType, str],
    tone: Union[EmotionalTone, str],
    category: Union[EffectCategory, str, None] = None
) -> List[EffectMetadata]:
    """
    Effects suited to a content type and tone, highest impact first.

    Effects with equal impact keep catalog order.
    """
    content_type = _coerce(ContentType, content_type)
    tone = _coerce(EmotionalTone, tone)
    category = _coerce(EffectCategory, category) if category is not None else None

    effects = [
        effect for effect in ALL_EFFECTS.values()
        if (category is None or effect.category == category)
        and content_type in effect.best_for
        and tone in effect.tones
    ]
    return sorted(effects, key=lambda e: e.impact_score, reverse=True)


def get_best_image_reveal(
    tone: Union[EmotionalTone, str],
    prefer_dramatic: bool = True
) -> Optional[EffectMetadata]:
    """Best image reveal for a tone, or None if none suits it."""
    effects = get_effects_for(ContentType.IMAGE, tone, EffectCategory.REVEAL)
    if not effects:
        return None
    if prefer_dramatic:
        for effect in effects:
            if effect.intensity == EffectIntensity.DRAMATIC:
                return effect
    return effects[0]


def get_best_text_reveal(
    tone: Union[EmotionalTone, str],
    intensity: Union[EffectIntensity, str] = EffectIntensity.MEDIUM
) -> Optional[EffectMetadata]:
    """Best text reveal for a tone, matching `intensity` when possible."""
    intensity = _coerce(EffectIntensity, intensity)
    effects = get_effects_for(ContentType.TEXT, tone, EffectCategory.REVEAL)
    for effect in effects:
        if effect.intensity == intensity:
            return effect
    return effects[0] if effects else None


def get_best_transition(
    tone: Union[EmotionalTone, str],
    prefer_smooth: bool = False
) -> Optional[EffectMetadata]:
    """Highest impact transition for a tone, or the best subtle one when smooth is preferred."""
    tone = _coerce(EmotionalTone, tone)
    transitions = sorted(
        (t for t in TRANSITION_EFFECTS.values() if tone in t.tones),
        key=lambda t: t.impact_score,
        reverse=True
    )
    if not transitions:
        return None
    if prefer_smooth:
        for transition in transitions:
            if transition.intensity == EffectIntensity.SUBTLE:
                return transition
    return transitions[0]


def generate_effect_choices_for_ai() -> str:
    """Markdown list of image reveals, text reveals and transitions for a prompt."""
    choices = ["## Image Reveal Effects:"]
    for e in REVEAL_EFFECTS.values():
        if e.requires_image:
            tones = ", ".join(t.value for t in e.tones)
            choices.append(f"- {e.id}: {e.description} (impact: {e.impact_score}/10, tones: {tones})")

    choices.append("\n## Text Reveal Effects:")
    for e in REVEAL_EFFECTS.values():
        if e.requires_text:
            tones = ", ".join(t.value for t in e.tones)
            choices.append(f"- {e.id}: {e.description} (impact: {e.impact_score}/10, tones: {tones})")

    choices.append("\n## Scene Transitions:")
    for e in TRANSITION_EFFECTS.values():
        choices.append(f"- {e.id}: {e.description} (impact: {e.impact_score}/10)")

    return "\n".join(choices)
