"""
Art Director - Stage 2

Translates the validated marketing strategy into a visual system: one
design pack, a palette, typography, motion, image rules and composition
constraints. Never writes or edits copy.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from videobrain.core.constants import (
    BODY_FONTS,
    COLOR_PATTERN,
    ENTRY_STYLES,
    GRAPHIC_RULES,
    HEADLINE_FONTS,
    HOLD_BEHAVIORS,
    LOGO_RULES,
    MOTION_INTENSITIES,
    MOTION_RHYTHMS,
    PALETTE_SLOTS,
    PHOTO_RULES,
    SCREENSHOT_RULES,
    SHADOW_STYLES,
    SIZE_PROGRESSIONS,
    TEXTURES,
    VISUAL_DENSITIES,
    WEIGHT_STRATEGIES,
    DesignPack,
    ProductType,
    Stage,
)
from videobrain.core.exceptions import ValidationError
from .marketing_strategist import MarketingStrategyOutput
from .media import ProvidedImage
from .schema import ShapeChecker
from .templates import render_user_message


# =============================================================================
# SCHEMA DEFINITIONS
# =============================================================================

@dataclass(frozen=True)
class ArtDirectorInput:
    marketing_strategy: MarketingStrategyOutput
    product_type: ProductType
    # Metadata only (id, type, description); references are stripped
    provided_images: Tuple[ProvidedImage, ...] = ()


@dataclass(frozen=True)
class ColorPalette:
    primary: str
    secondary: str
    neutral: str
    accent: str
    text: str
    text_muted: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "neutral": self.neutral,
            "accent": self.accent,
            "text": self.text,
            "textMuted": self.text_muted,
        }


@dataclass(frozen=True)
class TypographySystem:
    headline_font: str
    body_font: str
    weight_strategy: str
    size_progression: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "headlineFont": self.headline_font,
            "bodyFont": self.body_font,
            "weightStrategy": self.weight_strategy,
            "sizeProgression": self.size_progression,
        }


@dataclass(frozen=True)
class MotionSystem:
    intensity: str
    entry_style: str
    rhythm: str
    hold_behavior: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "intensity": self.intensity,
            "entryStyle": self.entry_style,
            "rhythm": self.rhythm,
            "holdBehavior": self.hold_behavior,
        }


@dataclass(frozen=True)
class ImageUsageRules:
    logos: str
    screenshots: str
    photos: str
    graphics: str
    max_images_per_video: int
    hero_image_allowed: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "logos": self.logos,
            "screenshots": self.screenshots,
            "photos": self.photos,
            "graphics": self.graphics,
            "maxImagesPerVideo": self.max_images_per_video,
            "heroImageAllowed": self.hero_image_allowed,
        }


@dataclass(frozen=True)
class CompositionRules:
    min_elements_per_scene: int
    allow_flat_slides: bool
    require_texture: bool
    require_visual_depth: bool
    negative_space_required: bool
    layout_variety_enforced: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "minElementsPerScene": self.min_elements_per_scene,
            "allowFlatSlides": self.allow_flat_slides,
            "requireTexture": self.require_texture,
            "requireVisualDepth": self.require_visual_depth,
            "negativeSpaceRequired": self.negative_space_required,
            "layoutVarietyEnforced": self.layout_variety_enforced,
        }


@dataclass(frozen=True)
class ArtDirectorOutput:
    """Validated stage 2 output."""
    design_pack: DesignPack
    palette: ColorPalette
    typography: TypographySystem
    motion: MotionSystem
    visual_density: str
    image_usage_rules: ImageUsageRules
    composition_rules: CompositionRules
    texture_preference: str
    texture_opacity: float
    corner_radius_range: Tuple[float, float]
    shadow_style: str
    forbidden_elements: Tuple[str, ...]
    required_elements: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "designPack": self.design_pack.value,
            "palette": self.palette.to_dict(),
            "typography": self.typography.to_dict(),
            "motion": self.motion.to_dict(),
            "visualDensity": self.visual_density,
            "imageUsageRules": self.image_usage_rules.to_dict(),
            "compositionRules": self.composition_rules.to_dict(),
            "texturePreference": self.texture_preference,
            "textureOpacity": self.texture_opacity,
            "cornerRadiusRange": {
                "min": self.corner_radius_range[0],
                "max": self.corner_radius_range[1],
            },
            "shadowStyle": self.shadow_style,
            "forbiddenElements": list(self.forbidden_elements),
            "requiredElements": list(self.required_elements),
        }


# =============================================================================
# VALIDATION
# =============================================================================

def art_director_output_errors(output: Any) -> List[str]:
    """List every way `output` deviates from the art direction shape."""
    check = ShapeChecker()
    o = check.mapping(output, "$")
    if o is None:
        return check.errors

    check.enum(o, "designPack", [p.value for p in DesignPack], "designPack")

    palette = check.child_object(o, "palette", "palette")
    if palette is not None:
        for slot in PALETTE_SLOTS:
            check.pattern(palette, slot, COLOR_PATTERN, f"palette.{slot}")

    typography = check.child_object(o, "typography", "typography")
    if typography is not None:
        check.enum(typography, "headlineFont", HEADLINE_FONTS, "typography.headlineFont")
        check.enum(typography, "bodyFont", BODY_FONTS, "typography.bodyFont")
        check.enum(typography, "weightStrategy", WEIGHT_STRATEGIES, "typography.weightStrategy")
        check.enum(typography, "sizeProgression", SIZE_PROGRESSIONS, "typography.sizeProgression")

    motion = check.child_object(o, "motion", "motion")
    if motion is not None:
        check.enum(motion, "intensity", MOTION_INTENSITIES, "motion.intensity")
        check.enum(motion, "entryStyle", ENTRY_STYLES, "motion.entryStyle")
        check.enum(motion, "rhythm", MOTION_RHYTHMS, "motion.rhythm")
        check.enum(motion, "holdBehavior", HOLD_BEHAVIORS, "motion.holdBehavior")

    check.enum(o, "visualDensity", VISUAL_DENSITIES, "visualDensity")

    rules = check.child_object(o, "imageUsageRules", "imageUsageRules")
    if rules is not None:
        check.enum(rules, "logos", LOGO_RULES, "imageUsageRules.logos")
        check.enum(rules, "screenshots", SCREENSHOT_RULES, "imageUsageRules.screenshots")
        check.enum(rules, "photos", PHOTO_RULES, "imageUsageRules.photos")
        check.enum(rules, "graphics", GRAPHIC_RULES, "imageUsageRules.graphics")
        check.integer(rules, "maxImagesPerVideo", "imageUsageRules.maxImagesPerVideo", minimum=0)
        check.boolean(rules, "heroImageAllowed", "imageUsageRules.heroImageAllowed")

    composition = check.child_object(o, "compositionRules", "compositionRules")
    if composition is not None:
        check.integer(
            composition, "minElementsPerScene", "compositionRules.minElementsPerScene", minimum=1
        )
        for flag in (
            "allowFlatSlides",
            "requireTexture",
            "requireVisualDepth",
            "negativeSpaceRequired",
            "layoutVarietyEnforced",
        ):
            check.boolean(composition, flag, f"compositionRules.{flag}")

    check.enum(o, "texturePreference", TEXTURES, "texturePreference")
    check.number(o, "textureOpacity", "textureOpacity", minimum=0)

    radius = check.child_object(o, "cornerRadiusRange", "cornerRadiusRange")
    if radius is not None:
        low = check.number(radius, "min", "cornerRadiusRange.min", minimum=0)
        high = check.number(radius, "max", "cornerRadiusRange.max", minimum=0)
        if low is not None and high is not None and low > high:
            check.fail("cornerRadiusRange", "min must not exceed max")

    check.enum(o, "shadowStyle", SHADOW_STYLES, "shadowStyle")
    check.string_list(o, "forbiddenElements", "forbiddenElements")
    check.string_list(o, "requiredElements", "requiredElements")

    return check.errors


def validate_art_director_output(output: Any) -> bool:
    """Pure predicate: True only if `output` is a complete art direction."""
    return not art_director_output_errors(output)


def decode_art_director_output(output: Any) -> ArtDirectorOutput:
    """
    Decode a JSON value into an ArtDirectorOutput.

    Raises:
        ValidationError: If any field is missing, mistyped or out of range
    """
    errors = art_director_output_errors(output)
    if errors:
        raise ValidationError(Stage.ART_DIRECTION.value, errors)

    palette = output["palette"]
    typography = output["typography"]
    motion = output["motion"]
    rules = output["imageUsageRules"]
    composition = output["compositionRules"]
    radius = output["cornerRadiusRange"]

    return ArtDirectorOutput(
        design_pack=DesignPack(output["designPack"]),
        palette=ColorPalette(
            primary=palette["primary"],
            secondary=palette["secondary"],
            neutral=palette["neutral"],
            accent=palette["accent"],
            text=palette["text"],
            text_muted=palette["textMuted"],
        ),
        typography=TypographySystem(
            headline_font=typography["headlineFont"],
            body_font=typography["bodyFont"],
            weight_strategy=typography["weightStrategy"],
            size_progression=typography["sizeProgression"],
        ),
        motion=MotionSystem(
            intensity=motion["intensity"],
            entry_style=motion["entryStyle"],
            rhythm=motion["rhythm"],
            hold_behavior=motion["holdBehavior"],
        ),
        visual_density=output["visualDensity"],
        image_usage_rules=ImageUsageRules(
            logos=rules["logos"],
            screenshots=rules["screenshots"],
            photos=rules["photos"],
            graphics=rules["graphics"],
            max_images_per_video=int(rules["maxImagesPerVideo"]),
            hero_image_allowed=rules["heroImageAllowed"],
        ),
        composition_rules=CompositionRules(
            min_elements_per_scene=int(composition["minElementsPerScene"]),
            allow_flat_slides=composition["allowFlatSlides"],
            require_texture=composition["requireTexture"],
            require_visual_depth=composition["requireVisualDepth"],
            negative_space_required=composition["negativeSpaceRequired"],
            layout_variety_enforced=composition["layoutVarietyEnforced"],
        ),
        texture_preference=output["texturePreference"],
        texture_opacity=output["textureOpacity"],
        corner_radius_range=(radius["min"], radius["max"]),
        shadow_style=output["shadowStyle"],
        forbidden_elements=tuple(output["forbiddenElements"]),
        required_elements=tuple(output["requiredElements"]),
    )


# =============================================================================
# BUILD USER MESSAGE
# =============================================================================

def build_art_director_user_message(stage_input: ArtDirectorInput) -> str:
    strategy = stage_input.marketing_strategy

    if stage_input.provided_images:
        images = ""
        for image in stage_input.provided_images:
            images += f"\n- {image.id}: {image.type.value}"
            if image.description:
                images += f" ({image.description})"
    else:
        images = " None"

    return render_user_message(
        Stage.ART_DIRECTION,
        core_promise=strategy.core_promise,
        emotional_arc=" → ".join(strategy.emotional_arc),
        differentiator=strategy.differentiator,
        product_type=stage_input.product_type.value,
        images=images,
    )
