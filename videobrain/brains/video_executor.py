"""
Video Executor - Stage 3

Assembles the final scene list from the two validated upstream outputs.
Headlines are the strategy's key messages copied verbatim; visual choices
stay inside the art direction's constraints.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from videobrain.core.constants import (
    BACKGROUND_TYPES,
    ENTRY_ANIMATIONS,
    IMAGE_ROLES,
    MIN_SCENES,
    TEXTURES,
    Layout,
    SceneType,
    Stage,
)
from videobrain.core.exceptions import ValidationError
from .art_director import ArtDirectorOutput
from .marketing_strategist import MarketingStrategyOutput
from .media import ProvidedImage
from .schema import ShapeChecker
from .templates import render_user_message


# =============================================================================
# SCHEMA DEFINITIONS
# =============================================================================

@dataclass(frozen=True)
class VideoExecutorInput:
    marketing_strategy: MarketingStrategyOutput
    art_direction: ArtDirectorOutput
    # Full image list, references included
    provided_images: Tuple[ProvidedImage, ...]
    fps: int
    width: int
    height: int


@dataclass(frozen=True)
class SceneBackground:
    type: str
    gradient_colors: Tuple[str, str]
    gradient_angle: Optional[float] = None
    texture: Optional[str] = None
    texture_opacity: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"type": self.type, "gradientColors": list(self.gradient_colors)}
        if self.gradient_angle is not None:
            data["gradientAngle"] = self.gradient_angle
        if self.texture is not None:
            data["texture"] = self.texture
        if self.texture_opacity is not None:
            data["textureOpacity"] = self.texture_opacity
        return data


# Wire name -> attribute name for the optional typography fields
_TYPOGRAPHY_TEXT_FIELDS = {
    "headlineSize": "headline_size",
    "headlineColor": "headline_color",
    "headlineTransform": "headline_transform",
    "subtextFont": "subtext_font",
    "subtextSize": "subtext_size",
    "subtextColor": "subtext_color",
}
_TYPOGRAPHY_NUMBER_FIELDS = {
    "headlineWeight": "headline_weight",
    "subtextWeight": "subtext_weight",
}


@dataclass(frozen=True)
class SceneTypography:
    headline_font: str
    headline_weight: Optional[float] = None
    headline_size: Optional[str] = None
    headline_color: Optional[str] = None
    headline_transform: Optional[str] = None
    subtext_font: Optional[str] = None
    subtext_size: Optional[str] = None
    subtext_weight: Optional[float] = None
    subtext_color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"headlineFont": self.headline_font}
        for wire, attr in {**_TYPOGRAPHY_TEXT_FIELDS, **_TYPOGRAPHY_NUMBER_FIELDS}.items():
            value = getattr(self, attr)
            if value is not None:
                data[wire] = value
        return data


@dataclass(frozen=True)
class SceneMotion:
    entry: str
    entry_duration: Optional[float] = None
    exit: Optional[str] = None
    exit_duration: Optional[float] = None
    hold_animation: Optional[str] = None
    rhythm: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"entry": self.entry}
        optional = {
            "entryDuration": self.entry_duration,
            "exit": self.exit,
            "exitDuration": self.exit_duration,
            "holdAnimation": self.hold_animation,
            "rhythm": self.rhythm,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data


@dataclass(frozen=True)
class ImagePlacement:
    """
    Where and how one provided image appears in a scene.

    Treatment, effect, position and size are renderer hints and are kept
    as the plain mappings the executor produced.
    """
    image_id: str
    role: str
    treatment: Dict[str, Any] = field(default_factory=dict)
    effect: Dict[str, Any] = field(default_factory=dict)
    position: Dict[str, Any] = field(default_factory=dict)
    size: Dict[str, Any] = field(default_factory=dict)
    entry_delay: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "imageId": self.image_id,
            "role": self.role,
            "treatment": dict(self.treatment),
            "effect": dict(self.effect),
            "position": dict(self.position),
            "size": dict(self.size),
        }
        if self.entry_delay is not None:
            data["entryDelay"] = self.entry_delay
        return data


@dataclass(frozen=True)
class SceneSpec:
    scene_type: SceneType
    headline: str
    layout: Layout
    background: SceneBackground
    typography: SceneTypography
    motion: SceneMotion
    duration_frames: int
    subtext: Optional[str] = None
    images: Tuple[ImagePlacement, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sceneType": self.scene_type.value,
            "headline": self.headline,
            "subtext": self.subtext,
            "layout": self.layout.value,
            "background": self.background.to_dict(),
            "typography": self.typography.to_dict(),
            "motion": self.motion.to_dict(),
            "images": [image.to_dict() for image in self.images],
            "durationFrames": self.duration_frames,
        }


@dataclass(frozen=True)
class VideoExecutorOutput:
    """Validated stage 3 output."""
    fps: float
    width: float
    height: float
    scenes: Tuple[SceneSpec, ...]
    warnings: Tuple[str, ...] = ()

    @property
    def total_frames(self) -> int:
        return sum(scene.duration_frames for scene in self.scenes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fps": self.fps,
            "width": self.width,
            "height": self.height,
            "scenes": [scene.to_dict() for scene in self.scenes],
            "warnings": list(self.warnings),
        }


# =============================================================================
# VALIDATION
# =============================================================================

def _check_scene(check: ShapeChecker, s: dict, path: str) -> None:
    check.enum(s, "sceneType", [t.value for t in SceneType], f"{path}.sceneType")
    check.string(s, "headline", f"{path}.headline")
    check.string(s, "subtext", f"{path}.subtext", required=False)
    check.enum(s, "layout", [layout.value for layout in Layout], f"{path}.layout")
    check.integer(s, "durationFrames", f"{path}.durationFrames", minimum=1)

    background = check.child_object(s, "background", f"{path}.background")
    if background is not None:
        bg_path = f"{path}.background"
        check.enum(background, "type", BACKGROUND_TYPES, f"{bg_path}.type")
        colors = check.string_list(background, "gradientColors", f"{bg_path}.gradientColors", min_items=2)
        if colors is not None and len(colors) != 2:
            check.fail(f"{bg_path}.gradientColors", f"expected exactly 2 colors, got {len(colors)}")
        check.number(background, "gradientAngle", f"{bg_path}.gradientAngle", required=False)
        check.enum(background, "texture", TEXTURES, f"{bg_path}.texture", required=False)
        check.number(background, "textureOpacity", f"{bg_path}.textureOpacity", required=False, minimum=0)

    typography = check.child_object(s, "typography", f"{path}.typography")
    if typography is not None:
        ty_path = f"{path}.typography"
        check.string(typography, "headlineFont", f"{ty_path}.headlineFont")
        for key in _TYPOGRAPHY_TEXT_FIELDS:
            check.string(typography, key, f"{ty_path}.{key}", required=False)
        for key in _TYPOGRAPHY_NUMBER_FIELDS:
            check.number(typography, key, f"{ty_path}.{key}", required=False)

    motion = check.child_object(s, "motion", f"{path}.motion")
    if motion is not None:
        mo_path = f"{path}.motion"
        check.enum(motion, "entry", ENTRY_ANIMATIONS, f"{mo_path}.entry")
        check.number(motion, "entryDuration", f"{mo_path}.entryDuration", required=False, minimum=0)
        check.string(motion, "exit", f"{mo_path}.exit", required=False)
        check.number(motion, "exitDuration", f"{mo_path}.exitDuration", required=False, minimum=0)
        check.string(motion, "holdAnimation", f"{mo_path}.holdAnimation", required=False)
        check.string(motion, "rhythm", f"{mo_path}.rhythm", required=False)

    images = check.sequence(s, "images", f"{path}.images", required=False)
    for i, image in enumerate(images or []):
        im_path = f"{path}.images[{i}]"
        placement = check.mapping(image, im_path)
        if placement is None:
            continue
        check.string(placement, "imageId", f"{im_path}.imageId")
        check.enum(placement, "role", IMAGE_ROLES, f"{im_path}.role")
        for key in ("treatment", "effect", "position", "size"):
            if placement.get(key) is not None:
                check.mapping(placement[key], f"{im_path}.{key}")
        check.number(placement, "entryDelay", f"{im_path}.entryDelay", required=False, minimum=0)


def video_executor_output_errors(
    output: Any,
    strategy: Optional[MarketingStrategyOutput] = None,
    art_direction: Optional[ArtDirectorOutput] = None,
    provided_images: Optional[Iterable[ProvidedImage]] = None
) -> List[str]:
    """
    List every way `output` deviates from the scene list shape.

    Structural and sequence rules are always checked. The cross-stage rules
    (verbatim headlines, image budget, known image ids) are checked when the
    corresponding upstream data is supplied.
    """
    check = ShapeChecker()
    o = check.mapping(output, "$")
    if o is None:
        return check.errors

    check.number(o, "fps", "fps", minimum=1)
    check.number(o, "width", "width", minimum=1)
    check.number(o, "height", "height", minimum=1)
    check.string_list(o, "warnings", "warnings", required=False)

    scenes = check.sequence(o, "scenes", "scenes", min_items=MIN_SCENES)
    if scenes is None:
        return check.errors

    known_ids = None
    if provided_images is not None:
        known_ids = {image.id for image in provided_images}

    image_total = 0
    previous_layout = None
    previous_entry = None
    for i, scene in enumerate(scenes):
        path = f"scenes[{i}]"
        s = check.mapping(scene, path)
        if s is None:
            previous_layout = previous_entry = None
            continue
        _check_scene(check, s, path)

        layout = s.get("layout")
        if previous_layout is not None and layout == previous_layout:
            check.fail(f"{path}.layout", f"repeats previous scene layout '{layout}'")
        previous_layout = layout

        motion = s.get("motion")
        entry = motion.get("entry") if isinstance(motion, dict) else None
        if previous_entry is not None and entry == previous_entry:
            check.fail(f"{path}.motion.entry", f"repeats previous scene entry '{entry}'")
        previous_entry = entry

        images = s.get("images") if isinstance(s.get("images"), list) else []
        image_total += len(images)
        if known_ids is not None:
            for j, image in enumerate(images):
                image_id = image.get("imageId") if isinstance(image, dict) else None
                if isinstance(image_id, str) and image_id not in known_ids:
                    check.fail(f"{path}.images[{j}].imageId", f"unknown image '{image_id}'")

        if strategy is not None and isinstance(s.get("headline"), str):
            scene_type = s.get("sceneType")
            if scene_type in [t.value for t in SceneType]:
                key_message = strategy.message_for(SceneType(scene_type).message_id)
                if key_message is None:
                    check.fail(f"{path}.sceneType", f"no '{scene_type.lower()}' key message in strategy")
                elif s["headline"] != key_message.message:
                    check.fail(f"{path}.headline", "must equal the key message verbatim")

    if art_direction is not None:
        limit = art_direction.image_usage_rules.max_images_per_video
        if image_total > limit:
            check.fail("scenes", f"{image_total} images used, at most {limit} allowed")

    return check.errors


def validate_video_executor_output(
    output: Any,
    strategy: Optional[MarketingStrategyOutput] = None,
    art_direction: Optional[ArtDirectorOutput] = None,
    provided_images: Optional[Iterable[ProvidedImage]] = None
) -> bool:
    """Pure predicate: True only if `output` is a complete, consistent scene list."""
    return not video_executor_output_errors(output, strategy, art_direction, provided_images)


def _decode_scene(s: dict) -> SceneSpec:
    background = s["background"]
    typography = s["typography"]
    motion = s["motion"]

    return SceneSpec(
        scene_type=SceneType(s["sceneType"]),
        headline=s["headline"],
        subtext=s.get("subtext"),
        layout=Layout(s["layout"]),
        background=SceneBackground(
            type=background["type"],
            gradient_colors=tuple(background["gradientColors"]),
            gradient_angle=background.get("gradientAngle"),
            texture=background.get("texture"),
            texture_opacity=background.get("textureOpacity"),
        ),
        typography=SceneTypography(
            headline_font=typography["headlineFont"],
            **{
                attr: typography.get(wire)
                for wire, attr in {**_TYPOGRAPHY_TEXT_FIELDS, **_TYPOGRAPHY_NUMBER_FIELDS}.items()
            },
        ),
        motion=SceneMotion(
            entry=motion["entry"],
            entry_duration=motion.get("entryDuration"),
            exit=motion.get("exit"),
            exit_duration=motion.get("exitDuration"),
            hold_animation=motion.get("holdAnimation"),
            rhythm=motion.get("rhythm"),
        ),
        images=tuple(
            ImagePlacement(
                image_id=image["imageId"],
                role=image["role"],
                treatment=dict(image.get("treatment") or {}),
                effect=dict(image.get("effect") or {}),
                position=dict(image.get("position") or {}),
                size=dict(image.get("size") or {}),
                entry_delay=image.get("entryDelay"),
            )
            for image in (s.get("images") or [])
        ),
        duration_frames=int(s["durationFrames"]),
    )


def decode_video_executor_output(
    output: Any,
    stage_input: Optional[VideoExecutorInput] = None
) -> VideoExecutorOutput:
    """
    Decode a JSON value into a VideoExecutorOutput.

    When `stage_input` is given, cross-stage rules are enforced against it.

    Raises:
        ValidationError: If the scene list is malformed or inconsistent
    """
    if stage_input is not None:
        errors = video_executor_output_errors(
            output,
            strategy=stage_input.marketing_strategy,
            art_direction=stage_input.art_direction,
            provided_images=stage_input.provided_images,
        )
    else:
        errors = video_executor_output_errors(output)
    if errors:
        raise ValidationError(Stage.EXECUTION.value, errors)

    return VideoExecutorOutput(
        fps=output["fps"],
        width=output["width"],
        height=output["height"],
        scenes=tuple(_decode_scene(s) for s in output["scenes"]),
        warnings=tuple(output.get("warnings") or ()),
    )


# =============================================================================
# BUILD USER MESSAGE
# =============================================================================

def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def _bullets(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items) or "- none"


def build_video_executor_user_message(stage_input: VideoExecutorInput) -> str:
    strategy = stage_input.marketing_strategy
    art = stage_input.art_direction

    key_messages = "".join(
        f"\n- {m.id.upper()}:\n  Message: \"{m.message}\"\n  Target emotion: {m.emotional_target}"
        for m in strategy.key_messages
    )

    if stage_input.provided_images:
        lines = []
        for image in stage_input.provided_images:
            line = f"- ID: {image.id} | Type: {image.type.value}"
            if image.reference:
                line += f" | Reference: {image.reference}"
            lines.append(line)
        images = "\n".join(lines)
    else:
        images = "No images provided."

    return render_user_message(
        Stage.EXECUTION,
        core_promise=strategy.core_promise,
        emotional_arc=" → ".join(strategy.emotional_arc),
        key_messages=key_messages.lstrip("\n"),
        design_pack=art.design_pack.value,
        primary=art.palette.primary,
        secondary=art.palette.secondary,
        neutral=art.palette.neutral,
        accent=art.palette.accent,
        text=art.palette.text,
        text_muted=art.palette.text_muted,
        headline_font=art.typography.headline_font,
        body_font=art.typography.body_font,
        weight_strategy=art.typography.weight_strategy,
        motion_intensity=art.motion.intensity,
        entry_style=art.motion.entry_style,
        rhythm=art.motion.rhythm,
        hold_behavior=art.motion.hold_behavior,
        min_elements=art.composition_rules.min_elements_per_scene,
        flat_slides=_yes_no(art.composition_rules.allow_flat_slides),
        texture_required=_yes_no(art.composition_rules.require_texture),
        depth_required=_yes_no(art.composition_rules.require_visual_depth),
        logos=art.image_usage_rules.logos,
        screenshots=art.image_usage_rules.screenshots,
        max_images=art.image_usage_rules.max_images_per_video,
        hero_allowed=_yes_no(art.image_usage_rules.hero_image_allowed),
        texture=art.texture_preference,
        texture_opacity=art.texture_opacity,
        radius_min=art.corner_radius_range[0],
        radius_max=art.corner_radius_range[1],
        shadow=art.shadow_style,
        forbidden_elements=_bullets(art.forbidden_elements),
        required_elements=_bullets(art.required_elements),
        images=images,
        fps=stage_input.fps,
        width=stage_input.width,
        height=stage_input.height,
    )
