"""
Videobrain Constants

Closed vocabularies and defaults shared by the pipeline, the validators
and the effect engine.
"""

from enum import Enum

# =============================================================================
# VERSION INFO
# =============================================================================
VERSION = "1.0.0"
PROJECT_NAME = "Videobrain"

# =============================================================================
# REQUEST VOCABULARY
# =============================================================================

class ProductType(Enum):
    """Kind of product the video promotes."""
    SAAS = "saas"
    B2B = "b2b"
    ECOMMERCE = "ecommerce"
    SERVICE = "service"
    AI_TOOL = "ai_tool"
    CREATIVE = "creative"
    FINANCE = "finance"

class ImageType(Enum):
    """Type tag attached to each user-provided image."""
    SCREENSHOT = "screenshot"
    LOGO = "logo"
    PHOTO = "photo"
    GRAPHIC = "graphic"
    ICON = "icon"
    UNKNOWN = "unknown"

class Tone(Enum):
    """Tone requested for the marketing copy."""
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    URGENT = "urgent"
    FRIENDLY = "friendly"

class Stage(Enum):
    """The three ordered generation stages."""
    MARKETING = "marketing"
    ART_DIRECTION = "art_direction"
    EXECUTION = "execution"

DEFAULT_LANGUAGE = "english"

# =============================================================================
# MARKETING STRATEGY VOCABULARY
# =============================================================================

KEY_MESSAGE_IDS = ("hook", "problem", "solution", "proof", "cta")
REQUIRED_KEY_MESSAGE_IDS = ("hook", "problem", "solution")
MIN_KEY_MESSAGES = 3

STRATEGY_PRIORITIES = ("clarity_over_creativity", "impact_over_information")

# =============================================================================
# ART DIRECTION VOCABULARY
# =============================================================================

class DesignPack(Enum):
    """Named visual systems the art director picks from."""
    CLEAN_SAAS = "clean_saas"
    SOFT_GRADIENT = "soft_gradient"
    DARK_PREMIUM = "dark_premium"
    LIGHT_EDITORIAL = "light_editorial"
    BOLD_IMPACT = "bold_impact"

PALETTE_SLOTS = ("primary", "secondary", "neutral", "accent", "text", "textMuted")

HEADLINE_FONTS = ("Inter", "Space Grotesk", "Clash Display", "Bebas Neue", "Satoshi")
BODY_FONTS = ("Inter", "Satoshi")
WEIGHT_STRATEGIES = ("bold_for_hooks", "consistent_medium", "dramatic_contrast")
SIZE_PROGRESSIONS = ("large_to_small", "consistent", "emphasis_variation")

MOTION_INTENSITIES = ("subtle", "controlled", "energetic")
ENTRY_STYLES = ("fade", "slide", "scale", "reveal")
MOTION_RHYTHMS = ("smooth", "punchy", "dramatic")
HOLD_BEHAVIORS = ("static", "subtle_movement", "breathing")

VISUAL_DENSITIES = ("minimal", "low", "medium")

LOGO_RULES = ("never_fullscreen", "accent_only", "cta_scene_only")
SCREENSHOT_RULES = ("always_mockuped", "framed_with_shadow")
PHOTO_RULES = ("hero_treatment", "background_blur", "accent_only")
GRAPHIC_RULES = ("supporting_element", "hero_if_relevant")

TEXTURES = ("grain", "noise", "dots", "none")
SHADOW_STYLES = ("none", "subtle", "medium", "dramatic")

# Hex (#rgb, #rgba, #rrggbb, #rrggbbaa) or numeric rgb()/rgba() functional notation
_COLOR_CHANNEL = r'\s*\d{1,3}(\.\d+)?%?\s*'
_COLOR_ALPHA = r'\s*(\d+(\.\d+)?|\.\d+)%?\s*'
COLOR_PATTERN = (
    r'^(#([0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})'
    rf'|rgb\({_COLOR_CHANNEL}(,{_COLOR_CHANNEL}){{2}}\)'
    rf'|rgba\({_COLOR_CHANNEL}(,{_COLOR_CHANNEL}){{2}},{_COLOR_ALPHA}\))$'
)

# =============================================================================
# SCENE VOCABULARY
# =============================================================================

class SceneType(Enum):
    """Narrative beat a scene renders. Maps 1:1 onto key message ids."""
    HOOK = "HOOK"
    PROBLEM = "PROBLEM"
    SOLUTION = "SOLUTION"
    PROOF = "PROOF"
    CTA = "CTA"

    @property
    def message_id(self) -> str:
        return self.value.lower()

class Layout(Enum):
    """Named scene layouts understood by the renderer."""
    TEXT_CENTER = "TEXT_CENTER"
    TEXT_LEFT = "TEXT_LEFT"
    TEXT_RIGHT = "TEXT_RIGHT"
    TEXT_BOTTOM = "TEXT_BOTTOM"
    TEXT_TOP = "TEXT_TOP"
    SPLIT_HORIZONTAL = "SPLIT_HORIZONTAL"
    SPLIT_VERTICAL = "SPLIT_VERTICAL"
    DIAGONAL_SLICE = "DIAGONAL_SLICE"
    CORNER_ACCENT = "CORNER_ACCENT"
    FLOATING_CARDS = "FLOATING_CARDS"
    FULLSCREEN_STATEMENT = "FULLSCREEN_STATEMENT"
    MINIMAL_WHISPER = "MINIMAL_WHISPER"

ENTRY_ANIMATIONS = (
    "fade_in", "slide_up", "slide_down", "slide_left", "slide_right",
    "scale_up", "scale_down", "pop", "typewriter", "blur_in",
    "split_reveal", "wipe_right", "wipe_up", "glitch_in", "bounce_in",
    "rotate_in", "none",
)

BACKGROUND_TYPES = ("gradient", "radial", "mesh")
IMAGE_ROLES = ("hero", "support", "background", "accent")
MIN_SCENES = 2

# =============================================================================
# LLM / PIPELINE DEFAULTS
# =============================================================================

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_FPS = 30
DEFAULT_WIDTH = 1080
DEFAULT_HEIGHT = 1920

STAGE_MAX_TOKENS = {
    Stage.MARKETING: 2000,
    Stage.ART_DIRECTION: 2000,
    Stage.EXECUTION: 8000,
}

# Characters of raw completion text kept on a PipelineError
RAW_OUTPUT_LIMIT = 500
# Characters of raw text quoted in an extraction failure
EXTRACTION_PREVIEW_LENGTH = 200
