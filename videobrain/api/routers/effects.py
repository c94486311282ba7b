"""Effects router for Videobrain API."""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from videobrain.effects import (
    EFFECT_PRESETS,
    EFFECTS_BY_CATEGORY,
    EffectContext,
    EffectIntensity,
    EmotionalTone,
    get_preset_effects,
    select_all_effects,
)
from videobrain.effects.selector import BrandStyle

router = APIRouter()


class EffectContextRequest(BaseModel):
    tone: EmotionalTone
    hasImages: bool = False
    hasScreenshots: bool = False
    intensity: EffectIntensity = EffectIntensity.MEDIUM
    brandStyle: Optional[BrandStyle] = None


@router.get("")
async def list_effects():
    """Full catalog grouped by category, in catalog order."""
    return {
        category.value: [effect.to_dict() for effect in effects.values()]
        for category, effects in EFFECTS_BY_CATEGORY.items()
    }


@router.get("/presets")
async def list_presets():
    return {name: dict(preset) for name, preset in EFFECT_PRESETS.items()}


@router.get("/presets/{name}")
async def get_preset(name: str):
    try:
        return dict(get_preset_effects(name))
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown preset: {name}")


@router.post("/select")
async def select_effects(body: EffectContextRequest):
    """Deterministic effect selection for every narrative scene."""
    context = EffectContext(
        tone=body.tone,
        has_images=body.hasImages,
        has_screenshots=body.hasScreenshots,
        intensity=body.intensity,
        brand_style=body.brandStyle,
    )
    return select_all_effects(context).to_dict()
