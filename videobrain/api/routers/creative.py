"""Creative router for Videobrain API.

Runs the three-stage creative pipeline for one product brief and returns
the scene plan in the renderer's video spec format.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address

from videobrain.brains.media import ProvidedImage
from videobrain.core.config import get_config
from videobrain.core.constants import ImageType, ProductType
from videobrain.core.exceptions import PipelineError, RequestValidationError
from videobrain.core.logging_config import get_logger
from videobrain.llm.providers import CompletionService, create_provider
from videobrain.pipelines.creative_pipeline import CreativePipeline, PipelineOutput, PipelineRequest

logger = get_logger("api.creative")

router = APIRouter()

# Rate limiter for completion-backed requests
limiter = Limiter(key_func=get_remote_address)


def _rate_limit() -> str:
    return get_config().api.rate_limit


class ImageIntent(BaseModel):
    id: str
    url: Optional[str] = None
    intent: Optional[str] = None
    description: Optional[str] = None


class CreativeRequest(BaseModel):
    message: Optional[str] = None
    providedImages: Optional[List[ImageIntent]] = None
    productType: Optional[ProductType] = None
    targetAudience: Optional[str] = None
    tone: Optional[str] = None
    language: Optional[str] = None
    productDescription: Optional[str] = None


# =============================================================================
# DETECTION HELPERS
# =============================================================================

PRODUCT_TYPE_KEYWORDS = (
    (ProductType.AI_TOOL, ("ai", "intelligence artificielle", "machine learning")),
    (ProductType.SAAS, ("saas", "app", "dashboard", "software")),
    (ProductType.ECOMMERCE, ("ecommerce", "shop", "boutique", "vente")),
    (ProductType.FINANCE, ("finance", "banque", "investissement")),
    (ProductType.CREATIVE, ("creative", "design", "agence")),
    (ProductType.SERVICE, ("service", "consultant", "coaching")),
)

FRENCH_INDICATORS = frozenset(
    ("le", "la", "les", "de", "du", "des", "pour", "avec", "une", "un", "notre", "votre")
)

IMAGE_TYPE_KEYWORDS = (
    (ImageType.SCREENSHOT, ("screenshot", "capture", "dashboard", "interface")),
    (ImageType.LOGO, ("logo",)),
    (ImageType.PHOTO, ("photo", "image", "picture")),
    (ImageType.ICON, ("icon", "icône")),
    (ImageType.GRAPHIC, ("graphic", "illustration", "graphique")),
)


def detect_product_type(message: str) -> ProductType:
    """First keyword group found anywhere in the message (substring match)."""
    lower = message.lower()
    for product_type, keywords in PRODUCT_TYPE_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return product_type
    return ProductType.B2B


def detect_language(message: str) -> str:
    words = message.lower().split()
    french_count = sum(1 for word in words if word in FRENCH_INDICATORS)
    return "français" if french_count > 2 else "english"


def detect_image_type(image: ImageIntent) -> ImageType:
    combined = f"{(image.intent or '').lower()} {(image.description or '').lower()}"
    for image_type, keywords in IMAGE_TYPE_KEYWORDS:
        if any(keyword in combined for keyword in keywords):
            return image_type
    return ImageType.UNKNOWN


def to_provided_image(image: ImageIntent) -> ProvidedImage:
    return ProvidedImage(
        id=image.id,
        type=detect_image_type(image),
        description=image.description or image.intent,
        reference=image.url,
    )


# =============================================================================
# VIDEO SPEC CONVERSION
# =============================================================================

def to_video_spec(output: PipelineOutput, provided_images: Optional[List[ImageIntent]] = None) -> Dict[str, Any]:
    """Flatten the pipeline output into the renderer's video spec."""
    strategy = output.marketing_strategy
    art = output.art_direction
    video = output.video_spec.to_dict()

    return {
        "blueprint": {
            "designPack": art.design_pack.value,
            "conceptLock": strategy.core_promise,
            "emotionArc": " → ".join(strategy.emotional_arc),
            "visualIdentity": f"{art.design_pack.value} - {art.palette.primary} accent",
            "accentColor": art.palette.accent,
        },
        "concept": strategy.core_promise,
        "strategy": {
            "corePromise": strategy.core_promise,
            "hookIntent": strategy.hook_intent,
            "emotionalArc": list(strategy.emotional_arc),
            "differentiator": strategy.differentiator,
        },
        "providedImages": [image.model_dump(exclude_none=True) for image in provided_images or []],
        "scenes": video["scenes"],
        "fps": video["fps"],
        "width": video["width"],
        "height": video["height"],
    }


def validate_video_spec(video_spec: Dict[str, Any]) -> Dict[str, Any]:
    """Renderer-side sanity check of a converted video spec."""
    errors = []
    scenes = video_spec.get("scenes") or []
    if not scenes:
        errors.append("No scenes provided")

    for i in range(1, len(scenes)):
        if scenes[i].get("layout") == scenes[i - 1].get("layout"):
            errors.append(f"Consecutive duplicate layout at scene {i + 1}")

    return {"valid": not errors, "errors": errors}


# =============================================================================
# ENDPOINT
# =============================================================================

def get_completion_service() -> CompletionService:
    """Completion service for pipeline runs. Overridden in tests."""
    return create_provider(get_config().llm)


def _error(status_code: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error, **extra})


@router.post("")
@limiter.limit(_rate_limit)
async def create_video_plan(
    request: Request,
    body: CreativeRequest,
    completion_service: CompletionService = Depends(get_completion_service)
):
    """Run strategy → art direction → execution for one brief."""
    if not body.message or not body.message.strip():
        return _error(400, "Missing message")

    images = body.providedImages or []
    logger.info(f"Creative request: {body.message[:100]!r} ({len(images)} images)")

    try:
        pipeline_request = PipelineRequest.from_dict({
            "user_prompt": body.message,
            "product_type": body.productType or detect_product_type(body.message),
            "language": body.language or detect_language(body.message),
            "product_description": body.productDescription,
            "target_audience": body.targetAudience,
            "tone": body.tone,
            "provided_images": [to_provided_image(image) for image in images],
        })
    except RequestValidationError as e:
        return _error(400, e.message)

    logger.info(
        f"Product type: {pipeline_request.product_type.value}, "
        f"language: {pipeline_request.language}"
    )

    pipeline = CreativePipeline(completion_service=completion_service)
    result = await pipeline.execute(pipeline_request)

    if isinstance(result, PipelineError):
        logger.error(f"Creative pipeline failed at {result.stage}: {result.message}")
        return _error(
            502,
            f"Pipeline failed at stage: {result.stage}",
            details=result.message,
            rawOutput=result.raw_output,
        )

    video_spec = to_video_spec(result, images)
    validation = validate_video_spec(video_spec)

    for i, scene in enumerate(video_spec["scenes"]):
        logger.debug(f"Scene {i} ({scene['sceneType']}): {scene['headline']}")

    return {
        "success": True,
        "data": video_spec,
        "validation": validation,
        "pipeline": {
            "marketingStrategy": result.marketing_strategy.to_dict(),
            "artDirection": result.art_direction.to_dict(),
        },
    }
