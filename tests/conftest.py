"""
Pytest Configuration and Fixtures

Shared fixtures for all tests.
"""

import json
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from videobrain.brains.art_director import decode_art_director_output
from videobrain.brains.marketing_strategist import decode_marketing_output
from videobrain.brains.media import ProvidedImage
from videobrain.core.config import VideoBrainConfig
from videobrain.core.constants import ImageType, ProductType
from videobrain.pipelines.creative_pipeline import PipelineRequest


def make_scene(
    scene_type: str,
    headline: str,
    layout: str,
    entry: str,
    images: Optional[List[Dict[str, Any]]] = None
) -> Dict[str, Any]:
    """One valid executor scene."""
    return {
        "sceneType": scene_type,
        "headline": headline,
        "subtext": None,
        "layout": layout,
        "background": {
            "type": "gradient",
            "gradientColors": ["#0F172A", "#1E293B"],
            "gradientAngle": 135,
            "texture": "grain",
            "textureOpacity": 0.05,
        },
        "typography": {
            "headlineFont": "Inter",
            "headlineWeight": 800,
            "headlineSize": "xl",
            "headlineColor": "#F8FAFC",
        },
        "motion": {
            "entry": entry,
            "entryDuration": 15,
            "exit": "fade_out",
            "holdAnimation": "breathing",
        },
        "images": images or [],
        "durationFrames": 75,
    }


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def config() -> VideoBrainConfig:
    """Default configuration, independent of any config file on disk."""
    return VideoBrainConfig()


@pytest.fixture
def strategy_dict() -> Dict[str, Any]:
    """A complete, valid marketing strategy as the model would return it."""
    return {
        "corePromise": "Ship projects without the chaos",
        "hookIntent": "Stop the scroll with a pain every team lead knows",
        "emotionalArc": ["frustration", "relief", "confidence"],
        "keyMessages": [
            {
                "id": "hook",
                "message": "Your team is drowning",
                "intent": "Grab attention",
                "emotionalTarget": "recognition",
            },
            {
                "id": "problem",
                "message": "Tasks scattered everywhere",
                "intent": "Name the pain",
                "emotionalTarget": "frustration",
            },
            {
                "id": "solution",
                "message": "One board. Zero chaos.",
                "intent": "Show the answer",
                "emotionalTarget": "relief",
            },
            {
                "id": "cta",
                "message": "Start free today",
                "intent": "Drive action",
                "emotionalTarget": "confidence",
            },
        ],
        "audienceInsight": "Tech leads lose hours chasing status updates",
        "differentiator": "Built for engineering workflows, not generic todo lists",
        "priority": "clarity_over_creativity",
    }


@pytest.fixture
def art_direction_dict() -> Dict[str, Any]:
    """A complete, valid art direction."""
    return {
        "designPack": "clean_saas",
        "palette": {
            "primary": "#6366F1",
            "secondary": "#8B5CF6",
            "neutral": "#0F172A",
            "accent": "#22D3EE",
            "text": "#F8FAFC",
            "textMuted": "rgba(248, 250, 252, 0.6)",
        },
        "typography": {
            "headlineFont": "Inter",
            "bodyFont": "Inter",
            "weightStrategy": "bold_for_hooks",
            "sizeProgression": "large_to_small",
        },
        "motion": {
            "intensity": "controlled",
            "entryStyle": "slide",
            "rhythm": "punchy",
            "holdBehavior": "subtle_movement",
        },
        "visualDensity": "low",
        "imageUsageRules": {
            "logos": "accent_only",
            "screenshots": "always_mockuped",
            "photos": "accent_only",
            "graphics": "supporting_element",
            "maxImagesPerVideo": 2,
            "heroImageAllowed": False,
        },
        "compositionRules": {
            "minElementsPerScene": 2,
            "allowFlatSlides": False,
            "requireTexture": True,
            "requireVisualDepth": True,
            "negativeSpaceRequired": True,
            "layoutVarietyEnforced": True,
        },
        "texturePreference": "grain",
        "textureOpacity": 0.05,
        "cornerRadiusRange": {"min": 8, "max": 24},
        "shadowStyle": "subtle",
        "forbiddenElements": ["stock photos", "clip art"],
        "requiredElements": ["logo in CTA"],
    }


@pytest.fixture
def video_spec_dict() -> Dict[str, Any]:
    """A valid scene list consistent with strategy_dict and art_direction_dict."""
    return {
        "fps": 30,
        "width": 1080,
        "height": 1920,
        "scenes": [
            make_scene("HOOK", "Your team is drowning", "FULLSCREEN_STATEMENT", "scale_up"),
            make_scene("PROBLEM", "Tasks scattered everywhere", "TEXT_LEFT", "slide_left"),
            make_scene(
                "SOLUTION", "One board. Zero chaos.", "SPLIT_HORIZONTAL", "blur_in",
                images=[{
                    "imageId": "img_dashboard",
                    "role": "support",
                    "treatment": {"mockup": "laptop"},
                    "effect": {"reveal": "mask_reveal"},
                    "position": {"x": 50, "y": 60},
                    "size": {"width": 80},
                    "entryDelay": 10,
                }],
            ),
            make_scene("CTA", "Start free today", "TEXT_CENTER", "pop"),
        ],
        "warnings": [],
    }


@pytest.fixture
def strategy(strategy_dict):
    """Decoded MarketingStrategyOutput."""
    return decode_marketing_output(strategy_dict)


@pytest.fixture
def art_direction(art_direction_dict):
    """Decoded ArtDirectorOutput."""
    return decode_art_director_output(art_direction_dict)


@pytest.fixture
def provided_images() -> tuple:
    """Images supplied with a request, references included."""
    return (
        ProvidedImage(
            id="img_dashboard",
            type=ImageType.SCREENSHOT,
            description="Main dashboard",
            reference="https://cdn.example.com/dashboard.png",
        ),
        ProvidedImage(id="img_logo", type=ImageType.LOGO),
    )


@pytest.fixture
def pipeline_request(provided_images) -> PipelineRequest:
    """Request for a SaaS task manager with two images."""
    return PipelineRequest(
        user_prompt="task manager for tech teams",
        product_type=ProductType.SAAS,
        provided_images=provided_images,
    )


@pytest.fixture
def stage_responses(strategy_dict, art_direction_dict, video_spec_dict) -> List[str]:
    """Raw completion texts for the three stages, as a model might format them."""
    return [
        "```json\n" + json.dumps(strategy_dict) + "\n```",
        json.dumps(art_direction_dict),
        "Here is the video:\n" + json.dumps(video_spec_dict) + "\nEnjoy!",
    ]


@pytest.fixture
def mock_completion_service():
    """Factory for a completion service that returns the given texts in order."""
    def factory(*responses):
        service = MagicMock()
        service.complete = AsyncMock(side_effect=list(responses))
        return service
    return factory
