"""
Videobrain - AI-Planned Marketing Videos

Turns a short product brief into a structured video plan through three
strictly ordered completion stages (marketing strategy, art direction,
scene execution), plus a deterministic effect-selection engine.

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "Videobrain Team"
__project__ = "Videobrain"

from pathlib import Path

# Load environment variables early - before any other imports that might need them
from videobrain.core.env_loader import ensure_env_loaded
ensure_env_loaded()

# Package root directory
PACKAGE_ROOT = Path(__file__).parent
PROJECT_ROOT = PACKAGE_ROOT.parent

from .pipelines import (
    CreativePipeline,
    PipelineRequest,
    PipelineOutput,
    run_creative_pipeline,
)
from .effects import (
    EffectContext,
    select_all_effects,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__project__",
    # Paths
    "PACKAGE_ROOT",
    "PROJECT_ROOT",
    # Pipeline
    "CreativePipeline",
    "PipelineRequest",
    "PipelineOutput",
    "run_creative_pipeline",
    # Effects
    "EffectContext",
    "select_all_effects",
]
