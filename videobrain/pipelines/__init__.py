"""
Videobrain Pipelines Module

Main Pipeline:
- CreativePipeline: Brief → Strategy → Art Direction → Scene list
  - Stage 1: Marketing (what to say)
  - Stage 2: Art Direction (how it looks)
  - Stage 3: Execution (scenes, copy verbatim from stage 1)

Support:
- BasePipeline / StageResult: step runner with result chaining
- StageRunner: one completion call, extraction and strict decoding
"""

from .base_pipeline import (
    BasePipeline,
    PipelineResult,
    PipelineStatus,
    PipelineStep,
    StageResult,
)
from .stage_runner import StageRunner
from .creative_pipeline import (
    CreativePipeline,
    PipelineRequest,
    PipelineOutput,
    run_creative_pipeline,
)

__all__ = [
    "BasePipeline",
    "PipelineResult",
    "PipelineStatus",
    "PipelineStep",
    "StageResult",
    "StageRunner",
    "CreativePipeline",
    "PipelineRequest",
    "PipelineOutput",
    "run_creative_pipeline",
]
