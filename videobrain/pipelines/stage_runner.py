"""
Videobrain Stage Runner

One completion call for one stage: send the stage's system prompt and user
message, extract JSON from the reply, decode it strictly. Any failure of the
call, extraction or validation comes back as a failed StageResult tagged
with the stage.
"""

from typing import Any, Callable, Optional, TypeVar

from videobrain.brains.extraction import extract_json
from videobrain.brains.templates import system_prompt_for
from videobrain.core.constants import RAW_OUTPUT_LIMIT, Stage
from videobrain.core.exceptions import (
    ExtractionError,
    PipelineError,
    TransportError,
    ValidationError,
)
from videobrain.core.logging_config import get_logger
from videobrain.llm.providers import CompletionService
from .base_pipeline import StageResult

logger = get_logger("pipelines.stage_runner")

T = TypeVar('T')


class StageRunner:
    """Runs single stages against a completion service."""

    def __init__(self, completion_service: CompletionService, raw_output_limit: int = RAW_OUTPUT_LIMIT):
        self.completion_service = completion_service
        self.raw_output_limit = raw_output_limit

    def _truncate(self, raw: Optional[str]) -> Optional[str]:
        if raw is None:
            return None
        return raw[:self.raw_output_limit]

    async def run(
        self,
        stage: Stage,
        user_message: str,
        max_tokens: int,
        decode: Callable[[Any], T]
    ) -> StageResult[T]:
        """
        Run one stage.

        Args:
            stage: Which stage's system prompt to use
            user_message: Rendered user message
            max_tokens: Output token budget for the call
            decode: Strict decoder from JSON value to the stage output type

        Returns:
            StageResult with the decoded output, or a PipelineError for the stage
        """
        logger.info(f"[{stage.value}] requesting completion (max_tokens={max_tokens})")

        try:
            raw = await self.completion_service.complete(
                system_prompt_for(stage), user_message, max_tokens
            )
        except TransportError as e:
            logger.error(f"[{stage.value}] completion failed: {e.reason}")
            return StageResult.fail(PipelineError(stage.value, e.message))
        except Exception as e:
            logger.exception(f"[{stage.value}] completion service raised")
            return StageResult.fail(PipelineError(stage.value, str(e) or type(e).__name__))

        try:
            output = decode(extract_json(raw))
        except ExtractionError as e:
            logger.error(f"[{stage.value}] no JSON in completion")
            return StageResult.fail(PipelineError(stage.value, e.message, self._truncate(raw)))
        except ValidationError as e:
            logger.error(f"[{stage.value}] {len(e.errors)} validation error(s): {e.errors[:3]}")
            return StageResult.fail(PipelineError(stage.value, e.message, self._truncate(raw)))

        logger.info(f"[{stage.value}] output validated")
        return StageResult.ok(output)
