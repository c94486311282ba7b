"""
Videobrain Creative Pipeline

Product brief → marketing strategy → art direction → scene list.

Three strictly sequential completion calls. Each stage sees only the
validated output of the stages before it:
- Marketing: the request text fields
- Art Direction: the strategy, the product type and image metadata
  (no reference payloads)
- Execution: both upstream outputs, the full image list and video size

The first stage failure ends the run; later builders are never called.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from videobrain.brains import art_director, marketing_strategist, video_executor
from videobrain.brains.art_director import ArtDirectorInput, ArtDirectorOutput
from videobrain.brains.marketing_strategist import MarketingStrategyInput, MarketingStrategyOutput
from videobrain.brains.media import ProvidedImage
from videobrain.brains.video_executor import VideoExecutorInput, VideoExecutorOutput
from videobrain.core.config import VideoBrainConfig, get_config
from videobrain.core.constants import (
    DEFAULT_FPS,
    DEFAULT_HEIGHT,
    DEFAULT_LANGUAGE,
    DEFAULT_WIDTH,
    ProductType,
    Stage,
    Tone,
)
from videobrain.core.exceptions import PipelineError, RequestValidationError
from videobrain.core.logging_config import get_logger
from videobrain.llm.providers import CompletionService, create_provider
from .base_pipeline import BasePipeline, PipelineStep, StageResult
from .stage_runner import StageRunner

logger = get_logger("pipelines.creative")


# =============================================================================
# DATA CLASSES
# =============================================================================

def _positive_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise RequestValidationError(name, f"must be a positive integer, got {value!r}")


def _enum_value(enum_cls, field_name: str, value: Any):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise RequestValidationError(field_name, f"'{value}' not one of {allowed}")


@dataclass(frozen=True)
class PipelineRequest:
    """Input for the creative pipeline."""
    user_prompt: str
    product_type: ProductType
    language: str = DEFAULT_LANGUAGE
    product_description: Optional[str] = None
    target_audience: Optional[str] = None
    tone: Optional[Tone] = None
    provided_images: Tuple[ProvidedImage, ...] = ()
    fps: int = DEFAULT_FPS
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    def __post_init__(self):
        if not isinstance(self.user_prompt, str) or not self.user_prompt.strip():
            raise RequestValidationError("user_prompt", "must be a non-empty string")
        if not isinstance(self.product_type, ProductType):
            raise RequestValidationError("product_type", f"unknown product type: {self.product_type!r}")
        if self.tone is not None and not isinstance(self.tone, Tone):
            raise RequestValidationError("tone", f"unknown tone: {self.tone!r}")
        if not isinstance(self.language, str) or not self.language.strip():
            raise RequestValidationError("language", "must be a non-empty string")
        # Lists are accepted and frozen to a tuple
        object.__setattr__(self, "provided_images", tuple(self.provided_images))
        for image in self.provided_images:
            if not isinstance(image, ProvidedImage):
                raise RequestValidationError("provided_images", f"expected ProvidedImage, got {type(image).__name__}")
        ids = [image.id for image in self.provided_images]
        if len(ids) != len(set(ids)):
            raise RequestValidationError("provided_images", "image ids must be unique")
        _positive_int("fps", self.fps)
        _positive_int("width", self.width)
        _positive_int("height", self.height)

    @classmethod
    def from_dict(cls, data: dict, config: Optional[VideoBrainConfig] = None) -> 'PipelineRequest':
        """
        Build a request from plain values (enum fields given as strings).

        Missing fps, width and height come from the pipeline config defaults.
        """
        pipeline_config = (config or get_config()).pipeline
        return cls(
            user_prompt=data.get('user_prompt', ""),
            product_type=_enum_value(ProductType, "product_type", data.get('product_type')),
            language=data.get('language') or DEFAULT_LANGUAGE,
            product_description=data.get('product_description'),
            target_audience=data.get('target_audience'),
            tone=_enum_value(Tone, "tone", data.get('tone')),
            provided_images=tuple(
                image if isinstance(image, ProvidedImage) else ProvidedImage.from_dict(image)
                for image in data.get('provided_images') or ()
            ),
            fps=data.get('fps', pipeline_config.default_fps),
            width=data.get('width', pipeline_config.default_width),
            height=data.get('height', pipeline_config.default_height),
        )


@dataclass(frozen=True)
class PipelineOutput:
    """All three validated stage outputs."""
    marketing_strategy: MarketingStrategyOutput
    art_direction: ArtDirectorOutput
    video_spec: VideoExecutorOutput
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "marketingStrategy": self.marketing_strategy.to_dict(),
            "artDirection": self.art_direction.to_dict(),
            "videoSpec": self.video_spec.to_dict(),
        }


# =============================================================================
# PIPELINE
# =============================================================================

class CreativePipeline(BasePipeline[PipelineRequest, PipelineOutput]):
    """
    Three-stage creative pipeline.

    Usage:
        pipeline = CreativePipeline()
        result = await pipeline.execute(request)
        if isinstance(result, PipelineError):
            ...
    """

    def __init__(
        self,
        completion_service: Optional[CompletionService] = None,
        config: Optional[VideoBrainConfig] = None
    ):
        self.config = config or get_config()
        self.completion_service = completion_service or create_provider(self.config.llm)
        self.runner = StageRunner(
            self.completion_service,
            raw_output_limit=self.config.pipeline.raw_output_limit
        )
        super().__init__("creative_pipeline")

    def _define_steps(self) -> None:
        self._steps = [
            PipelineStep(Stage.MARKETING.value, "Core promise, emotional arc and key messages"),
            PipelineStep(Stage.ART_DIRECTION.value, "Design pack, palette, typography and motion"),
            PipelineStep(Stage.EXECUTION.value, "Scene list with verbatim headlines"),
        ]

    async def _execute_step(
        self,
        step: PipelineStep,
        input_data: Any,
        context: Dict[str, Any]
    ) -> StageResult:
        stage = Stage(step.name)
        if stage == Stage.MARKETING:
            return await self._run_marketing(input_data, context)
        if stage == Stage.ART_DIRECTION:
            return await self._run_art_direction(input_data, context)
        return await self._run_execution(input_data, context)

    async def _run_marketing(
        self,
        request: PipelineRequest,
        context: Dict[str, Any]
    ) -> StageResult[MarketingStrategyOutput]:
        stage_input = MarketingStrategyInput(
            user_prompt=request.user_prompt,
            language=request.language,
            product_description=request.product_description,
            target_audience=request.target_audience,
            tone=request.tone,
        )
        return await self.runner.run(
            Stage.MARKETING,
            marketing_strategist.build_marketing_user_message(stage_input),
            self.config.pipeline.max_tokens_for(Stage.MARKETING),
            marketing_strategist.decode_marketing_output,
        )

    async def _run_art_direction(
        self,
        strategy: MarketingStrategyOutput,
        context: Dict[str, Any]
    ) -> StageResult[ArtDirectorOutput]:
        request: PipelineRequest = context["request"]
        context["marketing_strategy"] = strategy

        stage_input = ArtDirectorInput(
            marketing_strategy=strategy,
            product_type=request.product_type,
            provided_images=tuple(image.metadata() for image in request.provided_images),
        )
        return await self.runner.run(
            Stage.ART_DIRECTION,
            art_director.build_art_director_user_message(stage_input),
            self.config.pipeline.max_tokens_for(Stage.ART_DIRECTION),
            art_director.decode_art_director_output,
        )

    async def _run_execution(
        self,
        art_direction: ArtDirectorOutput,
        context: Dict[str, Any]
    ) -> StageResult[PipelineOutput]:
        request: PipelineRequest = context["request"]
        strategy: MarketingStrategyOutput = context["marketing_strategy"]

        stage_input = VideoExecutorInput(
            marketing_strategy=strategy,
            art_direction=art_direction,
            provided_images=request.provided_images,
            fps=request.fps,
            width=request.width,
            height=request.height,
        )
        result = await self.runner.run(
            Stage.EXECUTION,
            video_executor.build_video_executor_user_message(stage_input),
            self.config.pipeline.max_tokens_for(Stage.EXECUTION),
            lambda value: video_executor.decode_video_executor_output(value, stage_input),
        )

        async def assemble(video_spec: VideoExecutorOutput) -> StageResult[PipelineOutput]:
            return StageResult.ok(PipelineOutput(
                marketing_strategy=strategy,
                art_direction=art_direction,
                video_spec=video_spec,
            ))

        return await result.then(assemble)

    async def execute(self, request: PipelineRequest) -> Union[PipelineOutput, PipelineError]:
        """
        Run all three stages.

        Args:
            request: Validated pipeline request

        Returns:
            PipelineOutput on success, or the PipelineError of the failed stage

        Raises:
            PipelineCancelledError: If cancel() was called before the run finished
        """
        logger.info(
            f"Creative pipeline: product_type={request.product_type.value}, "
            f"images={len(request.provided_images)}, language={request.language}"
        )
        result = await self.run(request, context={"request": request})
        if not result.success:
            return result.error

        output: PipelineOutput = result.output
        output.metadata["duration_seconds"] = result.duration_seconds
        logger.info(
            f"Creative pipeline complete: {len(output.video_spec.scenes)} scenes, "
            f"{result.duration_seconds:.2f}s"
        )
        return output


async def run_creative_pipeline(
    request: PipelineRequest,
    api_key: Optional[str] = None,
    config: Optional[VideoBrainConfig] = None
) -> PipelineOutput:
    """
    Run the creative pipeline with the configured Anthropic provider.

    Args:
        request: Pipeline request
        api_key: Overrides the key from the environment
        config: Overrides the global configuration

    Returns:
        PipelineOutput with all three stage outputs

    Raises:
        PipelineError: If any stage fails
    """
    config = config or get_config()
    provider = create_provider(config.llm, api_key=api_key)
    result = await CreativePipeline(provider, config).execute(request)
    if isinstance(result, PipelineError):
        raise result
    return result
