"""
Videobrain Base Pipeline

Abstract base class for step-based pipelines. Steps pass their output
forward through StageResult values; the first failed result stops the run.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, TypeVar

from videobrain.core.exceptions import PipelineCancelledError, PipelineError
from videobrain.core.logging_config import get_logger

logger = get_logger("pipelines.base")

InputT = TypeVar('InputT')
OutputT = TypeVar('OutputT')
T = TypeVar('T')
U = TypeVar('U')


class PipelineStatus(Enum):
    """Status of a pipeline execution."""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class StageResult(Generic[T]):
    """
    Outcome of one step: a value or a PipelineError, never both.

    `then` only calls the next step on success, so a failure carries through
    the rest of the chain untouched.
    """

    __slots__ = ("_value", "_error")

    def __init__(self, value: Optional[T] = None, error: Optional[PipelineError] = None):
        if error is not None and value is not None:
            raise ValueError("StageResult holds either a value or an error")
        self._value = value
        self._error = error

    @classmethod
    def ok(cls, value: T) -> 'StageResult[T]':
        return cls(value=value)

    @classmethod
    def fail(cls, error: PipelineError) -> 'StageResult[T]':
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self._error is None

    @property
    def value(self) -> T:
        if self._error is not None:
            raise self._error
        return self._value

    @property
    def error(self) -> Optional[PipelineError]:
        return self._error

    async def then(self, step: Callable[[T], Awaitable['StageResult[U]']]) -> 'StageResult[U]':
        if not self.is_ok:
            return self
        return await step(self._value)

    def __repr__(self) -> str:
        if self.is_ok:
            return f"StageResult.ok({self._value!r})"
        return f"StageResult.fail({self._error!r})"


@dataclass
class PipelineResult(Generic[OutputT]):
    """Result from a pipeline execution."""
    status: PipelineStatus
    output: Optional[OutputT] = None
    error: Optional[PipelineError] = None
    duration_seconds: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.status == PipelineStatus.COMPLETED


@dataclass
class PipelineStep:
    """A step in a pipeline."""
    name: str
    description: str


class BasePipeline(ABC, Generic[InputT, OutputT]):
    """
    Abstract base class for processing pipelines.

    Features:
    - Step-based execution chained through StageResult
    - Progress tracking
    - Cancellation between steps
    """

    def __init__(self, name: str):
        """
        Initialize the pipeline.

        Args:
            name: Pipeline name
        """
        self.name = name
        self._steps: List[PipelineStep] = []
        self._current_step: int = 0
        self._status = PipelineStatus.PENDING
        self._cancelled = False
        self._progress_callback = None

        self._define_steps()

    @abstractmethod
    def _define_steps(self) -> None:
        """Define the pipeline steps. Override in subclasses."""
        pass

    @abstractmethod
    async def _execute_step(
        self,
        step: PipelineStep,
        input_data: Any,
        context: Dict[str, Any]
    ) -> StageResult:
        """Execute a single step. Override in subclasses."""
        pass

    async def run(
        self,
        input_data: InputT,
        context: Dict[str, Any] = None
    ) -> PipelineResult[OutputT]:
        """
        Run the pipeline.

        A cancel() issued before the run starts stops it before the first
        step. The cancel flag is cleared when the run ends, however it ends.

        Args:
            input_data: Input data for the first step
            context: Shared state visible to every step

        Returns:
            PipelineResult with the last step's output, or the first error

        Raises:
            PipelineCancelledError: If cancel() was called before or during the run
        """
        try:
            return await self._run_steps(input_data, context if context is not None else {})
        finally:
            self._cancelled = False

    async def _run_steps(self, input_data: InputT, context: Dict[str, Any]) -> PipelineResult[OutputT]:
        start_time = datetime.now()

        self._status = PipelineStatus.RUNNING
        self._current_step = 0

        logger.info(f"Starting pipeline: {self.name}")

        result: StageResult = StageResult.ok(input_data)

        for i, step in enumerate(self._steps):
            self._raise_if_cancelled(step)

            self._current_step = i
            self._report_progress(step, i, len(self._steps))

            logger.debug(f"Executing step: {step.name}")

            async def execute(data, step=step):
                return await self._execute_step(step, data, context)

            result = await result.then(execute)

            if not result.is_ok:
                self._status = PipelineStatus.FAILED
                logger.error(f"Pipeline failed: {self.name} - {result.error}")
                return PipelineResult(
                    status=PipelineStatus.FAILED,
                    error=result.error,
                    duration_seconds=self._get_duration(start_time),
                    metadata={'failed_step': step.name}
                )

        # A cancel during the last step still discards its output
        self._raise_if_cancelled(None)

        self._status = PipelineStatus.COMPLETED
        duration = self._get_duration(start_time)
        logger.info(f"Pipeline completed: {self.name} ({duration:.2f}s)")

        return PipelineResult(
            status=PipelineStatus.COMPLETED,
            output=result.value,
            duration_seconds=duration,
            metadata={'steps_completed': len(self._steps)}
        )

    def _raise_if_cancelled(self, next_step: Optional[PipelineStep]) -> None:
        if self._cancelled:
            self._status = PipelineStatus.CANCELLED
            raise PipelineCancelledError(self.name, next_step.name if next_step else None)

    def cancel(self) -> None:
        """Cancel the pipeline execution before its next step."""
        self._cancelled = True
        logger.info(f"Pipeline cancelled: {self.name}")

    def set_progress_callback(self, callback) -> None:
        """Set a callback for progress updates."""
        self._progress_callback = callback

    def _report_progress(
        self,
        step: PipelineStep,
        current: int,
        total: int
    ) -> None:
        """Report progress to callback."""
        if self._progress_callback:
            self._progress_callback({
                'pipeline': self.name,
                'step': step.name,
                'current': current + 1,
                'total': total,
                'percent': (current + 1) / total * 100
            })

    def _get_duration(self, start_time: datetime) -> float:
        """Get duration since start time."""
        return (datetime.now() - start_time).total_seconds()

    @property
    def status(self) -> PipelineStatus:
        return self._status

    @property
    def progress(self) -> float:
        """Get current progress (0-1)."""
        if not self._steps:
            return 0.0
        return self._current_step / len(self._steps)

    @property
    def steps(self) -> List[PipelineStep]:
        return self._steps.copy()
