"""
Videobrain Custom Exceptions

Exception classes for error handling throughout the video planning system.
"""

from typing import List, Optional


class VideoBrainError(Exception):
    """Base exception for all Videobrain errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(VideoBrainError):
    """Raised when there's an issue with configuration."""
    pass


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration is missing."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""
    pass


# =============================================================================
# REQUEST ERRORS
# =============================================================================

class RequestValidationError(VideoBrainError):
    """Raised when a pipeline request is malformed before any stage runs."""

    def __init__(self, field_name: str, reason: str):
        message = f"Invalid request field '{field_name}': {reason}"
        super().__init__(message, {"field": field_name, "reason": reason})


# =============================================================================
# PIPELINE ERRORS
# =============================================================================

class PipelineError(VideoBrainError):
    """
    A generation stage failed.

    Carries the stage tag so callers can tell which of the three steps
    broke, plus a truncated copy of the raw completion for diagnosis.
    """

    def __init__(self, stage: str, message: str, raw_output: Optional[str] = None):
        details = {"stage": stage}
        super().__init__(message, details)
        self.stage = stage
        self.raw_output = raw_output

    def to_dict(self) -> dict:
        return {
            "stage": self.stage,
            "message": self.message,
            "rawOutput": self.raw_output,
        }


class ExtractionError(VideoBrainError):
    """Raised when no parseable JSON can be found in a completion."""

    def __init__(self, raw_preview: str):
        message = f"Failed to parse JSON: {raw_preview}..."
        super().__init__(message, {"raw_preview": raw_preview})
        self.raw_preview = raw_preview


class ValidationError(VideoBrainError):
    """Raised when decoded stage output does not match the required shape."""

    def __init__(self, stage: str, errors: List[str]):
        shown = "; ".join(errors[:5])
        if len(errors) > 5:
            shown += f" (+{len(errors) - 5} more)"
        message = f"Invalid {stage} output: {shown}"
        super().__init__(message, {"stage": stage, "errors": errors})
        self.stage = stage
        self.errors = errors


class PipelineCancelledError(VideoBrainError):
    """Raised when a pipeline run is cancelled before completing."""

    def __init__(self, pipeline_name: str, next_step: Optional[str] = None):
        message = f"Pipeline '{pipeline_name}' cancelled"
        details = {"pipeline": pipeline_name}
        if next_step:
            details["next_step"] = next_step
        super().__init__(message, details)


# =============================================================================
# LLM ERRORS
# =============================================================================

class LLMError(VideoBrainError):
    """Base exception for LLM-related errors."""
    pass


class TransportError(LLMError):
    """Raised when the completion service call fails or returns no usable text."""

    def __init__(self, provider: str, reason: str):
        message = f"LLM provider '{provider}' error: {reason}"
        super().__init__(message, {"provider": provider, "reason": reason})
        self.provider = provider
        self.reason = reason
