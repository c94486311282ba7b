"""
Videobrain Core Module

Configuration, constants, exceptions, logging and prompt loading.
"""

from .constants import (
    ProductType,
    ImageType,
    Tone,
    Stage,
    DesignPack,
    SceneType,
    Layout,
)
from .exceptions import (
    VideoBrainError,
    ConfigurationError,
    MissingConfigError,
    InvalidConfigError,
    RequestValidationError,
    PipelineError,
    ExtractionError,
    ValidationError,
    PipelineCancelledError,
    LLMError,
    TransportError,
)
from .config import VideoBrainConfig, LLMConfig, PipelineConfig, ApiConfig, load_config, get_config, set_config
from .logging_config import setup_logging, get_logger, LogLevel

__all__ = [
    # Constants
    "ProductType",
    "ImageType",
    "Tone",
    "Stage",
    "DesignPack",
    "SceneType",
    "Layout",
    # Exceptions
    "VideoBrainError",
    "ConfigurationError",
    "MissingConfigError",
    "InvalidConfigError",
    "RequestValidationError",
    "PipelineError",
    "ExtractionError",
    "ValidationError",
    "PipelineCancelledError",
    "LLMError",
    "TransportError",
    # Config
    "VideoBrainConfig",
    "LLMConfig",
    "PipelineConfig",
    "ApiConfig",
    "load_config",
    "get_config",
    "set_config",
    # Logging
    "setup_logging",
    "get_logger",
    "LogLevel",
]
