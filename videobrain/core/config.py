"""
Videobrain Configuration Management

Centralized configuration system with JSON loading and validation.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .exceptions import ConfigurationError, InvalidConfigError
from .constants import (
    DEFAULT_MODEL,
    DEFAULT_FPS,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    RAW_OUTPUT_LIMIT,
    STAGE_MAX_TOKENS,
    Stage,
)

DEFAULT_CONFIG_PATH = Path("config/videobrain_config.json")


@dataclass
class LLMConfig:
    """Configuration for the completion service."""
    provider: str = "anthropic"
    model: str = DEFAULT_MODEL
    api_key_env: str = "ANTHROPIC_API_KEY"  # Environment variable name for API key
    temperature: Optional[float] = None
    timeout: int = 60

    @classmethod
    def from_dict(cls, data: dict) -> 'LLMConfig':
        """Create LLMConfig from dictionary."""
        config = cls(
            provider=data.get('provider', "anthropic"),
            model=data.get('model', DEFAULT_MODEL),
            api_key_env=data.get('api_key_env', "ANTHROPIC_API_KEY"),
            temperature=data.get('temperature'),
            timeout=data.get('timeout', 60)
        )
        if config.provider != "anthropic":
            raise InvalidConfigError(f"Unsupported LLM provider: {config.provider}")
        if not isinstance(config.timeout, (int, float)) or config.timeout <= 0:
            raise InvalidConfigError(f"LLM timeout must be positive: {config.timeout}")
        return config


@dataclass
class PipelineConfig:
    """Creative pipeline settings."""
    marketing_max_tokens: int = STAGE_MAX_TOKENS[Stage.MARKETING]
    art_direction_max_tokens: int = STAGE_MAX_TOKENS[Stage.ART_DIRECTION]
    execution_max_tokens: int = STAGE_MAX_TOKENS[Stage.EXECUTION]
    default_fps: int = DEFAULT_FPS
    default_width: int = DEFAULT_WIDTH
    default_height: int = DEFAULT_HEIGHT
    raw_output_limit: int = RAW_OUTPUT_LIMIT

    def max_tokens_for(self, stage: Stage) -> int:
        return {
            Stage.MARKETING: self.marketing_max_tokens,
            Stage.ART_DIRECTION: self.art_direction_max_tokens,
            Stage.EXECUTION: self.execution_max_tokens,
        }[stage]


@dataclass
class ApiConfig:
    """HTTP API settings."""
    rate_limit: str = "10/minute"
    cors_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )


@dataclass
class VideoBrainConfig:
    """Main configuration class for Videobrain."""

    project_name: str = "Videobrain"
    version: str = "1.0.0"

    logs_dir: Path = field(default_factory=lambda: Path("logs"))

    llm: LLMConfig = field(default_factory=LLMConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    api: ApiConfig = field(default_factory=ApiConfig)

    verbose_logging: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> 'VideoBrainConfig':
        """Create VideoBrainConfig from dictionary."""
        config = cls()

        config.project_name = data.get('project_name', config.project_name)
        config.version = data.get('version', config.version)
        config.verbose_logging = data.get('verbose_logging', config.verbose_logging)

        if 'paths' in data:
            config.logs_dir = Path(data['paths'].get('logs_dir', 'logs'))

        if 'llm' in data:
            config.llm = LLMConfig.from_dict(data['llm'])

        if 'pipeline' in data:
            pipe_data = data['pipeline']
            defaults = PipelineConfig()
            config.pipeline = PipelineConfig(
                marketing_max_tokens=pipe_data.get('marketing_max_tokens', defaults.marketing_max_tokens),
                art_direction_max_tokens=pipe_data.get('art_direction_max_tokens', defaults.art_direction_max_tokens),
                execution_max_tokens=pipe_data.get('execution_max_tokens', defaults.execution_max_tokens),
                default_fps=pipe_data.get('default_fps', defaults.default_fps),
                default_width=pipe_data.get('default_width', defaults.default_width),
                default_height=pipe_data.get('default_height', defaults.default_height),
                raw_output_limit=pipe_data.get('raw_output_limit', defaults.raw_output_limit)
            )
            for stage in Stage:
                if config.pipeline.max_tokens_for(stage) <= 0:
                    raise InvalidConfigError(f"max tokens for {stage.value} must be positive")

        if 'api' in data:
            api_data = data['api']
            defaults = ApiConfig()
            config.api = ApiConfig(
                rate_limit=api_data.get('rate_limit', defaults.rate_limit),
                cors_origins=api_data.get('cors_origins', defaults.cors_origins)
            )

        return config

    def to_dict(self) -> Dict:
        return {
            "project_name": self.project_name,
            "version": self.version,
            "verbose_logging": self.verbose_logging,
            "paths": {"logs_dir": str(self.logs_dir)},
            "llm": {
                "provider": self.llm.provider,
                "model": self.llm.model,
                "api_key_env": self.llm.api_key_env,
                "temperature": self.llm.temperature,
                "timeout": self.llm.timeout,
            },
            "pipeline": {
                "marketing_max_tokens": self.pipeline.marketing_max_tokens,
                "art_direction_max_tokens": self.pipeline.art_direction_max_tokens,
                "execution_max_tokens": self.pipeline.execution_max_tokens,
                "default_fps": self.pipeline.default_fps,
                "default_width": self.pipeline.default_width,
                "default_height": self.pipeline.default_height,
                "raw_output_limit": self.pipeline.raw_output_limit,
            },
            "api": {
                "rate_limit": self.api.rate_limit,
                "cors_origins": list(self.api.cors_origins),
            },
        }


def load_config(config_path: Path = None) -> VideoBrainConfig:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to configuration file. If None, uses default.

    Returns:
        Loaded VideoBrainConfig instance
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        # Return default config if file doesn't exist
        return VideoBrainConfig()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigError(f"Invalid JSON in config file: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to load config: {e}")

    if not isinstance(data, dict):
        raise InvalidConfigError("Config file must contain a JSON object")
    return VideoBrainConfig.from_dict(data)


# Global config instance
_config: Optional[VideoBrainConfig] = None


def get_config() -> VideoBrainConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[VideoBrainConfig]) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
