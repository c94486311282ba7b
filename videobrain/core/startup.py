"""
Startup validation and environment checks.

Validates required API keys and configuration at application startup.
"""

from dataclasses import dataclass, field
from typing import List

from .config import VideoBrainConfig, get_config
from .env_loader import get_api_key


@dataclass
class ValidationResult:
    """Result of environment validation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def validate_environment(config: VideoBrainConfig = None) -> ValidationResult:
    """
    Validate the environment configuration.

    Checks:
    - The completion service API key is set
    - The configured model name is not empty

    Returns:
        ValidationResult with validation status and any errors/warnings
    """
    config = config or get_config()
    errors = []
    warnings = []

    if not get_api_key(config.llm.api_key_env):
        errors.append(
            f"No API key found for provider '{config.llm.provider}'. "
            f"Set {config.llm.api_key_env} in the environment or .env file"
        )

    if not config.llm.model.strip():
        errors.append("LLM model name is empty")

    if config.llm.timeout < 30:
        warnings.append(
            f"LLM timeout of {config.llm.timeout}s is short for the execution stage"
        )

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings
    )
