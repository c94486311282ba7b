"""
Videobrain Prompt Loader

Loads externalized prompts from markdown files.
Prompts are stored in prompts/ directories next to the code that uses them.

Prompt File Format:
    # {Brain Name} - {Prompt Purpose}

    ## Description
    Brief description of what this prompt does.

    ## Variables
    - `{variable_name}`: Description of the variable

    ## Prompt
    ```
    The actual prompt text with {variable_name} placeholders
    ```
"""

import re
from pathlib import Path
from typing import Any, Dict, Optional

from videobrain.core.logging_config import get_logger

logger = get_logger("core.prompt_loader")

_PLACEHOLDER = re.compile(r'\{([A-Za-z_][A-Za-z0-9_]*)\}')


class PromptLoader:
    """
    Loads and caches prompts from external markdown files.

    Usage:
        prompt = PromptLoader.load("brains/prompts", "marketing_strategist")
        rendered = PromptLoader.render(prompt, user_prompt="...")
    """

    _cache: Dict[str, str] = {}
    _base_path: Optional[Path] = None

    @classmethod
    def set_base_path(cls, path: Optional[Path]) -> None:
        """Set the base path for prompt files (usually videobrain/)."""
        cls._base_path = path
        cls._cache.clear()

    @classmethod
    def _get_base_path(cls) -> Path:
        if cls._base_path:
            return cls._base_path
        # Default to videobrain/ directory (parent of core/)
        return Path(__file__).parent.parent

    @classmethod
    def load(cls, feature_path: str, prompt_name: str) -> str:
        """
        Load a prompt from a feature's prompts directory.

        Args:
            feature_path: Path relative to videobrain/, e.g. "brains/prompts"
            prompt_name: Name of the prompt file (without .md extension)

        Returns:
            The prompt text extracted from the markdown file

        Raises:
            FileNotFoundError: If prompt file doesn't exist
        """
        cache_key = f"{feature_path}/{prompt_name}"
        if cache_key in cls._cache:
            return cls._cache[cache_key]

        prompt_path = cls._get_base_path() / feature_path / f"{prompt_name}.md"

        if not prompt_path.exists():
            raise FileNotFoundError(f"Prompt not found: {prompt_path}")

        content = prompt_path.read_text(encoding='utf-8')
        prompt = cls._extract_prompt_section(content)

        cls._cache[cache_key] = prompt
        logger.debug(f"Loaded prompt: {cache_key}")
        return prompt

    @classmethod
    def render(cls, prompt: str, **variables: Any) -> str:
        """
        Render a prompt template with variables.

        Substitution is a single pass, so braces inside substituted values
        are never expanded. Unknown placeholders are left as they are.
        """
        def substitute(match: re.Match) -> str:
            key = match.group(1)
            if key in variables:
                return str(variables[key])
            return match.group(0)

        return _PLACEHOLDER.sub(substitute, prompt)

    @classmethod
    def _extract_prompt_section(cls, content: str) -> str:
        """
        Extract the prompt text from markdown file.

        Looks for a fenced block under ## Prompt, then for plain text up to
        the next ## section.
        """
        match = re.search(
            r'## Prompt\s*\n+```[^\n]*\n(.*?)```',
            content,
            re.DOTALL | re.IGNORECASE
        )
        if match:
            return match.group(1).strip()

        match = re.search(
            r'## Prompt\s*\n+(.*?)(?=\n## |\Z)',
            content,
            re.DOTALL | re.IGNORECASE
        )
        if match:
            return match.group(1).strip()

        logger.warning("Could not find ## Prompt section, using entire content")
        return content.strip()

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the prompt cache."""
        cls._cache.clear()
        logger.debug("Prompt cache cleared")
