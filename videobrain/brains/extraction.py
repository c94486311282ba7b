"""
JSON extraction from free-form completion text.

The completion service is asked for bare JSON but may wrap it in a
markdown fence or surround it with prose. Two passes are made: the fenced
(or whole) text, then the span from the first "{" to the last "}" of the
original text.
"""

import json
import re
from typing import Any

from videobrain.core.constants import EXTRACTION_PREVIEW_LENGTH
from videobrain.core.exceptions import ExtractionError

FENCED_BLOCK = re.compile(r'```(?:json)?\s*([\s\S]*?)```')


def extract_json(raw: str) -> Any:
    """
    Extract a single JSON value from raw completion text.

    Args:
        raw: Text returned by the completion service

    Returns:
        The decoded JSON value

    Raises:
        ExtractionError: If neither pass yields valid JSON
    """
    if not isinstance(raw, str):
        raise ExtractionError(repr(raw)[:EXTRACTION_PREVIEW_LENGTH])

    match = FENCED_BLOCK.search(raw)
    candidate = match.group(1).strip() if match else raw.strip()

    try:
        return json.loads(candidate)
    except (json.JSONDecodeError, RecursionError):
        pass

    start = raw.find("{")
    end = raw.rfind("}")
    if start != -1 and end > start:
        try:
            return json.loads(raw[start:end + 1])
        except (json.JSONDecodeError, RecursionError):
            pass

    raise ExtractionError(raw[:EXTRACTION_PREVIEW_LENGTH])
