"""
Shape checking helpers shared by the stage validators.

A ShapeChecker walks decoded JSON and records one message per violation.
It never converts or fills in values; callers decide what an empty error
list means.
"""

import re
from typing import Any, Iterable, List, Optional

MISSING = object()


def is_number(value: Any) -> bool:
    """True for int/float, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """True for int (or integral float), excluding bool."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


class ShapeChecker:
    """Accumulates validation errors with a JSON-path style prefix."""

    def __init__(self):
        self.errors: List[str] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    def fail(self, path: str, reason: str) -> None:
        self.errors.append(f"{path}: {reason}")

    def _get(self, obj: dict, key: str, path: str, required: bool) -> Any:
        value = obj.get(key, MISSING)
        if value is MISSING and required:
            self.fail(path, "missing required field")
        return value

    def mapping(self, value: Any, path: str) -> Optional[dict]:
        if not isinstance(value, dict):
            self.fail(path, "expected an object")
            return None
        return value

    def child_object(self, obj: dict, key: str, path: str) -> Optional[dict]:
        value = self._get(obj, key, path, required=True)
        if value is MISSING:
            return None
        return self.mapping(value, path)

    def string(self, obj: dict, key: str, path: str, required: bool = True) -> Optional[str]:
        value = self._get(obj, key, path, required)
        if value is MISSING or (value is None and not required):
            return None
        if not isinstance(value, str):
            self.fail(path, "expected a string")
            return None
        return value

    def enum(
        self,
        obj: dict,
        key: str,
        allowed: Iterable[str],
        path: str,
        required: bool = True
    ) -> Optional[str]:
        value = self.string(obj, key, path, required)
        if value is None:
            return None
        allowed = tuple(allowed)
        if value not in allowed:
            self.fail(path, f"'{value}' not one of {', '.join(allowed)}")
            return None
        return value

    def pattern(self, obj: dict, key: str, regex: str, path: str) -> Optional[str]:
        value = self.string(obj, key, path)
        if value is None:
            return None
        if not re.fullmatch(regex, value):
            self.fail(path, f"'{value}' has an invalid format")
            return None
        return value

    def number(
        self,
        obj: dict,
        key: str,
        path: str,
        required: bool = True,
        minimum: float = None
    ) -> Optional[float]:
        value = self._get(obj, key, path, required)
        if value is MISSING or (value is None and not required):
            return None
        if not is_number(value):
            self.fail(path, "expected a number")
            return None
        if minimum is not None and value < minimum:
            self.fail(path, f"must be >= {minimum}")
            return None
        return value

    def integer(
        self,
        obj: dict,
        key: str,
        path: str,
        required: bool = True,
        minimum: int = None
    ) -> Optional[int]:
        value = self._get(obj, key, path, required)
        if value is MISSING or (value is None and not required):
            return None
        if not is_integer(value):
            self.fail(path, "expected an integer")
            return None
        if minimum is not None and value < minimum:
            self.fail(path, f"must be >= {minimum}")
            return None
        return int(value)

    def boolean(self, obj: dict, key: str, path: str) -> Optional[bool]:
        value = self._get(obj, key, path, required=True)
        if value is MISSING:
            return None
        if not isinstance(value, bool):
            self.fail(path, "expected a boolean")
            return None
        return value

    def sequence(
        self,
        obj: dict,
        key: str,
        path: str,
        required: bool = True,
        min_items: int = 0
    ) -> Optional[List[Any]]:
        value = self._get(obj, key, path, required)
        if value is MISSING or (value is None and not required):
            return None
        if not isinstance(value, list):
            self.fail(path, "expected a list")
            return None
        if len(value) < min_items:
            self.fail(path, f"expected at least {min_items} item(s), got {len(value)}")
            return None
        return value

    def string_list(
        self,
        obj: dict,
        key: str,
        path: str,
        required: bool = True,
        min_items: int = 0
    ) -> Optional[List[str]]:
        items = self.sequence(obj, key, path, required, min_items)
        if items is None:
            return None
        for i, item in enumerate(items):
            if not isinstance(item, str):
                self.fail(f"{path}[{i}]", "expected a string")
                return None
        return items
