"""Domain errors for whatnow."""

from typing import Any, Optional


class WhatNowError(Exception):
    """Base class for whatnow errors."""


class MalformedTaskTree(WhatNowError, ValueError):
    """The task tree contains a cycle or is nested deeper than allowed."""

    def __init__(self, message: str, *, task_id: Optional[str] = None):
        super().__init__(message)
        self.task_id = task_id


class InvalidEnumValue(WhatNowError, ValueError):
    """A level or time option is outside its recognized set."""

    def __init__(self, field: str, value: Any, allowed: list[str]):
        super().__init__(
            f"Invalid {field} {value!r}; expected one of {', '.join(allowed)}"
        )
        self.field = field
        self.value = value
        self.allowed = allowed
