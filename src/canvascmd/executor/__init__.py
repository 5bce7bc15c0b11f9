"""Action execution through a caller-owned mutation callback."""
from __future__ import annotations

from canvascmd.executor.executor import (
    NO_TARGET_MESSAGE,
    NOT_RECOGNIZED_MESSAGE,
    ActionExecutor,
    MutateCallback,
    execute,
)

__all__ = [
    "NOT_RECOGNIZED_MESSAGE",
    "NO_TARGET_MESSAGE",
    "ActionExecutor",
    "MutateCallback",
    "execute",
]
