"""Action data model.

Exports the value types produced and consumed by the interpreter and
the serializer for converting actions to and from JSON/YAML.
"""
from __future__ import annotations

from canvascmd.action.nodes import (
    Action,
    ExecutionOutcome,
    FailureKind,
    Intent,
    Layer,
    Target,
    thaw,
)
from canvascmd.action.serializer import ActionSerializer, SerializationError

__all__ = [
    "Action",
    "ActionSerializer",
    "ExecutionOutcome",
    "FailureKind",
    "Intent",
    "Layer",
    "SerializationError",
    "Target",
    "thaw",
]
