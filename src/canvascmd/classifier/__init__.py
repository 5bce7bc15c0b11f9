"""Command classification.

Maps free-text chat commands to :class:`~canvascmd.action.Action` values
with ordered, first-match keyword scans.
"""
from __future__ import annotations

from canvascmd.classifier.classifier import (
    Classification,
    CommandClassifier,
    KeywordHit,
    classify,
    explain,
)

__all__ = [
    "Classification",
    "CommandClassifier",
    "KeywordHit",
    "classify",
    "explain",
]
