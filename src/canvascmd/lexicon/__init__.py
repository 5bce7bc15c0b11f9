"""Keyword lexicon for the command classifier.

The built-in tables are immutable module constants; :func:`load_lexicon`
layers YAML overrides on top of them.
"""
from __future__ import annotations

from canvascmd.lexicon.loader import (
    DEFAULT_LEXICON,
    Lexicon,
    LexiconError,
    lexicon_from_dict,
    load_lexicon,
)
from canvascmd.lexicon.tables import (
    ColorEntry,
    DirectionEntry,
    IntentGroup,
    ParameterCue,
    PositionEntry,
    TargetGroup,
)

__all__ = [
    "DEFAULT_LEXICON",
    "ColorEntry",
    "DirectionEntry",
    "IntentGroup",
    "Lexicon",
    "LexiconError",
    "ParameterCue",
    "PositionEntry",
    "TargetGroup",
    "lexicon_from_dict",
    "load_lexicon",
]
