"""Lexicon bundle and YAML overrides.

A :class:`Lexicon` bundles every keyword table the classifier reads plus
the matching mode.  The built-in tables live in
:mod:`canvascmd.lexicon.tables`; :data:`DEFAULT_LEXICON` wraps them.

Deployments can extend the tables from a YAML file::

    case_sensitive: false
    colors:
      teal: "#008080"
    intents:
      delete: ["erase"]
    targets:
      image: ["picture"]

Extra keywords are appended to the end of their group, so they never
shadow a built-in keyword.  A colour that already exists keeps its
position and takes the new value; new colours are appended.

Usage
-----
::

    from canvascmd.lexicon.loader import load_lexicon
    from canvascmd.classifier import CommandClassifier

    classifier = CommandClassifier(lexicon=load_lexicon("lexicon.yaml"))
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from canvascmd.action.nodes import Intent, Target
from canvascmd.lexicon.tables import (
    COLORS,
    DIRECTIONS,
    HEX_COLOR_RE,
    INTENT_GROUPS,
    PARAMETER_CUES,
    POSITIONS,
    TARGET_GROUPS,
    ColorEntry,
    DirectionEntry,
    IntentGroup,
    ParameterCue,
    PositionEntry,
    TargetGroup,
)

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({"case_sensitive", "colors", "intents", "targets"})


class LexiconError(ValueError):
    """Raised when a lexicon file is malformed.

    Parameters
    ----------
    message:
        Human-readable error description.
    source:
        Path or label of the offending lexicon, when known.
    """

    def __init__(self, message: str, source: str = "") -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source


@dataclass(frozen=True)
class Lexicon:
    """Immutable bundle of keyword tables.

    Parameters
    ----------
    parameter_cues:
        Colour and font-size cue groups, scanned first for the intent.
    intent_groups:
        Operation keyword groups, scanned after the parameter cues.
    target_groups:
        Layer-selector keyword groups.
    colors:
        Colour names and hex values in match order.
    positions:
        Absolute placement cues.
    directions:
        Relative nudge cues.
    case_sensitive:
        When false, both the input and every keyword are casefolded
        before matching.
    """

    parameter_cues: tuple[ParameterCue, ...] = PARAMETER_CUES
    intent_groups: tuple[IntentGroup, ...] = INTENT_GROUPS
    target_groups: tuple[TargetGroup, ...] = TARGET_GROUPS
    colors: tuple[ColorEntry, ...] = COLORS
    positions: tuple[PositionEntry, ...] = POSITIONS
    directions: tuple[DirectionEntry, ...] = DIRECTIONS
    case_sensitive: bool = True

    def normalise(self, text: str) -> str:
        """Apply the matching mode to *text*."""
        return text if self.case_sensitive else text.casefold()

    def contains(self, text: str, keyword: str) -> bool:
        """Return True if *keyword* occurs in already-normalised *text*."""
        return self.normalise(keyword) in text

    def first_hit(self, text: str, keywords: tuple[str, ...]) -> str | None:
        """Return the first keyword of *keywords* found in *text*, if any."""
        for keyword in keywords:
            if self.contains(text, keyword):
                return keyword
        return None

    def color_name(self, hex_value: str) -> str:
        """Return the first colour name mapped to *hex_value*, or the value itself."""
        for entry in self.colors:
            if entry.hex.lower() == hex_value.lower():
                return entry.name
        return hex_value


DEFAULT_LEXICON = Lexicon()


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def lexicon_from_dict(
    data: Mapping[str, Any] | None,
    base: Lexicon = DEFAULT_LEXICON,
    source: str = "",
) -> Lexicon:
    """Return *base* extended with the overrides in *data*.

    Raises
    ------
    LexiconError
        If a section has the wrong shape, names an unknown intent or
        target, or a colour value is not ``#RRGGBB``.
    """
    if data is None:
        return base
    if not isinstance(data, Mapping):
        raise LexiconError("top level must be a mapping", source)

    for key in data:
        if key not in _KNOWN_KEYS:
            logger.warning("Ignoring unknown lexicon key %r in %s", key, source or "<dict>")

    lexicon = base
    if "case_sensitive" in data:
        flag = data["case_sensitive"]
        if not isinstance(flag, bool):
            raise LexiconError("'case_sensitive' must be a boolean", source)
        lexicon = replace(lexicon, case_sensitive=flag)
    if "colors" in data:
        lexicon = replace(lexicon, colors=_merge_colors(lexicon.colors, data["colors"], source))
    if "intents" in data:
        lexicon = replace(
            lexicon,
            intent_groups=_extend_intents(lexicon.intent_groups, data["intents"], source),
        )
    if "targets" in data:
        lexicon = replace(
            lexicon,
            target_groups=_extend_targets(lexicon.target_groups, data["targets"], source),
        )
    return lexicon


def load_lexicon(path: str | Path, base: Lexicon = DEFAULT_LEXICON) -> Lexicon:
    """Load a YAML lexicon file and apply it on top of *base*.

    Raises
    ------
    LexiconError
        If the file cannot be read or parsed, or its content is invalid.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LexiconError(f"cannot read lexicon: {exc}", str(path)) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise LexiconError(f"invalid YAML: {exc}", str(path)) from exc
    lexicon = lexicon_from_dict(data, base=base, source=str(path))
    logger.debug(
        "Loaded lexicon from %s (%d colours, case_sensitive=%s)",
        path,
        len(lexicon.colors),
        lexicon.case_sensitive,
    )
    return lexicon


def _keyword_list(value: Any, label: str, source: str) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise LexiconError(f"keywords for {label!r} must be a list of non-empty strings", source)
    return tuple(value)


def _merge_colors(
    colors: tuple[ColorEntry, ...], overrides: Any, source: str
) -> tuple[ColorEntry, ...]:
    if not isinstance(overrides, Mapping):
        raise LexiconError("'colors' must map colour names to hex values", source)
    merged = list(colors)
    for name, value in overrides.items():
        if not isinstance(value, str) or not HEX_COLOR_RE.match(value):
            raise LexiconError(f"colour {name!r} must be '#RRGGBB', got {value!r}", source)
        entry = ColorEntry(str(name), value.upper())
        for index, existing in enumerate(merged):
            if existing.name == entry.name:
                merged[index] = entry
                break
        else:
            merged.append(entry)
    return tuple(merged)


def _extend_intents(
    groups: tuple[IntentGroup, ...], extra: Any, source: str
) -> tuple[IntentGroup, ...]:
    if not isinstance(extra, Mapping):
        raise LexiconError("'intents' must map intent names to keyword lists", source)
    by_intent = {group.intent: group for group in groups}
    for name, keywords in extra.items():
        try:
            intent = Intent(name)
        except ValueError:
            raise LexiconError(f"unknown intent {name!r}", source) from None
        if intent not in by_intent:
            raise LexiconError(f"intent {name!r} has no keyword group", source)
        group = by_intent[intent]
        by_intent[intent] = IntentGroup(intent, group.keywords + _keyword_list(keywords, name, source))
    return tuple(by_intent[group.intent] for group in groups)


def _extend_targets(
    groups: tuple[TargetGroup, ...], extra: Any, source: str
) -> tuple[TargetGroup, ...]:
    if not isinstance(extra, Mapping):
        raise LexiconError("'targets' must map target names to keyword lists", source)
    by_target = {group.target: group for group in groups}
    for name, keywords in extra.items():
        try:
            target = Target(name)
        except ValueError:
            raise LexiconError(f"unknown target {name!r}", source) from None
        if target not in by_target:
            raise LexiconError(f"target {name!r} has no keyword group", source)
        group = by_target[target]
        by_target[target] = TargetGroup(target, group.keywords + _keyword_list(keywords, name, source))
    return tuple(by_target[group.target] for group in groups)


__all__ = [
    "DEFAULT_LEXICON",
    "Lexicon",
    "LexiconError",
    "lexicon_from_dict",
    "load_lexicon",
]
