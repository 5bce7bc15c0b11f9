"""Keyword-driven command classifier.

Turns a short free-text instruction into an :class:`~canvascmd.action.Action`.
Classification is a fixed sequence of ordered, first-match scans over the
lexicon tables; the same input always yields the same action.

Scan order
----------
1. Intent: parameter cues, then intent groups.  First hit decides.
2. Target: ``text``, ``image``, ``all``, ``selected``.  Default
   ``selected``.
3. Colour: first colour name found sets ``params["color"]``.
4. Font size: a number plus a sizing cue (``字``/``font``) sets
   ``params["fontSize"]``.
5. Scale: ``N倍`` sets ``params["scale"] = N``; otherwise enlarge cues
   give 1.5 and shrink cues give 0.75.
6. Placement: position cues set ``params["position"]``, direction cues
   set ``params["direction"]``.

Steps 3 and 4 promote an ``unknown`` intent to ``update_style``, step 5
to ``resize`` and step 6 to ``move``.  A promotion never overrides an
intent found in step 1.

Usage
-----
::

    from canvascmd.classifier import classify, explain

    classify("把文字改成紅色")
    # Action(intent='update_style', target='text', ..., params={'color': '#FF0000'})

    explain("刪除所有文字").is_ambiguous
    # True: "文字" and "所有" both name a target
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from canvascmd.action.nodes import Action, Intent, Target
from canvascmd.lexicon.loader import DEFAULT_LEXICON, Lexicon
from canvascmd.lexicon.tables import (
    DEFAULT_TARGET,
    ENLARGE_CUES,
    ENLARGE_FACTOR,
    FONT_SIZE_CUES,
    FONT_SIZE_RE,
    SCALE_MULTIPLIER_RE,
    SHRINK_CUES,
    SHRINK_FACTOR,
)

logger = logging.getLogger(__name__)

_PROMPT_INTENTS = frozenset({Intent.GENERATE, Intent.INPAINT})


@dataclass(frozen=True)
class KeywordHit:
    """One keyword found in the input.

    Parameters
    ----------
    field:
        What the hit decides: ``"intent"``, ``"target"``, ``"color"``,
        ``"position"`` or ``"direction"``.
    group:
        The table entry that matched, e.g. ``"color"`` for the colour
        cue group or ``"delete"`` for an intent group.
    keyword:
        The keyword that occurred in the input.
    value:
        The value the hit would assign to *field*.
    """

    field: str
    group: str
    keyword: str
    value: str

    def __str__(self) -> str:
        return f"{self.field}={self.value} via {self.group}:{self.keyword!r}"


@dataclass(frozen=True)
class Classification:
    """A classified action together with every keyword hit behind it.

    ``winning`` holds the first hit per field, i.e. the hits that
    actually decided the action; ``hits`` holds all of them in scan
    order.
    """

    action: Action
    hits: tuple[KeywordHit, ...]
    winning: tuple[KeywordHit, ...]

    @property
    def conflicts(self) -> dict[str, tuple[str, ...]]:
        """Fields whose hits disagree, mapped to the competing values."""
        values: dict[str, list[str]] = {}
        for hit in self.hits:
            seen = values.setdefault(hit.field, [])
            if hit.value not in seen:
                seen.append(hit.value)
        return {name: tuple(vals) for name, vals in values.items() if len(vals) > 1}

    @property
    def is_ambiguous(self) -> bool:
        """True when cues for more than one value of a field were found."""
        return bool(self.conflicts)


class CommandClassifier:
    """Classifies chat commands into canvas edit actions.

    Parameters
    ----------
    lexicon:
        Keyword tables to match against.  Defaults to
        :data:`~canvascmd.lexicon.DEFAULT_LEXICON`.
    """

    def __init__(self, lexicon: Lexicon | None = None) -> None:
        self._lexicon = lexicon if lexicon is not None else DEFAULT_LEXICON

    @property
    def lexicon(self) -> Lexicon:
        """Return the lexicon this classifier matches against."""
        return self._lexicon

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def classify(self, text: str) -> Action:
        """Classify *text* into an :class:`Action`.

        Raises
        ------
        ValueError
            If *text* is ``None``.
        """
        action = self._classify(text)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Classified %r as intent=%s target=%s params=%s",
                text,
                action.intent.value,
                action.target.value,
                dict(action.params),
            )
            classification = self._collect(text, action)
            if classification.is_ambiguous:
                logger.debug(
                    "Ambiguous command %r resolved by declaration order: %s",
                    text,
                    "; ".join(str(hit) for hit in classification.winning),
                )
        return action

    def explain(self, text: str) -> Classification:
        """Classify *text* and report every keyword hit behind the result."""
        return self._collect(text, self._classify(text))

    # ------------------------------------------------------------------
    # First-match scans
    # ------------------------------------------------------------------

    def _classify(self, text: str) -> Action:
        if text is None:  # type: ignore[comparison-overlap]
            raise ValueError("classify() requires a str, got None")

        lex = self._lexicon
        norm = lex.normalise(text)
        intent = self._scan_intent(norm)
        target = self._scan_target(norm)
        params: dict[str, Any] = {}

        for entry in lex.colors:
            if lex.contains(norm, entry.name):
                params["color"] = entry.hex
                if intent is Intent.UNKNOWN:
                    intent = Intent.UPDATE_STYLE
                break

        size_match = FONT_SIZE_RE.search(norm)
        if size_match and any(lex.contains(norm, cue) for cue in FONT_SIZE_CUES):
            params["fontSize"] = int(size_match.group(1))
            if intent is Intent.UNKNOWN:
                intent = Intent.UPDATE_STYLE

        scale = self._scan_scale(norm)
        if scale is not None:
            params["scale"] = scale
            if intent is Intent.UNKNOWN:
                intent = Intent.RESIZE

        for position in lex.positions:
            if lex.contains(norm, position.name):
                params["position"] = {"x": position.x, "y": position.y}
                if intent is Intent.UNKNOWN:
                    intent = Intent.MOVE
                break

        for direction in lex.directions:
            if lex.contains(norm, direction.name):
                params["direction"] = {"dx": direction.dx, "dy": direction.dy}
                if intent is Intent.UNKNOWN:
                    intent = Intent.MOVE
                break

        if intent in _PROMPT_INTENTS:
            params["prompt"] = text.strip()

        return Action(intent=intent, target=target, params=params)

    def _scan_intent(self, norm: str) -> Intent:
        lex = self._lexicon
        for cue in lex.parameter_cues:
            if lex.first_hit(norm, cue.keywords) is not None:
                return cue.implies
        for group in lex.intent_groups:
            if lex.first_hit(norm, group.keywords) is not None:
                return group.intent
        return Intent.UNKNOWN

    def _scan_target(self, norm: str) -> Target:
        lex = self._lexicon
        for group in lex.target_groups:
            if lex.first_hit(norm, group.keywords) is not None:
                return group.target
        return DEFAULT_TARGET

    def _scan_scale(self, norm: str) -> float | None:
        lex = self._lexicon
        multiplier = SCALE_MULTIPLIER_RE.search(norm)
        if multiplier:
            return float(multiplier.group(1))
        if any(lex.contains(norm, cue) for cue in ENLARGE_CUES):
            return ENLARGE_FACTOR
        if any(lex.contains(norm, cue) for cue in SHRINK_CUES):
            return SHRINK_FACTOR
        return None

    # ------------------------------------------------------------------
    # Exhaustive scan for explanations
    # ------------------------------------------------------------------

    def _collect(self, text: str, action: Action) -> Classification:
        lex = self._lexicon
        norm = lex.normalise(text)
        hits: list[KeywordHit] = []

        for cue in lex.parameter_cues:
            for keyword in cue.keywords:
                if lex.contains(norm, keyword):
                    hits.append(KeywordHit("intent", cue.name, keyword, cue.implies.value))
        for group in lex.intent_groups:
            for keyword in group.keywords:
                if lex.contains(norm, keyword):
                    hits.append(KeywordHit("intent", group.intent.value, keyword, group.intent.value))
        for target_group in lex.target_groups:
            for keyword in target_group.keywords:
                if lex.contains(norm, keyword):
                    hits.append(
                        KeywordHit("target", target_group.target.value, keyword, target_group.target.value)
                    )
        for entry in lex.colors:
            if lex.contains(norm, entry.name):
                hits.append(KeywordHit("color", entry.name, entry.name, entry.hex))
        for position in lex.positions:
            if lex.contains(norm, position.name):
                hits.append(
                    KeywordHit("position", position.name, position.name, f"{position.x},{position.y}")
                )
        for direction in lex.directions:
            if lex.contains(norm, direction.name):
                hits.append(
                    KeywordHit("direction", direction.name, direction.name, f"{direction.dx},{direction.dy}")
                )

        winning: dict[str, KeywordHit] = {}
        for hit in hits:
            winning.setdefault(hit.field, hit)
        return Classification(action=action, hits=tuple(hits), winning=tuple(winning.values()))


_DEFAULT_CLASSIFIER = CommandClassifier()


def classify(text: str) -> Action:
    """Classify *text* with the built-in lexicon."""
    return _DEFAULT_CLASSIFIER.classify(text)


def explain(text: str) -> Classification:
    """Classify *text* with the built-in lexicon and report every keyword hit."""
    return _DEFAULT_CLASSIFIER.explain(text)


__all__ = [
    "Classification",
    "CommandClassifier",
    "KeywordHit",
    "classify",
    "explain",
]
