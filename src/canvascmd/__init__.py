"""canvas-command — rule-based chat command interpreter for canvas documents.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import canvascmd

    action = canvascmd.classify("把文字改成紅色")
    # intent=update_style, target=text, params={'color': '#FF0000'}

    outcome = canvascmd.execute(action, layers, selected_layer_id, store.mutate)
    outcome.success, outcome.message
    # (True, 'updated style of 1 layer(s)')

    canvascmd.respond(action)
    # "OK, I'll update the style of text layers."

    canvascmd.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from canvascmd.action.nodes import Action, ExecutionOutcome, FailureKind, Intent, Layer, Target
from canvascmd.respond.templates import respond as _respond

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from canvascmd.classifier.classifier import Classification
    from canvascmd.executor.executor import MutateCallback


def classify(text: str) -> Action:
    """Classify a chat command into an ``Action``.

    Parameters
    ----------
    text:
        The raw chat command.

    Returns
    -------
    Action
        Intent, target and detected parameters.  Deterministic.
    """
    from canvascmd.classifier.classifier import classify as _classify

    return _classify(text)


def explain(text: str) -> "Classification":
    """Classify *text* and report every keyword hit behind the result."""
    from canvascmd.classifier.classifier import explain as _explain

    return _explain(text)


def resolve_targets(
    target: Target | str, layers: Sequence[Layer], selected_layer_id: str | None
) -> list[Layer]:
    """Return the layers *target* addresses within *layers*."""
    from canvascmd.resolver.resolver import resolve_targets as _resolve

    return _resolve(target, layers, selected_layer_id)


def execute(
    action: Action,
    layers: Sequence[Layer],
    selected_layer_id: str | None,
    mutate: "MutateCallback",
) -> ExecutionOutcome:
    """Apply *action* to *layers* through the caller's *mutate* callback.

    Parameters
    ----------
    action:
        A classified action.
    layers:
        Snapshot of the document's layers.
    selected_layer_id:
        Id of the selected layer, or ``None``.
    mutate:
        ``mutate(layer_id, updates)``, owned by the caller's layer store.

    Returns
    -------
    ExecutionOutcome
        Failures are returned, never raised.
    """
    from canvascmd.executor.executor import execute as _execute

    return _execute(action, layers, selected_layer_id, mutate)


def respond(action: Action) -> str:
    """Return the chat acknowledgment for *action*."""
    return _respond(action)


__all__ = [
    "__version__",
    "Action",
    "ExecutionOutcome",
    "FailureKind",
    "Intent",
    "Layer",
    "Target",
    "classify",
    "execute",
    "explain",
    "resolve_targets",
    "respond",
]
