"""Action execution against a caller-owned layer store.

The executor never owns layers.  It resolves the action's target against
a snapshot, then either applies the change through the caller's
``mutate(layer_id, updates)`` callback or, for ``delete`` and
``duplicate``, only describes the change and asks the caller to confirm
before performing it.

Every failure is returned as an :class:`~canvascmd.action.ExecutionOutcome`
with ``success=False``; exceptions raised by ``mutate`` propagate
unchanged and leave earlier mutations in place.

Usage
-----
::

    from canvascmd import classify, execute

    outcome = execute(classify("把文字改成紅色"), layers, None, store.mutate)
    outcome.message
    # 'updated style of 2 layer(s)'
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from canvascmd.action.nodes import Action, ExecutionOutcome, FailureKind, Intent, Layer
from canvascmd.resolver.resolver import resolve_targets
from canvascmd.respond.templates import EXAMPLE_COMMANDS

logger = logging.getLogger(__name__)

MutateCallback = Callable[[str, dict[str, Any]], Any]

NO_TARGET_MESSAGE = "no target layer found"
NOT_RECOGNIZED_MESSAGE = "command not recognized"

DEFAULT_DIMENSION = 100


class ActionExecutor:
    """Applies classified actions through a mutation callback.

    Parameters
    ----------
    default_dimension:
        Width/height assumed for layers that carry no geometry when
        resizing.
    """

    def __init__(self, default_dimension: float = DEFAULT_DIMENSION) -> None:
        self._default_dimension = default_dimension
        self._handlers: dict[
            Intent, Callable[[Action, list[Layer], MutateCallback], ExecutionOutcome]
        ] = {
            Intent.UPDATE_STYLE: self._update_style,
            Intent.RESIZE: self._resize,
            Intent.DELETE: self._propose,
            Intent.DUPLICATE: self._propose,
        }

    def execute(
        self,
        action: Action,
        layers: Sequence[Layer],
        selected_layer_id: str | None,
        mutate: MutateCallback,
    ) -> ExecutionOutcome:
        """Execute *action* against *layers*.

        Parameters
        ----------
        action:
            The classified action.
        layers:
            Snapshot of the document's layers.
        selected_layer_id:
            Id of the currently selected layer, if any.
        mutate:
            Callback applying ``updates`` to the layer ``layer_id``.
            Called at most once per resolved layer, sequentially.

        Returns
        -------
        ExecutionOutcome
            ``success=False`` when no layer matched or the intent is not
            executable here.
        """
        targets = resolve_targets(action.target, layers, selected_layer_id, action.layer_id)
        if not targets:
            logger.debug("No layers matched target %s", action.target.value)
            return ExecutionOutcome(
                success=False,
                message=NO_TARGET_MESSAGE,
                failure=FailureKind.UNRESOLVED_TARGET,
            )

        handler = self._handlers.get(action.intent)
        if handler is None:
            logger.debug("Intent %s is not executable", action.intent.value)
            return ExecutionOutcome(
                success=False,
                message=NOT_RECOGNIZED_MESSAGE,
                failure=FailureKind.UNRECOGNIZED_COMMAND,
                suggestion="try: " + "; ".join(EXAMPLE_COMMANDS),
            )
        return handler(action, targets, mutate)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _update_style(
        self, action: Action, targets: list[Layer], mutate: MutateCallback
    ) -> ExecutionOutcome:
        for layer in targets:
            updates: dict[str, Any] = {}
            if "color" in action.params:
                updates["fill"] = action.params["color"]
            if "fontSize" in action.params:
                updates["fontSize"] = action.params["fontSize"]
            mutate(layer.id, updates)
        logger.debug("Updated style of %d layer(s)", len(targets))
        return ExecutionOutcome(
            success=True,
            message=f"updated style of {len(targets)} layer(s)",
            affected=_ids(targets),
        )

    def _resize(
        self, action: Action, targets: list[Layer], mutate: MutateCallback
    ) -> ExecutionOutcome:
        scale = _number(action.params.get("scale"), 1)
        for layer in targets:
            width = _number(layer.get("width"), self._default_dimension)
            height = _number(layer.get("height"), self._default_dimension)
            mutate(layer.id, {"width": width * scale, "height": height * scale})
        logger.debug("Resized %d layer(s) by %s", len(targets), scale)
        return ExecutionOutcome(
            success=True,
            message=f"resized {len(targets)} layer(s)",
            affected=_ids(targets),
        )

    def _propose(
        self, action: Action, targets: list[Layer], mutate: MutateCallback
    ) -> ExecutionOutcome:
        verb = action.intent.value
        logger.debug("Proposing %s of %d layer(s); awaiting confirmation", verb, len(targets))
        return ExecutionOutcome(
            success=True,
            message=f"{verb} {len(targets)} layer(s)? confirmation required",
            affected=_ids(targets),
            requires_confirmation=True,
        )


def _ids(layers: list[Layer]) -> tuple[str, ...]:
    return tuple(layer.id for layer in layers)


def _number(value: Any, default: float) -> float:
    """Return *value* if it is a real number, else *default*.

    Strings and booleans count as malformed geometry.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        if value is not None:
            logger.debug("Ignoring non-numeric value %r, using %s", value, default)
        return default
    return value


_DEFAULT_EXECUTOR = ActionExecutor()


def execute(
    action: Action,
    layers: Sequence[Layer],
    selected_layer_id: str | None,
    mutate: MutateCallback,
) -> ExecutionOutcome:
    """Execute *action* with the default executor."""
    return _DEFAULT_EXECUTOR.execute(action, layers, selected_layer_id, mutate)


__all__ = [
    "NOT_RECOGNIZED_MESSAGE",
    "NO_TARGET_MESSAGE",
    "ActionExecutor",
    "MutateCallback",
    "execute",
]
