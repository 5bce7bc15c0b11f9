"""Target resolution.

Maps an action's target selector onto the concrete layers of a
caller-supplied snapshot.  Resolution is total: an unmatched selector
yields an empty list, never an error.
"""
from __future__ import annotations

from collections.abc import Sequence

from canvascmd.action.nodes import Layer, Target


def resolve_targets(
    target: Target | str,
    layers: Sequence[Layer],
    selected_layer_id: str | None,
    layer_id: str | None = None,
) -> list[Layer]:
    """Return the layers *target* addresses, in snapshot order.

    Parameters
    ----------
    target:
        The selector.  Strings outside :class:`Target` resolve to
        nothing.
    layers:
        Snapshot of the document's layers.
    selected_layer_id:
        Id of the currently selected layer, if any.
    layer_id:
        Explicit layer addressed by a ``layer`` target.  When omitted,
        a ``layer`` target falls back to the selection.

    Returns
    -------
    list[Layer]
        Possibly empty.
    """
    try:
        selector = Target(target)
    except ValueError:
        return []

    if selector is Target.ALL:
        return list(layers)
    if selector is Target.TEXT:
        return [layer for layer in layers if layer.kind == "text"]
    if selector is Target.IMAGE:
        return [layer for layer in layers if layer.kind == "image"]
    if selector is Target.SELECTED:
        return _by_id(layers, selected_layer_id)
    if selector is Target.LAYER:
        return _by_id(layers, layer_id if layer_id is not None else selected_layer_id)
    return []


def _by_id(layers: Sequence[Layer], wanted: str | None) -> list[Layer]:
    if not wanted:
        return []
    return [layer for layer in layers if layer.id == wanted]


__all__ = ["resolve_targets"]
