"""Value types shared by the classifier, resolver, executor and responder.

Every value produced by the interpreter is a frozen dataclass so that a
classified ``Action`` cannot be altered after the classifier returns it.
Nested mappings are frozen too (lists become tuples), and ``Action`` and
``Layer`` hash by value; :func:`thaw` gives back plain, mutable copies.
``Intent`` and ``Target`` are closed enumerations; constructing an
``Action`` with anything outside them raises ``ValueError``.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from types import MappingProxyType
from typing import Any


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Intent(Enum):
    """The edit operation a command requests."""

    UPDATE_STYLE = "update_style"
    MOVE = "move"
    RESIZE = "resize"
    DELETE = "delete"
    DUPLICATE = "duplicate"
    GENERATE = "generate"
    INPAINT = "inpaint"
    UNKNOWN = "unknown"


class Target(Enum):
    """Selector naming which layers an action applies to."""

    ALL = "all"
    TEXT = "text"
    IMAGE = "image"
    SELECTED = "selected"
    LAYER = "layer"


class FailureKind(Enum):
    """Why an execution did not apply."""

    UNRESOLVED_TARGET = auto()
    UNRECOGNIZED_COMMAND = auto()


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _frozen_mapping(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return _freeze(dict(data or {}))


def thaw(value: Any) -> Any:
    """Return a plain-dict copy of a frozen mapping, recursively."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value


def _hash_key(value: Any) -> Any:
    if isinstance(value, Mapping):
        return tuple(sorted((str(k), _hash_key(v)) for k, v in value.items()))
    if isinstance(value, tuple):
        return tuple(_hash_key(v) for v in value)
    return value


# ---------------------------------------------------------------------------
# Action
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Action:
    """A classified edit command.

    Parameters
    ----------
    intent:
        The requested operation.  Plain strings are coerced through
        :class:`Intent`.
    target:
        Which layers the operation addresses.  Plain strings are coerced
        through :class:`Target`.
    layer_id:
        Identifier of a specific layer, set only when a layer is
        addressed out-of-band (see :meth:`for_layer`).
    params:
        Parameters detected in the input.  Only detected keys are
        present; an absent key means "not specified".
    """

    intent: Intent = Intent.UNKNOWN
    target: Target = Target.SELECTED
    layer_id: str | None = None
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "intent", Intent(self.intent))
        object.__setattr__(self, "target", Target(self.target))
        object.__setattr__(self, "params", _frozen_mapping(self.params))

    def for_layer(self, layer_id: str) -> "Action":
        """Return a copy addressed at the single layer *layer_id*."""
        return replace(self, target=Target.LAYER, layer_id=layer_id, params=thaw(self.params))

    def __repr__(self) -> str:
        return (
            f"Action(intent={self.intent.value!r}, target={self.target.value!r}, "
            f"layer_id={self.layer_id!r}, params={thaw(self.params)!r})"
        )

    def __hash__(self) -> int:
        return hash((self.intent, self.target, self.layer_id, _hash_key(self.params)))


# ---------------------------------------------------------------------------
# Layers and outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Layer:
    """Read-only snapshot of a canvas layer.

    Parameters
    ----------
    id:
        Identifier owned by the canvas document.
    kind:
        Discriminant such as ``"text"`` or ``"image"``.
    attrs:
        Open attribute mapping: geometry (``width``, ``height``, ``x``,
        ``y``) and style (``fill``, ``fontSize``).
    """

    id: str
    kind: str
    attrs: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", _frozen_mapping(self.attrs))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Layer":
        """Build a layer from the canvas JSON shape (``id``, ``type``, ...)."""
        if "id" not in data:
            raise ValueError(f"layer record has no 'id': {dict(data)!r}")
        attrs = {k: v for k, v in data.items() if k not in ("id", "type")}
        return cls(id=str(data["id"]), kind=str(data.get("type", "")), attrs=attrs)

    def to_dict(self) -> dict[str, Any]:
        """Return the canvas JSON shape of this layer."""
        return {"id": self.id, "type": self.kind, **thaw(self.attrs)}

    def get(self, name: str, default: Any = None) -> Any:
        """Return attribute *name*, or *default* when absent or ``None``."""
        value = self.attrs.get(name)
        return default if value is None else value

    def __hash__(self) -> int:
        return hash((self.id, self.kind, _hash_key(self.attrs)))


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of executing an ``Action``.

    Parameters
    ----------
    success:
        Whether the action applied, or was accepted pending confirmation.
    message:
        Human-readable summary surfaced verbatim by the chat UI.
    failure:
        Failure category when ``success`` is false.
    affected:
        Ids of the layers the action applied to, or proposes to apply to.
    requires_confirmation:
        True for two-phase actions the caller must confirm before
        performing the mutation itself.
    suggestion:
        Optional guidance, e.g. example commands.
    """

    success: bool
    message: str
    failure: FailureKind | None = None
    affected: tuple[str, ...] = ()
    requires_confirmation: bool = False
    suggestion: str | None = None

    def __str__(self) -> str:
        status = "ok" if self.success else "failed"
        hint = f" (hint: {self.suggestion})" if self.suggestion else ""
        return f"[{status}] {self.message}{hint}"


__all__ = [
    "Action",
    "ExecutionOutcome",
    "FailureKind",
    "Intent",
    "Layer",
    "Target",
    "thaw",
]
