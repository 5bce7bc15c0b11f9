"""Action serialization and deserialization.

Provides round-trip serialization of ``Action`` values to and from JSON
and YAML.  The serialized form is a plain dict that maps naturally to
both formats and is what the chat UI passes to downstream services.

Usage
-----
::

    from canvascmd.action.serializer import ActionSerializer

    serializer = ActionSerializer()
    data = serializer.to_dict(action)
    json_text = serializer.to_json(action)
    action2 = serializer.from_json(json_text)
    assert action == action2
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import yaml

from canvascmd.action.nodes import Action, ExecutionOutcome, Intent, Target, thaw


class SerializationError(ValueError):
    """Raised when serialized data does not describe a valid ``Action``."""


class ActionSerializer:
    """Converts between ``Action`` objects and plain Python dicts.

    The serialized representation carries a ``"kind"`` discriminator so
    that mixed payloads stay unambiguous.
    """

    # ------------------------------------------------------------------
    # Serialization (Action → dict)
    # ------------------------------------------------------------------

    def to_dict(self, action: Action) -> dict[str, object]:
        """Serialize an ``Action`` to a JSON-compatible dict."""
        data: dict[str, object] = {
            "kind": "Action",
            "intent": action.intent.value,
            "target": action.target.value,
            "params": thaw(action.params),
        }
        if action.layer_id is not None:
            data["layer_id"] = action.layer_id
        return data

    def outcome_to_dict(self, outcome: ExecutionOutcome) -> dict[str, object]:
        """Serialize an ``ExecutionOutcome`` to a JSON-compatible dict."""
        return {
            "kind": "ExecutionOutcome",
            "success": outcome.success,
            "message": outcome.message,
            "failure": outcome.failure.name if outcome.failure else None,
            "affected": list(outcome.affected),
            "requires_confirmation": outcome.requires_confirmation,
            "suggestion": outcome.suggestion,
        }

    # ------------------------------------------------------------------
    # Deserialization (dict → Action)
    # ------------------------------------------------------------------

    def from_dict(self, data: Mapping[str, Any]) -> Action:
        """Deserialize an ``Action`` from a dict produced by :meth:`to_dict`.

        Raises
        ------
        SerializationError
            If the dict has the wrong kind, or names an intent or target
            outside the closed enumerations.
        """
        if not isinstance(data, Mapping):
            raise SerializationError(f"expected a mapping, got {type(data).__name__}")
        kind = data.get("kind", "Action")
        if kind != "Action":
            raise SerializationError(f"expected kind 'Action', got {kind!r}")
        params = data.get("params") or {}
        if not isinstance(params, Mapping):
            raise SerializationError("'params' must be a mapping")
        try:
            intent = Intent(data.get("intent", Intent.UNKNOWN.value))
            target = Target(data.get("target", Target.SELECTED.value))
        except ValueError as exc:
            raise SerializationError(str(exc)) from exc
        layer_id = data.get("layer_id")
        return Action(
            intent=intent,
            target=target,
            layer_id=None if layer_id is None else str(layer_id),
            params=dict(params),
        )

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, action: Action, indent: int = 2) -> str:
        """Serialize an ``Action`` to a JSON string."""
        return json.dumps(self.to_dict(action), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Action:
        """Deserialize an ``Action`` from a JSON string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"invalid JSON: {exc}") from exc
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, action: Action) -> str:
        """Serialize an ``Action`` to a YAML string."""
        return yaml.dump(self.to_dict(action), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> Action:
        """Deserialize an ``Action`` from a YAML string."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SerializationError(f"invalid YAML: {exc}") from exc
        return self.from_dict(data)


__all__ = [
    "ActionSerializer",
    "SerializationError",
]
