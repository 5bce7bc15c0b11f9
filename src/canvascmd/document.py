"""In-memory layer store.

:class:`LayerDocument` stands in for the canvas state store: it hands
out read-only :class:`~canvascmd.action.Layer` snapshots and exposes
:meth:`LayerDocument.mutate` with the signature the executor expects.
The CLI loads it from a JSON or YAML layer file.

File format
-----------
Either a list of layer records or a mapping with ``layers`` and an
optional ``selected`` id::

    selected: title
    layers:
      - {id: title, type: text, fill: "#000000", fontSize: 32}
      - {id: photo, type: image, width: 400, height: 300}
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from canvascmd.action.nodes import Layer

logger = logging.getLogger(__name__)


class DocumentError(ValueError):
    """Raised when a layer file cannot be loaded."""


class LayerDocument:
    """Ordered, mutable collection of layer records.

    Parameters
    ----------
    layers:
        Initial layer records in the canvas JSON shape.
    selected:
        Id of the selected layer, if any.
    """

    def __init__(self, layers: list[Mapping[str, Any]] | None = None, selected: str | None = None) -> None:
        self._records: dict[str, dict[str, Any]] = {}
        for record in layers or []:
            layer = Layer.from_dict(record)
            if layer.id in self._records:
                raise DocumentError(f"duplicate layer id {layer.id!r}")
            self._records[layer.id] = layer.to_dict()
        self.selected = selected
        self.mutation_count = 0

    # ------------------------------------------------------------------
    # Loading and dumping
    # ------------------------------------------------------------------

    @classmethod
    def from_data(cls, data: Any) -> "LayerDocument":
        """Build a document from parsed JSON/YAML data."""
        selected = None
        if isinstance(data, Mapping):
            selected = data.get("selected")
            data = data.get("layers", [])
        if not isinstance(data, list) or not all(isinstance(r, Mapping) for r in data):
            raise DocumentError("expected a list of layer records")
        try:
            return cls(data, selected=None if selected is None else str(selected))
        except DocumentError:
            raise
        except ValueError as exc:
            raise DocumentError(str(exc)) from exc

    @classmethod
    def load(cls, path: str | Path) -> "LayerDocument":
        """Load a document from a ``.json``, ``.yaml`` or ``.yml`` file."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DocumentError(f"cannot read {path}: {exc}") from exc
        try:
            if path.suffix.lower() == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise DocumentError(f"cannot parse {path}: {exc}") from exc
        document = cls.from_data(data)
        logger.debug("Loaded %d layer(s) from %s", len(document), path)
        return document

    def to_data(self) -> dict[str, Any]:
        """Return the document in the file format."""
        return {"selected": self.selected, "layers": [dict(r) for r in self._records.values()]}

    def dump(self, path: str | Path) -> None:
        """Write the document back to *path*, in the format its suffix names."""
        path = Path(path)
        data = self.to_data()
        if path.suffix.lower() == ".json":
            text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        else:
            text = yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
        path.write_text(text, encoding="utf-8")

    # ------------------------------------------------------------------
    # Store interface
    # ------------------------------------------------------------------

    @property
    def layers(self) -> list[Layer]:
        """Return read-only snapshots of every layer, in document order."""
        return [Layer.from_dict(record) for record in self._records.values()]

    def get(self, layer_id: str) -> Layer:
        """Return a snapshot of the layer *layer_id*.

        Raises
        ------
        KeyError
            If no such layer exists.
        """
        return Layer.from_dict(self._records[layer_id])

    def mutate(self, layer_id: str, updates: Mapping[str, Any]) -> None:
        """Merge *updates* into the layer *layer_id*.

        Raises
        ------
        KeyError
            If no such layer exists.
        """
        if layer_id not in self._records:
            raise KeyError(f"no layer with id {layer_id!r}")
        self._records[layer_id].update(updates)
        self.mutation_count += 1

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, layer_id: object) -> bool:
        return layer_id in self._records

    def __repr__(self) -> str:
        return f"LayerDocument(layers={list(self._records)!r}, selected={self.selected!r})"


__all__ = ["DocumentError", "LayerDocument"]
