"""Target resolution: action selectors to concrete layers."""
from __future__ import annotations

from canvascmd.resolver.resolver import resolve_targets

__all__ = ["resolve_targets"]
