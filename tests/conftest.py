"""Shared test fixtures for canvas-command.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from typing import Any

import pytest

from canvascmd.action.nodes import Layer


class MutationRecorder:
    """Stand-in for the caller's ``mutate`` callback."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, layer_id: str, updates: dict[str, Any]) -> None:
        self.calls.append((layer_id, dict(updates)))


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "canvascmd"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def layers() -> list[Layer]:
    """Two text layers and one image layer, in document order."""
    return [
        Layer("title", "text", {"fill": "#000000", "fontSize": 32, "width": 300, "height": 40}),
        Layer("photo", "image", {"width": 400, "height": 300}),
        Layer("caption", "text", {"fill": "#333333", "fontSize": 14}),
    ]


@pytest.fixture()
def mutate() -> MutationRecorder:
    """A fresh mutation recorder."""
    return MutationRecorder()
