"""Natural-language acknowledgments for the chat UI."""
from __future__ import annotations

from canvascmd.respond.templates import (
    EXAMPLE_COMMANDS,
    is_quick_command,
    respond,
    suggest_followups,
)

__all__ = [
    "EXAMPLE_COMMANDS",
    "is_quick_command",
    "respond",
    "suggest_followups",
]
