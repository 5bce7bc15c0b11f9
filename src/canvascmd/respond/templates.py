"""Chat acknowledgments for classified actions.

:func:`respond` is a pure lookup: one fixed template per intent.  Only
the ``update_style`` template takes a substitution, the name of the
targeted layers.

Templates
---------

+----------------+--------------------------------------------------+
| Intent         | Acknowledgment                                   |
+================+==================================================+
| update_style   | "OK, I'll update the style of {target}."         |
+----------------+--------------------------------------------------+
| move           | "Moving the layer now."                          |
+----------------+--------------------------------------------------+
| resize         | "Resizing the layer now."                        |
+----------------+--------------------------------------------------+
| delete         | asks the user to confirm the deletion            |
+----------------+--------------------------------------------------+
| duplicate      | asks the user to confirm the copy                |
+----------------+--------------------------------------------------+
| generate       | "Generating an image from your description..."   |
+----------------+--------------------------------------------------+
| inpaint        | "Repainting the selected area..."                |
+----------------+--------------------------------------------------+
| unknown        | apology plus :data:`EXAMPLE_COMMANDS`            |
+----------------+--------------------------------------------------+
"""
from __future__ import annotations

from canvascmd.action.nodes import Action, Intent, Target

EXAMPLE_COMMANDS: tuple[str, ...] = (
    "把文字改成紅色",
    "放大選中的圖片",
    "把圖片移到中間",
    "字體大小改成 24px",
    "刪除所有文字",
    "複製這個圖片",
    "生成一張日落海灘的圖片",
)

TARGET_NAMES: dict[Target, str] = {
    Target.ALL: "all layers",
    Target.TEXT: "text layers",
    Target.IMAGE: "image layers",
    Target.SELECTED: "the selected layer",
    Target.LAYER: "the selected layer",
}

_FALLBACK = "Sorry, I didn't understand that command. You can try:\n" + "\n".join(
    f"• {example}" for example in EXAMPLE_COMMANDS
)

RESPONSES: dict[Intent, str] = {
    Intent.UPDATE_STYLE: "OK, I'll update the style of {target}.",
    Intent.MOVE: "Moving the layer now.",
    Intent.RESIZE: "Resizing the layer now.",
    Intent.DELETE: "Are you sure you want to delete these layers? Please confirm to continue.",
    Intent.DUPLICATE: "Ready to duplicate these layers. Please confirm to continue.",
    Intent.GENERATE: "Generating an image from your description, please wait...",
    Intent.INPAINT: "Repainting the selected area, please wait...",
    Intent.UNKNOWN: _FALLBACK,
}

QUICK_COMMANDS: tuple[str, ...] = ("放大", "縮小", "刪除", "複製", "置中")

FOLLOWUPS: dict[Intent, tuple[str, ...]] = {
    Intent.GENERATE: ("調整大小", "移到中間", "複製一份"),
    Intent.DUPLICATE: ("移動副本", "調整大小", "修改顏色"),
}


def respond(action: Action) -> str:
    """Return the chat acknowledgment for *action*."""
    template = RESPONSES.get(action.intent, _FALLBACK)
    if action.intent is Intent.UPDATE_STYLE:
        return template.format(target=TARGET_NAMES[action.target])
    return template


def is_quick_command(text: str) -> bool:
    """Return True if *text* contains a one-shot shortcut command."""
    return any(command in text for command in QUICK_COMMANDS)


def suggest_followups(action: Action) -> list[str]:
    """Return follow-up commands worth offering after *action*."""
    return list(FOLLOWUPS.get(action.intent, ()))


__all__ = [
    "EXAMPLE_COMMANDS",
    "FOLLOWUPS",
    "QUICK_COMMANDS",
    "RESPONSES",
    "TARGET_NAMES",
    "is_quick_command",
    "respond",
    "suggest_followups",
]
