"""Static keyword tables for the command classifier.

Every table is an **ordered tuple**.  The classifier scans each table in
declaration order and stops at the first entry whose keyword occurs in
the input, so an earlier entry shadows a later one when a command
contains cues for both.

Two tables decide the intent and they are deliberately kept apart:

- :data:`PARAMETER_CUES` — colour and font-size cue words.  A hit sets
  the intent the cue implies (always ``update_style``).
- :data:`INTENT_GROUPS` — keywords that name an edit operation.

Parameter cues are scanned before intent groups.  A command such as
``"resize the image"`` therefore classifies as ``update_style`` because
the font-size cue ``"size"`` occurs inside ``"resize"``.

Supported tables
----------------

+---------------------+---------------------------------------------+
| Table               | Sets                                        |
+=====================+=============================================+
| PARAMETER_CUES      | ``intent`` (``update_style``)               |
+---------------------+---------------------------------------------+
| INTENT_GROUPS       | ``intent``                                  |
+---------------------+---------------------------------------------+
| TARGET_GROUPS       | ``target``                                  |
+---------------------+---------------------------------------------+
| COLORS              | ``params["color"]``                         |
+---------------------+---------------------------------------------+
| POSITIONS           | ``params["position"]``                      |
+---------------------+---------------------------------------------+
| DIRECTIONS          | ``params["direction"]``                     |
+---------------------+---------------------------------------------+
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Union

from canvascmd.action.nodes import Intent, Target

Anchor = Union[int, Literal["center"]]


# ---------------------------------------------------------------------------
# Entry types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ParameterCue:
    """A group of cue words that implies a styling parameter.

    Parameters
    ----------
    name:
        Parameter the cue refers to, e.g. ``"color"``.
    keywords:
        Cue words in match order.
    implies:
        Intent assigned when this group is the first intent-table hit.
    """

    name: str
    keywords: tuple[str, ...]
    implies: Intent = Intent.UPDATE_STYLE


@dataclass(frozen=True, slots=True)
class IntentGroup:
    """Keywords that name an edit operation."""

    intent: Intent
    keywords: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TargetGroup:
    """Keywords that name a layer selector."""

    target: Target
    keywords: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ColorEntry:
    """A colour name and its ``#RRGGBB`` value."""

    name: str
    hex: str


@dataclass(frozen=True, slots=True)
class PositionEntry:
    """An absolute placement cue.

    ``x``/``y`` are ``0`` (near edge), ``1`` (far edge) or ``"center"``.
    """

    name: str
    x: Anchor
    y: Anchor


@dataclass(frozen=True, slots=True)
class DirectionEntry:
    """A relative nudge cue in canvas pixels."""

    name: str
    dx: int
    dy: int


def _g(intent: Intent, *keywords: str) -> IntentGroup:
    return IntentGroup(intent=intent, keywords=keywords)


def _t(target: Target, *keywords: str) -> TargetGroup:
    return TargetGroup(target=target, keywords=keywords)


# ---------------------------------------------------------------------------
# Intent tables
# ---------------------------------------------------------------------------

PARAMETER_CUES: tuple[ParameterCue, ...] = (
    ParameterCue("color", ("顏色", "色彩", "color", "換色", "改色", "變色", "著色")),
    ParameterCue("fontSize", ("字體", "字號", "字大小", "font", "size", "字體大小")),
)

INTENT_GROUPS: tuple[IntentGroup, ...] = (
    _g(Intent.MOVE, "移動", "移到", "放到", "move", "拖", "挪", "搬"),
    _g(Intent.DELETE, "刪除", "移除", "刪掉", "delete", "remove", "去掉", "清除"),
    _g(Intent.DUPLICATE, "複製", "拷貝", "copy", "duplicate", "克隆", "複製一份"),
    _g(Intent.GENERATE, "生成", "創建", "產生", "generate", "create", "畫", "製作"),
    _g(Intent.INPAINT, "重繪", "修改區域", "換成", "替換", "inpaint", "replace", "修復"),
    _g(Intent.RESIZE, "調整大小", "縮放", "resize", "scale", "變大", "變小"),
)

# ---------------------------------------------------------------------------
# Target table
# ---------------------------------------------------------------------------

TARGET_GROUPS: tuple[TargetGroup, ...] = (
    _t(Target.TEXT, "文字", "文本", "text", "字", "標題"),
    _t(Target.IMAGE, "圖片", "圖像", "image", "照片", "圖", "相片"),
    _t(Target.ALL, "所有", "全部", "all", "每個", "整個"),
    _t(Target.SELECTED, "選中", "選取", "selected", "當前", "這個"),
)

DEFAULT_TARGET = Target.SELECTED

# ---------------------------------------------------------------------------
# Colour table
#
# Longer names precede their one-character stems within a colour, but a
# compound such as "粉紅" still loses to "紅" because red is declared first.
# ---------------------------------------------------------------------------

_COLOR_ROWS: tuple[tuple[str, str], ...] = (
    ("紅色", "#FF0000"), ("紅", "#FF0000"), ("red", "#FF0000"),
    ("藍色", "#0000FF"), ("藍", "#0000FF"), ("blue", "#0000FF"),
    ("綠色", "#00FF00"), ("綠", "#00FF00"), ("green", "#00FF00"),
    ("深綠", "#006400"), ("墨綠", "#006400"),
    ("黃色", "#FFFF00"), ("黃", "#FFFF00"), ("yellow", "#FFFF00"),
    ("白色", "#FFFFFF"), ("白", "#FFFFFF"), ("white", "#FFFFFF"),
    ("黑色", "#000000"), ("黑", "#000000"), ("black", "#000000"),
    ("橙色", "#FFA500"), ("橙", "#FFA500"), ("orange", "#FFA500"),
    ("紫色", "#800080"), ("紫", "#800080"), ("purple", "#800080"),
    ("粉色", "#FFC0CB"), ("粉", "#FFC0CB"), ("pink", "#FFC0CB"),
    ("粉紅", "#FF69B4"), ("桃紅", "#FF69B4"),
    ("灰色", "#808080"), ("灰", "#808080"), ("gray", "#808080"),
    ("淺灰", "#D3D3D3"), ("深灰", "#696969"),
    ("棕色", "#8B4513"), ("棕", "#8B4513"), ("brown", "#8B4513"),
    ("金色", "#FFD700"), ("金", "#FFD700"), ("gold", "#FFD700"),
    ("銀色", "#C0C0C0"), ("銀", "#C0C0C0"), ("silver", "#C0C0C0"),
    ("青色", "#00FFFF"), ("青", "#00FFFF"), ("cyan", "#00FFFF"),
    ("深藍", "#00008B"), ("藏藍", "#00008B"),
    ("淺藍", "#87CEEB"), ("天藍", "#87CEEB"),
    ("酒紅", "#722F37"), ("暗紅", "#8B0000"),
    ("橄欖", "#808000"), ("軍綠", "#556B2F"),
    ("珊瑚", "#FF7F50"), ("番茄", "#FF6347"),
)

COLORS: tuple[ColorEntry, ...] = tuple(ColorEntry(name, hex_) for name, hex_ in _COLOR_ROWS)

HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")

# ---------------------------------------------------------------------------
# Size and scale cues
# ---------------------------------------------------------------------------

# ASCII digits only; runs longer than four digits are not sizes.
FONT_SIZE_RE = re.compile(r"(?<![0-9])([0-9]{1,4})(?![0-9])(px|像素|號)?")
FONT_SIZE_CUES: tuple[str, ...] = ("字", "font")

SCALE_MULTIPLIER_RE = re.compile(r"(?<![0-9.])([0-9]{1,4}(?:\.[0-9]{1,4})?)\s*倍")
ENLARGE_CUES: tuple[str, ...] = ("放大", "變大")
SHRINK_CUES: tuple[str, ...] = ("縮小", "變小")
ENLARGE_FACTOR = 1.5
SHRINK_FACTOR = 0.75

# ---------------------------------------------------------------------------
# Placement cues
# ---------------------------------------------------------------------------

NUDGE_PX = 50

POSITIONS: tuple[PositionEntry, ...] = (
    PositionEntry("左上", 0, 0),
    PositionEntry("上方", "center", 0),
    PositionEntry("右上", 1, 0),
    PositionEntry("左邊", 0, "center"),
    PositionEntry("左側", 0, "center"),
    PositionEntry("中間", "center", "center"),
    PositionEntry("中央", "center", "center"),
    PositionEntry("置中", "center", "center"),
    PositionEntry("center", "center", "center"),
    PositionEntry("右邊", 1, "center"),
    PositionEntry("右側", 1, "center"),
    PositionEntry("左下", 0, 1),
    PositionEntry("下方", "center", 1),
    PositionEntry("右下", 1, 1),
)

DIRECTIONS: tuple[DirectionEntry, ...] = (
    DirectionEntry("向上", 0, -NUDGE_PX),
    DirectionEntry("往上", 0, -NUDGE_PX),
    DirectionEntry("上移", 0, -NUDGE_PX),
    DirectionEntry("向下", 0, NUDGE_PX),
    DirectionEntry("往下", 0, NUDGE_PX),
    DirectionEntry("下移", 0, NUDGE_PX),
    DirectionEntry("向左", -NUDGE_PX, 0),
    DirectionEntry("往左", -NUDGE_PX, 0),
    DirectionEntry("左移", -NUDGE_PX, 0),
    DirectionEntry("向右", NUDGE_PX, 0),
    DirectionEntry("往右", NUDGE_PX, 0),
    DirectionEntry("右移", NUDGE_PX, 0),
)


__all__ = [
    "COLORS",
    "DEFAULT_TARGET",
    "DIRECTIONS",
    "ENLARGE_CUES",
    "ENLARGE_FACTOR",
    "FONT_SIZE_CUES",
    "FONT_SIZE_RE",
    "HEX_COLOR_RE",
    "INTENT_GROUPS",
    "NUDGE_PX",
    "PARAMETER_CUES",
    "POSITIONS",
    "SCALE_MULTIPLIER_RE",
    "SHRINK_CUES",
    "SHRINK_FACTOR",
    "TARGET_GROUPS",
    "ColorEntry",
    "DirectionEntry",
    "IntentGroup",
    "ParameterCue",
    "PositionEntry",
    "TargetGroup",
]
