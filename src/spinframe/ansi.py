"""ANSI colors, styles, icons and template formatting.

Provides the escape sequences used by frames, spinners and progress bars,
plus a small template language for inline styling:

    format("{{bold+red:Error}}: file not found")
    format("{{check:}} done")
"""

from __future__ import annotations

import re
from enum import IntEnum
from typing import TextIO

ESC = "\033["
RESET = f"{ESC}0m"

# Cursor and screen control
CLEAR_LINE = f"{ESC}K"
CLEAR_SCREEN = f"{ESC}2J"
CURSOR_HOME = f"{ESC}H"
HIDE_CURSOR = f"{ESC}?25l"
SHOW_CURSOR = f"{ESC}?25h"

_TEMPLATE_PATTERN = re.compile(r"\{\{([^:}]+):([^}]*)\}\}")


class Color(IntEnum):
    """Terminal foreground colors."""

    RESET = 0
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    @property
    def code(self) -> str:
        """Escape sequence that switches to this color."""
        return f"{ESC}{self.value}m"

    def colorize(self, text: str) -> str:
        """Wrap text in this color, resetting afterwards.

        Example:
            print(Color.RED.colorize("Error") + " occurred")
        """
        return f"{self.code}{text}{RESET}"

    def sprint(self, *parts: object) -> str:
        return self.colorize("".join(str(part) for part in parts))

    @classmethod
    def parse(cls, name: str) -> Color:
        """Look up a color by name, e.g. ``"bright-blue"`` or ``"BRIGHT_BLUE"``."""
        key = name.strip().upper().replace("-", "_")
        if key.startswith("BRIGHT") and not key.startswith("BRIGHT_"):
            key = "BRIGHT_" + key[len("BRIGHT") :]
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown color: {name}") from None


class Style(IntEnum):
    """Terminal text styles."""

    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    REVERSE = 7
    STRIKETHROUGH = 9

    @property
    def code(self) -> str:
        return f"{ESC}{self.value}m"

    def apply(self, text: str) -> str:
        return f"{self.code}{text}{RESET}"


class Icon(str):
    """A single display glyph that can be colorized."""

    __slots__ = ()

    def colorize(self, color: Color) -> str:
        return color.colorize(str(self))


CHECK_MARK = Icon("✓")
CROSS_MARK = Icon("✗")
CIRCLE = Icon("○")
FILLED_CIRCLE = Icon("●")
WARNING = Icon("⚠")
INFO = Icon("ℹ")
QUESTION = Icon("?")
EXCLAMATION = Icon("!")

ARROW_UP = Icon("↑")
ARROW_DOWN = Icon("↓")
ARROW_LEFT = Icon("←")
ARROW_RIGHT = Icon("→")

SPINNER_1 = Icon("⠋")
SPINNER_2 = Icon("⠙")
SPINNER_3 = Icon("⠹")
SPINNER_4 = Icon("⠸")
SPINNER_5 = Icon("⠼")
SPINNER_6 = Icon("⠴")
SPINNER_7 = Icon("⠦")
SPINNER_8 = Icon("⠧")

STAR = Icon("★")
GEAR = Icon("⚙")
ROCKET = Icon("🚀")
UNICORN = Icon("🦄")
HOURGLASS = Icon("⏳")
BULLET = Icon("•")

ICONS: dict[str, Icon] = {
    "check": CHECK_MARK,
    "success": CHECK_MARK,
    "cross": CROSS_MARK,
    "error": CROSS_MARK,
    "circle": CIRCLE,
    "filled-circle": FILLED_CIRCLE,
    "warning": WARNING,
    "info": INFO,
    "question": QUESTION,
    "exclamation": EXCLAMATION,
    "arrow-up": ARROW_UP,
    "arrow-down": ARROW_DOWN,
    "arrow-left": ARROW_LEFT,
    "arrow-right": ARROW_RIGHT,
    "spinner1": SPINNER_1,
    "spinner2": SPINNER_2,
    "spinner3": SPINNER_3,
    "spinner4": SPINNER_4,
    "spinner5": SPINNER_5,
    "spinner6": SPINNER_6,
    "spinner7": SPINNER_7,
    "spinner8": SPINNER_8,
    "star": STAR,
    "gear": GEAR,
    "rocket": ROCKET,
    "unicorn": UNICORN,
    "hourglass": HOURGLASS,
    "bullet": BULLET,
}


def move_cursor_up(lines: int) -> str:
    return f"{ESC}{lines}A"


def move_cursor_down(lines: int) -> str:
    return f"{ESC}{lines}B"


def combine(text: str, *modifiers: Color | Style) -> str:
    """Apply several colors and styles to text at once.

    Example:
        combine("Warning", Style.BOLD, Color.YELLOW)
    """
    if not modifiers:
        return text
    codes = "".join(modifier.code for modifier in modifiers)
    return f"{codes}{text}{RESET}"


def _color_names() -> dict[str, Color]:
    return {color.name.lower().replace("_", ""): color for color in Color}


def _style_names() -> dict[str, Style]:
    return {style.name.lower(): style for style in Style}


_COLORS = _color_names()
_STYLES = _style_names()


def _apply_modifier(modifier: str, text: str) -> str | None:
    colors: list[Color | Style] = []
    icons: list[Icon] = []
    for part in modifier.split("+"):
        part = part.strip()
        if part in _COLORS:
            colors.append(_COLORS[part])
        elif part in _STYLES:
            colors.append(_STYLES[part])
        elif part in ICONS:
            icons.append(ICONS[part])

    if not colors and not icons:
        return None

    if icons:
        prefix = "".join(str(icon) for icon in icons)
        text = f"{prefix} {text}" if text else prefix

    return combine(text, *colors)


def format(template: str) -> str:  # noqa: A001
    """Expand ``{{modifier:text}}`` tags into escape sequences.

    Modifiers are color names (``red``, ``brightblue``), style names
    (``bold``) or icon names (``check``), joined with ``+``. Tags with no
    recognised modifier are returned unchanged.

    Example:
        format("{{bold+green:SUCCESS}}: operation completed")
    """

    def replace(match: re.Match[str]) -> str:
        modifier = match.group(1).strip().lower()
        rendered = _apply_modifier(modifier, match.group(2))
        return match.group(0) if rendered is None else rendered

    return _TEMPLATE_PATTERN.sub(replace, template)


def has_template(text: str) -> bool:
    return "{{" in text and "}}" in text


class Formatter:
    """Writer decorator that expands templates in everything written through it.

    Example:
        out = Formatter(sys.stdout)
        out.write("{{red:Error}}: something went wrong\\n")
    """

    def __init__(self, writer: TextIO) -> None:
        self._writer = writer

    def write(self, text: str) -> int:
        self._writer.write(format(text))
        return len(text)

    def flush(self) -> None:
        flush = getattr(self._writer, "flush", None)
        if flush is not None:
            flush()

    def isatty(self) -> bool:
        isatty = getattr(self._writer, "isatty", None)
        return bool(isatty and isatty())
