"""Time formatting, text layout and terminal display helpers."""

from __future__ import annotations

import enum
import os
import re
import sys
import time
from datetime import datetime, timezone

from wcwidth import wcwidth

_STYLE_CODES = {
    "bold": 1,
    "dimmed": 2,
    "italic": 3,
    "underline": 4,
    "blink": 5,
    "reversed": 7,
    "hidden": 8,
    "strikethrough": 9,
}

_COLOR_CODES = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "bright_black": 90,
    "bright_red": 91,
    "bright_green": 92,
    "bright_yellow": 93,
    "bright_blue": 94,
    "bright_magenta": 95,
    "bright_cyan": 96,
    "bright_white": 97,
}

_MINUTE = 60
_HOUR = 3600
_DAY = 86400
_MONTH = 2592000
_YEAR = 31536000


class TextAlign(enum.Enum):
    """Horizontal alignment used by :func:`pad_string`."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def _color_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    return os.environ.get("CLICOLOR", "1") != "0"


def colorize(text: str, *args: str) -> str:
    """Wrap ``text`` in ANSI codes for the given style and colour names."""
    styles: list[int] = []
    color: int | None = None
    for name in args:
        if name in _STYLE_CODES:
            code = _STYLE_CODES[name]
            if code not in styles:
                styles.append(code)
        elif name in _COLOR_CODES:
            color = _COLOR_CODES[name]
        else:
            raise ValueError(f"unknown style or colour: {name!r}")
    codes = styles + ([color] if color is not None else [])
    if not codes or not _color_enabled():
        return text
    joined = ";".join(str(code) for code in codes)
    return f"\x1b[{joined}m{text}\x1b[0m"


# ---------------------------------------------------------------------------
# Time and date
# ---------------------------------------------------------------------------


def _utc_datetime(seconds: int) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return datetime.now(tz=timezone.utc)


def format_time(seconds: int) -> str:
    """Format a Unix timestamp as ``YYYY-MM-DD HH:MM:SS`` in UTC."""
    return _utc_datetime(seconds).strftime("%Y-%m-%d %H:%M:%S")


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def format_time_ago(seconds: int, now: int | None = None) -> str:
    """Describe how long ago ``seconds`` was, relative to ``now``."""
    if now is None:
        now = int(time.time())
    diff = now - seconds
    if 0 <= diff < _MINUTE:
        return "just now"
    if _MINUTE <= diff < _HOUR:
        return _plural(diff // _MINUTE, "minute")
    if _HOUR <= diff < _DAY:
        return _plural(diff // _HOUR, "hour")
    if _DAY <= diff < _MONTH:
        return _plural(diff // _DAY, "day")
    if _MONTH <= diff < _YEAR:
        return _plural(diff // _MONTH, "month")
    return _plural(_trunc_div(diff, _YEAR), "year")


def format_date(seconds: int) -> str:
    """Format a Unix timestamp as a UTC date string with a ``UTC`` suffix."""
    return _utc_datetime(seconds).strftime("%Y-%m-%d %H:%M:%S UTC")


def format_local_date(seconds: int) -> str:
    """Format a Unix timestamp in the local time zone."""
    return _utc_datetime(seconds).astimezone().strftime("%Y-%m-%d %H:%M:%S")


def current_time() -> int:
    """Return the current Unix time in whole seconds."""
    return max(int(time.time()), 0)


# ---------------------------------------------------------------------------
# Strings and text
# ---------------------------------------------------------------------------


def _char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def _display_width(text: str) -> int:
    return sum(_char_width(char) for char in text)


def truncate_string(s: str, max_len: int) -> str:
    """Shorten ``s`` to ``max_len`` characters, ending with an ellipsis."""
    if len(s) <= max_len:
        return s
    if max_len <= 3:
        return "..."
    return s[: max_len - 3] + "..."


def _fit_prefix(text: str, max_width: int) -> str:
    width = 0
    end = 0
    for index, char in enumerate(text):
        char_width = _char_width(char)
        if width + char_width > max_width:
            break
        width += char_width
        end = index + 1
    return text[:end]


def truncate_by_width(s: str, max_width: int) -> str:
    """Shorten ``s`` to a terminal display width, ending with an ellipsis."""
    fitted = _fit_prefix(s, max_width)
    if len(fitted) == len(s):
        return s
    if max_width <= 3:
        return "..."
    return _fit_prefix(fitted, max_width - 3) + "..."


def pad_string(s: str, width: int, align: TextAlign = TextAlign.LEFT) -> str:
    """Pad ``s`` with spaces to a display width using the given alignment."""
    current = _display_width(s)
    if current >= width:
        return s
    padding = width - current
    if align is TextAlign.LEFT:
        return s + " " * padding
    if align is TextAlign.RIGHT:
        return " " * padding + s
    left = padding // 2
    return " " * left + s + " " * (padding - left)


def word_wrap(text: str, width: int) -> list[str]:
    """Wrap ``text`` at word boundaries so lines fit in ``width`` columns."""
    lines: list[str] = []
    for paragraph in text.split("\n"):
        if not paragraph:
            lines.append("")
            continue
        current: list[str] = []
        current_width = 0
        for word in paragraph.split():
            word_width = _display_width(word)
            space = 1 if current else 0
            if current_width + space + word_width <= width:
                current.append(word)
                current_width += space + word_width
            else:
                if current:
                    lines.append(" ".join(current))
                current = [word]
                current_width = word_width
        if current:
            lines.append(" ".join(current))
    return lines


def highlight_matches(text: str, pattern: str, case_sensitive: bool = True) -> str:
    """Highlight every literal occurrence of ``pattern`` in ``text``."""
    if not pattern:
        return text
    flags = 0 if case_sensitive else re.IGNORECASE
    regex = re.compile(re.escape(pattern), flags)
    return regex.sub(lambda match: colorize(match.group(0), "yellow", "bold"), text)


# ---------------------------------------------------------------------------
# Sizes and terminal display
# ---------------------------------------------------------------------------

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")
_SIZE_THRESHOLD = 1024.0


def humanize_size(num_bytes: int) -> str:
    """Render a byte count with a binary unit, such as ``1.5 KB``."""
    if num_bytes < 0:
        raise ValueError("size cannot be negative")
    if num_bytes == 0:
        return "0 B"
    size = float(num_bytes)
    unit = 0
    while size >= _SIZE_THRESHOLD and unit < len(_SIZE_UNITS) - 1:
        size /= _SIZE_THRESHOLD
        unit += 1
    if unit == 0:
        return f"{int(size)} {_SIZE_UNITS[unit]}"
    return f"{size:.1f} {_SIZE_UNITS[unit]}"


def get_terminal_size() -> tuple[int, int]:
    """Return ``(columns, rows)`` of the terminal, or ``(80, 24)``."""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        return (80, 24)
    return (size.columns, size.lines)


def create_separator(width: int, character: str = "─") -> str:
    """Return a line of ``character`` at most 120 columns long."""
    return character * min(width, 120)


def center_text(text: str, width: int) -> str:
    """Center ``text`` within ``width`` display columns."""
    return pad_string(text, width, TextAlign.CENTER)


def create_progress_bar(current: int, total: int, width: int) -> str:
    """Draw a bar of ``width`` cells, filled in proportion to current/total."""
    if total == 0:
        return "█" * width
    filled = (current * width) // total
    if filled > width or filled < 0:
        raise ValueError("progress is outside the range 0..total")
    return "█" * filled + "░" * (width - filled)