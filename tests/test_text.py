import re
from datetime import datetime

import pytest

from rgitkit.text import (
    TextAlign,
    center_text,
    colorize,
    create_progress_bar,
    create_separator,
    current_time,
    format_date,
    format_local_date,
    format_time,
    format_time_ago,
    get_terminal_size,
    highlight_matches,
    humanize_size,
    pad_string,
    truncate_by_width,
    truncate_string,
    word_wrap,
)

NOW = 1_700_000_000


@pytest.fixture
def color_on(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("CLICOLOR", raising=False)
    monkeypatch.setenv("CLICOLOR_FORCE", "1")


def test_time_formatting_minutes():
    assert "minute" in format_time_ago(NOW - 300, NOW)
    assert format_time_ago(NOW - 300, NOW) == "5 minutes ago"


def test_time_formatting_default_now():
    assert "minute" in format_time_ago(current_time() - 300)


@pytest.mark.parametrize(
    "diff, expected",
    [
        (0, "just now"),
        (59, "just now"),
        (60, "1 minute ago"),
        (3599, "59 minutes ago"),
        (3600, "1 hour ago"),
        (7200, "2 hours ago"),
        (86400, "1 day ago"),
        (2591999, "29 days ago"),
        (2592000, "1 month ago"),
        (31535999, "12 months ago"),
        (31536000, "1 year ago"),
        (3 * 31536000, "3 years ago"),
    ],
)
def test_format_time_ago_ranges(diff, expected):
    assert format_time_ago(NOW - diff, NOW) == expected


def test_format_time_ago_future():
    assert format_time_ago(NOW + 10, NOW) == "0 years ago"


def test_format_time_epoch():
    assert format_time(0) == "1970-01-01 00:00:00"
    assert format_date(0) == "1970-01-01 00:00:00 UTC"


def test_format_date_known_value():
    assert format_date(NOW) == "2023-11-14 22:13:20 UTC"


def test_format_local_date_round_trip():
    result = format_local_date(NOW)
    assert len(result) == 19
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", result) is not None
    parsed = datetime.strptime(result, "%Y-%m-%d %H:%M:%S")
    assert int(parsed.timestamp()) == NOW


def test_string_truncation():
    assert truncate_string("hello world", 5) == "he..."
    assert truncate_string("hello", 10) == "hello"
    assert truncate_string("hello", 3) == "..."


def test_truncate_by_width_ascii():
    assert truncate_by_width("hello world", 8) == "hello..."
    assert truncate_by_width("hello", 5) == "hello"
    assert truncate_by_width("hello world", 2) == "..."


def test_truncate_by_width_wide_chars():
    # each CJK character takes two columns
    assert truncate_by_width("日本語テキスト", 7) == "日本..."


def test_pad_string_alignments():
    assert pad_string("ab", 5, TextAlign.LEFT) == "ab   "
    assert pad_string("ab", 5, TextAlign.RIGHT) == "   ab"
    assert pad_string("ab", 5, TextAlign.CENTER) == " ab  "
    assert pad_string("abcdef", 3, TextAlign.LEFT) == "abcdef"


def test_pad_string_wide():
    assert pad_string("日", 4, TextAlign.LEFT) == "日  "


def test_word_wrap():
    text = "This is a long line that should be wrapped at word boundaries"
    wrapped = word_wrap(text, 20)
    assert len(wrapped) > 1
    assert all(len(line) <= 20 for line in wrapped)
    assert " ".join(wrapped) == text


def test_word_wrap_paragraphs():
    assert word_wrap("one two\n\nthree", 7) == ["one two", "", "three"]


def test_word_wrap_long_word():
    assert word_wrap("abcdefghij xy", 5) == ["abcdefghij", "xy"]


def test_highlight_matches(color_on):
    assert highlight_matches("abc", "b", True) == "a\x1b[1;33mb\x1b[0mc"
    assert highlight_matches("aBc", "b", True) == "aBc"
    assert highlight_matches("aBc", "b", False) == "a\x1b[1;33mB\x1b[0mc"


def test_highlight_escapes_pattern(color_on):
    assert highlight_matches("a.b axb", ".", True) == "a\x1b[1;33m.\x1b[0mb axb"


def test_highlight_empty_pattern():
    assert highlight_matches("text", "", True) == "text"


def test_colorize_no_color(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    assert colorize("x", "red") == "x"


def test_colorize_codes(color_on):
    assert colorize("x", "green") == "\x1b[32mx\x1b[0m"
    assert colorize("x", "dimmed") == "\x1b[2mx\x1b[0m"


def test_colorize_unknown():
    with pytest.raises(ValueError):
        colorize("x", "sparkly")


def test_size_formatting():
    assert humanize_size(0) == "0 B"
    assert humanize_size(1024) == "1.0 KB"
    assert humanize_size(1536) == "1.5 KB"
    assert humanize_size(1048576) == "1.0 MB"
    assert humanize_size(512) == "512 B"


def test_size_negative():
    with pytest.raises(ValueError):
        humanize_size(-1)


def test_terminal_size_positive():
    columns, rows = get_terminal_size()
    assert columns > 0 and rows > 0


def test_separator():
    assert create_separator(5, "-") == "-----"
    assert len(create_separator(500, "=")) == 120


def test_center_text():
    assert center_text("hi", 6) == "  hi  "
    assert center_text("hi", 5) == " hi  "
    assert center_text("hello", 3) == "hello"


def test_progress_bar():
    progress = create_progress_bar(50, 100, 20)
    assert len(progress) == 20
    assert "█" in progress
    assert "░" in progress
    assert progress == "█" * 10 + "░" * 10


def test_progress_bar_zero_total():
    assert create_progress_bar(0, 0, 4) == "████"


def test_progress_bar_overflow():
    with pytest.raises(ValueError):
        create_progress_bar(200, 100, 10)


def test_current_time_close_to_reference():
    assert current_time() > NOW