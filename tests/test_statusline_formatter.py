"""Tests for claude_statusline.services.statusline_formatter."""

from claude_statusline.services.statusline_formatter import (
    SEPARATOR,
    build_segments,
    format_statusline,
)
from claude_statusline.types.session import ModelFamily
from claude_statusline.types.usage import ContextEstimate

CONTEXT = ContextEstimate(used_percent=44, total_tokens=88_160, display_tokens="88.2k")


class TestBuildSegments:
    def test_all_segments(self):
        segments = build_segments(ModelFamily.SONNET, "main", "[●1 ~2]", "myapp", CONTEXT, 0.42)
        assert segments == [
            "🟠 sonnet",
            "⎇ main [●1 ~2]",
            "📁 myapp",
            "📐 44%",
            "📊 88.2k",
            "💰 $0.42",
        ]

    def test_branch_without_status(self):
        segments = build_segments(ModelFamily.OPUS, "main", "", "myapp", None, None)
        assert segments[1] == "⎇ main"

    def test_no_branch_omits_segment(self):
        segments = build_segments(ModelFamily.OPUS, "", "", "myapp", None, None)
        assert segments == ["🟣 opus", "📁 myapp", "💰 $0.00"]

    def test_context_segments_absent_together(self):
        segments = build_segments(ModelFamily.HAIKU, "", "", "p", None, 1.0)
        assert not any(s.startswith(("📐", "📊")) for s in segments)

    def test_over_hundred_percent(self):
        ctx = ContextEstimate(used_percent=104, total_tokens=208_000, display_tokens="208.0k")
        segments = build_segments(ModelFamily.OPUS, "", "", "p", ctx, None)
        assert "📐 104%" in segments


class TestFormatStatusline:
    def test_joined_with_separator(self):
        line = format_statusline(ModelFamily.HAIKU, "", "", "proj", None, 1.234)
        assert line == "🟢 haiku │ 📁 proj │ 💰 $1.23"
        assert SEPARATOR == " │ "
