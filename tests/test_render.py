"""
Tests for terminal rendering (kubeversion/render.py).
"""

import io

from kubeversion.render import ProgressBar, display_width, format_bytes, pad, render_menu
from kubeversion.selector import VersionChoice


class TestFormatting:
    """Tests for small formatting helpers."""

    def test_format_bytes(self):
        """Test byte counts in decimal units."""
        assert format_bytes(512) == "512 B"
        assert format_bytes(48_300_000) == "48.3 MB"
        assert format_bytes(2_500) == "2.5 kB"

    def test_display_width_wide_chars(self):
        """Test wide characters count as two columns."""
        assert display_width("v1") == 2
        assert display_width("版本") == 4

    def test_pad(self):
        """Test padding by display width."""
        assert pad("ab", 4) == "ab  "
        assert pad("abcdef", 4) == "abcdef"


class TestProgressBar:
    """Tests for ProgressBar."""

    def test_render_with_total(self):
        """Test percentage and sizes when length is known."""
        bar = ProgressBar("Downloading kubectl", stream=io.StringIO(), width=10)
        line = bar.render(500, 1000)
        assert line.startswith("Downloading kubectl  50%")
        assert "|█████     |" in line
        assert "(500 B/1.0 kB)" in line

    def test_render_without_total(self):
        """Test byte count only when length is unknown."""
        bar = ProgressBar("Downloading kubectl", stream=io.StringIO())
        assert bar.render(2_500, None) == "Downloading kubectl (2.5 kB)"

    def test_call_writes_and_finish_ends_line(self):
        """Test the callable interface writes carriage-return updates."""
        stream = io.StringIO()
        bar = ProgressBar("dl", stream=stream, width=4)
        bar(1, 2)
        bar(1, 2)
        bar(2, 2)
        bar.finish()

        output = stream.getvalue()
        assert output.count("\r") == 2
        assert output.endswith("\n")

    def test_finish_without_progress(self):
        """Test finish writes nothing when no progress was shown."""
        stream = io.StringIO()
        ProgressBar("dl", stream=stream).finish()
        assert stream.getvalue() == ""


class TestRenderMenu:
    """Tests for render_menu."""

    def test_marks_state(self):
        """Test installed and active annotations."""
        choices = [
            VersionChoice("v1.30.0"),
            VersionChoice("v1.29.0", installed=True, active=True),
            VersionChoice("v1.28.0", installed=True),
        ]
        text = render_menu(choices, 0, 10)
        lines = text.splitlines()

        assert lines[0] == "Select Kubectl Version"
        assert lines[1].strip() == "1) v1.30.0"
        assert "(active)" in lines[2]
        assert "(installed)" in lines[3]
        assert "Showing 1-3 of 3" in lines[4]

    def test_page_numbers_are_global(self):
        """Test numbering continues across pages."""
        choices = [VersionChoice(f"v1.{n}.0") for n in range(30, 18, -1)]
        text = render_menu(choices, 10, 10)
        assert "11) v1.20.0" in text
        assert "12) v1.19.0" in text
        assert "Showing 11-12 of 12" in text

    def test_empty(self):
        """Test an empty filter result."""
        assert render_menu([], 0, 10).splitlines()[-1] == "No versions"
