"""
Terminal rendering: download progress and the version menu.
"""

import os
import sys
from typing import Optional, Sequence, TextIO

from wcwidth import wcswidth

# Environment options
USE_COLOR = os.environ.get("KUBEVERSION_COLOR", "1") == "1"

# ANSI color codes
GREEN = "\033[32m"
CYAN = "\033[36m"
DIM = "\033[2m"
RESET = "\033[0m"


def colorize(text: str, color: str) -> str:
    """Apply color to text.

    Args:
        text: Text to colorize
        color: ANSI color code

    Returns:
        Colored text or plain text if colors disabled
    """
    if not USE_COLOR or not text:
        return text
    return f"{color}{text}{RESET}"


def display_width(text: str) -> int:
    """Terminal column width of text."""
    width = wcswidth(text)
    return width if width >= 0 else len(text)


def pad(text: str, width: int) -> str:
    """Left-align text to a display width."""
    return text + " " * max(0, width - display_width(text))


def format_bytes(count: int) -> str:
    """Human-readable byte count (e.g. "48.3 MB")."""
    size = float(count)
    for unit in ("B", "kB", "MB", "GB"):
        if size < 1000 or unit == "GB":
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1000
    return f"{size:.1f} GB"


class ProgressBar:
    """
    Single-line download progress written to a stream.

    Instances are callable with (downloaded, total) so they can be passed as an
    installer progress callback.
    """

    def __init__(self, description: str, stream: Optional[TextIO] = None, width: int = 30):
        self.description = description
        self.stream = stream or sys.stderr
        self.width = width
        self._last_line = ""

    def render(self, downloaded: int, total: Optional[int]) -> str:
        """Build the progress line for the given counts."""
        if total:
            fraction = min(1.0, downloaded / total)
            filled = int(self.width * fraction)
            bar = "█" * filled + " " * (self.width - filled)
            return (
                f"{self.description} {int(fraction * 100):3d}% |{bar}| "
                f"({format_bytes(downloaded)}/{format_bytes(total)})"
            )
        return f"{self.description} ({format_bytes(downloaded)})"

    def __call__(self, downloaded: int, total: Optional[int]) -> None:
        line = self.render(downloaded, total)
        if line == self._last_line:
            return
        self._last_line = line
        self.stream.write("\r" + line)
        self.stream.flush()

    def finish(self) -> None:
        """End the progress line."""
        if self._last_line:
            self.stream.write("\n")
            self.stream.flush()


def render_menu(
    choices: Sequence,
    start: int,
    size: int,
    label: str = "Select Kubectl Version",
) -> str:
    """Render one page of the version menu.

    Args:
        choices: VersionChoice items (version, installed, active)
        start: Index of the first item on the page
        size: Number of items per page
        label: Menu heading

    Returns:
        Multi-line menu text, numbered from 1 across the whole list
    """
    page = choices[start:start + size]
    number_width = len(str(len(choices)))
    version_width = max((display_width(c.version) for c in page), default=0)

    lines = [label]
    for offset, choice in enumerate(page):
        number = str(start + offset + 1).rjust(number_width)
        status = ""
        if choice.active:
            status = colorize("(active)", GREEN)
        elif choice.installed:
            status = colorize("(installed)", CYAN)
        lines.append(f"  {number}) {pad(choice.version, version_width)} {status}".rstrip())

    end = start + len(page)
    lines.append(colorize(f"Showing {start + 1}-{end} of {len(choices)}", DIM) if page else "No versions")
    return "\n".join(lines)
