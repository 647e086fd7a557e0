"""
Interactive version selection.

The orchestrator only depends on the Selector protocol: given the annotated
candidates it returns the chosen version, or None / raises UserCancelled when
the user backs out. TerminalSelector is the line-based implementation used by
the CLI.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence, TextIO

from .errors import UserCancelled
from .render import render_menu

PAGE_SIZE = 10

HELP_TEXT = "Enter a number to select, n/p for next/previous page, /text to filter, q to quit"


@dataclass(frozen=True)
class VersionChoice:
    """
    A remote version annotated with local state.

    Attributes:
        version: Canonical version identifier
        installed: Whether the version is in the version store
        active: Whether the version is the current symlink target
    """
    version: str
    installed: bool = False
    active: bool = False


class Selector(Protocol):
    def select(self, choices: Sequence[VersionChoice]) -> Optional[str]:
        ...


class TerminalSelector:
    """
    Paged, numbered menu driven by line input.

    Attributes:
        page_size: Entries shown per page
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
        page_size: int = PAGE_SIZE,
        interactive: Optional[bool] = None,
    ):
        self.input_func = input_func
        self.output = output or sys.stdout
        self.page_size = page_size
        self.interactive = sys.stdin.isatty() if interactive is None else interactive

    def _print(self, text: str) -> None:
        print(text, file=self.output)

    def select(self, choices: Sequence[VersionChoice]) -> Optional[str]:
        """
        Prompt until the user picks a version or cancels.

        Raises:
            UserCancelled: On q, EOF, Ctrl-C or a non-interactive stdin
        """
        if not self.interactive:
            # Non-interactive (CI/CD)
            raise UserCancelled("stdin is not a terminal")

        visible = list(choices)
        start = 0
        self._print(HELP_TEXT)

        while True:
            self._print(render_menu(visible, start, self.page_size))
            try:
                response = self.input_func("> ").strip()
            except (EOFError, KeyboardInterrupt) as e:
                raise UserCancelled("selection interrupted") from e

            lowered = response.lower()
            if lowered in ("q", "quit"):
                raise UserCancelled("selection cancelled")
            elif lowered == "n":
                if start + self.page_size < len(visible):
                    start += self.page_size
            elif lowered == "p":
                start = max(0, start - self.page_size)
            elif response.startswith("/"):
                needle = response[1:].strip().lower()
                visible = [c for c in choices if needle in c.version.lower()]
                start = 0
            elif response.isdigit() and 1 <= int(response) <= len(visible):
                return visible[int(response) - 1].version
            elif response:
                self._print(f"Invalid selection: {response}")
