"""The fix command: adapts source code to newer versions of the CLI."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ox import log
from ox.plugins import Plugin

__all__ = ["Fixer", "FixCommand"]


@runtime_checkable
class Fixer(Protocol):
    """A plugin that fixes part of the code to match newer tool versions."""

    name: str

    def fix(self, root: str, args: list[str]) -> None:
        """Apply the fix inside ``root``."""
        ...


class FixCommand:
    """Lists the registered fixers."""

    name = "fix"
    parent_name = ""
    help_text = "adapts the source code to comply with newer versions of the CLI"

    def __init__(self) -> None:
        self._fixers: list[Fixer] = []

    def run(self, root: str, args: list[str]) -> None:
        """Announce the fix run and print each registered fixer."""
        log.info("Running fix command")
        for fixer in self._fixers:
            print(f"Fixer: {fixer.name}")

    def receive(self, plugins: Sequence[Plugin]) -> None:
        """Keep the fixers among ``plugins``."""
        self._fixers.extend(p for p in plugins if isinstance(p, Fixer))