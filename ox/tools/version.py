"""The version command."""

from __future__ import annotations

import os

__all__ = ["VERSION", "VersionCommand"]

VERSION = "v1.5.3"


class VersionCommand:
    """Prints the version of the CLI."""

    name = "version"
    alias = "v"
    parent_name = ""
    help_text = "returns the current version of ox CLI"

    def run(self, root: str, args: list[str]) -> None:
        """Print the CLI version."""
        print(f"ox version {VERSION}")

    def find_root(self) -> str:
        """Return the current working directory, or an empty string."""
        try:
            return os.getcwd()
        except OSError:
            return ""