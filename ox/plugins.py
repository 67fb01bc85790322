"""Interfaces that plugins implement to take part in the CLI."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

__all__ = [
    "Plugin",
    "Command",
    "RootFinder",
    "Aliaser",
    "FlagParser",
    "HelpTexter",
    "PluginReceiver",
    "Subcommander",
]


@runtime_checkable
class Plugin(Protocol):
    """Anything that can be attached to the CLI; identified by its name."""

    name: str


@runtime_checkable
class Command(Plugin, Protocol):
    """A command the CLI provides, such as build, fix or generate.

    A non-empty ``parent_name`` marks the command as a subcommand of
    the command with that name.
    """

    parent_name: str = ""

    def run(self, root: str, args: list[str]) -> None:
        """Run the command in ``root`` with the given arguments."""
        ...


@runtime_checkable
class RootFinder(Plugin, Protocol):
    """A command that determines its root folder without go.mod."""

    def find_root(self) -> str:
        """Return the path to use as root."""
        ...


@runtime_checkable
class Aliaser(Protocol):
    """A command that can also be invoked by a short alias."""

    alias: str


@runtime_checkable
class FlagParser(Plugin, Protocol):
    """A plugin that reads flags from the command-line arguments."""

    def parse_flags(self, args: list[str]) -> None:
        """Parse the flags found in ``args``."""
        ...

    def flags(self) -> Any:
        """Return the parser holding the flags the plugin understands."""
        ...


@runtime_checkable
class HelpTexter(Protocol):
    """A plugin that describes itself for the help command."""

    help_text: str


@runtime_checkable
class PluginReceiver(Plugin, Protocol):
    """A plugin that needs to see the full list of plugins."""

    def receive(self, plugins: Sequence[Plugin]) -> None:
        """Take what is needed from ``plugins``."""
        ...


@runtime_checkable
class Subcommander(Command, PluginReceiver, Protocol):
    """A command that has subcommands."""

    def subcommands(self) -> list[Command]:
        """Return the subcommands of this command."""
        ...