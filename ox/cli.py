"""The command-line front end: finds the requested command and runs it."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Iterable

from ox import info, log
from ox.lifecycle.dev import DevCommand
from ox.lifecycle.fix import FixCommand
from ox.lifecycle.generate import GenerateCommand
from ox.lifecycle.new import NewCommand
from ox.plugins import (
    Aliaser,
    Command,
    FlagParser,
    Plugin,
    PluginReceiver,
    RootFinder,
)
from ox.tools.help import HelpCommand
from ox.tools.template import TemplateGenerator
from ox.tools.version import VersionCommand

__all__ = [
    "Cli",
    "base_plugins",
    "use",
    "remove",
    "clear",
    "run",
    "wrap",
    "main",
]

_LOCAL_MAIN = os.path.join("cmd", "ox", "main.go")


def base_plugins() -> list[Plugin]:
    """Return a fresh list of the plugins the CLI ships with."""
    return [
        HelpCommand(),
        VersionCommand(),
        DevCommand(),
        FixCommand(),
        GenerateCommand(),
        NewCommand(),
        TemplateGenerator(),
    ]


class Cli:
    """Holds the plugins and dispatches arguments to the matching command."""

    def __init__(self, plugins: Iterable[Plugin] | None = None) -> None:
        self.plugins: list[Plugin] = list(plugins) if plugins is not None else []

    def find_command(self, name: str) -> Command | None:
        """Return the top-level command whose name or alias is ``name``."""
        for plugin in self.plugins:
            if not isinstance(plugin, Command) or plugin.parent_name != "":
                continue
            if isinstance(plugin, Aliaser) and plugin.alias == name:
                return plugin
            if plugin.name == name:
                return plugin
        return None

    def wrap(self, args: list[str]) -> None:
        """Run the project's own cmd/ox/main.go if present, else run here.

        Raises subprocess.CalledProcessError when the delegated program
        exits with a failure.
        """
        os.environ["GO111MODULE"] = "on"
        os.environ["CGO_ENABLED"] = "0"

        if not os.path.exists(_LOCAL_MAIN) or info.module_name() == "":
            log.info("Using built-in ox commands \n")
            self.run(args)
            return

        log.info(f"Using {_LOCAL_MAIN} \n")
        subprocess.run(["go", "run", _LOCAL_MAIN, *args[1:]], check=True)

    def run(self, args: list[str]) -> None:
        """Run the command named by ``args[1]`` with ``args[1:]``.

        Raises FileNotFoundError when the command needs a go.mod and
        none is found.
        """
        if len(args) < 2:
            log.error("no command provided, please provide one")
            return

        for plugin in self.plugins:
            if isinstance(plugin, FlagParser):
                plugin.parse_flags(args[1:])
            if isinstance(plugin, PluginReceiver):
                plugin.receive(self.plugins)

        command = self.find_command(args[1])
        if command is None:
            log.info(f"did not find {args[1]} command\n")
            return

        root = info.root_folder()
        if root == "":
            if not isinstance(command, RootFinder):
                raise FileNotFoundError("go.mod not found")
            root = command.find_root()

        command.run(root, args[1:])

    def use(self, *args: Plugin) -> None:
        """Append the given plugins."""
        self.plugins.extend(args)

    def remove(self, *args: str) -> None:
        """Drop every plugin whose name is among ``args``."""
        names = set(args)
        self.plugins = [p for p in self.plugins if p.name not in names]

    def clear(self) -> None:
        """Remove all plugins."""
        self.plugins = []


_shared = Cli(base_plugins())


def use(*args: Plugin) -> None:
    """Add plugins to the shared CLI."""
    _shared.use(*args)


def remove(*args: str) -> None:
    """Remove plugins by name from the shared CLI."""
    _shared.remove(*args)


def clear() -> None:
    """Remove all plugins from the shared CLI."""
    _shared.clear()


def run(args: list[str]) -> None:
    """Run the shared CLI with ``args``."""
    _shared.run(args)


def wrap(args: list[str]) -> None:
    """Run cmd/ox/main.go if found, otherwise the shared CLI."""
    _shared.wrap(args)


def main(argv: list[str] | None = None) -> int:
    """Entry point of the ox command; returns the exit status."""
    args = list(sys.argv if argv is None else argv)
    try:
        wrap(args)
    except Exception as exc:  # noqa: BLE001 - reported as exit status
        log.error(str(exc))
        return 1
    return 0