"""The new command: creates an application through initializer plugins."""

from __future__ import annotations

import argparse
import os
import shutil
from dataclasses import dataclass, field
from typing import Protocol, Sequence, runtime_checkable

from ox.plugins import Plugin

__all__ = [
    "NoNameProvidedError",
    "FolderExistsError",
    "Options",
    "Initializer",
    "AfterInitializer",
    "NewCommand",
]


class NoNameProvidedError(Exception):
    """Raised when no name is given for the new application."""

    def __init__(self, message: str = "the name for the new app is needed") -> None:
        super().__init__(message)


class FolderExistsError(Exception):
    """Raised when the target folder exists and force is not set."""

    def __init__(self, message: str = "folder already exist") -> None:
        super().__init__(message)


@dataclass
class Options:
    """What the initializers get to know about the new application."""

    folder: str = ""
    name: str = ""
    module: str = ""
    root: str = ""
    args: list[str] = field(default_factory=list)


@runtime_checkable
class Initializer(Protocol):
    """Generates files or runs commands for a new application."""

    def initialize(self, options: Options) -> None:
        """Initialize the application described by ``options``."""
        ...


@runtime_checkable
class AfterInitializer(Protocol):
    """Runs at the end of the application creation process."""

    def after_initialize(self, options: Options) -> None:
        """Finish the application described by ``options``."""
        ...


def _base(path: str) -> str:
    if not path:
        return "."
    trimmed = path.rstrip("/")
    if not trimmed:
        return "/"
    return trimmed.rsplit("/", 1)[-1]


def _remove_all(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    elif os.path.lexists(path):
        os.remove(path)


class NewCommand:
    """Runs the initializers and after-initializers to compose a new app."""

    name = "new"
    parent_name = ""
    help_text = "Generates a new app with registered plugins"

    def __init__(self) -> None:
        self.force = False
        self._initializers: list[Initializer] = []
        self._after_initializers: list[AfterInitializer] = []
        self._parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=self.name, add_help=False, allow_abbrev=False
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            default=False,
            help="clear existing folder if found.",
        )
        return parser

    def run(self, root: str, args: list[str]) -> None:
        """Create the application named by ``args[1]`` inside ``root``."""
        if len(args) < 2:
            raise NoNameProvidedError()

        name = self.app_name(args)
        folder = os.path.join(root, name)

        if os.path.exists(folder) and not self.force:
            raise FolderExistsError()

        _remove_all(folder)

        options = Options(
            folder=folder,
            name=name,
            module=args[1],
            root=root,
            args=list(args),
        )

        for initializer in self._initializers:
            initializer.initialize(options)

        for after in self._after_initializers:
            after.after_initialize(options)

    def receive(self, plugins: Sequence[Plugin]) -> None:
        """Keep the initializers and after-initializers among ``plugins``."""
        for plugin in plugins:
            if isinstance(plugin, Initializer):
                self._initializers.append(plugin)
            if isinstance(plugin, AfterInitializer):
                self._after_initializers.append(plugin)

    def app_name(self, args: list[str]) -> str:
        """Return the last slash-separated element of the module argument."""
        return _base(args[1])

    def parse_flags(self, args: list[str]) -> None:
        """Read the --force flag from ``args``, ignoring anything else."""
        self._parser = self._build_parser()
        try:
            namespace, _ = self._parser.parse_known_args(args)
        except SystemExit:
            return
        self.force = namespace.force

    def flags(self) -> argparse.ArgumentParser:
        """Return the parser holding the flags of this command."""
        return self._parser

    def find_root(self) -> str:
        """Return the current working directory, or an empty string."""
        try:
            return os.getcwd()
        except OSError:
            return ""