"""The dev command: runs development plugins side by side."""

from __future__ import annotations

import threading
from typing import Protocol, Sequence, runtime_checkable

from ox import log
from ox.plugins import Plugin

__all__ = ["Developer", "BeforeDeveloper", "DevCommand"]


@runtime_checkable
class Developer(Protocol):
    """A tool invoked for development, such as a watcher or a reloader."""

    name: str

    def develop(self, root: str) -> None:
        """Run the development task in ``root``."""
        ...


@runtime_checkable
class BeforeDeveloper(Protocol):
    """A tool that must run before the developers start."""

    name: str

    def before_develop(self, root: str) -> None:
        """Prepare ``root`` for development."""
        ...


class DevCommand:
    """Runs every before-developer in turn, then all developers in parallel."""

    name = "dev"
    alias = "d"
    parent_name = ""
    help_text = "calls NPM or yarn to start webpack watching the assets"

    def __init__(self) -> None:
        self._developers: list[Developer] = []
        self._before_developers: list[BeforeDeveloper] = []

    def run(self, root: str, args: list[str]) -> None:
        """Run before-developers, then developers, each on its own thread.

        An error from a before-developer stops the command; errors from
        developers are logged.
        """
        for before in self._before_developers:
            before.before_develop(root)

        threads = [
            threading.Thread(target=self._develop, args=(developer, root), daemon=True)
            for developer in self._developers
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    @staticmethod
    def _develop(developer: Developer, root: str) -> None:
        try:
            developer.develop(root)
        except Exception as exc:  # noqa: BLE001 - reported, not propagated
            log.error(str(exc))

    def receive(self, plugins: Sequence[Plugin]) -> None:
        """Keep the developers and before-developers among ``plugins``."""
        for plugin in plugins:
            if isinstance(plugin, Developer):
                self._developers.append(plugin)
            if isinstance(plugin, BeforeDeveloper):
                self._before_developers.append(plugin)