"""The help command: describes the registered commands."""

from __future__ import annotations

import sys
from typing import Sequence

from ox.plugins import (
    Aliaser,
    Command,
    FlagParser,
    HelpTexter,
    Plugin,
    Subcommander,
)

__all__ = ["HelpCommand"]


def _table(rows: list[list[str]], minwidth: int = 8, padding: int = 3) -> list[str]:
    """Align cells in columns; the last cell of each row is left as is."""
    columns = max((len(row) - 1 for row in rows), default=0)
    widths = [
        max(
            minwidth,
            max((len(row[c]) for row in rows if len(row) - 1 > c), default=0)
            + padding,
        )
        for c in range(columns)
    ]
    return [
        "".join(cell.ljust(width) for cell, width in zip(row[:-1], widths)) + row[-1]
        for row in rows
    ]


def _help_text(plugin: object) -> str:
    return plugin.help_text if isinstance(plugin, HelpTexter) else ""


class HelpCommand:
    """Prints help for all commands, or for the command named in the args."""

    name = "help"
    alias = "h"
    parent_name = ""
    help_text = "prints help text for the commands registered"

    def __init__(self) -> None:
        self._commands: list[Command] = []

    def run(self, root: str, args: list[str]) -> None:
        """Print help for the command named by ``args``, or the top level."""
        command, names = self.find_command(args)
        if command is None:
            self._print_top_level()
            return
        self._print_single(command, names)

    def find_command(self, args: list[str]) -> tuple[Command | None, list[str]]:
        """Follow ``args[1:]`` through commands and subcommands.

        Returns the deepest command found and the names used to reach it.
        """
        if len(args) < 2:
            return None, []

        commands: Sequence[Command] = self._commands
        command: Command | None = None
        found: list[str] = []
        index = 1

        while True:
            wanted = args[index]
            for candidate in commands:
                if not isinstance(candidate, Aliaser):
                    if candidate.name != wanted:
                        continue
                    found.append(candidate.name)
                    command = candidate
                    break

                if candidate.alias != wanted and candidate.name != wanted:
                    continue

                if candidate.name == wanted:
                    found.append(candidate.name)
                else:
                    found.append(candidate.alias)
                command = candidate
                break

            index += 1
            if index >= len(args) or not isinstance(command, Subcommander):
                break
            commands = command.subcommands()

        return command, found

    def receive(self, plugins: Sequence[Plugin]) -> None:
        """Keep the top-level commands among ``plugins``."""
        self._commands.extend(
            p for p in plugins if isinstance(p, Command) and p.parent_name == ""
        )

    def _print_single(self, command: Command, names: list[str]) -> None:
        if isinstance(command, HelpTexter):
            print(f"{command.help_text}\n")

        print("Usage:")
        is_subcommander = isinstance(command, Subcommander)
        if is_subcommander:
            usage = f"  ox {command.name} [subcommand]\n"
        elif command.parent_name:
            usage = f"  ox {' '.join(names)} \n"
        else:
            usage = f"  ox {command.name} \n"
        print(usage)

        if is_subcommander:
            print("Subcommands:")
            rows = [
                [f"  {sub.name}", _help_text(sub)]
                for sub in command.subcommands()
                if sub.parent_name
            ]
            for line in _table(rows):
                print(line)

        if isinstance(command, Aliaser):
            print("Alias:")
            print(command.alias)
            print("")

        if isinstance(command, FlagParser):
            print("Flags:")
            flags = command.flags()
            format_help = getattr(flags, "format_help", None)
            if format_help is not None:
                sys.stderr.write(format_help())
            print("")

    def _print_top_level(self) -> None:
        print("ox allows to build apps with ease\n")
        print("Usage:")
        print("  ox [command]\n")
        print("Commands:")
        print("Command\t     Alias")

        rows = []
        for command in self._commands:
            alias = command.alias if isinstance(command, Aliaser) else ""
            rows.append([f"  {command.name}", alias, _help_text(command)])
        for line in _table(rows):
            print(line)