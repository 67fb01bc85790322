"""The generate command: dispatches to registered generator plugins."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ox import log
from ox.plugins import HelpTexter, Plugin

__all__ = ["GenerateError", "Generator", "AfterGenerator", "GenerateCommand"]


class GenerateError(Exception):
    """Raised when the generate command cannot pick a generator."""


@runtime_checkable
class Generator(Protocol):
    """A plugin that generates code, picked by its invocation name."""

    name: str
    invocation_name: str

    def generate(self, root: str, args: list[str]) -> None:
        """Generate files inside ``root`` according to ``args``."""
        ...


@runtime_checkable
class AfterGenerator(Protocol):
    """A plugin that runs after any generator has been executed."""

    name: str

    def after_generate(self, root: str, args: list[str]) -> None:
        """React to a generator run in ``root`` with ``args``."""
        ...


def _format_table(rows: list[list[str]], minwidth: int = 8, padding: int = 3) -> str:
    """Align tab-separated cells; the last cell of each row is not aligned."""
    columns = max((len(row) - 1 for row in rows), default=0)
    widths = []
    for column in range(columns):
        widest = max(
            (len(row[column]) for row in rows if len(row) - 1 > column), default=0
        )
        widths.append(max(minwidth, widest + padding))

    lines = []
    for row in rows:
        aligned = "".join(cell.ljust(width) for cell, width in zip(row[:-1], widths))
        lines.append(aligned + row[-1])
    return "\n".join(lines)


class GenerateCommand:
    """Invokes the generator named by the second argument."""

    name = "generate"
    alias = "g"
    parent_name = ""
    help_text = "Allows to invoke registered generator plugins"

    def __init__(self) -> None:
        self._generators: list[Generator] = []
        self._after_generators: list[AfterGenerator] = []

    def run(self, root: str, args: list[str]) -> None:
        """Run the matching generator, then every after-generator.

        Raises GenerateError when no generator name is given or none
        matches it; an error from the generator itself is raised after
        the after-generators have run.
        """
        if len(args) < 2:
            self._list()
            raise GenerateError("no generator name specified")

        wanted = args[1]
        generator = next(
            (g for g in self._generators if g.invocation_name == wanted), None
        )
        if generator is None:
            self._list()
            raise GenerateError(f"generator `{wanted}` not found")

        try:
            generator.generate(root, args)
        finally:
            for after in self._after_generators:
                try:
                    after.after_generate(root, args)
                except Exception as exc:  # noqa: BLE001 - reported, not propagated
                    log.error(f"Error running after generator {after.name}: {exc}")

    def _list(self) -> None:
        print("Available Generators:\n")
        rows = [["  Name", "Plugin"], ["  ----", "------"]]
        for generator in self._generators:
            help_text = generator.help_text if isinstance(generator, HelpTexter) else ""
            rows.append([f"  {generator.invocation_name}", generator.name, help_text])
        rows.append([""])
        print(_format_table(rows))

    def receive(self, plugins: Sequence[Plugin]) -> None:
        """Keep the generators and after-generators among ``plugins``."""
        self._generators.extend(p for p in plugins if isinstance(p, Generator))
        self._after_generators.extend(
            p for p in plugins if isinstance(p, AfterGenerator)
        )