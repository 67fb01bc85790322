"""Information about the Go module the CLI is working on."""

from __future__ import annotations

import json
import os
from pathlib import Path

__all__ = [
    "ModuleNameNotFoundError",
    "module_path",
    "build_name",
    "module_name",
    "root_folder",
]

_MODULE_KEYWORD = "module"
_GO_MOD = "go.mod"


class ModuleNameNotFoundError(Exception):
    """Raised when go.mod holds no usable module name."""

    def __init__(self, message: str = "module name not found") -> None:
        super().__init__(message)


def _unquote(text: str) -> str:
    if text.startswith("`"):
        inner = text[1:-1]
        if len(text) < 2 or not text.endswith("`") or "`" in inner:
            raise ValueError(f"malformed quoted string: {text}")
        return inner
    value = json.loads(text)
    if not isinstance(value, str):
        raise ValueError(f"malformed quoted string: {text}")
    return value


def module_path(content: bytes | str) -> str:
    """Return the module path declared in go.mod content, or an empty string."""
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")

    for raw_line in content.split("\n"):
        line = raw_line.split("//", 1)[0].strip()
        if not line.startswith(_MODULE_KEYWORD):
            continue

        rest = line[len(_MODULE_KEYWORD):]
        stripped = rest.strip()
        if len(stripped) == len(rest) or not stripped:
            continue

        if stripped[0] in "\"`":
            try:
                return _unquote(stripped)
            except ValueError:
                return ""

        return stripped

    return ""


def _base(path: str) -> str:
    if not path:
        return "."
    trimmed = path.rstrip("/")
    if not trimmed:
        return "/"
    return trimmed.rsplit("/", 1)[-1]


def build_name() -> str:
    """Return the last element of the module path in ./go.mod.

    Raises OSError when go.mod cannot be read and
    ModuleNameNotFoundError when it declares no module.
    """
    content = Path(_GO_MOD).read_bytes()
    name = _base(module_path(content))
    if name == ".":
        raise ModuleNameNotFoundError()
    return name


def module_name() -> str:
    """Return the full module path from ./go.mod, or an empty string."""
    try:
        content = Path(_GO_MOD).read_bytes()
    except OSError:
        return ""
    return module_path(content)


def root_folder() -> str:
    """Return the nearest folder, from the current one upwards, holding a go.mod."""
    try:
        current = os.getcwd()
    except OSError:
        return ""

    while True:
        if os.path.exists(os.path.join(current, _GO_MOD)):
            return current
        parent = os.path.dirname(current)
        if parent == current:
            return ""
        current = parent