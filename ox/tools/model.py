"""Model attributes and the imports a generated model needs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

__all__ = ["Attr", "build_attrs", "default_attrs", "build_imports"]

_DEFAULTS = ("id:uuid", "created_at:timestamp", "updated_at:timestamp")

_GO_TYPES = {
    "text": "string",
    "timestamp": "time.Time",
    "datetime": "time.Time",
    "date": "time.Time",
    "time": "time.Time",
    "nulls.bool": "nulls.Bool",
    "nulls.int": "nulls.Int",
    "nulls.decimal": "nulls.Float64",
    "nulls.float": "nulls.Float64",
    "nulls.text": "nulls.String",
    "nulls.time": "nulls.Time",
    "nulls.uuid": "nulls.UUID",
    "uuid": "uuid.UUID",
    "json": "slices.Map",
    "jsonb": "slices.Map",
    "[]string": "slices.String",
    "[]int": "slices.Int",
    "slices.float": "slices.Float",
    "[]float": "slices.Float",
    "[]float32": "slices.Float",
    "[]float64": "slices.Float",
    "decimal": "float64",
    "float": "float64",
    "[]byte": "[]byte",
    "blob": "[]byte",
}


@dataclass(frozen=True)
class Attr:
    """A model attribute: its name and the type it was declared with."""

    name: str
    common_type: str

    def go_type(self) -> str:
        """Return the Go type that corresponds to the declared type."""
        return _GO_TYPES.get(self.common_type.lower(), self.common_type)


def default_attrs(args: list[str]) -> list[str]:
    """Return the default attribute declarations that ``args`` does not define."""
    if not args:
        return list(_DEFAULTS)

    declared = {arg.split(":")[0].lower() for arg in args}
    return [d for d in _DEFAULTS if d.split(":")[0] not in declared]


def build_attrs(args: list[str]) -> list[Attr]:
    """Turn ``name[:type]`` declarations into attributes, defaults first."""
    attrs = []
    for arg in [*default_attrs(args), *args]:
        parts = arg.split(":")
        common_type = parts[1] if len(parts) > 1 else "string"
        attrs.append(Attr(name=parts[0], common_type=common_type.lower()))
    return attrs


def build_imports(attrs: Iterable[Attr]) -> list[str]:
    """Return the sorted Go imports needed by a model with ``attrs``."""
    imports = {"fmt"}
    for attr in attrs:
        go_type = attr.go_type()
        if go_type in ("uuid", "uuid.UUID"):
            imports.add("github.com/gofrs/uuid")
        elif go_type == "time.Time":
            imports.add("time")
        else:
            if go_type.startswith("nulls"):
                imports.add("github.com/gobuffalo/nulls")
            if go_type.startswith("slices"):
                imports.add("github.com/gobuffalo/pop/v5/slices")
    return sorted(imports)