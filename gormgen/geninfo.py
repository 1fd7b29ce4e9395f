"""What is collected for one query struct before its code is written."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol, Sequence, runtime_checkable

__all__ = ["GenInfo", "InterfaceMethod", "MethodParam", "import_pkg_paths"]


@runtime_checkable
class MethodParam(Protocol):
    """A parameter of a custom interface method."""

    pkg_path: str


@runtime_checkable
class InterfaceMethod(Protocol):
    """A custom method parsed from an interface declaration."""

    params: Sequence[MethodParam]

    def is_repeat_from_same_interface(self, other: "InterfaceMethod") -> bool: ...


@dataclass
class GenInfo:
    """A query struct description together with its custom interface methods.

    Attributes not found here are looked up on ``meta``.
    """

    meta: Any
    interfaces: list[Any] = field(default_factory=list)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name in ("meta", "interfaces"):
            raise AttributeError(name)
        return getattr(self.meta, name)

    def append_methods(self, methods: Iterable[InterfaceMethod]) -> None:
        """Add the methods that are not already present."""
        for method in methods:
            if not self.method_in_gen_info(method):
                self.interfaces.append(method)

    def method_in_gen_info(self, method: InterfaceMethod) -> bool:
        """Whether a method repeating ``method`` from the same interface is present."""
        return any(
            existing.is_repeat_from_same_interface(method) for existing in self.interfaces
        )


def import_pkg_paths(data: GenInfo) -> list[str]:
    """Import paths of the struct and of every custom method parameter, without repeats."""
    paths: dict[str, None] = dict.fromkeys(getattr(data.meta, "import_pkg_paths", ()) or ())
    for method in data.interfaces:
        for param in method.params:
            paths.setdefault(param.pkg_path, None)
    return list(paths)