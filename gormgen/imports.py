"""Ordered, de-duplicated lists of quoted import paths for generated code."""

from __future__ import annotations

from typing import Iterable

__all__ = ["ImportList", "default_import_list", "unit_test_import_list"]


class ImportList:
    """An immutable list of quoted import paths; empty strings separate groups."""

    __slots__ = ("_paths",)

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths = tuple(paths)

    def add(self, *args: str) -> "ImportList":
        """Return a new list with the given paths appended, then a blank separator.

        Paths are stripped and quoted; a path already present is skipped.
        """
        added = []
        for path in args:
            path = path.strip()
            if not path:
                added.append(path)
                continue
            if not path.endswith('"'):
                path = f'"{path}"'
            if path not in self._paths:
                added.append(path)
        added.append("")
        return ImportList(self._paths + tuple(added))

    def paths(self) -> list[str]:
        """Return the paths in order."""
        return list(self._paths)

    def __repr__(self) -> str:
        return f"ImportList({list(self._paths)!r})"


def default_import_list() -> ImportList:
    """Imports every generated query file starts from."""
    return ImportList().add(
        "context",
        "database/sql",
        "strings",
        "",
        "gorm.io/gorm",
        "gorm.io/gorm/schema",
        "gorm.io/gorm/clause",
        "",
        "gorm.io/gen",
        "gorm.io/gen/field",
        "gorm.io/gen/helper",
        "",
        "gorm.io/plugin/dbresolver",
    )


def unit_test_import_list() -> ImportList:
    """Imports every generated unit test file starts from."""
    return ImportList().add(
        "context",
        "fmt",
        "strconv",
        "testing",
        "",
        "gorm.io/driver/sqlite",
        "gorm.io/gorm",
    )