"""Interfaces for describing a model object by hand, and their validation."""

from __future__ import annotations

from typing import Mapping, Protocol, Sequence, runtime_checkable

__all__ = ["Object", "Field", "ObjectError", "check_object"]


@runtime_checkable
class Field(Protocol):
    """One field of a described object."""

    def name(self) -> str: ...

    def type(self) -> str: ...

    def column_name(self) -> str: ...

    def gorm_tag(self) -> str: ...

    def json_tag(self) -> str: ...

    def tag(self) -> Mapping[str, str]: ...

    def comment(self) -> str: ...


@runtime_checkable
class Object(Protocol):
    """A model object described without a database table."""

    def table_name(self) -> str: ...

    def struct_name(self) -> str: ...

    def file_name(self) -> str: ...

    def import_pkg_paths(self) -> Sequence[str]: ...

    def fields(self) -> Sequence[Field]: ...


class ObjectError(ValueError):
    """Raised when an object description is incomplete."""


def check_object(obj: Object) -> Object:
    """Validate an object description and return it unchanged."""
    struct_name = obj.struct_name()
    if not struct_name:
        raise ObjectError("object's struct name cannot be empty")
    for field in obj.fields():
        if not field.name():
            raise ObjectError(f"object {struct_name}'s field name cannot be empty")
        if not field.type():
            raise ObjectError(f"object {struct_name}'s field type cannot be empty")
    return obj