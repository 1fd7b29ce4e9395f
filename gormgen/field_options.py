"""Options that create, filter or modify the fields of a generated model."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Protocol

__all__ = [
    "ModelField",
    "ModifyFieldOpt",
    "FilterFieldOpt",
    "CreateFieldOpt",
    "AddMethodOpt",
    "TAG_KEY_JSON",
    "field_modify",
    "field_filter",
    "field_new",
    "field_ignore",
    "field_ignore_reg",
    "field_rename",
    "field_comment",
    "field_type",
    "field_type_reg",
    "field_gen_type",
    "field_gen_type_reg",
    "field_tag",
    "field_json_tag",
    "field_json_tag_with_ns",
    "field_gorm_tag",
    "field_gorm_tag_reg",
    "field_new_tag",
    "field_new_tag_with_ns",
    "field_trim_prefix",
    "field_trim_suffix",
    "field_add_prefix",
    "field_add_suffix",
    "with_method",
    "default_table_name",
]

TAG_KEY_JSON = "json"
_TABLE_PLACEHOLDER = "@@table"

Tag = dict[str, str]
GormTag = dict[str, list[str]]


@dataclass
class ModelField:
    """A field of a model struct that is about to be generated."""

    name: str = ""
    type: str = ""
    column_name: str = ""
    column_comment: str = ""
    multiline_comment: bool = False
    tag: Tag = field(default_factory=dict)
    gorm_tag: GormTag = field(default_factory=dict)
    custom_gen_type: str = ""


FieldFunc = Callable[[ModelField], Optional[ModelField]]


@dataclass(frozen=True)
class ModifyFieldOpt:
    """Changes a field in place and returns it."""

    func: FieldFunc

    def __call__(self, f: ModelField) -> Optional[ModelField]:
        return self.func(f)


@dataclass(frozen=True)
class FilterFieldOpt:
    """Returns the field to keep it, or None to drop it."""

    func: FieldFunc

    def __call__(self, f: ModelField) -> Optional[ModelField]:
        return self.func(f)


@dataclass(frozen=True)
class CreateFieldOpt:
    """Produces a new field to add to the model."""

    func: FieldFunc

    def __call__(self, f: Optional[ModelField] = None) -> Optional[ModelField]:
        return self.func(f)  # type: ignore[arg-type]


@dataclass(frozen=True)
class AddMethodOpt:
    """Holds extra methods to attach to a generated model."""

    methods: tuple[Any, ...]

    def __call__(self) -> list[Any]:
        return list(self.methods)


def field_modify(opt: FieldFunc) -> ModifyFieldOpt:
    """Wrap a plain function as a modifying option."""
    return ModifyFieldOpt(opt)


def field_filter(opt: FieldFunc) -> FilterFieldOpt:
    """Wrap a plain function as a filtering option."""
    return FilterFieldOpt(opt)


def field_new(field_name: str, field_type: str, field_tag: Mapping[str, str]) -> CreateFieldOpt:
    """Add a new field of any type."""

    def create(_: Optional[ModelField] = None) -> ModelField:
        return ModelField(name=field_name, type=field_type, tag=dict(field_tag))

    return CreateFieldOpt(create)


def field_ignore(*args: str) -> FilterFieldOpt:
    """Drop the columns with the given names."""
    names = frozenset(args)

    def flt(m: ModelField) -> Optional[ModelField]:
        return None if m.column_name in names else m

    return FilterFieldOpt(flt)


def field_ignore_reg(*args: str) -> FilterFieldOpt:
    """Drop the columns whose names match any of the patterns."""
    patterns = [re.compile(p) for p in args]

    def flt(m: ModelField) -> Optional[ModelField]:
        if any(p.search(m.column_name) for p in patterns):
            return None
        return m

    return FilterFieldOpt(flt)


def _for_column(column_name: str, change: Callable[[ModelField], None]) -> ModifyFieldOpt:
    def modify(m: ModelField) -> ModelField:
        if m.column_name == column_name:
            change(m)
        return m

    return ModifyFieldOpt(modify)


def _for_pattern(column_name_reg: str, change: Callable[[ModelField], None]) -> ModifyFieldOpt:
    pattern = re.compile(column_name_reg)

    def modify(m: ModelField) -> ModelField:
        if pattern.search(m.column_name):
            change(m)
        return m

    return ModifyFieldOpt(modify)


def field_rename(column_name: str, new_name: str) -> ModifyFieldOpt:
    """Set the struct member name of a column."""

    def change(m: ModelField) -> None:
        m.name = new_name

    return _for_column(column_name, change)


def field_comment(column_name: str, comment: str) -> ModifyFieldOpt:
    """Set the comment of a column."""

    def change(m: ModelField) -> None:
        m.column_comment = comment
        m.multiline_comment = "\n" in comment

    return _for_column(column_name, change)


def field_type(column_name: str, new_type: str) -> ModifyFieldOpt:
    """Set the type of a column."""

    def change(m: ModelField) -> None:
        m.type = new_type

    return _for_column(column_name, change)


def field_type_reg(column_name_reg: str, new_type: str) -> ModifyFieldOpt:
    """Set the type of every column matching the pattern."""

    def change(m: ModelField) -> None:
        m.type = new_type

    return _for_pattern(column_name_reg, change)


def field_gen_type(column_name: str, new_type: str) -> ModifyFieldOpt:
    """Set the query field type of a column."""

    def change(m: ModelField) -> None:
        m.custom_gen_type = new_type

    return _for_column(column_name, change)


def field_gen_type_reg(column_name_reg: str, new_type: str) -> ModifyFieldOpt:
    """Set the query field type of every column matching the pattern."""

    def change(m: ModelField) -> None:
        m.custom_gen_type = new_type

    return _for_pattern(column_name_reg, change)


def field_tag(column_name: str, tag_func: Callable[[Tag], Tag]) -> ModifyFieldOpt:
    """Replace the tag of a column with what tag_func returns."""

    def change(m: ModelField) -> None:
        m.tag = tag_func(m.tag)

    return _for_column(column_name, change)


def field_json_tag(column_name: str, json_tag: str) -> ModifyFieldOpt:
    """Set the JSON tag of a column."""

    def change(m: ModelField) -> None:
        m.tag[TAG_KEY_JSON] = json_tag

    return _for_column(column_name, change)


def field_json_tag_with_ns(schema_name: Optional[Callable[[str], str]]) -> ModifyFieldOpt:
    """Set every JSON tag from the column name through schema_name."""

    def modify(m: ModelField) -> ModelField:
        if schema_name is not None:
            m.tag[TAG_KEY_JSON] = schema_name(m.column_name)
        return m

    return ModifyFieldOpt(modify)


def field_gorm_tag(column_name: str, gorm_tag: Callable[[GormTag], GormTag]) -> ModifyFieldOpt:
    """Replace the GORM tag of a column with what gorm_tag returns."""

    def change(m: ModelField) -> None:
        m.gorm_tag = gorm_tag(m.gorm_tag)

    return _for_column(column_name, change)


def field_gorm_tag_reg(
    column_name_reg: str, gorm_tag: Callable[[GormTag], GormTag]
) -> ModifyFieldOpt:
    """Replace the GORM tag of every column matching the pattern."""

    def change(m: ModelField) -> None:
        m.gorm_tag = gorm_tag(m.gorm_tag)

    return _for_pattern(column_name_reg, change)


def field_new_tag(column_name: str, new_tag: Mapping[str, str]) -> ModifyFieldOpt:
    """Add the given tag entries to a column."""

    def change(m: ModelField) -> None:
        m.tag.update(new_tag)

    return _for_column(column_name, change)


def field_new_tag_with_ns(
    tag_name: str, schema_name: Optional[Callable[[str], str]]
) -> ModifyFieldOpt:
    """Add a tag to every field, valued from the column name through schema_name."""
    namer = schema_name if schema_name is not None else (lambda name: name)

    def modify(m: ModelField) -> ModelField:
        m.tag[tag_name] = namer(m.column_name)
        return m

    return ModifyFieldOpt(modify)


def field_trim_prefix(prefix: str) -> ModifyFieldOpt:
    """Remove a prefix from every member name."""

    def modify(m: ModelField) -> ModelField:
        m.name = m.name.removeprefix(prefix)
        return m

    return ModifyFieldOpt(modify)


def field_trim_suffix(suffix: str) -> ModifyFieldOpt:
    """Remove a suffix from every member name."""

    def modify(m: ModelField) -> ModelField:
        m.name = m.name.removesuffix(suffix)
        return m

    return ModifyFieldOpt(modify)


def field_add_prefix(prefix: str) -> ModifyFieldOpt:
    """Prepend a prefix to every member name."""

    def modify(m: ModelField) -> ModelField:
        m.name = prefix + m.name
        return m

    return ModifyFieldOpt(modify)


def field_add_suffix(suffix: str) -> ModifyFieldOpt:
    """Append a suffix to every member name."""

    def modify(m: ModelField) -> ModelField:
        m.name = m.name + suffix
        return m

    return ModifyFieldOpt(modify)


def with_method(*args: Any) -> AddMethodOpt:
    """Attach custom methods to a generated model."""
    return AddMethodOpt(tuple(args))


class Namer(Protocol):
    def table_name(self, table: str) -> str: ...


def default_table_name(namer: Optional[Namer]) -> str:
    """Table name placeholder, passed through the namer when one is given."""
    if namer is None:
        return _TABLE_PLACEHOLDER
    return namer.table_name(_TABLE_PLACEHOLDER)