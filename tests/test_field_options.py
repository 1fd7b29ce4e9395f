import re

import pytest

from gormgen.field_options import (
    AddMethodOpt,
    CreateFieldOpt,
    FilterFieldOpt,
    ModelField,
    ModifyFieldOpt,
    default_table_name,
    field_add_prefix,
    field_add_suffix,
    field_comment,
    field_filter,
    field_gen_type,
    field_gen_type_reg,
    field_gorm_tag,
    field_gorm_tag_reg,
    field_ignore,
    field_ignore_reg,
    field_json_tag,
    field_json_tag_with_ns,
    field_modify,
    field_new,
    field_new_tag,
    field_new_tag_with_ns,
    field_rename,
    field_tag,
    field_trim_prefix,
    field_trim_suffix,
    field_type,
    field_type_reg,
    with_method,
)


def make(column="user_name", name="UserName", type_="string"):
    return ModelField(name=name, type=type_, column_name=column)


def test_field_modify_wraps_function():
    opt = field_modify(lambda f: ModelField(name=f.name.upper()))
    assert isinstance(opt, ModifyFieldOpt)
    assert opt(make()).name == "USERNAME"


def test_field_filter_wraps_function():
    opt = field_filter(lambda f: None)
    assert isinstance(opt, FilterFieldOpt)
    assert opt(make()) is None


def test_field_new_creates_field():
    opt = field_new("Extra", "int64", {"json": "extra"})
    assert isinstance(opt, CreateFieldOpt)
    f = opt()
    assert (f.name, f.type, f.tag) == ("Extra", "int64", {"json": "extra"})


def test_field_ignore():
    opt = field_ignore("a", "user_name")
    assert opt(make()) is None
    other = make(column="age")
    assert opt(other) is other


def test_field_ignore_reg():
    opt = field_ignore_reg("^user_", "^zzz")
    assert opt(make()) is None
    kept = make(column="age")
    assert opt(kept) is kept


def test_field_ignore_reg_searches_inside():
    assert field_ignore_reg("name")(make()) is None


def test_field_ignore_reg_invalid_pattern():
    with pytest.raises(re.error):
        field_ignore_reg("(")


def test_field_rename_only_matching_column():
    opt = field_rename("user_name", "Login")
    assert opt(make()).name == "Login"
    assert opt(make(column="age", name="Age")).name == "Age"


def test_field_comment_single_and_multiline():
    f = field_comment("user_name", "the name")(make())
    assert f.column_comment == "the name"
    assert f.multiline_comment is False
    g = field_comment("user_name", "line1\nline2")(make())
    assert g.multiline_comment is True


def test_field_type_and_reg():
    assert field_type("user_name", "*string")(make()).type == "*string"
    assert field_type("other", "*string")(make()).type == "string"
    assert field_type_reg("_name$", "sql.NullString")(make()).type == "sql.NullString"
    assert field_type_reg("^id$", "sql.NullString")(make()).type == "string"


def test_field_type_reg_invalid_pattern():
    with pytest.raises(re.error):
        field_type_reg("[", "int")


def test_field_gen_type_and_reg():
    assert field_gen_type("user_name", "Field")(make()).custom_gen_type == "Field"
    assert field_gen_type("x", "Field")(make()).custom_gen_type == ""
    assert field_gen_type_reg("user", "Bytes")(make()).custom_gen_type == "Bytes"


def test_field_tag_replaces_tag():
    opt = field_tag("user_name", lambda t: {**t, "xml": "n"})
    f = make()
    f.tag["json"] = "user_name"
    assert opt(f).tag == {"json": "user_name", "xml": "n"}


def test_field_json_tag():
    f = field_json_tag("user_name", "-")(make())
    assert f.tag["json"] == "-"
    assert "json" not in field_json_tag("other", "-")(make()).tag


def test_field_json_tag_with_ns():
    f = field_json_tag_with_ns(lambda c: c.upper())(make())
    assert f.tag["json"] == "USER_NAME"
    assert field_json_tag_with_ns(None)(make()).tag == {}


def test_field_gorm_tag_remove_entry():
    def drop_comment(tag):
        tag.pop("comment", None)
        return tag

    f = make()
    f.gorm_tag = {"comment": ["x"], "column": ["user_name"]}
    assert field_gorm_tag("user_name", drop_comment)(f).gorm_tag == {"column": ["user_name"]}


def test_field_gorm_tag_reg_matches_any():
    def drop_comment(tag):
        tag.pop("comment", None)
        return tag

    opt = field_gorm_tag_reg(".", drop_comment)
    f = make(column="age")
    f.gorm_tag = {"comment": ["c"]}
    assert opt(f).gorm_tag == {}


def test_field_new_tag_merges():
    f = make()
    f.tag["json"] = "user_name"
    f = field_new_tag("user_name", {"json": "name", "form": "name"})(f)
    assert f.tag == {"json": "name", "form": "name"}


def test_field_new_tag_with_ns_default_identity():
    assert field_new_tag_with_ns("form", None)(make()).tag == {"form": "user_name"}
    assert field_new_tag_with_ns("form", lambda c: c + "!")(make()).tag["form"] == "user_name!"


def test_prefix_suffix_round_trip():
    f = make()
    field_add_prefix("Pre")(f)
    field_add_suffix("Post")(f)
    assert f.name == "PreUserNamePost"
    field_trim_prefix("Pre")(f)
    field_trim_suffix("Post")(f)
    assert f.name == "UserName"


def test_trim_only_when_present():
    f = make()
    assert field_trim_prefix("Zz")(f).name == "UserName"
    assert field_trim_suffix("Zz")(f).name == "UserName"


def test_with_method():
    opt = with_method("a", "b")
    assert isinstance(opt, AddMethodOpt)
    assert opt() == ["a", "b"]


class _UpperNamer:
    def table_name(self, table):
        return "prefix_" + table


def test_default_table_name():
    assert default_table_name(None) == "@@table"
    assert default_table_name(_UpperNamer()) == "prefix_@@table"