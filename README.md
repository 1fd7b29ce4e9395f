# gormgen

Building blocks for a generator of typed data-access code. You describe
models through their fields and tables. The package then assembles SQL
clause fragments and import lists, and it writes formatted output files.

## Installation

```
pip install gormgen
```

To run the tests:

```
pip install "gormgen[test]"
pytest
```

## Modules

- `gormgen.clause` assembles SQL fragments for `WHERE`, `SET` and
  conditional clauses, and strips a dangling leading or trailing `AND`,
  `OR`, `XOR` or comma. It provides `if_clause`, `where_clause`,
  `set_clause`, `trim_all`, `join_where`, `join_set` and `join_trim_all`.
  Conditions for `if_clause` are `Cond(cond, result)` values.
- `gormgen.objects` holds the `Object` and `Field` protocols for a model
  that you describe by hand. `check_object` raises `ObjectError` when the
  struct name, a field name or a field type is empty. Otherwise it returns
  the object unchanged.
- `gormgen.imports` provides `ImportList`, an immutable, ordered and
  de-duplicated list of quoted import paths. Empty strings separate the
  blocks. `add(*paths)` returns a new list and `paths()` returns the
  entries. `default_import_list()` and `unit_test_import_list()` give the
  standard starting sets.
- `gormgen.field_options` holds the `ModelField` dataclass and the options
  that act on it while a model is built. Modifying options return the
  field, filtering options return `None` to drop it, and creating options
  return a new field. The modifying options are `field_rename`,
  `field_comment`, `field_type`, `field_type_reg`, `field_gen_type`,
  `field_gen_type_reg`, `field_tag`, `field_json_tag`,
  `field_json_tag_with_ns`, `field_gorm_tag`, `field_gorm_tag_reg`,
  `field_new_tag`, `field_new_tag_with_ns`, `field_trim_prefix`,
  `field_trim_suffix`, `field_add_prefix` and `field_add_suffix`. The
  filtering options are `field_ignore` and `field_ignore_reg`, and
  `field_new` creates a field. The module also has `field_modify`,
  `field_filter`, `with_method` and `default_table_name`.
- `gormgen.geninfo` provides `GenInfo`, which pairs a query struct
  description with its custom interface methods and skips repeated
  methods. `import_pkg_paths` collects the import paths of the struct and
  of every method parameter, without repeats.
- `gormgen.generator` provides `Generator`. It registers query structs
  with `push_query_struct_meta`, which raises `GeneratorError` when the
  same struct name comes from a different source. It works out the model
  output directory with `model_output_path` and reports progress with
  `info`. `output` passes content through an optional formatter and writes
  the file. When the formatter fails, `output` prints the lines around the
  error and raises `GeneratorError`.

## Examples

Building clauses:

```python
from gormgen.clause import where_clause, set_clause

where_clause(["name = @name", "or age > 3", ""])
# ' WHERE name = @name or age > 3'

set_clause(["name=@name,", "age=@age,"])
# ' SET name=@name,age=@age'
```

Modifying fields:

```python
from gormgen.field_options import ModelField, field_rename, field_ignore

f = ModelField(name="UserName", type="string", column_name="user_name")
field_rename("user_name", "Name")(f).name      # 'Name'
field_ignore("user_name")(f)                   # None: the column is dropped
```

Import lists:

```python
from gormgen.imports import ImportList

ImportList().add("context", "fmt").add("fmt").paths()
# ['"context"', '"fmt"', '', '']
```

Writing a file:

```python
from gormgen.generator import Generator

g = Generator(out_path="dal/query", model_pkg_path="model")
g.model_output_path()          # 'dal/model/' on POSIX systems
g.output("out.gen.go", "package query\n")
```

## What this package does not do

- It does not connect to a database or read table schemas. The `db` it is
  given is used only for its `logger`.
- It has no templates and renders no query or model code. `Generator`
  writes only the content it is handed.
- Without a formatter, `output` writes content unchanged.
- It provides no query wrapper to run queries at runtime.
- It has no command-line entry point.