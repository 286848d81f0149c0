# doxymark

doxymark holds the building blocks for turning Doxygen XML output into
Markdown pages:

- a JSON configuration with defaults;
- the enumerations for Doxygen kinds and categories;
- the default page templates;
- an index tree of documented compounds;
- a generator that writes a summary and a `manifest.json` from that tree.

It has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Configuration (`doxymark.config`)

`Config` is a dataclass that holds every setting with its default. The
settings cover the base URL, the file extension, the link options, the
folder and index names, the index titles, the template names, the file
filter and the formula delimiters. It also has `output_dir`, which is not
part of the JSON file.

- `load_config(config, path)` updates a `Config` in place from a JSON file.
- `load_config_data(config, src)` does the same from a JSON string.
- Both change only the keys present in the JSON. The keys use camelCase,
  such as `baseUrl` or `useFolders`.
- `save_config(config, path)` writes every configurable setting as indented
  JSON with sorted keys.

Failures raise `DoxybookError`. That covers an unreadable file, malformed
JSON, a root that is not an object, and a value of the wrong type: booleans
must be booleans, strings must be strings, and lists must be lists of
strings.

```python
from doxymark.config import Config, load_config_data

config = Config()
load_config_data(config, '{"baseUrl": "/api/", "useFolders": false}')
assert config.base_url == "/api/"
```

## Kinds and categories (`doxymark.enums`)

The module defines five enumerations: `Kind`, `Type`, `Virtual`,
`Visibility` and `FolderCategory`.

Converting between Doxygen strings and enum values:

- `to_enum_kind`, `to_enum_type`, `to_enum_virtual`, `to_enum_visibility`
  and `to_enum_folder_category` turn a string into a value. For example,
  `to_enum_kind("group")` is `Kind.MODULE`.
- `to_str` turns a value back into a string.
- An unknown string raises `DoxybookError`.

Checking and classifying kinds:

- `kind_to_type` maps a kind to a member `Type`, and returns `Type.NONE`
  when there is none.
- `is_kind_structured`, `is_kind_language` and `is_kind_file` classify
  kinds.

Resolving names from a `Config`:

- `type_folder_category_to_folder_name(config, category)` gives the folder
  for a category.
- `type_to_folder_name(config, type_)` gives the folder for a member type.
- Both return an empty string when `use_folders` is off.
- `type_to_index_name(config, category)` gives the index page path. The
  path is placed inside the folder when both `index_in_folders` and
  `use_folders` are set.
- `type_to_index_template(config, category)` gives the index template name.
- `type_to_index_title(config, category)` gives the index title.

## Templates (`doxymark.tables`, `doxymark.templates`)

`doxymark.tables` builds the template source for the member summary tables:

- `create_member_table()` for the public and protected members of a class;
- `create_base_table()` for members inherited from base classes;
- `create_non_member_table()` for modules, directories, files, namespaces
  and free members.

`doxymark.templates.DEFAULT_TEMPLATES` maps each template name to a
`DefaultTemplate`. Each entry holds its source (`src`) and the names of the
templates it includes (`dependencies`). The names include `header`,
`footer`, `details`, `member_details`, `kind_class`, `kind_file` and
`index_classes`.

`save_default_templates(path)` writes every template to `<name>.tmpl` in an
existing directory, ready to be customised. A file that cannot be written
raises `DoxybookError`.

## Index tree (`doxymark.doxygen`)

`read_index_kinds(input_dir)` reads the `(kind, refid)` pairs of all
`<compound>` elements in `input_dir/index.xml`. It skips, with a warning,
any compound that lacks either attribute. It raises `DoxybookError` when:

- the file cannot be read or parsed;
- the root element is not `doxygenindex`;
- there are no compounds.

`IndexNode` is one compound. It has a `refid`, a `kind`, a `name`, a
`title`, a `url`, its `children`, and links to its `parent` and `group`.
Its `type` property is derived from its kind, and `walk()` yields every
descendant.

`Doxygen(config)` holds the root `index` node and a `cache` by refid.

- `add(node)` adds a top-level node unless its refid is already cached.
  - It renames a page whose refid is `indexpage` to `config.main_page_name`.
  - It keeps among the index's children only those whose parent is the
    index.
  - It caches the node and all of its descendants.
- `rebuild_cache()` registers every reachable node.
- `find(refid)` returns a cached node, or raises `DoxybookError`.
- `update_group_pointers()` sets `group` on the children of every module
  node.

## Output (`doxymark.generator`)

`Generator(config, doxygen)` provides four operations:

- `kind_to_template_name(kind)` returns the configured template name for a
  page kind. It raises `DoxybookError` for kinds that have no page.
- `should_include(node)` applies `files_filter` to file nodes by file
  extension. All other nodes pass.
- `summary(input_file, output_file, sections)` replaces the `{{doxygen}}`
  placeholder in a template file.
  - Each `SummarySection` produces one link to its category index, then
    nested links to the matching nodes.
  - A section has a `type`, which is a `FolderCategory`.
  - Its `filter` is the set of kinds to walk, and its `skip` is the set of
    kinds to leave unlisted.
  - The indentation is taken from the spaces before the placeholder.
  - The main page is left out.
- `manifest()` writes `manifest.json` into `config.output_dir` and returns
  the same data. The data is a nested list of `kind`, `name`, `url`,
  `title` for modules, and `children`.

## What it does not do

doxymark does not read the per-compound Doxygen XML files. It does not
build `IndexNode` trees from them: nodes are created and added by the
caller. It has no template engine, so it does not render the default
templates into Markdown pages. It also has no command-line tool.

## Running the tests

```
pytest
```