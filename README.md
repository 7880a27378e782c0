# gosections

`gosections` is a library that keeps the import blocks of Go source files
in a deterministic order. Imports are sorted by path and then by name, and
split into sections (standard library, third-party, your own prefixes, blank,
dot and aliased imports), with a blank line between each section.

## Installation

```
pip install gosections
```

## Formatting a source

```python
from gosections.config import parse_config
from gosections.gci import load_format

cfg = parse_config("""
sections:
  - Standard
  - Default
  - Prefix(github.com/example)
""")

source = b'''package main

import (
	"github.com/example/lib"
	"fmt"
)
'''

original, formatted = load_format(source, "main.go", cfg)
print(formatted.decode())
```

`load_format(data, path, cfg)` returns a pair `(original, formatted)` of the
same type as `data` (`bytes` or `str`). A file with no imports or with a
single import is returned unchanged. Malformed sources raise
`gosections.parse.GoSyntaxError`.

## Working on files

The functions in `gosections.gci` take a list of paths and a `Config`.
Directories are searched recursively for `.go` files.

- `print_formatted_files(paths, cfg)` prints the formatted content of each
  file; it also reads standard input when standard input is not a terminal.
- `diff_formatted_files(paths, cfg)` prints a unified diff of the changes
  formatting would make, for standard input too when it is piped.
- `diff_formatted_files_to_list(paths, cfg)` returns those diffs as a list
  of strings, one per file.
- `write_formatted_files(paths, cfg)` rewrites in place every file whose
  formatted content differs.
- `list_unformatted_files(paths, cfg)` prints the path of every file that is
  not formatted yet.
- `load_format_go_file(file, cfg)` loads one `gosections.files.File` and
  returns its original and formatted bytes.

Files are formatted in parallel; results are handled in the order the files
were found, and the first error is raised.

## Configuration

`gosections.config.parse_config(text)` reads a YAML document with these keys:

| Key | Meaning |
| --- | --- |
| `sections` | list of sections to use |
| `sectionseparators` | list of separators between sections |
| `customOrder` | keep the sections in the order given |
| `skipGenerated` | leave files that look generated untouched |
| `skipVendor` | skip files inside `vendor` directories |
| `no-inlineComments`, `no-prefixComments` | accepted and stored in the `Config`; they do not change the output |

`gosections.config.YamlConfig` builds the same `Config` from Python values:
`YamlConfig(cfg=BoolConfig(custom_order=True), section_strings=[...]).parse()`.

### Sections

Section names are case-insensitive. Without any sections the sections are
`standard` and `default`.

- `standard` — packages shipped with the Go standard library, such as `fmt`
- `default` — everything not matched by another section
- `prefix(github.com/example)` — imports starting with the given prefix; an
  import goes to the longest matching prefix. Several prefixes separated by
  commas form one section: `prefix(github.com/example,gitlab.com/example)`
- `blank` — blank imports (`_ "pkg"`)
- `dot` — dot imports (`. "pkg"`)
- `alias` — aliased imports (`name "pkg"`)

Unless `customOrder` is set, sections are laid out in the order standard,
default, custom, blank, dot, alias, with several custom sections sorted
alphabetically. Unknown section names raise
`gosections.section.InvalidSectionParamsError`.

`gosections.section.parse(data)` turns a list of section strings into section
objects, and `gosections.section.is_standard(pkg)` tells whether a package
path belongs to the Go standard library.

## What it does not do

The package has no command-line program and no linter integration: it is
used from Python only. It does not run the Go toolchain; outside the import
block the source is kept as it is, apart from normalised line endings and
blank lines around the block.