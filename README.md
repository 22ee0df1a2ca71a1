# readmegen

Generate `README.md` content from the crate-level doc comments of a Cargo
project.

You write your documentation once, as `//!` (or `/*! ... */`) comments at the
top of `src/lib.rs` or `src/main.rs`, and `readmegen` turns it into Markdown
that is ready to be your README.

## Installation

```sh
pip install .
```

This installs the `readmegen` command. It needs Python 3.11 or later and has no
third-party dependencies. Install with the `test` extra to get `pytest` for the
test suite.

## Usage

The command takes a `readme` subcommand. From the directory that holds
`Cargo.toml`:

```sh
readmegen readme > README.md
```

or write the file directly:

```sh
readmegen readme --output README.md
```

Given this doc comment:

```rust
//! This is my awesome crate
//!
//! # Examples
//! ```
//! fn sum2(n1: i32, n2: i32) -> i32 {
//!   n1 + n2
//! }
//! # assert_eq!(4, sum2(2, 2));
//! ```
```

and a `Cargo.toml` with `name = "my-crate"` and `license = "MIT"`, the output
is:

~~~markdown
# my-crate

This is my awesome crate

## Examples
```rust
fn sum2(n1: i32, n2: i32) -> i32 {
  n1 + n2
}
```

License: MIT
~~~

What happens along the way:

- badges from the `[badges]` section of `Cargo.toml` are prepended;
- the crate name is added as a `# ` title;
- headings outside code blocks gain one level (`#` becomes `##`), so the title
  stays on top;
- doc-test fences (plain, `rust`, `no_run`, `ignore`, `should_panic`, the last
  three optionally prefixed with `rust,`) become `rust` fences; `text` fences
  become plain fences; fences of other languages are kept as they are;
- fences may be three or four backticks or tildes, and a block only ends at
  the same delimiter that opened it;
- lines starting with `# ` inside rust code blocks are hidden;
- the license from `Cargo.toml` is appended, if there is one.

Both `//!` and `/*! ... */` styles are supported, but not mixed in one file:
whichever appears first is used. Nested `/* ... */` comments inside a
`/*! ... */` block are kept in the output.

### Choosing the source file

Without `--input`, the source is looked up in this order:

1. `src/lib.rs`
2. `src/main.rs`
3. the `path` of the `[lib]` section in `Cargo.toml`
4. the `path` of the single `[[bin]]` section; more than one is an error

Targets with `doc = false` are skipped.

### Badges

These badge names in `[badges]` are recognised, and are emitted in this order
whatever order `Cargo.toml` lists them in: `appveyor`, `circle-ci`, `gitlab`,
`travis-ci`, `github`, `codecov`, `coveralls`,
`is-it-maintained-issue-resolution`, `is-it-maintained-open-issues`,
`maintenance`. Other names are ignored. Each takes a `repository` attribute
(`maintenance` takes `status` instead); `branch` defaults to `master`,
`service` to `github` and the GitHub `workflow` to `main`.

### Templates

If a `README.tpl` file sits next to `Cargo.toml`, it is used to render the
output. The available placeholders are:

- `{{readme}}` – the processed documentation (required)
- `{{crate}}` – the crate name
- `{{badges}}` – the badges, one per line
- `{{license}}` – the license
- `{{version}}` – the version

```text
{{badges}}

# {{crate}}

Current version: {{version}}

{{readme}}

License: {{license}}
```

Trailing newlines of the template are dropped. Using `{{badges}}` or
`{{license}}` when `Cargo.toml` does not define them is an error.

### Options

```text
-i, --input INPUT          file to read doc comments from
-o, --output OUTPUT        file to write to (default: stdout)
-r, --project-root ROOT    directory holding Cargo.toml (default: current directory)
-t, --template TEMPLATE    template to render the output with
    --no-template          ignore README.tpl
    --no-title             do not prepend the title
    --no-badges            do not prepend the badges
    --no-license           do not append the license
    --no-indent-headings   keep heading levels as they are
-V, --version              show the version
```

`--template` and `--no-template` cannot be used together. `--no-title`,
`--no-badges` and `--no-license` have no effect when a template is used.
`--project-root` is taken relative to the current directory; paths given to
`--input`, `--output` and `--template` are relative to the project root. The
output always ends with a newline.

Errors are printed to stderr as `Error: <message>` and the command exits with
status 1.

## Library use

```python
from pathlib import Path
from readmegen.generate import generate_readme

root = Path("path/to/project")
with open(root / "src" / "lib.rs", encoding="utf-8") as source:
    text = generate_readme(root, source, template=None)
```

`generate_readme` also accepts the source as a single string. Failures raise
`readmegen.manifest.ReadmeError`.

The pieces can be used on their own:

- `readmegen.extract.extract_docs(lines)` – the raw doc lines of a source file;
- `readmegen.process.process_docs(lines, indent_headings)` and
  `readmegen.process.Processor` – the Markdown transformation;
- `readmegen.template.render(template, readme, manifest, ...)` – the final
  text, with `process_template` and `process_string` behind it;
- `readmegen.manifest.get_manifest(project_root)` and
  `readmegen.manifest.parse_manifest(text)` – the `Manifest` of a project;
- `readmegen.project.get_root(given_root)` and
  `readmegen.project.find_entrypoint(project_root, manifest)` – locating files;
- `readmegen.badges` – one function per badge kind.

## Limitations

`readmegen` only reads the doc comments; it does not compile or run the doc
tests in them. It is a separate command, `readmegen readme`, and does not
install itself as a `cargo` subcommand, although its help text shows `cargo`
as the program name.