"""Command line entry point: ``cargo readme``."""

import argparse
import sys
from pathlib import Path

from .generate import generate_readme
from .manifest import ReadmeError, get_manifest
from .project import find_entrypoint, get_root

VERSION = "3.2.0"
DEFAULT_TEMPLATE = "README.tpl"


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _read_text(path: Path) -> str:
    with path.open(encoding="utf-8") as handle:
        return handle.read()


def read_source(project_root: str | Path, input_path: str | Path | None = None) -> str:
    """Return the text of the file the doc comments are read from.

    With no ``input_path`` the entrypoint is looked up from the project layout
    and its manifest.
    """
    project_root = Path(project_root).absolute()
    if input_path is not None:
        path = project_root / input_path
        try:
            return _read_text(path)
        except OSError as exc:
            raise ReadmeError(f"Could not open file '{path}': {_reason(exc)}") from None
        except UnicodeDecodeError as exc:
            raise ReadmeError(str(exc)) from None

    manifest = get_manifest(project_root)
    entrypoint = project_root / find_entrypoint(project_root, manifest)
    try:
        return _read_text(entrypoint)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadmeError(str(exc)) from None


def read_template(project_root: str | Path, template: str | Path | None = None) -> str | None:
    """Return the template text, or ``None`` when the default template is absent."""
    project_root = Path(project_root)
    if template is not None:
        path = project_root / template
        try:
            return _read_text(path)
        except OSError as exc:
            raise ReadmeError(
                f"Could not open template file '{path}': {_reason(exc)}"
            ) from None
        except UnicodeDecodeError as exc:
            raise ReadmeError(f"Error: {exc}") from None

    path = project_root / DEFAULT_TEMPLATE
    try:
        return _read_text(path)
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise ReadmeError(
            f"Could not open template file '{DEFAULT_TEMPLATE}': {_reason(exc)}"
        ) from None
    except UnicodeDecodeError as exc:
        raise ReadmeError(f"Error: {exc}") from None


def write_output(readme: str, output: str | Path | None = None) -> None:
    """Write ``readme`` followed by a newline to ``output``, or to stdout."""
    if output is None:
        print(readme)
        return

    path = Path(output)
    try:
        handle = path.open("w", encoding="utf-8", newline="")
    except OSError as exc:
        raise ReadmeError(
            f"Could not create output file '{path}': {_reason(exc)}"
        ) from None
    with handle:
        try:
            handle.write(readme + "\n")
        except OSError as exc:
            raise ReadmeError(f"Could not write to output file: {_reason(exc)}") from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``cargo readme``."""
    version = f"%(prog)s v{VERSION}"
    parser = argparse.ArgumentParser(prog="cargo")
    parser.add_argument("-V", "--version", action="version", version=version)
    commands = parser.add_subparsers(dest="command", required=True)

    readme = commands.add_parser(
        "readme",
        help="Generate README.md from doc comments",
        description="Generate README.md from doc comments",
    )
    readme.add_argument("-V", "--version", action="version", version=version)
    readme.add_argument(
        "-i",
        "--input",
        metavar="INPUT",
        help="File to read from. If not provided, will try to use `src/lib.rs`, then "
        "`src/main.rs`. If neither file could be found, will look into `Cargo.toml` "
        "for a `[lib]`, then for a single `[[bin]]`. If multiple binaries are found, "
        "an error will be returned.",
    )
    readme.add_argument(
        "-o",
        "--output",
        metavar="OUTPUT",
        help="File to write to. If not provided, will output to stdout.",
    )
    readme.add_argument(
        "-r",
        "--project-root",
        metavar="ROOT",
        help="Directory to be set as project root (where `Cargo.toml` is). "
        "Defaults to the current directory.",
    )
    templates = readme.add_mutually_exclusive_group()
    templates.add_argument(
        "-t",
        "--template",
        metavar="TEMPLATE",
        help="Template used to render the output. "
        "Default behavior is to use `README.tpl` if it exists.",
    )
    templates.add_argument(
        "--no-template",
        action="store_true",
        help="Ignore template file when generating README. "
        "Only useful to ignore default template `README.tpl`.",
    )
    readme.add_argument(
        "--no-title",
        action="store_true",
        help="Do not prepend title line. Ignored when using a template.",
    )
    readme.add_argument(
        "--no-badges",
        action="store_true",
        help="Do not prepend badges line. Ignored when using a template.",
    )
    readme.add_argument(
        "--no-license",
        action="store_true",
        help="Do not append license line. Ignored when using a template.",
    )
    readme.add_argument(
        "--no-indent-headings",
        action="store_true",
        help="Do not add an extra level to headings. By default, '#' headings "
        "become '##', so the first '#' can be the crate name.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)

    try:
        project_root = get_root(args.project_root)
        source = read_source(project_root, args.input)
        output = project_root / args.output if args.output is not None else None
        template = None if args.no_template else read_template(project_root, args.template)
        readme = generate_readme(
            project_root,
            source,
            template,
            add_title=not args.no_title,
            add_badges=not args.no_badges,
            add_license=not args.no_license,
            indent_headings=not args.no_indent_headings,
        )
        write_output(readme, output)
    except ReadmeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0