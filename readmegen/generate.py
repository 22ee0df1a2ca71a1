"""Generate readme text from a crate's doc comments."""

from collections.abc import Iterable
from pathlib import Path

from .extract import extract_docs
from .manifest import ReadmeError, get_manifest
from .process import process_docs
from .template import render


def generate_readme(
    project_root: str | Path,
    source: Iterable[str] | str,
    template: str | None = None,
    add_title: bool = True,
    add_badges: bool = True,
    add_license: bool = True,
    indent_headings: bool = True,
) -> str:
    """Build the readme from the doc comments in ``source``.

    ``source`` is the source text or an iterable of its lines, such as an open
    file. ``template`` is the template text, or ``None`` to render without one.
    The crate information comes from ``Cargo.toml`` in ``project_root``.
    """
    if isinstance(source, str):
        source = source.splitlines(keepends=True)

    try:
        lines = extract_docs(source)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadmeError(str(exc)) from None

    readme = "\n".join(process_docs(lines, indent_headings))
    manifest = get_manifest(project_root)
    return render(template, readme, manifest, add_title, add_badges, add_license)