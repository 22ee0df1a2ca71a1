"""Locate the project root and the source file the docs are read from."""

from pathlib import Path

from .manifest import Manifest, ReadmeError


def get_root(given_root: str | Path | None = None) -> Path:
    """Return the project root, relative paths being taken from the current directory.

    The root must hold a ``Cargo.toml`` file.
    """
    current_dir = Path.cwd()
    root = current_dir if given_root is None else current_dir / given_root
    if not (root / "Cargo.toml").is_file():
        raise ReadmeError(f'`"{root}"` does not look like a Rust/Cargo project')
    return root


def find_entrypoint(project_root: str | Path, manifest: Manifest) -> Path:
    """Find the file to read doc comments from.

    Tried in order: ``src/lib.rs``, ``src/main.rs``, the documented ``[lib]``
    target, then the single documented ``[[bin]]`` target.
    """
    project_root = Path(project_root)
    for candidate in ("src/lib.rs", "src/main.rs"):
        path = project_root / candidate
        if path.exists():
            return path

    if manifest.lib is not None and manifest.lib.doc:
        return manifest.lib.path

    documented = [target.path for target in manifest.bin if target.doc]
    if len(documented) > 1:
        paths = ", ".join(str(path) for path in documented)
        raise ReadmeError(f"Multiple binaries found, choose one: [{paths}]")
    if documented:
        return documented[0]

    raise ReadmeError("No entrypoint found")