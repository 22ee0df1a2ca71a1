"""Read crate information from ``Cargo.toml``."""

import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from . import badges as _badges


class ReadmeError(Exception):
    """Raised when a readme cannot be produced."""


@dataclass(frozen=True)
class ManifestTarget:
    """A ``[lib]`` or ``[[bin]]`` target of the manifest."""

    path: Path
    doc: bool = True


@dataclass
class Manifest:
    """Crate information used to render a readme."""

    name: str
    version: str
    license: str | None = None
    lib: ManifestTarget | None = None
    bin: list[ManifestTarget] = field(default_factory=list)
    badges: list[str] = field(default_factory=list)


# Badges are emitted in this order, whatever order the manifest lists them in.
_BADGE_RENDERERS: tuple[tuple[str, Callable[[Mapping[str, str]], str]], ...] = (
    ("appveyor", _badges.appveyor),
    ("circle-ci", _badges.circle_ci),
    ("gitlab", _badges.gitlab),
    ("travis-ci", _badges.travis_ci),
    ("github", _badges.github),
    ("codecov", _badges.codecov),
    ("coveralls", _badges.coveralls),
    ("is-it-maintained-issue-resolution", _badges.is_it_maintained_issue_resolution),
    ("is-it-maintained-open-issues", _badges.is_it_maintained_open_issues),
    ("maintenance", _badges.maintenance),
)


def process_badges(badges: Mapping[str, Mapping[str, str]]) -> list[str]:
    """Render the known badges in their fixed order; unknown names are ignored."""
    rendered = []
    for name, render in _BADGE_RENDERERS:
        if name not in badges:
            continue
        try:
            rendered.append(render(badges[name]))
        except KeyError as exc:
            raise ReadmeError(f"badge `{name}` is missing attribute {exc}") from None
    return rendered


def _require_str(table: Mapping[str, Any], key: str, where: str) -> str:
    if key not in table:
        raise ReadmeError(f"missing field `{key}` in `{where}`")
    value = table[key]
    if not isinstance(value, str):
        raise ReadmeError(f"field `{key}` in `{where}` must be a string")
    return value


def _optional_str(table: Mapping[str, Any], key: str, where: str) -> str | None:
    if key not in table:
        return None
    return _require_str(table, key, where)


def _table(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise ReadmeError(f"`{where}` must be a table")
    return value


def _target(value: Any, where: str) -> ManifestTarget:
    table = _table(value, where)
    path = _require_str(table, "path", where)
    doc = table.get("doc", True)
    if not isinstance(doc, bool):
        raise ReadmeError(f"field `doc` in `{where}` must be a boolean")
    return ManifestTarget(path=Path(path), doc=doc)


def _badge_tables(value: Any) -> dict[str, dict[str, str]]:
    tables = {}
    for name, attrs in _table(value, "badges").items():
        where = f"badges.{name}"
        attrs = _table(attrs, where)
        tables[name] = {key: _require_str(attrs, key, where) for key in attrs}
    return tables


def parse_manifest(text: str) -> Manifest:
    """Build a :class:`Manifest` from the text of a ``Cargo.toml`` file."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ReadmeError(str(exc)) from None

    if "package" not in data:
        raise ReadmeError("missing field `package`")
    package = _table(data["package"], "package")

    lib = _target(data["lib"], "lib") if "lib" in data else None

    bins_value = data.get("bin", [])
    if not isinstance(bins_value, list):
        raise ReadmeError("`bin` must be an array of tables")
    bins = [_target(entry, "bin") for entry in bins_value]

    badges = process_badges(_badge_tables(data["badges"])) if "badges" in data else []

    return Manifest(
        name=_require_str(package, "name", "package"),
        version=_require_str(package, "version", "package"),
        license=_optional_str(package, "license", "package"),
        lib=lib,
        bin=bins,
        badges=badges,
    )


def get_manifest(project_root: str | Path) -> Manifest:
    """Read and parse ``Cargo.toml`` from ``project_root``."""
    path = Path(project_root) / "Cargo.toml"
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ReadmeError(f"Could not read Cargo.toml: {exc}") from None
    except UnicodeDecodeError as exc:
        raise ReadmeError(str(exc)) from None
    return parse_manifest(text)