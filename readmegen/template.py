"""Render the final readme text from the processed docs and the manifest.

This is not a real template engine; only a few fixed substitutions are made.
"""

from collections.abc import Sequence

from .manifest import Manifest, ReadmeError


def render(
    template: str | None,
    readme: str,
    manifest: Manifest,
    add_title: bool = True,
    add_badges: bool = True,
    add_license: bool = True,
) -> str:
    """Render ``readme`` through ``template``, or decorate it when there is none.

    The ``add_*`` flags only apply when no template is given.
    """
    if template is not None:
        return process_template(
            template,
            readme,
            manifest.name,
            manifest.badges,
            manifest.license,
            manifest.version,
        )
    return process_string(
        readme,
        manifest.name,
        manifest.badges,
        manifest.license,
        add_title,
        add_badges,
        add_license,
    )


def process_template(
    template: str,
    readme: str,
    title: str,
    badges: Sequence[str],
    license: str | None,
    version: str,
) -> str:
    """Substitute the template variables.

    Available variables are ``{{readme}}``, ``{{crate}}``, ``{{badges}}``,
    ``{{license}}`` and ``{{version}}``. ``{{readme}}`` is required.
    """
    template = template.rstrip("\n")

    if "{{readme}}" not in template:
        raise ReadmeError("Missing `{{readme}}` in template")

    template = template.replace("{{crate}}", title)

    if "{{badges}}" in template:
        if not badges:
            raise ReadmeError(
                "`{{badges}}` was found in template but no badges were provided"
            )
        template = template.replace("{{badges}}", "\n".join(badges))

    if "{{license}}" in template:
        if license is None:
            raise ReadmeError(
                "`{{license}}` was found in template but no license was provided"
            )
        template = template.replace("{{license}}", license)

    template = template.replace("{{version}}", version)

    return template.replace("{{readme}}", readme)


def process_string(
    readme: str,
    title: str,
    badges: Sequence[str],
    license: str | None,
    add_title: bool = True,
    add_badges: bool = True,
    add_license: bool = True,
) -> str:
    """Decorate ``readme`` with title, badges and license line as requested."""
    if add_title:
        readme = prepend_title(readme, title)
    if add_badges:
        readme = prepend_badges(readme, badges)
    if add_license and license is not None:
        readme = append_license(readme, license)
    return readme


def prepend_badges(readme: str, badges: Sequence[str]) -> str:
    """Put the badge lines, one per line, before ``readme``."""
    if not badges:
        return readme
    joined = "\n".join(badges)
    return f"{joined}\n\n{readme}" if readme else joined


def prepend_title(readme: str, crate_name: str) -> str:
    """Put a ``# crate_name`` heading before ``readme``."""
    title = f"# {crate_name}"
    return f"{title}\n\n{readme}" if readme.strip() else title


def append_license(readme: str, license: str) -> str:
    """Put a ``License:`` line after ``readme``."""
    line = f"License: {license}"
    return f"{readme}\n\n{line}" if readme.strip() else line