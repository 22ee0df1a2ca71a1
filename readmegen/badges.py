"""Markdown badge lines for the services a manifest's ``[badges]`` table may name."""

from collections.abc import Mapping

BRANCH_DEFAULT = "master"
SERVICE_DEFAULT = "github"
WORKFLOW_DEFAULT = "main"

_SERVICE_SHORT_NAMES = {
    "github": "gh",
    "bitbucket": "bb",
    "gitlab": "gl",
}

_MAINTENANCE_STATUS = {
    "actively-developed": "activly--developed-brightgreen",
    "passively-maintained": "passively--maintained-yellowgreen",
    "as-is": "as--is-yellow",
    "none": "maintenance-none-lightgrey",
    "experimental": "experimental-blue",
    "looking-for-maintainer": "looking--for--maintainer-darkblue",
    "deprecated": "deprecated-red",
}


def percent_encode(text: str) -> str:
    """Percent-encode every character of ``text`` that is not an ASCII letter or digit."""
    return "".join(
        char
        if char.isascii() and char.isalnum()
        else "".join(f"%{byte:02X}" for byte in char.encode("utf-8"))
        for char in text
    )


def _service_short_name(service: str) -> str:
    return _SERVICE_SHORT_NAMES.get(service, "gh")


def appveyor(attrs: Mapping[str, str]) -> str:
    repo = attrs["repository"]
    branch = attrs.get("branch", BRANCH_DEFAULT)
    service = attrs.get("service", SERVICE_DEFAULT)
    return (
        f"[![Build Status](https://ci.appveyor.com/api/projects/status/{service}/{repo}"
        f"?branch={branch}&svg=true)]"
        f"(https://ci.appveyor.com/project/{repo}/branch/{branch})"
    )


def circle_ci(attrs: Mapping[str, str]) -> str:
    repo = attrs["repository"]
    branch = percent_encode(attrs.get("branch", BRANCH_DEFAULT))
    service = _service_short_name(attrs.get("service", SERVICE_DEFAULT))
    return (
        f"[![Build Status](https://circleci.com/{service}/{repo}/tree/{branch}.svg?style=shield)]"
        f"(https://circleci.com/{service}/{repo}/cargo-readme/tree/{branch})"
    )


def gitlab(attrs: Mapping[str, str]) -> str:
    repo = attrs["repository"]
    branch = percent_encode(attrs.get("branch", BRANCH_DEFAULT))
    return (
        f"[![Build Status](https://gitlab.com/{repo}/badges/{branch}/pipeline.svg)]"
        f"(https://gitlab.com/{repo}/commits/master)"
    )


def travis_ci(attrs: Mapping[str, str]) -> str:
    repo = attrs["repository"]
    branch = percent_encode(attrs.get("branch", BRANCH_DEFAULT))
    return (
        f"[![Build Status](https://travis-ci.org/{repo}.svg?branch={branch})]"
        f"(https://travis-ci.org/{repo})"
    )


def github(attrs: Mapping[str, str]) -> str:
    repo = attrs["repository"]
    workflow = attrs.get("workflow", WORKFLOW_DEFAULT)
    encoded = percent_encode(workflow)
    encoded_plus = percent_encode(workflow.replace(" ", "+"))
    return (
        f"[![Workflow Status](https://github.com/{repo}/workflows/{encoded}/badge.svg)]"
        f"(https://github.com/{repo}/actions?query=workflow%3A%22{encoded_plus}%22)"
    )


def codecov(attrs: Mapping[str, str]) -> str:
    repo = attrs["repository"]
    branch = percent_encode(attrs.get("branch", BRANCH_DEFAULT))
    service = _service_short_name(attrs.get("service", SERVICE_DEFAULT))
    return (
        f"[![Coverage Status](https://codecov.io/{service}/{repo}/branch/{branch}/graph/badge.svg)]"
        f"(https://codecov.io/{service}/{repo})"
    )


def coveralls(attrs: Mapping[str, str]) -> str:
    repo = attrs["repository"]
    branch = percent_encode(attrs.get("branch", BRANCH_DEFAULT))
    service = attrs.get("service", SERVICE_DEFAULT)
    return (
        f"[![Coverage Status](https://coveralls.io/repos/{service}/{repo}/badge.svg?branch=branch)]"
        f"(https://coveralls.io/{service}/{repo}?branch={branch})"
    )


def is_it_maintained_issue_resolution(attrs: Mapping[str, str]) -> str:
    repo = attrs["repository"]
    return (
        f"[![Average time to resolve an issue](https://isitmaintained.com/badge/resolution/{repo}.svg)]"
        f'(https://isitmaintained.com/project/{repo} "Average time to resolve an issue")'
    )


def is_it_maintained_open_issues(attrs: Mapping[str, str]) -> str:
    repo = attrs["repository"]
    return (
        f"[![Percentage of issues still open](https://isitmaintained.com/badge/open/{repo}.svg)]"
        f'(https://isitmaintained.com/project/{repo} "Percentage of issues still open")'
    )


def maintenance(attrs: Mapping[str, str]) -> str:
    status = _MAINTENANCE_STATUS.get(attrs["status"], "unknow-black")
    return f"![Maintenance](https://img.shields.io/badge/maintenance-{status}.svg)"