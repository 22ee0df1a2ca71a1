import pytest

from readmegen import badges

REPO = {"repository": "cargo-readme/test"}


def test_appveyor_defaults():
    assert badges.appveyor(REPO) == (
        "[![Build Status](https://ci.appveyor.com/api/projects/status/github/cargo-readme/test"
        "?branch=master&svg=true)](https://ci.appveyor.com/project/cargo-readme/test/branch/master)"
    )


def test_circle_ci_defaults():
    assert badges.circle_ci(REPO) == (
        "[![Build Status](https://circleci.com/gh/cargo-readme/test/tree/master.svg?style=shield)]"
        "(https://circleci.com/gh/cargo-readme/test/cargo-readme/tree/master)"
    )


def test_gitlab_defaults():
    assert badges.gitlab(REPO) == (
        "[![Build Status](https://gitlab.com/cargo-readme/test/badges/master/pipeline.svg)]"
        "(https://gitlab.com/cargo-readme/test/commits/master)"
    )


def test_travis_ci_defaults():
    assert badges.travis_ci(REPO) == (
        "[![Build Status](https://travis-ci.org/cargo-readme/test.svg?branch=master)]"
        "(https://travis-ci.org/cargo-readme/test)"
    )


def test_travis_ci_with_repository_of_default_project():
    result = badges.travis_ci({"repository": "livioribeiro/cargo-readme"})
    assert result == (
        "[![Build Status](https://travis-ci.org/livioribeiro/cargo-readme.svg?branch=master)]"
        "(https://travis-ci.org/livioribeiro/cargo-readme)"
    )


def test_codecov_defaults():
    assert badges.codecov(REPO) == (
        "[![Coverage Status](https://codecov.io/gh/cargo-readme/test/branch/master/graph/badge.svg)]"
        "(https://codecov.io/gh/cargo-readme/test)"
    )


def test_coveralls_defaults():
    assert badges.coveralls(REPO) == (
        "[![Coverage Status](https://coveralls.io/repos/github/cargo-readme/test/badge.svg?branch=branch)]"
        "(https://coveralls.io/github/cargo-readme/test?branch=master)"
    )


def test_is_it_maintained_issue_resolution():
    assert badges.is_it_maintained_issue_resolution(REPO) == (
        "[![Average time to resolve an issue](https://isitmaintained.com/badge/resolution/cargo-readme/test.svg)]"
        '(https://isitmaintained.com/project/cargo-readme/test "Average time to resolve an issue")'
    )


def test_is_it_maintained_open_issues():
    assert badges.is_it_maintained_open_issues(REPO) == (
        "[![Percentage of issues still open](https://isitmaintained.com/badge/open/cargo-readme/test.svg)]"
        '(https://isitmaintained.com/project/cargo-readme/test "Percentage of issues still open")'
    )


def test_github_default_workflow():
    assert badges.github(REPO) == (
        "[![Workflow Status](https://github.com/cargo-readme/test/workflows/main/badge.svg)]"
        "(https://github.com/cargo-readme/test/actions?query=workflow%3A%22main%22)"
    )


def test_github_workflow_with_space():
    result = badges.github({"repository": "o/r", "workflow": "CI build"})
    assert result == (
        "[![Workflow Status](https://github.com/o/r/workflows/CI%20build/badge.svg)]"
        "(https://github.com/o/r/actions?query=workflow%3A%22CI%2Bbuild%22)"
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("master", "master"),
        ("feature/x", "feature%2Fx"),
        ("a b", "a%20b"),
        ("release-1.0", "release%2D1%2E0"),
        ("ü", "%C3%BC"),
        ("", ""),
    ],
)
def test_percent_encode(text, expected):
    assert badges.percent_encode(text) == expected


def test_branch_is_encoded_in_travis():
    result = badges.travis_ci({"repository": "o/r", "branch": "dev/next"})
    assert "branch=dev%2Fnext" in result


def test_appveyor_branch_is_not_encoded():
    result = badges.appveyor({"repository": "o/r", "branch": "dev/next"})
    assert "branch=dev/next&svg=true" in result
    assert "/branch/dev/next)" in result


@pytest.mark.parametrize(
    ("service", "short"),
    [("github", "gh"), ("bitbucket", "bb"), ("gitlab", "gl"), ("other", "gh")],
)
def test_service_short_names(service, short):
    result = badges.codecov({"repository": "o/r", "service": service})
    assert result.endswith(f"(https://codecov.io/{short}/o/r)")
    assert badges.circle_ci({"repository": "o/r", "service": service}).startswith(
        f"[![Build Status](https://circleci.com/{short}/o/r/"
    )


@pytest.mark.parametrize(
    ("status", "shown"),
    [
        ("actively-developed", "activly--developed-brightgreen"),
        ("passively-maintained", "passively--maintained-yellowgreen"),
        ("as-is", "as--is-yellow"),
        ("none", "maintenance-none-lightgrey"),
        ("experimental", "experimental-blue"),
        ("looking-for-maintainer", "looking--for--maintainer-darkblue"),
        ("deprecated", "deprecated-red"),
        ("something-else", "unknow-black"),
    ],
)
def test_maintenance(status, shown):
    assert badges.maintenance({"status": status}) == (
        f"![Maintenance](https://img.shields.io/badge/maintenance-{shown}.svg)"
    )


def test_missing_repository_raises():
    with pytest.raises(KeyError):
        badges.gitlab({})