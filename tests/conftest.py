"""Shared fixtures for git-refs tests."""

import subprocess

import pytest

from reference_filter import CommitRangeReferenceFilter, Project, parse_fragment, to_html
from repositories import AllowListPermissions, CompareUrlBuilder, InMemoryProjectRegistry, InMemoryRepository

COMMIT1 = "a1b2c3d4e5f60718293a4b5c6d7e8f9012345678"
COMMIT2 = "d4e5f6a7b8c90123456789abcdef0123456789ab"
OTHER_COMMIT = "0f1e2d3c4b5a69788796a5b4c3d2e1f001234567"
BASE_URL = "http://localhost"


@pytest.fixture
def repository():
    return InMemoryRepository([COMMIT1, COMMIT2, OTHER_COMMIT])


@pytest.fixture
def project(repository):
    return Project(namespace="group", path="project", repository=repository)


@pytest.fixture
def project2():
    """A second project holding the same commits, as a fork would."""
    return Project(
        namespace="cross-reference",
        path="project2",
        repository=InMemoryRepository([COMMIT1, COMMIT2]),
    )


@pytest.fixture
def registry(project, project2):
    return InMemoryProjectRegistry([project, project2])


@pytest.fixture
def permissions():
    return AllowListPermissions()


@pytest.fixture
def url_builder():
    return CompareUrlBuilder(BASE_URL)


@pytest.fixture
def context(project, registry, permissions, url_builder):
    return {
        "project": project,
        "current_user": "alice",
        "project_registry": registry,
        "permissions": permissions,
        "url_builder": url_builder,
    }


@pytest.fixture
def run_filter(context):
    """Run the filter over an HTML fragment with extra context options."""

    def _run(html, **options):
        return CommitRangeReferenceFilter.call(parse_fragment(html), {**context, **options})

    return _run


@pytest.fixture
def filter_html(run_filter):
    """Like run_filter but returns serialized HTML."""

    def _run(html, **options):
        return to_html(run_filter(html, **options))

    return _run


@pytest.fixture
def temp_git_repo(tmp_path):
    """
    Create a temporary git repository with proper git config.
    Returns the repo path.
    """
    repo_path = tmp_path / "group" / "project"
    repo_path.mkdir(parents=True)

    subprocess.run(["git", "init"], cwd=repo_path, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=repo_path,
        check=True,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=repo_path,
        check=True,
        capture_output=True,
    )

    return repo_path


@pytest.fixture
def make_commit():
    """Create an empty commit in a repository and return its full id."""

    def _commit(repo_path, message="commit"):
        subprocess.run(
            ["git", "commit", "--allow-empty", "-m", message],
            cwd=repo_path,
            check=True,
            capture_output=True,
        )
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            cwd=repo_path,
            check=True,
            capture_output=True,
            text=True,
        )
        return result.stdout.strip()

    return _commit
