"""In-memory repositories and registry, for tests and embedding."""

from collections.abc import Iterable

from reference_filter.collaborators import ProjectRegistry, Repository
from reference_filter.models import Commit, Project


class InMemoryRepository(Repository):
    """Repository holding a fixed set of full commit ids."""

    def __init__(self, commit_ids: Iterable[str] = (), valid: bool = True):
        self.commit_ids = [commit_id.lower() for commit_id in commit_ids]
        self.valid = valid

    def is_valid(self) -> bool:
        return self.valid

    def lookup_commit(self, ref: str) -> Commit | None:
        """Find the single commit whose id starts with ref."""
        if not ref:
            return None
        prefix = ref.lower()
        matches = [commit_id for commit_id in self.commit_ids if commit_id.startswith(prefix)]
        if len(matches) != 1:
            return None
        return Commit(id=matches[0])


class InMemoryProjectRegistry(ProjectRegistry):
    """Registry over a fixed list of projects."""

    def __init__(self, projects: Iterable[Project] = ()):
        self.projects = {project.path_with_namespace: project for project in projects}

    def add(self, project: Project) -> None:
        self.projects[project.path_with_namespace] = project

    def find_by_path(self, path_with_namespace: str) -> Project | None:
        return self.projects.get(path_with_namespace)
