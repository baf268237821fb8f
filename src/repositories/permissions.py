"""Permission policies for cross-project references."""

from collections.abc import Iterable, Mapping
from typing import Any

from reference_filter.collaborators import PermissionPolicy
from reference_filter.models import Project


class PublicPermissions(PermissionPolicy):
    """Every project is readable by everyone."""

    def can_read(self, viewer: Any, project: Project) -> bool:
        return True


class AllowListPermissions(PermissionPolicy):
    """Grants read access per viewer to listed project paths.

    The viewer ``None`` stands for an anonymous reader.
    """

    def __init__(self, grants: Mapping[Any, Iterable[str]] | None = None):
        self.grants: dict[Any, set[str]] = {
            viewer: set(paths) for viewer, paths in (grants or {}).items()
        }

    def allow(self, viewer: Any, path_with_namespace: str) -> None:
        self.grants.setdefault(viewer, set()).add(path_with_namespace)

    def can_read(self, viewer: Any, project: Project) -> bool:
        return project.path_with_namespace in self.grants.get(viewer, set())
