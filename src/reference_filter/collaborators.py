"""Interfaces for the services a reference filter consults.

Filters never reach for global state: the local project, the viewer and
these collaborators are all passed in through the filter context.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .models import Commit, Project


class Repository(ABC):
    """Read-only commit lookup for one project."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Check whether the repository exists and can be queried."""
        pass

    @abstractmethod
    def lookup_commit(self, ref: str) -> Commit | None:
        """Look up a commit by full or abbreviated id.

        Args:
            ref: Commit id, 1-40 hex characters

        Returns:
            The commit, or None if no single commit matches. Garbage input
            is a miss, never an exception.
        """
        pass


class ProjectRegistry(ABC):
    """Resolves project paths to projects."""

    @abstractmethod
    def find_by_path(self, path_with_namespace: str) -> Project | None:
        """Find a project by its 'namespace/project' path.

        Returns:
            The project, or None if no such project exists
        """
        pass


class PermissionPolicy(ABC):
    """Decides which projects a viewer may read."""

    @abstractmethod
    def can_read(self, viewer: Any, project: Project) -> bool:
        pass


class UrlBuilder(ABC):
    """Builds links to the compare view."""

    @abstractmethod
    def build_compare_url(
        self,
        source: Project,
        target: Project,
        from_ref: str,
        to_ref: str,
        only_path: bool = False,
    ) -> str:
        """Build the URL comparing two refs of the target project.

        Args:
            source: Project whose document contains the reference
            target: Project the commits belong to
            from_ref: Start of the comparison (may carry a '^' suffix)
            to_ref: End of the comparison
            only_path: Omit scheme and host

        Returns:
            Absolute URL, or path plus query when only_path is set
        """
        pass
