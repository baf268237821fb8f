"""Resolves commit range expressions to existing, viewable commits."""

from typing import Any

from common.logger import get_logger

from .collaborators import PermissionPolicy, ProjectRegistry
from .models import Commit, Project, RawExpression, ResolvedReference

logger = get_logger(__name__)


class CommitRangeResolver:
    """Turns raw expressions into resolved references.

    Every failure is a normal outcome reported as None. Nothing is cached;
    a repeated locator is looked up again.
    """

    def __init__(
        self,
        project: Project,
        viewer: Any = None,
        project_registry: ProjectRegistry | None = None,
        permissions: PermissionPolicy | None = None,
    ):
        """Initialize the resolver.

        Args:
            project: Project the document belongs to
            viewer: Identity passed to the permission policy
            project_registry: Lookup for cross-project locators. Without
                one, every cross-project expression is rejected.
            permissions: Policy for cross-project reads. Without one,
                every other project is treated as unreadable.
        """
        self.project = project
        self.viewer = viewer
        self.project_registry = project_registry
        self.permissions = permissions

    def resolve(self, expression: RawExpression) -> ResolvedReference | None:
        """Resolve an expression, or return None if it does not apply.

        Args:
            expression: Match produced by the pattern matcher

        Returns:
            ResolvedReference, or None if the project is unknown or
            unreadable, or either commit does not exist
        """
        target = self.find_project(expression.project_path)
        if target is None:
            logger.debug(f"Skipping {expression.text}: project not found")
            return None

        if target != self.project and not self.can_read(target):
            logger.debug(f"Skipping {expression.text}: no access to {target.path_with_namespace}")
            return None

        if not target.repository.is_valid():
            logger.debug(
                f"Skipping {expression.text}: repository of {target.path_with_namespace} is unavailable"
            )
            return None

        from_commit = self.find_commit(target, expression.from_ref)
        if from_commit is None:
            logger.debug(f"Skipping {expression.text}: unknown commit {expression.from_ref}")
            return None

        to_commit = self.find_commit(target, expression.to_ref)
        if to_commit is None:
            logger.debug(f"Skipping {expression.text}: unknown commit {expression.to_ref}")
            return None

        return ResolvedReference(
            source_project=self.project,
            target_project=target,
            from_commit=from_commit,
            to_commit=to_commit,
            notation=expression.notation,
            text=expression.text,
        )

    def find_project(self, project_path: str | None) -> Project | None:
        if project_path is None:
            return self.project
        if project_path == self.project.path_with_namespace:
            return self.project
        if self.project_registry is None:
            return None
        return self.project_registry.find_by_path(project_path)

    def can_read(self, project: Project) -> bool:
        if self.permissions is None:
            return False
        return self.permissions.can_read(self.viewer, project)

    @staticmethod
    def find_commit(project: Project, ref: str) -> Commit | None:
        return project.repository.lookup_commit(ref)
