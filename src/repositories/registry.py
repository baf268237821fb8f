"""Project registry over a directory of git checkouts.

Layout:
    <root>/<namespace>/<project>/        work tree
    <root>/<namespace>/<project>.git/    bare repository
"""

import re
from pathlib import Path

from common.logger import get_logger
from reference_filter.collaborators import ProjectRegistry
from reference_filter.models import Project

from .git_repository import GitRepository

logger = get_logger(__name__)

SEGMENT = re.compile(r"[A-Za-z0-9_-]+")


class DirectoryProjectRegistry(ProjectRegistry):
    """Maps 'namespace/project' paths to git repositories under a root."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def find_by_path(self, path_with_namespace: str) -> Project | None:
        """Find a project by path.

        Returns:
            Project backed by a GitRepository, or None if the path is malformed
            or no checkout exists for it
        """
        segments = path_with_namespace.split("/")
        if len(segments) < 2 or not all(SEGMENT.fullmatch(s) for s in segments):
            return None

        location = self.root.joinpath(*segments)
        if not location.is_dir():
            location = location.with_name(f"{segments[-1]}.git")
            if not location.is_dir():
                logger.debug(f"No checkout for {path_with_namespace} under {self.root}")
                return None

        return Project(
            namespace="/".join(segments[:-1]),
            path=segments[-1],
            repository=GitRepository(location),
        )
