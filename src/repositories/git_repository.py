"""Commit lookup backed by a local git checkout."""

import re
import subprocess
from pathlib import Path

from common.logger import get_logger
from reference_filter.collaborators import Repository
from reference_filter.models import Commit

logger = get_logger(__name__)

COMMIT_ID = re.compile(r"[0-9a-fA-F]{1,40}")
FULL_ID_LENGTH = 40


def run_git(repo_root: Path, *args: str) -> str:
    """
    Run a read-only git command and return its stripped stdout.

    Args:
        repo_root: Directory to run git in
        *args: Arguments after 'git'

    Returns:
        Command output with surrounding whitespace removed

    Raises:
        subprocess.CalledProcessError: If git command fails
    """
    result = subprocess.run(
        ["git", *args],
        cwd=repo_root,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


class GitRepository(Repository):
    """Repository that answers lookups with ``git rev-parse``."""

    def __init__(self, path: Path):
        """Initialize the repository.

        Args:
            path: Work tree root, or the directory of a bare repository
        """
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"GitRepository({str(self.path)!r})"

    def is_valid(self) -> bool:
        """Check that path is itself a git repository, not just inside one."""
        if not self.path.is_dir():
            return False
        try:
            git_dir = Path(run_git(self.path, "rev-parse", "--absolute-git-dir"))
        except subprocess.CalledProcessError:
            return False
        root = self.path.resolve()
        return git_dir.resolve() in (root, root / ".git")

    def lookup_commit(self, ref: str) -> Commit | None:
        """
        Look up a commit by full or abbreviated id.

        Full ids use: git rev-parse --verify --quiet <ref>^{commit}
        Abbreviated ids use: git rev-parse --disambiguate=<ref>, which lists
        objects only, so a branch or tag spelled in hex cannot shadow a commit.

        Args:
            ref: Commit id, 1-40 hex characters

        Returns:
            The commit, or None if the id is malformed, unknown or ambiguous
        """
        if not COMMIT_ID.fullmatch(ref):
            return None
        ref = ref.lower()

        if len(ref) == FULL_ID_LENGTH:
            try:
                sha = run_git(self.path, "rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}")
            except subprocess.CalledProcessError:
                return None
            return Commit(id=sha) if sha == ref else None

        try:
            candidates = run_git(self.path, "rev-parse", f"--disambiguate={ref}").split()
        except subprocess.CalledProcessError:
            # git refuses prefixes shorter than its minimum abbreviation
            return None

        commits = [sha for sha in candidates if self.object_type(sha) == "commit"]
        if len(commits) != 1:
            if commits:
                logger.debug(f"{ref} is ambiguous between {len(commits)} commits")
            return None
        return Commit(id=commits[0])

    def object_type(self, sha: str) -> str | None:
        """Get the type of an object (commit, tree, blob, tag), if it exists."""
        try:
            return run_git(self.path, "cat-file", "-t", sha)
        except subprocess.CalledProcessError:
            return None
