"""Environment configuration interface for git-refs.

All environment variable access goes through this module.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level(default: str = "INFO") -> str:
        """Get the logging level.

        Returns:
            Level name from LOG_LEVEL, defaults to the given default
        """
        return os.getenv("LOG_LEVEL", default)

    @staticmethod
    def base_url() -> str:
        """Get the host that compare URLs are built against.

        Returns:
            Base URL without trailing slash, defaults to 'http://localhost'
        """
        return os.getenv("GIT_REFS_BASE_URL", "http://localhost").rstrip("/")

    @staticmethod
    def projects_root() -> Path:
        """Get the directory holding namespace/project git checkouts.

        Returns:
            Path to the projects root, defaults to ./repositories
        """
        return Path(os.getenv("GIT_REFS_PROJECTS_ROOT", "./repositories"))

    @staticmethod
    def default_project() -> str | None:
        """Get the project path used when the CLI is not given --project.

        Returns:
            Project path such as 'group/project', or None when unset
        """
        return os.getenv("GIT_REFS_DEFAULT_PROJECT") or None


# Singleton instance for convenient access
env = Environment()
