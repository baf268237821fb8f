"""Implementations of the services reference filters consult."""

from .git_repository import GitRepository
from .memory import InMemoryProjectRegistry, InMemoryRepository
from .permissions import AllowListPermissions, PublicPermissions
from .registry import DirectoryProjectRegistry
from .urls import CompareUrlBuilder

__all__ = [
    "AllowListPermissions",
    "CompareUrlBuilder",
    "DirectoryProjectRegistry",
    "GitRepository",
    "InMemoryProjectRegistry",
    "InMemoryRepository",
    "PublicPermissions",
]
