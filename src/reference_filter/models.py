"""Data models for commit range references."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from common.constants import COMMIT_RANGE_TITLE

from .types import RangeNotation

if TYPE_CHECKING:
    from .collaborators import Repository


@dataclass(frozen=True)
class Commit:
    """A commit that exists in some repository."""

    id: str  # canonical full id

    @property
    def short_id(self) -> str:
        return self.id[:8]


@dataclass(eq=False)
class Project:
    """A project and the repository backing it.

    Projects compare by ``path_with_namespace``, so handles resolved
    separately for the same path are equal.
    """

    namespace: str
    path: str
    repository: Repository = field(repr=False)

    @property
    def path_with_namespace(self) -> str:
        return f"{self.namespace}/{self.path}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self.path_with_namespace == other.path_with_namespace

    def __hash__(self) -> int:
        return hash(self.path_with_namespace)


@dataclass(frozen=True)
class RawExpression:
    """A commit range expression found in a text span."""

    text: str  # exact matched substring
    start: int
    end: int
    project_path: str | None  # None means the local project
    from_ref: str
    notation: RangeNotation
    to_ref: str


@dataclass(frozen=True)
class ResolvedReference:
    """A commit range whose endpoints exist and may be shown to the viewer."""

    source_project: Project
    target_project: Project
    from_commit: Commit
    to_commit: Commit
    notation: RangeNotation
    text: str

    @property
    def is_cross_project(self) -> bool:
        return self.source_project != self.target_project

    @property
    def compare_from(self) -> str:
        """Start of the comparison; the first parent for two-dot ranges."""
        if self.notation.excludes_start:
            return f"{self.from_commit.id}^"
        return self.from_commit.id

    @property
    def compare_to(self) -> str:
        return self.to_commit.id

    def to_reference(self, from_project: Project | None = None) -> str:
        """Canonical reference string, prefixed when seen from another project."""
        reference = f"{self.from_commit.id}{self.notation.value}{self.to_commit.id}"
        if from_project is not None and from_project != self.target_project:
            return f"{self.target_project.path_with_namespace}@{reference}"
        return reference

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "reference": self.to_reference(self.source_project),
            "project": self.target_project.path_with_namespace,
            "from": self.from_commit.id,
            "to": self.to_commit.id,
            "notation": self.notation.value,
            "compare_from": self.compare_from,
            "compare_to": self.compare_to,
        }


@dataclass(frozen=True)
class RenderConfig:
    """Per-invocation rendering options."""

    reference_class: str | None = None
    only_path: bool = False
    title_template: str = COMMIT_RANGE_TITLE

    def title_for(self, reference: ResolvedReference) -> str:
        return self.title_template.format(
            from_id=reference.from_commit.id, to_id=reference.to_commit.id
        )
