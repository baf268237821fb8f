"""Commit range reference filter for rendered markdown.

Example:
    >>> from reference_filter import CommitRangeReferenceFilter, parse_fragment, to_html
    >>>
    >>> doc = CommitRangeReferenceFilter.call(
    ...     parse_fragment("See 1c002d...d200c1"),
    ...     {"project": project, "url_builder": CompareUrlBuilder("https://git.example.com")},
    ... )
    >>> to_html(doc)
"""

from .collaborators import PermissionPolicy, ProjectRegistry, Repository, UrlBuilder
from .document import parse_fragment, render_markdown, to_html
from .filter import CommitRangeReferenceFilter
from .models import Commit, Project, RawExpression, RenderConfig, ResolvedReference
from .pattern import COMMIT_RANGE_PATTERN, scan_commit_ranges
from .pipeline import Pipeline, PipelineResult, render
from .types import FilterError, MissingContextError, RangeNotation

__all__ = [
    # Filter
    "CommitRangeReferenceFilter",
    "Pipeline",
    "PipelineResult",
    "render",
    # Documents
    "parse_fragment",
    "render_markdown",
    "to_html",
    # Grammar
    "COMMIT_RANGE_PATTERN",
    "scan_commit_ranges",
    # Collaborator interfaces
    "PermissionPolicy",
    "ProjectRegistry",
    "Repository",
    "UrlBuilder",
    # Models
    "Commit",
    "Project",
    "RawExpression",
    "RenderConfig",
    "ResolvedReference",
    # Types and exceptions
    "FilterError",
    "MissingContextError",
    "RangeNotation",
]
