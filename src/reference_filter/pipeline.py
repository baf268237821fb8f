"""Ordered chain of document filters sharing one context."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

import lxml.html

from common.logger import get_logger

from .document import parse_fragment, render_markdown, to_html
from .filter import CommitRangeReferenceFilter
from .models import ResolvedReference

logger = get_logger(__name__)


class FilterStage(Protocol):
    """A stage takes a document and context and returns the document."""

    def __call__(
        self, doc: lxml.html.HtmlElement, context: Mapping[str, Any]
    ) -> lxml.html.HtmlElement: ...


@dataclass
class PipelineResult:
    """Output of a pipeline run."""

    document: lxml.html.HtmlElement
    references: list[ResolvedReference] = field(default_factory=list)

    @property
    def html(self) -> str:
        return to_html(self.document)


def commit_range_stage(results: list[ResolvedReference]) -> FilterStage:
    """Wrap the commit range filter as a stage reporting into results."""

    def stage(doc: lxml.html.HtmlElement, context: Mapping[str, Any]) -> lxml.html.HtmlElement:
        reference_filter = CommitRangeReferenceFilter(context)
        doc = reference_filter.run(doc)
        results.extend(reference_filter.references)
        return doc

    return stage


class Pipeline:
    """Runs filter stages in order over a single document."""

    def __init__(self, stages: Sequence[FilterStage]):
        self.stages = list(stages)

    def call(self, doc: lxml.html.HtmlElement | str, context: Mapping[str, Any]) -> lxml.html.HtmlElement:
        if isinstance(doc, str):
            doc = parse_fragment(doc)
        for stage in self.stages:
            doc = stage(doc, context)
        return doc


def render(markdown_text: str, context: Mapping[str, Any]) -> PipelineResult:
    """Render markdown and link the commit ranges it mentions.

    Code spans and fenced blocks become <code>/<pre> before the reference
    stage runs, so ranges written inside them stay literal.

    Args:
        markdown_text: Markdown source
        context: Filter context; must contain 'project'

    Returns:
        PipelineResult with the linked document and resolved references
    """
    references: list[ResolvedReference] = []
    pipeline = Pipeline([commit_range_stage(references)])
    document = pipeline.call(render_markdown(markdown_text), context)
    logger.debug(f"Pipeline resolved {len(references)} reference(s)")
    return PipelineResult(document=document, references=references)
