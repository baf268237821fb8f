"""Filter that links commit range references in an HTML document.

Usage:
    from reference_filter import CommitRangeReferenceFilter, to_html

    doc = CommitRangeReferenceFilter.call("See 1c002d...d200c1", {"project": project})
    print(to_html(doc))
"""

from collections.abc import Mapping
from typing import Any

import lxml.html

from common.env import env
from common.logger import get_logger

from .context import TextSlot, iter_text_slots
from .document import parse_fragment
from .models import RenderConfig, ResolvedReference
from .pattern import contains_commit_range, scan_commit_ranges
from .renderer import LinkRenderer
from .resolver import CommitRangeResolver
from .types import MissingContextError

logger = get_logger(__name__)


class CommitRangeReferenceFilter:
    """Replaces commit range expressions with links to the compare view.

    Context keys:
        project: Project the document belongs to (required)
        reference_class: Extra CSS class for produced links
        only_path: Build links without scheme and host
        current_user: Viewer identity for permission checks
        project_registry: Resolves 'namespace/project@' locators
        permissions: Policy deciding cross-project access
        url_builder: Builds compare URLs; defaults to GIT_REFS_BASE_URL
    """

    REQUIRED_CONTEXT = ("project",)

    def __init__(self, context: Mapping[str, Any]):
        self.validate(context)
        self.context = context
        self.config = RenderConfig(
            reference_class=context.get("reference_class"),
            only_path=bool(context.get("only_path", False)),
        )
        self.resolver = CommitRangeResolver(
            context["project"],
            viewer=context.get("current_user"),
            project_registry=context.get("project_registry"),
            permissions=context.get("permissions"),
        )
        self.renderer = LinkRenderer(self._url_builder(context), self.config)
        self.references: list[ResolvedReference] = []

    @classmethod
    def validate(cls, context: Mapping[str, Any]) -> None:
        missing = [key for key in cls.REQUIRED_CONTEXT if context.get(key) is None]
        if missing:
            raise MissingContextError(cls.__name__, missing)

    @classmethod
    def call(
        cls, doc: lxml.html.HtmlElement | str, context: Mapping[str, Any]
    ) -> lxml.html.HtmlElement:
        """Run the filter once over a document.

        Args:
            doc: Parsed fragment, or an HTML string to parse first
            context: Filter context, see class docstring

        Returns:
            The same tree, modified in place (or the parsed tree for strings)

        Raises:
            MissingContextError: If the context has no project
        """
        return cls(context).run(doc)

    def run(self, doc: lxml.html.HtmlElement | str) -> lxml.html.HtmlElement:
        if isinstance(doc, str):
            doc = parse_fragment(doc)

        # Build every replacement before touching the tree
        slots = [slot for slot in iter_text_slots(doc) if contains_commit_range(slot.text)]
        replacements = [(slot, self.split_slot(slot)) for slot in slots]
        for slot, (head, anchors) in replacements:
            if anchors:
                self.splice(slot, head, anchors)

        if self.references:
            logger.debug(f"Linked {len(self.references)} commit range reference(s)")
        return doc

    def split_slot(self, slot: TextSlot) -> tuple[str, list[lxml.html.HtmlElement]]:
        """Build the links for one text slot.

        Returns:
            Text before the first link, and the links carrying the text that
            follows each of them as their tail. Rejected matches stay in the text.
        """
        text = slot.text
        head = text
        anchors: list[lxml.html.HtmlElement] = []
        cursor = 0

        for expression in scan_commit_ranges(text):
            reference = self.resolver.resolve(expression)
            if reference is None:
                continue
            if anchors:
                anchors[-1].tail = text[cursor : expression.start] or None
            else:
                head = text[: expression.start]
            anchors.append(self.renderer.render(reference))
            self.references.append(reference)
            cursor = expression.end

        if anchors:
            anchors[-1].tail = text[cursor:] or None
        return head, anchors

    @staticmethod
    def splice(slot: TextSlot, head: str, anchors: list[lxml.html.HtmlElement]) -> None:
        if slot.is_tail:
            parent = slot.element.getparent()
            slot.element.tail = head or None
            position = parent.index(slot.element) + 1
        else:
            parent = slot.element
            slot.element.text = head or None
            position = 0

        for offset, anchor in enumerate(anchors):
            parent.insert(position + offset, anchor)

    @staticmethod
    def _url_builder(context: Mapping[str, Any]):
        url_builder = context.get("url_builder")
        if url_builder is None:
            from repositories.urls import CompareUrlBuilder

            url_builder = CompareUrlBuilder(env.base_url())
        return url_builder
