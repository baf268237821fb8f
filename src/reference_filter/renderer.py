"""Builds anchor elements for resolved commit ranges."""

import lxml.html

from common.constants import BASE_REFERENCE_CLASS, COMMIT_RANGE_CLASS

from .collaborators import UrlBuilder
from .models import RenderConfig, ResolvedReference


class LinkRenderer:
    """Renders resolved references as ``<a>`` elements."""

    def __init__(self, url_builder: UrlBuilder, config: RenderConfig):
        self.url_builder = url_builder
        self.config = config

    def render(self, reference: ResolvedReference) -> lxml.html.HtmlElement:
        """Build the anchor replacing a matched expression.

        The link text is the matched text as typed, so abbreviated ids stay
        abbreviated. The title uses full ids.

        Args:
            reference: Resolved commit range

        Returns:
            Detached anchor element without tail text
        """
        anchor = lxml.html.Element("a")
        anchor.set("href", self.url_for(reference))
        anchor.set("title", self.config.title_for(reference))
        anchor.set("class", self.css_class())
        anchor.text = reference.text
        return anchor

    def url_for(self, reference: ResolvedReference) -> str:
        return self.url_builder.build_compare_url(
            reference.source_project,
            reference.target_project,
            reference.compare_from,
            reference.compare_to,
            only_path=self.config.only_path,
        )

    def css_class(self) -> str:
        classes = [BASE_REFERENCE_CLASS, COMMIT_RANGE_CLASS]
        if self.config.reference_class:
            classes.append(self.config.reference_class)
        return " ".join(classes)
