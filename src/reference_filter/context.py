"""Decides which text in a document may be scanned for references.

lxml keeps text in two slots: ``element.text`` (before the first child) and
``child.tail`` (after a child, owned by the child's parent). A tail is
eligible whenever its parent is, even if the child itself is ignored.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from lxml import etree

from common.constants import IGNORED_TAGS


def is_ignored(element: etree._Element) -> bool:
    """Check whether an element's own content must be left verbatim.

    Comments and processing instructions count as ignored.
    """
    if not isinstance(element.tag, str):
        return True
    return element.tag.lower() in IGNORED_TAGS


@dataclass(frozen=True)
class TextSlot:
    """A place in the tree holding one run of text."""

    element: etree._Element
    is_tail: bool

    @property
    def text(self) -> str:
        if self.is_tail:
            return self.element.tail or ""
        return self.element.text or ""


def iter_text_slots(root: etree._Element) -> Iterator[TextSlot]:
    """Yield eligible text slots under root in document order.

    Ignored subtrees are skipped whole; nothing below them is visited.
    The tail of root itself lies outside the document and is not yielded.
    """
    if is_ignored(root):
        return
    yield from _walk(root)


def _walk(element: etree._Element) -> Iterator[TextSlot]:
    if element.text:
        yield TextSlot(element, is_tail=False)
    for child in element:
        if not is_ignored(child):
            yield from _walk(child)
        if child.tail:
            yield TextSlot(child, is_tail=True)
