"""Parsing and serialization of HTML fragments."""

from html import escape

import lxml.html
import markdown

from common.constants import FRAGMENT_WRAPPER

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]
HTML_WHITESPACE = " \t\n\r\f"


def parse_fragment(html: str) -> lxml.html.HtmlElement:
    """Parse an HTML fragment into a tree under a wrapper element.

    Whitespace before the first element is dropped by the HTML parser, so it
    is put back as the wrapper's leading text.

    Args:
        html: HTML fragment, possibly with leading text or several top-level elements

    Returns:
        Wrapper element holding the fragment's content
    """
    fragment = lxml.html.fragment_fromstring(html, create_parent=FRAGMENT_WRAPPER)
    leading = html[: len(html) - len(html.lstrip(HTML_WHITESPACE))]
    if leading and not fragment.text:
        fragment.text = leading
    return fragment


def to_html(fragment: lxml.html.HtmlElement) -> str:
    """Serialize the content of a wrapper element, without the wrapper.

    Args:
        fragment: Element returned by parse_fragment

    Returns:
        Inner HTML of the fragment
    """
    parts = [escape(fragment.text or "", quote=False)]
    for child in fragment:
        parts.append(lxml.html.tostring(child, encoding="unicode", with_tail=True))
    return "".join(parts)


def render_markdown(text: str) -> lxml.html.HtmlElement:
    """Render markdown to HTML and parse it into a fragment tree.

    Args:
        text: Markdown source

    Returns:
        Wrapper element holding the rendered document
    """
    html = markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
    return parse_fragment(html)
