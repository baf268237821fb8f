"""Lexical grammar for commit range expressions.

    [namespace/project@]<from><.. or ...><to>

Matching is purely syntactic. Whether the ids name real commits is left to
the resolver.
"""

import re
from collections.abc import Iterator

from .models import RawExpression
from .types import RangeNotation

PROJECT_PATH = r"[A-Za-z0-9_-]+(?:/[A-Za-z0-9_-]+)+"
COMMIT_ID = r"[0-9a-fA-F]{1,40}"

COMMIT_RANGE_PATTERN = re.compile(
    rf"""
    (?<![\w@/.-])                         # not inside a word, path or locator
    (?:(?P<project>{PROJECT_PATH})@)?
    (?P<from>{COMMIT_ID})
    (?P<notation>\.\.\.|\.\.)             # three dots win over two
    (?P<to>{COMMIT_ID})
    (?!\w)
    """,
    re.VERBOSE,
)


def scan_commit_ranges(text: str) -> Iterator[RawExpression]:
    """Yield commit range expressions in text, left to right.

    Matches never overlap. A hex run touching another alphanumeric
    character, or a malformed locator, produces no match.

    Args:
        text: Plain text of a single text node

    Yields:
        RawExpression for each match
    """
    for match in COMMIT_RANGE_PATTERN.finditer(text):
        yield RawExpression(
            text=match.group(0),
            start=match.start(),
            end=match.end(),
            project_path=match.group("project"),
            from_ref=match.group("from"),
            notation=RangeNotation(match.group("notation")),
            to_ref=match.group("to"),
        )


def contains_commit_range(text: str) -> bool:
    """Cheap pre-check used to skip text slots without candidates."""
    return ".." in text and COMMIT_RANGE_PATTERN.search(text) is not None
