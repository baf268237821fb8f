"""Shared constants for git-refs.

For environment-based configuration (base URL, projects root), use the env module:
    from common.env import env
    base_url = env.base_url()
"""

# Class carried by every reference link produced by the markdown pipeline
BASE_REFERENCE_CLASS = "gfm"

# Kind-specific class for commit range links
COMMIT_RANGE_CLASS = "gfm-commit_range"

# Elements whose text is emitted verbatim by reference filters
IGNORED_TAGS: frozenset[str] = frozenset({"pre", "code", "a", "style"})

COMMIT_RANGE_TITLE = "Commits {from_id} through {to_id}"

# Wrapper element used when parsing HTML fragments
FRAGMENT_WRAPPER = "div"
