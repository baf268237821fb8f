"""Command-line front end for rendering markdown with commit range links."""
