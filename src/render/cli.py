#!/usr/bin/env python3
"""CLI for rendering markdown notes with commit range links.

Usage:
    python -m render.cli render NOTES.md --project group/project [--output NOTES.html]
    python -m render.cli refs NOTES.md --project group/project [--format json]
"""

import argparse
import json
import sys
from pathlib import Path

from common.env import env
from common.logger import error, progress, setup_logging, success, warning
from reference_filter.pipeline import render as render_notes
from repositories import AllowListPermissions, CompareUrlBuilder, DirectoryProjectRegistry


def build_context(args) -> dict:
    """Assemble the filter context from command-line arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        Filter context; 'project' is None when the local project was not found
    """
    registry = DirectoryProjectRegistry(args.projects_root)
    project_path = args.project or env.default_project()
    project = registry.find_by_path(project_path) if project_path else None

    permissions = AllowListPermissions({None: args.allow or []})

    return {
        "project": project,
        "reference_class": args.reference_class,
        "only_path": args.only_path,
        "current_user": None,
        "project_registry": registry,
        "permissions": permissions,
        "url_builder": CompareUrlBuilder(args.base_url or env.base_url()),
    }


def _render_file(args):
    if not args.file.is_file():
        error(f"{args.file} is not a file")
        return None

    project_path = args.project or env.default_project()
    if not project_path:
        error("No project given; pass --project or set GIT_REFS_DEFAULT_PROJECT")
        return None

    context = build_context(args)
    if context["project"] is None:
        error(f"Project '{project_path}' not found under {args.projects_root}")
        return None

    return render_notes(args.file.read_text(encoding="utf-8"), context)


def cmd_render(args):
    """Render a markdown file to HTML with commit range links.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    result = _render_file(args)
    if result is None:
        return 1

    if args.output:
        args.output.write_text(result.html, encoding="utf-8")
        success(f"Wrote {args.output} ({len(result.references)} commit range link(s))")
    else:
        print(result.html)
    return 0


def cmd_refs(args):
    """List the commit ranges a markdown file links to.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    result = _render_file(args)
    if result is None:
        return 1

    if args.format == "json":
        print(json.dumps([reference.to_dict() for reference in result.references], indent=2))
        return 0

    if not result.references:
        warning(f"No commit ranges linked in {args.file}")
        return 0

    for reference in result.references:
        commits = f"{reference.from_commit.short_id}{reference.notation.value}{reference.to_commit.short_id}"
        progress(f"{reference.text}  ->  {reference.target_project.path_with_namespace} {commits}")
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", type=Path, help="Markdown file to render")
    parser.add_argument(
        "--project",
        type=str,
        default=None,
        help="Project the file belongs to, as namespace/project (default: GIT_REFS_DEFAULT_PROJECT)",
    )
    parser.add_argument(
        "--projects-root",
        type=Path,
        default=env.projects_root(),
        help="Directory holding namespace/project checkouts (default: GIT_REFS_PROJECTS_ROOT)",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Host for compare links (default: GIT_REFS_BASE_URL)",
    )
    parser.add_argument(
        "--allow",
        action="append",
        metavar="PROJECT",
        help="Other project the reader may see; repeat for several",
    )
    parser.add_argument("--reference-class", type=str, default=None, help="Extra CSS class for links")
    parser.add_argument(
        "--only-path",
        action="store_true",
        help="Emit links without scheme and host",
    )


def main(argv: list[str] | None = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Link commit ranges in markdown notes")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Render markdown to HTML with links")
    _add_common_arguments(render_parser)
    render_parser.add_argument("--output", type=Path, default=None, help="Write HTML to this file")
    render_parser.set_defaults(func=cmd_render)

    refs_parser = subparsers.add_parser("refs", help="List linked commit ranges")
    _add_common_arguments(refs_parser)
    refs_parser.add_argument(
        "--format",
        choices=["console", "json"],
        default="console",
        help="Output format",
    )
    refs_parser.set_defaults(func=cmd_refs)

    args = parser.parse_args(argv)
    setup_logging(level=args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
