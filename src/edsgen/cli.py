# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""edsgen CLI: analyze, clone, block, component, template, library, core, init commands.

Usage:
    edsgen analyze (--url URL | --html-file FILE) [--format json|text]
    edsgen clone --url URL [-o DIR]
    edsgen block NAME [--buttons] [--lazy-load] [--no-responsive] [-o DIR]
    edsgen component NAME [--type functional|class] [-o DIR]
    edsgen template NAME [-o DIR]
    edsgen library [--category CAT | --search QUERY]
    edsgen core NAME [-o DIR]
    edsgen init NAME [-o DIR]
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import replace
from pathlib import Path

from tabulate import tabulate

from .config import Settings


def _output_dir(path_str: str | None) -> Path:
    p = Path(path_str) if path_str else Path.cwd()
    p.mkdir(parents=True, exist_ok=True)
    return p


def cmd_analyze(args: argparse.Namespace) -> None:
    """Analyze a live URL or a local HTML file and print the component inventory."""
    from ._progress import print_step, status_spinner
    from .serializer import to_json, to_text
    from .site_scraper import analyze_html, crawl_site

    if args.html_file:
        raw = Path(args.html_file).read_text(encoding="utf-8", errors="replace")
        analysis = analyze_html(raw, source_url=args.url or "")
    else:
        with status_spinner(f"Analyzing {args.url}..."):
            result = asyncio.run(crawl_site(args.url, settings=args.settings))
        if not result.success:
            assert result.problem is not None
            print(result.problem.to_cli_text(), file=sys.stderr)
            sys.exit(1)
        analysis = result.analysis
        if result.final_url and result.final_url != result.url:
            print_step(f"Redirected to {result.final_url}")

    print(to_json(analysis) if args.format == "json" else to_text(analysis))
    print_step(f"Components: {len(analysis.detected_components)}")


def cmd_clone(args: argparse.Namespace) -> None:
    """Fetch a page and write a full EDS project for it."""
    from ._progress import status_spinner
    from .site_generator import generate_site
    from .site_scraper import crawl_site

    with status_spinner(f"Analyzing {args.url}..."):
        result = asyncio.run(crawl_site(args.url, settings=args.settings))
    if not result.success:
        assert result.problem is not None
        print(result.problem.to_cli_text(), file=sys.stderr)
        sys.exit(1)

    site = generate_site(result, _output_dir(args.output))
    print(f"Site generated at {site.path}")
    if site.blocks:
        rows = [[b.name, b.description, b.confidence] for b in site.blocks]
        print(tabulate(rows, headers=["Block", "Component", "Confidence"], tablefmt="simple"))
    else:
        print("No components detected.")


def cmd_block(args: argparse.Namespace) -> None:
    """Write a generic custom block skeleton."""
    from . import GeneratedFile
    from .site_generator import write_block
    from .templates import block_template

    files = block_template(
        args.name,
        has_buttons=args.buttons,
        lazy_load=args.lazy_load,
        responsive=not args.no_responsive,
    )
    directory = _output_dir(args.output) / "blocks" / files.class_name
    written = write_block(
        [
            GeneratedFile(f"{files.class_name}.js", files.js),
            GeneratedFile(f"{files.class_name}.css", files.css),
        ],
        directory,
    )
    for path in written:
        print(f"Created {path}")


def cmd_component(args: argparse.Namespace) -> None:
    """Write a plain JS component module."""
    from .templates import component_template, to_class_name

    content = component_template(args.name, args.type)
    directory = _output_dir(args.output) / "components"
    path = directory / f"{to_class_name(args.name)}.js"
    directory.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    print(f"Created {path}")


def cmd_template(args: argparse.Namespace) -> None:
    """Write an HTML page template."""
    from .templates import page_template, to_class_name

    content = page_template(args.name)
    directory = _output_dir(args.output) / "templates"
    path = directory / f"{to_class_name(args.name)}.html"
    directory.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    print(f"Created {path}")


def cmd_library(args: argparse.Namespace) -> None:
    """List library blocks, optionally filtered by category or search text."""
    from .block_library import BLOCK_LIBRARY, blocks_in_category, list_categories, search_blocks

    if args.category:
        blocks = blocks_in_category(args.category)
    elif args.search:
        blocks = search_blocks(args.search)
    else:
        counts = list_categories()
        print(tabulate(list(counts.items()), headers=["Category", "Blocks"], tablefmt="simple"))
        print()
        blocks = list(BLOCK_LIBRARY.values())

    if not blocks:
        print("No matching blocks.")
        return
    rows = [[b.name, b.category, b.description] for b in blocks]
    print(tabulate(rows, headers=["Block", "Category", "Description"], tablefmt="simple"))


def cmd_core(args: argparse.Namespace) -> None:
    """Write a ready-made library block."""
    from .block_library import get_block
    from .emitter import emit
    from .errors import InvalidInputError
    from .site_generator import write_block

    block = get_block(args.name)
    if block is None:
        raise InvalidInputError(f"Unknown library block '{args.name}'. Run 'edsgen library' to list them.")
    directory = _output_dir(args.output) / "blocks" / block.name
    for path in write_block(emit(block.name), directory):
        print(f"Created {path}")


def cmd_init(args: argparse.Namespace) -> None:
    """Create an empty EDS project skeleton."""
    from .site_generator import init_project

    root = init_project(args.name, _output_dir(args.output))
    print(f"Project initialized at {root}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="AEM Edge Delivery Services block generator",
        prog="edsgen",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines on stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    _analyze_epilog = """\
examples:
  %(prog)s --url https://example.com                 Analyze a live page
  %(prog)s --url https://example.com --format json   Output JSON to stdout
  %(prog)s --html-file page.html                     Analyze a saved page
"""
    p_analyze = subparsers.add_parser(
        "analyze",
        help="Detect UI components on a page",
        epilog=_analyze_epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = p_analyze.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", type=str, metavar="URL", help="Page to fetch and analyze")
    source.add_argument("--html-file", type=str, metavar="FILE", help="Local HTML file to analyze")
    p_analyze.add_argument("--format", type=str, choices=["json", "text"], default="text")

    p_clone = subparsers.add_parser("clone", help="Generate an EDS project from a live page")
    p_clone.add_argument("--url", type=str, metavar="URL", required=True)
    p_clone.add_argument("-o", "--output", type=str, metavar="DIR", help="Parent directory (default: cwd)")

    p_block = subparsers.add_parser("block", help="Create a custom block skeleton")
    p_block.add_argument("name")
    p_block.add_argument("--buttons", action="store_true", help="Include button handling")
    p_block.add_argument("--lazy-load", action="store_true", help="Load content when scrolled into view")
    p_block.add_argument("--no-responsive", action="store_true", help="Omit the mobile media query")
    p_block.add_argument("-o", "--output", type=str, metavar="DIR")

    p_component = subparsers.add_parser("component", help="Create a JS component module")
    p_component.add_argument("name")
    p_component.add_argument("--type", type=str, choices=["functional", "class"], default="functional")
    p_component.add_argument("-o", "--output", type=str, metavar="DIR")

    p_template = subparsers.add_parser("template", help="Create an HTML page template")
    p_template.add_argument("name")
    p_template.add_argument("-o", "--output", type=str, metavar="DIR")

    p_library = subparsers.add_parser("library", help="Browse ready-made blocks")
    filters = p_library.add_mutually_exclusive_group()
    filters.add_argument("--category", type=str, help="template, content, container or form")
    filters.add_argument("--search", type=str, help="Match block names and descriptions")

    p_core = subparsers.add_parser("core", help="Write a ready-made block from the library")
    p_core.add_argument("name")
    p_core.add_argument("-o", "--output", type=str, metavar="DIR")

    p_init = subparsers.add_parser("init", help="Initialize an empty EDS project")
    p_init.add_argument("name")
    p_init.add_argument("-o", "--output", type=str, metavar="DIR")

    return parser


COMMANDS = {
    "analyze": cmd_analyze,
    "clone": cmd_clone,
    "block": cmd_block,
    "component": cmd_component,
    "template": cmd_template,
    "library": cmd_library,
    "core": cmd_core,
    "init": cmd_init,
}


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    from .logging_config import configure

    args = build_parser().parse_args(argv)

    settings = Settings.from_env()
    if args.verbose:
        settings = replace(settings, log_level="DEBUG")
    if args.json_logs:
        settings = replace(settings, log_json=True)
    configure(json_output=settings.log_json, level=settings.log_level)
    args.settings = settings

    try:
        COMMANDS[args.command](args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)
    except SystemExit:
        raise
    except Exception as e:
        from .problem_details import from_exception

        problem = from_exception(e)
        print(problem.to_cli_text(), file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
