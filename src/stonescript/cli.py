"""Command-line interface for StoneScript."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from stonescript import __version__
from stonescript.config import load_project
from stonescript.errors import ConfigError


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    root: Path
    entrypoint: Path
    left_margin: int
    show_tokens: bool
    show_tree: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="stonescript",
        description="StoneScript front end: tokenize and build the statement tree",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-r", "--root", default=".", help="Project root (default: .)")
    p.add_argument(
        "-e",
        "--entrypoint",
        help="Entrypoint file, relative to the root (default: from config or src/main.ss)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: <root>/stonescript.toml)",
    )
    p.add_argument(
        "--left-margin",
        type=int,
        default=None,
        metavar="N",
        help="Column number assigned to the first character of each line (default: 0)",
    )
    p.add_argument("--tokens", action="store_true", help="Print the token list")
    p.add_argument("--tree", action="store_true", help="Print the statement tree")
    p.add_argument("--debug", action="store_true", help="Dump a token table to stderr")
    return p


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    root = Path(args.root)
    config_path = Path(args.config) if args.config else None
    project = load_project(root, config_path)

    entrypoint = Path(args.entrypoint) if args.entrypoint else Path(project.entrypoint)

    left_margin = project.left_margin
    if args.left_margin is not None:
        if args.left_margin < 0:
            raise argparse.ArgumentTypeError("--left-margin must be non-negative")
        left_margin = args.left_margin

    # Neither flag means both
    show_tokens = args.tokens or not args.tree
    show_tree = args.tree or not args.tokens

    return CliOptions(
        root=root,
        entrypoint=entrypoint,
        left_margin=left_margin,
        show_tokens=show_tokens,
        show_tree=show_tree,
        debug=args.debug,
    )


def run_file(options: CliOptions) -> int:
    """Analyze the entrypoint and print the requested output. Returns exit code."""
    from stonescript.debug import dump_tokens, dump_tree, print_tokens
    from stonescript.pipeline import analyze

    path = options.root / options.entrypoint
    source = path.read_text(encoding="utf-8")
    result = analyze(source, options.left_margin)

    if options.debug and result.tokens is not None:
        print_tokens(result.tokens, file=sys.stderr)

    if options.show_tokens and result.tokens is not None:
        sys.stdout.write(dump_tokens(result.tokens) + "\n")
    if options.show_tree and result.nodes is not None:
        sys.stdout.write(dump_tree(result.nodes) + "\n")

    if result.error is not None:
        print(result.error.format(str(options.entrypoint)), file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, ConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        return run_file(options)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
