# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the specdoc command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from specdoc.compiler.build import CompilerError, compile_files, load_module
from specdoc.model.document import ModuleDocument
from specdoc.validation.checks import validate
from specdoc.views.builder import build_document
from specdoc.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_BUILD_DIRECTORY,
    WorkspaceConfig,
    WorkspaceConfigError,
    default_config_text,
    find_sources,
    load_workspace_config,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main(argv: list[str] | None = None) -> None:
    """Run the specdoc CLI."""
    parser = argparse.ArgumentParser(
        prog="specdoc",
        description="specdoc: documentation generator for module specifications",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress of parsing and building",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new specdoc workspace",
        description=f"Create a default '{CONFIG_FILE_NAME}' in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the workspace in (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check specification files for errors and documentation gaps",
        description=(
            "Parse specification files and report syntax errors and documentation "
            "warnings. Directories are searched for specification files."
        ),
    )
    check_parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to check (default: current directory)",
    )

    # build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Build document artifacts for a workspace",
        description="Compile every specification file of a workspace into document artifacts.",
    )
    build_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the specdoc workspace (default: current directory)",
    )

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Show the table of contents of a specification file",
        description="Print the ordered types and functions of one specification file.",
    )
    show_parser.add_argument("file", help="Specification file to show")
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full document model as JSON",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "build":
        return _cmd_build(args)
    if args.command == "show":
        return _cmd_show(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(
            f"Error: workspace already exists at '{config_file}'.",
            file=sys.stderr,
        )
        return 1

    config_file.write_text(default_config_text(), encoding="utf-8")
    print(f"Initialized specdoc workspace at '{config_file}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    files: list[Path] = []
    for raw in args.paths:
        path = Path(raw)
        if path.is_dir():
            try:
                config = _workspace_config_or_default(path)
            except WorkspaceConfigError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                return 1
            files.extend(find_sources(path, config))
        elif path.is_file():
            files.append(path)
        else:
            print(f"Error: '{path}' does not exist.", file=sys.stderr)
            return 1

    if not files:
        print("No specification files found.")
        return 0

    print(f"Checking {len(files)} specification file(s)...")
    has_errors = False
    for spec_file in files:
        try:
            module = load_module(spec_file)
        except CompilerError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            has_errors = True
            continue
        for warning in validate(module).warnings:
            print(f"Warning: {spec_file}: {warning.message}")

    if has_errors:
        return 1

    print("No errors found.")
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    """Handle the build subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        print(
            f"Error: no specdoc workspace found at '{directory}'. Run 'specdoc init' to initialize a workspace.",
            file=sys.stderr,
        )
        return 1

    try:
        config = load_workspace_config(config_file)
    except WorkspaceConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    files = find_sources(directory, config)
    if not files:
        print("No specification files found in the workspace.")
        return 0

    build_dir = directory / config.build_directory
    logger.info("Building %d file(s) into %s", len(files), build_dir)
    try:
        compiled = compile_files(files, build_dir, directory)
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Built {len(compiled)} document(s) into '{build_dir}'.")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the show subcommand."""
    try:
        document = build_document(load_module(Path(args.file)))
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(document.model_dump_json(indent=2))
    else:
        print(_format_toc(document))
    return 0


def _workspace_config_or_default(directory: Path) -> WorkspaceConfig:
    """Load the directory's workspace config, or fall back to the defaults."""
    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        return load_workspace_config(config_file)
    return WorkspaceConfig(build_directory=DEFAULT_BUILD_DIRECTORY)


def _format_toc(document: ModuleDocument) -> str:
    lines = [f"module {document.name}"]
    for section in document.toc:
        lines.append(f"{section.title} (#{section.anchor})")
        for entry in section.entries:
            lines.append(f"  {entry.name} (#{entry.anchor_id})")
    return "\n".join(lines)
