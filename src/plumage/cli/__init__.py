"""Plumage CLI: serve the documentation UI, run the generator, inspect config.

Entry point registered as ``plumage`` in ``pyproject.toml``::

    [project.scripts]
    plumage = "plumage.cli:main"
"""

import argparse
import sys

from plumage.cli._options import (
    add_config_arguments,
    add_generator_arguments,
    configure_logging,
)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``plumage`` command."""
    parser = argparse.ArgumentParser(
        prog="plumage",
        description="Plumage: a themeable Swagger/OpenAPI documentation UI.",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: info)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- plumage serve ----------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve the documentation UI")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port number")
    add_config_arguments(serve_parser)
    add_generator_arguments(serve_parser)
    serve_parser.add_argument(
        "--auto-generate",
        action="store_true",
        help="Run the documentation generator before serving",
    )

    # -- plumage generate -------------------------------------------------
    generate_parser = subparsers.add_parser(
        "generate", help="Run the documentation generator once"
    )
    add_generator_arguments(generate_parser)

    # -- plumage config ---------------------------------------------------
    config_parser = subparsers.add_parser(
        "config", help="Print the runtime configuration document"
    )
    add_config_arguments(config_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    configure_logging(args.log_level)

    if args.command == "serve":
        from plumage.cli._serve import run_serve

        run_serve(args)
    elif args.command == "generate":
        from plumage.cli._generate import run_generate

        run_generate(args)
    elif args.command == "config":
        from plumage.cli._show import show_config

        show_config(args)
