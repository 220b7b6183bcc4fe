"""Shared CLI options: flags that map onto ``DocsConfig`` fields."""

import argparse
import logging
import sys
from typing import Any

from plumage.config import DocsConfig, Environment, Header
from plumage.errors import ConfigurationError
from plumage.themes import THEMES

LOG_FORMAT = "[plumage] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Route library loggers to stderr at *level*."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the UI configuration flags to *parser*."""
    defaults = DocsConfig()
    parser.add_argument("--title", default=defaults.title, help="Documentation title")
    parser.add_argument("--description", default=defaults.description, help="API description")
    parser.add_argument(
        "--api-version", default=defaults.version, help="Version of the documented API"
    )
    parser.add_argument(
        "--base-path", default=defaults.base_path, help="URL prefix of the UI (default: /doc)"
    )
    parser.add_argument(
        "--doc-path",
        default=str(defaults.doc_path),
        help="Path to the specification file (default: ./docs/swagger.json)",
    )
    parser.add_argument(
        "--theme", default=defaults.default_theme, choices=THEMES, help="Default UI theme"
    )
    parser.add_argument("--dark-mode", action="store_true", help="Start in dark mode")
    parser.add_argument(
        "--no-debug", action="store_true", help="Disable the UI's request debugging panel"
    )
    parser.add_argument(
        "--no-persist-params",
        action="store_true",
        help="Do not keep debug parameters in sessionStorage",
    )
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Global request header sent by the UI (repeatable)",
    )
    parser.add_argument(
        "--env",
        action="append",
        default=[],
        metavar="NAME=URL",
        help="Selectable environment base URL (repeatable)",
    )
    parser.add_argument("--logo", default="", help="Logo image URL or data URI")
    parser.add_argument("--logo-link", default="", help="Link opened when clicking the logo")


def add_generator_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the documentation generator flags to *parser*."""
    defaults = DocsConfig()
    parser.add_argument(
        "--search-dir", default=defaults.search_dir, help="Directory the generator scans"
    )
    parser.add_argument(
        "--output-dir", default=defaults.output_dir, help="Directory the generator writes to"
    )
    parser.add_argument(
        "--generator-arg",
        action="append",
        default=[],
        metavar="ARG",
        help="Extra generator argument, repeatable; write --generator-arg=--flag for dashed values",
    )


def config_from_args(args: argparse.Namespace) -> DocsConfig:
    """Build a ``DocsConfig`` from whichever flags *args* carries.

    Raises:
        ConfigurationError: a ``--header`` or ``--env`` value is malformed.
    """
    fields: dict[str, Any] = {}
    simple = {
        "title": "title",
        "description": "description",
        "api_version": "version",
        "base_path": "base_path",
        "doc_path": "doc_path",
        "theme": "ui_theme",
        "dark_mode": "dark_mode",
        "logo": "logo",
        "logo_link": "logo_link",
        "search_dir": "search_dir",
        "output_dir": "output_dir",
        "auto_generate": "auto_generate",
    }
    for attr, field_name in simple.items():
        if hasattr(args, attr):
            fields[field_name] = getattr(args, attr)

    if getattr(args, "no_debug", False):
        fields["enable_debug"] = False
    if getattr(args, "no_persist_params", False):
        fields["persist_params"] = False
    if hasattr(args, "header"):
        fields["global_headers"] = tuple(Header.parse(item) for item in args.header)
    if hasattr(args, "env"):
        fields["environments"] = tuple(Environment.parse(item) for item in args.env)
    if hasattr(args, "generator_arg"):
        fields["generator_args"] = tuple(args.generator_arg)

    return DocsConfig(**fields)


def config_or_exit(args: argparse.Namespace) -> DocsConfig:
    """Like :func:`config_from_args`, but reports errors and exits with 2."""
    try:
        return config_from_args(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
