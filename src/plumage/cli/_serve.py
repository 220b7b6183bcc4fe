"""``plumage serve``: run the documentation UI as a standalone server."""

import argparse
import sys

from plumage.app import DocsApp
from plumage.cli._options import config_or_exit
from plumage.errors import ConfigurationError


def run_serve(args: argparse.Namespace) -> None:
    """Build the app from CLI flags and serve it until interrupted."""
    config = config_or_exit(args)
    app = DocsApp(config)

    url = f"http://{args.host}:{args.port}{config.base_path.rstrip('/')}/"
    print(f"Serving API documentation at {url}", file=sys.stderr)

    try:
        app.run(args.host, args.port, log_level=args.log_level)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
