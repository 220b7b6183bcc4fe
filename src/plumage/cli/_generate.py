"""``plumage generate``: run the documentation generator once."""

import argparse

from plumage.cli._options import config_or_exit
from plumage.generator import generate_docs


def run_generate(args: argparse.Namespace) -> None:
    """Run the generator; exit 1 only if it ran and failed."""
    outcome = generate_docs(config_or_exit(args))
    if not outcome.ok:
        raise SystemExit(1)
