"""``plumage config``: print the runtime configuration document."""

import argparse
import json

from plumage.cli._options import config_or_exit
from plumage.runtime import runtime_document


def show_config(args: argparse.Namespace) -> None:
    """Print what ``config.json`` would contain for these flags."""
    config = config_or_exit(args)
    print(json.dumps(runtime_document(config), indent=2, ensure_ascii=False))
