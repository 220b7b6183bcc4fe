"""The runtime-configuration document served as ``config.json``.

Composed once from a ``DocsConfig``. The front end reads it on boot to
learn the title, theme list, global headers, environments and so on.
"""

import json
from typing import Any

from plumage import __version__
from plumage.config import DocsConfig
from plumage.themes import THEMES


def runtime_document(config: DocsConfig) -> dict[str, Any]:
    """Build the front-end configuration as a JSON-ready dict."""
    return {
        "title": config.title,
        "description": config.description,
        "version": config.version,
        "enableDebug": config.enable_debug,
        "darkMode": config.dark_mode,
        "globalHeaders": [header.to_dict() for header in config.global_headers],
        "defaultTheme": config.default_theme,
        "themes": list(THEMES),
        "plumageVersion": __version__,
        "logo": config.logo,
        "logoLink": config.logo_link,
        "environments": [env.to_dict() for env in config.environments],
        "persistParams": config.resolved_persist_params,
    }


def encode_runtime_document(config: DocsConfig) -> bytes:
    """Serialize :func:`runtime_document` compactly with a stable key order."""
    return json.dumps(
        runtime_document(config),
        ensure_ascii=False,
        separators=(",", ":"),
        sort_keys=True,
    ).encode("utf-8")
