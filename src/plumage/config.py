"""Documentation UI configuration.

DocsConfig is a frozen dataclass: immutable after creation and typed field by field.
Normalization happens once, in ``__post_init__``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from plumage.errors import ConfigurationError
from plumage.themes import THEMES, Theme

DEFAULT_BASE_PATH = "/doc"
DEFAULT_DOC_PATH = "./docs/swagger.json"


def _split_pair(text: str, what: str) -> tuple[str, str]:
    left, sep, right = text.partition("=")
    if not sep or not left.strip():
        msg = f"Invalid {what} {text!r}: expected the form NAME=VALUE"
        raise ConfigurationError(msg)
    return left.strip(), right.strip()


@dataclass(frozen=True, slots=True)
class Header:
    """A header sent by the UI with every API request (e.g. ``Authorization``)."""

    key: str
    value: str

    @classmethod
    def parse(cls, text: str) -> Header:
        """Build a Header from ``"KEY=VALUE"``."""
        return cls(*_split_pair(text, "header"))

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "value": self.value}


@dataclass(frozen=True, slots=True)
class Environment:
    """A named deployment the UI can switch its base URL to."""

    name: str
    base_url: str

    @classmethod
    def parse(cls, text: str) -> Environment:
        """Build an Environment from ``"NAME=URL"``."""
        return cls(*_split_pair(text, "environment"))

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "baseUrl": self.base_url}


@dataclass(frozen=True, slots=True)
class DocsConfig:
    """Documentation UI configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DocsConfig(
            title="Pets API",
            doc_json=spec_bytes,
            ui_theme=Theme.MODERN,
            global_headers=(Header("Authorization", "Bearer dev"),),
        )
    """

    # Display
    title: str = "API Documentation"
    description: str = "API documentation powered by plumage"
    version: str = "1.0.0"

    # Routing
    base_path: str = DEFAULT_BASE_PATH

    # Specification source; doc_json wins when both are set
    doc_path: str | Path = DEFAULT_DOC_PATH
    doc_json: bytes | None = None

    # Front-end behaviour
    enable_debug: bool = True
    dark_mode: bool = False
    persist_params: bool | None = None  # None resolves to True
    global_headers: tuple[Header, ...] = ()

    # External documentation generator (runs once before serving)
    auto_generate: bool = False
    generator_command: tuple[str, ...] = ("swag", "init")
    search_dir: str = "."
    output_dir: str = "./docs"
    generator_args: tuple[str, ...] = ()

    # Look and feel
    ui_theme: Theme | str = Theme.DEFAULT
    logo: str = ""
    logo_link: str = ""
    environments: tuple[Environment, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_path", _normalize_base_path(self.base_path))
        if not str(self.doc_path):
            object.__setattr__(self, "doc_path", DEFAULT_DOC_PATH)

        theme = str(self.ui_theme) or Theme.DEFAULT.value
        if theme not in THEMES:
            msg = f"Unknown UI theme {theme!r}. Available themes: {', '.join(THEMES)}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "ui_theme", Theme(theme))

        if not self.generator_command:
            msg = "generator_command must name an executable"
            raise ConfigurationError(msg)

        # Accept lists from callers; store tuples so the record stays hashable
        for name in ("global_headers", "environments", "generator_args", "generator_command"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    @property
    def default_theme(self) -> str:
        """The configured theme as a plain identifier."""
        return str(self.ui_theme)

    @property
    def resolved_persist_params(self) -> bool:
        """The three-state persistence flag with the unset case resolved."""
        return True if self.persist_params is None else self.persist_params

    def replace(self, **changes: Any) -> DocsConfig:
        """Return a copy with *changes* applied (re-validated)."""
        return replace(self, **changes)


def _normalize_base_path(base_path: str) -> str:
    """Ensure a leading slash, strip trailing ones; empty means the default."""
    if not base_path:
        return DEFAULT_BASE_PATH
    stripped = base_path.strip("/")
    return "/" + stripped if stripped else "/"
