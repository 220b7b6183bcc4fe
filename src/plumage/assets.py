"""Read-only asset bundle: the static UI shipped with plumage.

The bundle is a flat, immutable mapping of ``relative/path -> bytes`` whose
first path segment names a namespace: one per theme plus the shared
``assets`` namespace (stylesheets, scripts, fonts).

Loaded once per process and shared by reference with every request; there
is no mutation path.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator, Mapping
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from types import MappingProxyType

SHARED_NAMESPACE = "assets"

_SKIPPED_DIRS = frozenset({"__pycache__"})


class AssetNamespace(Mapping[str, bytes]):
    """Immutable view of one namespace, keyed relative to the namespace root.

    ``ns["index.html"]`` returns the bytes of ``<namespace>/index.html``.
    """

    __slots__ = ("_dirs", "_files", "name")

    def __init__(self, name: str, files: Mapping[str, bytes]) -> None:
        self.name = name
        self._files = MappingProxyType(dict(files))
        dirs: set[str] = {""}
        for path in self._files:
            parts = path.split("/")[:-1]
            for depth in range(1, len(parts) + 1):
                dirs.add("/".join(parts[:depth]))
        self._dirs = frozenset(dirs)

    def __getitem__(self, key: str) -> bytes:
        return self._files[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"AssetNamespace({self.name!r}, {len(self)} files)"

    def is_dir(self, path: str) -> bool:
        """True if *path* (no leading or trailing slash) is a directory."""
        return path in self._dirs


class AssetBundle(Mapping[str, bytes]):
    """All bundled UI files, partitioned into namespaces.

    Build with :meth:`from_directory` or :meth:`from_package`; use
    :func:`default_bundle` for the process-wide packaged copy.
    """

    __slots__ = ("_files", "_namespaces")

    def __init__(self, files: Mapping[str, bytes]) -> None:
        self._files = MappingProxyType(dict(files))
        grouped: dict[str, dict[str, bytes]] = {}
        for path, content in self._files.items():
            namespace, sep, relative = path.partition("/")
            if sep:
                grouped.setdefault(namespace, {})[relative] = content
        self._namespaces = MappingProxyType(
            {name: AssetNamespace(name, files) for name, files in grouped.items()}
        )

    def __getitem__(self, key: str) -> bytes:
        return self._files[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"AssetBundle(namespaces={sorted(self._namespaces)!r}, files={len(self)})"

    @property
    def namespaces(self) -> tuple[str, ...]:
        return tuple(sorted(self._namespaces))

    def namespace(self, name: str) -> AssetNamespace:
        """Return the namespace *name*; an unknown name yields an empty view."""
        found = self._namespaces.get(name)
        if found is None:
            return AssetNamespace(name, {})
        return found

    # -- Factories --

    @classmethod
    def from_directory(cls, directory: str | Path) -> AssetBundle:
        """Load every file below *directory* into a bundle."""
        root = Path(directory)
        files = {
            path.relative_to(root).as_posix(): path.read_bytes()
            for path in sorted(root.rglob("*"))
            if path.is_file() and not _SKIPPED_DIRS.intersection(path.parts)
        }
        return cls(files)

    @classmethod
    def from_package(cls, package: str = "plumage", subdir: str = "ui") -> AssetBundle:
        """Load the UI bundled inside an installed package."""
        root = resources.files(package).joinpath(subdir)
        return cls(dict(_walk(root, "")))


@functools.cache
def default_bundle() -> AssetBundle:
    """The packaged UI, loaded on first use and shared for the process lifetime."""
    return AssetBundle.from_package()


def _walk(node: Traversable, prefix: str) -> Iterable[tuple[str, bytes]]:
    for child in node.iterdir():
        if child.is_dir():
            if child.name not in _SKIPPED_DIRS:
                yield from _walk(child, f"{prefix}{child.name}/")
        elif child.is_file():
            yield f"{prefix}{child.name}", child.read_bytes()
