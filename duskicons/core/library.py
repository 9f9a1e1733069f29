"""Lookup of the bundled, read-only SVG icon library."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from duskicons.core.constants import SVG_EXTENSION
from duskicons.runtime_paths import icon_library_root


@dataclass(frozen=True, slots=True)
class Icon:
    """A canonical, un-themed icon loaded from the library."""

    name: str
    source_path: Path
    svg: str


def normalize_icon_name(name: str) -> str:
    """Map a requested icon name onto its file stem.

    Only the first space becomes an underscore, matching the names the
    original icon set was published under.
    """
    return name.replace(" ", "_", 1)


class IconLibrary:
    """Resolves icon names to SVG files in a single flat directory."""

    def __init__(self, root: str | Path | None = None) -> None:
        self._root = Path(root) if root is not None else icon_library_root()

    @property
    def root(self) -> Path:
        return self._root

    def list_icons(self) -> list[str]:
        """Return the names of every SVG icon, dotfiles excluded, sorted."""
        if not self._root.is_dir():
            return []
        names = [
            path.name[: -len(SVG_EXTENSION)]
            for path in self._root.iterdir()
            if path.is_file()
            and not path.name.startswith(".")
            and path.name.endswith(SVG_EXTENSION)
        ]
        return sorted(names)

    def source_path(self, name: str) -> Path:
        return self._root / f"{name}{SVG_EXTENSION}"

    def resolve(self, name: str) -> Path | None:
        """Return the source path for ``name`` or None when there is no such icon."""
        if not name or "/" in name or "\\" in name or name.startswith("."):
            return None
        path = self.source_path(name)
        if not path.is_file():
            return None
        return path

    def exists(self, name: str) -> bool:
        return self.resolve(name) is not None

    def read(self, name: str) -> Icon:
        """Load an icon's raw markup. Raises FileNotFoundError for unknown names."""
        path = self.resolve(name)
        if path is None:
            raise FileNotFoundError(f"No such icon: {name}")
        return Icon(name=name, source_path=path, svg=path.read_text(encoding="utf-8"))
