"""Search a directory tree for a configuration file."""

from __future__ import annotations

import os
import posixpath
import stat
from dataclasses import dataclass, field


def file_exists(root: str | os.PathLike[str], file_path: str) -> bool:
    """Return whether ``file_path`` under ``root`` exists and is not a directory."""
    try:
        mode = os.stat(os.path.join(root, file_path)).st_mode
    except (FileNotFoundError, NotADirectoryError):
        return False
    return not stat.S_ISDIR(mode)


@dataclass
class Finder:
    """Looks for a file over search paths, base names and extensions, in that order."""

    paths: list[str] = field(default_factory=list)
    file_names: list[str] = field(default_factory=list)
    extensions: list[str] = field(default_factory=list)
    without_extension: bool = False

    def find(self, root: str | os.PathLike[str]) -> str:
        """Return the path, relative to ``root``, of the first match, or ``""``."""
        for search_path in self.paths:
            for file_name in self.file_names:
                names = [f"{file_name}.{ext}" for ext in self.extensions]
                if self.without_extension:
                    names.append(file_name)
                for name in names:
                    candidate = posixpath.normpath(posixpath.join(search_path, name))
                    if file_exists(root, candidate):
                        return candidate
        return ""