"""Registry of the directories the game loads its resources from."""

from __future__ import annotations

import os
import sys
from typing import Dict, Iterator, Optional

BASE_PATH = "BasePath"
TEXTURE_PATH = "TexturePath"
DATA_PATH = "DataPath"
FONT_PATH = "FontPath"
SOUND_PATH = "SoundPath"

DEFAULT_SEGMENTS: Dict[str, str] = {
    TEXTURE_PATH: "Texture/",
    DATA_PATH: "Data/",
    FONT_PATH: "Font/",
    SOUND_PATH: "Sound/",
}


def default_base_path() -> str:
    """Directory of the running program, with a trailing separator."""
    return os.path.join(os.path.dirname(os.path.abspath(sys.argv[0])), "")


def _with_trailing_separator(path: str) -> str:
    if path and not path.endswith(("/", "\\")):
        return path + os.sep
    return path


class PathRegistry:
    """Named resource directories, each built on the base path.

    On creation the base path and the texture, data, font and sound
    directories are registered.
    """

    def __init__(self, base_path: Optional[str] = None) -> None:
        if base_path is None:
            base_path = default_base_path()
        self._paths: Dict[str, str] = {BASE_PATH: _with_trailing_separator(base_path)}
        for key, segment in DEFAULT_SEGMENTS.items():
            self.add_path(key, segment)

    def __contains__(self, key: object) -> bool:
        return key in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def add_path(self, key: str, segment: str) -> bool:
        """Register ``segment`` under the base path as ``key``.

        Returns False if ``key`` is already registered. With an empty base
        path the new entry is empty as well.
        """
        if key in self._paths:
            return False
        base = self._paths.get(BASE_PATH, "")
        self._paths[key] = base + segment if base else base
        return True

    def find_path(self, key: str) -> Optional[str]:
        """The path registered as ``key``, or None."""
        return self._paths.get(key)