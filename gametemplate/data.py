"""Loading sprite, animation and widget frame data from CSV files."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterator, List, MutableMapping, Tuple, Union

from .assets import AnimationData, AnimationLibrary, AnimationState, AnimationType, FrameRect

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

FRAME_FILE = Path("Entity", "Frame.csv")
ANIMATION_FILE = Path("Entity", "Animation.csv")
WIDGET_FILE = Path("Widget", "Widget.csv")

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class DataFormatError(ValueError):
    """A data file row that cannot be read."""

    def __init__(self, path: PathLike, lineno: int, message: str) -> None:
        super().__init__(f"{os.fspath(path)}:{lineno}: {message}")
        self.path = path
        self.lineno = lineno


def split(line: str, delimiter: str) -> List[str]:
    """Split ``line`` at ``delimiter``; a trailing empty cell is dropped."""
    cells = line.split(delimiter)
    if cells[-1] == "":
        cells.pop()
    return cells


class _Row:
    def __init__(self, path: PathLike, lineno: int, cells: List[str]) -> None:
        self.path = path
        self.lineno = lineno
        self.cells = cells

    def error(self, message: str) -> DataFormatError:
        return DataFormatError(self.path, self.lineno, message)

    def cell(self, idx: int) -> str:
        if idx >= len(self.cells):
            raise self.error(f"missing column {idx}")
        return self.cells[idx]

    def to_int(self, text: str) -> int:
        match = _INT_PREFIX.match(text)
        if match is None:
            raise self.error(f"expected an integer, got {text!r}")
        return int(match.group(1))

    def to_float(self, text: str) -> float:
        match = _FLOAT_PREFIX.match(text)
        if match is None:
            raise self.error(f"expected a number, got {text!r}")
        return float(match.group(1))

    def integer(self, idx: int) -> int:
        return self.to_int(self.cell(idx))

    def rect(self, start: int, *, widget: bool) -> FrameRect:
        """Read ``(x,y,w,h)`` spread over four cells starting at ``start``."""
        x = self.to_int(self.cell(start)[1:])
        y = self.integer(start + 1)
        w = self.integer(start + 2)
        h_text = self.cell(start + 3)
        h = self.to_int(h_text[1:] if widget else h_text[:-1])
        return FrameRect(x, y, w, h)


def _rows(path: PathLike, skip_header: bool) -> Iterator[_Row]:
    with open(path, encoding="utf-8-sig") as file:
        lines: Iterator[Tuple[int, str]] = enumerate(file, 1)
        if skip_header:
            next(lines, None)
        for lineno, raw in lines:
            line = raw.rstrip("\r\n")
            if not line or line.startswith("#"):
                continue
            yield _Row(path, lineno, split(line, ","))


def load_frame_data(path: PathLike, sprites: MutableMapping[str, FrameRect]) -> None:
    """Read ``key,(x,y,w,h)`` rows after a header line into ``sprites``."""
    for row in _rows(path, skip_header=True):
        sprites[row.cell(0)] = row.rect(1, widget=False)


def load_animation_data(path: PathLike, animations: AnimationLibrary) -> None:
    """Read animation rows after a header line into ``animations``.

    A row is ``key,type,state,loop,interval,count`` followed by ``count``
    frames written as ``(x,y,w,h)``.
    """
    for row in _rows(path, skip_header=True):
        key = row.cell(0)
        try:
            anim_type = AnimationType(row.integer(1))
            state = AnimationState(row.integer(2))
        except ValueError as exc:
            if isinstance(exc, DataFormatError):
                raise
            raise row.error(str(exc)) from None

        animations.create(key)
        data = AnimationData(
            type=anim_type,
            is_loop=row.integer(3) != 0,
            interval_per_frame=row.to_float(row.cell(4)),
        )
        for i in range(row.integer(5)):
            data.frames.append(row.rect(6 + 4 * i, widget=False))
        animations.add_state(key, state, data)


def load_widget_data(
    path: PathLike, ui_frames: MutableMapping[str, List[FrameRect]]
) -> None:
    """Read widget rows into ``ui_frames``; the file has no header line.

    A row is ``kind,key,count`` followed by ``count`` frames written as
    ``(x, y, w, h)``; frames of rows sharing a key are appended in order.
    """
    for row in _rows(path, skip_header=False):
        key = row.cell(1)
        frames = [row.rect(3 + 4 * i, widget=True) for i in range(row.integer(2))]
        ui_frames.setdefault(key, []).extend(frames)


def load_all(
    data_dir: PathLike,
    sprites: MutableMapping[str, FrameRect],
    animations: AnimationLibrary,
    ui_frames: MutableMapping[str, List[FrameRect]],
) -> List[Path]:
    """Load the frame, animation and widget files below ``data_dir``.

    A file that cannot be opened is logged and skipped; the skipped paths
    are returned.
    """
    base = Path(data_dir)
    skipped: List[Path] = []
    jobs = (
        (FRAME_FILE, lambda p: load_frame_data(p, sprites)),
        (ANIMATION_FILE, lambda p: load_animation_data(p, animations)),
        (WIDGET_FILE, lambda p: load_widget_data(p, ui_frames)),
    )
    for relative, load in jobs:
        path = base / relative
        try:
            load(path)
        except OSError as exc:
            logger.error("Cannot open file at: %s (%s)", path, exc)
            skipped.append(path)
    return skipped