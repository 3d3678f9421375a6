"""Recursive project copy with excluded directories."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Iterable, Iterator, Tuple

from ..errors import DestinationExistsError
from ..logging import get_logger

_logger = get_logger("scaffold.copier")


def _nested_output_root(source_root: Path, dest_root: Path) -> Path | None:
    """Return the top-level directory under ``source_root`` holding ``dest_root``."""
    try:
        relative = dest_root.relative_to(source_root)
    except ValueError:
        return None
    if not relative.parts:
        return None
    return source_root / relative.parts[0]


def _iter_copy_pairs(
    source_root: Path, dest_root: Path, excluded: frozenset[str]
) -> Iterator[Tuple[Path, Path, bool]]:
    """Yield ``(source, destination, is_dir)`` pairs in walk order."""
    # Generated projects live under this directory; copies never include it.
    output_root = _nested_output_root(source_root, dest_root)
    for dirpath, dirnames, filenames in os.walk(source_root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(source_root)

        kept = []
        for name in sorted(dirnames):
            if name in excluded:
                _logger.debug("Skipping excluded directory %s", (rel_dir / name).as_posix())
                continue
            candidate = (current_dir / name).resolve()
            if candidate in (dest_root, output_root):
                _logger.debug("Skipping output directory %s", (rel_dir / name).as_posix())
                continue
            kept.append(name)
        dirnames[:] = kept

        yield current_dir, dest_root / rel_dir, True
        for filename in sorted(filenames):
            yield current_dir / filename, dest_root / rel_dir / filename, False


def copy_tree(
    source_root: Path | str,
    dest_root: Path | str,
    excluded_dir_names: Iterable[str] = (),
) -> int:
    """Copy ``source_root`` into a fresh ``dest_root``, skipping excluded directories.

    Files are copied byte-for-byte. Returns the number of files copied.
    Raises :class:`DestinationExistsError` when ``dest_root`` already exists;
    any ``OSError`` during the walk aborts the copy and leaves the partial tree
    in place.
    """
    source = Path(source_root).expanduser().resolve()
    destination = Path(dest_root).expanduser().resolve()
    if not source.is_dir():
        raise NotADirectoryError(f"Source path is not a directory: {source}")
    if destination.exists():
        raise DestinationExistsError(destination)

    excluded = frozenset(excluded_dir_names)
    copied = 0
    for src, dst, is_dir in _iter_copy_pairs(source, destination, excluded):
        if is_dir:
            dst.mkdir(parents=True, exist_ok=dst != destination)
            continue
        shutil.copyfile(src, dst)
        copied += 1

    _logger.debug("Copied %d files from %s to %s", copied, source, destination)
    return copied


__all__ = ["copy_tree"]
