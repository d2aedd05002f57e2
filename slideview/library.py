"""Image library: the directory scanned once at startup, plus the save action."""

from __future__ import annotations

import logging
import os
import re
import shutil
from dataclasses import dataclass

log = logging.getLogger(__name__)

PICTURE_EXTENSIONS = {'.png', '.jpeg', '.jpg', '.gif'}

_DIGITS = re.compile(r'([0-9]+)')


class LibraryError(Exception):
    """Startup configuration problem (bad image or save directory)."""


def natural_key(name: str):
    """Sort key that orders digit runs numerically ('img2' < 'img10')."""
    key = []
    for part in _DIGITS.split(name):
        if _DIGITS.fullmatch(part):
            key.append((0, int(part)))
        elif part:
            key.append((1, part.casefold()))
    return tuple(key)


def is_picture(name: str) -> bool:
    return os.path.splitext(name)[1].lower() in PICTURE_EXTENSIONS


def scan_images(source_dir: str) -> list[str]:
    """Picture filenames directly inside source_dir, in natural order.

    Raises LibraryError if the directory can't be read.
    """
    try:
        with os.scandir(source_dir) as entries:
            names = [e.name for e in entries
                     if e.is_file() and is_picture(e.name)]
    except OSError as e:
        raise LibraryError(f"Failed to open images directory {source_dir}: {e}") from e
    return sorted(names, key=natural_key)


def save_image(source_dir: str, save_dir: str, filename: str) -> None:
    """Copy source_dir/filename to save_dir/filename, overwriting."""
    shutil.copyfile(os.path.join(source_dir, filename),
                    os.path.join(save_dir, filename))


@dataclass(frozen=True)
class ImageLibrary:
    """Image filenames of one directory, fixed for the life of the process.

    Request handlers only read from it, so it is shared without a lock.
    """

    source_dir: str
    images: tuple[str, ...]
    save_dir: str | None = None

    @classmethod
    def scan(cls, source_dir: str, save_dir: str | None = None) -> ImageLibrary:
        """Build a library from disk. Raises LibraryError on bad directories."""
        if save_dir is not None and not os.path.exists(save_dir):
            raise LibraryError(f"Invalid save path: {save_dir}")
        images = scan_images(source_dir)
        log.info("Found %d images in %s", len(images), source_dir)
        return cls(source_dir=source_dir, images=tuple(images), save_dir=save_dir)

    def __len__(self) -> int:
        return len(self.images)

    @property
    def can_save(self) -> bool:
        return self.save_dir is not None

    def save(self, filename: str) -> bool:
        """Best-effort copy of an image into the save directory.

        Returns True if the file was copied. Failures are logged, never raised.
        """
        if self.save_dir is None:
            return False
        try:
            save_image(self.source_dir, self.save_dir, filename)
        except OSError as e:
            log.warning("Failed to save %s: %s", filename, e)
            return False
        log.info("Saved %s to %s", filename, self.save_dir)
        return True
