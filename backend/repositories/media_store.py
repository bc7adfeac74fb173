"""
File-based implementation of MediaStoreProtocol.
Photos and videos live as plain files in `<data_dir>/media/`; the plan document
only keeps the handle returned by `put`.
"""

import logging
import threading
from pathlib import Path
from typing import Optional

from repositories.base import MediaFileInfo
from repositories.errors import InvalidMediaName, MediaNotFoundError, StorageIOError

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_DIR = "media"


class MediaFileStore:
    """Stores opaque binary files by caller-chosen name. No renaming, no versioning."""

    def __init__(self, data_dir: Path, dirname: str = DEFAULT_MEDIA_DIR):
        self.data_dir = Path(data_dir)
        self.dirname = dirname
        self.media_dir = self.data_dir / dirname
        self._lock = threading.Lock()

    def _path(self, name: str) -> Path:
        if (
            not name
            or name in (".", "..")
            or "/" in name
            or "\\" in name
            or "\x00" in name
        ):
            raise InvalidMediaName(name)
        return self.media_dir / name

    def handle(self, name: str) -> str:
        """Handle stored in MediaItem records, relative to the data dir."""
        return f"{self.dirname}/{name}"

    def put(self, name: str, data: bytes) -> str:
        """Write `data` as `name`, replacing any existing file. Returns the handle."""
        path = self._path(name)
        try:
            self.media_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"Failed to create media directory: {e}") from e
        with self._lock:
            try:
                with open(path, "wb") as f:
                    f.write(data)
            except OSError as e:
                logger.warning("Media write failed for %s: %s", name, e)
                raise StorageIOError(f"Failed to write media file '{name}': {e}") from e
        logger.info("Saved media %s (%.1f KB)", name, len(data) / 1024)
        return self.handle(name)

    def get(self, name: str) -> bytes:
        path = self._path(name)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise MediaNotFoundError(name) from e
        except OSError as e:
            raise StorageIOError(f"Failed to read media file '{name}': {e}") from e

    def delete(self, name: str) -> None:
        """Remove `name`. Deleting a file that is not there is not an error."""
        path = self._path(name)
        with self._lock:
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                raise StorageIOError(f"Failed to delete media file '{name}': {e}") from e
        logger.debug("Deleted media %s", name)

    def info(self, name: str) -> MediaFileInfo:
        """Size in bytes plus pixel dimensions when the file is a readable image."""
        path = self._path(name)
        try:
            size = path.stat().st_size
        except FileNotFoundError as e:
            raise MediaNotFoundError(name) from e
        except OSError as e:
            raise StorageIOError(f"Failed to stat media file '{name}': {e}") from e
        return MediaFileInfo(size=size, dimensions=_image_dimensions(path))


def _image_dimensions(path: Path) -> Optional[tuple[int, int]]:
    """(width, height) via Pillow, or None for videos and anything it cannot decode."""
    from PIL import Image, UnidentifiedImageError

    try:
        with Image.open(path) as im:
            return im.size
    except (UnidentifiedImageError, OSError, ValueError) as e:
        logger.debug("No dimensions for %s: %s", path.name, e)
        return None
