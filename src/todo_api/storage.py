"""Filesystem storage for uploaded task images and avatars."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from starlette.concurrency import run_in_threadpool

from .errors import StorageError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class IncomingFile:
    """A binary upload detached from any particular web framework."""

    filename: str
    content: bytes
    content_type: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.content


class UploadStorage:
    """Store uploads under collision-free names and map references back to files.

    A reference is the public URL path of the file, e.g. ``/uploads/<hex>.png``.
    """

    def __init__(self, directory: Path, url_prefix: str = "/uploads") -> None:
        self._directory = Path(directory).resolve()
        self._url_prefix = "/" + url_prefix.strip("/")

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def url_prefix(self) -> str:
        return self._url_prefix

    def ensure_directory(self) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)

    async def store(self, upload: IncomingFile) -> str:
        """Write ``upload`` to disk and return its reference."""
        return await run_in_threadpool(self.store_sync, upload.content, upload.filename)

    async def delete(self, ref: str | None) -> bool:
        """Remove the file behind ``ref``; missing files are not an error."""
        return await run_in_threadpool(self.delete_sync, ref)

    def store_sync(self, content: bytes, original_filename: str) -> str:
        suffix = PurePosixPath(original_filename.replace("\\", "/")).suffix.lower()
        name = f"{uuid.uuid4().hex}{suffix}"
        target = self._directory / name
        try:
            self.ensure_directory()
            target.write_bytes(content)
        except OSError as exc:
            logger.error(
                "Failed to write upload",
                extra={"upload_path": str(target), "original_filename": original_filename},
                exc_info=exc,
            )
            raise StorageError() from exc
        logger.info("Stored upload", extra={"upload_name": name, "size": len(content)})
        return f"{self._url_prefix}/{name}"

    def delete_sync(self, ref: str | None) -> bool:
        if not ref:
            return False
        try:
            path = self.resolve(ref)
        except ValidationError:
            logger.warning("Ignoring delete for foreign upload reference", extra={"ref": ref})
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError:
            logger.warning("Failed to delete upload", extra={"ref": ref}, exc_info=True)
            return False
        logger.info("Deleted upload", extra={"ref": ref})
        return True

    def resolve(self, ref: str) -> Path:
        """Return the absolute path of the file referenced by ``ref``."""
        prefix = f"{self._url_prefix}/"
        if not ref.startswith(prefix):
            raise ValidationError("Unknown upload reference.", details={"ref": ref})
        name = ref[len(prefix):]
        if not name or "/" in name or "\\" in name or name in {".", ".."}:
            raise ValidationError("Unknown upload reference.", details={"ref": ref})
        path = (self._directory / name).resolve()
        if path.parent != self._directory:
            raise ValidationError("Unknown upload reference.", details={"ref": ref})
        return path


__all__ = ["IncomingFile", "UploadStorage"]
