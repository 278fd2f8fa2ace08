"""Local filesystem store for uploaded Android packages."""

from pathlib import Path
from typing import BinaryIO, Optional

from fastapi.concurrency import run_in_threadpool

from schoolhub.core.config import settings

_CHUNK_SIZE = 1024 * 1024


class FileTooLargeError(Exception):
    def __init__(self, limit: int) -> None:
        super().__init__(f"File exceeds {limit} bytes")
        self.limit = limit


def storage_root() -> Path:
    root = Path(settings.apk_storage_dir).resolve()
    root.mkdir(parents=True, exist_ok=True)
    return root


def path_for(file_name: str) -> Path:
    """Absolute path of ``file_name`` inside the storage root."""
    root = storage_root()
    candidate = (root / file_name).resolve()
    try:
        candidate.relative_to(root)
    except ValueError as exc:
        raise ValueError("File name escapes the APK storage directory") from exc
    return candidate


async def write(file_name: str, stream: BinaryIO, max_bytes: Optional[int] = None) -> int:
    """Copy ``stream`` to ``file_name`` and return the number of bytes written.

    The partial file is removed if the copy fails or goes over ``max_bytes``.
    """
    destination = path_for(file_name)

    def _write() -> int:
        stream.seek(0)
        size = 0
        try:
            with destination.open("wb") as target:
                while True:
                    chunk = stream.read(_CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if max_bytes is not None and size > max_bytes:
                        raise FileTooLargeError(max_bytes)
                    target.write(chunk)
        except Exception:
            destination.unlink(missing_ok=True)
            raise
        return size

    return await run_in_threadpool(_write)


async def delete(file_path: str) -> None:
    await run_in_threadpool(Path(file_path).unlink, missing_ok=True)


async def promote(temp_name: str, file_name: str) -> Path:
    """Move a finished upload from ``temp_name`` to ``file_name``."""
    source = path_for(temp_name)
    destination = path_for(file_name)
    await run_in_threadpool(source.replace, destination)
    return destination
