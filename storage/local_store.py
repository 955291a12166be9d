import asyncio
import logging
import shutil
from pathlib import Path
from typing import List

from services.errors import DownloadError
from utils.tagging.lines import split_lines

logger = logging.getLogger(__name__)


class LocalBlobStore:
    """
    Blob store kept in a directory on disk. Object paths are relative to
    the root; anything resolving outside of it is refused.
    """

    def __init__(self, root) -> None:
        self.root = Path(root).resolve()

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if target != self.root and self.root not in target.parents:
            raise ValueError(f"Path '{path}' escapes the storage root.")
        return target

    async def try_upload_file(self, path: str, content: bytes) -> bool:
        def _write():
            target = self._resolve(path)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)

        try:
            await asyncio.to_thread(_write)
        except (OSError, ValueError):
            logger.exception("Failure - error while uploading to '%s'.", path)
            return False
        return True

    async def download_file_as_string(self, path: str) -> str:
        def _read():
            return self._resolve(path).read_bytes().decode("utf-8")

        try:
            return await asyncio.to_thread(_read)
        except (OSError, ValueError) as e:
            raise DownloadError(f"File '{path}' could not be downloaded: {e}") from e

    async def download_file_as_list(self, path: str) -> List[str]:
        return split_lines(await self.download_file_as_string(path))

    async def try_delete_directory(self, path: str) -> bool:
        def _delete():
            target = self._resolve(path)
            if target == self.root:
                raise ValueError("Refusing to delete the storage root.")
            if target.exists():
                shutil.rmtree(target)

        try:
            await asyncio.to_thread(_delete)
        except (OSError, ValueError):
            logger.exception("Error while deleting directory '%s'.", path)
            return False
        return True
