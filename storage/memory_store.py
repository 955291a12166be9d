from typing import Dict, List

from services.errors import DownloadError
from utils.tagging.lines import split_lines


class InMemoryBlobStore:
    def __init__(self) -> None:
        self.files: Dict[str, bytes] = {}

    async def try_upload_file(self, path: str, content: bytes) -> bool:
        self.files[path] = bytes(content)
        return True

    async def download_file_as_string(self, path: str) -> str:
        if path not in self.files:
            raise DownloadError(f"File '{path}' does not exist.")
        return self.files[path].decode("utf-8")

    async def download_file_as_list(self, path: str) -> List[str]:
        return split_lines(await self.download_file_as_string(path))

    async def try_delete_directory(self, path: str) -> bool:
        prefix = path if path.endswith("/") else path + "/"
        for key in [key for key in self.files if key.startswith(prefix)]:
            del self.files[key]
        return True
