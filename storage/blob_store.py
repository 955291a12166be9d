from typing import List, Protocol


class BlobStore(Protocol):
    async def try_upload_file(self, path: str, content: bytes) -> bool: ...

    async def download_file_as_string(self, path: str) -> str: ...

    async def download_file_as_list(self, path: str) -> List[str]: ...

    async def try_delete_directory(self, path: str) -> bool: ...
