import logging
from typing import List

from models.data_row import DataRow
from models.enums import DataFormat
from models.project_file import ProjectFile
from models.project_model import Project
from services.errors import InvalidUploadError, OutOfRangeError, UploadError
from storage.blob_store import BlobStore
from utils.tagging.constants import (
    DEFAULT_TAGS_ROW_CONTENTS,
    FILE_PRETAGS,
    FILE_TAGS,
    RESERVED_FILE_NAMES,
)
from utils.tagging.lines import join_lines, project_dir
from utils.tagging.reconcile import batch_window, require_rows, resolve_row_status

logger = logging.getLogger(__name__)


class ProjectFormat:
    """
    Storage layout of one data format.

    Every project keeps three aligned files under "{owner_id}/{uuid}/":
    the data file (or the index of data files), the final tags and the
    pre-tags. Line i of each one describes the same row. Subclasses decide
    how the data side is written, how a row gets its name and content, and
    how the final tags are exported.
    """

    data_format: DataFormat = None

    def __init__(self, store: BlobStore):
        self.store = store

    async def initialize(self, project: Project, files: List[ProjectFile]) -> Project:
        raise NotImplementedError

    async def export(self, project: Project) -> str:
        raise NotImplementedError

    def _row_name(self, idx: int, data_lines: List[str]) -> str:
        raise NotImplementedError

    async def _row_content(self, project: Project, idx: int, data_lines: List[str]) -> str:
        raise NotImplementedError

    async def get_batch(self, project: Project, batch_start: int, batch_size: int) -> List[DataRow]:
        if batch_start < 0:
            raise OutOfRangeError(f"'batch_start={batch_start}' can not be negative.")

        directory = project_dir(project)
        data_path = directory + project.data_location
        tags_path = directory + project.tags_location
        pretags_path = directory + project.pretags_location

        data_lines = await self.store.download_file_as_list(data_path)
        final_tags = await self.store.download_file_as_list(tags_path)
        pre_tags = await self.store.download_file_as_list(pretags_path)

        window = batch_window(batch_start, batch_size, project.num_total_rows)
        if not window:
            return []

        for lines, path in ((data_lines, data_path), (final_tags, tags_path), (pre_tags, pretags_path)):
            require_rows(lines, window[-1] + 1, path)

        rows = []
        for idx in window:
            status, tag = resolve_row_status(final_tags[idx], pre_tags[idx])
            rows.append(DataRow(
                name=self._row_name(idx, data_lines),
                row_id=idx,
                content=await self._row_content(project, idx, data_lines),
                status=status,
                tag=tag,
            ))
        return rows

    async def _upload(self, path: str, content: str) -> None:
        if await self.store.try_upload_file(path, content.encode("utf-8")):
            logger.info("Success - uploaded '%s'.", path)
            logger.debug("Content of '%s': %r", path, content)
        else:
            logger.error("Failure - error while uploading '%s'.", path)
            raise UploadError(path)

    async def _write_tag_files(self, project: Project, num_rows: int) -> None:
        directory = project_dir(project)
        tags = join_lines([DEFAULT_TAGS_ROW_CONTENTS] * num_rows)

        await self._upload(directory + FILE_TAGS, tags)
        project.tags_location = FILE_TAGS

        await self._upload(directory + FILE_PRETAGS, tags)
        project.pretags_location = FILE_PRETAGS

    @staticmethod
    def _check_file_name(name: str) -> None:
        if not name or not name.strip():
            raise InvalidUploadError("File name can not be empty.")
        if "\n" in name or "\r" in name:
            raise InvalidUploadError(f"File name {name!r} can not contain line breaks.")
        if "/" in name or "\\" in name or name in (".", ".."):
            raise InvalidUploadError(f"File name '{name}' can not contain path components.")
        if name in RESERVED_FILE_NAMES:
            raise InvalidUploadError(f"File name '{name}' is reserved.")
