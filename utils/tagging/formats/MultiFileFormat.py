import asyncio
import logging
from typing import List

import pandas as pd

from models.enums import DataFormat
from models.project_file import ProjectFile
from models.project_model import Project
from services.errors import InvalidUploadError, UploadError
from utils.tagging.constants import EXPORT_COLUMNS, FILE_DATA_INDEX
from utils.tagging.formats.ProjectFormat import ProjectFormat
from utils.tagging.lines import join_lines, project_dir
from utils.tagging.reconcile import require_rows

logger = logging.getLogger(__name__)


class MultiFileFormat(ProjectFormat):
    """
    Many discrete data files, one per row. The generated data_index.csv
    lists their names in upload order, and that order is the row id.
    """

    data_format = DataFormat.MULTI_FILE

    async def initialize(self, project: Project, files: List[ProjectFile]) -> Project:
        if not files:
            raise InvalidUploadError("At least one data file is required.")

        names = [file.name for file in files]
        for name in names:
            self._check_file_name(name)
        if len(set(names)) != len(names):
            raise InvalidUploadError("Data file names must be unique.")

        directory = project_dir(project)
        await self._upload_data_files(directory, files)

        await self._upload(directory + FILE_DATA_INDEX, join_lines(names))
        project.data_location = FILE_DATA_INDEX

        await self._write_tag_files(project, len(files))

        project.num_tagged_rows = 0
        project.num_total_rows = len(files)
        return project

    async def _upload_data_files(self, directory: str, files: List[ProjectFile]) -> None:
        results = await asyncio.gather(
            *(self.store.try_upload_file(directory + file.name, file.content.encode("utf-8")) for file in files),
            return_exceptions=True,
        )

        failed = []
        for file, result in zip(files, results):
            path = directory + file.name
            if result is True:
                logger.info("Success - uploaded '%s'.", path)
                continue
            if isinstance(result, BaseException):
                logger.error("Failure - error while uploading '%s': %s", path, result)
            else:
                logger.error("Failure - error while uploading '%s'.", path)
            failed.append(path)

        if failed:
            raise UploadError(failed[0])

    def _row_name(self, idx, data_lines):
        return data_lines[idx]

    async def _row_content(self, project, idx, data_lines):
        return await self.store.download_file_as_string(project_dir(project) + data_lines[idx])

    async def export(self, project: Project) -> str:
        directory = project_dir(project)
        data_path = directory + project.data_location
        tags_path = directory + project.tags_location

        file_names = await self.store.download_file_as_list(data_path)
        logger.info("Downloaded data index - %s.", data_path)
        tags = await self.store.download_file_as_list(tags_path)
        logger.info("Downloaded tags file - %s.", tags_path)

        total = project.num_total_rows
        require_rows(file_names, total, data_path)
        require_rows(tags, total, tags_path)

        export_df = pd.DataFrame(
            {EXPORT_COLUMNS[0]: file_names[:total], EXPORT_COLUMNS[1]: tags[:total]},
            columns=EXPORT_COLUMNS,
        )
        return export_df.to_csv(index=False, lineterminator="\n").removesuffix("\n")
