from typing import List

from models.enums import DataFormat
from models.project_file import ProjectFile
from models.project_model import Project
from services.errors import InvalidUploadError
from utils.tagging.formats.ProjectFormat import ProjectFormat
from utils.tagging.lines import project_dir, split_lines


class SingleFileFormat(ProjectFormat):
    """
    One delimited data file; every line is a row.
    """

    data_format = DataFormat.SINGLE_FILE

    async def initialize(self, project: Project, files: List[ProjectFile]) -> Project:
        if len(files) != 1:
            raise InvalidUploadError(f"Expected exactly one data file, got {len(files)}.")

        file = files[0]
        self._check_file_name(file.name)

        content = file.content.strip()
        if not content:
            raise InvalidUploadError("File is empty.")
        num_rows = len(split_lines(content))

        await self._upload(project_dir(project) + file.name, content)
        project.data_location = file.name

        await self._write_tag_files(project, num_rows)

        project.num_tagged_rows = 0
        project.num_total_rows = num_rows
        return project

    def _row_name(self, idx, data_lines):
        return f"Data Row {idx}"

    async def _row_content(self, project, idx, data_lines):
        return data_lines[idx]

    async def export(self, project: Project) -> str:
        return await self.store.download_file_as_string(project_dir(project) + project.tags_location)
