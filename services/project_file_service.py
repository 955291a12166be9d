import asyncio
import json
import logging
import uuid
from typing import List, Optional
from weakref import WeakValueDictionary

from models.enums import DataFormat, ProjectType, Status
from models.project_file import ProjectFile
from models.project_model import Project
from services.errors import DirectoryDeleteError, UploadError
from storage.blob_store import BlobStore
from utils.tagging.formats.registry import get_project_format
from utils.tagging.lines import project_dir
from utils.tagging.tag_file import write_tag

logger = logging.getLogger(__name__)

# one in-flight tag mutation per project; entries go away with their last user
_tag_locks = WeakValueDictionary()


def _tag_lock(project_uuid: str) -> asyncio.Lock:
    lock = _tag_locks.get(project_uuid)
    if lock is None:
        lock = asyncio.Lock()
        _tag_locks[project_uuid] = lock
    return lock


def initialize_project(name: str, owner_id, description: str, project_type: ProjectType,
                       data_format: DataFormat, tags: List[str]) -> Project:
    return Project(
        uuid=str(uuid.uuid4()),
        name=name,
        owner_id=str(owner_id),
        description=description,
        project_type=project_type,
        data_format=data_format,
        available_tags=json.dumps(list(tags or [])),
        status=Status.NOT_TAGGED,
        num_total_rows=0,
        num_tagged_rows=0,
    )


async def set_project_files(project: Project, files: List[ProjectFile], store: BlobStore) -> Optional[Project]:
    """
    Creates the data, tags and pre-tags files of a new project.

    Returns None when a write was not confirmed. Storage may then be left
    partially initialized; delete the project files before trying again.
    """
    project_format = get_project_format(project.data_format, store)
    try:
        return await project_format.initialize(project, files)
    except UploadError as e:
        logger.error("Files of project %s were not initialized: %s", project.uuid, e)
        return None


async def delete_project_files(project: Project, store: BlobStore) -> None:
    directory = project_dir(project)
    try:
        deleted = await store.try_delete_directory(directory)
    except Exception as e:
        logger.exception("Error while deleting directory '%s'.", directory)
        raise DirectoryDeleteError(f"Files of project '{project.uuid}' were not deleted.") from e

    if not deleted:
        logger.error("Error while deleting directory '%s'.", directory)
        raise DirectoryDeleteError(f"Files of project '{project.uuid}' were not deleted.")
    logger.info("Deleted directory '%s'.", directory)


async def get_data_batch(project: Project, batch_start: int, batch_size: int, store: BlobStore) -> List[dict]:
    project_format = get_project_format(project.data_format, store)
    rows = await project_format.get_batch(project, batch_start, batch_size)
    return [row.to_json() for row in rows]


async def update_tag(project: Project, row_id: int, tag: str, store: BlobStore) -> Optional[Project]:
    async with _tag_lock(project.uuid):
        try:
            return await write_tag(project, row_id, tag, store)
        except UploadError as e:
            logger.error("Tag of row %s in project %s was not saved: %s", row_id, project.uuid, e)
            return None


async def export_project(project: Project, store: BlobStore) -> str:
    project_format = get_project_format(project.data_format, store)
    return await project_format.export(project)
