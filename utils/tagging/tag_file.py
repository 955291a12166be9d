import logging
from typing import List

import pandas as pd

from models.enums import Status
from models.project_model import Project
from services.errors import InvalidTagError, OutOfRangeError, UploadError
from storage.blob_store import BlobStore
from utils.tagging.constants import DEFAULT_TAGS_ROW_CONTENTS
from utils.tagging.lines import join_lines, project_dir
from utils.tagging.reconcile import require_rows

logger = logging.getLogger(__name__)


def count_tagged_rows(tags: List[str]) -> int:
    return int((pd.Series(tags, dtype="object") != DEFAULT_TAGS_ROW_CONTENTS).sum())


def check_tag(tag: str) -> None:
    if not isinstance(tag, str) or not tag:
        raise InvalidTagError("Tag can not be empty.")
    if "\n" in tag or "\r" in tag:
        raise InvalidTagError(f"Tag {tag!r} can not contain line breaks.")


async def write_tag(project: Project, row_id: int, tag: str, store: BlobStore) -> Project:
    """
    Sets the final tag of one row and rewrites the whole tags file.

    The tagged-row count is recomputed from the rewritten file. The project
    becomes Tagged once no row holds NO_LABEL; otherwise the status is left
    alone.
    """
    check_tag(tag)
    if row_id < 0 or row_id >= project.num_total_rows:
        raise OutOfRangeError(
            f"'row_id={row_id}' is out of bounds for 'num_total_rows={project.num_total_rows}'."
        )

    tags_path = project_dir(project) + project.tags_location
    tags = await store.download_file_as_list(tags_path)
    require_rows(tags, project.num_total_rows, tags_path)

    tags[row_id] = tag

    if not await store.try_upload_file(tags_path, join_lines(tags).encode("utf-8")):
        logger.error("Failure - error while uploading '%s'.", tags_path)
        raise UploadError(tags_path)
    logger.info("Success - uploaded '%s'.", tags_path)

    num_tagged_rows = count_tagged_rows(tags)
    if num_tagged_rows == len(tags):
        project.status = Status.TAGGED
    project.num_tagged_rows = num_tagged_rows
    return project
