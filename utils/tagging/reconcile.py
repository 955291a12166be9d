from typing import List, Optional, Tuple

from models.enums import Status
from services.errors import DownloadError
from utils.tagging.constants import DEFAULT_TAGS_ROW_CONTENTS


def resolve_row_status(final_tag: str, pre_tag: str) -> Tuple[Status, Optional[str]]:
    """
    A final tag wins over a pre-tag, a pre-tag wins over nothing.
    """
    if final_tag != DEFAULT_TAGS_ROW_CONTENTS:
        return Status.TAGGED, final_tag
    if pre_tag != DEFAULT_TAGS_ROW_CONTENTS:
        return Status.PRE_TAGGED, pre_tag
    return Status.NOT_TAGGED, None


def batch_window(batch_start: int, batch_size: int, num_total_rows: int) -> range:
    batch_end = batch_start + (batch_size - 1)
    if batch_end >= num_total_rows:
        batch_end = num_total_rows - 1
    return range(batch_start, batch_end + 1)


def require_rows(lines: List[str], count: int, path: str) -> None:
    if len(lines) < count:
        raise DownloadError(
            f"'{path}' holds {len(lines)} rows, expected at least {count}."
        )
