import re
from typing import List

_NEWLINE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """
    Splits on any newline convention. A final newline does not add an
    extra empty row.
    """
    if not text:
        return []
    lines = _NEWLINE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: List[str]) -> str:
    return "\n".join(lines)


def project_dir(project) -> str:
    return f"{project.owner_id}/{project.uuid}/"
