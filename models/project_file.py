from dataclasses import dataclass


@dataclass
class ProjectFile:
    """An uploaded input file, already decoded to text."""

    name: str
    content: str
