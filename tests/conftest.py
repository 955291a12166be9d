"""Shared fixtures and helpers for tests."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest

from models.enums import DataFormat, ProjectType
from models.project_file import ProjectFile
from services.project_file_service import initialize_project
from storage.memory_store import InMemoryBlobStore


class FlakyBlobStore(InMemoryBlobStore):
    """In-memory store refusing uploads to selected paths."""

    def __init__(self, failing_suffixes=(), raising_suffixes=()) -> None:
        super().__init__()
        self.failing_suffixes = tuple(failing_suffixes)
        self.raising_suffixes = tuple(raising_suffixes)
        self.upload_attempts = []

    async def try_upload_file(self, path: str, content: bytes) -> bool:
        self.upload_attempts.append(path)
        if self.raising_suffixes and path.endswith(self.raising_suffixes):
            raise ConnectionError(f"connection reset while writing {path}")
        if self.failing_suffixes and path.endswith(self.failing_suffixes):
            return False
        return await super().try_upload_file(path, content)


@pytest.fixture
def flaky_store_class():
    return FlakyBlobStore


@pytest.fixture
def project_factory():
    return make_project


@pytest.fixture
def store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


def make_project(data_format: DataFormat = DataFormat.SINGLE_FILE, owner_id: str = "7"):
    return initialize_project(
        name="reviews",
        owner_id=owner_id,
        description="movie reviews",
        project_type=ProjectType.SENTIMENT_ANALYSIS,
        data_format=data_format,
        tags=["pos", "neg"],
    )


@pytest.fixture
def single_file_project():
    return make_project(DataFormat.SINGLE_FILE)


@pytest.fixture
def multi_file_project():
    return make_project(DataFormat.MULTI_FILE)


@pytest.fixture
def text_files():
    return [
        ProjectFile(name="a.txt", content="first document\n"),
        ProjectFile(name="b.txt", content="second document"),
        ProjectFile(name="c.txt", content="third\ndocument"),
    ]
