import asyncio

import pytest

from models.project_file import ProjectFile
from services.errors import DownloadError
from services.project_file_service import export_project, set_project_files, update_tag


def test_single_file_export_after_initialization_is_all_sentinels(store, single_file_project) -> None:
    project = asyncio.run(set_project_files(single_file_project, [ProjectFile("r.csv", "a\nb\nc\nd")], store))

    exported = asyncio.run(export_project(project, store))

    assert exported.split("\n") == ["NO_LABEL"] * 4


def test_single_file_export_is_the_raw_tags_file(store, single_file_project) -> None:
    project = asyncio.run(set_project_files(single_file_project, [ProjectFile("r.csv", "a\nb\nc")], store))
    asyncio.run(update_tag(project, 1, "pos", store))

    assert asyncio.run(export_project(project, store)) == "NO_LABEL\npos\nNO_LABEL"


def test_export_ignores_pre_tags(store, single_file_project) -> None:
    project = asyncio.run(set_project_files(single_file_project, [ProjectFile("r.csv", "a\nb")], store))
    store.files[f"{project.owner_id}/{project.uuid}/silver_standard.csv"] = b"neg\nneg"

    assert asyncio.run(export_project(project, store)) == "NO_LABEL\nNO_LABEL"


def test_multi_file_export_pairs_names_with_final_tags(store, multi_file_project, text_files) -> None:
    project = asyncio.run(set_project_files(multi_file_project, text_files, store))
    asyncio.run(update_tag(project, 2, "spam", store))
    store.files[f"{project.owner_id}/{project.uuid}/silver_standard.csv"] = b"ham\nham\nham"

    exported = asyncio.run(export_project(project, store))

    assert exported == "FILE,TAG\na.txt,NO_LABEL\nb.txt,NO_LABEL\nc.txt,spam"
    assert len(exported.split("\n")) == project.num_total_rows + 1


def test_multi_file_export_quotes_names_with_commas(store, multi_file_project) -> None:
    files = [ProjectFile("one,two.txt", "x"), ProjectFile("three.txt", "y")]
    project = asyncio.run(set_project_files(multi_file_project, files, store))

    exported = asyncio.run(export_project(project, store))

    assert exported == 'FILE,TAG\n"one,two.txt",NO_LABEL\nthree.txt,NO_LABEL'


def test_multi_file_export_with_truncated_tags_fails(store, multi_file_project, text_files) -> None:
    project = asyncio.run(set_project_files(multi_file_project, text_files, store))
    store.files[f"{project.owner_id}/{project.uuid}/tags.csv"] = b"NO_LABEL"

    with pytest.raises(DownloadError):
        asyncio.run(export_project(project, store))
