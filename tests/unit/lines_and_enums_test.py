from models.data_row import DataRow
from models.enums import DataFormat, ProjectType, Status
from utils.tagging.lines import join_lines, project_dir, split_lines


def test_split_lines_handles_every_newline_convention() -> None:
    assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]


def test_split_lines_ignores_single_trailing_newline() -> None:
    assert split_lines("a\nb\n") == ["a", "b"]
    assert split_lines("a\nb\n\n") == ["a", "b", ""]


def test_split_lines_keeps_blank_rows_in_the_middle() -> None:
    assert split_lines("a\n\nb") == ["a", "", "b"]


def test_split_lines_of_empty_text_is_empty() -> None:
    assert split_lines("") == []


def test_join_lines_has_no_trailing_newline() -> None:
    assert join_lines(["NO_LABEL", "pos", "NO_LABEL"]) == "NO_LABEL\npos\nNO_LABEL"


def test_project_dir_is_owner_then_uuid(single_file_project) -> None:
    assert project_dir(single_file_project) == f"7/{single_file_project.uuid}/"


class TestEnumText:
    def test_wire_names(self) -> None:
        assert DataFormat.from_text("CSV") is DataFormat.SINGLE_FILE
        assert DataFormat.from_text("TXT") is DataFormat.MULTI_FILE
        assert ProjectType.from_text("POS Tagging") is ProjectType.POS_TAGGING
        assert Status.from_text("PreTagged") is Status.PRE_TAGGED

    def test_member_style_names(self) -> None:
        assert DataFormat.from_text("SingleFile") is DataFormat.SINGLE_FILE
        assert DataFormat.from_text("MultiFile") is DataFormat.MULTI_FILE
        assert ProjectType.from_text("SentimentAnalysis") is ProjectType.SENTIMENT_ANALYSIS
        assert ProjectType.from_text("NERTagging") is ProjectType.NER_TAGGING
        assert ProjectType.from_text("TEXT_CLASSIFICATION") is ProjectType.TEXT_CLASSIFICATION

    def test_unknown_text(self) -> None:
        assert DataFormat.from_text("XLSX") is None
        assert ProjectType.from_text(None) is None


def test_data_row_json_omits_absent_tag() -> None:
    row = DataRow(name="Data Row 0", row_id=0, content="a", status=Status.NOT_TAGGED)
    assert row.to_json() == {"name": "Data Row 0", "row_id": 0, "content": "a", "status": "NotTagged"}

    tagged = DataRow(name="Data Row 1", row_id=1, content="b", status=Status.TAGGED, tag="pos")
    assert tagged.to_json()["tag"] == "pos"
    assert tagged.to_json()["status"] == "Tagged"
