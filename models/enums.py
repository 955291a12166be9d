import enum
from typing import Optional


class _TextEnum(enum.Enum):
    """
    Enum whose value is the name sent over the wire.
    """

    @classmethod
    def from_text(cls, text: str) -> Optional["_TextEnum"]:
        """
        Accepts the wire name ("POS Tagging") or the member-style name
        ("POSTagging", "POS_TAGGING"). Returns None for unknown text.
        """
        if text is None:
            return None
        for member in cls:
            if text == member.value:
                return member
        compact = text.replace(" ", "").replace("_", "").lower()
        for member in cls:
            if compact in (member.name.replace("_", "").lower(),
                           member.value.replace(" ", "").lower()):
                return member
        return None


class DataFormat(_TextEnum):
    # one delimited data file, one row per line
    SINGLE_FILE = "CSV"
    # many discrete files plus a generated name index
    MULTI_FILE = "TXT"


class ProjectType(_TextEnum):
    SENTIMENT_ANALYSIS = "Sentiment Analysis"
    TEXT_CLASSIFICATION = "Text Classification"
    POS_TAGGING = "POS Tagging"
    NER_TAGGING = "NER Tagging"


class Status(_TextEnum):
    NOT_TAGGED = "NotTagged"
    PRE_TAGGED = "PreTagged"
    TAGGED = "Tagged"
