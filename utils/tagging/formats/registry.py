from models.enums import DataFormat
from services.errors import UnsupportedFormatError
from storage.blob_store import BlobStore
from utils.tagging.formats.MultiFileFormat import MultiFileFormat
from utils.tagging.formats.ProjectFormat import ProjectFormat
from utils.tagging.formats.SingleFileFormat import SingleFileFormat

FORMATS = {
    DataFormat.SINGLE_FILE: SingleFileFormat,
    DataFormat.MULTI_FILE: MultiFileFormat,
}


def get_project_format(data_format, store: BlobStore) -> ProjectFormat:
    if isinstance(data_format, str):
        data_format = DataFormat.from_text(data_format)
    format_class = FORMATS.get(data_format)
    if format_class is None:
        raise UnsupportedFormatError(f"Data format '{data_format}' is not supported.")
    return format_class(store)
