class ProjectFilesError(Exception):
    """Base class for failures of the project file engine."""


class UploadError(ProjectFilesError):
    def __init__(self, path: str):
        super().__init__(f"Upload to '{path}' was not confirmed.")
        self.path = path


class DownloadError(ProjectFilesError):
    """An expected file is missing or shorter than the project's row count."""


class OutOfRangeError(ProjectFilesError):
    pass


class UnsupportedFormatError(ProjectFilesError):
    pass


class InvalidUploadError(ProjectFilesError):
    pass


class InvalidTagError(ProjectFilesError):
    pass


class ExternalServiceError(ProjectFilesError):
    pass


class DirectoryDeleteError(ProjectFilesError):
    pass
