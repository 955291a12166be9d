# Default file contents
DEFAULT_DATA_ROW_CONTENTS = "NO_DATA"
DEFAULT_TAGS_ROW_CONTENTS = "NO_LABEL"

# Default files
FILE_TAGS = "tags.csv"
FILE_PRETAGS = "silver_standard.csv"
FILE_DATA_INDEX = "data_index.csv"

RESERVED_FILE_NAMES = {FILE_TAGS, FILE_PRETAGS, FILE_DATA_INDEX}

EXPORT_COLUMNS = ["FILE", "TAG"]

PRETAGGER_API_PATH = "/PreTagger/api/v0.1/Label/"
