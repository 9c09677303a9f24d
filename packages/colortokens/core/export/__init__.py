"""Export of named colors: JSON token documents and host variables."""

from colortokens.core.export.json_export import (
    build_json,
    build_token_document,
    write_token_json,
)
from colortokens.core.export.variables import (
    COLLECTION_NAMES,
    collection_name_for,
    export_to_variables,
)

__all__ = [
    "COLLECTION_NAMES",
    "build_json",
    "build_token_document",
    "collection_name_for",
    "export_to_variables",
    "write_token_json",
]
