"""Application files – file artifact value objects and the FileStore port."""
from flowcsv.application.files.artifact import (
    FileArtifact,
    FileLink,
    ShareType,
    StoredArtifact,
)
from flowcsv.application.files.service import FileStore, InMemoryFileStore

__all__ = [
    "FileArtifact",
    "FileLink",
    "FileStore",
    "InMemoryFileStore",
    "ShareType",
    "StoredArtifact",
]
