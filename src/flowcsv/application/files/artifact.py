"""Application files – FileArtifact, StoredArtifact and FileLink value objects."""
from __future__ import annotations

import enum
import hashlib
from dataclasses import dataclass

__all__ = ["FileArtifact", "FileLink", "ShareType", "StoredArtifact"]


class ShareType(str, enum.Enum):
    """Access granted to a linked entity; values are the platform's codes."""

    VIEWER = "V"
    COLLABORATOR = "C"
    INFERRED = "I"


@dataclass
class FileArtifact:
    """A file about to be stored."""

    title: str
    path_on_client: str
    data: bytes
    content_type: str = "text/csv"
    is_major_version: bool = True
    checksum_sha256: str = ""

    def __post_init__(self) -> None:
        if not self.checksum_sha256:
            self.checksum_sha256 = hashlib.sha256(self.data).hexdigest()

    @property
    def size_bytes(self) -> int:
        return len(self.data)

    @classmethod
    def csv(cls, file_name: str, data: bytes, content_type: str = "text/csv") -> "FileArtifact":
        return cls(
            title=file_name,
            path_on_client=file_name,
            data=data,
            content_type=content_type,
        )


@dataclass(frozen=True)
class StoredArtifact:
    """Identifiers assigned by the store.

    ``document_id`` identifies the artifact group that holds every version.
    """

    version_id: str
    document_id: str


@dataclass(frozen=True)
class FileLink:
    """Association granting an entity access to an artifact group."""

    link_id: str
    document_id: str
    linked_entity_id: str
    share_type: ShareType = ShareType.VIEWER
    visibility: str = "AllUsers"
