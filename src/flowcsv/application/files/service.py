"""Application files – FileStore protocol and InMemoryFileStore."""
from __future__ import annotations

import itertools
from typing import Protocol, runtime_checkable

from flowcsv.application.files.artifact import (
    FileArtifact,
    FileLink,
    ShareType,
    StoredArtifact,
)
from flowcsv.kernel.errors import ExternalServiceError

__all__ = ["FileStore", "InMemoryFileStore"]


@runtime_checkable
class FileStore(Protocol):
    """Port: persists file artifacts and links them to other records."""

    def save(self, artifact: FileArtifact) -> StoredArtifact:
        """Store *artifact* as a new artifact group; return its identifiers."""
        ...

    def link(
        self,
        document_id: str,
        entity_id: str,
        share_type: ShareType = ShareType.VIEWER,
    ) -> str:
        """Grant *entity_id* access to *document_id*; return the link id."""
        ...

    def delete(self, document_id: str) -> None: ...


class InMemoryFileStore:
    """Fake FileStore for unit tests and dry runs.

    Ids are sequential and use the platform's key prefixes so they read like
    real ones (``068`` versions, ``069`` documents, ``06A`` links).
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self.artifacts: dict[str, FileArtifact] = {}
        self.versions: dict[str, str] = {}
        self.links: list[FileLink] = []

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}{next(self._counter):015d}"

    def save(self, artifact: FileArtifact) -> StoredArtifact:
        stored = StoredArtifact(
            version_id=self._next_id("068"),
            document_id=self._next_id("069"),
        )
        self.artifacts[stored.document_id] = artifact
        self.versions[stored.version_id] = stored.document_id
        return stored

    def link(
        self,
        document_id: str,
        entity_id: str,
        share_type: ShareType = ShareType.VIEWER,
    ) -> str:
        if document_id not in self.artifacts:
            raise ExternalServiceError(
                service="memory",
                message=f"Unknown document '{document_id}'",
                status_code=404,
            )
        link = FileLink(
            link_id=self._next_id("06A"),
            document_id=document_id,
            linked_entity_id=entity_id,
            share_type=share_type,
        )
        self.links.append(link)
        return link.link_id

    def delete(self, document_id: str) -> None:
        self.artifacts.pop(document_id, None)
        self.versions = {v: d for v, d in self.versions.items() if d != document_id}
        self.links = [lk for lk in self.links if lk.document_id != document_id]

    def get(self, document_id: str) -> FileArtifact | None:
        return self.artifacts.get(document_id)

    def links_for(self, document_id: str) -> list[FileLink]:
        return [lk for lk in self.links if lk.document_id == document_id]
