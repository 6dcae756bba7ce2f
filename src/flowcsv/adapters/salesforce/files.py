"""Salesforce adapter – SalesforceFileStore.

Stores CSV artifacts as ``ContentVersion`` records and links the resulting
``ContentDocument`` with ``ContentDocumentLink``.
"""
from __future__ import annotations

import base64
from typing import Any, Callable, TypeVar

import requests
from simple_salesforce import Salesforce
from simple_salesforce.exceptions import SalesforceError

from flowcsv.application.files import FileArtifact, ShareType, StoredArtifact
from flowcsv.kernel.errors import ExternalServiceError
from flowcsv.observability.logging import get_logger

__all__ = ["SalesforceFileStore"]

T = TypeVar("T")

_SERVICE = "salesforce"

_log = get_logger(__name__)


class SalesforceFileStore:
    """FileStore backed by the Salesforce REST API.

    ``save`` creates the version and reads back its ``ContentDocumentId`` in
    one call, so callers only ever see the document id.
    """

    def __init__(self, sf: Salesforce, visibility: str = "AllUsers") -> None:
        self._sf = sf
        self._visibility = visibility

    def save(self, artifact: FileArtifact) -> StoredArtifact:
        payload = {
            "Title": artifact.title,
            "PathOnClient": artifact.path_on_client,
            "VersionData": base64.b64encode(artifact.data).decode("ascii"),
            "IsMajorVersion": artifact.is_major_version,
        }
        created = self._call("ContentVersion.create", lambda: self._sf.ContentVersion.create(payload))
        version_id = self._created_id("ContentVersion", created)

        record = self._call("ContentVersion.get", lambda: self._sf.ContentVersion.get(version_id))
        document_id = record.get("ContentDocumentId")
        if not document_id:
            raise ExternalServiceError(
                service=_SERVICE,
                message=f"ContentVersion '{version_id}' has no ContentDocumentId",
            )
        _log.debug("salesforce.content_version_created", version_id=version_id, document_id=document_id)
        return StoredArtifact(version_id=version_id, document_id=document_id)

    def link(
        self,
        document_id: str,
        entity_id: str,
        share_type: ShareType = ShareType.VIEWER,
    ) -> str:
        payload = {
            "ContentDocumentId": document_id,
            "LinkedEntityId": entity_id,
            "ShareType": share_type.value,
            "Visibility": self._visibility,
        }
        created = self._call(
            "ContentDocumentLink.create", lambda: self._sf.ContentDocumentLink.create(payload)
        )
        return self._created_id("ContentDocumentLink", created)

    def delete(self, document_id: str) -> None:
        self._call("ContentDocument.delete", lambda: self._sf.ContentDocument.delete(document_id))

    @staticmethod
    def _created_id(sobject: str, response: Any) -> str:
        if not response or not response.get("success", False) or not response.get("id"):
            errors = response.get("errors") if response else None
            raise ExternalServiceError(
                service=_SERVICE,
                message=f"{sobject} insert failed: {errors!r}",
            )
        return response["id"]

    @staticmethod
    def _call(operation: str, func: Callable[[], T]) -> T:
        try:
            return func()
        except SalesforceError as exc:
            raise ExternalServiceError(
                service=_SERVICE,
                message=f"{operation} failed with HTTP {exc.status}: {exc.content!r}",
                status_code=exc.status,
                cause=exc,
            ) from exc
        except requests.RequestException as exc:
            raise ExternalServiceError(
                service=_SERVICE,
                message=f"{operation} failed: {exc}",
                cause=exc,
            ) from exc
