"""Salesforce adapter – SalesforceSettings and client construction."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from simple_salesforce import Salesforce
from simple_salesforce.exceptions import SalesforceAuthenticationFailed

from flowcsv.config.settings import Settings
from flowcsv.config.validation import InvalidSettingValueError
from flowcsv.kernel.errors import ExternalServiceError

__all__ = ["SalesforceSettings", "connect"]


@dataclasses.dataclass
class SalesforceSettings(Settings):
    """Credentials for username/password + security token login.

    Read from ``SALESFORCE_*``; use ``domain="test"`` for sandboxes.
    """

    _prefix: ClassVar[str] = "SALESFORCE"

    username: str
    password: str
    security_token: str
    domain: str = "login"
    api_version: str = "59.0"

    def _validate(self) -> None:
        if "@" not in self.username:
            raise InvalidSettingValueError("username", self.username, "expected an email-style username")

    def __repr__(self) -> str:
        return (
            f"SalesforceSettings(username={self.username!r}, domain={self.domain!r}, "
            f"api_version={self.api_version!r})"
        )


def connect(settings: SalesforceSettings) -> Salesforce:
    """Log in and return a :class:`simple_salesforce.Salesforce` client."""
    try:
        return Salesforce(
            username=settings.username,
            password=settings.password,
            security_token=settings.security_token,
            domain=settings.domain,
            version=settings.api_version,
        )
    except SalesforceAuthenticationFailed as exc:
        raise ExternalServiceError(
            service="salesforce",
            message=f"Salesforce login failed for {settings.username}",
            cause=exc,
        ) from exc
