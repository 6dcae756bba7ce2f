"""Observability – credential redaction for structlog events."""
from __future__ import annotations

from typing import Any

# Keys holding Salesforce login material or anything that authorises a call.
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "security_token", "session_id",
    "access_token", "refresh_token", "client_secret", "authorization",
})


class SensitiveFieldsFilter:
    """Masks the values of sensitive keys, matched case-insensitively.

    :meth:`redact` looks at the top level only; :meth:`redact_deep` also walks
    nested dicts and lists, which is what the structlog processor form uses so
    that a logged ``to_dict()`` payload cannot leak a token in its ``detail``.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS
        self._fields = frozenset(name.lower() for name in fields)

    def _is_sensitive(self, key: Any) -> bool:
        return isinstance(key, str) and key.lower() in self._fields

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: self.REDACTED if self._is_sensitive(k) else v for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._scrub(data)

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: self.REDACTED if self._is_sensitive(k) else self._scrub(v)
                for k, v in value.items()
            }
        if isinstance(value, (list, tuple)):
            return [self._scrub(v) for v in value]
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
