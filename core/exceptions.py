"""
Relay error taxonomy.

Every error is terminal for the request that raised it and maps to exactly
one HTTP status and one fixed plain-text message.
"""

from __future__ import annotations

from typing import Optional


class RelayError(Exception):
    """Base for all request-level relay errors."""

    status_code: int = 500
    message: str = "Internal error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.message)


class MissingIdentifier(RelayError):
    status_code = 400
    message = "Missing identifier"


class MissingCode(RelayError):
    status_code = 400
    message = "Missing code"


class TokenExchangeFailed(RelayError):
    """The provider's token endpoint errored or returned an unusable body."""

    status_code = 500
    message = "Failed to exchange token"


class NotFound(RelayError):
    status_code = 404
    message = "Identifier not found"


class SerializationFailed(RelayError):
    status_code = 500
    message = "Failed to create JSON response"
