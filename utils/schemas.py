"""
Pydantic schemas for the OAuth relay.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Token(BaseModel):
    """
    Credential bundle returned by the provider's token endpoint.

    The relay never builds one of these except from an exchange response,
    and never mutates one after it is stored.
    """

    access_token: str
    token_type: Optional[str] = None
    refresh_token: Optional[str] = None
    expiry: Optional[datetime] = None

    model_config = {"frozen": True}

    def to_json(self) -> str:
        """Wire form: absent optional fields are omitted."""
        return self.model_dump_json(exclude_none=True)
