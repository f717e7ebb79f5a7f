"""
TokenStore — process-wide map from caller identifier to issued token.

Every read and write goes through one lock scoped to the whole map.  Each
critical section is a single dict access, so contention is bounded by the
duration of a concurrent ``put`` / ``get``.  No iteration is exposed.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional

from utils.schemas import Token


class TokenStore:
    def __init__(self):
        self._tokens: Dict[str, Token] = {}
        self._lock = threading.Lock()

    def put(self, identifier: str, token: Token) -> None:
        """Store ``token`` under ``identifier``, replacing any previous one."""
        with self._lock:
            self._tokens[identifier] = token

    def get(self, identifier: str) -> Optional[Token]:
        """Return the current token for ``identifier``, or None if absent."""
        with self._lock:
            return self._tokens.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._tokens

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)
