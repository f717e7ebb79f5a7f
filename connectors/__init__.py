"""
connectors — OAuth2 client adapter and token storage.

Provides:
  • OAuth2 auth-URL generation (identifier carried as ``state``)
  • Callback handling (code → token exchange)
  • In-memory, lock-guarded token storage keyed by identifier
"""
