"""
Runtime validators used at startup.
"""

from __future__ import annotations

import logging

from config.settings import Settings

logger = logging.getLogger(__name__)


def validate_oauth_settings(settings: Settings) -> None:
    """
    Called once before the server starts.  Every request path depends on the
    provider configuration, so anything missing here is fatal.
    """
    missing = settings.missing_oauth_fields()
    if missing:
        raise RuntimeError(
            f"Startup validation failed — missing OAuth configuration: {', '.join(missing)}"
        )

    if not settings.oauth_scope:
        logger.warning("OAUTH_SCOPE not set — authorization URL will carry no scope")

    logger.info("OAuth configuration validated (token endpoint %s)", settings.oauth_token_url)
