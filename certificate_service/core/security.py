import logging
import secrets

from typing import Any

from certificate_service.core import config
from certificate_service.core.exceptions import InvalidApiKeyError

logger = logging.getLogger(__name__)


def get_api_key() -> str:
    """Dependency providing the configured shared secret"""
    return config.API_KEY


def timing_safe_compare(a: str, b: str) -> bool:
    """Timing attack resistant comparison"""
    return secrets.compare_digest(a.encode(), b.encode())


def verify_api_key(provided: Any, expected: str) -> None:
    """
    Static shared secret check. This is a placeholder, not an
    authentication scheme: there are no users, scopes or key rotation.
    """
    if not expected:
        logger.warning("No API key configured, rejecting request")
        raise InvalidApiKeyError()

    if not isinstance(provided, str) or not timing_safe_compare(provided, expected):
        logger.warning("Invalid API key")
        raise InvalidApiKeyError()
