"""HTTP retrieval of raw application records."""

from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from .config import load_settings
from .logger import get_logger

LOAD_FAILED_MESSAGE = "Unable to load application details"


class RetrievalError(Exception):
    """Raised when a raw application record cannot be retrieved."""

    def __init__(self, message: str = LOAD_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message


class NotFoundError(RetrievalError):
    """The application does not exist (HTTP 404)."""


class NetworkError(RetrievalError):
    """Transport failure or non-404 HTTP error."""


def application_url(application_id: str, base_url: str) -> str:
    return f"{base_url.rstrip('/')}/applications/{quote(str(application_id), safe='')}/complete"


def fetch_application_by_id(
    application_id: str,
    *,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """Fetch the complete raw record for one application.

    Single round trip, no retry and no caching.

    Returns:
        The "data" member of the response envelope

    Raises:
        NotFoundError: On HTTP 404
        NetworkError: On timeouts, connection failures and other HTTP errors
        RetrievalError: On an unparseable body or an empty "data" member
    """
    if not application_id:
        raise RetrievalError("Application id is required")

    settings = load_settings()
    url = application_url(application_id, base_url or settings.api_base_url)
    http = session or requests

    logger = get_logger()
    logger.record_fetch_attempt()
    try:
        resp = http.get(url, timeout=timeout or settings.request_timeout)
        resp.raise_for_status()
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "HTTPError"
        logger.record_fetch_failure(f"HTTPError_{status}")
        if status == 404:
            logger.warning("Application not found", url=url, status=404)
            raise NotFoundError(f"Application not found: {application_id}")
        logger.error("Application request failed", url=url, status=status)
        raise NetworkError(f"Application request failed ({status})")
    except requests.exceptions.Timeout:
        logger.record_fetch_failure("Timeout")
        logger.warning("Application request timed out", url=url)
        raise NetworkError("Application request timed out. Try again later.")
    except requests.exceptions.RequestException as e:
        logger.record_fetch_failure("RequestException")
        logger.error("Application request error", url=url, error=str(e))
        raise NetworkError(f"Application request error: {e}")

    try:
        payload = resp.json()
    except ValueError:
        logger.record_fetch_failure("InvalidJSON")
        logger.error("Application response is not JSON", url=url)
        raise RetrievalError(LOAD_FAILED_MESSAGE)

    data = payload.get("data") if isinstance(payload, dict) else None
    if not data:
        logger.record_fetch_failure("EmptyData")
        logger.warning("Application response has no data", url=url)
        raise RetrievalError(LOAD_FAILED_MESSAGE)

    logger.record_fetch_success()
    logger.debug("Fetched application", application_id=application_id)
    return data
