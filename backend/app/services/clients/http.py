# backend/app/services/clients/http.py
import logging
import requests

from backend.app.core.errors import ExternalApiError

logger = logging.getLogger(__name__)


def fetch_text(url: str, params: dict | None = None, timeout: float = 15) -> str:
    """
    GETs url and returns the response body as text.
    Raises ExternalApiError on network errors and 4xx/5xx responses.
    """
    logger.debug("Fetching %s", url)
    try:
        response = requests.get(url, params=params, timeout=timeout)
        response.raise_for_status() # This will raise an HTTPError for 4xx/5xx responses
    except requests.exceptions.RequestException as e:
        logger.error("Call to %s failed: %s", url, e)
        raise ExternalApiError(f"Call to {url} failed: {e}") from e
    return response.text
