import time
import logging
import requests
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "nyc-agency-extract/1.0",
    "Accept": "application/json",
}


def new_session() -> requests.Session:
    """Create a new requests session with default headers (no retries)"""
    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    return session


def get_text(
    session: requests.Session,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: Optional[float] = None,
) -> str:
    """Plain GET returning the body text.

    The status code is not checked: whatever body the server sends back is
    returned as-is. Bodies without a declared charset are decoded as UTF-8,
    the encoding JSON requires. Connection, DNS and timeout failures propagate as
    requests.RequestException subclasses.

    Args:
        session: HTTP session to use
        url: URL to fetch
        params: Optional query parameters
        timeout: Request timeout in seconds, None waits indefinitely

    Returns:
        Response body as text
    """
    start = time.time()
    response = session.get(url, params=params, timeout=timeout)
    logger.info(
        f"Fetched from {url}: status={response.status_code}, "
        f"{time.time() - start:.2f} seconds"
    )
    if not response.ok:
        logger.warning(f"Non-success status {response.status_code} from {url}")

    # requests falls back to ISO-8859-1 for text/* types with no charset
    if "charset=" not in response.headers.get("Content-Type", "").lower():
        response.encoding = "utf-8"
    return response.text
