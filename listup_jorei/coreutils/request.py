import time
import warnings
from typing import Any, Dict, Optional

import requests
from urllib3.exceptions import InsecureRequestWarning

from .errors import DecodeError, TransportError
import logging

logger = logging.getLogger(__name__)

USER_AGENT = "listup-jorei/0.1"


def new_session(verify_tls: bool = True) -> requests.Session:
    """Create a new requests session without a retry adapter

    Args:
        verify_tls: When False, server certificates are not checked. Only the
            session handed to the jorei API client is built this way.
    """
    session = requests.Session()
    session.verify = verify_tls

    # Set default headers
    session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})

    return session


def get_json(
    session: requests.Session,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = 30,
) -> Dict[str, Any]:
    """Single GET request with JSON parsing - no retries

    Raises:
        TransportError: On connection, timeout or HTTP status errors
        DecodeError: When the body is not valid JSON
    """
    start = time.time()
    try:
        with warnings.catch_warnings():
            if session.verify is False:
                warnings.simplefilter("ignore", InsecureRequestWarning)
            response = session.get(url, params=params, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise TransportError(url, str(e)) from e

    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(url, f"body is not valid JSON ({e})") from e

    logger.debug(f"Fetched from {url}: {time.time() - start:.2f} seconds")
    return data
