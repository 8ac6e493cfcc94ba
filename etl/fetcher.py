# etl/fetcher.py
import logging
from typing import Any, Optional

import requests

from etl.exceptions import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def fetch_json(url: str, timeout: Optional[float] = None) -> Any:
    """
    GET url once and decode the JSON body.
    Raises UpstreamError for connection problems, 4xx/5xx replies and bodies that are not JSON.
    """
    timeout = DEFAULT_TIMEOUT if timeout is None else timeout
    logger.info("fetching %s (timeout=%ss)", url, timeout)
    try:
        resp = requests.get(url, timeout=timeout, headers={"Accept": "application/json"})
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise UpstreamError(str(exc)) from exc
    try:
        return resp.json()
    except ValueError as exc:
        # requests' JSONDecodeError is a ValueError subclass
        raise UpstreamError(f"response from {url} is not valid JSON: {exc}") from exc
