import logging
from typing import Any, Dict, Optional

import requests

from .exceptions import RequestFailed

logger = logging.getLogger(__name__)


class SolscanClient:
    """Thin GET-only wrapper around a requests session; no retries."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        # A caller-supplied session is used as-is.
        if session is None:
            session = requests.Session()
            session.headers.update({"Accept": "application/json"})
        self.session = session

    def get(self, url: str, headers: Dict[str, str]) -> Any:
        logger.debug("GET %s", url)
        response: Optional[requests.Response] = None
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            status_code = response.status_code if response is not None else None
            logger.warning("Request to %s failed: %s", url, exc)
            raise RequestFailed(f"API request failed: {exc}", status_code=status_code) from exc
        except ValueError as exc:
            logger.warning("Undecodable response from %s: %s", url, exc)
            raise RequestFailed(
                f"API request failed: {exc}",
                status_code=response.status_code if response is not None else None,
            ) from exc

    def close(self) -> None:
        self.session.close()
