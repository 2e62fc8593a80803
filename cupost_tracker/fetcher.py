from typing import Dict, Optional, Protocol, Union

import requests

from cupost_tracker.config import MAX_RETRIES, REQUEST_TIMEOUT, USER_AGENT
from cupost_tracker.logger import get_logger
from cupost_tracker.utils.retry import exponential_backoff_retry

logger = get_logger(__name__)


class UpstreamResponse(Protocol):
    @property
    def text(self) -> str: ...


class UpstreamFetcher(Protocol):
    """The narrow HTTP capability a carrier needs to reach its upstream."""

    def fetch(
        self,
        url: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Union[str, Dict[str, str]]] = None,
    ) -> UpstreamResponse: ...


class RequestsUpstreamFetcher:
    """
    Upstream fetcher backed by a ``requests.Session``.

    Owns timeouts and retries: failed requests are retried with exponential
    backoff and the last ``requests`` exception is raised to the caller.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: int = REQUEST_TIMEOUT,
        max_retries: int = MAX_RETRIES,
    ):
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", USER_AGENT)
        self.timeout = timeout
        self.max_retries = max_retries

    def fetch(
        self,
        url: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Union[str, Dict[str, str]]] = None,
    ) -> requests.Response:
        @exponential_backoff_retry(
            max_retries=self.max_retries,
            exceptions=(requests.exceptions.RequestException,),
        )
        def _request():
            response = self.session.request(
                method,
                url,
                headers=headers,
                data=data,
                timeout=self.timeout,
            )
            response.raise_for_status()
            # requests assumes latin-1 for text/* without a charset
            if response.encoding is None or response.encoding.lower() == "iso-8859-1":
                response.encoding = response.apparent_encoding
            return response

        logger.debug(f"{method} {url}", extra={"method": method, "url": url})
        return _request()
