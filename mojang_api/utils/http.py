from typing import Any, Iterable, Mapping, Optional

import requests

from mojang_api.core.config import Settings, get_settings
from mojang_api.exceptions.mojang_exceptions import (
    MojangNetworkError,
    MojangServerError,
    MojangClientError,
)
from mojang_api.utils.logging_config import get_logger
from mojang_api.utils.retry import retry_request

logger = get_logger("http")

RETRYABLE_STATUSES = (429, 500, 502, 503, 504)


class HttpTransport:
    """
    Thin wrapper around a requests.Session.

    Responsibility here:
      • apply timeout and default headers
      • classify responses into retryable / hard errors
      • run the configured retry policy

    The session is injected so callers control pooling, proxies and
    adapters; one is created when none is given.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.timeout = self.settings.TIMEOUT
        self.retries = self.settings.RETRIES
        self.backoff = self.settings.BACKOFF

    def _raw_request(
        self,
        method: str,
        url: str,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        accept_statuses: Iterable[int] = (),
    ) -> requests.Response:
        """
        Perform a single HTTP call.

        Statuses listed in `accept_statuses` are returned to the caller
        instead of being raised.
        """

        request_headers = {"User-Agent": self.settings.USER_AGENT}
        if headers:
            request_headers.update(headers)

        try:
            resp = self.session.request(
                method,
                url,
                json=json,
                headers=request_headers,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise MojangNetworkError(f"Timeout requesting {url}: {e}") from e
        except requests.ConnectionError as e:
            raise MojangNetworkError(f"Network failure for {url}: {e}") from e

        if resp.status_code in accept_statuses:
            return resp

        # Retryable / temporary server-side issues
        if resp.status_code in RETRYABLE_STATUSES or resp.status_code >= 500:
            raise MojangServerError(
                f"Temporary server error {resp.status_code} while requesting {url}",
                status_code=resp.status_code,
                url=url,
                response=resp,
            )

        # Non-retryable client errors (our fault or invalid params)
        if 400 <= resp.status_code < 500:
            raise MojangClientError(
                f"Client error {resp.status_code} while requesting {url}",
                status_code=resp.status_code,
                url=url,
                response=resp,
            )

        return resp

    def request(
        self,
        method: str,
        url: str,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        accept_statuses: Iterable[int] = (),
    ) -> requests.Response:
        accept_statuses = tuple(accept_statuses)
        logger.info(f"{method} {url}")

        def op():
            return self._raw_request(
                method,
                url,
                json=json,
                headers=headers,
                accept_statuses=accept_statuses,
            )

        return retry_request(op, retries=self.retries, backoff=self.backoff)

    def get(self, url: str, headers: Optional[Mapping[str, str]] = None, accept_statuses: Iterable[int] = ()):
        return self.request("GET", url, headers=headers, accept_statuses=accept_statuses)

    def post_json(self, url: str, payload: Any, accept_statuses: Iterable[int] = ()):
        return self.request("POST", url, json=payload, accept_statuses=accept_statuses)

    def close(self) -> None:
        if self.owns_session:
            self.session.close()


def bearer_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
