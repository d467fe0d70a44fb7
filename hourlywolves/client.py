import logging
import re
from collections import deque
from typing import Any, Literal

import httpx
from httpx import Response, Timeout
from loguru import logger

from hourlywolves.exceptions import DecodeError, HttpStatusError, NetworkError

# Suppress verbose httpx debug logging
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

# Discord-style webhook URLs embed their secret token in the last path segment
WEBHOOK_TOKEN_PATTERN = re.compile(r'(/api/webhooks/[^/]+/)[^/?#]+')

HttpMethod = Literal['GET', 'POST']


def redact_url(url: str | httpx.URL) -> str:
    """Replace a webhook token in a URL before logging."""
    return WEBHOOK_TOKEN_PATTERN.sub(r'\1[REDACTED]', str(url))


def _handle_response_error(response: Response) -> None:
    """Check response status and raise HttpStatusError outside 2xx."""
    if not response.is_success:
        url = redact_url(response.request.url)
        raise HttpStatusError(
            f"HTTP {response.status_code} from {url}: {response.text[:200]}",
            status_code=response.status_code,
            url=url,
        )


class Client:
    """
    Thin async HTTP wrapper shared by every occurrence.

    No timeout is applied to requests; a hung request stalls the caller.
    """

    def __init__(self, history_len: int = 30) -> None:
        self.http2_client = httpx.AsyncClient(
            http2=True,
            follow_redirects=True,
            timeout=Timeout(None),
        )
        self.history: deque[Response] = deque(maxlen=history_len)

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: BaseException | None, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self.http2_client.aclose()

    async def _request(
        self,
        method: HttpMethod,
        url: str,
        data: dict[str, Any] | None = None,
    ) -> Response:
        """
        Make an HTTP request with common error handling and logging.

        :param method: HTTP method (GET, POST)
        :param url: Absolute request URL
        :param data: JSON body data (for POST)
        :return: The successful response
        :raises NetworkError: On connection errors or an unusable URL
        :raises HttpStatusError: On a non-2xx status
        """
        logger.debug(f'{method} request to {redact_url(url)}', data=data)

        try:
            if method == 'POST':
                response = await self.http2_client.request(method, url, json=data)
            else:
                response = await self.http2_client.request(method, url)
        except httpx.RequestError as e:
            raise NetworkError(f"Network error: {e}") from e
        except httpx.InvalidURL as e:
            raise NetworkError(f"Invalid request URL: {e}") from e

        # Track response history
        self.history.append(response)

        _handle_response_error(response)
        return response

    async def get_json(self, url: str) -> Any:
        """
        GET a URL and parse its JSON body.

        :raises DecodeError: If the body is not JSON
        """
        response = await self._request('GET', url)
        try:
            json_body = response.json()
        except ValueError as e:
            logger.debug(f'Response ({response.status_code}), body: {response.text}')
            raise DecodeError(f'Non-JSON response ({response.status_code}) from {redact_url(url)}') from e
        logger.debug(f'Response ({response.status_code}), body: {json_body}')
        return json_body

    async def post_json(self, url: str, data: dict[str, Any]) -> Any | None:
        """
        POST a JSON body.

        :return: The parsed response body, or None for an empty or non-JSON body
        """
        response = await self._request('POST', url, data=data)
        if not response.content:
            logger.debug(f'Response ({response.status_code}), empty body')
            return None
        try:
            return response.json()
        except ValueError:
            logger.debug(f'Response ({response.status_code}), non-JSON body ignored: {response.text}')
            return None
