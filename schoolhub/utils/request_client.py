"""Thin wrappers over httpx for services that call third-party JSON APIs.

No retries, no backoff, no timeout beyond httpx's defaults.
"""

from typing import Any, Optional, Tuple

import httpx

from schoolhub.core.logging import get_logger

logger = get_logger(__name__)

# Returned by request_with_response_header when the call fails.
EMPTY_RESPONSE = " "


async def _send(client: Optional[httpx.AsyncClient], method: str, url: str, **kwargs: Any) -> httpx.Response:
    if client is not None:
        return await client.request(method, url, **kwargs)
    async with httpx.AsyncClient() as owned_client:
        return await owned_client.request(method, url, **kwargs)


async def request(
    url: str,
    method: str = "GET",
    client: Optional[httpx.AsyncClient] = None,
    **kwargs: Any,
) -> Any:
    """Make one request and return the parsed JSON body.

    Transport and decode failures surface as ``TypeError`` carrying the
    original message.
    """
    try:
        response = await _send(client, method, url, **kwargs)
        return response.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise TypeError(str(exc)) from exc


async def request_with_response_header(
    url: str,
    method: str = "GET",
    client: Optional[httpx.AsyncClient] = None,
    **kwargs: Any,
) -> Tuple[Any, httpx.Headers]:
    """Like :func:`request` but also returns the response headers.

    Never raises: a failed call yields ``(EMPTY_RESPONSE, httpx.Headers())``.
    """
    try:
        response = await _send(client, method, url, **kwargs)
        return response.json(), response.headers
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("outbound_request_failed", url=url, method=method, error=str(exc))
        return EMPTY_RESPONSE, httpx.Headers()
