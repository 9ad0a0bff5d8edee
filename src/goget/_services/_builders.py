import json
from logging import getLogger
from typing import Any, Optional

import httpx

from .._utils import encode_params, interpolate
from ..models import InvalidURLError, MalformedBodyError, Req, Resp

_logger = getLogger("goget")


def resolve_url(req: Req, *, base_url: Optional[str] = None) -> httpx.URL:
    """Template the descriptor URL and resolve it to an absolute URL.

    Args:
        req: The request descriptor.
        base_url: Base used to resolve a relative URL. There is no implicit
            base location, relative URLs without one are rejected.

    Raises:
        InvalidURLError: If the result is malformed or not absolute.
    """
    raw = interpolate(req.url, encode_params(req.params, req.encode))
    try:
        url = httpx.URL(base_url).join(raw) if base_url else httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise InvalidURLError(raw, str(e)) from e
    if not url.is_absolute_url or not url.host:
        raise InvalidURLError(raw)
    return url


def build_request(req: Req, *, base_url: Optional[str] = None) -> httpx.Request:
    """Build the wire request for a finalized request descriptor.

    The body is ``req.data`` serialized as compact UTF-8 JSON, or nothing when
    ``data`` is ``None``. Headers are sent exactly as given; no content type
    is added.

    Raises:
        InvalidURLError: If the URL cannot be resolved.
    """
    url = resolve_url(req, base_url=base_url)
    content = None
    if req.data is not None:
        content = json.dumps(req.data, ensure_ascii=False, separators=(",", ":")).encode(
            "utf-8"
        )
    return httpx.Request(req.method.upper(), url, headers=req.headers, content=content)


async def build_response(response: httpx.Response, req: Req) -> Resp[Any]:
    """Build a response descriptor from a transport response.

    Args:
        response: The transport response. Its body is read if it was not already.
        req: The request descriptor that was sent.

    Raises:
        MalformedBodyError: If the body is not valid JSON.
    """
    content = await response.aread()
    try:
        data = json.loads(content)
    except ValueError as e:
        raise MalformedBodyError(response.status_code, response.text) from e

    _logger.debug(f"Response: {response.status_code} {response.url}")

    return Resp[Any](
        req=req,
        status=response.status_code,
        url=str(response.url),
        data=data,
        headers={key.lower(): value for key, value in response.headers.items()},
    )
