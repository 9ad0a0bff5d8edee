from typing import Optional


class GogetError(Exception):
    """Base class for errors raised by goget itself.

    Transport failures (``httpx.HTTPError``) and exceptions raised inside hooks
    are not wrapped and reach the caller unchanged.
    """


class InvalidURLError(GogetError, ValueError):
    """Raised when a request URL cannot be resolved to an absolute URL.

    Raised by the request builder, before the transport is called.
    """

    def __init__(self, url: str, message: Optional[str] = None):
        self.url = url
        self.message = message or (
            f"Cannot resolve '{url}' to an absolute URL. "
            "Use an absolute URL or pass an explicit base_url."
        )
        super().__init__(self.message)


class MalformedBodyError(GogetError, ValueError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        self.message = (
            f"Response body is not valid JSON (status {status_code}): {body[:200]!r}"
        )
        super().__init__(self.message)
