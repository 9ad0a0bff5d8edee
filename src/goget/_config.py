from ._utils import encode
from .models import HttpMethod, Req

DEFAULT_METHOD = HttpMethod.GET


def default_req() -> Req:
    """Root request descriptor every client descends from.

    goget reads no environment variables or files; a client is configured by
    deriving from this descriptor with ``Client.extend``.
    """
    return Req(
        url="",
        method=DEFAULT_METHOD,
        params={},
        data=None,
        headers={},
        encode=encode,
        request_hooks=(),
        response_hooks=(),
    )
