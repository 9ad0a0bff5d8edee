from ._builders import build_request, build_response, resolve_url
from ._merge import Override, merge
from ._query import query_params
from ._transport import Transport, client_transport, send

__all__ = [
    "Override",
    "Transport",
    "build_request",
    "build_response",
    "client_transport",
    "merge",
    "query_params",
    "resolve_url",
    "send",
]
