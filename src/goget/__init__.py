"""goget: a declarative HTTP client.

Requests are described by immutable descriptors that are merged, templated
and passed through async hooks before being sent with httpx.
"""

from ._client import Client, apply_response_hooks, goget
from ._config import default_req
from ._services import (
    Transport,
    build_request,
    build_response,
    client_transport,
    merge,
    query_params,
    resolve_url,
    send,
)
from ._utils import Encoder, Hook, encode, encode_params, interpolate, run_hooks
from .models import (
    GogetError,
    HttpMethod,
    InvalidURLError,
    MalformedBodyError,
    Req,
    ReqPatch,
    Resp,
)

__all__ = [
    "Client",
    "Encoder",
    "GogetError",
    "Hook",
    "HttpMethod",
    "InvalidURLError",
    "MalformedBodyError",
    "Req",
    "ReqPatch",
    "Resp",
    "Transport",
    "apply_response_hooks",
    "build_request",
    "build_response",
    "client_transport",
    "default_req",
    "encode",
    "encode_params",
    "goget",
    "interpolate",
    "merge",
    "query_params",
    "resolve_url",
    "run_hooks",
    "send",
]
