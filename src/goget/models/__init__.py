from .descriptors import HttpMethod, Req, ReqPatch, Resp
from .errors import GogetError, InvalidURLError, MalformedBodyError

__all__ = [
    "GogetError",
    "HttpMethod",
    "InvalidURLError",
    "MalformedBodyError",
    "Req",
    "ReqPatch",
    "Resp",
]
