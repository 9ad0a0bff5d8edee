from enum import Enum
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .._utils._encode import Encoder, encode
from .._utils._hooks import Hook

T = TypeVar("T")


class HttpMethod(str, Enum):
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"


def _normalize_method(value: Any) -> Any:
    if isinstance(value, HttpMethod):
        return value.value
    if isinstance(value, str):
        return value.upper()
    return value


class Req(BaseModel):
    """Request descriptor.

    Describes a request declaratively. Descriptors are frozen; every merge
    produces a new one.

    Attributes:
        url: Request URL, may contain ``{name}`` placeholders filled from ``params``.
        method: HTTP method, upper-cased on validation. Not limited to ``HttpMethod``.
        params: Values for URL placeholders. Params not used by the template are
            left for hooks, see ``goget.query_params``.
        data: JSON body, sent when not ``None``.
        headers: Request headers, sent exactly as given.
        encode: Turns a param value into a string, or ``None`` to omit it.
        request_hooks: Run in order over the descriptor before the request is built.
        response_hooks: Never run by ``Client.request``; call
            ``goget.apply_response_hooks`` to run them over a response.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    url: str = ""
    method: str = HttpMethod.GET.value
    params: Dict[str, Any] = Field(default_factory=dict)
    data: Any = None
    headers: Dict[str, str] = Field(default_factory=dict)
    encode: Encoder = encode
    request_hooks: Tuple[Hook["Req"], ...] = ()
    response_hooks: Tuple[Hook["Resp[Any]"], ...] = ()

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: Any) -> Any:
        return _normalize_method(value)


class ReqPatch(BaseModel):
    """Partial request descriptor used as an override.

    ``None`` means "not provided" for every field. Unknown fields are rejected.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    url: Optional[str] = None
    method: Optional[str] = None
    params: Optional[Dict[str, Any]] = None
    data: Any = None
    headers: Optional[Dict[str, str]] = None
    encode: Optional[Encoder] = None
    request_hooks: Optional[Tuple[Hook[Req], ...]] = None
    response_hooks: Optional[Tuple[Hook["Resp[Any]"], ...]] = None

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: Any) -> Any:
        return _normalize_method(value)


class Resp(BaseModel, Generic[T]):
    """Response descriptor.

    Attributes:
        req: The request descriptor that was actually sent, after merging and hooks.
        status: HTTP status code.
        url: URL the transport ended up at, after redirects.
        data: Decoded JSON body.
        headers: Response headers keyed by lower-cased name.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    req: Req
    status: int
    url: str
    data: T
    headers: Dict[str, str] = Field(default_factory=dict)


Req.model_rebuild()
ReqPatch.model_rebuild()
