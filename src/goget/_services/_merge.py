from typing import Any, Mapping, Optional, Union

from .._utils import join_url
from ..models import Req, ReqPatch

Override = Union[ReqPatch, Req, Mapping[str, Any], None]


def _as_patch(override: Override) -> ReqPatch:
    if override is None:
        return ReqPatch()
    if isinstance(override, ReqPatch):
        return override
    if isinstance(override, Req):
        return ReqPatch(**{name: getattr(override, name) for name in Req.model_fields})
    return ReqPatch.model_validate(dict(override))


def merge(base: Req, override: Override = None) -> Req:
    """Merge an override onto a base request descriptor.

    Neither input is modified. Precedence rules:

    - ``method``, ``data`` and ``encode`` from the override win unless they are ``None``.
    - ``url`` is composed with ``join_url``: empty keeps the base, absolute
      replaces it, relative is appended to it.
    - ``params`` and ``headers`` are merged shallowly, the override winning per key.
    - ``request_hooks`` and ``response_hooks`` are concatenated, base hooks first.

    Args:
        base: The base descriptor, e.g. a client's default request.
        override: A ``ReqPatch``, a ``Req`` or a mapping of field names to values.

    Returns:
        A new request descriptor.

    Raises:
        pydantic.ValidationError: If a mapping override has unknown fields or
            values of the wrong type.
    """
    patch = _as_patch(override)
    return Req(
        url=join_url(base.url, patch.url),
        method=_pick(patch.method, base.method),
        params={**base.params, **(patch.params or {})},
        data=_pick(patch.data, base.data),
        headers={**base.headers, **(patch.headers or {})},
        encode=_pick(patch.encode, base.encode),
        request_hooks=base.request_hooks + tuple(patch.request_hooks or ()),
        response_hooks=base.response_hooks + tuple(patch.response_hooks or ()),
    )


def _pick(value: Optional[Any], fallback: Any) -> Any:
    return fallback if value is None else value
