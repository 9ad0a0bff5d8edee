from dataclasses import dataclass, field, replace
from logging import getLogger
from typing import Any, Optional

from ._config import default_req
from ._services import Transport, build_request, build_response, merge, send
from ._utils import run_hooks
from .models import Req, Resp

_logger = getLogger("goget")


@dataclass(frozen=True)
class Client:
    """Declarative HTTP client.

    A client holds a default request descriptor. Every request merges its
    overrides onto that descriptor, and ``extend`` derives a new client the
    same way, so configuration can be layered without mutating anything.

    Attributes:
        default_req: Descriptor every request starts from.
        transport: Awaitable sending an ``httpx.Request``. Defaults to a
            short-lived ``httpx.AsyncClient``.
        base_url: Base used to resolve relative request URLs. Without it,
            request URLs must be absolute.

    Examples:
        ```python
        from goget import goget

        api = goget.extend(
            url="https://api.example.com/v1",
            headers={"x-api-key": "abc"},
        )
        resp = await api.request("users/{id}", params={"id": 1})
        resp.data
        ```
    """

    default_req: Req = field(default_factory=default_req)
    transport: Transport = send
    base_url: Optional[str] = None

    async def request(self, url: str = "", **overrides: Any) -> Resp[Any]:
        """Send a request.

        The overrides are merged onto ``default_req``, request hooks run over
        the result, and the finalized descriptor is built, sent and attached
        to the response. Response hooks are not run, see ``apply_response_hooks``.

        Args:
            url: Request URL, joined onto the default URL when relative.
            **overrides: Any ``Req`` field: ``method``, ``params``, ``data``,
                ``headers``, ``encode``, ``request_hooks``, ``response_hooks``.

        Returns:
            The response descriptor.

        Raises:
            InvalidURLError: If the URL cannot be resolved. Nothing is sent.
            MalformedBodyError: If the response body is not JSON.
            pydantic.ValidationError: If the overrides are invalid.
        """
        merged = merge(self.default_req, {"url": url, **overrides})
        if merged.request_hooks:
            _logger.debug(f"Running {len(merged.request_hooks)} request hook(s)")
        final = await run_hooks(merged, merged.request_hooks)

        wire = build_request(final, base_url=self.base_url)
        _logger.debug(f"Request: {wire.method} {wire.url}")

        response = await self.transport(wire)
        return await build_response(response, final)

    def extend(self, **overrides: Any) -> "Client":
        """Derive a client whose default request is merged with ``overrides``.

        No hooks run and nothing is sent. The transport and base URL carry over.
        """
        return replace(self, default_req=merge(self.default_req, overrides))


async def apply_response_hooks(resp: Resp[Any]) -> Resp[Any]:
    """Run the response hooks of the request that produced ``resp``.

    ``Client.request`` never runs response hooks itself; call this when a
    response should go through them.
    """
    return await run_hooks(resp, resp.req.response_hooks)


goget = Client()
