from typing import Awaitable, Callable

import httpx

Transport = Callable[[httpx.Request], Awaitable[httpx.Response]]


async def send(request: httpx.Request) -> httpx.Response:
    """Default transport: send the request with a short-lived ``httpx.AsyncClient``.

    Redirects are followed, so the response URL is the final one. The body is
    read before the client is closed.
    """
    async with httpx.AsyncClient(follow_redirects=True) as client:
        return await client.send(request)


def client_transport(client: httpx.AsyncClient) -> Transport:
    """Build a transport that sends through an existing ``httpx.AsyncClient``.

    The caller owns the client and is responsible for closing it.
    """

    async def _send(request: httpx.Request) -> httpx.Response:
        return await client.send(request)

    return _send
