from typing import Iterable, Optional

import httpx

from .._utils import Hook, template_names
from ..models import Req


def query_params(names: Optional[Iterable[str]] = None) -> Hook[Req]:
    """Build a request hook that moves params into the query string.

    Params referenced by a ``{name}`` placeholder are left to the template.
    The remaining ones are encoded with the descriptor's encoder and appended
    to the URL; params that encode to ``None`` are skipped.

    Args:
        names: Only append these params. All non-template params by default.

    Returns:
        The hook.

    Examples:
        ```python
        from goget import goget, query_params

        api = goget.extend(url="http://{host}", request_hooks=[query_params()])
        # GET http://localhost?page=2
        await api.request("", params={"host": "localhost", "page": 2})
        ```
    """
    selected = None if names is None else frozenset(names)

    async def hook(req: Req) -> Req:
        templated = set(template_names(req.url))
        pairs = []
        for key, value in req.params.items():
            if key in templated:
                continue
            if selected is not None and key not in selected:
                continue
            encoded = req.encode(value)
            if encoded is not None:
                pairs.append((key, encoded))

        if not pairs:
            return req

        separator = "&" if "?" in req.url else "?"
        query = str(httpx.QueryParams(pairs))
        return req.model_copy(update={"url": f"{req.url}{separator}{query}"})

    return hook
