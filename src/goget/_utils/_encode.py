import numbers
from functools import singledispatch
from typing import Any, Callable, Mapping, Optional

Encoder = Callable[[Any], Optional[str]]


@singledispatch
def encode(value: Any) -> Optional[str]:
    """Encode a parameter value for use in a URL.

    Strings, numbers and booleans encode to their string form, non-empty lists
    and tuples to their comma-joined elements. Everything else (``None``, empty
    sequences, mappings, callables, arbitrary objects) encodes to ``None``,
    which means the parameter is omitted.

    Args:
        value: The parameter value.

    Returns:
        The encoded string, or ``None`` to omit the parameter.

    Examples:
        >>> encode([1, 2, 3])
        '1,2,3'
        >>> encode(True)
        'true'
        >>> encode({}) is None
        True
    """
    return None


@encode.register
def _(value: str) -> Optional[str]:
    return value


@encode.register
def _(value: bool) -> Optional[str]:
    return "true" if value else "false"


@encode.register(numbers.Number)
def _(value: numbers.Number) -> Optional[str]:
    return str(value)


@encode.register(list)
@encode.register(tuple)
def _(value: Any) -> Optional[str]:
    if not value:
        return None
    return ",".join(_element(item) for item in value)


def _element(item: Any) -> str:
    # sequence elements never drop out, they render empty instead
    encoded = encode(item)
    return "" if encoded is None else encoded


def encode_params(
    params: Mapping[str, Any], encoder: Encoder = encode
) -> dict[str, Optional[str]]:
    """Apply ``encoder`` to every parameter value."""
    return {key: encoder(value) for key, value in params.items()}
