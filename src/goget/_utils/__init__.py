from ._encode import Encoder, encode, encode_params
from ._hooks import Hook, run_hooks
from ._url import interpolate, is_absolute, join_url, template_names

__all__ = [
    "Encoder",
    "Hook",
    "encode",
    "encode_params",
    "interpolate",
    "is_absolute",
    "join_url",
    "run_hooks",
    "template_names",
]
