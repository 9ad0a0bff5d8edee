import sys
from pathlib import Path

import pytest

from goget import Client, Req

# Ensure local source package (src/goget) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return "http://{hostname}"


@pytest.fixture
def client(base_url: str) -> Client:
    """Client configured like the end-to-end example: templated host, GET, no headers."""
    return Client(default_req=Req(url=base_url, method="GET", headers={}))
