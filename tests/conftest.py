import sys
from pathlib import Path
from typing import Any, Generator

import pytest

from restwire import ApiClient, ApiRequest, Config
from restwire.models.parameters import RequestHeader

# Ensure local source package (src/restwire) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


class RecordingClient(ApiClient):
    """Client that records every hook invocation in order."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.events: list[tuple[str, Any]] = []

    def on_request(self, request: ApiRequest[Any]) -> None:
        self.events.append(("request", request))

    def on_response(self, request: ApiRequest[Any], response: Any) -> None:
        self.events.append(("response", response))

    def on_exception(self, request: ApiRequest[Any], exception: BaseException) -> None:
        self.events.append(("exception", exception))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("RESTWIRE_URL", raising=False)
    monkeypatch.delenv("RESTWIRE_TIMEOUT", raising=False)
    monkeypatch.delenv("RESTWIRE_MAX_WORKERS", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def config(base_url: str) -> Config:
    return Config(base_url=base_url, timeout=5.0, max_workers=4)


@pytest.fixture
def default_headers() -> list[RequestHeader]:
    return [RequestHeader.of("Accept", "application/json")]


@pytest.fixture
def client(
    config: Config, default_headers: list[RequestHeader]
) -> Generator[RecordingClient, None, None]:
    api = RecordingClient(default_headers=default_headers, config=config)
    yield api
    api.close()


@pytest.fixture
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio only (the code under test bridges via asyncio)."""
    return "asyncio"
