"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from dogql.config import Settings
from dogql.context import AppContext

Routes = dict[str, tuple[int, Any]]

# Canned upstream payloads, keyed by path relative to the API base URL
DEFAULT_ROUTES: Routes = {
    "breeds/list/all": (
        200,
        {"akita": [], "bulldog": ["boston", "english", "french"], "hound": ["afghan", "basset"]},
    ),
    "breed/akita/list": (200, []),
    "breed/bulldog/list": (200, ["boston", "english", "french"]),
    "breed/hound/list": (200, ["afghan", "basset"]),
    "breed/pug/list": (200, []),
    "breed/akita/images/random": (200, "https://images.dog.ceo/breeds/akita/Akita_1.jpg"),
    "breed/bulldog/images/random": (
        200,
        "https://images.dog.ceo/breeds/bulldog-boston/n02096585_1.jpg",
    ),
    "breed/hound/images/random": (
        200,
        "https://images.dog.ceo/breeds/hound-afghan/n02088094_1003.jpg",
    ),
    "breed/pug/images/random": (200, "https://images.dog.ceo/breeds/pug/n02110958_1975.jpg"),
    "breed/akita/images": (200, ["https://images.dog.ceo/breeds/akita/Akita_1.jpg"]),
    "breed/bulldog/images": (200, []),
    "breed/hound/images": (200, ["https://images.dog.ceo/breeds/hound-afghan/n02088094_1003.jpg"]),
    "breed/pug/images": (
        200,
        [
            "https://images.dog.ceo/breeds/pug/n02110958_10.jpg",
            "https://images.dog.ceo/breeds/pug/n02110958_1975.jpg",
            "https://images.dog.ceo/breeds/pug/n02110958_2410.jpg",
        ],
    ),
}


def make_upstream_handler(
    routes: Routes, calls: list[str] | None = None
) -> Callable[[httpx.Request], httpx.Response]:
    """Build an ``httpx.MockTransport`` handler that imitates the Dog CEO API."""

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.raw_path.decode("ascii").split("?")[0].removeprefix("/api/")
        if calls is not None:
            calls.append(path)

        if path not in routes:
            return httpx.Response(
                404,
                json={
                    "status": "error",
                    "message": "Breed not found (main breed does not exist)",
                    "code": 404,
                },
            )

        status_code, message = routes[path]
        status = "success" if status_code < 400 else "error"
        return httpx.Response(status_code, json={"status": status, "message": message})

    return handler


@pytest.fixture
def upstream_routes() -> Routes:
    """Mutable copy of the canned upstream routes; tests may override entries."""
    return dict(DEFAULT_ROUTES)


@pytest.fixture
def upstream_calls() -> list[str]:
    """Paths requested from the fake upstream, in order."""
    return []


@pytest.fixture
def upstream_client(
    upstream_routes: Routes, upstream_calls: list[str]
) -> httpx.AsyncClient:
    """An HTTP client whose requests never leave the process."""
    return httpx.AsyncClient(
        transport=httpx.MockTransport(make_upstream_handler(upstream_routes, upstream_calls))
    )


@pytest.fixture
def test_settings() -> Settings:
    return Settings(debug=True, dog_api_base_url="https://dog.ceo/api")


@pytest.fixture
def app_context(test_settings: Settings, upstream_client: httpx.AsyncClient) -> AppContext:
    return AppContext(settings=test_settings, http_client=upstream_client)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
