"""Shared test fixtures for gong-mcp."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest


def unwrap_tool(tool: Any) -> Any:
    """Extract the raw coroutine from a FastMCP FunctionTool, if wrapped.

    FastMCP 2.x wraps @server.tool functions in FunctionTool (not callable).
    FastMCP 3.x preserves the original function. This helper works with both.
    """
    return getattr(tool, "fn", tool)


def records(total: int, cursor: str | None = None) -> dict[str, Any]:
    """Pagination block as the Gong API sends it."""
    block: dict[str, Any] = {
        "totalRecords": total,
        "currentPageSize": total,
        "currentPageNumber": 0,
    }
    if cursor is not None:
        block["cursor"] = cursor
    return block


class FakeGongAPI:
    """In-memory Gong API behind ``httpx.MockTransport``.

    Routes are keyed by ``(method, path)`` with the ``/v2`` prefix stripped.
    Every request is recorded; unrouted requests answer 404.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response | Exception] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        payload: Any = None,
        *,
        status: int = 200,
        text: str | None = None,
    ) -> None:
        if text is not None:
            response = httpx.Response(status, text=text)
        else:
            response = httpx.Response(status, json=payload)
        self.routes[(method, path)] = response

    def fail(self, method: str, path: str, error: Exception) -> None:
        self.routes[(method, path)] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v2")
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, text=f"no route for {request.method} {path}")
        if isinstance(route, Exception):
            raise route
        return route

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True, scope="session")
def _unwrap_fastmcp_tools():
    """Patch tool modules so FunctionTool objects become directly callable.

    FastMCP 2.x wraps @server.tool in FunctionTool (not callable); 3.x
    preserves the function. This fixture unwraps at the module level so
    tests can ``await tool_func(...)`` regardless of FastMCP version.
    """
    import importlib
    import pkgutil

    import gong_mcp.tools as tools_pkg

    modules = []
    for info in pkgutil.walk_packages(tools_pkg.__path__, tools_pkg.__name__ + "."):
        try:
            modules.append(importlib.import_module(info.name))
        except Exception:
            pass

    for mod in modules:
        for name in list(vars(mod)):
            obj = getattr(mod, name, None)
            if obj is not None and hasattr(obj, "fn") and not callable(obj):
                setattr(mod, name, obj.fn)


@pytest.fixture(autouse=True)
def _set_dummy_credentials(monkeypatch):
    """Ensure tests never authenticate against the real Gong API."""
    monkeypatch.setenv("GONG_ACCESS_KEY", "test-key-not-real")
    monkeypatch.setenv("GONG_ACCESS_KEY_SECRET", "test-secret-not-real")
    monkeypatch.delenv("GONG_BASE_URL", raising=False)


@pytest.fixture(autouse=True)
def _disable_tracing(monkeypatch):
    """Disable MLflow tracing in all tests to avoid real tracking-server calls.

    The ``test_tracing.py`` module patches the tracing module directly
    and does not rely on this fixture.
    """
    monkeypatch.setenv("GONG_TRACING_ENABLED", "false")


@pytest.fixture(autouse=True)
def _isolate_dotenv(tmp_path, monkeypatch):
    """Prevent tests from loading the user's real ~/.config/gong-mcp/.env."""
    monkeypatch.setattr(
        "gong_mcp.dotenv.DEFAULT_ENV_PATH",
        tmp_path / "nonexistent.env",
    )


@pytest.fixture()
def clean_config():
    """Reset the config singleton between tests."""
    import gong_mcp.config as cfg_mod

    cfg_mod._config = None
    yield
    cfg_mod._config = None


@pytest.fixture()
def gong_api() -> FakeGongAPI:
    return FakeGongAPI()


@pytest.fixture()
def gong_client(gong_api):
    """GongClient wired to the fake API with fixed test credentials."""
    from gong_mcp.client import GongClient
    from gong_mcp.config import ServerConfig

    config = ServerConfig(access_key="key", access_key_secret="secret")
    return GongClient(config, transport=httpx.MockTransport(gong_api.handler))


@pytest.fixture()
def shared_client(gong_client, monkeypatch):
    """Install ``gong_client`` as the process-wide client used by the tools."""
    monkeypatch.setattr("gong_mcp.client._client", gong_client)
    return gong_client
