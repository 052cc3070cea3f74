"""
Shared fixtures for Vimeo MCP Lite tests
"""

import json
import os
from typing import Any, Callable, Dict, List, Optional

# Set test environment before importing project modules
os.environ.setdefault('VIMEO_ACCESS_TOKEN', 'test_access_token_for_testing')
os.environ.setdefault('LOG_LEVEL', 'DEBUG')

import httpx
import pytest

from vimeo_client import VimeoClient


class FakeVimeo:
    """
    In-process stand-in for api.vimeo.com

    Routes are keyed by (method, path); each route is either a
    (status, body) tuple or a callable taking the httpx.Request.
    Every request is recorded for later assertions.
    """

    def __init__(self):
        self.routes: Dict[tuple, Any] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, body: Any = None,
            handler: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        self.routes[(method, path)] = handler or (status, body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "The requested page couldn't be found."})
        if callable(route):
            return route(request)
        status, body = route
        if body is None:
            return httpx.Response(status)
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @staticmethod
    def body_of(request: httpx.Request) -> Any:
        return json.loads(request.content) if request.content else None


@pytest.fixture
def fake_vimeo():
    """Fake Vimeo API with no routes registered"""
    return FakeVimeo()


@pytest.fixture
def vimeo_client(fake_vimeo):
    """VimeoClient wired to the fake API through httpx.MockTransport"""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_vimeo))
    return VimeoClient(
        access_token='test_access_token_for_testing',
        http_client=http_client
    )


def video_resource(video_id: str, name: Optional[str] = "Clip", **extra) -> Dict[str, Any]:
    """Build a Vimeo-style video resource"""
    resource = {
        "uri": f"/videos/{video_id}",
        "name": name,
        "duration": 42,
        "created_time": "2024-03-05T10:20:30+00:00",
    }
    resource.update(extra)
    return resource


def folder_resource(folder_id: str, name: str = "Folder", videos: int = 0) -> Dict[str, Any]:
    """Build a Vimeo-style project (folder) resource"""
    return {
        "uri": f"/users/1/projects/{folder_id}",
        "name": name,
        "metadata": {"connections": {"videos": {"total": videos}}},
    }
