from __future__ import annotations

import functools
import json
from typing import Any, Callable

import httpx
import pytest

from gh import GitHubClient

TOKEN = "test-token"


def tree_entry(path: str, type_: str = "blob", **extra: Any) -> dict[str, Any]:
    entry = {
        "path": path,
        "mode": "040000" if type_ == "tree" else "100644",
        "type": type_,
        "sha": "0" * 40,
        "url": f"https://api.github.com/repos/octocat/Hello-World/git/blobs/{path}",
    }
    if type_ == "blob":
        entry["size"] = 12
    entry.update(extra)
    return entry


def tree_response(entries: list[dict[str, Any]], truncated: bool = False) -> dict[str, Any]:
    return {
        "sha": "f" * 40,
        "url": "https://api.github.com/repos/octocat/Hello-World/git/trees/main",
        "truncated": truncated,
        "tree": entries,
    }


class FakeGitHub:
    """
    Routes requests to canned JSON bodies and records every request seen.
    """

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, body: Any, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.routes:
            return httpx.Response(404, json={"message": "Not Found"})
        status, body = self.routes[request.url.path]
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, content=json.dumps(body).encode("utf-8"))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture()
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture()
def client(fake_github: FakeGitHub) -> GitHubClient:
    return GitHubClient(token=TOKEN, transport=fake_github.transport)


@pytest.fixture()
def client_factory(fake_github: FakeGitHub) -> Callable[[str], GitHubClient]:
    return functools.partial(GitHubClient, transport=fake_github.transport)


@pytest.fixture()
def hello_world(fake_github: FakeGitHub) -> FakeGitHub:
    """
    octocat/Hello-World on branch main with a small tree:
      src/
      src/main.rs
    """
    fake_github.add("/repos/octocat/Hello-World", {"default_branch": "main", "id": 1})
    fake_github.add(
        "/repos/octocat/Hello-World/git/trees/main",
        tree_response([tree_entry("src", "tree"), tree_entry("src/main.rs")]),
    )
    return fake_github
