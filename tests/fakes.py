# tests/fakes.py
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FakeTransport:
    """In-memory transport: records URLs and replays a canned body."""

    body: str = '{"status":"OK","results":[]}'
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)
    posts: list[tuple[str, str]] = field(default_factory=list)

    async def get(self, url: str) -> str:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.body

    async def post(self, url: str, body: str) -> str:
        self.posts.append((url, body))
        if self.error is not None:
            raise self.error
        return self.body
