import base64
from typing import Callable, List

import httpx
import orjson
import pytest

from gemini_rest_client import GeminiSession

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 16
PDF_BYTES = b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n1 0 obj\n"
PNG_BASE64 = base64.b64encode(PNG_BYTES).decode("utf-8")


def gemini_reply(text: str) -> httpx.Response:
    return httpx.Response(
        200,
        json={
            "candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}],
            "usageMetadata": {"promptTokenCount": 3, "candidatesTokenCount": 2},
        },
    )


class RecordingTransport:
    """Answers generateContent POSTs from a queue of replies and records each request."""

    def __init__(self, replies: List[httpx.Response] = None, files: dict = None):
        self.replies = list(replies or [])
        self.files = files or {}
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            url = str(request.url)
            if url not in self.files:
                return httpx.Response(404, text="not found")
            content, content_type = self.files[url]
            headers = {"Content-Type": content_type} if content_type else {}
            return httpx.Response(200, content=content, headers=headers)
        if not self.replies:
            return gemini_reply("")
        return self.replies.pop(0)

    @property
    def posts(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]

    def payload(self, index: int = -1) -> dict:
        return orjson.loads(self.posts[index].content)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_session(transport) -> Callable[..., GeminiSession]:
    sessions = []

    def _make(**kwargs) -> GeminiSession:
        client = httpx.Client(transport=httpx.MockTransport(transport))
        kwargs.setdefault("api_key", "test-api-key-123456")
        session = GeminiSession(http_client=client, **kwargs)
        sessions.append((session, client))
        return session

    yield _make

    for session, client in sessions:
        session.close()
        client.close()
