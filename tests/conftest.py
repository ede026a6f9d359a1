"""
Shared pytest fixtures for instagraph tests.

Provides:
- A recording transport double
- Client contexts with and without a user token
- Sample Graph API payloads
"""

from typing import Any, Dict, List, Optional

import httpx
import pytest

from instagraph.core.client import InstagramClient
from instagraph.core.context import ClientContext

TOKEN = "IGQVJtoken123"
CLIENT_ID = "990011"


class RecordingTransport:
    """
    Transport double that records every call.

    Responses are served from ``routes`` when the URL matches exactly,
    otherwise from the ``responses`` queue in order. Exceptions in either
    place are raised instead of returned.
    """

    def __init__(self, responses: Optional[List[Any]] = None, routes: Optional[Dict[str, Any]] = None):
        self.responses = list(responses or [])
        self.routes = dict(routes or {})
        self.calls: List[tuple] = []

    @property
    def urls(self) -> List[str]:
        return [call[1] for call in self.calls]

    def _respond(self, url: str) -> Any:
        if url in self.routes:
            response = self.routes[url]
        elif self.responses:
            response = self.responses.pop(0)
        else:
            raise AssertionError(f"Unexpected request: {url}")
        if isinstance(response, Exception):
            raise response
        return response

    def get_json(self, url: str) -> Any:
        self.calls.append(("GET", url, None))
        return self._respond(url)

    def post_form(self, url: str, form=None) -> Any:
        self.calls.append(("POST", url, dict(form or {})))
        return self._respond(url)

    def delete_url(self, url: str) -> None:
        self.calls.append(("DELETE", url, None))
        self._respond(url)


def query(url: str) -> httpx.QueryParams:
    """Decoded query parameters of a URL."""
    return httpx.URL(url).params


@pytest.fixture
def user_context():
    return ClientContext(client_id=CLIENT_ID, access_token=TOKEN)


@pytest.fixture
def app_context():
    return ClientContext(client_id=CLIENT_ID)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(user_context, transport):
    return InstagramClient(user_context, transport)


@pytest.fixture
def app_client(app_context, transport):
    return InstagramClient(app_context, transport)


@pytest.fixture
def profile_payload():
    return {
        "id": "17841400000000001",
        "account_type": "BUSINESS",
        "media_count": 42,
        "username": "jane.doe",
    }


@pytest.fixture
def image_payload():
    return {
        "id": "17895695668004550",
        "caption": "Sunset at the pier",
        "media_type": "IMAGE",
        "media_url": "https://scontent.cdninstagram.com/v/sunset.jpg",
        "permalink": "https://www.instagram.com/p/B_sunset/",
        "timestamp": "2020-05-19T18:50:02+0000",
        "username": "jane.doe",
    }


@pytest.fixture
def video_payload():
    return {
        "id": "17918195224117851",
        "media_type": "VIDEO",
        "media_url": "https://video.cdninstagram.com/v/clip.mp4",
        "permalink": "https://www.instagram.com/p/B_clip/",
        "thumbnail_url": "https://scontent.cdninstagram.com/v/clip_thumb.jpg",
        "timestamp": "2020-05-20T08:15:30+0000",
        "username": "jane.doe",
    }
