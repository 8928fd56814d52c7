import httpx
import pytest

TOKEN_HOST = "www.reddit.com"
TOKEN_PATH = "/api/v1/access_token"
LISTING_HOST = "oauth.reddit.com"


def listing_body(*posts: dict) -> dict:
    return {
        "kind": "Listing",
        "data": {"children": [{"kind": "t3", "data": p} for p in posts]},
    }


class FakeReddit:
    """Fake Reddit token and listing endpoints served through ``httpx.MockTransport``.

    ``token_response`` / ``listing_response`` may be set to an
    ``httpx.Response`` or to an exception raised from the transport. Every
    request seen is recorded in ``calls``.
    """

    def __init__(self):
        self.token_response: httpx.Response | Exception = httpx.Response(
            200, json={"access_token": "T", "token_type": "bearer", "expires_in": 86400}
        )
        self.listing_response: httpx.Response | Exception = httpx.Response(
            200,
            json=listing_body(
                {"title": "First", "permalink": "/p/1", "url": "https://img/1.jpg"},
                {"title": "Second", "permalink": "/p/2", "url": "https://img/2.jpg"},
            ),
        )
        self.calls: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if request.url.host == TOKEN_HOST and request.url.path == TOKEN_PATH:
            result = self.token_response
        elif request.url.host == LISTING_HOST:
            result = self.listing_response
        else:
            return httpx.Response(404)
        if isinstance(result, Exception):
            raise result
        return result

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_reddit():
    return FakeReddit()
