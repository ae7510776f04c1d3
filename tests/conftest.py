import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.main import create_app
from app.services.joke_fetcher import JokeFetcher
from app.services.persistence import FavoritesGateway
from app.services.session import SessionController


JOKE_URL = "https://jokes.test/"

CHICKEN = {"id": "1", "joke": "Why did the chicken cross the road?\nTo get to the other side.", "status": 200}
SKELETON = {"id": "2", "joke": "Why don't skeletons fight each other? They don't have the guts.", "status": 200}


class JokeQueue:
    """Serves queued responses to the fetcher; an Exception entry is raised instead."""

    def __init__(self):
        self.responses = []
        self.requests = []

    def push(self, item):
        self.responses.append(item)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        if isinstance(item, httpx.Response):
            return item
        return httpx.Response(200, json=item)


@pytest.fixture
def jokes():
    return JokeQueue()


@pytest.fixture
def fetcher(jokes):
    client = httpx.AsyncClient(transport=httpx.MockTransport(jokes.handler))
    return JokeFetcher(url=JOKE_URL, user_agent="tests", client=client)


@pytest.fixture
def favorites_path(tmp_path):
    return tmp_path / "data" / "savedFavourites"


@pytest.fixture
def gateway(favorites_path):
    return FavoritesGateway(favorites_path)


@pytest.fixture
def controller(fetcher, gateway):
    return SessionController(fetcher=fetcher, gateway=gateway)


@pytest.fixture
def app(controller):
    return create_app(controller=controller)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
