import json
import os
import sys

import httpx
import pytest
import pytest_asyncio

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from app.client import PetListState, PetsClient


@pytest.fixture()
def pets():
    return [
        {"id": 3, "name": "Maca", "species": "Cat"},
        {"id": 5, "name": "Rex", "species": "Dog"},
        {"id": 8, "name": "Luna", "species": "Cat"},
    ]


class FakePetsApi:
    """Records requests and answers them like the pets API would."""

    def __init__(self, pets):
        self.pets = list(pets)
        self.requests: list[httpx.Request] = []
        self.fail_with: Exception | None = None
        self.status_for_delete = 204

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        if request.method == "GET" and request.url.path == "/pets":
            return httpx.Response(200, content=json.dumps(self.pets))
        if request.method == "DELETE":
            return httpx.Response(self.status_for_delete)
        return httpx.Response(405)


@pytest.fixture()
def fake_api(pets):
    return FakePetsApi(pets)


@pytest_asyncio.fixture()
async def api_client(fake_api):
    client = PetsClient("http://localhost:3000", transport=httpx.MockTransport(fake_api))
    yield client
    await client.close()


@pytest.fixture()
def state(api_client, pets):
    return PetListState(api_client, pets)
