"""HTTP tests for the FastAPI app (GraphQL router, health, version)."""

from typing import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from meetup_backend.app import create_app
from meetup_backend.graphql.resolver import Resolver

pytestmark = pytest.mark.integration


@pytest.fixture
def app(resolver: Resolver) -> FastAPI:
    return create_app(resolver)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_version(client: AsyncClient) -> None:
    response = await client.get("/version")

    assert response.status_code == 200
    assert "version" in response.json()


@pytest.mark.asyncio
async def test_graphql_create_and_list(client: AsyncClient) -> None:
    create = await client.post(
        "/graphql",
        json={
            "query": "mutation($input: NewMeetup!) { createMeetup(input: $input) { id title } }",
            "variables": {"input": {"title": "Go Night", "location": "Online"}},
        },
    )
    assert create.status_code == 200
    created = create.json()["data"]["createMeetup"]

    listed = await client.post("/graphql", json={"query": "{ meetups { id title } }"})

    assert listed.status_code == 200
    assert listed.json() == {"data": {"meetups": [created]}}


@pytest.mark.asyncio
async def test_graphql_error_is_structured(client: AsyncClient) -> None:
    response = await client.post(
        "/graphql",
        json={"query": 'mutation { createMeetup(input: {title: ""}) { id } }'},
    )

    body = response.json()
    assert body["data"] is None
    assert body["errors"][0]["extensions"] == {
        "code": "VALIDATION_ERROR",
        "field": "title",
    }
    assert body["errors"][0]["path"] == ["createMeetup"]
