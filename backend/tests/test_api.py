"""Tests for the HTTP surface."""

import httpx
import pytest
import pytest_asyncio

from vibes.dependencies import create_runtime
from vibes.main import create_app
from vibes.skills.registry import list_skill_ids


@pytest.fixture
def api_runtime():
    return create_runtime()


@pytest_asyncio.fixture
async def client(api_runtime):
    app = create_app(api_runtime)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_list_skills(client):
    resp = await client.get("/skills")

    assert resp.status_code == 200
    body = resp.json()
    assert [s["id"] for s in body] == list_skill_ids()
    by_id = {s["id"]: s for s in body}
    assert by_id["view-calendar"]["ui_view"] == "calendar"
    assert by_id["create-todo"]["ui_view"] == "todo-list"
    assert by_id["create-todo"]["tool"]["parameters"]["required"] == ["title"]


@pytest.mark.asyncio
async def test_invoke_create_todo(client, api_runtime):
    resp = await client.post(
        "/skills/create-todo/invoke",
        json={"agent_id": "charles", "args": {"title": "Buy milk"}},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["result"]["success"] is True
    assert body["result"]["data"]["todo"]["title"] == "Buy milk"
    assert body["injection"]["status"] == "skipped"
    assert len(api_runtime.todos) == 1


@pytest.mark.asyncio
async def test_invoke_returns_injected_context(client):
    resp = await client.post("/skills/show-menu/invoke", json={"agent_id": "charles"})

    body = resp.json()
    assert body["injection"]["status"] == "injected"
    assert "VORSPEISEN:" in body["injected_context"][0]["turns"]


@pytest.mark.asyncio
async def test_handler_failure_is_still_200(client):
    resp = await client.post(
        "/skills/toggle-todo/invoke", json={"agent_id": "charles", "args": {"id": "todo_missing"}}
    )
    assert resp.status_code == 200
    assert resp.json()["result"]["success"] is False


@pytest.mark.asyncio
async def test_unknown_skill_404(client):
    resp = await client.post("/skills/launch-rocket/invoke", json={"agent_id": "charles"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_unknown_agent_404(client):
    resp = await client.post("/skills/create-todo/invoke", json={"agent_id": "ghost", "args": {"title": "x"}})
    assert resp.status_code == 404
    assert "ghost" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_lifespan_starts_with_packaged_agents_and_catalogs(api_runtime):
    app = create_app(api_runtime)
    async with app.router.lifespan_context(app):
        assert "charles" in app.state.runtime.agents.available()
        assert app.state.runtime.catalogs.catalog_ids() == ["menu", "wellness"]
