"""Integration tests for API endpoints."""
import pytest
from httpx import AsyncClient, ASGITransport

from src.core.conversion.store import SessionStore
from src.core.preferences.theme import ThemeStore
from src.dependencies import get_llm_factory
from src.main import create_app


@pytest.fixture
def generator(fake_generator):
    return fake_generator


@pytest.fixture
def app(preferences_path, generator):
    application = create_app()
    # Lifespan doesn't run in test; wire state manually.
    application.state.session_store = SessionStore()
    application.state.theme_store = ThemeStore(preferences_path)
    application.dependency_overrides[get_llm_factory] = lambda: (lambda: generator)
    return application


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def _new_session(client) -> str:
    response = await client.post("/api/v1/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["x-request-id"]


@pytest.mark.asyncio
async def test_list_formats_and_styles(client):
    formats = (await client.get("/api/v1/formats")).json()
    assert formats["total"] == 6
    assert formats["formats"][0]["display_name"] == "JSON (JavaScript Object Notation)"

    styles = (await client.get("/api/v1/context-styles")).json()
    assert styles["default"] == "Professional"
    assert "Concise" in styles["styles"]


@pytest.mark.asyncio
async def test_session_convert(client, generator):
    session_id = await _new_session(client)
    response = await client.post(
        f"/api/v1/sessions/{session_id}/convert",
        json={"prompt": "Three users"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "completed"
    assert [o["language"] for o in data["outputs"]] == ["json", "yaml"]
    assert data["outputs"][0]["code"] == '{"a":1}'
    assert len(generator.calls) == 1

    session = (await client.get(f"/api/v1/sessions/{session_id}")).json()
    assert len(session["outputs"]) == 2


@pytest.mark.asyncio
async def test_convert_skipped_without_formats(client, generator):
    session_id = await _new_session(client)
    for name in ("JSON", "TOON", "YAML", "CSV", "XML", "TOML"):
        await client.post(f"/api/v1/sessions/{session_id}/formats/{name}/toggle")

    response = await client.post(
        f"/api/v1/sessions/{session_id}/convert",
        json={"prompt": "Three users"},
    )
    assert response.json()["status"] == "skipped"
    assert generator.calls == []


@pytest.mark.asyncio
async def test_convert_while_pending_leaves_session_untouched(app, client, generator):
    session_id = await _new_session(client)
    await client.put(f"/api/v1/sessions/{session_id}/prompt", json={"prompt": "Three users"})
    app.state.session_store.get(session_id).is_loading = True

    response = await client.post(
        f"/api/v1/sessions/{session_id}/convert",
        json={"prompt": "Something else"},
    )
    assert response.json()["status"] == "skipped"
    assert generator.calls == []
    assert app.state.session_store.get(session_id).prompt == "Three users"


@pytest.mark.asyncio
async def test_custom_format_lifecycle(client):
    session_id = await _new_session(client)
    url = f"/api/v1/sessions/{session_id}/formats"

    response = await client.post(url, json={"name": "INI", "instructions": "Use sections."})
    assert response.status_code == 201
    names = [f["name"] for f in response.json()["formats"]]
    assert names[-1] == "INI"

    duplicate = await client.post(url, json={"name": "ini", "instructions": "again"})
    assert duplicate.status_code == 409
    assert duplicate.json()["error"] == "FormatExistsError"

    blank = await client.post(url, json={"name": "TSV", "instructions": " "})
    assert blank.status_code == 400

    slashed = await client.post(url, json={"name": "CSV/TSV", "instructions": "Tabs."})
    assert slashed.status_code == 400
    assert slashed.json()["error"] == "ValidationError"

    removed = await client.delete(f"{url}/INI")
    assert removed.status_code == 200
    assert "INI" not in [f["name"] for f in removed.json()["formats"]]


@pytest.mark.asyncio
async def test_unknown_session(client):
    response = await client.get("/api/v1/sessions/missing")
    assert response.status_code == 404
    assert response.json()["error"] == "SessionNotFoundError"


@pytest.mark.asyncio
async def test_stateless_convert(client, generator):
    response = await client.post(
        "/api/v1/convert",
        json={
            "prompt": "Three users",
            "formats": ["json"],
            "custom_formats": [{"name": "INI", "instructions": "Use sections."}],
            "context_style": "Technical",
        },
    )
    assert response.status_code == 200
    assert response.json()["status"] == "completed"
    _, user = generator.calls[0]
    assert "1. JSON (JavaScript Object Notation)\n2. INI" in user


@pytest.mark.asyncio
async def test_stateless_convert_unknown_format(client):
    response = await client.post(
        "/api/v1/convert",
        json={"prompt": "Three users", "formats": ["PROTOBUF"]},
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_theme_toggle(client):
    initial = (await client.get("/api/v1/preferences/theme")).json()["theme"]
    assert initial == "light"

    first = (await client.post("/api/v1/preferences/theme/toggle")).json()["theme"]
    assert first == "dark"
    assert (await client.get("/api/v1/preferences/theme")).json()["theme"] == first

    second = (await client.post("/api/v1/preferences/theme/toggle")).json()["theme"]
    assert second == initial


class TestGenerationFailure:
    @pytest.fixture
    def generator(self, make_generator):
        from src.utils.exceptions import LLMError

        return make_generator(error=LLMError("gemini", "quota exceeded"))

    @pytest.mark.asyncio
    async def test_failure_reported_in_body(self, client):
        session_id = await _new_session(client)
        response = await client.post(
            f"/api/v1/sessions/{session_id}/convert",
            json={"prompt": "Three users"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "failed"
        assert data["error"] == "LLM error (gemini): quota exceeded"
        assert data["outputs"] == []
