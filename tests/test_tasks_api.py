from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.core.config import Settings
from todo_api.main import create_app

pytestmark = pytest.mark.asyncio


async def test_task_lifecycle_toggle_and_delete(client: AsyncClient) -> None:
    created = await client.post("/api/tasks", data={"title": "Buy milk"})
    assert created.status_code == 201
    task = created.json()
    assert task["id"] == 1
    assert task["title"] == "Buy milk"
    assert task["description"] == ""
    assert task["isCompleted"] is False
    assert task["imageUrl"] is None
    assert "createdAt" in task
    assert created.headers["Location"] == "/api/tasks/1"

    toggled = await client.patch("/api/tasks/1/toggle")
    assert toggled.status_code == 200
    assert toggled.json()["isCompleted"] is True

    toggled_back = await client.patch("/api/tasks/1/toggle")
    assert toggled_back.json()["isCompleted"] is False
    assert toggled_back.json()["createdAt"] == task["createdAt"]

    deleted = await client.delete("/api/tasks/1")
    assert deleted.status_code == 204

    missing = await client.get("/api/tasks/1")
    assert missing.status_code == 404
    assert missing.json()["code"] == "not_found"


async def test_create_task_accepts_json(client: AsyncClient) -> None:
    response = await client.post(
        "/api/tasks",
        json={"title": "  Call mum  ", "description": "Sunday"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Call mum"
    assert body["description"] == "Sunday"


@pytest.mark.parametrize("payload", [{"title": ""}, {"title": "   "}, {"description": "no title"}])
async def test_create_task_requires_title(client: AsyncClient, payload: dict[str, str]) -> None:
    response = await client.post("/api/tasks", data=payload)
    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"

    listing = await client.get("/api/tasks")
    assert listing.json() == []


async def test_ids_increase_and_listing_is_newest_first(client: AsyncClient) -> None:
    ids = []
    for title in ("first", "second", "third"):
        response = await client.post("/api/tasks", data={"title": title})
        ids.append(response.json()["id"])
    assert ids == sorted(ids)
    assert len(set(ids)) == 3

    await client.delete(f"/api/tasks/{ids[-1]}")
    fourth = await client.post("/api/tasks", data={"title": "fourth"})
    assert fourth.json()["id"] > ids[-1]

    listing = (await client.get("/api/tasks")).json()
    assert [item["title"] for item in listing] == ["fourth", "second", "first"]
    timestamps = [item["createdAt"] for item in listing]
    assert timestamps == sorted(timestamps, reverse=True)


async def test_update_overwrites_present_fields_only(client: AsyncClient) -> None:
    created = (
        await client.post("/api/tasks", data={"title": "Draft", "description": "v1"})
    ).json()

    response = await client.put(
        f"/api/tasks/{created['id']}",
        json={"description": "", "isCompleted": True},
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Draft"
    assert updated["description"] == ""
    assert updated["isCompleted"] is True
    assert updated["createdAt"] == created["createdAt"]

    renamed = await client.put(f"/api/tasks/{created['id']}", json={"title": "Final"})
    assert renamed.json()["title"] == "Final"
    assert renamed.json()["isCompleted"] is True


async def test_update_rejects_blank_title(client: AsyncClient) -> None:
    created = (await client.post("/api/tasks", data={"title": "Keep me"})).json()
    response = await client.put(f"/api/tasks/{created['id']}", json={"title": " "})
    assert response.status_code == 400
    current = (await client.get(f"/api/tasks/{created['id']}")).json()
    assert current["title"] == "Keep me"


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/api/tasks/99"),
        ("PATCH", "/api/tasks/99/toggle"),
        ("DELETE", "/api/tasks/99"),
    ],
)
async def test_unknown_task_returns_404(client: AsyncClient, method: str, path: str) -> None:
    response = await client.request(method, path)
    assert response.status_code == 404


async def test_update_unknown_task_returns_404(client: AsyncClient) -> None:
    response = await client.put("/api/tasks/99", json={"title": "Nope"})
    assert response.status_code == 404


async def test_image_is_stored_served_preserved_and_deleted(
    client: AsyncClient,
    png_bytes: bytes,
    uploaded_path: Callable[[str], Path],
) -> None:
    response = await client.post(
        "/api/tasks",
        data={"title": "With picture", "description": "see image"},
        files={"image": ("photo.PNG", png_bytes, "image/png")},
    )
    assert response.status_code == 201
    task = response.json()
    image_url = task["imageUrl"]
    assert image_url.startswith("/uploads/")
    assert image_url.endswith(".png")

    path = uploaded_path(image_url)
    assert path.read_bytes() == png_bytes

    served = await client.get(image_url)
    assert served.status_code == 200
    assert served.content == png_bytes

    updated = await client.put(f"/api/tasks/{task['id']}", json={"title": "Renamed"})
    assert updated.json()["imageUrl"] == image_url

    deleted = await client.delete(f"/api/tasks/{task['id']}")
    assert deleted.status_code == 204
    assert not path.exists()


async def test_two_uploads_with_same_name_do_not_collide(client: AsyncClient) -> None:
    first = await client.post(
        "/api/tasks",
        data={"title": "a"},
        files={"image": ("same.jpg", b"one", "image/jpeg")},
    )
    second = await client.post(
        "/api/tasks",
        data={"title": "b"},
        files={"image": ("same.jpg", b"two", "image/jpeg")},
    )
    assert first.json()["imageUrl"] != second.json()["imageUrl"]


async def test_empty_image_part_is_ignored(client: AsyncClient, upload_dir: Path) -> None:
    response = await client.post(
        "/api/tasks",
        data={"title": "No picture"},
        files={"image": ("empty.png", b"", "image/png")},
    )
    assert response.status_code == 201
    assert response.json()["imageUrl"] is None
    assert list(upload_dir.iterdir()) == []


async def test_delete_without_image_leaves_uploads_untouched(
    client: AsyncClient,
    png_bytes: bytes,
    upload_dir: Path,
) -> None:
    kept = await client.post(
        "/api/tasks",
        data={"title": "Has image"},
        files={"image": ("keep.png", png_bytes, "image/png")},
    )
    plain = await client.post("/api/tasks", data={"title": "Plain"})

    before = sorted(upload_dir.iterdir())
    response = await client.delete(f"/api/tasks/{plain.json()['id']}")
    assert response.status_code == 204
    assert sorted(upload_dir.iterdir()) == before
    assert kept.json()["imageUrl"] is not None


async def test_health_endpoint(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["timestamp"]


async def test_root_endpoint_reports_metadata(client: AsyncClient) -> None:
    response = await client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["api_prefix"] == "/api"
    assert body["environment"] == "test"
    assert body["version"]


async def test_demo_data_is_seeded_when_enabled(upload_dir: Path) -> None:
    app = create_app(Settings(environment="test", upload_dir=upload_dir, seed_demo_data=True))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        response = await client.get("/api/tasks")

    tasks = response.json()
    assert len(tasks) == 5
    assert tasks[-1]["title"] == "Clean the flat"
    assert tasks[-1]["isCompleted"] is True


async def test_delete_task_whose_image_file_is_already_gone(
    client: AsyncClient,
    png_bytes: bytes,
    uploaded_path: Callable[[str], Path],
) -> None:
    created = await client.post(
        "/api/tasks",
        data={"title": "Stale picture"},
        files={"image": ("stale.png", png_bytes, "image/png")},
    )
    task = created.json()
    uploaded_path(task["imageUrl"]).unlink()

    deleted = await client.delete(f"/api/tasks/{task['id']}")
    assert deleted.status_code == 204
    assert (await client.get(f"/api/tasks/{task['id']}")).status_code == 404
