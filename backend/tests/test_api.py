"""
tests.test_api

End-to-end HTTP tests through the FastAPI app: status codes, camelCase JSON,
page envelope, error bodies, and the login → bearer token flow.
"""

import pytest

from taproom.shared.models import Role
from taproom.shared.repositories import UserRepository

from tests.conftest import login


@pytest.fixture
async def admin_headers(client, seed):
    await seed.user("admin", password="admin-pw", role=Role.ADMIN)
    return await login(client, "admin", "admin-pw")


async def create_manufacturer(client, headers, user_name, name, **extra):
    body = {"userName": user_name, "password": "pw", "name": name, **extra}
    response = await client.post("/api/manufacturer", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH & AUTH
# ═══════════════════════════════════════════════════════════════════════════════


async def test_health_endpoints(client):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"

    r = await client.get("/ready")
    assert r.status_code == 200
    assert r.json()["database"] == "ok"

    r = await client.get("/live")
    assert r.json() == {"status": "alive"}


async def test_login_returns_bearer_token(client, seed):
    await seed.user("brewer", password="pw")

    r = await client.post("/auth/login", json={"username": "brewer", "password": "pw"})

    assert r.status_code == 200
    body = r.json()
    assert body["token_type"] == "Bearer"
    assert body["expires_in"] > 0
    assert body["access_token"]


async def test_login_with_wrong_password(client, seed):
    await seed.user("brewer", password="pw")

    r = await client.post("/auth/login", json={"username": "brewer", "password": "nope"})

    assert r.status_code == 401
    assert r.json()["error"]["code"] == "UNAUTHENTICATED"


async def test_me_anonymous_and_authenticated(client, admin_headers):
    r = await client.get("/auth/me")
    assert r.json()["anonymous"] is True
    assert r.json()["roles"] == ["ANONYMOUS"]

    r = await client.get("/auth/me", headers=admin_headers)
    body = r.json()
    assert body["anonymous"] is False
    assert body["username"] == "admin"
    assert body["roles"] == ["ADMIN"]
    assert body["scopeId"] is None


async def test_garbage_token_is_rejected(client):
    r = await client.get("/auth/me", headers={"Authorization": "Bearer garbage"})
    assert r.status_code == 401


# ═══════════════════════════════════════════════════════════════════════════════
# MANUFACTURERS
# ═══════════════════════════════════════════════════════════════════════════════


async def test_manufacturer_lifecycle(client, admin_headers):
    created = await create_manufacturer(client, admin_headers, "brew1", "Brew One", country="DE")
    assert set(created) == {"id", "name"}

    r = await client.get(f"/api/manufacturer/{created['id']}")
    assert r.json() == {"id": created["id"], "name": "Brew One", "country": "DE"}

    owner_headers = await login(client, "brew1", "pw")
    me = (await client.get("/auth/me", headers=owner_headers)).json()
    assert me["scopeId"] == created["id"]

    r = await client.put(
        f"/api/manufacturer/{created['id']}",
        json={"name": "Brew Uno"},
        headers=owner_headers,
    )
    assert r.status_code == 200
    assert r.json() == {"id": created["id"], "name": "Brew Uno"}

    r = await client.delete(f"/api/manufacturer/{created['id']}", headers=owner_headers)
    assert r.status_code == 204

    r = await client.get(f"/api/manufacturer/{created['id']}")
    assert r.status_code == 404
    assert r.json() == {
        "error": {
            "code": "NOT_FOUND",
            "description": f"Manufacturer with id {created['id']} not found",
            "details": {},
        }
    }


async def test_snake_case_body_is_accepted(client, admin_headers):
    r = await client.post(
        "/api/manufacturer",
        json={"user_name": "snake", "password": "pw", "name": "Snake", "user_enabled": True},
        headers=admin_headers,
    )
    assert r.status_code == 201


async def test_duplicate_user_name(client, admin_headers):
    await create_manufacturer(client, admin_headers, "brew1", "First")

    r = await client.post(
        "/api/manufacturer",
        json={"userName": "brew1", "password": "pw", "name": "Second"},
        headers=admin_headers,
    )

    assert r.status_code == 400
    assert r.json()["error"]["description"] == "User with name brew1 already exists"


async def test_create_without_token(client):
    r = await client.post("/api/manufacturer", json={"userName": "x", "password": "pw", "name": "X"})
    assert r.status_code == 401


async def test_owner_cannot_touch_another_manufacturer(client, admin_headers):
    await create_manufacturer(client, admin_headers, "one", "One")
    two = await create_manufacturer(client, admin_headers, "two", "Two")
    one_headers = await login(client, "one", "pw")

    r = await client.put(f"/api/manufacturer/{two['id']}", json={"name": "Mine now"}, headers=one_headers)

    assert r.status_code == 403
    assert r.json()["error"]["code"] == "FORBIDDEN"
    assert r.json()["error"]["details"]["reason"] == "WRONG_OWNER"


async def test_list_twelve_manufacturers(client, admin_headers):
    names = [f"Maker {letter}" for letter in "LKJIHGFEDCBA"]
    for index, name in enumerate(names):
        await create_manufacturer(client, admin_headers, f"user{index}", name)

    r = await client.get("/api/manufacturer", params={"page": 0, "size": 5, "sort": "name,asc"})

    assert r.status_code == 200
    body = r.json()
    assert [item["name"] for item in body["content"]] == sorted(names)[:5]
    assert body["page"] == {"size": 5, "number": 0, "totalElements": 12, "totalPages": 3}


async def test_list_defaults_to_name_sort(client, admin_headers):
    for user_name, name in [("b", "Bravo"), ("a", "Alpha"), ("c", "Charlie")]:
        await create_manufacturer(client, admin_headers, user_name, name)

    body = (await client.get("/api/manufacturer")).json()

    assert [item["name"] for item in body["content"]] == ["Alpha", "Bravo", "Charlie"]
    assert body["page"]["size"] == 10


@pytest.mark.parametrize(
    "params",
    [{"page": -1}, {"size": 0}, {"size": 101}, {"page": "abc"}, {"page": 10**19, "size": 5}],
)
async def test_list_rejects_bad_paging(client, params):
    r = await client.get("/api/manufacturer", params=params)
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "BAD_REQUEST"


async def test_list_page_far_past_the_end(client, admin_headers):
    await create_manufacturer(client, admin_headers, "solo", "Solo")

    r = await client.get("/api/manufacturer", params={"page": 50, "size": 5})
    assert r.status_code == 200
    assert r.json()["content"] == []
    assert r.json()["page"]["totalElements"] == 1

    r = await client.get("/api/manufacturer", params={"page": 10**19, "size": 5})
    assert r.status_code == 400
    assert r.json()["error"]["description"] == "Page index is too large"


async def test_duplicate_user_name_race_is_a_conflict(client, admin_headers, monkeypatch):
    await create_manufacturer(client, admin_headers, "brew1", "First")

    # Both requests pass the name check before either insert lands.
    async def name_is_free(self, name, exclude_id=None):
        return False

    monkeypatch.setattr(UserRepository, "name_exists", name_is_free)

    r = await client.post(
        "/api/manufacturer",
        json={"userName": "brew1", "password": "pw", "name": "Second"},
        headers=admin_headers,
    )

    assert r.status_code == 409
    error = r.json()["error"]
    assert error["code"] == "CONFLICT"
    assert "UNIQUE" not in r.text
    assert "users.name" not in r.text

    listing = (await client.get("/api/manufacturer")).json()
    assert [item["name"] for item in listing["content"]] == ["First"]


# ═══════════════════════════════════════════════════════════════════════════════
# BEERS
# ═══════════════════════════════════════════════════════════════════════════════


async def test_beer_lifecycle(client, admin_headers):
    maker = await create_manufacturer(client, admin_headers, "maker", "Maker")
    headers = await login(client, "maker", "pw")

    r = await client.post(
        f"/api/beer/{maker['id']}",
        json={"name": "Hop Storm", "abv": 6.5, "style": "IPA"},
        headers=headers,
    )
    assert r.status_code == 201
    beer_id = r.json()["id"]

    r = await client.get(f"/api/beer/{beer_id}")
    assert r.json() == {
        "id": beer_id,
        "name": "Hop Storm",
        "abv": 6.5,
        "style": "IPA",
        "description": None,
        "manufacturerId": maker["id"],
    }

    r = await client.put(f"/api/beer/{beer_id}", json={"description": "Resinous"}, headers=headers)
    assert r.status_code == 200
    assert (await client.get(f"/api/beer/{beer_id}")).json()["description"] == "Resinous"

    r = await client.delete(f"/api/manufacturer/{maker['id']}", headers=headers)
    assert r.status_code == 400
    assert "associated beers" in r.json()["error"]["description"]

    r = await client.delete(f"/api/beer/{beer_id}", headers=headers)
    assert r.status_code == 204
    assert (await client.get(f"/api/beer/{beer_id}")).status_code == 404


async def test_beer_list_filters(client, admin_headers):
    maker = await create_manufacturer(client, admin_headers, "maker", "Maker")
    for name, abv in [("Light", 3.5), ("Pale", 5.0), ("Strong", 9.0)]:
        r = await client.post(f"/api/beer/{maker['id']}", json={"name": name, "abv": abv}, headers=admin_headers)
        assert r.status_code == 201

    r = await client.get(
        "/api/beer",
        params={"abvMin": 4, "manufacturerId": maker["id"], "sort": "abv,desc"},
    )

    body = r.json()
    assert [beer["name"] for beer in body["content"]] == ["Strong", "Pale"]
    assert body["page"]["totalElements"] == 2


async def test_beer_create_validation_error(client, admin_headers):
    maker = await create_manufacturer(client, admin_headers, "maker", "Maker")

    r = await client.post(f"/api/beer/{maker['id']}", json={"abv": "strong"}, headers=admin_headers)

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "BAD_REQUEST"
