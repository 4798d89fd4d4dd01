from __future__ import annotations

from fastapi.testclient import TestClient

from unitgraph import __version__
from unitgraph.api.app import app, create_app


def test_health():
    client = TestClient(app)

    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "version": __version__}
    assert resp.headers.get("x-request-id")


def test_graphql_post():
    client = TestClient(app)

    resp = client.post(
        "/graphql",
        json={
            "query": "query Sizes($unit: WeightUnit) { self { name weight(unit: $unit) } }",
            "variables": {"unit": "POUND"},
            "operationName": "Sizes",
        },
    )

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"data": {"self": {"name": "leo", "weight": 33.75}}}


def test_graphql_get():
    client = TestClient(app)

    resp = client.get("/graphql", params={"query": "{ usersHeight }"})

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"data": {"usersHeight": [175.0, 168.0]}}


def test_create_app_lifespan():
    with TestClient(create_app()) as client:
        assert client.get("/health").status_code == 200
