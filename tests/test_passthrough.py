"""Tests for the /api/v1/ pass-through proxy."""

import httpx
import pytest
from fastapi.testclient import TestClient

from bridge import create_app
from config import BridgeConfig


def test_passthrough_requires_authorization(client, upstream):
    route = upstream.get("/api/v1/courses")

    response = client.get("/api/v1/courses")

    assert response.status_code == 401
    assert response.json() == {"error": "Missing Authorization header"}
    assert response.headers["access-control-allow-origin"] == "*"
    assert not route.called


def test_passthrough_forwards_get_with_query(client, upstream):
    route = upstream.get("/api/v1/courses").mock(
        return_value=httpx.Response(200, json=[{"id": 1, "name": "Biology"}])
    )

    response = client.get(
        "/api/v1/courses?enrollment_state=active&per_page=50",
        headers={"Authorization": "Bearer 7~secret", "X-Extra": "dropped"},
    )

    assert response.status_code == 200
    assert response.json() == [{"id": 1, "name": "Biology"}]
    assert response.headers["content-type"] == "application/json"
    assert response.headers["access-control-allow-origin"] == "*"

    sent = route.calls.last.request
    assert sent.url.path == "/api/v1/courses"
    assert sent.url.query == b"enrollment_state=active&per_page=50"
    assert sent.headers["authorization"] == "Bearer 7~secret"
    assert sent.headers["content-type"] == "application/json"
    assert "x-extra" not in sent.headers


def test_passthrough_forwards_body_and_method(client, upstream):
    route = upstream.put("/api/v1/courses/42/assignments/7").mock(
        return_value=httpx.Response(201, text="created", headers={"Content-Type": "text/plain"})
    )

    response = client.put(
        "/api/v1/courses/42/assignments/7",
        content=b"assignment[name]=Essay",
        headers={
            "Authorization": "Bearer 7~secret",
            "Content-Type": "application/x-www-form-urlencoded",
        },
    )

    assert response.status_code == 201
    assert response.text == "created"
    assert response.headers["content-type"].startswith("text/plain")

    sent = route.calls.last.request
    assert sent.method == "PUT"
    assert sent.content == b"assignment[name]=Essay"
    assert sent.headers["content-type"] == "application/x-www-form-urlencoded"


def test_passthrough_relays_upstream_errors(client, upstream):
    upstream.delete("/api/v1/courses/42").mock(
        return_value=httpx.Response(404, json={"errors": [{"message": "not found"}]})
    )

    response = client.delete("/api/v1/courses/42", headers={"Authorization": "Bearer 7~secret"})

    assert response.status_code == 404
    assert response.json() == {"errors": [{"message": "not found"}]}


def test_passthrough_unreachable_upstream(client, upstream):
    upstream.get("/api/v1/users/self").mock(side_effect=httpx.ConnectError("connection refused"))

    response = client.get("/api/v1/users/self", headers={"Authorization": "Bearer 7~secret"})

    assert response.status_code == 502
    assert response.json() == {"error": "Upstream request failed"}


@pytest.fixture
def no_passthrough_client():
    app = create_app(BridgeConfig(passthrough_enabled=False))
    with TestClient(app) as test_client:
        yield test_client


def test_passthrough_disabled_is_not_found(no_passthrough_client):
    response = no_passthrough_client.get("/api/v1/courses", headers={"Authorization": "Bearer x"})

    assert response.status_code == 404
    assert response.text == "Not found"


def test_passthrough_keeps_percent_encoded_path(client, upstream):
    route = upstream.get(path__startswith="/api/v1/courses/").mock(
        return_value=httpx.Response(200, json={"id": 42})
    )

    response = client.get(
        "/api/v1/courses/sis_course_id:A%2FB%3F1",
        headers={"Authorization": "Bearer 7~secret"},
    )

    assert response.status_code == 200
    sent = route.calls.last.request
    assert sent.url.raw_path == b"/api/v1/courses/sis_course_id:A%2FB%3F1"
    assert sent.url.query == b""


def test_passthrough_keeps_encoded_path_with_query(client, upstream):
    route = upstream.get(path__startswith="/api/v1/users/").mock(
        return_value=httpx.Response(200, json=[])
    )

    client.get(
        "/api/v1/users/sis_user_id:a%20b/enrollments?state[]=active",
        headers={"Authorization": "Bearer 7~secret"},
    )

    sent = route.calls.last.request
    assert sent.url.raw_path.split(b"?", 1)[0] == b"/api/v1/users/sis_user_id:a%20b/enrollments"
    assert sent.url.params["state[]"] == "active"
