"""Tests for CORS preflight and unmatched routes."""

from urllib.parse import parse_qs, urlsplit

import pytest


@pytest.mark.parametrize("path", ["/", "/authorize", "/token", "/api/v1/courses", "/nowhere"])
def test_options_preflight_short_circuits(client, path):
    response = client.options(path)

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type"


@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", "/nowhere"),
        ("POST", "/"),
        ("GET", "/api/v2/courses"),
        ("GET", "/docs"),
        ("GET", "/openapi.json"),
        ("GET", "/authorize/"),
        ("POST", "/token/"),
        ("POST", "/callback/"),
        ("GET", "/api/v1"),
    ],
)
def test_unmatched_routes_are_not_found(client, method, path):
    response = client.request(method, path)

    assert response.status_code == 404
    assert response.text == "Not found"
    assert response.headers["content-type"].startswith("text/plain")


def test_full_flow_round_trips_credential(client):
    """authorize -> callback -> token hands back exactly what the user typed."""
    page = client.get("/authorize", params={"redirect_uri": "https://chat.example/cb", "state": "st8"})
    assert page.status_code == 200

    redirect = client.post(
        "/callback",
        data={"token": "7~pasted token", "redirect_uri": "https://chat.example/cb", "state": "st8"},
    )
    location = redirect.headers["location"]
    assert location.startswith("https://chat.example/cb?code=")

    query = parse_qs(urlsplit(location).query)
    assert query["state"] == ["st8"]

    exchanged = client.post("/token", data={"code": query["code"][0], "grant_type": "authorization_code"})
    assert exchanged.json()["access_token"] == "7~pasted token"
