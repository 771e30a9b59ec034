"""
Tests for the HttpRequest descriptor.
"""
import dataclasses

import httpx
import pytest
import respx

from fetch_request import AuthType, HttpMethod, HttpRequest, RequestBuilder


def test_descriptor_is_frozen():
    request = RequestBuilder.create_get("https://example.com").build()
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.url = "https://other.example.com"


def test_with_priority_returns_copy():
    request = RequestBuilder.create_get("https://example.com").build()
    urgent = request.with_priority(5)
    assert urgent.priority == 5
    assert urgent.id == request.id
    assert request.priority == 0


def test_headers_snapshot_is_independent():
    headers = {"X": "1"}
    request = HttpRequest(id="r1", method=HttpMethod.GET, url="/", headers=headers)
    headers["X"] = "2"
    assert request.headers["X"] == "1"


def test_to_request_options():
    request = RequestBuilder.create_put("https://example.com/a").with_body("x").build()
    assert request.to_request_options() == {
        "method": "PUT",
        "url": "https://example.com/a",
        "headers": {"Content-Type": "text/plain"},
        "content": b"x",
    }


def test_to_dict():
    request = RequestBuilder.create_get("https://example.com").with_bearer_auth().build()
    data = request.to_dict()
    assert data["auth_type"] == "bearer"
    assert data["body_length"] is None
    assert request.content_type is None
    assert request.has_body is False
    assert request.auth_type == AuthType.BEARER


def test_to_httpx_is_sendable():
    request = (
        RequestBuilder.create_post("https://example.com/items/{id}")
        .with_path_param("id", "7")
        .with_query_param("verbose", "true")
        .with_bearer_auth("tok")
        .with_json_body({"n": 1})
        .build()
    )

    with respx.mock(base_url="https://example.com") as mock:
        route = mock.post("/items/7", params={"verbose": "true"}).respond(201, json={"id": 7})

        with httpx.Client() as client:
            response = client.send(request.to_httpx())

        assert response.status_code == 201
        sent = route.calls.last.request
        assert sent.headers["Authorization"] == "Bearer tok"
        assert sent.headers["Content-Type"] == "application/json"
        assert sent.read() == b'{"n":1}'


def test_descriptor_hashes_on_id():
    request = RequestBuilder.create_get("https://example.com").with_header("X", "1").build()
    assert hash(request) == hash(request.id)
    assert request in {request}
    assert hash(request.with_priority(3)) == hash(request)
