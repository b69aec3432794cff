import pytest
import requests

from clients import FaceApiClient
from clients import face_api

from ._helpers import make_response


@pytest.fixture
def posted(monkeypatch):
    """Capture requests.post calls and answer with a queued response."""
    calls = []
    state = {"response": make_response(200, b'{"faces": []}')}

    def fake_post(url, **kwargs):
        calls.append((url, kwargs))
        return state["response"]

    monkeypatch.setattr(face_api.requests, "post", fake_post)
    return calls, state


def test_posts_payload_as_json(posted):
    calls, _ = posted
    client = FaceApiClient("https://faceapi.example.com/analyze", timeout=5)

    client.analyze({"image_url": "https://example.com/a.jpg"})

    url, kwargs = calls[0]
    assert url == "https://faceapi.example.com/analyze"
    assert kwargs["json"] == {"image_url": "https://example.com/a.jpg"}
    assert kwargs["timeout"] == 5
    assert kwargs["headers"]["Content-Type"] == "application/json"


def test_returns_decoded_json(posted):
    _, state = posted
    state["response"] = make_response(200, b'{"faces": [{"age": 30}]}')

    data = FaceApiClient("https://faceapi.example.com/analyze").analyze({})

    assert data == {"faces": [{"age": 30}]}


def test_returns_text_for_non_json_response(posted):
    _, state = posted
    state["response"] = make_response(200, b"accepted", content_type="text/plain")

    assert FaceApiClient("https://faceapi.example.com/analyze").analyze({}) == "accepted"


def test_empty_json_response_returns_empty_text(posted):
    _, state = posted
    state["response"] = make_response(204, b"")

    assert FaceApiClient("https://faceapi.example.com/analyze").analyze({}) == ""


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_error_status_raises(posted, status):
    _, state = posted
    state["response"] = make_response(status, b'{"error": "nope"}')

    with pytest.raises(requests.HTTPError):
        FaceApiClient("https://faceapi.example.com/analyze").analyze({})


def test_unparseable_json_body_returns_text(posted):
    _, state = posted
    state["response"] = make_response(200, b"<html>ok</html>")

    assert FaceApiClient("https://faceapi.example.com/analyze").analyze({}) == "<html>ok</html>"
