import json

import pytest

from ._helpers import FakeFaceApiClient, sqs_event


@pytest.fixture
def fake_client(monkeypatch):
    import handler

    client = FakeFaceApiClient()
    monkeypatch.setattr(handler, "FaceApiClient", client)
    return client


@pytest.fixture
def three_messages():
    return sqs_event(*(json.dumps({"image_id": i}) for i in range(1, 4)))
