"""
Pytest configuration and shared fixtures.

Stand-ins for the prediction service and the webcam live here so the
views, the client and the capture loop can be tested without either.
"""

import cv2
import numpy as np
import pytest
import requests

import prediction
from app import create_app


class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload if payload is not None else {}
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value")
        return self.payload


class FakeSession:
    """Records posts and answers with a queue of responses or exceptions."""

    def __init__(self, *responses):
        self.responses = list(responses) or [FakeResponse()]
        self.calls = []
        self.closed = False

    def post(self, url, files=None, timeout=None):
        self.calls.append({"url": url, "files": files, "timeout": timeout})
        result = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(result, Exception):
            raise result
        return result

    def close(self):
        self.closed = True


class FakeCamera:
    def __init__(self, frames=None, opened=True):
        self.frames = list(frames or [])
        self.opened = opened
        self.released = False
        self.reads = 0

    def isOpened(self):
        return self.opened

    def read(self):
        self.reads += 1
        if not self.frames:
            return False, None
        return True, self.frames.pop(0)

    def release(self):
        self.released = True


@pytest.fixture
def app(fake_session):
    """An app whose shared PredictionClient talks to ``fake_session``."""
    app = create_app({"TESTING": True, "PREDICTION_SERVICE_URL": "http://predictor.test"})
    yield app
    app.extensions["prediction_client"].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_frame():
    """A 320x240 BGR frame with a gradient so JPEG encoding is not trivial."""
    frame = np.zeros((240, 320, 3), dtype=np.uint8)
    frame[:, :, 0] = np.linspace(0, 255, 320, dtype=np.uint8)
    frame[:, :, 2] = 128
    return frame


@pytest.fixture
def sample_jpeg(sample_frame):
    _, buffer = cv2.imencode(".jpg", sample_frame)
    return buffer.tobytes()


@pytest.fixture
def fake_session(monkeypatch):
    """Route every PredictionClient built without a session to a FakeSession."""
    session = FakeSession()
    monkeypatch.setattr(prediction.requests, "Session", lambda: session)
    return session
