"""
Client for the external prediction service.

The service exposes one endpoint per mode, ``/predict/hand/`` and
``/predict/body/``. Each takes a multipart upload named ``file`` and answers
with JSON carrying ``hand_gesture`` or ``body_pose``.
"""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

MODES = ("hand", "body")
LABEL_KEYS = ("hand_gesture", "body_pose")


class PredictionError(RuntimeError):
    """The prediction service could not be reached or gave a bad answer."""


def check_mode(mode: str) -> str:
    if mode not in MODES:
        raise ValueError(f"Unknown mode {mode!r}, expected one of {', '.join(MODES)}")
    return mode


def endpoint_for(base_url: str, mode: str) -> str:
    return f"{base_url.rstrip('/')}/predict/{check_mode(mode)}/"


def extract_label(data) -> Optional[str]:
    """
    Pick the label out of a prediction response.

    Keys are applied in order, so ``body_pose`` wins when both are set.
    """
    if not isinstance(data, dict):
        return None
    label = None
    for key in LABEL_KEYS:
        value = data.get(key)
        if value:
            label = str(value)
    return label


class PredictionClient:
    def __init__(self, base_url: str, timeout: float = 5.0, session=None):
        self.base_url = base_url
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def predict(self, mode: str, jpeg_bytes: bytes) -> Optional[str]:
        url = endpoint_for(self.base_url, mode)
        files = {"file": ("frame.jpg", jpeg_bytes, "image/jpeg")}
        try:
            rep = self.session.post(url, files=files, timeout=self.timeout)
            rep.raise_for_status()
            data = rep.json()
        except requests.RequestException as e:
            raise PredictionError(f"Prediction request to {url} failed: {e}") from e
        except ValueError as e:
            raise PredictionError(f"Prediction service at {url} returned invalid JSON") from e

        label = extract_label(data)
        logger.debug("%s prediction from %s: %s", mode, url, label)
        return label

    def close(self):
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
