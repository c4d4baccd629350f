# frames.py
import cv2
import numpy as np


class FrameError(ValueError):
    """Raised when a frame cannot be decoded or encoded."""


def decode_frame(data: bytes) -> np.ndarray:
    if not data:
        raise FrameError("Empty frame.")
    img = cv2.imdecode(np.frombuffer(data, np.uint8), cv2.IMREAD_COLOR)
    if img is None:
        raise FrameError(
            "Could not decode the frame. Please ensure it is a valid image file."
        )
    return img


def fit_to_canvas(img: np.ndarray, width: int, height: int) -> np.ndarray:
    """Stretch the frame onto a width x height canvas, like drawImage does."""
    h, w = img.shape[:2]
    if (w, h) == (width, height):
        return img
    interpolation = cv2.INTER_AREA if w * h > width * height else cv2.INTER_LINEAR
    return cv2.resize(img, (width, height), interpolation=interpolation)


def encode_jpeg(img: np.ndarray, quality: int = 90) -> bytes:
    ok, buffer = cv2.imencode(".jpg", img, [cv2.IMWRITE_JPEG_QUALITY, int(quality)])
    if not ok:
        raise FrameError("Could not encode the frame as JPEG.")
    return buffer.tobytes()


def prepare_frame(data: bytes, width: int, height: int, quality: int = 90) -> bytes:
    img = decode_frame(data)
    return encode_jpeg(fit_to_canvas(img, width, height), quality)
