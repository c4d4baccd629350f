"""
Site configuration
Centralized settings for the Nrityalaya website. Every value can be
overridden with an environment variable of the same name.
"""

import os


def _env(name, default, cast=str):
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    if cast is bool:
        return value.strip().lower() in ("1", "true", "yes", "on")
    return cast(value)


# Prediction service (hand gesture / body pose models)
PREDICTION_SERVICE_URL = _env("PREDICTION_SERVICE_URL", "http://localhost:8000")
PREDICTION_TIMEOUT = _env("PREDICTION_TIMEOUT", 5.0, float)  # seconds

# Capture widget
CAPTURE_INTERVAL_MS = _env("CAPTURE_INTERVAL_MS", 1000, int)
FRAME_WIDTH = _env("FRAME_WIDTH", 640, int)
FRAME_HEIGHT = _env("FRAME_HEIGHT", 480, int)
JPEG_QUALITY = _env("JPEG_QUALITY", 90, int)

# Web app settings
MAX_CONTENT_LENGTH = _env("MAX_CONTENT_LENGTH", 16 * 1024 * 1024, int)  # 16MB
SECRET_KEY = _env("SECRET_KEY", "nrityalaya-dev")
PORT = _env("PORT", 4000, int)
DEBUG = _env("DEBUG", False, bool)

LOG_LEVEL = _env("LOG_LEVEL", "INFO")


def flask_config():
    return {
        "SECRET_KEY": SECRET_KEY,
        "MAX_CONTENT_LENGTH": MAX_CONTENT_LENGTH,
        "PREDICTION_SERVICE_URL": PREDICTION_SERVICE_URL,
        "PREDICTION_TIMEOUT": PREDICTION_TIMEOUT,
        "CAPTURE_INTERVAL_MS": CAPTURE_INTERVAL_MS,
        "FRAME_WIDTH": FRAME_WIDTH,
        "FRAME_HEIGHT": FRAME_HEIGHT,
        "JPEG_QUALITY": JPEG_QUALITY,
    }
