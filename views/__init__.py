# views/__init__.py
from .pages import pages_bp
from .gesture import gesture_bp

__all__ = [
    "pages_bp",
    "gesture_bp",
]
