"""
capture.py
Runs the camera widget loop from the command line: grab a webcam frame on a
timer, send it to the prediction service and print the label.

Usage:
    python capture.py --mode body --interval-ms 1000
"""

import argparse
import logging
import sys
import time

import cv2

import config
from frames import FrameError, encode_jpeg, fit_to_canvas
from prediction import MODES, PredictionClient, PredictionError, check_mode

logger = logging.getLogger(__name__)


class CameraError(RuntimeError):
    """The camera could not be opened."""


class CaptureSession:
    def __init__(
        self,
        camera,
        client,
        mode="hand",
        interval=config.CAPTURE_INTERVAL_MS / 1000.0,
        width=config.FRAME_WIDTH,
        height=config.FRAME_HEIGHT,
        quality=config.JPEG_QUALITY,
    ):
        """
        Args:
            camera: a ``cv2.VideoCapture`` or anything with ``read()``,
                ``isOpened()`` and ``release()``; a device index or path is
                opened with ``cv2.VideoCapture`` on ``open()``.
            client: a ``PredictionClient``.
            interval: seconds between ticks.
        """
        self._source = camera
        self.camera = None
        self.client = client
        self.mode = check_mode(mode)
        self.interval = interval
        self.width = width
        self.height = height
        self.quality = quality
        self.prediction = None

    @property
    def is_open(self):
        return self.camera is not None

    def open(self):
        if self.is_open:
            return self
        source = self._source
        camera = cv2.VideoCapture(source) if isinstance(source, (int, str)) else source
        if not camera.isOpened():
            camera.release()
            raise CameraError(f"Could not open camera {source!r}")
        self.camera = camera
        logger.info("Camera started (%s mode).", self.mode)
        return self

    def close(self):
        if self.camera is not None:
            self.camera.release()
            self.camera = None
            logger.info("Camera closed.")

    def set_mode(self, mode):
        self.mode = check_mode(mode)

    def step(self):
        """Capture and send one frame. Returns the new label, if any."""
        if not self.is_open:
            return None

        ok, frame = self.camera.read()
        if not ok or frame is None:
            logger.warning("No frame available from camera.")
            return None

        try:
            jpeg = encode_jpeg(fit_to_canvas(frame, self.width, self.height), self.quality)
            label = self.client.predict(self.mode, jpeg)
        except (FrameError, PredictionError) as e:
            logger.error("Error fetching prediction: %s", e)
            return None

        if label:
            self.prediction = label
        return label

    def run(self, max_frames=None, sleep=time.sleep, on_label=None):
        self.open()
        ticks = 0
        try:
            while max_frames is None or ticks < max_frames:
                label = self.step()
                ticks += 1
                if label and on_label is not None:
                    on_label(label)
                if max_frames is None or ticks < max_frames:
                    sleep(self.interval)
        except KeyboardInterrupt:
            logger.info("Interrupted after %d frames.", ticks)
        finally:
            self.close()
        return ticks

    def __enter__(self):
        return self.open()

    def __exit__(self, *exc):
        self.close()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Send webcam frames to the gesture/pose prediction service."
    )
    parser.add_argument("--mode", choices=MODES, default="hand")
    parser.add_argument("--device", default="0", help="camera index or video path")
    parser.add_argument("--interval-ms", type=int, default=config.CAPTURE_INTERVAL_MS)
    parser.add_argument("--url", default=config.PREDICTION_SERVICE_URL)
    parser.add_argument("--frames", type=int, default=None, help="stop after N frames")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    device = int(args.device) if args.device.isdigit() else args.device
    last = {"label": None}

    def show(label):
        if label != last["label"]:
            print(f"Prediction: {label}")
            last["label"] = label

    with PredictionClient(args.url, timeout=config.PREDICTION_TIMEOUT) as client:
        session = CaptureSession(
            device, client, mode=args.mode, interval=args.interval_ms / 1000.0
        )
        try:
            session.run(max_frames=args.frames, on_label=show)
        except CameraError as e:
            logger.error("%s", e)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
