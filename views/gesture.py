# views/gesture.py
from flask import Blueprint, render_template, request, jsonify, current_app, url_for

from frames import FrameError, prepare_frame
from prediction import MODES, PredictionClient, PredictionError

gesture_bp = Blueprint("gesture", __name__, template_folder="../templates")


def init_client(app):
    """Build the app's shared PredictionClient so connections are reused."""
    app.extensions["prediction_client"] = PredictionClient(
        app.config["PREDICTION_SERVICE_URL"],
        timeout=app.config["PREDICTION_TIMEOUT"],
    )


def get_client():
    return current_app.extensions["prediction_client"]


@gesture_bp.route("/gesture", methods=["GET"])
def index():
    """
    Serves the camera page. Frames are captured in the browser and posted
    back to ``predict`` on a timer.
    """
    cfg = current_app.config
    widget = {
        "interval": cfg["CAPTURE_INTERVAL_MS"],
        "width": cfg["FRAME_WIDTH"],
        "height": cfg["FRAME_HEIGHT"],
        "mode": MODES[0],
        "endpoints": {m: url_for("gesture.predict", mode=m) for m in MODES},
    }
    return render_template("gesture.html", widget=widget, modes=MODES)


@gesture_bp.route("/gesture/predict/<mode>", methods=["POST"])
def predict(mode):
    if mode not in MODES:
        return jsonify({"error": f"Unknown mode '{mode}'."}), 404

    frame_file = request.files.get("file")
    if not frame_file:
        return jsonify({"error": "Please upload a frame in the 'file' field."}), 400

    cfg = current_app.config
    try:
        jpeg = prepare_frame(
            frame_file.read(),
            cfg["FRAME_WIDTH"],
            cfg["FRAME_HEIGHT"],
            cfg["JPEG_QUALITY"],
        )
    except FrameError as e:
        return jsonify({"error": str(e)}), 400

    try:
        label = get_client().predict(mode, jpeg)
    except PredictionError as e:
        current_app.logger.warning("Error fetching prediction: %s", e)
        return jsonify({"error": "The prediction service is unavailable."}), 502

    return jsonify({"mode": mode, "prediction": label})
