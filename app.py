# app.py
import logging
import traceback
from datetime import date

from flask import Flask, render_template, request, jsonify
from werkzeug.exceptions import HTTPException

import config
from views import pages_bp, gesture_bp
from views.gesture import init_client

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

brand = "Nrityalaya"
tagline = "Preserving tradition, inspiring innovation"

nav_links = [
    {"url": "pages.home", "name": "Home"},
    {"url": "pages.about", "name": "About"},
    {"url": "pages.contact", "name": "Contact"},
]

footer_links = [
    {"url": "pages.about", "name": "About"},
    {"url": "pages.gallery", "name": "Gallery"},
    {"url": "pages.contact", "name": "Contact"},
]

DEFAULT_DETAILS = "An unexpected error occurred."


def wants_json():
    return request.path.startswith("/gesture/predict/")


def render_error(status, message, details, stack=None):
    if wants_json():
        return jsonify({"error": details}), status
    return render_template(
        "error.html", message=message, details=details, stack=stack
    ), status


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.update(config.flask_config())
    if overrides:
        app.config.update(overrides)

    # --- Register Blueprints ---
    app.register_blueprint(pages_bp)
    app.register_blueprint(gesture_bp)

    init_client(app)

    @app.context_processor
    def site_globals():
        return {
            "brand": brand,
            "tagline": tagline,
            "nav_links": nav_links,
            "footer_links": footer_links,
            "current_year": date.today().year,
        }

    @app.errorhandler(HTTPException)
    def http_error(e):
        if e.code == 404:
            return render_error(404, "404", "The requested page could not be found.")
        return render_error(e.code, "Error", e.description or DEFAULT_DETAILS)

    @app.errorhandler(Exception)
    def unhandled_error(e):
        app.logger.exception("Unhandled error on %s", request.path)
        if app.debug:
            return render_error(500, "Oops!", str(e), traceback.format_exc())
        return render_error(500, "Oops!", DEFAULT_DETAILS)

    return app


app = create_app()


if __name__ == "__main__":
    app.run(port=config.PORT, debug=config.DEBUG)
