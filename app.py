# app.py
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config.config import Config
from db.database import init_db, get_store
from utils.media_service import init_media
from routes.user import bp as user_bp


def create_app(overrides: Optional[dict] = None):
    app = Flask(__name__)

    # Load config values from Config
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    # CORS
    CORS(app, origins=app.config["ALLOWED_ORIGINS"])

    # Data file must exist before any request is served
    init_db(app)

    # Cloudinary credentials
    init_media(app)

    # register blueprints
    app.register_blueprint(user_bp)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        messages = {
            404: "Not found",
            405: "Method not allowed",
            413: "File too large",
        }
        message = messages.get(e.code, e.name)
        return jsonify({"success": False, "message": message}), e.code

    @app.route("/", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/health/store", methods=["GET"])
    def health_store():
        """Record store health check.
        Returns 200 with the record count, otherwise 503.
        """
        try:
            return jsonify({"store": "ok", "records": get_store().check()})
        except Exception as e:
            app.logger.exception("Store health check failed: %s", e)
            return jsonify({"store": "error"}), 503

    return app


if __name__ == "__main__":
    app = create_app()
    app.logger.info("Server running on port %s", Config.PORT)
    app.run(host=Config.APP_HOST, port=Config.PORT, debug=Config.DEBUG)
