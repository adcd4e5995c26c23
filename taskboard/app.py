import logging
import os

from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS
from werkzeug.exceptions import HTTPException


def create_app(test_config=None, db=None):
    app = Flask(__name__)
    app.config.from_object("taskboard.config.Config")
    if test_config:
        app.config.update(test_config)
    app.json.sort_keys = False
    app.logger.setLevel(getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO))

    frontend_dir = app.config["FRONTEND_DIR"]

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    from taskboard.utils.db import init_app as init_db

    init_db(app, db=db)

    from taskboard.routes.task_routes import tasks_bp

    app.register_blueprint(tasks_bp, url_prefix="/api/tasks")

    @app.get("/api/health")
    def health():
        return jsonify(status="ok", service="Taskboard API"), 200

    # Single-page app: real files are served as-is, every other GET gets the entry page
    @app.get("/", defaults={"path": ""})
    @app.get("/<path:path>")
    def serve_frontend(path):
        if path and os.path.isfile(os.path.join(frontend_dir, path)):
            return send_from_directory(frontend_dir, path)
        return send_from_directory(frontend_dir, "index.html")

    @app.errorhandler(HTTPException)
    def http_error(exc):
        return jsonify(error=exc.name), exc.code

    @app.errorhandler(Exception)
    def server_error(exc):
        app.logger.exception("Unhandled error: %s", exc)
        return jsonify(error="Something went wrong!"), 500

    return app


# Instantiate app for 'flask --app taskboard.app run' and WSGI servers
app = create_app()


if __name__ == "__main__":
    # Direct run support: python -m taskboard.app
    app.run(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "5000")),
        debug=app.config["DEBUG"],
    )
