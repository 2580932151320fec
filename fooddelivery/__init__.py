import logging

from flask import Flask, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .config import load_config
from .extensions import cors, db
from .services import RestaurantRepository

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def create_app(config=None, repository=None):
    """Build the Flask app.

    ``config`` overrides values read from the environment; ``repository``
    replaces the default ``RestaurantRepository(db.session)``.
    """
    app = Flask(__name__)
    app.config.update(load_config(config))
    app.json.ensure_ascii = False

    db.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGIN"]}})

    app.extensions["restaurant_repository"] = repository or RestaurantRepository(db.session)

    from .routes import restaurant_bp
    from .default_index import default_bp

    # 註冊 Blueprint
    app.register_blueprint(restaurant_bp)
    app.register_blueprint(default_bp)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        if request.path.startswith("/api/"):
            return jsonify({"error": exc.description}), exc.code
        return exc

    if app.config["CREATE_TABLES"]:
        from . import models  # noqa: F401

        with app.app_context():
            try:
                db.create_all()
            except SQLAlchemyError as exc:
                # routes answer 500/503 until the database is reachable
                logger.error("create_all failed: %s", exc)

    return app
