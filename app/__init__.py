import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from app.config import Config
from app.db import db
from app.exceptions import ClientError
from app.extensions.extensions import jwt, ma
from app.logging_config import init_logging
from app.models import (  # noqa: F401  registers tables for create_all
    authentication_model,
    comment_model,
    reply_model,
    thread_model,
    user_model,
)
from app.routes.auth_routes import auth_bp
from app.routes.comment_routes import comment_bp
from app.routes.reply_routes import reply_bp
from app.routes.thread_routes import thread_bp
from app.routes.user_routes import user_bp


logger = logging.getLogger(__name__)


def _register_error_handlers(app):
    @app.errorhandler(ClientError)
    def handle_client_error(error):
        return jsonify({"status": "fail", "message": error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"status": "fail", "message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception("Unhandled error while serving request")
        db.session.rollback()
        return jsonify({"status": "error", "message": "internal server error"}), 500


def _register_jwt_handlers():
    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return jsonify({"status": "fail", "message": reason}), 401

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        return jsonify({"status": "fail", "message": reason}), 401

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return jsonify({"status": "fail", "message": "token has expired"}), 401


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    init_logging("forum-api", app.config["LOG_LEVEL"])

    db.init_app(app)
    jwt.init_app(app)
    _register_jwt_handlers()
    ma.init_app(app)

    app.register_blueprint(user_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(thread_bp)
    app.register_blueprint(comment_bp)
    app.register_blueprint(reply_bp)

    _register_error_handlers(app)

    with app.app_context():
        db.create_all()

    return app
