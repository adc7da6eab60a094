"""Provides an app factory for the canvas demo application."""

from flask import Flask, jsonify, Response
from werkzeug.exceptions import BadRequest, Forbidden, HTTPException, \
    MethodNotAllowed, NotFound

from . import routes
from .app_logging import setup_logger
from .auth import CanvasAuth
from .authenticate import organization_verifier


def jsonify_exception(error: HTTPException) -> Response:
    exc_resp = error.get_response()
    response = jsonify(reason=error.description)
    response.status_code = exc_resp.status_code
    return response


def create_web_app() -> Flask:
    """Initialize an instance of the canvas demo application."""
    app = Flask('canvas_auth')
    app.config.from_pyfile('config.py')
    setup_logger(app.config['LOGLEVEL'])

    verify = organization_verifier(app.config['CANVAS_ORGANIZATION_ID'])
    CanvasAuth(app, verify=verify)

    app.register_blueprint(routes.blueprint)
    app.errorhandler(NotFound)(jsonify_exception)
    app.errorhandler(BadRequest)(jsonify_exception)
    app.errorhandler(MethodNotAllowed)(jsonify_exception)
    app.errorhandler(Forbidden)(jsonify_exception)
    return app
