"""Web Server Gateway Interface entry-point."""

from canvas_auth.factory import create_web_app
import os

__flask_app__ = None


def application(environ, start_response):
    """WSGI application factory."""
    global __flask_app__
    for key, value in environ.items():
        if key.startswith('CANVAS_') or key == 'LOGLEVEL':
            os.environ[key] = str(value)
    if __flask_app__ is None:
        __flask_app__ = create_web_app()
    return __flask_app__(environ, start_response)
