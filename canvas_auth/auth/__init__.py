"""Provides tools for authenticating canvas requests in Flask applications."""

import logging
from typing import Any, Optional

from flask import Flask, request
from werkzeug.exceptions import Forbidden

from . import decorators
from .. import domain
from ..authenticate import Authenticator, CanvasConfig, VerifyFunction
from ..exceptions import ConfigurationError
from ..services import profile

logger = logging.getLogger(__name__)


class CanvasAuth(object):
    """
    Attaches canvas authentication information to the request.

    Intended for use in a Flask application factory, for example:

    .. code-block:: python

       from flask import Flask
       from canvas_auth.auth import CanvasAuth
       from someapp import routes, users


       def create_web_app() -> Flask:
          app = Flask('someapp')
          app.config.from_pyfile('config.py')
          CanvasAuth(app, verify=users.verify)
          app.register_blueprint(routes.blueprint)
          return app

    Before each request, a ``signed_request`` in the form data is verified.
    If the request is authenticated, the user returned by the verify function
    is available as ``flask.request.auth``, and the form data merged with the
    canvas environment (e.g. ``parameters`` and ``record``) as
    ``flask.request.canvas_context``. If verification fails, the request is
    aborted with 403 Forbidden. Requests without a signed request pass
    through with ``request.auth`` set to ``None``.
    """

    def __init__(self, app: Optional[Flask] = None,
                 verify: Optional[VerifyFunction] = None) -> None:
        """
        Initialize ``app`` with the canvas authenticator.

        Parameters
        ----------
        app : :class:`Flask`
        verify : function
            Called with ``(access_token, profile)``; see
            :mod:`canvas_auth.authenticate`.

        """
        self.verify = verify
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """
        Attach :meth:`.load_canvas_session` to the Flask app.

        Parameters
        ----------
        app : :class:`Flask`

        Raises
        ------
        :class:`ConfigurationError`
            If ``CANVAS_CONSUMER_SECRET`` is not set, or there is no verify
            function.

        """
        self.app = app
        profile.init_app(app)
        secret = app.config.get('CANVAS_CONSUMER_SECRET')
        if not secret:
            raise ConfigurationError('CANVAS_CONSUMER_SECRET is not set')
        config = CanvasConfig(
            consumer_secret=secret,
            verify=self.verify,
            identity_host=app.config['CANVAS_IDENTITY_HOST'],
            timeout=float(app.config['CANVAS_PROFILE_TIMEOUT'])
        )
        self.authenticator = Authenticator(config,
                                           profile.get_session(app.config))
        app.extensions['canvas_auth'] = self
        app.before_request(self.load_canvas_session)

    def load_canvas_session(self) -> None:
        """
        Authenticate the current request, and attach the result to it.

        Raises
        ------
        :class:`Forbidden`
            If the request carries a signed request that does not pass.

        """
        request.auth = None
        request.canvas_context = {}
        outcome = self.authenticator.authenticate(request.method, request.form)
        if isinstance(outcome, domain.Rejected):
            raise Forbidden(outcome.message)
        if isinstance(outcome, domain.Authenticated):
            context: dict = request.form.to_dict()
            context.update(outcome.context)
            request.auth = outcome.user
            request.canvas_context = context


def current_user() -> Any:
    """Get the canvas-authenticated user of the current request, if any."""
    return getattr(request, 'auth', None)
