"""
Authentication for canvas apps embedded in a host platform.

When the host platform (e.g. Salesforce) renders a canvas app, it POSTs a
``signed_request`` to the app: a JSON payload describing the user, their
organization and an access token, signed with a consumer secret shared by the
platform and the app. This package verifies that signature, decodes the
payload, and confirms that the access token is still live with the identity
service before letting an application-provided verify function decide
whether the user is allowed in.

Quick start
-----------

1. Install this package into your virtual environment.
2. Set ``CANVAS_CONSUMER_SECRET`` in your application config.
3. Install :class:`canvas_auth.auth.CanvasAuth` onto your application, with
   a verify function. The authenticated user is available as
   ``flask.request.auth``, and the canvas environment as
   ``flask.request.canvas_context``.

.. code-block:: python

   # yourapp/factory.py
   from canvas_auth import domain
   from canvas_auth.auth import CanvasAuth


   def verify(access_token: str, profile: dict) -> domain.VerificationResult:
       if profile['organization_id'] == '00D000000000001':
           return domain.Authorized(profile)
       return domain.Denied('Wrong organization')


   def create_web_app() -> Flask:
       app = Flask('foo')
       app.config.from_pyfile('config.py')
       CanvasAuth(app, verify=verify)    # <- Install the extension.
       return app

Applications that do not use Flask can call
:meth:`canvas_auth.authenticate.Authenticator.authenticate` directly.
"""

from .domain import Authenticated, NotApplicable, Rejected, Authorized, \
    Denied, VerificationFailed, CanvasPayload, SignedEnvelope
