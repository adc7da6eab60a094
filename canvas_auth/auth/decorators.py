"""
Protection of Flask routes that require a canvas-authenticated user.

Used together with :class:`canvas_auth.auth.CanvasAuth`, which has already
rejected requests with a bad signed request by the time the route is called.
What remains is a request that carried no signed request at all:

.. code-block:: python

   from canvas_auth.auth.decorators import authenticated


   @blueprint.route('/', methods=['POST'])
   @authenticated
   def canvas():
       return jsonify(user=request.auth, **request.canvas_context)

"""

import logging
from functools import wraps
from typing import Any, Callable

from flask import request
from werkzeug.exceptions import Forbidden

logger = logging.getLogger(__name__)


def authenticated(func: Callable) -> Callable:
    """Require that the request was authenticated before calling ``func``."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not getattr(request, 'auth', None):
            logger.debug('No canvas user; aborting')
            raise Forbidden('Forbidden')
        return func(*args, **kwargs)
    return wrapper
