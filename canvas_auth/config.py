"""Flask configuration for the canvas demo application."""

import os

CANVAS_CONSUMER_SECRET = os.environ.get('CANVAS_CONSUMER_SECRET')
"""Consumer secret of the connected app; signs every canvas request."""

CANVAS_IDENTITY_HOST = os.environ.get('CANVAS_IDENTITY_HOST',
                                      'login.salesforce.com')
CANVAS_PROFILE_TIMEOUT = float(os.environ.get('CANVAS_PROFILE_TIMEOUT', '10'))

CANVAS_ORGANIZATION_ID = os.environ.get('CANVAS_ORGANIZATION_ID')
"""Only users of this organization are admitted."""

LOGLEVEL = os.environ.get('LOGLEVEL', 'INFO')
