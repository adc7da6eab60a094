"""
Authenticate requests from a canvas app embedded in the host platform.

When the host platform renders a canvas app, it POSTs a ``signed_request``
form field to the app. :class:`Authenticator` checks the signature with the
consumer secret shared between the platform and the app, decodes the payload,
confirms that the embedded access token is still live by loading the user's
profile from the identity service, and finally asks a verification function
provided by the application whether the user is allowed in.

The verification function is called as ``verify(access_token, profile)`` and
should return one of :class:`.domain.Authorized`, :class:`.domain.Denied` or
:class:`.domain.VerificationFailed`. For example:

.. code-block:: python

   from canvas_auth import domain
   from canvas_auth.authenticate import Authenticator, CanvasConfig


   def verify(access_token: str, profile: dict) -> domain.VerificationResult:
       user = users.get(profile['user_id'])
       if user is None:
           return domain.Denied('Unknown user')
       return domain.Authorized(user)


   authenticator = Authenticator(CanvasConfig('consumersecret', verify))
   outcome = authenticator.authenticate(request.method, request.form)

Every failure is reported as a :class:`.domain.Rejected` outcome; requests
without a ``signed_request`` are :class:`.domain.NotApplicable`.
"""

import logging
from typing import Any, Callable, Mapping, NamedTuple, Optional, Tuple

from . import domain, envelope, signature
from .exceptions import CanvasAuthError, ConfigurationError, NotAuthorized, \
    ProfileUnavailable, SignatureMismatch, InvalidFormat, VerificationError, \
    MalformedEnvelope
from .services import profile as profile_service

logger = logging.getLogger(__name__)

FIELD_NAME = 'signed_request'
NOT_AUTHORIZED = 'Not an authorized user'

VerifyFunction = Callable[[str, domain.Profile], Any]


class CanvasConfig(NamedTuple):
    """Configuration for an :class:`Authenticator`."""

    consumer_secret: str
    """Secret shared between the host platform and the canvas app."""

    verify: VerifyFunction
    """Decides whether the user with a given profile is allowed in."""

    identity_host: str = profile_service.DEFAULT_IDENTITY_HOST
    """Host of the identity service that issued the access token."""

    timeout: float = profile_service.DEFAULT_TIMEOUT
    """Seconds to wait for the identity service."""


class Authenticator(object):
    """Authenticates canvas signed requests."""

    def __init__(self, config: CanvasConfig,
                 loader: Optional[profile_service.ProfileServiceSession] = None
                 ) -> None:
        """
        Set up the authenticator.

        Parameters
        ----------
        config : :class:`CanvasConfig`
        loader : :class:`.ProfileServiceSession`
            Used to load user profiles. If not provided, a session with
            ``config.identity_host`` is created.

        Raises
        ------
        :class:`ConfigurationError`
            If the consumer secret or the verify function are missing.

        """
        if not config.consumer_secret:
            raise ConfigurationError('Consumer secret required')
        if not callable(config.verify):
            raise ConfigurationError('Canvas authentication requires a verify'
                                     ' function')
        self.config = config
        if loader is None:
            loader = profile_service.ProfileServiceSession(
                config.identity_host, config.timeout
            )
        self.loader = loader

    def authenticate(self, method: str,
                     form: Optional[Mapping[str, Any]]) -> domain.AuthOutcome:
        """
        Authenticate a request.

        Parameters
        ----------
        method : str
            HTTP method of the request.
        form : dict
            Form data of the request.

        Returns
        -------
        :class:`.domain.Authenticated`
            If the request is signed, and the user is authorized.
        :class:`.domain.NotApplicable`
            If this is not a POST, or there is no signed request.
        :class:`.domain.Rejected`
            If the request is signed, but fails authentication for any
            reason.

        """
        signed_request = form.get(FIELD_NAME) if form else None
        if method != 'POST' or not signed_request:
            logger.debug('Not a canvas signed request')
            return domain.NotApplicable()

        try:
            user, context = self._authenticate(signed_request)
        except CanvasAuthError as e:
            logger.warning('Canvas request rejected: %s: %s', e.reason, e)
            return domain.Rejected(e.reason, str(e))
        except Exception as e:
            logger.error('Unhandled exception reading signed request: %s', e)
            return domain.Rejected(MalformedEnvelope.reason,
                                   'Malformed signed request')
        logger.debug('Canvas request authenticated')
        return domain.Authenticated(user, context)

    def _authenticate(self, signed_request: Any) -> Tuple[Any, dict]:
        """Verify the signed request, then the user."""
        if not isinstance(signed_request, str):
            raise InvalidFormat('Malformed signed request')
        parts = envelope.split(signed_request)
        if not signature.verify(parts.encoded_payload, parts.signature,
                                self.config.consumer_secret):
            raise SignatureMismatch('Invalid signature')

        payload = envelope.decode(parts.encoded_payload)
        profile = self._load_profile(payload)
        user = self._verify_user(payload, profile)
        return user, dict(payload.context.environment or {})

    def _load_profile(self, payload: domain.CanvasPayload) -> domain.Profile:
        """Load the user profile, confirming the access token is live."""
        try:
            return self.loader.load(
                payload.context.organization.organization_id,
                payload.context.user.user_id,
                payload.access_token
            )
        except ProfileUnavailable:
            raise
        except Exception as e:
            logger.error('Unhandled exception loading profile: %s', e)
            raise ProfileUnavailable('Could not load profile') from e

    def _verify_user(self, payload: domain.CanvasPayload,
                     profile: domain.Profile) -> Any:
        """Call the verify function, and return the authorized user."""
        try:
            result = self.config.verify(payload.access_token, profile)
        except Exception as e:
            logger.error('Verify function raised: %s', e)
            raise VerificationError(str(e) or type(e).__name__) from e

        if isinstance(result, domain.VerificationFailed):
            raise VerificationError(str(result.error)
                                    or type(result.error).__name__)
        if isinstance(result, domain.Denied):
            raise NotAuthorized(result.reason or NOT_AUTHORIZED)
        if isinstance(result, domain.Authorized):
            result = result.user
        # A bare user object also counts; anything falsy is a denial.
        if not result:
            raise NotAuthorized(NOT_AUTHORIZED)
        return result


def authenticate(method: str, form: Optional[Mapping[str, Any]],
                 secret: str, verify: VerifyFunction) -> domain.AuthOutcome:
    """Authenticate a single request; see :meth:`Authenticator.authenticate`."""
    return Authenticator(CanvasConfig(secret, verify)).authenticate(method,
                                                                    form)


def organization_verifier(organization_id: str) -> VerifyFunction:
    """
    Generate a verify function that admits users of one organization.

    The profile itself is used as the authenticated user.

    Raises
    ------
    :class:`ConfigurationError`
        If ``organization_id`` is empty.

    """
    if not organization_id:
        raise ConfigurationError('Organization ID required')

    def verify(access_token: str,
               profile: domain.Profile) -> domain.VerificationResult:
        if profile.get('organization_id') == organization_id:
            return domain.Authorized(profile)
        logger.debug('Profile belongs to another organization')
        return domain.Denied(NOT_AUTHORIZED)
    return verify
