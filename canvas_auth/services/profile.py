"""
Integration with the identity service, to load the canvas user's profile.

Everything about the user is already in the signed request, but a captured
signed request stays valid forever. Loading the profile with the access token
from the request shows that the token is still live, and that the identity
service still vouches for the user. This is the only replay defense.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import requests
from flask import Flask

from ..domain import Profile
from ..exceptions import ProfileUnavailable

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY_HOST = 'login.salesforce.com'
DEFAULT_TIMEOUT = 10


class ProfileServiceSession(object):
    """An HTTP session with the identity service."""

    def __init__(self, identity_host: str = DEFAULT_IDENTITY_HOST,
                 timeout: float = DEFAULT_TIMEOUT) -> None:
        """Create a new HTTP session."""
        self.identity_host = identity_host
        self.timeout = timeout
        self._session = requests.Session()
        # Retries are up to the caller; a failed lookup rejects the request.
        self._adapter = requests.adapters.HTTPAdapter(max_retries=0)
        self._session.mount('https://', self._adapter)
        logger.debug('New ProfileServiceSession for %s', identity_host)

    @property
    def base_url(self) -> str:
        """Root URL of the identity service."""
        return f'https://{self.identity_host}'

    def url_for(self, organization_id: str, user_id: str) -> str:
        """Get the identity URL for a user."""
        return f'{self.base_url}/id/{organization_id}/{user_id}'

    def status(self) -> bool:
        """Check the availability of the identity service."""
        try:
            response = self._session.head(self.base_url, timeout=self.timeout)
        except requests.exceptions.RequestException:
            return False
        return bool(response.ok)

    def load(self, organization_id: str, user_id: str,
             access_token: str) -> Profile:
        """
        Load the profile of a user, on behalf of that user.

        Parameters
        ----------
        organization_id : str
            Organization to which the user belongs.
        user_id : str
            Unique identifier of the user within the platform.
        access_token : str
            The token issued to the canvas app; must still be valid.

        Returns
        -------
        dict
            Identity attributes, including ``user_id`` and
            ``organization_id``.

        Raises
        ------
        :class:`ProfileUnavailable`
            If the request fails, the identity service does not respond with
            200 (e.g. because the token was revoked), or the response is not
            a JSON object.

        """
        url = self.url_for(organization_id, user_id)
        params = {'format': 'json', 'oauth_token': access_token}
        logger.debug('Load profile from %s', url)
        try:
            response = self._session.get(url, params=params,
                                         timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error('Identity service request failed: %s', type(e))
            raise ProfileUnavailable('Identity service unavailable') from e
        if response.status_code != requests.codes.ok:
            logger.warning('Identity service responded with status %i',
                           response.status_code)
            raise ProfileUnavailable('Could not load profile: %i'
                                     % response.status_code)
        try:
            data: Dict[str, Any] = response.json()
        except ValueError as e:
            logger.error('Identity response could not be decoded')
            raise ProfileUnavailable('Could not read profile') from e
        if not isinstance(data, dict):
            raise ProfileUnavailable('Could not read profile')
        logger.debug('Loaded profile for user %s', data.get('user_id'))
        return data


def init_app(app: Optional[Flask] = None) -> None:
    """
    Set required configuration defaults for the application.

    Parameters
    ----------
    app : :class:`flask.Flask`

    """
    if app is not None:
        app.config.setdefault('CANVAS_IDENTITY_HOST', DEFAULT_IDENTITY_HOST)
        app.config.setdefault('CANVAS_PROFILE_TIMEOUT', DEFAULT_TIMEOUT)


def get_session(config: Mapping[str, Any]) -> ProfileServiceSession:
    """
    Create a new identity service session.

    Parameters
    ----------
    config : dict
        Application configuration, e.g. ``app.config``.

    Returns
    -------
    :class:`.ProfileServiceSession`

    """
    identity_host = config.get('CANVAS_IDENTITY_HOST', DEFAULT_IDENTITY_HOST)
    timeout = float(config.get('CANVAS_PROFILE_TIMEOUT', DEFAULT_TIMEOUT))
    return ProfileServiceSession(identity_host, timeout)
