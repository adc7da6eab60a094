"""Defines canvas request concepts for use in embedded applications."""

from typing import Any, Dict, NamedTuple, Optional, Union

Profile = Dict[str, Any]
"""Identity attributes reported by the identity service, as-is."""


class SignedEnvelope(NamedTuple):
    """The two parts of a ``signed_request`` value."""

    signature: str
    """Base64-encoded HMAC-SHA256 of :attr:`encoded_payload`."""

    encoded_payload: str
    """Base64-encoded JSON payload."""


class Client(NamedTuple):
    """The canvas client: the access token and where it may be used."""

    oauth_token: str
    """Access token issued to the canvas app on behalf of the user."""

    instance_id: Optional[str] = None
    instance_url: Optional[str] = None
    target_origin: Optional[str] = None


class CanvasUser(NamedTuple):
    """The platform user on whose behalf the canvas app is rendered."""

    user_id: str
    user_name: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None


class Organization(NamedTuple):
    """The organization to which :class:`CanvasUser` belongs."""

    organization_id: str
    name: Optional[str] = None


class Context(NamedTuple):
    """Where and for whom the canvas app is embedded."""

    user: CanvasUser
    organization: Organization
    environment: Optional[Dict[str, Any]] = None
    """
    Extra contextual data, e.g. ``parameters`` and ``record``.

    Merged into the request state when authentication succeeds.
    """


class CanvasPayload(NamedTuple):
    """Decoded content of a signed request."""

    client: Client
    context: Context

    @property
    def access_token(self) -> str:
        """The access token carried by the request."""
        return self.client.oauth_token


class Authenticated(NamedTuple):
    """The request carried a valid signed request for an authorized user."""

    user: Any
    context: Dict[str, Any]


class NotApplicable(NamedTuple):
    """The request carries no signed request; defer to other mechanisms."""


class Rejected(NamedTuple):
    """The request carried a signed request that failed authentication."""

    reason: str
    """Name of the failure, e.g. ``SignatureMismatch``."""

    message: str
    """Human-readable explanation, suitable for a 403 response."""


AuthOutcome = Union[Authenticated, NotApplicable, Rejected]


class Authorized(NamedTuple):
    """The verification function accepts the user."""

    user: Any


class Denied(NamedTuple):
    """The verification function refuses the user."""

    reason: Optional[str] = None


class VerificationFailed(NamedTuple):
    """The verification function could not reach a decision."""

    error: Exception


VerificationResult = Union[Authorized, Denied, VerificationFailed]


def to_dict(obj: tuple) -> dict:
    """
    Generate a dict representation of a domain object.

    Parameters
    ----------
    obj : :class:`.NamedTuple`

    Returns
    -------
    dict
        Nested domain objects are converted as well. Keys are the field names
        of the domain object, not the camel-case keys of the wire format.

    """
    def _cast(value: Any) -> Any:
        if isinstance(value, tuple) and hasattr(value, '_asdict'):
            return to_dict(value)
        if isinstance(value, dict):
            return {k: _cast(v) for k, v in value.items()}
        return value
    return {key: _cast(value) for key, value in obj._asdict().items()}
