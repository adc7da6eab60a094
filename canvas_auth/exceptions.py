"""Exceptions raised while authenticating a canvas signed request."""


class CanvasAuthError(RuntimeError):
    """Base class for failures that reject a canvas request."""

    reason = 'Rejected'


class InvalidFormat(CanvasAuthError):
    """The signed request cannot be split into signature and payload."""

    reason = 'InvalidFormat'


class SignatureMismatch(CanvasAuthError):
    """The signature does not match the payload and consumer secret."""

    reason = 'SignatureMismatch'


class MalformedEnvelope(CanvasAuthError):
    """The payload could not be decoded, or lacks required fields."""

    reason = 'MalformedEnvelope'


class ProfileUnavailable(CanvasAuthError):
    """The identity service could not confirm the access token."""

    reason = 'ProfileUnavailable'


class NotAuthorized(CanvasAuthError):
    """The verification function denied the user."""

    reason = 'NotAuthorized'


class VerificationError(CanvasAuthError):
    """The verification function failed unexpectedly."""

    reason = 'VerificationError'


class ConfigurationError(RuntimeError):
    """The canvas authenticator is missing required configuration."""
