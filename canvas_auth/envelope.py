"""
Functions for working with the canvas ``signed_request`` envelope.

A signed request has the form ``<signature>.<payload>``, where ``payload``
is the base64 encoding of a JSON document describing the client (including
its access token) and the context in which the canvas app is embedded. See
:mod:`canvas_auth.signature` for the signature part.
"""

from typing import Any, Mapping, Optional
from base64 import b64encode, b64decode
import binascii
import json
import logging

from .exceptions import InvalidFormat, MalformedEnvelope
from . import domain

logger = logging.getLogger(__name__)

DELIMITER = '.'


def split(signed_request: str) -> domain.SignedEnvelope:
    """
    Split a signed request into its signature and encoded payload.

    Raises
    ------
    :class:`InvalidFormat`
        Raised unless there are exactly two non-empty parts.

    """
    parts = signed_request.split(DELIMITER)
    if len(parts) != 2 or not all(parts):
        raise InvalidFormat('Malformed signed request')
    signature, encoded_payload = parts
    return domain.SignedEnvelope(signature, encoded_payload)


def encode(data: Mapping[str, Any]) -> str:
    """Encode a payload mapping as it would appear in a signed request."""
    raw = json.dumps(data).encode('utf-8')
    return b64encode(raw).decode('ascii')


def decode_json(encoded_payload: str) -> dict:
    """
    Decode the payload of a signed request without checking its content.

    Raises
    ------
    :class:`MalformedEnvelope`
        Raised if the payload is not base64-encoded JSON describing an object.

    """
    try:
        raw = b64decode(encoded_payload, validate=True)
        data = json.loads(raw.decode('utf-8'))
    except (binascii.Error, UnicodeDecodeError, ValueError,
            RecursionError) as e:
        raise MalformedEnvelope('Payload is not base64-encoded JSON') from e
    if not isinstance(data, dict):
        raise MalformedEnvelope('Payload is not a JSON object')
    return data


def decode(encoded_payload: str) -> domain.CanvasPayload:
    """
    Decode the payload of a signed request.

    Parameters
    ----------
    encoded_payload : str
        The part of the signed request following the delimiter.

    Returns
    -------
    :class:`.domain.CanvasPayload`

    Raises
    ------
    :class:`MalformedEnvelope`
        Raised if the payload can't be decoded, or if the access token, user
        ID or organization ID are missing.

    """
    data = decode_json(encoded_payload)
    client = _section(data, 'client')
    context = _section(data, 'context')
    user = _section(context, 'user')
    organization = _section(context, 'organization')
    environment = context.get('environment') or {}
    if not isinstance(environment, dict):
        raise MalformedEnvelope('Malformed environment')

    return domain.CanvasPayload(
        client=domain.Client(
            oauth_token=_required(client, 'oauthToken'),
            instance_id=_optional(client, 'instanceId'),
            instance_url=_optional(client, 'instanceUrl'),
            target_origin=_optional(client, 'targetOrigin')
        ),
        context=domain.Context(
            user=domain.CanvasUser(
                user_id=_required(user, 'userId'),
                user_name=_optional(user, 'userName'),
                full_name=_optional(user, 'fullName'),
                email=_optional(user, 'email')
            ),
            organization=domain.Organization(
                organization_id=_required(organization, 'organizationId'),
                name=_optional(organization, 'name')
            ),
            environment=environment
        )
    )


def _section(data: dict, key: str) -> dict:
    section = data.get(key)
    if not isinstance(section, dict):
        logger.debug('Payload has no %s section', key)
        raise MalformedEnvelope(f'Missing {key}')
    return section


def _required(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        logger.debug('Payload has no %s', key)
        raise MalformedEnvelope(f'Missing {key}')
    return value


def _optional(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None
