"""Helpers for building canvas signed requests in tests."""

from typing import Any, Dict, Optional

from .. import envelope, signature

OAUTH_TOKEN = '00D000'
SECRET = 'FC99'
ORGANIZATION_ID = '000123'
USER_ID = '000456'
ACCOUNT_ID = '001xx1'
IDENTITY_URL = f'https://login.salesforce.com/id/{ORGANIZATION_ID}/{USER_ID}'


def canvas_data() -> Dict[str, Any]:
    """Generate the payload of a request to authenticate Jane."""
    return {
        'client': {
            'oauthToken': OAUTH_TOKEN,
            'instanceUrl': 'https://example.my.salesforce.com'
        },
        'context': {
            'organization': {
                'organizationId': ORGANIZATION_ID,
                'name': 'Example Inc.'
            },
            'user': {
                'userId': USER_ID,
                'userName': 'jane@example.com.org',
                'fullName': 'Jane Doe',
                'email': 'jane@example.com'
            },
            'environment': {
                'parameters': {
                    'page': 'special'
                },
                'record': {
                    'Id': ACCOUNT_ID
                }
            }
        }
    }


def profile_data(organization_id: str = ORGANIZATION_ID) -> Dict[str, Any]:
    """Generate the identity service response for Jane."""
    return {
        'id': f'https://login.salesforce.com/id/{organization_id}/{USER_ID}',
        'user_id': USER_ID,
        'organization_id': organization_id,
        'display_name': 'Jane Doe',
        'email': 'jane@example.com'
    }


def signed_request(encoded: str, sig: Optional[str] = None,
                   secret: str = SECRET) -> str:
    """Sign an encoded payload; ``sig`` overrides the signature."""
    if sig is None:
        sig = signature.sign(encoded, secret)
    return f'{sig}.{encoded}'


def signed_form(data: Optional[Dict[str, Any]] = None,
                secret: str = SECRET) -> Dict[str, str]:
    """Generate form data with a signed request for ``data``."""
    encoded = envelope.encode(canvas_data() if data is None else data)
    return {'signed_request': signed_request(encoded, secret=secret)}
