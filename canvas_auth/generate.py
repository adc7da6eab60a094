"""
Helper script for generating a canvas signed request.

Be sure that you are using the same secret when running this script as when
you run the app. Set ``CANVAS_CONSUMER_SECRET=somesecret`` in your environment
to ensure that the same secret is always used.

.. code-block:: bash

   $ CANVAS_CONSUMER_SECRET=foosecret canvas-signed-request
   Organization ID: 000123
   User ID: 000456
   Access token: 00D000
   Full name [Jane Doe]:
   Email address [jane@example.com]:
   Environment (JSON) [{}]: {"parameters": {"page": "special"}}

   q6yXz...=.eyJjbGllbnQiOiB7Im9hdXRoVG9rZW4iOiAiMDBEMDAwIn0sIC...

POST the value as the ``signed_request`` form field, e.g.:

.. code-block:: bash

   $ curl -d signed_request=... http://localhost:5000/

The identity service must still accept the access token, so use a token
issued by the platform for real requests.
"""

import json
import os

import click

from . import envelope, signature


@click.command()
@click.option('--organization_id', prompt='Organization ID')
@click.option('--user_id', prompt='User ID')
@click.option('--oauth_token', prompt='Access token')
@click.option('--full_name', prompt='Full name', default='Jane Doe')
@click.option('--email', prompt='Email address', default='jane@example.com')
@click.option('--environment', prompt='Environment (JSON)', default='{}')
def generate_signed_request(organization_id: str, user_id: str,
                            oauth_token: str, full_name: str = 'Jane Doe',
                            email: str = 'jane@example.com',
                            environment: str = '{}') -> None:
    """Generate a canvas signed request for dev/testing purposes."""
    secret = os.environ.get('CANVAS_CONSUMER_SECRET')
    if not secret:
        raise click.UsageError('Set CANVAS_CONSUMER_SECRET')
    try:
        env = json.loads(environment)
    except ValueError as e:
        raise click.BadParameter('Not valid JSON',
                                 param_hint='environment') from e

    data = {
        'client': {'oauthToken': oauth_token},
        'context': {
            'organization': {'organizationId': organization_id},
            'user': {
                'userId': user_id,
                'fullName': full_name,
                'email': email
            },
            'environment': env
        }
    }
    encoded = envelope.encode(data)
    click.echo(f'{signature.sign(encoded, secret)}.{encoded}')


if __name__ == '__main__':
    generate_signed_request()
