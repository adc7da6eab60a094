"""Tests for :mod:`canvas_auth.generate`."""

import json
from unittest import TestCase

from click.testing import CliRunner

from .. import envelope, signature
from ..generate import generate_signed_request
from .util import SECRET, OAUTH_TOKEN, ORGANIZATION_ID, USER_ID

ARGS = ['--organization_id', ORGANIZATION_ID, '--user_id', USER_ID,
        '--oauth_token', OAUTH_TOKEN]


class TestGenerateSignedRequest(TestCase):
    """The script prints a signed request that the app will accept."""

    def setUp(self):
        self.runner = CliRunner()

    def test_generate(self):
        """A signed request is generated with the consumer secret."""
        environment = json.dumps({'record': {'Id': '001xx1'}})
        result = self.runner.invoke(
            generate_signed_request,
            ARGS + ['--full_name', 'Jane Doe', '--email', 'jane@example.com',
                    '--environment', environment],
            env={'CANVAS_CONSUMER_SECRET': SECRET}
        )
        self.assertEqual(result.exit_code, 0, result.output)

        parts = envelope.split(result.output.strip())
        self.assertTrue(signature.verify(parts.encoded_payload,
                                         parts.signature, SECRET))
        payload = envelope.decode(parts.encoded_payload)
        self.assertEqual(payload.access_token, OAUTH_TOKEN)
        self.assertEqual(payload.context.user.user_id, USER_ID)
        self.assertEqual(payload.context.organization.organization_id,
                         ORGANIZATION_ID)
        self.assertEqual(payload.context.environment,
                         {'record': {'Id': '001xx1'}})

    def test_prompts(self):
        """Missing values are prompted for, with defaults."""
        result = self.runner.invoke(
            generate_signed_request,
            input='\n'.join([ORGANIZATION_ID, USER_ID, OAUTH_TOKEN, '', '',
                             '']) + '\n',
            env={'CANVAS_CONSUMER_SECRET': SECRET}
        )
        self.assertEqual(result.exit_code, 0, result.output)
        value = result.output.strip().splitlines()[-1]
        payload = envelope.decode(envelope.split(value).encoded_payload)
        self.assertEqual(payload.context.user.full_name, 'Jane Doe')
        self.assertEqual(payload.context.environment, {})

    def test_no_secret(self):
        """The consumer secret is required."""
        result = self.runner.invoke(generate_signed_request, ARGS,
                                    env={'CANVAS_CONSUMER_SECRET': None})
        self.assertNotEqual(result.exit_code, 0)

    def test_bad_environment(self):
        """The environment must be JSON."""
        result = self.runner.invoke(generate_signed_request,
                                    ARGS + ['--environment', '{nope'],
                                    env={'CANVAS_CONSUMER_SECRET': SECRET})
        self.assertNotEqual(result.exit_code, 0)
