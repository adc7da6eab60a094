"""Tests for :mod:`canvas_auth.signature`."""

import string
from unittest import TestCase

from hypothesis import given, settings
from hypothesis import strategies as st

from .. import envelope, signature
from .util import SECRET, canvas_data

secrets = st.text(alphabet=string.ascii_letters + string.digits, min_size=1)
payloads = st.dictionaries(st.text(), st.text())


class TestSign(TestCase):
    """Signatures are base64-encoded HMAC-SHA256 digests."""

    def test_known_signature(self):
        """The signature matches one computed independently."""
        self.assertEqual(signature.sign('eyJhIjogMX0=', 'FC99'),
                         'a0r/GYcZacC8K5Ndhf8Em5NDEcvN+bSChIS6LkWsRaI=')

    def test_signature_length(self):
        """A SHA-256 digest is 32 bytes, or 44 base64 characters."""
        encoded = envelope.encode(canvas_data())
        self.assertEqual(len(signature.sign(encoded, SECRET)), 44)


class TestVerify(TestCase):
    """Tests for :func:`.signature.verify`."""

    @given(payloads, secrets)
    def test_own_signature_verifies(self, data, secret):
        """A payload always verifies against its own signature."""
        encoded = envelope.encode(data)
        sig = signature.sign(encoded, secret)
        self.assertTrue(signature.verify(encoded, sig, secret))

    @given(payloads, secrets, st.data())
    @settings(max_examples=200)
    def test_mutated_signature_fails(self, data, secret, choice):
        """Flipping any bit of the signature breaks it."""
        encoded = envelope.encode(data)
        raw = bytearray(signature.sign(encoded, secret).encode('ascii'))
        i = choice.draw(st.integers(min_value=0, max_value=len(raw) - 1))
        bit = choice.draw(st.integers(min_value=0, max_value=7))
        raw[i] ^= 1 << bit
        mutated = raw.decode('latin-1')
        self.assertFalse(signature.verify(encoded, mutated, secret))

    @given(payloads, secrets, st.data())
    @settings(max_examples=200)
    def test_mutated_payload_fails(self, data, secret, choice):
        """Flipping any bit of the payload breaks the signature."""
        encoded = envelope.encode(data)
        sig = signature.sign(encoded, secret)
        i = choice.draw(st.integers(min_value=0, max_value=len(encoded) - 1))
        bit = choice.draw(st.integers(min_value=0, max_value=6))
        mutated = encoded[:i] + chr(ord(encoded[i]) ^ (1 << bit)) \
            + encoded[i + 1:]
        self.assertFalse(signature.verify(mutated, sig, secret))

    @given(payloads, secrets, secrets)
    def test_other_secret_fails(self, data, secret, other):
        """A signature made with another secret does not verify."""
        if secret == other:
            return
        encoded = envelope.encode(data)
        sig = signature.sign(encoded, other)
        self.assertFalse(signature.verify(encoded, sig, secret))

    def test_empty_signature(self):
        """An empty signature never matches."""
        encoded = envelope.encode(canvas_data())
        self.assertFalse(signature.verify(encoded, '', SECRET))
        self.assertFalse(signature.verify('', '', SECRET))

    def test_non_ascii_signature(self):
        """A signature with characters outside base64 simply doesn't match."""
        encoded = envelope.encode(canvas_data())
        self.assertFalse(signature.verify(encoded, 'sïgnåture', SECRET))
