import base64
import unittest

from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives import serialization

from virtual_authenticator.credential import Credential
from virtual_authenticator.encoding import InvalidEncodingError
from virtual_authenticator.keys import (
    generate_private_key, private_key_to_der, private_key_from_base64,
)
from virtual_authenticator.logger import Logger

# Disable logging output during tests
Logger.enabled = False


class TestKeys(unittest.TestCase):
    def test_generated_key_is_pkcs8_p256(self):
        der = generate_private_key()
        privkey = serialization.load_der_private_key(der, password=None)
        self.assertIsInstance(privkey, ec.EllipticCurvePrivateKey)
        self.assertEqual(privkey.curve.name, "secp256r1")

    def test_generated_keys_differ(self):
        self.assertNotEqual(generate_private_key(), generate_private_key())

    def test_pem_to_der(self):
        privkey = ec.generate_private_key(ec.SECP256R1())
        pem = privkey.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption()
        )
        expected = privkey.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption()
        )
        self.assertEqual(private_key_to_der(pem), expected)

    def test_from_base64(self):
        der = generate_private_key()
        self.assertEqual(private_key_from_base64(base64.b64encode(der).decode()), der)

    def test_from_base64_rejects_garbage(self):
        with self.assertRaises(InvalidEncodingError):
            private_key_from_base64("not base64!")
        with self.assertRaises(InvalidEncodingError):
            private_key_from_base64(base64.b64encode(b"\x30\x03\x02\x01\x00").decode())

    def test_generated_key_in_credential(self):
        """Key bytes survive the credential round trip untouched"""
        der = generate_private_key()
        credential = Credential.create_non_resident_credential(b"\x01", "localhost", der, 0)
        restored = Credential.from_dict(credential.to_dict())
        self.assertEqual(restored.raw_private_key, der)


if __name__ == '__main__':
    unittest.main()
