"""
Private key material for virtual authenticator credentials.

Virtual authenticators expect credential private keys as PKCS#8 DER bytes.
These helpers only produce or convert key bytes; nothing here signs.
"""

import base64
import binascii

from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.backends import default_backend
from cryptography.exceptions import UnsupportedAlgorithm

from .encoding import InvalidEncodingError


def _pkcs8_der(privkey) -> bytes:
    return privkey.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    )


def generate_private_key() -> bytes:
    """
    Generate a fresh P-256 private key.

    Returns:
        PKCS#8 DER encoded private key bytes
    """
    privkey = ec.generate_private_key(ec.SECP256R1(), default_backend())
    return _pkcs8_der(privkey)


def private_key_to_der(pem: bytes) -> bytes:
    """
    Convert an unencrypted PEM private key to PKCS#8 DER.

    Raises:
        ValueError: If the PEM data cannot be parsed
    """
    privkey = serialization.load_pem_private_key(
        pem, password=None, backend=default_backend()
    )
    return _pkcs8_der(privkey)


def private_key_from_base64(text: str) -> bytes:
    """
    Decode a standard (padded) base64 PKCS#8 DER blob, as found in test fixtures.

    The bytes are checked to load as a private key so a truncated paste
    fails here rather than inside the browser.

    Raises:
        InvalidEncodingError: If the text is not base64 or not a DER private key
    """
    try:
        der = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError(f"Invalid base64 private key: {e}") from e

    try:
        serialization.load_der_private_key(der, password=None, backend=default_backend())
    except (ValueError, TypeError) as e:
        raise InvalidEncodingError(f"Not a DER private key: {e}") from e
    except UnsupportedAlgorithm as e:
        raise InvalidEncodingError(f"Unsupported private key: {e}") from e

    return der
