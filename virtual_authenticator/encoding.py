"""
base64url codec for binary credential fields.

Credential ids, user handles and private keys cross the wire as unpadded
base64url text. Decoding is strict: the standard base64 alphabet (``+``, ``/``),
padding and non-canonical trailing bits are all rejected.
"""

import base64
import binascii
import re
from typing import Union

from .logger import Logger

BytesLike = Union[bytes, bytearray, memoryview]

_BASE64URL_RE = re.compile(r'[A-Za-z0-9_-]*')


class VirtualAuthenticatorError(Exception):
    """Base exception for the virtual authenticator package"""
    pass


class InvalidEncodingError(VirtualAuthenticatorError, ValueError):
    """Raised when a byte/text conversion meets non-conforming input"""
    pass


def encode_base64url(data: BytesLike) -> str:
    """
    Encode raw bytes as unpadded base64url text.

    Args:
        data: Bytes to encode

    Returns:
        base64url text without '=' padding

    Raises:
        InvalidEncodingError: If data is not a bytes-like object
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidEncodingError(f"Expected bytes, got {type(data).__name__}")
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b'=').decode('ascii')


def decode_base64url(text: str) -> bytes:
    """
    Decode unpadded base64url text back to raw bytes.

    Args:
        text: base64url text

    Returns:
        Decoded bytes

    Raises:
        InvalidEncodingError: If text is not canonical unpadded base64url
    """
    if not isinstance(text, str):
        raise InvalidEncodingError(f"Expected str, got {type(text).__name__}")

    if not _BASE64URL_RE.fullmatch(text):
        Logger.debug("ENCODING", f"Rejected non-base64url text ({len(text)} chars)")
        raise InvalidEncodingError("Text contains characters outside the base64url alphabet")

    try:
        data = base64.urlsafe_b64decode(text + '=' * (-len(text) % 4))
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError(f"Invalid base64url length: {e}") from e

    # Leftover bits in the last character must be zero
    if encode_base64url(data) != text:
        raise InvalidEncodingError("Non-canonical base64url text")

    return data
