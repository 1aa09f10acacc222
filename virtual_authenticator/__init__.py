"""
Virtual Authenticator Package
Options and credential objects for driving a browser's WebAuthn virtual authenticator.
"""

__version__ = '0.1.0'

from .options import AuthenticatorOptions, Protocol, Transport
from .credential import Credential, MalformedCredentialError
from .encoding import (
    VirtualAuthenticatorError, InvalidEncodingError,
    encode_base64url, decode_base64url,
)
from .commands import Command, CommandName

__all__ = [
    'AuthenticatorOptions',
    'Protocol',
    'Transport',
    'Credential',
    'MalformedCredentialError',
    'VirtualAuthenticatorError',
    'InvalidEncodingError',
    'encode_base64url',
    'decode_base64url',
    'Command',
    'CommandName',
]
