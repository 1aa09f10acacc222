"""
Command definitions for the WebDriver WebAuthn extension.

Builds the (name, params) pairs a driver's transport sends to create and
manage virtual authenticators. Nothing here talks to a browser.
"""

import re
from enum import Enum
from typing import Any, Dict, List, NamedTuple

from . import config
from .credential import Credential, MalformedCredentialError
from .encoding import encode_base64url, decode_base64url
from .options import AuthenticatorOptions


class CommandName(str, Enum):
    """WebAuthn extension command names"""
    ADD_VIRTUAL_AUTHENTICATOR = "addVirtualAuthenticator"
    REMOVE_VIRTUAL_AUTHENTICATOR = "removeVirtualAuthenticator"
    ADD_CREDENTIAL = "addCredential"
    GET_CREDENTIALS = "getCredentials"
    REMOVE_CREDENTIAL = "removeCredential"
    REMOVE_ALL_CREDENTIALS = "removeAllCredentials"
    SET_USER_VERIFIED = "setUserVerified"


# Authenticator ids are embedded in the url path as a single segment
_AUTHENTICATOR_ID_RE = re.compile(r"[A-Za-z0-9._~-]+")


# HTTP method and path template per command
ENDPOINTS = {
    CommandName.ADD_VIRTUAL_AUTHENTICATOR: ("POST", config.AUTHENTICATOR_PATH),
    CommandName.REMOVE_VIRTUAL_AUTHENTICATOR: ("DELETE", config.AUTHENTICATOR_ITEM_PATH),
    CommandName.ADD_CREDENTIAL: ("POST", config.CREDENTIAL_PATH),
    CommandName.GET_CREDENTIALS: ("GET", config.CREDENTIALS_PATH),
    CommandName.REMOVE_CREDENTIAL: ("DELETE", config.CREDENTIAL_ITEM_PATH),
    CommandName.REMOVE_ALL_CREDENTIALS: ("DELETE", config.CREDENTIALS_PATH),
    CommandName.SET_USER_VERIFIED: ("POST", config.USER_VERIFIED_PATH),
}


class Command(NamedTuple):
    """A command ready to be handed to the transport"""
    name: CommandName
    params: Dict[str, Any]

    @property
    def method(self) -> str:
        return ENDPOINTS[self.name][0]

    @property
    def path(self) -> str:
        """Endpoint path with the url parameters filled in"""
        return ENDPOINTS[self.name][1].format(
            authenticator_id=self.params.get("authenticatorId", ""),
            credential_id=self.params.get("credentialId", ""),
        )

    @property
    def body(self) -> Dict[str, Any]:
        """JSON body: params minus the ones already carried in the path"""
        template = ENDPOINTS[self.name][1]
        skip = set()
        if "{authenticator_id}" in template:
            skip.add("authenticatorId")
        if "{credential_id}" in template:
            skip.add("credentialId")
        return {k: v for k, v in self.params.items() if k not in skip}

    def __str__(self) -> str:
        return f"Command({self.name.value}, {self.method} {self.path})"


def _check_authenticator_id(authenticator_id: Any) -> str:
    if (not isinstance(authenticator_id, str)
            or not _AUTHENTICATOR_ID_RE.fullmatch(authenticator_id)
            or authenticator_id in (".", "..")):
        raise ValueError(f"Invalid authenticator id: {authenticator_id!r}")
    return authenticator_id


def add_virtual_authenticator(options: AuthenticatorOptions) -> Command:
    return Command(CommandName.ADD_VIRTUAL_AUTHENTICATOR, options.to_dict())


def remove_virtual_authenticator(authenticator_id: str) -> Command:
    return Command(
        CommandName.REMOVE_VIRTUAL_AUTHENTICATOR,
        {"authenticatorId": _check_authenticator_id(authenticator_id)},
    )


def add_credential(authenticator_id: str, credential: Credential) -> Command:
    """
    Build the add-credential command.

    The credential mapping is merged into the params next to the
    authenticator id, matching the W3C wire shape.
    """
    params = credential.to_dict()
    params["authenticatorId"] = _check_authenticator_id(authenticator_id)
    return Command(CommandName.ADD_CREDENTIAL, params)


def get_credentials(authenticator_id: str) -> Command:
    return Command(
        CommandName.GET_CREDENTIALS,
        {"authenticatorId": _check_authenticator_id(authenticator_id)},
    )


def remove_credential(authenticator_id: str, credential_id: Any) -> Command:
    """
    Build the remove-credential command.

    Args:
        authenticator_id: Authenticator holding the credential
        credential_id: base64url credential id, raw id bytes, or a Credential

    Raises:
        InvalidEncodingError: If a text credential id is not base64url
        ValueError: If the authenticator id is not a single url path segment
    """
    if isinstance(credential_id, Credential):
        credential_id = credential_id.id
    elif isinstance(credential_id, (bytes, bytearray, memoryview)):
        credential_id = encode_base64url(credential_id)
    elif isinstance(credential_id, str):
        # Only canonical base64url text may reach the url path
        decode_base64url(credential_id)
    else:
        raise TypeError(f"Unsupported credential id type: {type(credential_id).__name__}")
    if not credential_id:
        raise ValueError("Credential id must not be empty")

    return Command(
        CommandName.REMOVE_CREDENTIAL,
        {
            "authenticatorId": _check_authenticator_id(authenticator_id),
            "credentialId": credential_id,
        },
    )


def remove_all_credentials(authenticator_id: str) -> Command:
    return Command(
        CommandName.REMOVE_ALL_CREDENTIALS,
        {"authenticatorId": _check_authenticator_id(authenticator_id)},
    )


def set_user_verified(authenticator_id: str, verified: bool) -> Command:
    if not isinstance(verified, bool):
        raise TypeError(f"verified must be a bool, got {type(verified).__name__}")
    return Command(
        CommandName.SET_USER_VERIFIED,
        {
            "authenticatorId": _check_authenticator_id(authenticator_id),
            "isUserVerified": verified,
        },
    )


def parse_credentials(value: List[Dict[str, Any]]) -> List[Credential]:
    """
    Turn a get-credentials result into Credential objects.

    Raises:
        MalformedCredentialError: If the result is not a list or any entry is malformed
    """
    if not isinstance(value, list):
        raise MalformedCredentialError(
            f"getCredentials result must be a list, got {type(value).__name__}"
        )
    return [Credential.from_dict(entry) for entry in value]
