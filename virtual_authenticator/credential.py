"""
WebAuthn credential value object.

A Credential carries the raw bytes of one credential held by a virtual
authenticator. Binary fields are only ever turned into text (base64url)
when read or serialized; the stored bytes are the single source of truth.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, NamedTuple, Optional, Union

from . import config
from .encoding import (
    BytesLike, VirtualAuthenticatorError, InvalidEncodingError,
    encode_base64url, decode_base64url,
)
from .logger import Logger

ByteInput = Union[BytesLike, Iterable[int]]


class MalformedCredentialError(VirtualAuthenticatorError, ValueError):
    """Raised when a credential mapping is missing fields or badly encoded"""
    pass


def _to_bytes(name: str, value: ByteInput) -> bytes:
    """Coerce a bytes-like value or a sequence of ints (0-255) to bytes"""
    if isinstance(value, (str, int)):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
    return bytes(value)


def _check_sign_count(sign_count: Any) -> int:
    if isinstance(sign_count, bool) or not isinstance(sign_count, int):
        raise TypeError(f"sign_count must be an int, got {type(sign_count).__name__}")
    if sign_count < 0:
        raise ValueError(f"sign_count must be non-negative, got {sign_count}")
    return sign_count


def _check_rp_id(rp_id: Any) -> str:
    if not isinstance(rp_id, str):
        raise TypeError(f"rp_id must be a str, got {type(rp_id).__name__}")
    return rp_id


class Credential(NamedTuple):
    """
    Immutable WebAuthn credential.

    Use create_resident_credential() or create_non_resident_credential()
    rather than the positional constructor; they enforce that a user handle
    is present exactly when the credential is resident.

    Only repr() hides the private key: tuple access, indexing and _asdict()
    still return raw_private_key. _replace() does not validate; rebuild
    through a create_* method when changing fields.
    """
    raw_id: bytes
    is_resident_credential: bool
    rp_id: str
    raw_user_handle: Optional[bytes]
    raw_private_key: bytes
    sign_count: int

    @classmethod
    def create_resident_credential(
        cls,
        id: ByteInput,
        rp_id: str,
        user_handle: ByteInput,
        private_key: ByteInput,
        sign_count: int,
    ) -> 'Credential':
        """
        Create a resident (discoverable) credential.

        Args:
            id: Credential id bytes
            rp_id: Relying party id the credential is scoped to
            user_handle: User handle bytes
            private_key: Private key bytes (PKCS#8 DER)
            sign_count: Initial signature counter

        Returns:
            Credential with is_resident_credential=True
        """
        if user_handle is None:
            raise TypeError("Resident credentials require a user_handle")
        return cls(
            _to_bytes("id", id),
            True,
            _check_rp_id(rp_id),
            _to_bytes("user_handle", user_handle),
            _to_bytes("private_key", private_key),
            _check_sign_count(sign_count),
        )

    @classmethod
    def create_non_resident_credential(
        cls,
        id: ByteInput,
        rp_id: str,
        private_key: ByteInput,
        sign_count: int,
    ) -> 'Credential':
        """Create a non-resident credential (no user handle)"""
        return cls(
            _to_bytes("id", id),
            False,
            _check_rp_id(rp_id),
            None,
            _to_bytes("private_key", private_key),
            _check_sign_count(sign_count),
        )

    @property
    def id(self) -> str:
        """Credential id as base64url text"""
        return encode_base64url(self.raw_id)

    @property
    def user_handle(self) -> Optional[str]:
        """User handle as base64url text, or None when absent"""
        if self.raw_user_handle is None:
            return None
        return encode_base64url(self.raw_user_handle)

    @property
    def private_key(self) -> str:
        """Private key as base64url text"""
        return encode_base64url(self.raw_private_key)

    def to_dict(self) -> Dict[str, Any]:
        """
        Build the mapping sent with the add-credential command.

        The userHandle key is omitted entirely (not set to None) for
        credentials without a handle.
        """
        credential_data = {
            config.CREDENTIAL_ID_KEY: self.id,
            config.IS_RESIDENT_KEY: self.is_resident_credential,
            config.RP_ID_KEY: self.rp_id,
            config.PRIVATE_KEY_KEY: self.private_key,
            config.SIGN_COUNT_KEY: self.sign_count,
        }

        user_handle = self.user_handle
        if user_handle is not None:
            credential_data[config.USER_HANDLE_KEY] = user_handle

        return credential_data

    @classmethod
    def from_dict(cls, data: Mapping) -> 'Credential':
        """
        Rebuild a Credential from a get-credentials result entry.

        Args:
            data: Mapping as produced by to_dict()

        Returns:
            Credential with decoded raw bytes

        Raises:
            MalformedCredentialError: If a required key is missing, a
                binary field is not valid base64url, a field has the wrong
                type, or a resident credential has no user handle
        """
        if not isinstance(data, Mapping):
            raise MalformedCredentialError(
                f"Credential data must be a mapping, got {type(data).__name__}"
            )

        for key in (config.CREDENTIAL_ID_KEY, config.PRIVATE_KEY_KEY,
                    config.RP_ID_KEY, config.SIGN_COUNT_KEY):
            if key not in data:
                raise MalformedCredentialError(f"Credential data is missing '{key}'")

        raw_id = cls._decode_field(data, config.CREDENTIAL_ID_KEY)
        raw_private_key = cls._decode_field(data, config.PRIVATE_KEY_KEY)

        # A null userHandle on the wire means no handle
        raw_user_handle = None
        if data.get(config.USER_HANDLE_KEY) is not None:
            raw_user_handle = cls._decode_field(data, config.USER_HANDLE_KEY)

        is_resident = data.get(config.IS_RESIDENT_KEY, raw_user_handle is not None)

        try:
            if not isinstance(is_resident, bool):
                raise TypeError(
                    f"isResidentCredential must be a bool, got {type(is_resident).__name__}"
                )
            rp_id = _check_rp_id(data[config.RP_ID_KEY])
            sign_count = _check_sign_count(data[config.SIGN_COUNT_KEY])
        except (TypeError, ValueError) as e:
            Logger.debug("CREDENTIAL", f"Rejected credential data: {e}")
            raise MalformedCredentialError(str(e)) from e

        if is_resident and raw_user_handle is None:
            raise MalformedCredentialError("Resident credential data has no 'userHandle'")
        if not is_resident:
            # Meaningless for non-resident credentials
            raw_user_handle = None

        return cls(
            raw_id,
            is_resident,
            rp_id,
            raw_user_handle,
            raw_private_key,
            sign_count,
        )

    @staticmethod
    def _decode_field(data: Mapping, key: str) -> bytes:
        try:
            return decode_base64url(data[key])
        except InvalidEncodingError as e:
            Logger.debug("CREDENTIAL", f"Failed to decode '{key}': {e}")
            raise MalformedCredentialError(f"'{key}' is not valid base64url: {e}") from e

    def __repr__(self) -> str:
        return (
            f"Credential(id={self.id!r}, is_resident_credential={self.is_resident_credential}, "
            f"rp_id={self.rp_id!r}, user_handle={self.user_handle!r}, "
            f"sign_count={self.sign_count})"
        )
