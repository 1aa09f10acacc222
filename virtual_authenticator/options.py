"""
Virtual authenticator options.

Describes how a virtual authenticator should behave when it is created
through the WebDriver WebAuthn extension.
"""

from enum import Enum
from typing import Any, Dict, Union

from . import config
from .logger import Logger


class Protocol(str, Enum):
    """Authenticator protocol versions"""
    CTAP2 = "ctap2"
    U2F = "ctap1/u2f"


class Transport(str, Enum):
    """Authenticator transports"""
    BLE = "ble"
    USB = "usb"
    NFC = "nfc"
    INTERNAL = "internal"


def _wire_value(value: Any) -> Any:
    """Enum members go out as their string value, anything else verbatim"""
    if isinstance(value, Enum):
        return value.value
    return value


class AuthenticatorOptions:
    """
    Mutable configuration record for a virtual authenticator.

    The protocol and transport setters are deliberately total: the known
    wire values are normalised to their enum member, any other value is
    stored as given so newer browser values can still be passed through.
    """

    def __init__(self, **overrides: Any) -> None:
        self.protocol = Protocol(config.DEFAULT_PROTOCOL)
        self.transport = Transport(config.DEFAULT_TRANSPORT)
        self.has_resident_key = config.DEFAULT_HAS_RESIDENT_KEY
        self.has_user_verification = config.DEFAULT_HAS_USER_VERIFICATION
        self.is_user_consenting = config.DEFAULT_IS_USER_CONSENTING
        self.is_user_verified = config.DEFAULT_IS_USER_VERIFIED

        for name, value in overrides.items():
            if not isinstance(getattr(type(self), name, None), property):
                raise TypeError(f"Unknown authenticator option: {name}")
            setattr(self, name, value)

    @staticmethod
    def _check_bool(name: str, value: Any) -> bool:
        if not isinstance(value, bool):
            raise TypeError(f"{name} must be a bool, got {type(value).__name__}")
        return value

    @property
    def protocol(self) -> Union[Protocol, Any]:
        return self._protocol

    @protocol.setter
    def protocol(self, value: Union[Protocol, Any]) -> None:
        try:
            self._protocol = Protocol(value)
        except ValueError:
            Logger.debug("OPTIONS", f"Passing through unknown protocol {value!r}")
            self._protocol = value

    @property
    def transport(self) -> Union[Transport, Any]:
        return self._transport

    @transport.setter
    def transport(self, value: Union[Transport, Any]) -> None:
        try:
            self._transport = Transport(value)
        except ValueError:
            Logger.debug("OPTIONS", f"Passing through unknown transport {value!r}")
            self._transport = value

    @property
    def has_resident_key(self) -> bool:
        return self._has_resident_key

    @has_resident_key.setter
    def has_resident_key(self, value: bool) -> None:
        self._has_resident_key = self._check_bool("has_resident_key", value)

    @property
    def has_user_verification(self) -> bool:
        return self._has_user_verification

    @has_user_verification.setter
    def has_user_verification(self, value: bool) -> None:
        self._has_user_verification = self._check_bool("has_user_verification", value)

    @property
    def is_user_consenting(self) -> bool:
        return self._is_user_consenting

    @is_user_consenting.setter
    def is_user_consenting(self, value: bool) -> None:
        self._is_user_consenting = self._check_bool("is_user_consenting", value)

    @property
    def is_user_verified(self) -> bool:
        return self._is_user_verified

    @is_user_verified.setter
    def is_user_verified(self, value: bool) -> None:
        self._is_user_verified = self._check_bool("is_user_verified", value)

    def to_dict(self) -> Dict[str, Any]:
        """
        Build the mapping sent with the add-authenticator command.

        Returns:
            Dict keyed by the camelCase option names
        """
        values = (
            _wire_value(self.protocol),
            _wire_value(self.transport),
            self.has_resident_key,
            self.has_user_verification,
            self.is_user_consenting,
            self.is_user_verified,
        )
        return dict(zip(config.OPTION_KEYS, values))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"AuthenticatorOptions({fields})"
