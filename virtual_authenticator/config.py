"""
Virtual Authenticator Configuration Constants

Default values and wire key names for the WebAuthn virtual authenticator
command payloads.
"""

# Authenticator Defaults
# Wire values of the protocol/transport an authenticator is created with
# when the caller does not override them.
DEFAULT_PROTOCOL = "ctap2"
DEFAULT_TRANSPORT = "usb"

DEFAULT_HAS_RESIDENT_KEY = False
DEFAULT_HAS_USER_VERIFICATION = False
DEFAULT_IS_USER_CONSENTING = True
DEFAULT_IS_USER_VERIFIED = False

# Authenticator options mapping keys (camelCase on the wire)
OPTION_KEYS = (
    "protocol",
    "transport",
    "hasResidentKey",
    "hasUserVerification",
    "isUserConsenting",
    "isUserVerified",
)

# Credential mapping keys
CREDENTIAL_ID_KEY = "credentialId"
IS_RESIDENT_KEY = "isResidentCredential"
RP_ID_KEY = "rpId"
USER_HANDLE_KEY = "userHandle"
PRIVATE_KEY_KEY = "privateKey"
SIGN_COUNT_KEY = "signCount"

# WebDriver WebAuthn extension endpoints
# {authenticator_id} and {credential_id} are filled in by the builders in
# commands.py; the session prefix belongs to the transport.
AUTHENTICATOR_PATH = "/webauthn/authenticator"
AUTHENTICATOR_ITEM_PATH = "/webauthn/authenticator/{authenticator_id}"
CREDENTIAL_PATH = "/webauthn/authenticator/{authenticator_id}/credential"
CREDENTIALS_PATH = "/webauthn/authenticator/{authenticator_id}/credentials"
CREDENTIAL_ITEM_PATH = "/webauthn/authenticator/{authenticator_id}/credentials/{credential_id}"
USER_VERIFIED_PATH = "/webauthn/authenticator/{authenticator_id}/uv"
