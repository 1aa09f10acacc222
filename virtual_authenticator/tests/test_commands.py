import unittest

from virtual_authenticator import commands
from virtual_authenticator.commands import CommandName
from virtual_authenticator.credential import Credential, MalformedCredentialError
from virtual_authenticator.options import AuthenticatorOptions, Protocol
from virtual_authenticator.logger import Logger

# Disable logging output during tests
Logger.enabled = False

AUTHENTICATOR_ID = "auth-1"


class TestCommandBuilders(unittest.TestCase):
    def setUp(self):
        self.credential = Credential.create_resident_credential(
            [1, 2, 3, 4], "localhost", b"\x01", b"\x30\x00", 0
        )

    def test_add_virtual_authenticator(self):
        """Options mapping is the whole body"""
        options = AuthenticatorOptions(protocol=Protocol.U2F, has_resident_key=True)
        command = commands.add_virtual_authenticator(options)

        self.assertEqual(command.name, CommandName.ADD_VIRTUAL_AUTHENTICATOR)
        self.assertEqual(command.method, "POST")
        self.assertEqual(command.path, "/webauthn/authenticator")
        self.assertEqual(command.body, options.to_dict())

    def test_add_credential(self):
        command = commands.add_credential(AUTHENTICATOR_ID, self.credential)

        self.assertEqual(command.name.value, "addCredential")
        self.assertEqual(command.path, "/webauthn/authenticator/auth-1/credential")
        self.assertEqual(command.params["authenticatorId"], AUTHENTICATOR_ID)
        self.assertEqual(command.body, self.credential.to_dict())

    def test_get_credentials(self):
        command = commands.get_credentials(AUTHENTICATOR_ID)
        self.assertEqual(command.method, "GET")
        self.assertEqual(command.path, "/webauthn/authenticator/auth-1/credentials")
        self.assertEqual(command.body, {})

    def test_remove_credential_accepts_id_forms(self):
        for credential_id in ("AQIDBA", b"\x01\x02\x03\x04", self.credential):
            with self.subTest(credential_id=credential_id):
                command = commands.remove_credential(AUTHENTICATOR_ID, credential_id)
                self.assertEqual(command.method, "DELETE")
                self.assertEqual(command.params["credentialId"], "AQIDBA")
                self.assertEqual(
                    command.path, "/webauthn/authenticator/auth-1/credentials/AQIDBA"
                )

    def test_remove_credential_rejects_non_base64url_text(self):
        for bad in ("../../../x?y=1", "AQ+D", "AQIDBA==", ""):
            with self.subTest(credential_id=bad):
                with self.assertRaises(ValueError):
                    commands.remove_credential(AUTHENTICATOR_ID, bad)

    def test_authenticator_id_must_be_one_path_segment(self):
        for bad in ("../../session", "..", ".", "a/b", "a?b", "a b", "a%2Fb"):
            with self.subTest(authenticator_id=bad):
                with self.assertRaises(ValueError):
                    commands.remove_credential(bad, "AQIDBA")

    def test_uuid_authenticator_id_accepted(self):
        authenticator_id = "0f8fad5b-d9cb-469f-a165-70867728950e"
        command = commands.remove_virtual_authenticator(authenticator_id)
        self.assertEqual(command.path, f"/webauthn/authenticator/{authenticator_id}")

    def test_remove_credential_rejects_other_types(self):
        with self.assertRaises(TypeError):
            commands.remove_credential(AUTHENTICATOR_ID, 1234)

    def test_remove_all_and_authenticator(self):
        remove_all = commands.remove_all_credentials(AUTHENTICATOR_ID)
        self.assertEqual(remove_all.method, "DELETE")
        self.assertEqual(remove_all.path, "/webauthn/authenticator/auth-1/credentials")

        remove = commands.remove_virtual_authenticator(AUTHENTICATOR_ID)
        self.assertEqual(remove.name, CommandName.REMOVE_VIRTUAL_AUTHENTICATOR)
        self.assertEqual(remove.path, "/webauthn/authenticator/auth-1")

    def test_set_user_verified(self):
        command = commands.set_user_verified(AUTHENTICATOR_ID, True)
        self.assertEqual(command.body, {"isUserVerified": True})
        with self.assertRaises(TypeError):
            commands.set_user_verified(AUTHENTICATOR_ID, "yes")

    def test_invalid_authenticator_id(self):
        for bad in ("", None, 7):
            with self.subTest(authenticator_id=bad):
                with self.assertRaises(ValueError):
                    commands.get_credentials(bad)


class TestParseCredentials(unittest.TestCase):
    def test_parse_list(self):
        first = Credential.create_non_resident_credential(b"\x01", "localhost", b"\x02", 0)
        second = Credential.create_resident_credential(b"\x03", "localhost", b"\x04", b"\x05", 7)

        parsed = commands.parse_credentials([first.to_dict(), second.to_dict()])
        self.assertEqual(parsed, [first, second])

    def test_parse_empty(self):
        self.assertEqual(commands.parse_credentials([]), [])

    def test_parse_rejects_non_list(self):
        with self.assertRaises(MalformedCredentialError):
            commands.parse_credentials({"credentialId": "AQ"})

    def test_parse_propagates_bad_entry(self):
        with self.assertRaises(MalformedCredentialError):
            commands.parse_credentials([{"rpId": "localhost", "signCount": 0}])


if __name__ == '__main__':
    unittest.main()
