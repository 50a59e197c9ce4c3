import unittest

from urbanshield.core.api.models import LoginCredentials, SignupCredentials
from urbanshield.core.api.payload import (build_login_credentials,
                                          build_signup_credentials)
from urbanshield.core.api.validator import validate_login, validate_signup
from urbanshield.core.utils.error_types import MISSING_FIELDS, TERMS_NOT_ACCEPTED


class TestValidateLogin(unittest.TestCase):
    def test_valid_input_is_trimmed(self):
        result = validate_login("  a@b.com ", " x ")
        self.assertTrue(result.valid)
        self.assertEqual(result.value, {"email": "a@b.com", "password": "x"})

    def test_blank_fields_are_missing(self):
        for email, password in [("", "x"), ("a@b.com", ""), ("   ", "x"), ("a@b.com", "\t\n"), (None, None)]:
            with self.subTest(email=email, password=password):
                result = validate_login(email, password)
                self.assertFalse(result)
                self.assertEqual(result.reason, MISSING_FIELDS)


class TestValidateSignup(unittest.TestCase):
    def setUp(self):
        self.fields = dict(
            name="Ada",
            email="ada@example.com",
            password="secret",
            phone="0771234567",
            role="tourist",
        )

    def test_valid_input(self):
        result = validate_signup(**self.fields, accepted_terms=True)
        self.assertTrue(result.valid)
        self.assertEqual(result.value["role"], "tourist")

    def test_terms_checked_before_blank_fields(self):
        result = validate_signup("", "", "", "", "resident", accepted_terms=False)
        self.assertEqual(result.reason, TERMS_NOT_ACCEPTED)

    def test_terms_not_accepted_with_complete_fields(self):
        result = validate_signup(**self.fields, accepted_terms=False)
        self.assertEqual(result.reason, TERMS_NOT_ACCEPTED)

    def test_each_required_field(self):
        for field in ("name", "email", "password", "phone"):
            with self.subTest(field=field):
                fields = {**self.fields, field: "  "}
                result = validate_signup(**fields, accepted_terms=True)
                self.assertFalse(result.valid)
                self.assertEqual(result.reason, MISSING_FIELDS)


class TestPayloadBuilder(unittest.TestCase):
    def test_login_payload(self):
        credentials = build_login_credentials({"email": " a@b.com", "password": "x "})
        self.assertEqual(credentials, LoginCredentials(email="a@b.com", password="x"))
        self.assertEqual(credentials.to_payload(), {"email": "a@b.com", "password": "x"})

    def test_signup_payload(self):
        credentials = build_signup_credentials({
            "name": " Ada ",
            "email": "ada@example.com",
            "password": "secret",
            "phone": " 0771234567",
            "role": "official",
        })
        self.assertIsInstance(credentials, SignupCredentials)
        self.assertEqual(credentials.to_payload(), {
            "name": "Ada",
            "email": "ada@example.com",
            "password": "secret",
            "phone": "0771234567",
            "role": "official",
        })


if __name__ == '__main__':
    unittest.main()
