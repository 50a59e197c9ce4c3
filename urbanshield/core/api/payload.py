"""Build typed credential records from validated fields"""
from typing import Mapping

from .models import LoginCredentials, SignupCredentials


def build_login_credentials(fields: Mapping[str, str]) -> LoginCredentials:
    return LoginCredentials(
        email=fields["email"].strip(),
        password=fields["password"].strip(),
    )


def build_signup_credentials(fields: Mapping[str, str]) -> SignupCredentials:
    return SignupCredentials(
        name=fields["name"].strip(),
        email=fields["email"].strip(),
        password=fields["password"].strip(),
        phone=fields["phone"].strip(),
        role=fields["role"].strip(),
    )
