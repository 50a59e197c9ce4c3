#!/usr/bin/env python3
"""UrbanShield auth CLI client."""
import argparse
import asyncio
import getpass
import sys
from typing import List, Optional

from urbanshield.core.api.models import Destination, FlowResult
from urbanshield.core.config.constants import ROLE_CHOICES
from urbanshield.core.config.logging_config import configure_logging
from urbanshield.core.config.settings import AuthSettings
from urbanshield.services.auth import AuthScreen, LoginFlow, SignupFlow


class ConsoleScreen(AuthScreen):
    """Terminal stand-in for the login and signup screens"""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def show_notice(self, message: str) -> None:
        print(message, file=self.stream)

    def navigate_to(self, destination: Destination) -> None:
        print(f"-> {destination.value}", file=self.stream)


def _settings(args: argparse.Namespace) -> AuthSettings:
    if args.base_url:
        return AuthSettings.from_url(args.base_url)
    return AuthSettings.from_env()


def _password(args: argparse.Namespace) -> str:
    if args.password is not None:
        return args.password
    return getpass.getpass("Password: ")


async def run_login(args: argparse.Namespace, screen: AuthScreen) -> FlowResult:
    flow = LoginFlow(screen, _settings(args))
    return await flow.submit(args.email, _password(args))


async def run_signup(args: argparse.Namespace, screen: AuthScreen) -> FlowResult:
    flow = SignupFlow(screen, _settings(args))
    return await flow.submit(
        args.name,
        args.email,
        _password(args),
        args.phone,
        args.role,
        args.accept_terms
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urbanshield-auth",
        description="UrbanShield login and signup client",
        epilog="""
Examples:
  # Login, prompting for the password
  %(prog)s login --email resident@example.com

  # Register a tourist account
  %(prog)s signup --name "Ada" --email ada@example.com --phone 0771234567 --role tourist --accept-terms
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--base-url",
        help="Backend base URL (default: URBANSHIELD_API_URL)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    login = subparsers.add_parser("login", help="Log in with email and password")
    login.add_argument("--email", default="", help="Account email")
    login.add_argument("--password", help="Account password (prompted if omitted)")
    login.set_defaults(handler=run_login)

    signup = subparsers.add_parser("signup", help="Register a new account")
    signup.add_argument("--name", default="", help="Full name")
    signup.add_argument("--email", default="", help="Account email")
    signup.add_argument("--password", help="Account password (prompted if omitted)")
    signup.add_argument("--phone", default="", help="Phone number")
    signup.add_argument(
        "--role",
        choices=ROLE_CHOICES,
        default=ROLE_CHOICES[0],
        help=f"Account role (default: {ROLE_CHOICES[0]})"
    )
    signup.add_argument(
        "--accept-terms",
        action="store_true",
        help="Accept the Terms & Conditions"
    )
    signup.set_defaults(handler=run_signup)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging()

    result = asyncio.run(args.handler(args, ConsoleScreen()))
    return 0 if result.navigated_away else 1


if __name__ == "__main__":
    sys.exit(main())
