#!/usr/bin/env python3
"""Issue a session token for local development.

Stands in for the external login page: prints a signed token for the given
identity and the callback URL that logs the browser in with it.

Usage:
    python scripts/issue_session_token.py alice@example.com
"""

import argparse
import sys
from urllib.parse import urlencode

from guestbook.config import Settings
from guestbook.util.jwt import create_token


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("identity", help="Identity to sign in as, e.g. an email")
    parser.add_argument(
        "--continue",
        dest="continue_to",
        default="/",
        help="Site-relative path to return to after login",
    )
    args = parser.parse_args()

    settings = Settings()
    token = create_token(args.identity, settings.auth)

    print(token)
    print(
        f"{settings.auth.callback_url}?"
        f"{urlencode({'token': token, 'continue': args.continue_to})}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
