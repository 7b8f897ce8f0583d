#!/usr/bin/env python3
"""
Reset a user's password in the FurryMatch SQLite database.

The script does not read or reveal existing passwords.  It stores a
new PBKDF2 hash for the given login.

Usage:
    python reset_password.py --db ./furrymatch.db --login admin --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import asyncio
import getpass
import os
import sys
from typing import List, Optional

from furrymatch_api.app.core.config import settings
from furrymatch_api.app.repositories.user_repository import UserRepository
from furrymatch_api.app.services.user_service import UserService


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Reset a FurryMatch user password (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./furrymatch.db)")
    ap.add_argument("--login", required=True, help="Login of the user to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args(argv)

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        return 1

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    settings.database_url = os.path.abspath(args.db)
    service = UserService(UserRepository())
    if not asyncio.run(service.change_password(args.login, new_password)):
        print(f"[!] No user found with login: {args.login}", file=sys.stderr)
        return 2
    print(f"[+] Password updated for user: {args.login.lower()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
