#!/usr/bin/env python3
"""
Create an admin account, or reset the password of an existing one.

The password is stored as a PBKDF2-HMAC-SHA256 hash ("salthex$hashhex").

Usage:
    python create_admin.py --email admin@example.com --password "NewStrongPass!234"
    python create_admin.py --email admin@example.com --db ./data/library.db

If --password is omitted, you will be prompted to enter it securely.
"""
import argparse
import asyncio
import getpass
import logging
import sys

from config import settings
from database import Database
from repositories.admin_repo import AdminRepository
from utils.security import hash_password


async def create_admin(db_path: str, email: str, password: str) -> int:
    # One connection is enough for a one-off write
    await Database.initialize(db_path=db_path, pool_size=1)
    try:
        return await AdminRepository.upsert(email, hash_password(password))
    finally:
        await Database.close()


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Create or reset a library admin account.")
    ap.add_argument("--email", required=True, help="Admin email")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    ap.add_argument("--db", default=settings.DATABASE_URL, help="Path to SQLite DB file")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.email.strip():
        print("[!] Empty email is not allowed.", file=sys.stderr)
        return 1

    password = args.password or getpass.getpass("Enter admin password: ")
    if not password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    admin_id = asyncio.run(create_admin(args.db, args.email.strip(), password))
    print(f"[+] Admin {args.email} saved (id={admin_id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
