#!/usr/bin/env python3
"""
Initialize the HackTrack database with tables and an admin identity.

This script creates all database tables and ensures the given account exists
and holds the admin role. Roles are never self-service: this script is the
out-of-band path for assigning them. Safe to run multiple times (idempotent).

Admin credentials can be provided via:
1. Command line arguments: --email, --password, --name
2. Environment variables: ADMIN_EMAIL, ADMIN_PASSWORD, ADMIN_NAME
3. Interactive prompts (if running interactively)

Use --grant-only to give the admin role to an already-provisioned account.
"""
import sys
import os
import getpass
import argparse

# Add backend directory to path
script_dir = os.path.dirname(os.path.abspath(__file__))
backend_dir = os.path.dirname(os.path.dirname(script_dir))
sys.path.insert(0, backend_dir)

from app.core.database import SessionLocal, init_db
from app.core.security import get_password_hash
from app.models.profile import Profile
from app.models.user import User
from app.models.user_role import ADMIN_ROLE
from app.repositories.role_repository import RoleRepository
from app.repositories.user_repository import UserRepository


def get_admin_credentials(args=None, need_password=True):
    """Get admin credentials from args, environment variables, or prompt"""
    # Priority: command line args > environment variables > interactive prompt
    email = (args.email if args and args.email else None) or os.environ.get("ADMIN_EMAIL")
    password = (args.password if args and args.password else None) or os.environ.get("ADMIN_PASSWORD")
    name = (args.name if args and args.name else None) or os.environ.get("ADMIN_NAME")

    if sys.stdin.isatty():
        if not email:
            email = input("Enter admin email: ").strip()
        if need_password and not password:
            password = getpass.getpass("Enter admin password: ")
            password_confirm = getpass.getpass("Confirm admin password: ")
            if password != password_confirm:
                print("[ERROR] Passwords do not match!")
                return None, None, None

    if not email or (need_password and not password):
        print("[ERROR] Admin credentials required. Provide via:")
        print("  - Command line: --email <email> --password <pass>")
        print("  - Environment: ADMIN_EMAIL, ADMIN_PASSWORD")
        print("  - Interactive prompts (when running in terminal)")
        return None, None, None

    if need_password and len(password) < 8:
        print("[ERROR] Password must be at least 8 characters long")
        return None, None, None

    return email.strip().lower(), password, name


def bootstrap_admin(db, email, password=None, name=None):
    """Ensure `email` exists and holds the admin role. Returns the user or None."""
    user_repo = UserRepository()
    user = user_repo.get_by_email(db, email)

    if user is None:
        if not password:
            print(f"[ERROR] No account exists for {email}")
            return None
        user = User(
            email=email,
            name=name,
            hashed_password=get_password_hash(password),
            email_verified=True,
            is_active=True,
        )
        user.profile = Profile(profile_completed=False)
        user = user_repo.create(db, user)
        print("[OK] Admin account created")
    else:
        print("[OK] Account already exists")

    RoleRepository().assign(db, user.id, ADMIN_ROLE)
    print(f"  User ID: {user.user_id}")
    print(f"  Email: {user.email}")
    print(f"  Roles: {', '.join(sorted(RoleRepository().get_roles(db, user.id)))}")
    return user


def main():
    """Main entry point with argument parsing"""
    parser = argparse.ArgumentParser(
        description="Initialize the database and ensure an admin account exists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode (prompts for credentials)
  python init_auth_database.py

  # With command line arguments
  python init_auth_database.py --email admin@example.com --password MySecurePass123

  # Grant the admin role to an existing account
  python init_auth_database.py --grant-only --email alice@example.com
        """
    )
    parser.add_argument("--email", "-e", help="Admin email address")
    parser.add_argument("--password", "-p", help="Admin password (min 8 characters)")
    parser.add_argument("--name", "-n", help="Admin display name")
    parser.add_argument("--grant-only", action="store_true", help="Only assign the admin role to an existing account")

    args = parser.parse_args()

    print("Initializing database...")
    init_db()
    print("[OK] Database tables created")

    email, password, name = get_admin_credentials(args, need_password=not args.grant_only)
    if not email:
        sys.exit(1)

    db = SessionLocal()
    try:
        user = bootstrap_admin(db, email, None if args.grant_only else password, name)
    finally:
        db.close()
    sys.exit(0 if user else 1)


if __name__ == "__main__":
    main()
