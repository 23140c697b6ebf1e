"""Utility script to register a dashboard user who can receive build emails."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from app.domain.entities import User
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.repositories import UserRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Register a user that build notification emails can be sent to.",
    )
    parser.add_argument("email", help="Email address notifications are delivered to")
    parser.add_argument("--first-name", default="", help="Given name of the user")
    parser.add_argument("--last-name", default="", help="Family name of the user")
    parser.add_argument("--institution", default="", help="Institution the user belongs to")
    parser.add_argument(
        "--admin",
        action="store_true",
        help="Grant dashboard administrator rights to the user.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    initialize_database()

    session = SessionLocal()
    try:
        repository = UserRepository(session)
        if repository.get_by_email(args.email) is not None:
            raise SystemExit(f"A user with email {args.email} already exists.")
        user = repository.create(
            User(
                id=None,
                email=args.email,
                first_name=args.first_name,
                last_name=args.last_name,
                institution=args.institution,
                is_admin=args.admin,
            )
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not save the user: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.full_name or '-'}\n"
            f"  Email: {user.email}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
