"""
Create a user (e.g. first admin). Run from project root:
  python -m storefront.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m storefront.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import sys

from pydantic import ValidationError
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from storefront.core.config import get_settings
from storefront.core.database import SessionLocal
from storefront.core.security import hash_password
from storefront.models import USER_ROLES, User
from storefront.schemas.auth import RegisterRequest


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Storefront user (admins cannot self-register).")
    parser.add_argument("username", help="Username (3-30 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (6-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=USER_ROLES)
    args = parser.parse_args(argv)

    try:
        body = RegisterRequest(username=args.username, email=args.email, password=args.password)
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(loc) for loc in err["loc"])
            print(f"{field}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        existing = (
            db.query(User)
            .filter(or_(User.username == body.username, User.email == body.email))
            .first()
        )
        if existing:
            print(f"User '{body.username}' or '{body.email}' already exists.", file=sys.stderr)
            return 1
        user = User(
            username=body.username,
            email=body.email,
            password_hash=hash_password(body.password, rounds=get_settings().BCRYPT_ROUNDS),
            role=args.role,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            print(f"User '{body.username}' or '{body.email}' already exists.", file=sys.stderr)
            return 1
        print(f"Created user '{body.username}' with role '{args.role}' (id={user.id}).")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
