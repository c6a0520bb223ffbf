"""
Create an account (e.g. the first admin). Run from project root:
  python -m storefront.scripts.create_user EMAIL PASSWORD NAME [--nickname NICK] [--role admin]
Example:
  python -m storefront.scripts.create_user admin@shop.com your-secure-password Admin --role admin
"""
import argparse
import logging
import sys
from datetime import UTC, datetime

from pydantic import ValidationError

from storefront.core.database import SessionLocal
from storefront.core.security import hash_password
from storefront.models import Role, User
from storefront.repositories import users as user_store
from storefront.schemas.user import SignupRequest

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a storefront account.")
    parser.add_argument("email", help="Login email (unique)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("name", help="Display name")
    parser.add_argument("--nickname", default=None, help="Nickname (defaults to name)")
    parser.add_argument(
        "--role",
        default=Role.USER.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    # Same validation and email normalization as API signups.
    try:
        body = SignupRequest(
            email=args.email.strip(),
            password=args.password,
            name=args.name,
            nickname=args.nickname or args.name,
        )
    except ValidationError as e:
        for error in e.errors():
            logger.error("Invalid %s: %s", ".".join(str(p) for p in error["loc"]), error["msg"])
        return 1

    db = SessionLocal()
    try:
        if user_store.find_by_email(db, body.email) is not None:
            logger.error("User '%s' already exists.", body.email)
            return 1
        now = datetime.now(UTC)
        user = user_store.save(
            db,
            User(
                email=body.email,
                password_hash=hash_password(body.password),
                name=body.name,
                nickname=body.nickname,
                role=args.role,
                created_at=now,
                updated_at=now,
            ),
        )
        db.commit()
        logger.info("Created user '%s' (id=%s) with role '%s'.", body.email, user.id, args.role)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
