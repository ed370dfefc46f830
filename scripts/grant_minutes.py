# scripts/grant_minutes.py
import argparse

from app.db.session import SessionLocal, engine, init_db
from app.errors import NotFoundError
from app.services.user_service import create_user, get_user_by_email, set_user_minutes


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Set a user's minutes balance, creating the user if needed."
    )
    parser.add_argument("email")
    parser.add_argument("minutes", type=int)
    parser.add_argument("--name", default="Local User")
    args = parser.parse_args()

    init_db(engine)

    db = SessionLocal()
    try:
        try:
            user = get_user_by_email(db, args.email)
            print(f"Reusing existing user id={user.id} ({user.email})")
        except NotFoundError:
            user = create_user(db, email=args.email, name=args.name)
            print(f"Created user id={user.id} ({user.email})")

        user = set_user_minutes(db, user.id, args.minutes)
        print(f"User {user.email} now has {user.minutes} minutes")
    finally:
        db.close()


if __name__ == "__main__":
    main()
