import argparse
import getpass

from app.core.database import SessionLocal, init_db
from app.core.errors import AppError
from app.users.services.user_service import UserService


def main():
    parser = argparse.ArgumentParser(description="Create an admin account or promote an existing user.")
    parser.add_argument("email")
    parser.add_argument("--name", help="Display name when creating a new account")
    parser.add_argument("--promote", action="store_true", help="Promote an already registered user")
    args = parser.parse_args()

    init_db()
    db = SessionLocal()
    try:
        service = UserService(db)
        if args.promote:
            user = service.promote_to_admin(args.email)
        else:
            password = getpass.getpass("Password: ")
            user = service.register(args.name or args.email.split("@")[0], args.email, password, role="admin")
        print(f"Admin ready: {user.user_id} <{user.email}>")
    except AppError as e:
        print(f"Error: {e.message}")
        for error in e.errors or []:
            print(f"  - {error['field']}: {error['message']}")
        raise SystemExit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
