"""Create the first system user.

Usage:
    python -m backend.create_admin NAME EMAIL PASSWORD [ROLE]
"""
import sys

from sqlalchemy.exc import SQLAlchemyError

from backend.auth.authenticator import register_system_user
from backend.database import Base, SessionLocal, engine
from backend.models import user  # noqa: F401


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) not in (3, 4):
        print(__doc__.strip(), file=sys.stderr)
        return 2

    name, email, password = args[:3]
    role = args[3] if len(args) == 4 else "admin"

    Base.metadata.create_all(bind=engine, tables=[user.SystemUser.__table__])
    db = SessionLocal()
    try:
        created = register_system_user(db, name, email, password, role)
    except SQLAlchemyError as exc:
        db.rollback()
        print(f"Could not create admin: {exc}", file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f"Admin registered with id {created.id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
