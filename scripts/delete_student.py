"""Delete a student, all of its related records and its login account."""

from __future__ import annotations

import argparse
import sys

from academy.config.logging import setup_logging
from academy.db.session import SessionLocal
from academy.repositories.student_repository import StudentRepository
from academy.services.student import create_student_service


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Delete a student by email")
    parser.add_argument("email", help="Contact email or login email of the student")
    parser.add_argument(
        "--keep-account",
        action="store_true",
        help="Leave the student's login account in place",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(list(argv) if argv is not None else None)
    setup_logging()

    db = SessionLocal()
    try:
        student = StudentRepository(db).find_by_email(args.email)
        if student is None:
            print(f"No student with email {args.email!r} found", file=sys.stderr)
            return 1

        print(f"Deleting {student.full_name} ({student.id})")
        result = create_student_service(db).delete(student.id, delete_account=not args.keep_account)
        if result.is_failure:
            print(f"Delete failed: {result.error.message}", file=sys.stderr)
            return 1

        for table, count in result.data.items():
            print(f"  {table}: {count}")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    raise SystemExit(main())
