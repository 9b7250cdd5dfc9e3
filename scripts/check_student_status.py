"""Print every student with its teacher and login account, then a summary."""

from __future__ import annotations

import argparse
import sys

from academy.config.logging import setup_logging
from academy.db.session import SessionLocal
from academy.models.enums import StudentStatus
from academy.schemas.common.pagination import PaginationParams
from academy.schemas.student import StudentFilters
from academy.services.student import create_student_service

PAGE_SIZE = 100


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the status of every student")
    parser.add_argument(
        "--status",
        default=None,
        choices=[s.value for s in StudentStatus],
        help="Only list students with this status",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(list(argv) if argv is not None else None)
    setup_logging()

    db = SessionLocal()
    try:
        service = create_student_service(db)
        filters = StudentFilters(status=args.status)
        page = 1
        while True:
            result = service.find_many(filters, PaginationParams(page=page, limit=PAGE_SIZE, sort_order="asc"))
            if result.is_failure:
                print(f"Could not list students: {result.error.message}", file=sys.stderr)
                return 1
            for student in result.data.students:
                teacher = (student.teacher.user.full_name or student.teacher.user.email) if student.teacher else "-"
                account = student.user.email if student.user else "no login account"
                print(f"{student.full_name:<30} {student.status.value:<9} teacher: {teacher:<25} {account}")
            if page * PAGE_SIZE >= result.data.total:
                break
            page += 1

        stats = service.get_statistics()
        if stats.is_failure:
            print(f"Could not compute statistics: {stats.error.message}", file=sys.stderr)
            return 1
        s = stats.data
        print(
            f"\nTotal: {s.total}  Active: {s.active}  Inactive: {s.inactive}  "
            f"Trial: {s.trial}  With login: {s.with_login_account}"
        )
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    raise SystemExit(main())
