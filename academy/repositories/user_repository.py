"""
User and teacher repositories.
"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from academy.core.exceptions import TeacherNotFoundError
from academy.models.user import Teacher, User
from academy.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Login accounts."""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def find_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup by login email."""
        if not email:
            return None
        return (
            self.db.query(User)
            .filter(func.lower(User.email) == email.strip().lower())
            .first()
        )

    def email_taken(self, email: str) -> bool:
        return self.find_by_email(email) is not None


class TeacherRepository(BaseRepository[Teacher]):
    """Teacher profiles."""

    not_found_error = TeacherNotFoundError

    def __init__(self, db: Session):
        super().__init__(Teacher, db)

    def find_by_user_id(self, user_id: str) -> Optional[Teacher]:
        return self.db.query(Teacher).filter(Teacher.user_id == str(user_id)).first()
