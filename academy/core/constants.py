"""
Application-wide constants.
"""

from typing import Final, FrozenSet

# Pagination
DEFAULT_PAGE: Final[int] = 1
MAX_PAGE_SIZE: Final[int] = 100
DEFAULT_SORT_BY: Final[str] = "created_at"
DEFAULT_SORT_ORDER: Final[str] = "desc"
SORT_ORDERS: Final[FrozenSet[str]] = frozenset({"asc", "desc"})

# Columns a student listing may be ordered by
STUDENT_SORTABLE_FIELDS: Final[FrozenSet[str]] = frozenset({
    "created_at",
    "updated_at",
    "full_name",
    "age",
    "status",
    "contact_email",
})
