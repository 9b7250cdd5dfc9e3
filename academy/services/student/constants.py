"""
Student service constants.
"""

from typing import Final

# Error messages
ERROR_EMAIL_PASSWORD_REQUIRED: Final[str] = "Email and password are required to create a login account"

# Success messages
SUCCESS_STUDENT_CREATED: Final[str] = "Student created successfully"
SUCCESS_STUDENT_ACCOUNT_CREATED: Final[str] = "Student and login account created successfully"
SUCCESS_STUDENT_UPDATED: Final[str] = "Student updated successfully"
SUCCESS_STUDENT_DEACTIVATED: Final[str] = "Student deactivated successfully"
SUCCESS_STUDENT_DELETED: Final[str] = "Student and related records deleted successfully"
SUCCESS_STATUS_UPDATED: Final[str] = "Student statuses updated successfully"
SUCCESS_STUDENTS_TRANSFERRED: Final[str] = "Students transferred successfully"
