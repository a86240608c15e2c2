"""API errors and validation helpers."""

import re


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_user_id(user_id: str, field: str = "user_id") -> None:
    """Validate a user id is present."""
    if not user_id or not user_id.strip():
        raise ValidationError(f"{field} is required")


def validate_admin(admin_id: str, admin_email: str) -> None:
    """Validate the acting admin identity."""
    validate_user_id(admin_id, "admin_id")
    if not EMAIL_RE.match(admin_email or ""):
        raise ValidationError(f"Invalid admin email: {admin_email!r}")
