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


class UnauthorizedError(Exception):
    """Caller is not allowed to mutate."""

    def __init__(self, message: str = "Unauthorized"):
        self.message = message
        super().__init__(self.message)


EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_lang(lang: str, supported: list[str]) -> None:
    """Validate lang is one of the supported languages."""
    if lang not in supported:
        raise ValidationError(f"Unsupported lang: {lang}. Must be one of: {', '.join(supported)}")


def validate_email(email: str | None) -> None:
    """Validate a lead email address."""
    if not email or not isinstance(email, str) or not EMAIL_RE.match(email.strip()):
        raise ValidationError("Valid email is required")
