"""Common models - base classes shared by all domains."""

from app.models.common.base import BaseEntity

__all__ = [
    "BaseEntity",
]
