"""SQLAlchemy ORM models for identity bounded context.

These models map to database tables and are used by repository implementations.
"""

from identity.infrastructure.models.user import EMAIL_INDEX_NAME, UserModel

__all__ = [
    "EMAIL_INDEX_NAME",
    "UserModel",
]
