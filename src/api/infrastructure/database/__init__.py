"""Database infrastructure - shared engine and ORM primitives."""

from infrastructure.database.engines import (
    build_async_url,
    create_engine,
    create_session_factory,
)
from infrastructure.database.models import Base

__all__ = [
    "Base",
    "build_async_url",
    "create_engine",
    "create_session_factory",
]
