"""Declarative base for the service's ORM models."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Index and constraint names are deterministic so an IntegrityError can be
# traced back to the constraint that raised it.
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for identity ORM models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
