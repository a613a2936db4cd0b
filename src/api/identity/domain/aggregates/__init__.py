"""Domain aggregates for identity context.

Aggregates are the core business objects containing state and business logic.
They enforce invariants and business rules without depending on infrastructure.
"""

from identity.domain.aggregates.user import User

__all__ = [
    "User",
]
