"""Domain-Oriented Observability for identity infrastructure.

Probes for repository operations following Domain-Oriented Observability patterns.
"""

from identity.infrastructure.observability.repository_probe import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)

__all__ = [
    "UserRepositoryProbe",
    "DefaultUserRepositoryProbe",
]
