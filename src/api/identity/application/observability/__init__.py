"""Domain-Oriented Observability for identity application layer.

Probes for use-case handlers following Domain-Oriented Observability patterns.
"""

from identity.application.observability.authentication_probe import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from identity.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "AuthenticationProbe",
    "DefaultAuthenticationProbe",
    "UserServiceProbe",
    "DefaultUserServiceProbe",
]
