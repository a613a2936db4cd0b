"""Request-scoped metadata bound to identity probes.

A probe bound to a context adds the context's fields to every event it
records, so sign-up, login and profile events of one request correlate.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from ulid import ULID


@dataclass(frozen=True)
class ObservationContext:
    """Immutable per-request metadata for identity events.

    Attributes:
        request_id: Correlation id of the request being handled
        actor_id: Id of the authenticated caller, once known
        extra: Caller-supplied fields such as client name or address

    Example:
        context = ObservationContext.for_request()
        probe = DefaultAuthenticationProbe().with_context(context)
    """

    request_id: str | None = None
    actor_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_request(cls, request_id: str | None = None) -> ObservationContext:
        """Start a context, generating a ULID correlation id if none is given."""
        return cls(request_id=request_id or str(ULID()))

    def as_dict(self) -> dict[str, Any]:
        """Flatten to logging kwargs, skipping unset fields."""
        fields = {"request_id": self.request_id, "actor_id": self.actor_id}
        bound = {key: value for key, value in fields.items() if value is not None}
        return {**bound, **self.extra}

    def with_actor(self, actor_id: str) -> ObservationContext:
        return replace(self, actor_id=actor_id)

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        return replace(self, extra={**self.extra, **kwargs})
