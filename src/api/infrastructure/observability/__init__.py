"""Observation context shared by the identity domain probes."""

from infrastructure.observability.context import ObservationContext

__all__ = ["ObservationContext"]
