"""Infrastructure adapters for identity bounded context."""
