"""Unit tests for ObservationContext."""

from infrastructure.observability import ObservationContext


class TestObservationContext:
    """Tests for ObservationContext."""

    def test_for_request_generates_id(self):
        """A correlation id is generated when none is supplied."""
        context = ObservationContext.for_request()
        assert context.request_id
        assert ObservationContext.for_request("req-9").request_id == "req-9"

    def test_as_dict_skips_unset_fields(self):
        context = ObservationContext(extra={"client": "web"})
        assert context.as_dict() == {"client": "web"}

    def test_with_actor_and_extra_return_new_contexts(self):
        base = ObservationContext(request_id="req-1")

        derived = base.with_actor("01ABC").with_extra(client="cli")

        assert base.actor_id is None
        assert derived.as_dict() == {
            "request_id": "req-1",
            "actor_id": "01ABC",
            "client": "cli",
        }
