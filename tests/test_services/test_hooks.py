"""Tests for the hook registry."""

from unittest.mock import Mock

from dockhand.services.hooks import ServiceHooks
from dockhand.services.state import ServiceState


class TestServiceHooks:
    """Test ServiceHooks."""

    def test_execute_matches_state(self):
        """Only hooks registered for the executed state run."""
        hooks = ServiceHooks()
        running = Mock()
        stopped = Mock()
        hooks.add_hook("a", ServiceState.RUNNING, running)
        hooks.add_hook("b", ServiceState.STOPPED, stopped)
        service = object()

        hooks.execute(service, ServiceState.RUNNING)

        running.assert_called_once_with(service, ServiceState.RUNNING)
        stopped.assert_not_called()

    def test_insertion_order(self):
        """Hooks run in the order they were added."""
        hooks = ServiceHooks()
        order = []
        for key in ("one", "two", "three"):
            hooks.add_hook(key, ServiceState.REMOVED, lambda svc, state, key=key: order.append(key))

        hooks.execute(None, ServiceState.REMOVED)

        assert order == ["one", "two", "three"]

    def test_readding_key_replaces_in_place(self):
        """A re-registered key keeps its position with the new callback."""
        hooks = ServiceHooks()
        order = []
        hooks.add_hook("one", ServiceState.RUNNING, lambda svc, state: order.append("old"))
        hooks.add_hook("two", ServiceState.RUNNING, lambda svc, state: order.append("two"))
        hooks.add_hook("one", ServiceState.RUNNING, lambda svc, state: order.append("new"))

        hooks.execute(None, ServiceState.RUNNING)

        assert order == ["new", "two"]
        assert len(hooks) == 2

    def test_remove_hook(self):
        """Removed hooks no longer run; unknown keys are ignored."""
        hooks = ServiceHooks()
        hook = Mock()
        hooks.add_hook("a", ServiceState.RUNNING, hook)

        hooks.remove_hook("a")
        hooks.remove_hook("missing")
        hooks.execute(None, ServiceState.RUNNING)

        hook.assert_not_called()
        assert "a" not in hooks

    def test_mutation_during_execute(self):
        """Hooks may add and remove hooks while the registry is executing."""
        hooks = ServiceHooks()
        late = Mock()
        removed = Mock()

        def mutate(svc, state):
            hooks.remove_hook("removed")
            hooks.add_hook("late", ServiceState.RUNNING, late)

        hooks.add_hook("mutate", ServiceState.RUNNING, mutate)
        hooks.add_hook("removed", ServiceState.RUNNING, removed)

        hooks.execute(None, ServiceState.RUNNING)
        removed.reset_mock()
        hooks.execute(None, ServiceState.RUNNING)

        removed.assert_not_called()
        late.assert_called_with(None, ServiceState.RUNNING)
        assert "late" in hooks

    def test_failing_hook_is_isolated(self):
        """An exception in one hook does not stop the others."""
        hooks = ServiceHooks()
        after = Mock()
        hooks.add_hook("broken", ServiceState.STOPPED, Mock(side_effect=RuntimeError("boom")))
        hooks.add_hook("after", ServiceState.STOPPED, after)

        hooks.execute(None, ServiceState.STOPPED)

        after.assert_called_once_with(None, ServiceState.STOPPED)
