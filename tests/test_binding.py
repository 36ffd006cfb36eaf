"""Tests for pickday.binding."""

from pickday.binding import Binding, State


class TestState:
    """Tests for State."""

    def test_set_notifies_observers(self) -> None:
        """Should pass the new value to every observer."""
        state = State(1)
        seen: list[int] = []
        state.observe(seen.append)

        state.set(2)
        state.value = 3

        assert seen == [2, 3]
        assert state.value == 3

    def test_equal_value_is_silent(self) -> None:
        """Should not notify when the value does not change."""
        state = State("a")
        seen: list[str] = []
        state.observe(seen.append)

        state.set("a")

        assert seen == []

    def test_unobserve(self) -> None:
        """Should stop notifying a removed observer."""
        state = State(0)
        seen: list[int] = []
        unobserve = state.observe(seen.append)

        unobserve()
        state.set(5)

        assert seen == []

    def test_binding_reads_and_writes(self) -> None:
        """Should read the live value and write back into the state."""
        state = State(0)
        binding = state.binding()

        binding.set(7)

        assert state.value == 7
        assert binding.get() == 7


class TestBinding:
    """Tests for Binding."""

    def test_constant_ignores_writes(self) -> None:
        """Should always read the same value."""
        binding = Binding.constant(True)

        binding.set(False)

        assert binding.get() is True
