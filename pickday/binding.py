"""Two-way binding between host-owned values and a widget.

The host keeps the value in a State and hands the widget a Binding, a
getter/setter pair. The widget never stores the bound value itself: it
reads through the binding and requests changes through it.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Binding(Generic[T]):
    """Read and write access to a value owned elsewhere."""

    get: Callable[[], T]
    set: Callable[[T], None]

    @classmethod
    def constant(cls, value: T) -> "Binding[T]":
        """A binding that always reads `value` and ignores writes."""
        return cls(lambda: value, lambda _: None)


class State(Generic[T]):
    """Host-side storage that notifies observers when its value changes.

    Setting a value equal to the current one is a no-op and notifies no one.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._observers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        for observer in list(self._observers):
            observer(value)

    def observe(self, observer: Callable[[T], None]) -> Callable[[], None]:
        """Register an observer.

        Returns:
            A function that removes the observer again.
        """
        self._observers.append(observer)

        def unobserve() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unobserve

    def binding(self) -> Binding[T]:
        return Binding(lambda: self._value, self.set)
