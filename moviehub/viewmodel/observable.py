# moviehub/viewmodel/observable.py
"""
Replay-latest observable values.

A StateSlot hands its current value to every new observer straight away and
then every value that differs from the previous one (or every value the owner
forces through). There is no queue: a slow consumer of ``stream()`` only ever
sees the most recent value.

All calls are expected on the event loop thread.
"""
import asyncio
from typing import AsyncIterator, Callable, Generic, List, TypeVar

T = TypeVar("T")

Observer = Callable[[T], None]


class StateSlot(Generic[T]):
    """Read-only side of an observable value."""

    def __init__(self, initial: T):
        self._value = initial
        self._observers: List[Observer] = []

    @property
    def value(self) -> T:
        return self._value

    def observe(self, observer: Observer) -> Callable[[], None]:
        """Register *observer*, call it with the current value, return an unsubscribe callable."""
        self._observers.append(observer)
        observer(self._value)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    async def stream(self) -> AsyncIterator[T]:
        # maxsize=1 keeps only the latest undelivered value
        queue: asyncio.Queue = asyncio.Queue(maxsize=1)

        def _push(value: T) -> None:
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(value)

        unsubscribe = self.observe(_push)
        try:
            while True:
                yield await queue.get()
        finally:
            unsubscribe()


class MutableStateSlot(StateSlot[T]):
    """Writable slot; only the owner of the state should hold one."""

    def set_value(self, value: T, force: bool = False) -> bool:
        """
        Store *value* and notify observers. An equal value is ignored unless
        *force* is set; returns whether observers were notified.
        """
        if not force and value == self._value:
            return False
        self._value = value
        for observer in list(self._observers):
            observer(value)
        return True

    def clear_observers(self) -> None:
        self._observers.clear()
