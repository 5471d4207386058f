"""Minimal reactive stores.

A store holds one value and calls its subscribers with the current value on
subscription and again after every change. Derived stores recompute from a
source store and cannot be set directly.
"""
import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S")

Subscriber = Callable[[T], None]
Unsubscriber = Callable[[], None]


class Readable(Generic[T]):
    def __init__(self, value: T):
        self._value = value
        self._subscribers: list[Subscriber[T]] = []

    def get(self) -> T:
        return self._value

    def subscribe(self, callback: Subscriber[T]) -> Unsubscriber:
        self._subscribers.append(callback)
        callback(self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        for callback in list(self._subscribers):
            try:
                callback(value)
            except Exception:
                logger.exception(f"Error in subscriber {callback!r}")


class Writable(Readable[T]):
    def set(self, value: T) -> None:
        self._set(value)

    def update(self, updater: Callable[[T], T]) -> None:
        self._set(updater(self._value))


class Derived(Readable[T], Generic[S, T]):
    def __init__(self, source: Readable[S], compute: Callable[[S], T]):
        self._compute = compute
        super().__init__(compute(source.get()))
        self._unsubscribe = source.subscribe(self._recompute)

    def _recompute(self, value: S) -> None:
        self._set(self._compute(value))
