from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar, Union

from .scheduler import UpdateScheduler

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Callback = Callable[[T], None]
Listener = Callable[[T], None]
Update = Union[T, Callable[[T], T]]


class DeferredState(Generic[T]):
    """State cell whose setter takes a callback run after the new value is committed.

    Creation schedules the mount commit, which commits the initial value and never
    fires a callback. A `set` issued before mount is committed on its own right
    after it, so its callback still runs. Every later commit notifies listeners
    first (the value is then observable), and only afterwards hands the committed
    value to the pending callback, once. A second `set` before commit replaces the
    pending callback. Unmounting drops queued updates and the pending callback
    without running them.

    `subscribe` is the host-facing render hook: a renderer registers there to
    redraw on every commit. Widgets themselves only read `current`.

    Example::

        checked = DeferredState(False, scheduler)
        checked.set(True, lambda value: print("now", value))
        scheduler.flush()
    """

    def __init__(self, initial: T | Callable[[], T], scheduler: UpdateScheduler) -> None:
        self._scheduler = scheduler
        self._value: T = initial() if callable(initial) else initial
        self._updates: list[Update[T]] = []
        self._pending_callback: Callback[T] | None = None
        self._listeners: list[Listener[T]] = []
        self._has_committed_once = False
        self._mounted = True
        self._commit_scheduled = True
        scheduler.schedule(self._commit)

    @property
    def current(self) -> T:
        return self._value

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def has_committed_once(self) -> bool:
        return self._has_committed_once

    @property
    def has_pending_callback(self) -> bool:
        return self._pending_callback is not None

    def set(self, value: Update[T], callback: Callback[T] | None = None) -> None:
        if not self._mounted:
            raise RuntimeError("cannot set state on an unmounted cell")
        self._pending_callback = callback
        self._updates.append(value)
        if not self._commit_scheduled:
            self._commit_scheduled = True
            self._scheduler.schedule(self._commit)

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def unmount(self) -> None:
        if not self._mounted:
            return
        self._mounted = False
        if self._pending_callback is not None:
            LOGGER.debug("discarding pending state callback on unmount")
        self._pending_callback = None
        self._updates.clear()
        self._listeners.clear()

    def _commit(self) -> None:
        self._commit_scheduled = False
        if not self._mounted:
            return
        if not self._has_committed_once:
            self._commit_mount()
            return
        updates, self._updates = self._updates, []
        value = self._value
        for update in updates:
            value = update(value) if callable(update) else update
        self._value = value
        for listener in list(self._listeners):
            listener(value)

        callback = self._pending_callback
        if callback is not None:
            self._pending_callback = None
            callback(value)

    def _commit_mount(self) -> None:
        # Commits the initial value only; updates queued before mount get a commit of their own.
        self._has_committed_once = True
        for listener in list(self._listeners):
            listener(self._value)
        if self._updates:
            self._commit_scheduled = True
            self._scheduler.schedule(self._commit)
