"""Shared peripheral bookkeeping and event broadcasting for adapters."""

from __future__ import annotations

import asyncio
import logging
import weakref
from collections import deque
from collections.abc import AsyncIterator, Hashable
from typing import Any, Generic, TypeVar

from btlecore.api import CentralEvent, DeviceDisconnected, Peripheral, ValueNotification

_log = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P", bound=Peripheral)


class BroadcastReceiver(Generic[T]):
    """One subscriber's view of a broadcast channel.

    If the subscriber falls more than ``capacity`` items behind, the oldest
    unread items are dropped and reading continues with the oldest retained.
    """

    def __init__(self, capacity: int) -> None:
        self._buffer: deque[T] = deque(maxlen=capacity)
        self._waiter: asyncio.Future[None] | None = None

    def _push(self, item: T) -> None:
        self._buffer.append(item)
        if self._waiter is not None and not self._waiter.done():
            self._waiter.set_result(None)

    def __aiter__(self) -> BroadcastReceiver[T]:
        return self

    async def __anext__(self) -> T:
        while not self._buffer:
            self._waiter = asyncio.get_running_loop().create_future()
            try:
                await self._waiter
            finally:
                self._waiter = None
        return self._buffer.popleft()


class BroadcastChannel(Generic[T]):
    """A multi-subscriber channel; each subscriber sees items sent after it joined."""

    def __init__(self, capacity: int = 16) -> None:
        if capacity <= 0:
            raise ValueError("broadcast channel capacity must be positive")
        self._capacity = capacity
        self._receivers: weakref.WeakSet[BroadcastReceiver[T]] = weakref.WeakSet()

    def send(self, item: T) -> int:
        """Deliver an item to every live subscriber and return how many there were."""
        receivers = list(self._receivers)
        for receiver in receivers:
            receiver._push(item)
        return len(receivers)

    def subscribe(self) -> BroadcastReceiver[T]:
        """Create a receiver for items sent from now on."""
        receiver: BroadcastReceiver[T] = BroadcastReceiver(self._capacity)
        self._receivers.add(receiver)
        return receiver


async def _drain(receiver: BroadcastReceiver[Any]) -> AsyncIterator[Any]:
    async for item in receiver:
        yield item


def notifications_stream_from_broadcast_receiver(
    receiver: BroadcastReceiver[ValueNotification],
) -> AsyncIterator[ValueNotification]:
    """Turn a receiver of value notifications into an async stream."""
    return _drain(receiver)


class AdapterManager(Generic[P]):
    """Tracks known peripherals and broadcasts central events to subscribers."""

    def __init__(self, capacity: int = 16) -> None:
        self._peripherals: dict[Hashable, P] = {}
        self._events: BroadcastChannel[CentralEvent] = BroadcastChannel(capacity)

    def emit(self, event: CentralEvent) -> None:
        """Broadcast an event; a disconnect also forgets the peripheral."""
        if isinstance(event, DeviceDisconnected):
            self._peripherals.pop(event.id, None)
        if self._events.send(event) == 0:
            _log.debug("Lost central event, while nothing subscribed: %r", event)

    def event_stream(self) -> AsyncIterator[CentralEvent]:
        """Subscribe now and return a stream of subsequent events."""
        return _drain(self._events.subscribe())

    def add_peripheral(self, peripheral: P) -> None:
        """Register a peripheral; its identifier must not be known yet."""
        peripheral_id = peripheral.id()
        if peripheral_id in self._peripherals:
            raise ValueError("Adding a peripheral that's already in the map.")
        self._peripherals[peripheral_id] = peripheral

    def peripherals(self) -> list[P]:
        """Return all known peripherals."""
        return list(self._peripherals.values())

    def peripheral(self, peripheral_id: Hashable) -> P | None:
        """Return the peripheral with this identifier, or None."""
        return self._peripherals.get(peripheral_id)