from __future__ import annotations

"""Load-order independent hand-off of an ImplementorMap to its consumer.

The data side calls `publish(map)`; the consumer side calls
`install_consumer(callback)`. Whichever runs second completes the delivery:

- consumer first: `publish` finds the callback and invokes it right away
- data first: `publish` parks the map in the pending slot and
  `install_consumer` drains it when the consumer shows up

Delivery happens at most once per cell. After that both operations are
no-ops until `reset()`.
"""

import logging
import threading
from collections.abc import Callable
from enum import Enum

from .entries import ImplementorMap


logger = logging.getLogger(__name__)

ImplementorCallback = Callable[[ImplementorMap], object]


class HandoffState(str, Enum):
    IDLE = "idle"
    CONSUMER_READY = "consumer-ready"
    DATA_PENDING = "data-pending"
    DELIVERED = "delivered"


class HandoffCell:
    """Process-wide slot pair shared by a data module and its consumer.

    Holds the installed consumer callback and the pending map. Neither side
    owns the cell; each only ever writes its own half.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._callback: ImplementorCallback | None = None
        self._pending: ImplementorMap | None = None
        self._state = HandoffState.IDLE

    @property
    def state(self) -> HandoffState:
        with self._lock:
            return self._state

    @property
    def pending(self) -> ImplementorMap | None:
        """The parked map, if the data side published before any consumer."""
        with self._lock:
            return self._pending

    @property
    def callback(self) -> ImplementorCallback | None:
        with self._lock:
            return self._callback

    def publish(self, implementors: ImplementorMap) -> HandoffState:
        with self._lock:
            if self._state is HandoffState.DELIVERED:
                # A second data load after delivery is not re-delivered.
                logger.warning("implementors already delivered; ignoring re-publish")
                return self._state

            callback = self._callback
            if callback is None:
                if self._pending is not None:
                    logger.debug("overwriting pending implementors")
                self._pending = implementors
                self._state = HandoffState.DATA_PENDING
                logger.debug("no consumer installed; parked %d units", len(implementors))
                return self._state

            self._state = HandoffState.DELIVERED
            logger.debug("delivering %d units to installed consumer", len(implementors))
            callback(implementors)
            return self._state

    def install_consumer(self, callback: ImplementorCallback) -> HandoffState:
        """Install `callback` and drain the pending slot if data is already parked."""

        with self._lock:
            if self._state is HandoffState.DELIVERED:
                logger.warning("implementors already delivered; ignoring consumer install")
                return self._state

            self._callback = callback
            pending = self._pending
            if pending is None:
                self._state = HandoffState.CONSUMER_READY
                return self._state

            self._pending = None
            self._state = HandoffState.DELIVERED
            logger.debug("draining %d pending units into new consumer", len(pending))
            callback(pending)
            return self._state

    def reset(self) -> None:
        with self._lock:
            self._callback = None
            self._pending = None
            self._state = HandoffState.IDLE


HANDOFF = HandoffCell()


def publish(implementors: ImplementorMap, *, cell: HandoffCell | None = None) -> HandoffState:
    return (cell or HANDOFF).publish(implementors)


def install_consumer(callback: ImplementorCallback, *, cell: HandoffCell | None = None) -> HandoffState:
    return (cell or HANDOFF).install_consumer(callback)
