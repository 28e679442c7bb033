"""Subscriber queues for decoded sentences pushed to WebSocket clients.

All functions run on the event loop thread: sentences arrive through the
HTTP handlers, which already execute there.
"""

import asyncio
import logging

__all__ = [
    "add_subscriber",
    "broadcast_message",
    "remove_subscriber",
    "subscriber_count",
]

_LOGGER = logging.getLogger(__name__)

_subscriber_queues: list[asyncio.Queue[str]] = []


def add_subscriber(queue: asyncio.Queue[str]) -> None:
    """Register a queue to receive every accepted sentence."""
    _subscriber_queues.append(queue)
    _LOGGER.debug("Subscriber added, %d active", len(_subscriber_queues))


def remove_subscriber(queue: asyncio.Queue[str]) -> None:
    """Stop delivering sentences to *queue*."""
    _subscriber_queues.remove(queue)
    _LOGGER.debug("Subscriber removed, %d active", len(_subscriber_queues))


def subscriber_count() -> int:
    return len(_subscriber_queues)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    # Slow clients lose their oldest sentence rather than stalling producers.
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


def broadcast_message(message: str) -> int:
    """Deliver *message* to every subscriber and return how many received it."""
    queues = list(_subscriber_queues)
    for queue in queues:
        _enqueue_message(queue, message)
    return len(queues)
