"""
Queued notification dispatch.

Services call notify() after their own writes have completed. Messages go
onto an asyncio.Queue which a single background worker drains, applying a
bounded retry policy. A message that still fails after the last attempt is
logged and dropped; nothing is ever raised back into the request.
"""

import asyncio
import logging
from contextlib import suppress
from typing import Awaitable, Callable, Optional

from .interfaces import IMailer
from .models import EmailMessage

logger = logging.getLogger(__name__)


class QueuedNotifier:
    """
    INotifier implementation with a background delivery worker.

    The worker is started and stopped by the application lifespan.
    Retries back off linearly: retry_backoff_seconds * attempt.
    """

    def __init__(
        self,
        mailer: IMailer,
        max_attempts: int = 3,
        retry_backoff_seconds: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._mailer = mailer
        self._max_attempts = max(1, max_attempts)
        self._retry_backoff = retry_backoff_seconds
        self._sleep = sleep
        self._queue: asyncio.Queue[EmailMessage] = asyncio.Queue()
        self._worker: Optional[asyncio.Task] = None

    @property
    def pending(self) -> int:
        """Number of messages waiting for delivery."""
        return self._queue.qsize()

    @property
    def running(self) -> bool:
        return self._worker is not None and not self._worker.done()

    def notify(self, message: EmailMessage) -> None:
        self._queue.put_nowait(message)
        logger.debug("Queued email to %s: %s", message.to, message.subject)

    def start(self) -> None:
        """Start the delivery worker on the running event loop."""
        if self.running:
            return
        self._worker = asyncio.create_task(self._run(), name="notification-worker")
        logger.info("Notification worker started")

    async def stop(self, timeout: float = 5.0) -> None:
        """Drain queued messages (bounded by timeout) and stop the worker."""
        if self._worker is None:
            return
        try:
            await asyncio.wait_for(self._queue.join(), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Notification worker stopped with %d undelivered message(s)",
                self.pending,
            )
        self._worker.cancel()
        with suppress(asyncio.CancelledError):
            await self._worker
        self._worker = None
        logger.info("Notification worker stopped")

    async def deliver(self, message: EmailMessage) -> bool:
        """
        Send one message applying the retry policy.

        Returns:
            True if the message was delivered, False if every attempt failed
        """
        for attempt in range(1, self._max_attempts + 1):
            try:
                await self._mailer.send(message)
                return True
            except Exception as e:
                logger.warning(
                    "Email to %s failed (attempt %d/%d): %s",
                    message.to,
                    attempt,
                    self._max_attempts,
                    e,
                )
                if attempt < self._max_attempts:
                    await self._sleep(self._retry_backoff * attempt)

        logger.error(
            "Giving up on email to %s after %d attempt(s): %s",
            message.to,
            self._max_attempts,
            message.subject,
        )
        return False

    async def _run(self) -> None:
        while True:
            message = await self._queue.get()
            try:
                await self.deliver(message)
            finally:
                self._queue.task_done()
