"""
Confirmation providers used to pause the setup for user input.

The orchestrator only depends on ``ConfirmationProvider.confirm``, so tests can
substitute a deterministic answer for real keyboard input.
"""

import asyncio
import logging
import threading
from abc import ABC, abstractmethod

from rich.console import Console

log = logging.getLogger(__name__)


class ConfirmationProvider(ABC):
    """Blocks until the user answers a prompt."""

    @abstractmethod
    async def confirm(self, message: str) -> bool:
        """Returns True to go ahead, False to stop."""


class ConsoleConfirmation(ConfirmationProvider):
    """
    Waits for one line on stdin. Any line (including an empty one) counts as
    consent; end of input counts as a refusal. There is no timeout; Ctrl+C
    cancels the wait.
    """

    def __init__(self, console: Console):
        self.console = console

    async def confirm(self, message: str) -> bool:
        loop = asyncio.get_running_loop()
        answered: asyncio.Future[bool] = loop.create_future()

        def _resolve(result: bool) -> None:
            if not answered.done():
                answered.set_result(result)

        def _wait_for_line() -> None:
            try:
                self.console.input(message)
                result = True
            except EOFError:
                log.debug("Input closed while waiting for confirmation.")
                result = False
            if not loop.is_closed():
                loop.call_soon_threadsafe(_resolve, result)

        # A daemon reader is abandoned on Ctrl+C instead of blocking shutdown
        threading.Thread(
            target=_wait_for_line, name="stdin-reader", daemon=True
        ).start()
        return await answered


class AutoConfirmation(ConfirmationProvider):
    """Answers every prompt with a fixed value without reading input."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.messages: list[str] = []

    async def confirm(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer
