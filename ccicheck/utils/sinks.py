"""Info sinks for validation diagnostics.

A sink receives the human-readable reason a check rejected its input.
The caller decides where the messages end up.
"""

import logging
from typing import Callable, List

from rich.console import Console
from rich.markup import escape

InfoSink = Callable[[str], None]

logger = logging.getLogger("ccicheck")


def log_sink(target: logging.Logger = logger) -> InfoSink:
    """Sink that forwards messages to ``target.info``."""
    return target.info


def console_sink(console: Console, style: str = "yellow") -> InfoSink:
    """Sink that prints messages to a rich console."""
    def _print(message: str) -> None:
        console.print(f"[{style}]{escape(message)}[/{style}]")
    return _print


class CollectingSink:
    """Sink that keeps every message, optionally forwarding it."""

    def __init__(self, forward: InfoSink = None):
        self.messages: List[str] = []
        self.forward = forward

    def __call__(self, message: str) -> None:
        self.messages.append(message)
        if self.forward is not None:
            self.forward(message)

    def clear(self):
        self.messages.clear()
