"""
Caller-side reactions to a publish outcome.
"""

from dataclasses import dataclass
from typing import Callable, Protocol

import httpx


class ResponseHandler(Protocol):
    """Receives the final outcome of a publish call.

    ``on_error`` fires when no usable response exists (transport failure, or
    an early step failing with anything but 401). ``on_loaded`` fires with a
    response the caller must inspect to decide whether it means success.
    """

    def on_error(self) -> None:
        ...

    def on_loaded(self, response: httpx.Response) -> None:
        ...


@dataclass
class CallbackResponseHandler:
    """ResponseHandler built from two plain callables."""

    error_callback: Callable[[], None]
    loaded_callback: Callable[[httpx.Response], None]

    def on_error(self) -> None:
        self.error_callback()

    def on_loaded(self, response: httpx.Response) -> None:
        self.loaded_callback(response)
