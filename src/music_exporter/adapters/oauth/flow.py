"""Browser-based authorization: show the URL, wait for the redirect."""

from __future__ import annotations

import asyncio
import signal
from contextlib import contextmanager
from logging import getLogger
from typing import TYPE_CHECKING

from .listener import AuthorizationCode, AuthorizationListener

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterator

    from music_exporter.config.platforms import CallbackConfig

type CodeProvider = Callable[[str], Awaitable[AuthorizationCode]]

log = getLogger(__name__)


def print_authorize_url(url: str) -> None:
    print(  # noqa: T201
        f"Please go to this url to get the authorization token (or hit CTRL+C): {url}",
        flush=True,
    )


@contextmanager
def cancel_on_interrupt() -> Iterator[asyncio.Event]:
    """Set the yielded event on SIGINT while the block runs.

    Where the loop cannot install signal handlers (Windows, non-main threads) the
    event is never set and Ctrl+C surfaces as ``KeyboardInterrupt`` instead.
    """

    cancel = asyncio.Event()
    loop = asyncio.get_running_loop()
    previous = signal.getsignal(signal.SIGINT)
    installed = False
    try:
        loop.add_signal_handler(signal.SIGINT, cancel.set)
        installed = True
    except (NotImplementedError, RuntimeError, ValueError):
        log.debug("SIGINT handler not available; relying on KeyboardInterrupt")
    try:
        yield cancel
    finally:
        if installed:
            loop.remove_signal_handler(signal.SIGINT)
            # remove_signal_handler resets to default_int_handler
            if previous is not None:
                signal.signal(signal.SIGINT, previous)


async def obtain_authorization_code(
    authorize_url: str,
    *,
    callback: CallbackConfig,
    notify: Callable[[str], None] = print_authorize_url,
) -> AuthorizationCode:
    async with AuthorizationListener(host=callback.host, port=callback.port) as listener:
        notify(authorize_url)
        with cancel_on_interrupt() as cancel:
            return await listener.wait_for_code(cancel=cancel)


def browser_code_provider(callback: CallbackConfig) -> CodeProvider:
    async def provide(authorize_url: str) -> AuthorizationCode:
        return await obtain_authorization_code(authorize_url, callback=callback)

    return provide
