"""One-shot loopback HTTP endpoint capturing an OAuth2 authorization code.

The listener binds before the authorize URL is shown, accepts exactly one
connection, answers it and shuts down. The code travels to the waiting caller
through a future owned by the accept task; the caller may race that future
against a cancellation event.
"""

from __future__ import annotations

import asyncio
import contextlib
import socket
from dataclasses import dataclass, field
from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING, Any

import httpx

from music_exporter.config.platforms import DEFAULT_CALLBACK_PORT
from music_exporter.domain.errors import AuthorizationError

if TYPE_CHECKING:
    from types import TracebackType

log = getLogger(__name__)

_MAX_HEADER_LINES = 100


@dataclass(frozen=True, slots=True)
class AuthorizationCode:
    value: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class CallbackOutcome:
    """How a single callback request is answered, and what it delivers."""

    status: HTTPStatus
    body: str
    code: str | None = None


def parse_callback_request(method: str, target: str) -> CallbackOutcome:
    if method.upper() != "GET" or not target.startswith("/"):
        return CallbackOutcome(HTTPStatus.BAD_REQUEST, "Invalid callback URL")
    try:
        params = httpx.URL(target).params
    except httpx.InvalidURL:
        return CallbackOutcome(HTTPStatus.BAD_REQUEST, "Invalid callback URL")

    code = params.get("code")
    if code:
        return CallbackOutcome(
            HTTPStatus.OK,
            "Authorization successful! You can close this window.",
            code=code,
        )
    error = params.get("error")
    if error:
        return CallbackOutcome(HTTPStatus.BAD_REQUEST, f"Authorization failed: {error}")
    return CallbackOutcome(HTTPStatus.BAD_REQUEST, "Missing authorization code")


async def _read_request(reader: asyncio.StreamReader) -> CallbackOutcome:
    try:
        request_line = (await reader.readline()).decode("latin-1").strip()
        for _ in range(_MAX_HEADER_LINES):
            line = await reader.readline()
            if line in (b"\r\n", b"\n", b""):
                break
    except ValueError:
        return CallbackOutcome(HTTPStatus.BAD_REQUEST, "Invalid callback URL")

    parts = request_line.split()
    if len(parts) != 3:  # noqa: PLR2004
        return CallbackOutcome(HTTPStatus.BAD_REQUEST, "Invalid callback URL")
    method, target, _version = parts
    return parse_callback_request(method, target)


async def _write_response(writer: asyncio.StreamWriter, outcome: CallbackOutcome) -> None:
    body = outcome.body.encode("utf-8")
    head = (
        f"HTTP/1.1 {outcome.status.value} {outcome.status.phrase}\r\n"
        "Content-Type: text/plain; charset=utf-8\r\n"
        f"Content-Length: {len(body)}\r\n"
        "Connection: close\r\n"
        "\r\n"
    )
    writer.write(head.encode("latin-1") + body)
    await writer.drain()


class AuthorizationListener:
    """Capture the ``code`` query parameter of a single OAuth2 redirect."""

    def __init__(self, *, host: str = "127.0.0.1", port: int = DEFAULT_CALLBACK_PORT) -> None:
        self.host = host
        self._requested_port = port
        self._bound_port: int | None = None
        self._socket: socket.socket | None = None
        self._task: asyncio.Task[None] | None = None
        self._delivery: asyncio.Future[AuthorizationCode] | None = None

    @property
    def port(self) -> int:
        """The bound port; differs from the requested one when binding port 0."""

        return self._bound_port if self._bound_port is not None else self._requested_port

    async def start(self) -> None:
        if self._task is not None:
            raise AuthorizationError("Authorization listener already started")
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.host, self._requested_port))
            sock.listen(1)
            sock.setblocking(False)
            self._bound_port = sock.getsockname()[1]
        except OSError as exc:
            sock.close()
            raise AuthorizationError(
                f"Failed to listen on {self.host}:{self._requested_port}", cause=exc
            ) from exc

        self._socket = sock
        delivery: asyncio.Future[AuthorizationCode] = asyncio.get_running_loop().create_future()
        self._delivery = delivery
        self._task = asyncio.create_task(self._serve_once(sock, delivery))
        log.info(f"Listening on: http://{self.host}:{self.port}")

    async def wait_for_code(self, *, cancel: asyncio.Event | None = None) -> AuthorizationCode:
        """Suspend until the redirect arrives or ``cancel`` is set, whichever is first."""

        delivery = self._delivery
        if delivery is None:
            raise AuthorizationError("Authorization listener was not started")

        cancel_waiter = asyncio.ensure_future(cancel.wait()) if cancel is not None else None
        waiters: list[asyncio.Future[Any]] = [delivery]
        if cancel_waiter is not None:
            waiters.append(cancel_waiter)
        try:
            done, _pending = await asyncio.wait(waiters, return_when=asyncio.FIRST_COMPLETED)
            if delivery not in done:
                raise AuthorizationError("Authorization cancelled before a code was received")
            code = delivery.result()
            log.info("Authorization code received - closing server")
            return code
        finally:
            if cancel_waiter is not None:
                cancel_waiter.cancel()
            await self.close()

    async def close(self) -> None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._close_socket()

    async def __aenter__(self) -> AuthorizationListener:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _serve_once(
        self,
        sock: socket.socket,
        delivery: asyncio.Future[AuthorizationCode],
    ) -> None:
        loop = asyncio.get_running_loop()
        try:
            try:
                conn, peer = await loop.sock_accept(sock)
            finally:
                self._close_socket()
            log.debug(f"Callback connection from {peer}")
            reader, writer = await asyncio.open_connection(sock=conn)
            try:
                outcome = await _read_request(reader)
                try:
                    await _write_response(writer, outcome)
                except ConnectionError as exc:
                    log.warning(f"Could not answer the authorization callback: {exc}")
            finally:
                writer.close()
                with contextlib.suppress(ConnectionError):
                    await writer.wait_closed()
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            if not delivery.done():
                delivery.set_exception(
                    AuthorizationError("Failed to handle the authorization callback", cause=exc)
                )
            return

        if outcome.code is not None:
            delivery.set_result(AuthorizationCode(outcome.code))
        else:
            log.error(f"Authorization callback rejected: {outcome.body}")
            delivery.set_exception(AuthorizationError(outcome.body))

    def _close_socket(self) -> None:
        sock, self._socket = self._socket, None
        if sock is not None:
            sock.close()


__all__ = [
    "AuthorizationCode",
    "AuthorizationListener",
    "CallbackOutcome",
    "parse_callback_request",
]
