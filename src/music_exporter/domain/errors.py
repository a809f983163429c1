"""Error taxonomy shared by every layer of the exporter."""

from __future__ import annotations


class MusicExporterError(RuntimeError):
    """Base error carrying a human-readable message and an optional cause."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} - caused by: {self.cause}"


class AuthorizationError(MusicExporterError):
    """Raised when the OAuth handshake cannot produce a usable code or token."""


class TransportError(MusicExporterError):
    """Raised on network failures and non-success HTTP responses."""

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code


class ParseError(MusicExporterError):
    """Raised when a payload does not match the expected schema."""


__all__ = [
    "AuthorizationError",
    "MusicExporterError",
    "ParseError",
    "TransportError",
]
