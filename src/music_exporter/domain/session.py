"""Live platform credentials, held for the duration of one fetch run."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CookieSession:
    cookie: str = field(repr=False)
    user_id: str

    def headers(self) -> dict[str, str]:
        return {"cookie": self.cookie}


@dataclass(frozen=True, slots=True)
class BearerSession:
    access_token: str = field(repr=False)

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}


@dataclass(frozen=True, slots=True)
class ApiKeySession:
    """Bearer token plus a separate API key sent as a query parameter."""

    access_token: str = field(repr=False)
    api_key: str = field(repr=False)

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}


type PlatformSession = CookieSession | BearerSession | ApiKeySession


__all__ = ["ApiKeySession", "BearerSession", "CookieSession", "PlatformSession"]
