"""Thin httpx wrapper mapping transport and schema failures onto exporter errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ValidationError

from music_exporter.domain.errors import ParseError, TransportError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from httpx._types import AuthTypes, QueryParamTypes

log = getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(slots=True, frozen=True)
class HttpConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    default_headers: Mapping[str, str] = field(
        default_factory=lambda: {"Accept": "application/json"}
    )


class HttpClient:
    """Async client owned by exactly one platform for the length of a run."""

    def __init__(
        self,
        config: HttpConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url or "",
            timeout=config.timeout_seconds,
            headers=dict(config.default_headers),
            transport=transport,
        )

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_model[M: BaseModel](
        self,
        url: str,
        model: type[M],
        *,
        params: QueryParamTypes | None = None,
        headers: Mapping[str, str] | None = None,
        what: str,
    ) -> M:
        response = await self._send("GET", url, params=params, headers=headers, what=what)
        return self._parse(response, model, what=what)

    async def post_form_model[M: BaseModel](
        self,
        url: str,
        model: type[M],
        *,
        data: Mapping[str, str],
        auth: AuthTypes | None = None,
        what: str,
    ) -> M:
        response = await self._send("POST", url, data=data, auth=auth, what=what)
        return self._parse(response, model, what=what)

    async def _send(
        self,
        method: str,
        url: str,
        *,
        what: str,
        params: QueryParamTypes | None = None,
        headers: Mapping[str, str] | None = None,
        data: Mapping[str, str] | None = None,
        auth: AuthTypes | None = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                headers=headers,
                data=data,
                auth=auth,
            )
        except httpx.HTTPError as exc:
            raise TransportError(
                f"{self.config.name}: failed to request {what}", cause=exc
            ) from exc

        if response.status_code != httpx.codes.OK:
            log.error(
                f"{self.config.name}: {what} returned {response.status_code}: {response.text}"
            )
            raise TransportError(
                f"{self.config.name}: failed to get {what} ({response.status_code})",
                status_code=response.status_code,
            )
        return response

    def _parse[M: BaseModel](self, response: httpx.Response, model: type[M], *, what: str) -> M:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise ParseError(f"{self.config.name}: failed to parse {what}", cause=exc) from exc
