"""OAuth2 authorization-code support shared by the platform adapters."""

from __future__ import annotations

from .flow import (
    CodeProvider,
    browser_code_provider,
    cancel_on_interrupt,
    obtain_authorization_code,
)
from .listener import (
    AuthorizationCode,
    AuthorizationListener,
    CallbackOutcome,
    parse_callback_request,
)
from .token import AccessTokenResponse, build_authorize_url, exchange_code

__all__ = [
    "AccessTokenResponse",
    "AuthorizationCode",
    "AuthorizationListener",
    "CallbackOutcome",
    "CodeProvider",
    "browser_code_provider",
    "build_authorize_url",
    "cancel_on_interrupt",
    "exchange_code",
    "obtain_authorization_code",
    "parse_callback_request",
]
