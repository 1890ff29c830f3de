"""Credential providers for the bearer token.

The API client and auth service receive a TokenStore instead of reading a
global, so tests and ephemeral sessions can swap in MemoryTokenStore.
"""
from abc import ABC, abstractmethod

from utils import app_config

_TOKEN_KEY = "token"


class TokenStore(ABC):
    """A single slot holding the bearer token string."""

    @abstractmethod
    def get_token(self) -> str | None: ...

    @abstractmethod
    def set_token(self, token: str) -> None: ...

    @abstractmethod
    def clear_token(self) -> None: ...

    def has_token(self) -> bool:
        return bool(self.get_token())


class MemoryTokenStore(TokenStore):
    def __init__(self, token: str | None = None):
        self._token = token

    def get_token(self) -> str | None:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def clear_token(self) -> None:
        self._token = None


class ConfigTokenStore(TokenStore):
    """Persists the token in ~/.finsync/config.json so it survives restarts."""

    def get_token(self) -> str | None:
        token = app_config.get_setting(_TOKEN_KEY)
        return token if isinstance(token, str) and token else None

    def set_token(self, token: str) -> None:
        app_config.set_setting(_TOKEN_KEY, token)

    def clear_token(self) -> None:
        app_config.set_setting(_TOKEN_KEY, None)
