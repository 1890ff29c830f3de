import logging
import re

from services.api_client import ApiClient
from services.errors import ApiError, ValidationError, error_message
from services.token_store import TokenStore
from utils.constants import (
    LOGIN_ERROR_FALLBACK,
    MIN_PASSWORD_LENGTH,
    REGISTER_ERROR_FALLBACK,
)

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email or ""))


def validate_signup(name: str, email: str, password: str, confirm_password: str) -> dict[str, str]:
    """Field -> message for the signup form; empty dict when valid."""
    errors: dict[str, str] = {}
    if not (name or "").strip():
        errors["name"] = "Full name is required"
    if not email:
        errors["email"] = "Email is required"
    elif not is_valid_email(email):
        errors["email"] = "Please enter a valid email"
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    if password != confirm_password:
        errors["confirm_password"] = "Passwords do not match"
    return errors


class AuthService:
    """Login, signup and logout on top of the API client and token store.

    Both entry points raise ValidationError with a field -> message mapping;
    server failures on login/signup are folded into the 'form' key so the
    dialogs only ever deal with one error type.
    """

    def __init__(self, api: ApiClient, token_store: TokenStore):
        self._api = api
        self._tokens = token_store

    def is_authenticated(self) -> bool:
        return self._tokens.has_token()

    def login(self, email: str, password: str) -> None:
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError({"form": "Please enter both email and password."})
        try:
            self._api.login(email, password)
        except ApiError as exc:
            raise ValidationError({
                "form": error_message(exc, LOGIN_ERROR_FALLBACK, use_transport_message=False)
            }) from exc
        logger.info("Logged in as %s", email)

    def register(self, name: str, email: str, password: str, confirm_password: str) -> dict:
        errors = validate_signup(name, email, password, confirm_password)
        if errors:
            raise ValidationError(errors)
        try:
            user = self._api.register(name.strip(), email.strip(), password)
        except ApiError as exc:
            raise ValidationError({
                "form": error_message(exc, REGISTER_ERROR_FALLBACK)
            }) from exc
        logger.info("Registered account for %s", email)
        return user

    def logout(self) -> None:
        self._tokens.clear_token()
