import logging

import requests

from services.errors import ApiError, AuthMissingError
from services.token_store import TokenStore
from utils.constants import NOT_AUTHENTICATED_MESSAGE, REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


def _server_message(response: requests.Response | None) -> str | None:
    """Pull the 'message' field out of an error body, if it is JSON."""
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class ApiClient:
    """Thin wrapper over the FinSync REST API.

    Every authenticated call reads the token from the injected TokenStore and
    raises AuthMissingError without touching the network when there is none.
    Transport failures and non-2xx responses become ApiError.
    """

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        self._base_url = base_url.rstrip("/")
        self._tokens = token_store
        self._session = session or requests.Session()
        self._timeout = timeout

    # ── Auth ────────────────────────────────────────────────────────────────
    def login(self, email: str, password: str) -> str:
        data = self._request(
            "POST", "/users/login",
            json={"email": email, "password": password}, auth=False,
        )
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise ApiError("Login response did not include a token.")
        self._tokens.set_token(token)
        return token

    def register(self, username: str, email: str, password: str) -> dict:
        data = self._request(
            "POST", "/users/register",
            json={"username": username, "email": email, "password": password},
            auth=False,
        )
        return data if isinstance(data, dict) else {}

    # ── Transactions ────────────────────────────────────────────────────────
    def list_transactions(self) -> list[dict]:
        data = self._request("GET", "/transactions/")
        if not isinstance(data, list):
            raise ApiError("Unexpected response for transaction list.")
        return data

    def create_transaction(self, payload: dict) -> dict | None:
        data = self._request("POST", "/transactions/", json=payload)
        return data if isinstance(data, dict) else None

    def update_transaction(self, tx_id: str, payload: dict) -> dict:
        data = self._request("PUT", f"/transactions/{tx_id}", json=payload)
        if not isinstance(data, dict):
            raise ApiError("Unexpected response for transaction update.")
        return data

    # ── Plumbing ────────────────────────────────────────────────────────────
    def _auth_headers(self) -> dict:
        token = self._tokens.get_token()
        if not token:
            raise AuthMissingError(NOT_AUTHENTICATED_MESSAGE)
        return {"Authorization": f"Bearer {token}"}

    def _request(self, method: str, path: str, json=None, auth: bool = True):
        headers = self._auth_headers() if auth else {}
        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(
                method, url, json=json, headers=headers, timeout=self._timeout
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            response = exc.response
            status = response.status_code if response is not None else None
            logger.warning("%s %s failed (status=%s): %s", method, path, status, exc)
            raise ApiError(
                str(exc), server_message=_server_message(response), status_code=status
            ) from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(f"Invalid JSON from {method} {path}.") from exc
