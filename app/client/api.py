"""HTTP client for the tracker API; the session lives in the client's cookie jar."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 10.0

# Calls that must not trigger a refresh-and-replay on 401.
NO_REFRESH_PATHS = frozenset({"/auth/login", "/auth/register", "/auth/refresh"})


class ApiError(Exception):
    """Raised for any non-2xx response or transport failure."""

    def __init__(self, message: str, status_code: int | None = None, cause: Exception | None = None) -> None:
        self.message = message
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        """Message is the envelope's error, plus ': details' when the server sent them."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            message = str(body["error"])
            if body.get("details"):
                message = f"{message}: {body['details']}"
        else:
            message = f"Request failed with status {response.status_code}"
        return cls(message, status_code=response.status_code)


class ApiClient:
    """
    Thin request wrapper around an httpx.Client.

    Any httpx.Client works, including FastAPI's TestClient. A protected call
    that answers 401 is retried once after POST /auth/refresh succeeds.
    """

    def __init__(self, http: httpx.Client, prefix: str = "/api") -> None:
        self.http = http
        self.prefix = prefix.rstrip("/")

    @classmethod
    def connect(cls, base_url: str, timeout: float = DEFAULT_TIMEOUT_SEC) -> "ApiClient":
        return cls(httpx.Client(base_url=base_url, timeout=httpx.Timeout(timeout)))

    def close(self) -> None:
        self.http.close()

    def request(self, method: str, path: str, json: Any = None) -> Any:
        """Send a request and return the decoded JSON body; raises ApiError."""
        response = self._send(method, path, json)
        if response.status_code == 401 and path not in NO_REFRESH_PATHS and self._refresh():
            response = self._send(method, path, json)
        if response.is_error:
            raise ApiError.from_response(response)
        if not response.content:
            return None
        return response.json()

    def _send(self, method: str, path: str, json: Any) -> httpx.Response:
        try:
            return self.http.request(method, f"{self.prefix}{path}", json=json)
        except httpx.TimeoutException as e:
            raise ApiError("Request timed out", cause=e) from e
        except httpx.HTTPError as e:
            raise ApiError("Network error", cause=e) from e

    def _refresh(self) -> bool:
        response = self._send("POST", "/auth/refresh", None)
        if response.is_success:
            return True
        logger.info("Session refresh failed with status %s", response.status_code)
        return False

    # --- auth ---

    def register(self, email: str, password: str) -> dict[str, Any]:
        return self.request("POST", "/auth/register", {"email": email, "password": password})["user"]

    def login(self, email: str, password: str) -> dict[str, Any]:
        return self.request("POST", "/auth/login", {"email": email, "password": password})["user"]

    def logout(self) -> None:
        self.request("POST", "/auth/logout")

    def me(self) -> dict[str, Any]:
        return self.request("GET", "/auth/me")["user"]

    def update_profile(self, changes: dict[str, Any]) -> dict[str, Any]:
        return self.request("PATCH", "/auth/profile", changes)["user"]

    # --- collections ---

    def list_items(self, collection: str) -> list[dict[str, Any]]:
        return self.request("GET", f"/{collection}")

    def create(self, collection: str, data: dict[str, Any]) -> dict[str, Any]:
        return self.request("POST", f"/{collection}", data)

    def update(self, collection: str, item_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        return self.request("PATCH", f"/{collection}/{item_id}", changes)

    def delete(self, collection: str, item_id: str) -> None:
        self.request("DELETE", f"/{collection}/{item_id}")

    # --- genshin ---

    def get_genshin(self) -> dict[str, Any] | None:
        return self.request("GET", "/genshin")

    def save_genshin(self, account: dict[str, Any]) -> dict[str, Any]:
        return self.request("PUT", "/genshin", account)

    def update_genshin(self, changes: dict[str, Any]) -> dict[str, Any]:
        return self.request("PATCH", "/genshin", changes)

    def add_character(self, data: dict[str, Any]) -> dict[str, Any]:
        return self.request("POST", "/genshin/characters", data)

    def update_character(self, character_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        return self.request("PATCH", f"/genshin/characters/{character_id}", changes)

    def delete_character(self, character_id: str) -> None:
        self.request("DELETE", f"/genshin/characters/{character_id}")

    # --- stats ---

    def anime_stats(self) -> dict[str, Any]:
        return self.request("GET", "/anime/stats")

    def dashboard_stats(self) -> dict[str, Any]:
        return self.request("GET", "/dashboard/stats")
